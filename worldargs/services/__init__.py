"""Service layer."""

from worldargs.services.coercion_service import CoercionService, render_value
from worldargs.services.environment_service import EnvironmentService

__all__ = [
    "CoercionService",
    "EnvironmentService",
    "render_value",
]
