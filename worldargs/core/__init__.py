"""worldargs Core"""
__version__ = "0.1.0"

from worldargs.core.coercion import (
    ArgumentCoercer,
    CoercionError,
    ContextResolver,
    InvocationContext,
    ParseError,
    ReferenceNotFound,
    TypeDescriptor,
    TypeKind,
    UnsupportedType,
)
from worldargs.core.sandbox import SandboxEnvironment

__all__ = [
    "ArgumentCoercer",
    "CoercionError",
    "ContextResolver",
    "InvocationContext",
    "ParseError",
    "ReferenceNotFound",
    "TypeDescriptor",
    "TypeKind",
    "UnsupportedType",
    "SandboxEnvironment",
]
