"""인자 변환 Service — API 요청 → ArgumentCoercer, 결과 값 → JSON 표현"""

import math
import uuid
from enum import Enum
from typing import Any

from worldargs.config import Settings
from worldargs.core.coercion import (
    ArgumentCoercer,
    ContextResolver,
    InvocationContext,
    TypeDescriptor,
    UnsupportedType,
)
from worldargs.core.logging import get_logger
from worldargs.core.world.entity import Entity
from worldargs.core.world.location import Location
from worldargs.core.world.material import ItemStack, MaterialData

logger = get_logger(__name__)


class CoercionService:
    """설정값(탐색 거리 등)으로 변환기를 만들고 결과를 직렬화"""

    def __init__(self, settings: Settings):
        self._settings = settings

    def build_coercer(self, resolver: ContextResolver) -> ArgumentCoercer:
        return ArgumentCoercer(
            resolver,
            sight_distance=self._settings.SIGHT_DISTANCE,
            entity_search_distance=self._settings.ENTITY_SEARCH_DISTANCE,
            entity_tolerance=self._settings.ENTITY_TOLERANCE,
        )

    @staticmethod
    def parse_types(type_names: list[str]) -> list[TypeDescriptor]:
        """타입 이름 목록 → 기술자 목록. 실패 시 위치 정보를 채워 UnsupportedType."""
        descriptors = []
        for index, name in enumerate(type_names):
            try:
                descriptors.append(TypeDescriptor.from_name(name))
            except UnsupportedType as e:
                e.index = index
                e.descriptor = name
                raise
        return descriptors

    def coerce(
        self,
        resolver: ContextResolver,
        type_names: list[str],
        tokens: list[str],
        subject: Any = None,
    ) -> list[Any]:
        """변환 후 JSON 표현 목록 반환. CoercionError/ValueError 는 그대로 전파."""
        descriptors = self.parse_types(type_names)
        ctx = InvocationContext(subject) if subject is not None else None
        values = self.build_coercer(resolver).coerce_all(descriptors, tokens, ctx)
        logger.info("Coerced %d argument(s) (context=%s)", len(values), ctx is not None)
        return [render_value(v) for v in values]


def render_value(value: Any) -> Any:
    """변환 결과 → JSON 호환 값. str 기반 열거형도 이름으로."""
    if isinstance(value, Enum):
        return value.name
    if value is None or isinstance(value, (bool, int, str)):
        return value
    if isinstance(value, float):
        return value if math.isfinite(value) else str(value)
    if isinstance(value, uuid.UUID):
        return str(value)
    if isinstance(value, Location):
        return {
            "world": value.world.name,
            "x": value.x,
            "y": value.y,
            "z": value.z,
            "yaw": value.yaw,
            "pitch": value.pitch,
        }
    if isinstance(value, MaterialData):
        return {"material": value.material.name, "data": value.data}
    if isinstance(value, ItemStack):
        return {"material": value.material.name, "amount": value.amount}
    if isinstance(value, Entity):
        return {
            "unique_id": str(value.unique_id),
            "type": value.type_name,
            "location": render_value(value.location),
        }
    if isinstance(value, type):
        return value.__name__
    if isinstance(value, (list, tuple)):
        return [render_value(v) for v in value]
    return repr(value)
