"""대상 타입 기술자 (TypeDescriptor)

닫힌 TypeKind 열거형 + (ENUM 일 때) 열거형 클래스.
Python 타입이나 API 용 이름으로부터도 만들 수 있다.
"""

from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from enum import Enum
from typing import Any, Optional

from worldargs.core.world.entity import Entity
from worldargs.core.world.location import Location
from worldargs.core.world.material import ItemStack, Material, MaterialData
from worldargs.core.world.modes import (
    Difficulty,
    EquipmentSlot,
    GameMode,
    MainHand,
    PermissionDefault,
    WeatherType,
)

from .errors import UnsupportedType


class TypeKind(str, Enum):
    TEXT = "text"
    BYTE = "byte"
    SHORT = "short"
    INT = "int"
    LONG = "long"
    FLOAT = "float"
    DOUBLE = "double"
    BOOLEAN = "boolean"
    CHAR = "char"
    ENUM = "enum"
    MATERIAL = "material"
    MATERIAL_DATA = "material_data"
    ITEM_STACK = "item_stack"
    GAME_MODE = "game_mode"
    DIFFICULTY = "difficulty"
    UUID = "uuid"
    LOCATION = "location"
    ENTITY = "entity"
    ENTITY_CLASS = "entity_class"
    ENTITY_CLASSES = "entity_classes"


SCALAR_KINDS = frozenset(
    {
        TypeKind.BYTE,
        TypeKind.SHORT,
        TypeKind.INT,
        TypeKind.LONG,
        TypeKind.FLOAT,
        TypeKind.DOUBLE,
        TypeKind.BOOLEAN,
        TypeKind.CHAR,
    }
)


@dataclass(frozen=True)
class TypeDescriptor:
    """변환 대상 타입. 불변."""

    kind: TypeKind
    enum_type: Optional[type[Enum]] = None

    def __str__(self) -> str:
        if self.kind is TypeKind.ENUM and self.enum_type is not None:
            return f"enum:{self.enum_type.__name__}"
        return self.kind.value

    @classmethod
    def of(cls, kind: TypeKind) -> "TypeDescriptor":
        return cls(kind)

    @classmethod
    def enum(cls, enum_type: type[Enum]) -> "TypeDescriptor":
        return cls(TypeKind.ENUM, enum_type)

    @classmethod
    def for_type(cls, tp: Any) -> "TypeDescriptor":
        """Python 타입 → 기술자.

        순서: 복합 타입 정확 일치 → 기본 스칼라 → 일반 열거형 → UnsupportedType.
        Material/GameMode/Difficulty 는 열거형이지만 복합 타입으로 먼저 잡힌다.
        """
        if tp is None:
            raise ValueError("Cannot determine input type for None")

        kind = _COMPOSITE_TYPES.get(tp)
        if kind is None and tp == list[type]:
            kind = TypeKind.ENTITY_CLASSES
        if kind is not None:
            return cls(kind)

        kind = _SCALAR_TYPES.get(tp)
        if kind is not None:
            return cls(kind)

        if isinstance(tp, type) and issubclass(tp, Enum):
            return cls.enum(tp)

        name = getattr(tp, "__name__", repr(tp))
        raise UnsupportedType(f"Input handling for type {name} not implemented yet")

    @classmethod
    def from_name(cls, name: str) -> "TypeDescriptor":
        """API 용 이름 → 기술자. 예: "int", "location", "enum:weather_type" """
        key = name.strip().lower()
        if key.startswith("enum:"):
            enum_name = key[len("enum:"):]
            enum_type = KNOWN_ENUMS.get(enum_name)
            if enum_type is None:
                raise UnsupportedType(f"Unknown enum type: {enum_name}")
            return cls.enum(enum_type)

        kind = _NAME_ALIASES.get(key)
        if kind is None:
            try:
                kind = TypeKind(key)
            except ValueError:
                raise UnsupportedType(
                    f"Input handling for type {name} not implemented yet"
                ) from None
        if kind is TypeKind.ENUM:
            raise UnsupportedType("Enum type requires a name, e.g. enum:weather_type")
        return cls(kind)


def _snake_case(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


_COMPOSITE_TYPES: dict[Any, TypeKind] = {
    Material: TypeKind.MATERIAL,
    MaterialData: TypeKind.MATERIAL_DATA,
    ItemStack: TypeKind.ITEM_STACK,
    GameMode: TypeKind.GAME_MODE,
    Difficulty: TypeKind.DIFFICULTY,
    uuid.UUID: TypeKind.UUID,
    Location: TypeKind.LOCATION,
    Entity: TypeKind.ENTITY,
    type: TypeKind.ENTITY_CLASS,
}

_SCALAR_TYPES: dict[Any, TypeKind] = {
    str: TypeKind.TEXT,
    bool: TypeKind.BOOLEAN,
    int: TypeKind.INT,
    float: TypeKind.DOUBLE,
}

_NAME_ALIASES: dict[str, TypeKind] = {
    "str": TypeKind.TEXT,
    "string": TypeKind.TEXT,
    "bool": TypeKind.BOOLEAN,
    "integer": TypeKind.INT,
    "character": TypeKind.CHAR,
    "item": TypeKind.ITEM_STACK,
    "gamemode": TypeKind.GAME_MODE,
    "entity_type": TypeKind.ENTITY_CLASS,
    "entity_types": TypeKind.ENTITY_CLASSES,
}

KNOWN_ENUMS: dict[str, type[Enum]] = {
    _snake_case(enum_type.__name__): enum_type
    for enum_type in (
        WeatherType,
        EquipmentSlot,
        MainHand,
        PermissionDefault,
        GameMode,
        Difficulty,
    )
}
