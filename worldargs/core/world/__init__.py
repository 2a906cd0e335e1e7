"""월드 도메인 값 타입 — 순수 Python, DB 무관"""

from .entity import Entity, HumanEntity, LivingEntity, Player
from .location import Location, World
from .material import ItemStack, Material, MaterialData
from .modes import (
    Difficulty,
    EquipmentSlot,
    GameMode,
    MainHand,
    PermissionDefault,
    WeatherType,
)

__all__ = [
    "Entity",
    "HumanEntity",
    "LivingEntity",
    "Player",
    "Location",
    "World",
    "ItemStack",
    "Material",
    "MaterialData",
    "Difficulty",
    "EquipmentSlot",
    "GameMode",
    "MainHand",
    "PermissionDefault",
    "WeatherType",
]
