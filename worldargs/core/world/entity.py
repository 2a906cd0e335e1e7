"""엔티티 네임스페이스 — 살아있는 엔티티와 플레이어

클래스 자체가 "엔티티 종류" 기술자 역할을 하고,
인스턴스는 샌드박스 월드 안의 실제 엔티티다.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import ClassVar, Optional

from .location import Location
from .material import ItemStack


@dataclass(eq=False)
class Entity:
    """모든 엔티티의 기반"""

    location: Location
    unique_id: uuid.UUID = field(default_factory=uuid.uuid4)
    alive: bool = True

    EYE_HEIGHT: ClassVar[float] = 0.0

    @property
    def world(self):
        return self.location.world

    @property
    def eye_location(self) -> Location:
        return self.location.add(0.0, self.EYE_HEIGHT, 0.0)

    @property
    def type_name(self) -> str:
        return type(self).__name__


@dataclass(eq=False)
class LivingEntity(Entity):
    EYE_HEIGHT: ClassVar[float] = 1.0


@dataclass(eq=False)
class HumanEntity(LivingEntity):
    """아이템을 손에 들 수 있는 엔티티"""

    held_item: Optional[ItemStack] = None

    EYE_HEIGHT: ClassVar[float] = 1.62


@dataclass(eq=False)
class Player(HumanEntity):
    name: str = ""


@dataclass(eq=False)
class Villager(LivingEntity):
    EYE_HEIGHT: ClassVar[float] = 1.62


@dataclass(eq=False)
class ArmorStand(LivingEntity):
    EYE_HEIGHT: ClassVar[float] = 1.78


# 몬스터
@dataclass(eq=False)
class Monster(LivingEntity):
    pass


@dataclass(eq=False)
class Zombie(Monster):
    EYE_HEIGHT: ClassVar[float] = 1.74


@dataclass(eq=False)
class Creeper(Monster):
    EYE_HEIGHT: ClassVar[float] = 1.445


@dataclass(eq=False)
class Skeleton(Monster):
    EYE_HEIGHT: ClassVar[float] = 1.74


@dataclass(eq=False)
class Spider(Monster):
    EYE_HEIGHT: ClassVar[float] = 0.65


@dataclass(eq=False)
class Enderman(Monster):
    EYE_HEIGHT: ClassVar[float] = 2.55


# 동물
@dataclass(eq=False)
class Animals(LivingEntity):
    pass


@dataclass(eq=False)
class Pig(Animals):
    EYE_HEIGHT: ClassVar[float] = 0.765


@dataclass(eq=False)
class Cow(Animals):
    EYE_HEIGHT: ClassVar[float] = 1.3


@dataclass(eq=False)
class Sheep(Animals):
    EYE_HEIGHT: ClassVar[float] = 1.235


@dataclass(eq=False)
class Chicken(Animals):
    EYE_HEIGHT: ClassVar[float] = 0.644


@dataclass(eq=False)
class Wolf(Animals):
    EYE_HEIGHT: ClassVar[float] = 0.68


@dataclass(eq=False)
class Minecart(Entity):
    """탈것 기반. 세부 종류는 minecart 네임스페이스에 있다."""


__all__ = [
    "Entity",
    "LivingEntity",
    "HumanEntity",
    "Player",
    "Villager",
    "ArmorStand",
    "Monster",
    "Zombie",
    "Creeper",
    "Skeleton",
    "Spider",
    "Enderman",
    "Animals",
    "Pig",
    "Cow",
    "Sheep",
    "Chicken",
    "Wolf",
    "Minecart",
]
