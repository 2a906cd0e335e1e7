"""아이템/블록 종류 (Material) 와 파생 값 타입"""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Optional

_NAMESPACE_PREFIX = "minecraft:"
_WHITESPACE = re.compile(r"[\s\-]+")
_NON_WORD = re.compile(r"\W")


class Material(Enum):
    """블록/아이템 종류. 값은 레거시 숫자 ID (256 미만은 블록)."""

    AIR = 0
    STONE = 1
    GRASS = 2
    DIRT = 3
    COBBLESTONE = 4
    WOOD = 5
    SAPLING = 6
    BEDROCK = 7
    WATER = 8
    SAND = 12
    GRAVEL = 13
    GOLD_ORE = 14
    IRON_ORE = 15
    COAL_ORE = 16
    LOG = 17
    LEAVES = 18
    GLASS = 20
    WOOL = 35
    GOLD_BLOCK = 41
    IRON_BLOCK = 42
    TNT = 46
    BOOKSHELF = 47
    OBSIDIAN = 49
    TORCH = 50
    CHEST = 54
    DIAMOND_ORE = 56
    DIAMOND_BLOCK = 57
    WORKBENCH = 58
    FURNACE = 61
    IRON_SPADE = 256
    IRON_PICKAXE = 257
    IRON_AXE = 258
    FLINT_AND_STEEL = 259
    APPLE = 260
    BOW = 261
    ARROW = 262
    COAL = 263
    DIAMOND = 264
    IRON_INGOT = 265
    GOLD_INGOT = 266
    IRON_SWORD = 267
    WOOD_SWORD = 268
    STONE_SWORD = 272
    DIAMOND_SWORD = 276
    DIAMOND_SPADE = 277
    DIAMOND_PICKAXE = 278
    DIAMOND_AXE = 279
    STICK = 280
    GOLD_SWORD = 283
    FEATHER = 288
    BREAD = 297
    BUCKET = 325
    WATER_BUCKET = 326
    MINECART = 328
    SADDLE = 329
    REDSTONE = 331
    BOAT = 333
    EGG = 344
    COMPASS = 345
    BONE = 352
    ENDER_PEARL = 368
    BLAZE_ROD = 369
    GOLD_NUGGET = 371
    EMERALD = 388

    @property
    def legacy_id(self) -> int:
        return self.value

    @property
    def is_block(self) -> bool:
        return self.value < 256

    @property
    def is_solid(self) -> bool:
        """시야 추적에서 막힘으로 취급되는지. 공기만 투과한다."""
        return self.is_block and self is not Material.AIR

    @classmethod
    def match(cls, name: str) -> Optional["Material"]:
        """이름(또는 레거시 ID)으로 느슨하게 조회. 없으면 None.

        "minecraft:" 접두사 제거, 대문자화, 공백/하이픈 → "_",
        나머지 비단어 문자 제거 후 멤버 이름과 비교한다.
        """
        text = name.strip()
        if text.isdigit():
            try:
                return cls(int(text))
            except ValueError:
                return None

        if text.lower().startswith(_NAMESPACE_PREFIX):
            text = text[len(_NAMESPACE_PREFIX):]

        filtered = _NON_WORD.sub("", _WHITESPACE.sub("_", text.upper()))
        return cls.__members__.get(filtered)


@dataclass(frozen=True)
class MaterialData:
    """종류 + 8비트 서브 변형 값 (블록 데이터 값)"""

    material: Material
    data: int = 0

    @property
    def item_type(self) -> Material:
        return self.material


@dataclass
class ItemStack:
    """아이템 묶음 (기본 수량 1)"""

    material: Material
    amount: int = 1

    @property
    def type(self) -> Material:
        return self.material

    def is_similar(self, other: "ItemStack") -> bool:
        """수량을 제외한 종류 비교"""
        return self.material is other.material
