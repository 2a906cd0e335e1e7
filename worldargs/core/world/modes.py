"""게임 설정 관련 열거형 (레거시 숫자 코드 지원)"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class GameMode(Enum):
    SURVIVAL = 0
    CREATIVE = 1
    ADVENTURE = 2
    SPECTATOR = 3

    @classmethod
    def from_legacy(cls, code: int) -> Optional["GameMode"]:
        """레거시 숫자 코드 → GameMode. 없는 코드면 None."""
        return _GAME_MODE_BY_CODE.get(code)


class Difficulty(Enum):
    PEACEFUL = 0
    EASY = 1
    NORMAL = 2
    HARD = 3

    @classmethod
    def from_legacy(cls, code: int) -> Optional["Difficulty"]:
        """레거시 숫자 코드 → Difficulty. 없는 코드면 None."""
        return _DIFFICULTY_BY_CODE.get(code)


_GAME_MODE_BY_CODE = {mode.value: mode for mode in GameMode}
_DIFFICULTY_BY_CODE = {difficulty.value: difficulty for difficulty in Difficulty}


class WeatherType(str, Enum):
    DOWNFALL = "downfall"
    CLEAR = "clear"


class EquipmentSlot(str, Enum):
    HAND = "hand"
    OFF_HAND = "off_hand"
    FEET = "feet"
    LEGS = "legs"
    CHEST = "chest"
    HEAD = "head"


class MainHand(str, Enum):
    LEFT = "left"
    RIGHT = "right"


class PermissionDefault(str, Enum):
    TRUE = "true"
    FALSE = "false"
    OP = "op"
    NOT_OP = "not_op"
