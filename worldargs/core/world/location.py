"""월드와 좌표"""

from __future__ import annotations

import math
import uuid
from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class World:
    """로드된 월드. 이름은 대소문자를 구분한다."""

    name: str
    uid: uuid.UUID = field(default_factory=uuid.uuid4)


@dataclass(frozen=True)
class Location:
    """월드 내 한 점 + 바라보는 방향 (yaw/pitch, 도 단위)"""

    world: World
    x: float
    y: float
    z: float
    yaw: float = 0.0
    pitch: float = 0.0

    def direction(self) -> tuple[float, float, float]:
        """yaw/pitch 로부터 단위 시선 벡터 계산.

        yaw 0 은 +z, yaw 90 은 -x, pitch 양수는 아래쪽.
        """
        rot_x = math.radians(self.yaw)
        rot_y = math.radians(self.pitch)
        xz = math.cos(rot_y)
        return (-xz * math.sin(rot_x), -math.sin(rot_y), xz * math.cos(rot_x))

    def add(self, dx: float, dy: float, dz: float) -> "Location":
        return replace(self, x=self.x + dx, y=self.y + dy, z=self.z + dz)

    def distance_to(self, other: "Location") -> float:
        return math.sqrt(
            (self.x - other.x) ** 2 + (self.y - other.y) ** 2 + (self.z - other.z) ** 2
        )

    def block(self) -> tuple[int, int, int]:
        """이 점이 속한 블록 좌표"""
        return (math.floor(self.x), math.floor(self.y), math.floor(self.z))

    def block_location(self) -> "Location":
        """블록 모서리 좌표 (방향 정보 없음)"""
        bx, by, bz = self.block()
        return Location(self.world, float(bx), float(by), float(bz))
