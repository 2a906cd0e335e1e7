"""호출 컨텍스트와 환경 조회 인터페이스"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

from worldargs.core.world.entity import Entity
from worldargs.core.world.location import Location, World
from worldargs.core.world.material import ItemStack


@dataclass(frozen=True)
class InvocationContext:
    """누가/어디서 요청했는지. subject 해석은 ContextResolver 에 맡긴다."""

    subject: Any


class ContextResolver(ABC):
    """변환 핸들러가 호출 환경에 던지는 읽기 전용 질의.

    모든 메서드는 "없음"을 None/False 로 돌려준다.
    예외는 환경 자체의 결함일 때만 발생한다.
    """

    @abstractmethod
    def current_position(self, subject: Any) -> Optional[Location]:
        """subject 의 현재 위치 (방향 포함)"""
        ...

    @abstractmethod
    def sight_line_point(self, subject: Any, max_distance: int) -> Optional[Location]:
        """시선 방향 max_distance 이내 첫 장애물 블록, 없으면 max_distance 지점 블록"""
        ...

    @abstractmethod
    def held_item(self, subject: Any) -> Optional[ItemStack]:
        ...

    @abstractmethod
    def nearest_entity(
        self, point: Location, max_distance: float, tolerance: float
    ) -> Optional[Entity]:
        """point 주변 (수평 max_distance, 수직 tolerance) 가장 가까운 엔티티"""
        ...

    @abstractmethod
    def entity_in_sight_line(
        self, subject: Any, max_distance: float, tolerance: float
    ) -> Optional[Entity]:
        """시선 위 max_distance 이내, 시선과의 거리 tolerance 이내 가장 가까운 엔티티"""
        ...

    @abstractmethod
    def world_by_name(self, name: str) -> Optional[World]:
        ...

    @abstractmethod
    def is_live_actor(self, subject: Any) -> bool:
        """subject 가 살아있는 행위자(플레이어 등)인지"""
        ...
