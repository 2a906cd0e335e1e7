"""
Sandbox Environment
===================
메모리 상의 월드/블록/엔티티 저장소 + ContextResolver 구현

시선 추적은 눈 위치에서 RAY_STEP 간격으로 전진하며 블록을 검사한다.
좌표 기반 엔티티 탐색은 (수평 max_distance, 수직 tolerance) 상자 안에서
가장 가까운 엔티티를 고른다.
"""

from __future__ import annotations

import math
import threading
import uuid
from typing import Any, Iterator, Optional

from worldargs.core.coercion.context import ContextResolver
from worldargs.core.logging import get_logger
from worldargs.core.world.entity import Entity, HumanEntity
from worldargs.core.world.location import Location, World
from worldargs.core.world.material import ItemStack, Material

logger = get_logger(__name__)

Block = tuple[int, int, int]


class SandboxEnvironment(ContextResolver):
    """
    샌드박스 환경

    월드 이름은 대소문자를 구분한다.
    쓰기는 잠금 안에서, 탐색은 잠금 안에서 뜬 스냅샷 위에서 수행한다.
    API 스레드 풀에서 스폰과 변환이 동시에 일어날 수 있다.
    """

    RAY_STEP = 0.1

    def __init__(self) -> None:
        self._worlds: dict[str, World] = {}
        self._blocks: dict[str, dict[Block, Material]] = {}
        self._entities: dict[uuid.UUID, Entity] = {}
        self._lock = threading.RLock()

    # === 월드/블록 ===

    def create_world(self, name: str, uid: Optional[uuid.UUID] = None) -> World:
        world = World(name, uid) if uid is not None else World(name)
        with self._lock:
            if name in self._worlds:
                logger.warning("Overwriting existing world: %s", name)
            self._worlds[name] = world
            self._blocks.setdefault(name, {})
        logger.info("World created: %s (%s)", name, world.uid)
        return world

    def get_world(self, name: str) -> Optional[World]:
        return self._worlds.get(name)

    @property
    def worlds(self) -> list[World]:
        with self._lock:
            return list(self._worlds.values())

    def set_block(
        self, world: World, x: int, y: int, z: int, material: Material
    ) -> None:
        """블록 배치. AIR 는 제거로 취급."""
        with self._lock:
            blocks = self._blocks.setdefault(world.name, {})
            if material is Material.AIR:
                blocks.pop((x, y, z), None)
            else:
                blocks[(x, y, z)] = material

    def block_at(self, world: World, x: int, y: int, z: int) -> Material:
        return self._blocks.get(world.name, {}).get((x, y, z), Material.AIR)

    def block_count(self, world: World) -> int:
        return len(self._blocks.get(world.name, {}))

    # === 엔티티 ===

    def spawn(self, entity: Entity) -> Entity:
        with self._lock:
            if entity.world.name not in self._worlds:
                raise ValueError(f"Unknown world: {entity.world.name}")
            self._entities[entity.unique_id] = entity
        logger.debug("Spawned %s %s", entity.type_name, entity.unique_id)
        return entity

    def spawn_entity(
        self, entity_type: type[Entity], location: Location, **kwargs: Any
    ) -> Entity:
        return self.spawn(entity_type(location=location, **kwargs))

    def get_entity(self, unique_id: uuid.UUID) -> Optional[Entity]:
        return self._entities.get(unique_id)

    def remove(self, entity: Entity) -> None:
        entity.alive = False
        with self._lock:
            self._entities.pop(entity.unique_id, None)

    def entities(self, world: Optional[World] = None) -> list[Entity]:
        return [
            e
            for e in self._snapshot()
            if world is None or e.world.name == world.name
        ]

    def _snapshot(self) -> list[Entity]:
        with self._lock:
            return list(self._entities.values())

    def _live_entities_in(self, world: World) -> Iterator[Entity]:
        for entity in self._snapshot():
            if entity.alive and entity.world.name == world.name:
                yield entity

    # === ContextResolver ===

    def current_position(self, subject: Any) -> Optional[Location]:
        if isinstance(subject, Entity) and subject.alive:
            return subject.location
        return None

    def sight_line_point(self, subject: Any, max_distance: int) -> Optional[Location]:
        if not isinstance(subject, Entity) or not subject.alive:
            return None

        eye = subject.eye_location
        dx, dy, dz = eye.direction()
        steps = int(max_distance / self.RAY_STEP)
        for i in range(1, steps + 1):
            t = i * self.RAY_STEP
            point = eye.add(dx * t, dy * t, dz * t)
            if self.block_at(eye.world, *point.block()).is_solid:
                return point.block_location()

        end = eye.add(dx * max_distance, dy * max_distance, dz * max_distance)
        return end.block_location()

    def held_item(self, subject: Any) -> Optional[ItemStack]:
        if isinstance(subject, HumanEntity):
            return subject.held_item
        return None

    def nearest_entity(
        self, point: Location, max_distance: float, tolerance: float
    ) -> Optional[Entity]:
        nearest: Optional[Entity] = None
        best = math.inf
        for entity in self._live_entities_in(point.world):
            loc = entity.location
            if (
                abs(loc.x - point.x) > max_distance
                or abs(loc.y - point.y) > tolerance
                or abs(loc.z - point.z) > max_distance
            ):
                continue
            distance = loc.distance_to(point)
            if distance < best:
                nearest, best = entity, distance
        return nearest

    def entity_in_sight_line(
        self, subject: Any, max_distance: float, tolerance: float
    ) -> Optional[Entity]:
        if not isinstance(subject, Entity) or not subject.alive:
            return None

        eye = subject.eye_location
        direction = eye.direction()
        target: Optional[Entity] = None
        best = math.inf
        for entity in self._live_entities_in(eye.world):
            if entity is subject:
                continue
            # 발 위치와 눈 위치 중 시선에 더 가까운 쪽으로 판정
            for probe in (entity.location, entity.eye_location):
                along, off = _project_on_ray(eye, direction, probe)
                if 0.0 <= along <= max_distance and off <= tolerance and along < best:
                    target, best = entity, along
        return target

    def world_by_name(self, name: str) -> Optional[World]:
        return self._worlds.get(name)

    def is_live_actor(self, subject: Any) -> bool:
        return isinstance(subject, HumanEntity) and subject.alive


def _project_on_ray(
    origin: Location, direction: tuple[float, float, float], point: Location
) -> tuple[float, float]:
    """(시선 방향 거리, 시선과의 수직 거리)"""
    vx, vy, vz = point.x - origin.x, point.y - origin.y, point.z - origin.z
    dx, dy, dz = direction
    along = vx * dx + vy * dy + vz * dz
    off_sq = (vx * vx + vy * vy + vz * vz) - along * along
    return along, math.sqrt(max(off_sq, 0.0))
