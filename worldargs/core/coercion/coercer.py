"""Argument Coercer — 타입 기술자 목록 + 문자열 토큰 목록 → 값 목록

핸들러 테이블(TypeKind → 핸들러)로 분기한다.
컨텍스트 단축어(here/there/me/that/this)는 컨텍스트가 있을 때만 의미가 있고,
없거나 조회 결과가 없으면 일반 리터럴 파싱으로 넘어간다.

규칙:
- 출력 길이 == 입력 길이, 하나라도 실패하면 전체 실패 (부분 결과 없음)
- Material 이름 불일치, 엔티티 탐색 실패는 에러가 아니라 None
"""

from __future__ import annotations

import re
import uuid
from enum import Enum
from typing import Any, Callable, Optional, Sequence, Union

from worldargs.core.logging import get_logger
from worldargs.core.world.entity import Entity
from worldargs.core.world.location import Location
from worldargs.core.world.material import ItemStack, Material, MaterialData
from worldargs.core.world.modes import Difficulty, GameMode

from .context import ContextResolver, InvocationContext
from .descriptors import SCALAR_KINDS, TypeDescriptor, TypeKind
from .errors import CoercionError, ParseError, ReferenceNotFound, UnsupportedType
from .namespaces import NamespaceRegistry
from .scalars import parse_decimal, parse_integer, parse_scalar

logger = get_logger(__name__)

Handler = Callable[[TypeDescriptor, str, Optional[InvocationContext]], Any]
TypeLike = Union[TypeDescriptor, type, Any]

_UUID_TEXT = re.compile(
    r"[0-9a-fA-F]{8}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{4}-[0-9a-fA-F]{12}"
)

LOCATION_DESCRIPTOR = TypeDescriptor(TypeKind.LOCATION)
ENTITY_DESCRIPTOR = TypeDescriptor(TypeKind.ENTITY)


def value_from_enum(enum_type: type[Enum], token: str) -> Enum:
    """대문자화한 토큰으로 멤버 이름 조회 (입력 쪽만 정규화)"""
    name = token.upper()
    try:
        return enum_type[name]
    except KeyError as e:
        raise ParseError(
            f"No enum constant {enum_type.__name__}.{name}", token=token, cause=e
        ) from e


def numeric_or_named(enum_type: Any, token: str) -> Enum:
    """정수면 레거시 코드 테이블, 아니면 이름으로 조회"""
    try:
        code = parse_integer(token)
    except ParseError:
        return value_from_enum(enum_type, token)

    value = enum_type.from_legacy(code)
    if value is None:
        raise ParseError(
            f"Unknown legacy {enum_type.__name__} code: {code}", token=token
        )
    return value


class ArgumentCoercer:
    """문자열 인자를 대상 타입 값으로 변환.

    Args:
        resolver: 월드/엔티티/시선 조회용 환경
        namespaces: 엔티티 종류 이름 조회 레지스트리 (기본: entity, minecart, projectile)
        sight_distance: "there" 시선 추적 최대 거리
        entity_search_distance: "that" 및 좌표 기반 엔티티 탐색 최대 거리
        entity_tolerance: 엔티티 탐색 허용 오차

    사용 패턴:
        coercer = ArgumentCoercer(sandbox)
        coercer.coerce_all([int, Location], ["3", "world,0,64,0"])
    """

    SIGHT_DISTANCE = 50
    ENTITY_SEARCH_DISTANCE = 25.0
    ENTITY_TOLERANCE = 1.5

    def __init__(
        self,
        resolver: ContextResolver,
        namespaces: Optional[NamespaceRegistry] = None,
        sight_distance: int = SIGHT_DISTANCE,
        entity_search_distance: float = ENTITY_SEARCH_DISTANCE,
        entity_tolerance: float = ENTITY_TOLERANCE,
    ) -> None:
        self._resolver = resolver
        self._namespaces = namespaces or NamespaceRegistry()
        self.sight_distance = sight_distance
        self.entity_search_distance = entity_search_distance
        self.entity_tolerance = entity_tolerance

        self._handlers: dict[TypeKind, Handler] = {
            TypeKind.TEXT: self._text,
            TypeKind.ENUM: self._enum,
            TypeKind.MATERIAL: self._material,
            TypeKind.MATERIAL_DATA: self._material_data,
            TypeKind.ITEM_STACK: self._item_stack,
            TypeKind.GAME_MODE: self._game_mode,
            TypeKind.DIFFICULTY: self._difficulty,
            TypeKind.UUID: self._uuid,
            TypeKind.LOCATION: self._location,
            TypeKind.ENTITY: self._entity,
            TypeKind.ENTITY_CLASS: self._entity_class,
            TypeKind.ENTITY_CLASSES: self._entity_classes,
        }
        for kind in SCALAR_KINDS:
            self._handlers[kind] = self._scalar

    def register_handler(self, kind: TypeKind, handler: Handler) -> None:
        """핸들러 교체/추가"""
        self._handlers[kind] = handler

    # === 진입점 ===

    def coerce_all(
        self,
        types: Sequence[TypeLike],
        tokens: Sequence[str],
        ctx: Optional[InvocationContext] = None,
    ) -> list[Any]:
        """토큰마다 같은 위치의 타입으로 변환. 첫 실패에서 중단.

        실패 시 CoercionError 에 index/token/descriptor 가 채워진다.
        """
        if not tokens:
            return []

        if len(types) != len(tokens):
            raise ValueError(
                f"Expected {len(tokens)} type(s) for {len(tokens)} token(s), "
                f"got {len(types)}"
            )

        logger.debug("Coercing %d argument(s)", len(tokens))

        out: list[Any] = []
        for index, (target, token) in enumerate(zip(types, tokens)):
            try:
                out.append(self.coerce_one(target, token, ctx))
            except CoercionError as e:
                e.index = index
                e.token = token
                if e.descriptor is None:
                    e.descriptor = target
                logger.debug(
                    "Coercion failed at index %d (%s, %r): %s",
                    index,
                    e.descriptor,
                    token,
                    e.message,
                )
                raise
        return out

    def coerce_one(
        self,
        target: TypeLike,
        token: str,
        ctx: Optional[InvocationContext] = None,
    ) -> Any:
        if isinstance(target, TypeDescriptor):
            descriptor = target
        else:
            descriptor = TypeDescriptor.for_type(target)

        handler = self._handlers.get(descriptor.kind)
        if handler is None:
            raise UnsupportedType(
                f"Input handling for type {descriptor} not implemented yet",
                token=token,
                descriptor=descriptor,
            )

        try:
            return handler(descriptor, token, ctx)
        except CoercionError as e:
            if e.descriptor is None:
                e.descriptor = descriptor
            raise

    # === 단순 타입 ===

    def _text(self, descriptor, token, ctx) -> str:
        return token

    def _scalar(self, descriptor, token, ctx) -> Any:
        return parse_scalar(descriptor.kind, token)

    def _enum(self, descriptor, token, ctx) -> Enum:
        if descriptor.enum_type is None:
            raise UnsupportedType("Enum descriptor has no enum type", token=token)
        return value_from_enum(descriptor.enum_type, token)

    def _game_mode(self, descriptor, token, ctx) -> GameMode:
        return numeric_or_named(GameMode, token)

    def _difficulty(self, descriptor, token, ctx) -> Difficulty:
        return numeric_or_named(Difficulty, token)

    # === Material 계열 ===

    def _material(self, descriptor, token, ctx) -> Optional[Material]:
        return Material.match(token)

    def _require_material(self, name: str) -> Material:
        material = Material.match(name)
        if material is None:
            raise ReferenceNotFound(f"Unknown material: {name}", token=name)
        return material

    def _material_data(self, descriptor, token, ctx) -> MaterialData:
        if ":" not in token:
            raise ParseError(
                f"Expected <material>:<data> but got {token!r}", token=token
            )
        name, data = token.split(":", 1)
        material = self._require_material(name)
        return MaterialData(material, parse_integer(data, 8))

    def _item_stack(self, descriptor, token, ctx) -> ItemStack:
        """"this" 는 손에 든 아이템 그대로, 아니면 기본 수량 묶음"""
        if ctx is not None and token.lower() == "this":
            held = self._resolver.held_item(ctx.subject)
            if held is not None:
                return held
        return ItemStack(self._require_material(token))

    # === 위치/엔티티 ===

    def _location(self, descriptor, token, ctx) -> Location:
        if ctx is not None:
            keyword = token.lower()
            found: Optional[Location] = None
            if keyword == "here":
                found = self._resolver.current_position(ctx.subject)
            elif keyword == "there":
                found = self._resolver.sight_line_point(
                    ctx.subject, self.sight_distance
                )
            if found is not None:
                return found

        contents = token.split(",")
        if len(contents) != 4:
            raise ParseError(
                f"Expected <world>,<x>,<y>,<z> but got {len(contents)} field(s)",
                token=token,
            )

        world = self._resolver.world_by_name(contents[0])
        if world is None:
            raise ReferenceNotFound(
                f"No world by that name could be found: {contents[0]}", token=token
            )

        x, y, z = (parse_decimal(part) for part in contents[1:])
        return Location(world, x, y, z)

    def _entity(self, descriptor, token, ctx) -> Optional[Entity]:
        if ctx is not None:
            keyword = token.lower()
            if keyword == "that":
                target = self._resolver.entity_in_sight_line(
                    ctx.subject, self.entity_search_distance, self.entity_tolerance
                )
                if target is not None:
                    return target
            elif keyword == "me" and self._resolver.is_live_actor(ctx.subject):
                return ctx.subject

        point = self._location(LOCATION_DESCRIPTOR, token, ctx)
        return self._resolver.nearest_entity(
            point, self.entity_search_distance, self.entity_tolerance
        )

    def _uuid(self, descriptor, token, ctx) -> uuid.UUID:
        if _UUID_TEXT.fullmatch(token):
            return uuid.UUID(token)

        error = ParseError(f"Invalid UUID string: {token}", token=token)
        if ctx is not None and self._resolver.is_live_actor(ctx.subject):
            try:
                entity = self._entity(ENTITY_DESCRIPTOR, token, ctx)
            except CoercionError as e:
                error.cause = e
                raise error from e
            if entity is not None:
                return entity.unique_id
        raise error

    # === 엔티티 종류 ===

    def _entity_class(self, descriptor, token, ctx) -> type:
        return self._namespaces.resolve(token)

    def _entity_classes(self, descriptor, token, ctx) -> list[type]:
        return self._namespaces.resolve_all(token)
