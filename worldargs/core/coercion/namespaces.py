"""엔티티 종류 이름 조회 — 네임스페이스 순서대로 탐색

import-by-name 대신 초기화 시점에 만든 (네임스페이스, 조회 함수) 목록을 쓴다.
"""

from __future__ import annotations

from types import ModuleType
from typing import Callable, Optional, Sequence

from worldargs.core.logging import get_logger
from worldargs.core.world import entity, minecart, projectile
from worldargs.core.world.entity import Entity

from .errors import ParseError, ReferenceNotFound

logger = get_logger(__name__)

CLASS_SUFFIX = ".class"

TypeLookup = Callable[[str], Optional[type]]


def normalize_type_name(name: str) -> str:
    """첫 글자만 대문자, 나머지 소문자. 끝의 ".class" 표식 제거."""
    if not name:
        raise ParseError("Type name must not be empty", token=name)
    normalized = name[0].upper() + name[1:].lower()
    if normalized.endswith(CLASS_SUFFIX):
        normalized = normalized[: -len(CLASS_SUFFIX)]
    return normalized


def module_lookup(module: ModuleType) -> TypeLookup:
    """모듈의 __all__ 에 있는 Entity 서브클래스로 조회 테이블 생성.

    키도 같은 규칙으로 정규화하므로 "storageminecart" 같은 입력도 찾는다.
    """
    table: dict[str, type] = {}
    for attr in getattr(module, "__all__", ()):
        candidate = getattr(module, attr)
        if isinstance(candidate, type) and issubclass(candidate, Entity):
            table[normalize_type_name(attr)] = candidate
    return table.get


DEFAULT_NAMESPACES: tuple[tuple[str, ModuleType], ...] = (
    ("entity", entity),
    ("entity.minecart", minecart),
    ("entity.projectile", projectile),
)


class NamespaceRegistry:
    """엔티티 종류 이름 → 클래스. 먼저 등록된 네임스페이스가 우선."""

    def __init__(
        self, namespaces: Optional[Sequence[tuple[str, TypeLookup]]] = None
    ) -> None:
        if namespaces is None:
            namespaces = [
                (label, module_lookup(module)) for label, module in DEFAULT_NAMESPACES
            ]
        self._namespaces: list[tuple[str, TypeLookup]] = list(namespaces)

    @property
    def namespace_names(self) -> list[str]:
        return [label for label, _ in self._namespaces]

    def register(self, label: str, lookup: TypeLookup) -> None:
        """네임스페이스를 맨 뒤에 추가"""
        self._namespaces.append((label, lookup))

    def resolve(self, name: str) -> type:
        normalized = normalize_type_name(name)
        for label, lookup in self._namespaces:
            found = lookup(normalized)
            if found is not None:
                logger.debug("Resolved type %s in namespace %s", normalized, label)
                return found

        raise ReferenceNotFound(
            f"{normalized} not present in entity namespaces "
            f"({', '.join(self.namespace_names)})",
            token=name,
        )

    def resolve_all(self, text: str) -> list[type]:
        """쉼표 구분 목록. 하나라도 못 찾으면 그 조각을 지목해 실패."""
        return [self.resolve(piece.strip()) for piece in text.split(",")]
