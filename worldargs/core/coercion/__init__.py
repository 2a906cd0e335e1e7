"""인자 변환 Core — 순수 Python, DB 무관"""

from .coercer import ArgumentCoercer, numeric_or_named, value_from_enum
from .context import ContextResolver, InvocationContext
from .descriptors import KNOWN_ENUMS, TypeDescriptor, TypeKind
from .errors import CoercionError, ParseError, ReferenceNotFound, UnsupportedType
from .namespaces import NamespaceRegistry, normalize_type_name

__all__ = [
    "ArgumentCoercer",
    "numeric_or_named",
    "value_from_enum",
    "ContextResolver",
    "InvocationContext",
    "KNOWN_ENUMS",
    "TypeDescriptor",
    "TypeKind",
    "CoercionError",
    "ParseError",
    "ReferenceNotFound",
    "UnsupportedType",
    "NamespaceRegistry",
    "normalize_type_name",
]
