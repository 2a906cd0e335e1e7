"""기본 스칼라 파싱 — 로케일 무관

정수는 부호 + ASCII 숫자만, 비트 폭 범위 검사.
실수는 10진 리터럴 (NaN/Infinity, 끝의 f/d 접미사 허용).
"""

from __future__ import annotations

import re
import struct

from .descriptors import TypeKind
from .errors import ParseError

_INTEGER = re.compile(r"[+-]?[0-9]+")
_DECIMAL = re.compile(
    r"[+-]?(?:NaN|Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)[fFdD]?"
)

INTEGER_BITS: dict[TypeKind, int] = {
    TypeKind.BYTE: 8,
    TypeKind.SHORT: 16,
    TypeKind.INT: 32,
    TypeKind.LONG: 64,
}


def parse_integer(token: str, bits: int = 32) -> int:
    if token is None or not _INTEGER.fullmatch(token):
        raise ParseError(f'For input string: "{token}"', token=token)

    value = int(token)
    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise ParseError(
            f'Value out of range. Value:"{token}" Bits:{bits}', token=token
        )
    return value


def parse_decimal(token: str, single: bool = False) -> float:
    text = token.strip() if token is not None else ""
    if not _DECIMAL.fullmatch(text):
        raise ParseError(f'For input string: "{token}"', token=token)

    if text[-1] in "fFdD":
        text = text[:-1]
    value = float(text.replace("Infinity", "inf").replace("NaN", "nan"))
    if single:
        return to_single_precision(value)
    return value


def to_single_precision(value: float) -> float:
    """32비트 부동소수로 반올림. 범위 초과는 무한대."""
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


def parse_boolean(token: str) -> bool:
    # "true" 외에는 전부 False (에러 아님)
    return token is not None and token.lower() == "true"


def parse_char(token: str) -> str:
    if not token:
        raise ParseError("Cannot take a character from an empty string", token=token)
    return token[0]


def parse_scalar(kind: TypeKind, token: str):
    """스칼라 종류별 분기"""
    if kind in INTEGER_BITS:
        return parse_integer(token, INTEGER_BITS[kind])
    if kind is TypeKind.FLOAT:
        return parse_decimal(token, single=True)
    if kind is TypeKind.DOUBLE:
        return parse_decimal(token)
    if kind is TypeKind.BOOLEAN:
        return parse_boolean(token)
    if kind is TypeKind.CHAR:
        return parse_char(token)
    raise AssertionError(f"Not a scalar kind: {kind}")
