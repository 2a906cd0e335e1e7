"""API request/response schemas."""

from typing import Any, Optional

from pydantic import BaseModel, Field


# === Request Schemas ===


class WorldRequest(BaseModel):
    """월드 생성 요청"""

    name: str = Field(..., min_length=1, max_length=64, description="월드 이름")


class BlockRequest(BaseModel):
    """블록 배치 요청"""

    world: str = Field(..., description="월드 이름")
    x: int
    y: int
    z: int
    material: str = Field(..., description="Material 이름 (AIR 는 제거)")


class EntityRequest(BaseModel):
    """엔티티 생성 요청"""

    world: str = Field(..., description="월드 이름")
    entity_type: str = Field(..., description="엔티티 종류: Zombie, Player, ...")
    x: float
    y: float
    z: float
    yaw: float = 0.0
    pitch: float = 0.0
    held_item: Optional[str] = Field(None, description="손에 든 아이템 (HumanEntity 만)")
    held_amount: int = Field(1, ge=1, le=64)


class CoerceRequest(BaseModel):
    """인자 변환 요청"""

    types: list[str] = Field(..., description="대상 타입 이름: int, location, enum:weather_type, ...")
    tokens: list[str] = Field(..., description="변환할 문자열")
    subject_id: Optional[str] = Field(None, description="컨텍스트 주체 엔티티 UUID")


# === Response Schemas ===


class WorldResponse(BaseModel):
    name: str
    uid: str


class BlockResponse(BaseModel):
    world: str
    x: int
    y: int
    z: int
    material: str


class EntityResponse(BaseModel):
    unique_id: str
    entity_type: str
    world: str
    x: float
    y: float
    z: float


class CoerceResponse(BaseModel):
    """변환 성공 응답"""

    success: bool
    values: list[Any] = []


class CoerceErrorResponse(BaseModel):
    """변환 실패 응답"""

    success: bool = False
    error: str
    message: str
    index: Optional[int] = None
    token: Optional[str] = None
    type: Optional[str] = None
