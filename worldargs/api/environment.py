"""Sandbox environment endpoints."""

from fastapi import APIRouter, Depends, HTTPException, Request

from worldargs.api.schemas import (
    BlockRequest,
    BlockResponse,
    EntityRequest,
    EntityResponse,
    WorldRequest,
    WorldResponse,
)
from worldargs.core.logging import get_logger
from worldargs.services.environment_service import EnvironmentService

logger = get_logger(__name__)

router = APIRouter(prefix="/environment", tags=["environment"])


def get_environment_service(request: Request) -> EnvironmentService:
    """EnvironmentService 인스턴스 반환 (의존성 주입)"""
    service: EnvironmentService = request.app.state.environment_service
    return service


@router.post("/worlds", response_model=WorldResponse)
def create_world(
    request: WorldRequest,
    service: EnvironmentService = Depends(get_environment_service),
) -> WorldResponse:
    """월드 생성"""
    try:
        world = service.create_world(request.name)
    except ValueError as e:
        logger.warning("Failed to create world: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return WorldResponse(name=world.name, uid=str(world.uid))


@router.post("/blocks", response_model=BlockResponse)
def place_block(
    request: BlockRequest,
    service: EnvironmentService = Depends(get_environment_service),
) -> BlockResponse:
    """블록 배치 (AIR 는 제거)"""
    try:
        material = service.place_block(
            request.world, request.x, request.y, request.z, request.material
        )
    except ValueError as e:
        logger.warning("Failed to place block: %s", e)
        raise HTTPException(status_code=400, detail=str(e))
    return BlockResponse(
        world=request.world,
        x=request.x,
        y=request.y,
        z=request.z,
        material=material.name,
    )


@router.post("/entities", response_model=EntityResponse)
def spawn_entity(
    request: EntityRequest,
    service: EnvironmentService = Depends(get_environment_service),
) -> EntityResponse:
    """엔티티 생성"""
    try:
        entity = service.spawn_entity(
            request.world,
            request.entity_type,
            request.x,
            request.y,
            request.z,
            yaw=request.yaw,
            pitch=request.pitch,
            held_item=request.held_item,
            held_amount=request.held_amount,
        )
    except ValueError as e:
        logger.warning("Failed to spawn entity: %s", e)
        raise HTTPException(status_code=400, detail=str(e))

    loc = entity.location
    return EntityResponse(
        unique_id=str(entity.unique_id),
        entity_type=entity.type_name,
        world=loc.world.name,
        x=loc.x,
        y=loc.y,
        z=loc.z,
    )
