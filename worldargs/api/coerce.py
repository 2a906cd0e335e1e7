"""Argument coercion endpoint."""

from fastapi import APIRouter, Depends, HTTPException, Request
from fastapi.responses import JSONResponse

from worldargs.api.environment import get_environment_service
from worldargs.api.schemas import CoerceErrorResponse, CoerceRequest, CoerceResponse
from worldargs.core.coercion import CoercionError
from worldargs.core.logging import get_logger
from worldargs.services.coercion_service import CoercionService
from worldargs.services.environment_service import EnvironmentService

logger = get_logger(__name__)

router = APIRouter(tags=["coerce"])


def get_coercion_service(request: Request) -> CoercionService:
    """CoercionService 인스턴스 반환 (의존성 주입)"""
    service: CoercionService = request.app.state.coercion_service
    return service


@router.post(
    "/coerce",
    response_model=CoerceResponse,
    responses={404: {}, 422: {"model": CoerceErrorResponse}},
)
def coerce_arguments(
    request: CoerceRequest,
    coercion: CoercionService = Depends(get_coercion_service),
    environment: EnvironmentService = Depends(get_environment_service),
):
    """
    문자열 인자 변환

    subject_id 를 주면 해당 엔티티를 컨텍스트로 here/there/me/that/this 단축어를 해석합니다.
    """
    subject = None
    if request.subject_id is not None:
        subject = environment.get_entity(request.subject_id)
        if subject is None:
            raise HTTPException(
                status_code=404, detail=f"Subject not found: {request.subject_id}"
            )

    try:
        values = coercion.coerce(
            environment.sandbox, request.types, request.tokens, subject
        )
    except CoercionError as e:
        logger.info("Coercion rejected: %s", e)
        payload = CoerceErrorResponse(**e.to_dict())
        return JSONResponse(status_code=422, content=payload.model_dump())
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    return CoerceResponse(success=True, values=values)
