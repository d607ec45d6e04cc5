"""Remote volume lookup endpoints."""

from fastapi import APIRouter, Depends, status

from records_api.application.schemas import ErrorResponse, RecordSchema
from records_api.application.services import RecordService
from records_api.config import Settings, get_settings
from records_api.infrastructure.dependencies import get_record_service
from records_api.presentation.api.errors import unwrap

router = APIRouter(
    prefix="/remote",
    tags=["Remote"],
    responses={
        404: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
        502: {"model": ErrorResponse},
    },
)


@router.get("/{search}/{term}", response_model=RecordSchema)
async def fetch_remote_record(
    search: str,
    term: str,
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> RecordSchema:
    """Look up a volume remotely and return it as a record, without storing it."""
    record = unwrap(
        await service.fetch_and_wrap(search_params={"search": search, "term": term}),
        settings,
    )
    return RecordSchema.from_entity(record)


@router.post(
    "/{search}/{term}",
    response_model=RecordSchema,
    status_code=status.HTTP_201_CREATED,
    responses={409: {"model": ErrorResponse}},
)
async def import_remote_record(
    search: str,
    term: str,
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> RecordSchema:
    """Look up a volume remotely and store it as a new record."""
    record = unwrap(
        await service.import_remote(search_params={"search": search, "term": term}),
        settings,
    )
    return RecordSchema.from_entity(record)
