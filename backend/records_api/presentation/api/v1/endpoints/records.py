"""Record CRUD endpoints."""

from fastapi import APIRouter, Depends, Query, Response, status

from records_api.application.schemas import ErrorResponse, RecordSchema
from records_api.application.services import RecordService
from records_api.config import Settings, get_settings
from records_api.domain.exceptions import OperationError, OperationErrorException
from records_api.infrastructure.dependencies import get_record_service
from records_api.presentation.api.errors import unwrap

router = APIRouter(
    prefix="/records",
    tags=["Records"],
    responses={
        400: {"model": ErrorResponse},
        404: {"model": ErrorResponse},
        409: {"model": ErrorResponse},
        500: {"model": ErrorResponse},
    },
)


@router.get("", response_model=list[RecordSchema])
async def list_records(
    name: str | None = Query(None, description="Filter by exact name"),
    skip: int = Query(0, ge=0),
    limit: int = Query(100, ge=1, le=500),
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> list[RecordSchema]:
    """Retrieve a paginated list of records."""
    records = unwrap(await service.list_records(name=name, skip=skip, limit=limit), settings)
    return [RecordSchema.from_entity(r) for r in records]


@router.post("", response_model=RecordSchema, status_code=status.HTTP_201_CREATED)
async def create_record(
    data: RecordSchema,
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> RecordSchema:
    """Create a new record under its caller-assigned id."""
    record = unwrap(await service.create_record(data.to_entity()), settings)
    return RecordSchema.from_entity(record)


@router.get("/{record_id}", response_model=RecordSchema)
async def get_record(
    record_id: str,
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> RecordSchema:
    """Retrieve a single record by ID."""
    record = unwrap(await service.get_record(record_id), settings)
    return RecordSchema.from_entity(record)


@router.put("/{record_id}", response_model=RecordSchema, status_code=status.HTTP_202_ACCEPTED)
async def update_record(
    record_id: str,
    data: RecordSchema,
    response: Response,
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> RecordSchema | Response:
    """Replace the record stored at ``record_id``."""
    if data.id != record_id:
        raise OperationErrorException(OperationError.invalid_input(
            f"Body id '{data.id}' does not match path id '{record_id}'"
        ))

    record = unwrap(await service.update_record(record_id, data.to_entity()), settings)
    if settings.write_success_status == status.HTTP_204_NO_CONTENT:
        return Response(status_code=status.HTTP_204_NO_CONTENT)
    response.status_code = settings.write_success_status
    return RecordSchema.from_entity(record)


@router.delete("/{record_id}", status_code=status.HTTP_202_ACCEPTED)
async def delete_record(
    record_id: str,
    service: RecordService = Depends(get_record_service),
    settings: Settings = Depends(get_settings),
) -> Response:
    """Delete a record by ID."""
    unwrap(await service.delete_record(record_id), settings)
    return Response(status_code=settings.write_success_status)
