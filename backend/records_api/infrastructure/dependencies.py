"""FastAPI dependency injection — wires infrastructure to application layer."""

from collections.abc import AsyncGenerator

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.application.interfaces import RecordFetchClient, RecordRepository
from records_api.application.services import RecordService
from records_api.config import Settings, get_settings
from records_api.infrastructure.database.repositories import SQLAlchemyRecordRepository
from records_api.infrastructure.database.session import get_db_session
from records_api.infrastructure.http import HttpxFetchClient


async def get_record_repository(
    session: AsyncSession = Depends(get_db_session),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[RecordRepository, None]:
    """Provides a record repository bound to the request's session and policies."""
    yield SQLAlchemyRecordRepository(
        session,
        update_policy=settings.record_update_policy,
        delete_policy=settings.record_delete_policy,
    )


def get_fetch_client(settings: Settings = Depends(get_settings)) -> RecordFetchClient:
    """Provides the outbound JSON fetch client."""
    return HttpxFetchClient(timeout=settings.remote_timeout)


async def get_record_service(
    repository: RecordRepository = Depends(get_record_repository),
    fetch_client: RecordFetchClient = Depends(get_fetch_client),
    settings: Settings = Depends(get_settings),
) -> AsyncGenerator[RecordService, None]:
    """Provides a RecordService with its repository and fetch client wired up."""
    yield RecordService(
        repository=repository,
        fetch_client=fetch_client,
        url_template=settings.remote_url_template,
    )
