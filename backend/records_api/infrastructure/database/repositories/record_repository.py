"""Concrete repository implementation for Record backed by SQLAlchemy."""

import logging

from sqlalchemy import delete, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from records_api.application.interfaces import RecordRepository
from records_api.domain.entities import Record
from records_api.domain.exceptions import OperationError
from records_api.domain.policies import DeletePolicy, UpdatePolicy
from records_api.domain.result import Err, Ok, Result
from records_api.infrastructure.database.models import RecordModel

logger = logging.getLogger(__name__)

_ENTITY = "Record"


class SQLAlchemyRecordRepository(RecordRepository):
    """Implements the RecordRepository port using SQLAlchemy async sessions.

    Database errors never escape as exceptions: a duplicate primary key
    becomes CONFLICT and any other ``SQLAlchemyError`` becomes
    STORE_UNAVAILABLE.
    """

    def __init__(
        self,
        session: AsyncSession,
        *,
        update_policy: UpdatePolicy = UpdatePolicy.STRICT,
        delete_policy: DeletePolicy = DeletePolicy.STRICT,
    ):
        self._session = session
        self._update_policy = update_policy
        self._delete_policy = delete_policy

    def _to_entity(self, model: RecordModel) -> Record:
        """Map ORM model → domain entity."""
        return Record(
            id=model.id,
            name=model.name,
            description=model.description,
            page_count=model.page_count,
        )

    def _to_model(self, entity: Record) -> RecordModel:
        """Map domain entity → ORM model (for creation)."""
        return RecordModel(
            id=entity.id,
            name=entity.name,
            description=entity.description,
            page_count=entity.page_count,
        )

    def _unavailable(self, operation: str, exc: SQLAlchemyError) -> Err:
        logger.error("Record store %s failed: %s", operation, exc)
        return Err(OperationError.store_unavailable(f"Record store {operation} failed"))

    async def list_all(
        self,
        *,
        name: str | None = None,
        skip: int = 0,
        limit: int = 100,
    ) -> Result[list[Record]]:
        stmt = select(RecordModel)
        if name is not None:
            stmt = stmt.where(RecordModel.name == name)
        stmt = stmt.order_by(RecordModel.id).offset(skip).limit(limit)

        try:
            result = await self._session.execute(stmt)
        except SQLAlchemyError as exc:
            return self._unavailable("list", exc)
        return Ok([self._to_entity(row) for row in result.scalars().all()])

    async def create(self, record: Record) -> Result[Record]:
        try:
            if await self._session.get(RecordModel, record.id) is not None:
                return Err(OperationError.conflict(_ENTITY, record.id))
            model = self._to_model(record)
            self._session.add(model)
            await self._session.flush()
        except IntegrityError:
            # Lost an insert race on the same id
            await self._session.rollback()
            return Err(OperationError.conflict(_ENTITY, record.id))
        except SQLAlchemyError as exc:
            return self._unavailable("create", exc)

        logger.debug("Created record '%s'", record.id)
        return Ok(self._to_entity(model))

    async def read(self, record_id: str) -> Result[Record]:
        try:
            model = await self._session.get(RecordModel, record_id)
        except SQLAlchemyError as exc:
            return self._unavailable("read", exc)
        if model is None:
            return Err(OperationError.not_found(_ENTITY, record_id))
        return Ok(self._to_entity(model))

    async def update(self, record_id: str, record: Record) -> Result[Record]:
        if record.id != record_id:
            return Err(OperationError.invalid_input(
                f"Record id '{record.id}' does not match target id '{record_id}'"
            ))

        try:
            model = await self._session.get(RecordModel, record_id)
            if model is None:
                if self._update_policy is not UpdatePolicy.UPSERT:
                    return Err(OperationError.not_found(_ENTITY, record_id))
                model = self._to_model(record)
                self._session.add(model)
                logger.debug("Upserting absent record '%s'", record_id)
            else:
                model.name = record.name
                model.description = record.description
                model.page_count = record.page_count
            await self._session.flush()
        except IntegrityError:
            await self._session.rollback()
            return Err(OperationError.conflict(_ENTITY, record_id))
        except SQLAlchemyError as exc:
            return self._unavailable("update", exc)

        return Ok(self._to_entity(model))

    async def delete(self, record_id: str) -> Result[None]:
        try:
            model = await self._session.get(RecordModel, record_id)
            if model is None:
                if self._delete_policy is DeletePolicy.IDEMPOTENT:
                    return Ok(None)
                return Err(OperationError.not_found(_ENTITY, record_id))
            await self._session.delete(model)
            await self._session.flush()
        except SQLAlchemyError as exc:
            return self._unavailable("delete", exc)

        logger.debug("Deleted record '%s'", record_id)
        return Ok(None)

    async def delete_all(self) -> Result[None]:
        try:
            result = await self._session.execute(delete(RecordModel))
            await self._session.flush()
        except SQLAlchemyError as exc:
            return self._unavailable("delete_all", exc)

        logger.info("Cleared record store (%d rows)", result.rowcount)
        return Ok(None)
