"""Pydantic DTOs (Data Transfer Objects) for the Record feature."""

from pydantic import BaseModel, Field

from records_api.domain.entities import Record


class RecordSchema(BaseModel):
    """Wire shape of a record, used for request bodies and responses."""

    # Ids travel as a single path segment, so "/" is rejected
    id: str = Field(..., min_length=1, max_length=255, pattern=r"^[^/]+$", examples=["abcd"])
    name: str = Field(..., examples=["test name"])
    description: str = Field(..., examples=["test description"])
    page_count: int = Field(..., ge=0, strict=True, alias="pageCount", examples=[100])

    model_config = {"populate_by_name": True, "extra": "forbid"}

    def to_entity(self) -> Record:
        return Record(
            id=self.id,
            name=self.name,
            description=self.description,
            page_count=self.page_count,
        )

    @classmethod
    def from_entity(cls, record: Record) -> "RecordSchema":
        return cls(
            id=record.id,
            name=record.name,
            description=record.description,
            page_count=record.page_count,
        )


class ErrorDetail(BaseModel):
    """Structured error payload."""

    kind: str
    reason: str


class ErrorResponse(BaseModel):
    """Error envelope returned for every failed request."""

    error: ErrorDetail
