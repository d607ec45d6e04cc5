"""SQLAlchemy ORM model for the Record entity."""

from sqlalchemy import Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column

from records_api.infrastructure.database.base import Base


class RecordModel(Base):
    """ORM model for the 'records' table. One row per caller-assigned id."""

    __tablename__ = "records"

    id: Mapped[str] = mapped_column(String(255), primary_key=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    description: Mapped[str] = mapped_column(Text, nullable=False, default="")
    page_count: Mapped[int] = mapped_column(Integer, nullable=False, default=0)

    def __repr__(self) -> str:
        return f"<RecordModel(id={self.id}, name='{self.name}')>"
