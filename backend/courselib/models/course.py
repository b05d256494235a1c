"""Course model, always owned by an author."""

from __future__ import annotations

import uuid
from typing import TYPE_CHECKING

from sqlalchemy import ForeignKey, String, Uuid
from sqlalchemy.orm import Mapped, mapped_column, relationship

from courselib.database import Base

if TYPE_CHECKING:
    from courselib.models.author import Author


class Course(Base):
    """Course taught by a single author."""

    __tablename__ = "courses"

    id: Mapped[uuid.UUID] = mapped_column(Uuid, primary_key=True, default=uuid.uuid4)

    title: Mapped[str] = mapped_column(String(100), nullable=False)
    description: Mapped[str | None] = mapped_column(String(1500), nullable=True)

    author_id: Mapped[uuid.UUID] = mapped_column(
        Uuid,
        ForeignKey("authors.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    author: Mapped[Author] = relationship(back_populates="courses")

    def __repr__(self) -> str:
        return f"<Course(id={self.id}, title={self.title[:30]})>"
