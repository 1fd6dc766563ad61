# intake_form/models.py
from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from intake_form.db import Base


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class FormData(Base):
    """
    One in-progress intake form, keyed by the session identifier the
    client carries in its `userId` query parameter.
    """
    __tablename__ = "form_data"

    user_id: Mapped[str] = mapped_column(String, primary_key=True)
    form_step: Mapped[int] = mapped_column(Integer, nullable=False, default=1)
    email: Mapped[str | None] = mapped_column(String, nullable=True)
    therapy_for_whom: Mapped[str | None] = mapped_column(String, nullable=True)
    therapist_gender: Mapped[str | None] = mapped_column(String, nullable=True)
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow
    )
