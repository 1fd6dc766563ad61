# intake_form/services/form_store.py
from __future__ import annotations

import logging
import uuid
from contextlib import contextmanager
from typing import Callable

from sqlalchemy.orm import Session

from intake_form.db import SessionLocal, engine, Base
from intake_form.models import FormData, utcnow
from intake_form.api.schemas import (
    SaveFormRequest,
    SaveFormResponse,
    LoadFormRequest,
    LoadFormResponse,
)

logger = logging.getLogger(__name__)


def generate_user_id() -> str:
    return str(uuid.uuid4())


@contextmanager
def db_session(session_factory: Callable[[], Session] = SessionLocal):
    db = session_factory()
    try:
        yield db
        db.commit()
    except Exception:
        db.rollback()
        raise
    finally:
        db.close()


def init_db(bind=None) -> None:
    """
    Create the form_data table if it does not exist yet.
    Call this once at startup.
    """
    Base.metadata.create_all(bind=bind or engine)


class FormStoreService:
    """
    Backend half of the intake form: stores one row per session
    identifier and hands it back on resume.
    """

    def __init__(self, session_factory: Callable[[], Session] = SessionLocal):
        self.session_factory = session_factory

    def save_form(self, req: SaveFormRequest) -> SaveFormResponse:
        """
        Upsert the submitted step and fields.

        A missing or empty user_id is the "create" case: a fresh UUID4
        is minted and returned so the client can adopt it.
        """
        user_id = req.user_id or generate_user_id()
        created = not req.user_id

        with db_session(self.session_factory) as session:
            row = session.get(FormData, user_id)
            if row is None:
                row = FormData(user_id=user_id)
                session.add(row)

            row.form_step = req.form_step
            row.email = req.email
            row.therapy_for_whom = req.therapy_for_whom
            row.therapist_gender = req.therapist_gender
            row.updated_at = utcnow()

        logger.info(
            "Created intake session" if created else "Saved intake session",
            extra={"user_id": user_id, "form_step": req.form_step},
        )
        return SaveFormResponse(user_id=user_id)

    def load_form(self, req: LoadFormRequest) -> LoadFormResponse:
        """
        Return the stored row, or an empty record at step 1 when the
        identifier is unknown.
        """
        with db_session(self.session_factory) as session:
            row = session.get(FormData, req.user_id)
            if row is None:
                logger.info(
                    "No saved intake for session",
                    extra={"user_id": req.user_id},
                )
                return LoadFormResponse(user_id=req.user_id, form_step=1)

            return LoadFormResponse(
                user_id=row.user_id,
                form_step=row.form_step,
                email=row.email,
                therapy_for_whom=row.therapy_for_whom,
                therapist_gender=row.therapist_gender,
            )
