# intake_form/api/schemas.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SaveFormRequest(BaseModel):
    """
    Body of POST /api/save-form. A null (or empty) user_id asks the
    backend to mint a new session identifier.
    """

    user_id: Optional[str] = None
    form_step: int = Field(..., ge=1, le=3)
    email: str
    therapy_for_whom: str
    therapist_gender: str


class SaveFormResponse(BaseModel):
    user_id: str

    model_config = ConfigDict(extra="ignore")


class LoadFormRequest(BaseModel):
    user_id: str


class LoadFormResponse(BaseModel):
    user_id: Optional[str] = None
    form_step: Optional[int] = None
    email: Optional[str] = None
    therapy_for_whom: Optional[str] = None
    therapist_gender: Optional[str] = None

    model_config = ConfigDict(extra="ignore")

    def has_any_field(self) -> bool:
        return bool(self.email or self.therapy_for_whom or self.therapist_gender)
