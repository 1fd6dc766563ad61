# intake_form/intake/schema.py
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from intake_form.intake.errors import UnknownFieldError


class FormFields(BaseModel):
    """
    The three values the intake form collects.

    Unset values are always "" so a form control can bind to them
    directly. Option values are not checked against the known choices;
    the form's own select options are what limit them.
    """

    email: str = ""
    therapy_for_whom: str = Field("", alias="therapyForWhom")
    therapist_gender: str = Field("", alias="therapistGender")

    model_config = ConfigDict(populate_by_name=True, validate_assignment=True)

    @classmethod
    def field_key(cls, name: str) -> str:
        """
        Map a snake_case name or its camelCase alias to the model field.
        """
        if name in cls.model_fields:
            return name
        for key, info in cls.model_fields.items():
            if info.alias == name:
                return key
        raise UnknownFieldError(name)

    @classmethod
    def from_saved(
        cls,
        email: Optional[str],
        therapy_for_whom: Optional[str],
        therapist_gender: Optional[str],
    ) -> "FormFields":
        return cls(
            email=email or "",
            therapy_for_whom=therapy_for_whom or "",
            therapist_gender=therapist_gender or "",
        )

    def with_value(self, name: str, value: str) -> "FormFields":
        key = self.field_key(name)
        updated = self.model_copy()
        # validate_assignment rejects anything that is not a string
        setattr(updated, key, value)
        return updated

    def has_any_value(self) -> bool:
        return bool(self.email or self.therapy_for_whom or self.therapist_gender)
