# intake_form/intake/state.py
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional

from intake_form.intake.errors import SessionIdAlreadyAssigned
from intake_form.intake.schema import FormFields
from intake_form.intake.stages import FIRST_STEP


@dataclass
class SessionState:
    """
    Everything one page visit knows about its intake form: which step is
    showing, the values typed so far, and the backend's identifier for
    the saved copy (absent until the first save creates one).
    """

    step: int = FIRST_STEP
    session_id: Optional[str] = None
    fields: FormFields = field(default_factory=FormFields)

    @classmethod
    def fresh(cls, session_id: Optional[str] = None) -> "SessionState":
        return cls(step=FIRST_STEP, session_id=session_id, fields=FormFields())

    def reset(self) -> None:
        self.step = FIRST_STEP
        self.session_id = None
        self.fields = FormFields()

    def assign_session_id(self, session_id: str) -> None:
        # write-once for the life of the visit
        if self.session_id is not None and self.session_id != session_id:
            raise SessionIdAlreadyAssigned(
                f"Session already bound to {self.session_id!r}, got {session_id!r}"
            )
        self.session_id = session_id
