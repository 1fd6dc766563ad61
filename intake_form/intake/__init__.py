# intake_form/intake/__init__.py
from .client import FormApiClient
from .controller import IntakeSessionController
from .errors import IntakeFormError, UnknownFieldError, SessionIdAlreadyAssigned
from .schema import FormFields
from .stages import FormStep, TherapyForWhom, TherapistGender
from .state import SessionState
from .url import ShareableUrl, session_id_from_url, with_session_id

__all__ = [
    "FormApiClient",
    "IntakeSessionController",
    "IntakeFormError",
    "UnknownFieldError",
    "SessionIdAlreadyAssigned",
    "FormFields",
    "FormStep",
    "TherapyForWhom",
    "TherapistGender",
    "SessionState",
    "ShareableUrl",
    "session_id_from_url",
    "with_session_id",
]
