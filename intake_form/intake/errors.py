# intake_form/intake/errors.py


class IntakeFormError(Exception):
    """Base class for intake form errors."""
    pass


class UnknownFieldError(IntakeFormError, KeyError):
    """Raised when update_field is given a name the form does not have."""
    pass


class SessionIdAlreadyAssigned(IntakeFormError):
    """Raised when a session already bound to one identifier is given another."""
    pass
