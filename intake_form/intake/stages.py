# intake_form/intake/stages.py
from enum import Enum, IntEnum


class FormStep(IntEnum):
    EMAIL = 1
    THERAPY_FOR_WHOM = 2
    THERAPIST_GENDER = 3

    @property
    def field_name(self) -> str:
        return STEP_FIELDS[self]

    @property
    def heading(self) -> str:
        return f"Step {int(self)} of {LAST_STEP}"


FIRST_STEP = int(FormStep.EMAIL)
LAST_STEP = int(FormStep.THERAPIST_GENDER)

STEP_FIELDS = {
    FormStep.EMAIL: "email",
    FormStep.THERAPY_FOR_WHOM: "therapy_for_whom",
    FormStep.THERAPIST_GENDER: "therapist_gender",
}


def clamp_step(step: int) -> int:
    return max(FIRST_STEP, min(step, LAST_STEP))


class TherapyForWhom(str, Enum):
    INDIVIDUAL = "individual"
    COUPLE = "couple"
    FAMILY = "family"

    @property
    def label(self) -> str:
        return {
            TherapyForWhom.INDIVIDUAL: "Just me",
            TherapyForWhom.COUPLE: "Me and my partner",
            TherapyForWhom.FAMILY: "My family",
        }[self]


class TherapistGender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    NON_BINARY = "non-binary"
    NO_PREFERENCE = "no-preference"

    @property
    def label(self) -> str:
        return {
            TherapistGender.MALE: "Man",
            TherapistGender.FEMALE: "Woman",
            TherapistGender.NON_BINARY: "Non-binary",
            TherapistGender.NO_PREFERENCE: "No Preference",
        }[self]
