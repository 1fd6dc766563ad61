"""
Tests for the step definitions and the form field model.
"""

from __future__ import annotations

from intake_form.intake import FormFields, FormStep, TherapistGender, TherapyForWhom
from intake_form.intake.stages import FIRST_STEP, LAST_STEP, clamp_step


def test_steps_are_numbered_one_to_three():
    assert [int(s) for s in FormStep] == [1, 2, 3]
    assert (FIRST_STEP, LAST_STEP) == (1, 3)


def test_each_step_collects_one_field():
    assert [s.field_name for s in FormStep] == ["email", "therapy_for_whom", "therapist_gender"]
    assert FormStep.THERAPY_FOR_WHOM.heading == "Step 2 of 3"


def test_clamp_step():
    assert clamp_step(0) == 1
    assert clamp_step(2) == 2
    assert clamp_step(4) == 3


def test_option_values_and_labels():
    assert [o.value for o in TherapyForWhom] == ["individual", "couple", "family"]
    assert TherapyForWhom.INDIVIDUAL.label == "Just me"
    assert [o.value for o in TherapistGender] == ["male", "female", "non-binary", "no-preference"]
    assert TherapistGender.NO_PREFERENCE.label == "No Preference"


def test_fields_default_to_empty_strings():
    fields = FormFields()
    assert (fields.email, fields.therapy_for_whom, fields.therapist_gender) == ("", "", "")
    assert not fields.has_any_value()


def test_from_saved_replaces_missing_values_with_empty_strings():
    fields = FormFields.from_saved("a@b.com", None, None)
    assert fields == FormFields(email="a@b.com")
    assert fields.has_any_value()


def test_camel_case_aliases():
    assert FormFields.field_key("therapyForWhom") == "therapy_for_whom"
    assert FormFields.field_key("therapist_gender") == "therapist_gender"
    assert FormFields(therapyForWhom="family").therapy_for_whom == "family"
