# intake_form/api/__init__.py
