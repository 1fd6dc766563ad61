# intake_form/services/__init__.py
from .form_store import FormStoreService, db_session, init_db

__all__ = ["FormStoreService", "db_session", "init_db"]
