# intake_form/api/routes.py
from __future__ import annotations

from fastapi import APIRouter, Depends

from intake_form.services import FormStoreService
from .schemas import (
    SaveFormRequest,
    SaveFormResponse,
    LoadFormRequest,
    LoadFormResponse,
)

router = APIRouter()

_service = FormStoreService()


def get_form_store() -> FormStoreService:
    return _service


@router.post("/save-form", response_model=SaveFormResponse)
def save_form(
    payload: SaveFormRequest,
    store: FormStoreService = Depends(get_form_store),
) -> SaveFormResponse:
    """
    Save one step of the intake form.
    A null user_id creates a new session and returns its identifier.
    """
    return store.save_form(payload)


@router.post("/load-form", response_model=LoadFormResponse)
def load_form(
    payload: LoadFormRequest,
    store: FormStoreService = Depends(get_form_store),
) -> LoadFormResponse:
    return store.load_form(payload)
