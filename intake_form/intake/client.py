# intake_form/intake/client.py
from __future__ import annotations

import logging
from typing import Optional, Type, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from intake_form.api.schemas import (
    SaveFormRequest,
    SaveFormResponse,
    LoadFormRequest,
    LoadFormResponse,
)
from intake_form.config import get_settings
from intake_form.intake.schema import FormFields

SAVE_FORM_PATH = "/api/save-form"
LOAD_FORM_PATH = "/api/load-form"

RequestT = TypeVar("RequestT", bound=BaseModel)
ResponseT = TypeVar("ResponseT", bound=BaseModel)


class FormApiClient:
    """
    Talks to the save/load endpoints.

    Every call returns the parsed response on success and None on any
    failure: a non-2xx status, a transport error, or a body that does not
    match the expected shape. Nothing is retried.
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        client: Optional[httpx.AsyncClient] = None,
    ) -> None:
        settings = get_settings()
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url or settings.api_base_url,
            timeout=timeout if timeout is not None else settings.request_timeout,
        )
        self._logger = logging.getLogger(__name__)

    async def __aenter__(self) -> "FormApiClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def save_form(
        self,
        user_id: Optional[str],
        form_step: int,
        fields: FormFields,
    ) -> Optional[SaveFormResponse]:
        payload = self._build(
            SaveFormRequest,
            user_id=user_id,
            form_step=form_step,
            email=fields.email,
            therapy_for_whom=fields.therapy_for_whom,
            therapist_gender=fields.therapist_gender,
        )
        if payload is None:
            return None
        return await self._post(SAVE_FORM_PATH, payload, SaveFormResponse)

    async def load_form(self, user_id: str) -> Optional[LoadFormResponse]:
        payload = self._build(LoadFormRequest, user_id=user_id)
        if payload is None:
            return None
        return await self._post(LOAD_FORM_PATH, payload, LoadFormResponse)

    def _build(self, request_model: Type[RequestT], **values) -> Optional[RequestT]:
        try:
            return request_model.model_validate(values)
        except ValidationError as e:
            self._logger.warning(
                "Not sending invalid %s",
                request_model.__name__,
                extra={"user_id": values.get("user_id"), "reason": str(e)},
            )
            return None

    async def _post(
        self,
        path: str,
        payload: BaseModel,
        response_model: Type[ResponseT],
    ) -> Optional[ResponseT]:
        context = {"user_id": getattr(payload, "user_id", None)}
        try:
            response = await self._client.post(path, json=payload.model_dump())
        except httpx.HTTPError as e:
            self._logger.warning(
                "Request to %s failed", path, extra={**context, "reason": str(e)}
            )
            return None

        if not response.is_success:
            self._logger.warning(
                "Request to %s was rejected",
                path,
                extra={**context, "status_code": response.status_code},
            )
            return None

        try:
            return response_model.model_validate(response.json())
        except (ValueError, ValidationError) as e:
            # json.JSONDecodeError is a ValueError
            self._logger.warning(
                "Malformed response from %s",
                path,
                extra={**context, "status_code": response.status_code, "reason": str(e)},
            )
            return None
