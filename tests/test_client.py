"""
Tests for the HTTP client and the shareable URL helpers.
"""

from __future__ import annotations

import asyncio

import httpx

from intake_form.intake import FormApiClient, FormFields, ShareableUrl
from intake_form.intake.url import session_id_from_url, with_session_id


def _api(handler) -> FormApiClient:
    return FormApiClient(
        client=httpx.AsyncClient(
            transport=httpx.MockTransport(handler),
            base_url="http://testserver",
        )
    )


def test_save_form_sends_snake_case_body(backend):
    fields = FormFields(email="x@y.com", therapy_for_whom="family")

    result = asyncio.run(backend.api().save_form(None, 1, fields))

    assert result is not None
    assert result.user_id == "abc123"
    assert backend.paths() == ["/api/save-form"]
    assert backend.bodies() == [
        {
            "user_id": None,
            "form_step": 1,
            "email": "x@y.com",
            "therapy_for_whom": "family",
            "therapist_gender": "",
        }
    ]


def test_load_form_sends_user_id(backend):
    backend.reply(httpx.Response(200, json={"email": "a@b.com", "form_step": 2}))

    result = asyncio.run(backend.api().load_form("abc123"))

    assert backend.paths() == ["/api/load-form"]
    assert backend.bodies() == [{"user_id": "abc123"}]
    assert result.email == "a@b.com"
    assert result.form_step == 2
    assert result.therapist_gender is None


def test_non_success_status_is_a_failure(backend):
    backend.reply(httpx.Response(500, text="boom"))
    assert asyncio.run(backend.api().save_form("abc123", 2, FormFields())) is None


def test_transport_error_is_a_failure():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    assert asyncio.run(_api(handler).load_form("abc123")) is None


def test_malformed_save_response_is_rejected(backend):
    """A save response without a string user_id is not accepted."""
    backend.reply(httpx.Response(200, json={"id": "abc123"}))
    assert asyncio.run(backend.api().save_form(None, 1, FormFields())) is None


def test_non_json_response_is_rejected(backend):
    backend.reply(httpx.Response(200, text="<html>oops</html>"))
    assert asyncio.run(backend.api().load_form("abc123")) is None


def test_wrongly_typed_load_response_is_rejected(backend):
    backend.reply(httpx.Response(200, json={"email": 42, "form_step": "two"}))
    assert asyncio.run(backend.api().load_form("abc123")) is None


def test_owned_client_closes_on_exit():
    async def run():
        async with FormApiClient(base_url="http://testserver") as api:
            inner = api._client
        return inner.is_closed

    assert asyncio.run(run()) is True


def test_session_id_from_url():
    assert session_id_from_url("https://intake.example/?userId=abc123") == "abc123"
    assert session_id_from_url("https://intake.example/") is None
    assert session_id_from_url("https://intake.example/?userId=") is None


def test_with_session_id_keeps_other_params():
    url = with_session_id("https://intake.example/form?ref=ad", "abc123")
    assert httpx.URL(url).params.get("ref") == "ad"
    assert httpx.URL(url).params.get("userId") == "abc123"


def test_shareable_url_pushes_history():
    url = ShareableUrl("https://intake.example/")
    assert url.session_id is None

    url.push_session_id("abc123")

    assert len(url.history) == 2
    assert url.session_id == "abc123"
    assert "userId=abc123" in url.current
