"""
Shared fixtures. The database is forced to an in-memory SQLite before
anything from intake_form is imported, so nothing touches a file on disk.
"""

from __future__ import annotations

import json
import os

# Always override: clean_db drops tables on whatever this points at.
os.environ["DATABASE_URL"] = "sqlite://"

import httpx
import pytest

from intake_form.db import Base, engine
from intake_form.intake import FormApiClient


@pytest.fixture(autouse=True)
def clean_db():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)


class FakeBackend:
    """
    Records every request body and answers with queued responses
    (or a default one) through httpx.MockTransport.
    """

    def __init__(self, user_id: str = "abc123"):
        self.requests: list[tuple[str, dict]] = []
        self.queued: list[httpx.Response] = []
        self.user_id = user_id

    def reply(self, *responses: httpx.Response) -> None:
        self.queued.extend(responses)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append((request.url.path, json.loads(request.content)))
        if self.queued:
            return self.queued.pop(0)
        return httpx.Response(200, json={"user_id": self.user_id})

    def paths(self) -> list[str]:
        return [path for path, _ in self.requests]

    def bodies(self) -> list[dict]:
        return [body for _, body in self.requests]

    def api(self) -> FormApiClient:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(self.handler),
            base_url="http://testserver",
        )
        return FormApiClient(client=client)


@pytest.fixture
def backend() -> FakeBackend:
    return FakeBackend()
