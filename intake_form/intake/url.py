# intake_form/intake/url.py
from __future__ import annotations

from typing import List, Optional

import httpx

SESSION_ID_PARAM = "userId"


def session_id_from_url(url: str) -> Optional[str]:
    value = httpx.URL(url).params.get(SESSION_ID_PARAM)
    return value or None


def with_session_id(url: str, session_id: str) -> str:
    return str(httpx.URL(url).copy_set_param(SESSION_ID_PARAM, session_id))


class ShareableUrl:
    """
    The page address a user can reload or share to get back to the same
    saved form. Each change is pushed as a new history entry.
    """

    def __init__(self, url: str):
        self.history: List[str] = [url]

    @property
    def current(self) -> str:
        return self.history[-1]

    @property
    def session_id(self) -> Optional[str]:
        return session_id_from_url(self.current)

    def push_session_id(self, session_id: str) -> str:
        url = with_session_id(self.current, session_id)
        self.history.append(url)
        return url
