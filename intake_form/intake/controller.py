# intake_form/intake/controller.py
from __future__ import annotations

import logging
from typing import Optional

from intake_form.intake.client import FormApiClient
from intake_form.intake.schema import FormFields
from intake_form.intake.stages import FIRST_STEP, clamp_step
from intake_form.intake.state import SessionState
from intake_form.intake.url import ShareableUrl

logger = logging.getLogger(__name__)


class IntakeSessionController:
    """
    Drives the three-step intake form.

    Steps:
      1. email
      2. who the therapy is for
      3. therapist gender preference

    Moving between steps saves what the user has entered so far. The very
    first move forward from step 1 without a session identifier creates
    one on the backend and mirrors it into the page URL, so a reload or a
    shared link resumes the same form.

    Persistence never blocks the user: a failed create, save or load is
    logged and the form carries on with whatever it has locally.

    Only one request is in flight at a time. advance(), retreat() and
    hydrate() called while another one is still waiting on the backend
    return immediately without touching state, so a double click on
    "Next" cannot mint two session identifiers.
    """

    def __init__(
        self,
        api: FormApiClient,
        url: Optional[ShareableUrl] = None,
        state: Optional[SessionState] = None,
    ) -> None:
        self.api = api
        self.url = url
        self.state = state or SessionState.fresh()
        self._in_flight = False

    @classmethod
    def from_url(cls, api: FormApiClient, page_url: str) -> "IntakeSessionController":
        """
        Build a controller for a page visit, picking up `userId` from the
        address if the user is resuming.
        """
        url = ShareableUrl(page_url)
        return cls(api, url=url, state=SessionState.fresh(session_id=url.session_id))

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    @property
    def current_step(self) -> int:
        return self.state.step

    @property
    def session_id(self) -> Optional[str]:
        return self.state.session_id

    @property
    def is_busy(self) -> bool:
        return self._in_flight

    def update_field(self, name: str, value: str) -> None:
        self.state.fields = self.state.fields.with_value(name, value)

    def reset(self) -> None:
        self.state.reset()

    async def start(self) -> bool:
        """
        Restore saved progress when the visit began with a session
        identifier. Returns whether anything was restored.
        """
        if self.state.session_id is None:
            return False
        return await self.hydrate()

    async def advance(self) -> int:
        """
        Save (or create, on the first step) and move to the next step.
        Returns the step now showing.
        """
        if self._busy("advance"):
            return self.state.step

        self._in_flight = True
        try:
            if self.state.step == FIRST_STEP and self.state.session_id is None:
                await self._create()
            elif self.state.session_id is not None:
                await self._save()
            self.state.step = clamp_step(self.state.step + 1)
        finally:
            self._in_flight = False

        return self.state.step

    async def retreat(self) -> int:
        """
        Save if a session exists, then move to the previous step.
        Returns the step now showing.
        """
        if self._busy("retreat"):
            return self.state.step

        self._in_flight = True
        try:
            if self.state.session_id is not None:
                await self._save()
            self.state.step = clamp_step(self.state.step - 1)
        finally:
            self._in_flight = False

        return self.state.step

    async def hydrate(self) -> bool:
        """
        Overwrite local fields and step with the saved copy.

        A saved copy with no populated field counts as nothing saved, and
        any failure leaves local state as it was.
        """
        session_id = self.state.session_id
        if session_id is None or self._busy("hydrate"):
            return False

        self._in_flight = True
        try:
            saved = await self.api.load_form(session_id)
        finally:
            self._in_flight = False

        if saved is None or not saved.has_any_field():
            logger.info(
                "Nothing to restore for session",
                extra={"user_id": session_id},
            )
            return False

        self.state.fields = FormFields.from_saved(
            saved.email, saved.therapy_for_whom, saved.therapist_gender
        )
        self.state.step = clamp_step(saved.form_step or FIRST_STEP)
        logger.info(
            "Restored intake session",
            extra={"user_id": session_id, "form_step": self.state.step},
        )
        return True

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------

    def _busy(self, operation: str) -> bool:
        if self._in_flight:
            logger.warning(
                "Ignoring %s while a request is still pending",
                operation,
                extra={"user_id": self.state.session_id, "form_step": self.state.step},
            )
        return self._in_flight

    async def _create(self) -> None:
        created = await self.api.save_form(None, FIRST_STEP, self.state.fields)
        if created is None:
            # Carry on unsaved; the next advance from step 1 can try again.
            return

        self.state.assign_session_id(created.user_id)
        if self.url is not None:
            self.url.push_session_id(created.user_id)
        logger.info(
            "Created intake session",
            extra={"user_id": created.user_id, "form_step": FIRST_STEP},
        )

    async def _save(self) -> None:
        await self.api.save_form(self.state.session_id, self.state.step, self.state.fields)
