"""Async client for the FitTrack API.

Each call makes exactly one request: no retries, backoff or request
coalescing. Credentials live in a ``SessionContext`` the caller owns; a 401
from any endpoint clears it before ``UnauthorizedError`` is raised.

Usage:
    session = SessionContext()
    async with FitTrackClient(session) as client:
        await client.login("me@example.com", "secret123")
        await client.sync_workout(workout)
"""

from __future__ import annotations

import logging
import uuid
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from fittrack.client.errors import (
    DecodingError,
    InvalidURLError,
    NoDataError,
    ServerError,
    UnauthorizedError,
)
from fittrack.client.session import SessionContext
from fittrack.core.config import get_settings
from fittrack.models.workout import Workout
from fittrack.schemas.auth import AuthResponse
from fittrack.schemas.common import ErrorResponse, MessageResponse
from fittrack.schemas.workout import WorkoutResponse, WorkoutSyncRequest, WorkoutSyncResponse
from fittrack.services.sync_transcoding import to_sync_request, workout_from_response

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FitTrackClient:
    def __init__(
        self,
        session: SessionContext,
        base_url: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
        timeout: float | None = None,
    ):
        settings = get_settings()
        self.session = session
        self.base_url = (base_url or settings.api_base_url).rstrip("/")
        self._http = httpx.AsyncClient(
            transport=transport,
            timeout=timeout if timeout is not None else settings.request_timeout_seconds,
            headers={"Content-Type": "application/json"},
        )

    async def __aenter__(self) -> "FitTrackClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._http.aclose()

    # --- Generic request ---

    def _url(self, endpoint: str) -> httpx.URL:
        try:
            url = httpx.URL(self.base_url + endpoint)
        except httpx.InvalidURL as e:
            raise InvalidURLError() from e
        if url.scheme not in ("http", "https") or not url.host:
            raise InvalidURLError()
        return url

    @staticmethod
    def _error_message(response: httpx.Response) -> str:
        try:
            return ErrorResponse.model_validate_json(response.content).error
        except ValidationError:
            return f"Server error: {response.status_code}"

    async def _request(
        self,
        endpoint: str,
        response_type: type[T] | Any,
        method: str = "GET",
        payload: BaseModel | dict | None = None,
        requires_auth: bool = False,
    ) -> T:
        url = self._url(endpoint)
        headers = self.session.authorization_header() if requires_auth else {}
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")

        try:
            response = await self._http.request(method, url, json=payload, headers=headers)
        except httpx.TransportError as e:
            logger.warning("%s %s failed: %s", method, endpoint, e)
            raise NoDataError() from e

        if response.status_code == 401:
            logger.info("%s %s returned 401; clearing session", method, endpoint)
            self.session.clear()
            raise UnauthorizedError()
        if response.status_code >= 400:
            message = self._error_message(response)
            logger.warning("%s %s failed with %d: %s", method, endpoint, response.status_code, message)
            raise ServerError(message, status_code=response.status_code)
        if not response.content:
            raise NoDataError()

        try:
            return TypeAdapter(response_type).validate_json(response.content)
        except ValidationError as e:
            logger.warning("Decoding error: %s; response data: %s", e, response.text)
            raise DecodingError() from e

    # --- Authentication ---

    async def register(self, email: str, password: str) -> AuthResponse:
        auth = await self._request(
            "/auth/register",
            AuthResponse,
            method="POST",
            payload={"email": email, "password": password},
        )
        self.session.sign_in(auth)
        return auth

    async def login(self, email: str, password: str) -> AuthResponse:
        auth = await self._request(
            "/auth/login",
            AuthResponse,
            method="POST",
            payload={"email": email, "password": password},
        )
        self.session.sign_in(auth)
        return auth

    def logout(self) -> None:
        self.session.clear()

    # --- Workouts ---

    async def sync_workout(self, workout: Workout | WorkoutSyncRequest) -> WorkoutSyncResponse:
        """Push a workout; the server stores it as a new record."""
        if isinstance(workout, Workout):
            workout = to_sync_request(workout)
        return await self._request(
            "/workouts",
            WorkoutSyncResponse,
            method="POST",
            payload=workout,
            requires_auth=True,
        )

    async def replace_workout(
        self, workout_id: uuid.UUID | str, workout: Workout | WorkoutSyncRequest
    ) -> WorkoutResponse:
        """Overwrite a synced workout entirely (scalars and exercise tree)."""
        if isinstance(workout, Workout):
            workout = to_sync_request(workout)
        return await self._request(
            f"/workouts/{workout_id}",
            WorkoutResponse,
            method="PUT",
            payload=workout,
            requires_auth=True,
        )

    async def fetch_workouts(self) -> list[WorkoutResponse]:
        return await self._request("/workouts", list[WorkoutResponse], requires_auth=True)

    async def fetch_workout(self, workout_id: uuid.UUID | str) -> WorkoutResponse:
        return await self._request(f"/workouts/{workout_id}", WorkoutResponse, requires_auth=True)

    async def pull_workouts(self) -> list[Workout]:
        """Server workouts as unsaved models; nothing is merged with local data."""
        return [workout_from_response(w) for w in await self.fetch_workouts()]

    async def delete_workout(self, workout_id: uuid.UUID | str) -> MessageResponse:
        return await self._request(
            f"/workouts/{workout_id}",
            MessageResponse,
            method="DELETE",
            requires_auth=True,
        )
