"""Credentials for authenticated API calls, owned and passed around by the caller."""

from __future__ import annotations

from dataclasses import dataclass

from fittrack.schemas.auth import AuthResponse, UserRead


@dataclass
class SessionContext:
    token: str | None = None
    user: UserRead | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.token is not None

    def sign_in(self, auth: AuthResponse) -> None:
        self.token = auth.token
        self.user = auth.user

    def clear(self) -> None:
        """Log out: forget both the token and the identity."""
        self.token = None
        self.user = None

    def authorization_header(self) -> dict[str, str]:
        if self.token is None:
            return {}
        return {"Authorization": f"Bearer {self.token}"}
