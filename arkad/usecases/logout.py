from __future__ import annotations

from dataclasses import dataclass

from arkad.domain.ports import AuthPort
from arkad.usecases.error_mapping import map_api_error


@dataclass
class Logout:
    """End the session; the service clears its own authoritative state."""

    auth_port: AuthPort

    async def __call__(self) -> None:
        try:
            await self.auth_port.logout()
        except Exception as exc:
            raise map_api_error(exc, default_code="LOGOUT_FAILED", default_message="Failed to sign out.") from exc
