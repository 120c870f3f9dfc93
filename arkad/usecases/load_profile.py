from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from arkad.domain.models import UserProfile
from arkad.domain.ports import AuthPort
from arkad.usecases.error_mapping import map_api_error


@dataclass
class LoadProfile:
    """Refresh the session from the auth service and return the signed-in user."""

    auth_port: AuthPort

    async def __call__(self) -> Optional[UserProfile]:
        try:
            await self.auth_port.load_session()
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="PROFILE_FAILED",
                default_message="Failed to load profile.",
            ) from exc
        return self.auth_port.current_user()
