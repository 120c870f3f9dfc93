"""Use case for editing the signed-in user's display fields."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from arkad.domain.errors import AuthError, UseCaseError
from arkad.domain.models import UserProfile
from arkad.domain.ports import AuthPort
from arkad.usecases.error_mapping import map_api_error

MAX_FULL_NAME = 80
MAX_BIO = 280


@dataclass
class UpdateProfile:
    """Validate, push the update, then re-read the authoritative profile."""

    auth_port: AuthPort

    async def __call__(self, full_name: str, bio: Optional[str]) -> Optional[UserProfile]:
        name = str(full_name or "").strip()
        if not name or len(name) > MAX_FULL_NAME:
            raise UseCaseError(AuthError.INVALID_INPUT, "Full name must be 1-80 characters.")
        if bio is not None and len(bio) > MAX_BIO:
            raise UseCaseError(AuthError.INVALID_INPUT, "Bio must be at most 280 characters.")
        try:
            await self.auth_port.update_profile(name, bio)
        except Exception as exc:
            raise map_api_error(
                exc,
                default_code="PROFILE_UPDATE_FAILED",
                default_message="Failed to update profile.",
            ) from exc
        return self.auth_port.current_user()


__all__ = ["UpdateProfile"]
