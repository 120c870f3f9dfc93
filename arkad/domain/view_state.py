"""Immutable snapshot published by view-state controllers."""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
S = TypeVar("S")


@dataclass(frozen=True)
class ViewState(Generic[T, S]):
    """Observable state of one screen.

    Attributes:
        data: Domain payload from the last successfully completed fetch.
        loading: ``True`` while a fetch issued by the controller is pending.
        selection: Selector the payload was (or is being) fetched for.
        error: User-facing message of the last failed command, if any.
    """

    data: T
    loading: bool = False
    selection: Optional[S] = None
    error: Optional[str] = None

    def evolve(self, **changes) -> "ViewState[T, S]":
        """Return a new snapshot with ``changes`` applied."""
        return replace(self, **changes)


__all__ = ["ViewState"]
