"""Base controller owning one observable :class:`ViewState`.

Call context:
    ``LeaderboardVM`` and ``ProfileVM`` subclass :class:`ViewStateController`
    and implement ``_fetch``. Views subscribe to snapshots and issue commands
    from the asyncio event loop that drives the UI.

Threading:
    The controller binds to the running event loop on its first command.
    Fetches may run on worker threads inside adapters, but their results are
    awaited and applied on the bound loop only, so observers never see a
    half-applied snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Any, Awaitable, Callable, Generic, List, Optional, Set, TypeVar

from arkad.domain.errors import UseCaseError
from arkad.domain.view_state import ViewState

T = TypeVar("T")
S = TypeVar("S")
R = TypeVar("R")

StateObserver = Callable[[ViewState], None]

LOGGER = logging.getLogger(__name__)


class ViewStateController(Generic[T, S]):
    """Own a ``ViewState`` snapshot and serialize every mutation onto one loop.

    Overlapping ``refresh`` calls are not deduplicated: each one issues its
    own fetch and, by default, whichever completes last wins. With
    ``discard_stale=True`` a generation counter drops any result whose
    request has been superseded.
    """

    def __init__(
        self,
        *,
        initial_data: T,
        default_selection: Optional[S] = None,
        discard_stale: bool = False,
        on_state_changed: Optional[StateObserver] = None,
    ) -> None:
        self._state: ViewState[T, S] = ViewState(data=initial_data, selection=default_selection)
        self.default_selection = default_selection
        self.discard_stale = bool(discard_stale)
        self._observers: List[StateObserver] = []
        if on_state_changed is not None:
            self._observers.append(on_state_changed)
        self._loop: Optional[asyncio.AbstractEventLoop] = None
        self._tasks: Set[asyncio.Task] = set()
        self._generation = 0
        self._closed = False

    # ------------------------------------------------------------------
    # Observation
    # ------------------------------------------------------------------
    @property
    def state(self) -> ViewState[T, S]:
        return self._state

    @property
    def data(self) -> T:
        return self._state.data

    @property
    def loading(self) -> bool:
        return self._state.loading

    @property
    def selection(self) -> Optional[S]:
        return self._state.selection

    @property
    def error(self) -> Optional[str]:
        return self._state.error

    def subscribe(self, observer: StateObserver) -> Callable[[], None]:
        """Register ``observer`` for every new snapshot; returns an unsubscribe callable."""
        self._observers.append(observer)

        def _unsubscribe() -> None:
            if observer in self._observers:
                self._observers.remove(observer)

        return _unsubscribe

    # ------------------------------------------------------------------
    # Commands
    # ------------------------------------------------------------------
    def initialize(self) -> asyncio.Task:
        """Reset the selector to its default and start the initial fetch."""
        self._bind_loop()
        self._apply(selection=self.default_selection)
        return self.refresh()

    def refresh(self) -> asyncio.Task:
        """Set ``loading`` and fetch for the current selector."""
        self._bind_loop()
        self._generation += 1
        generation = self._generation
        selection = self._state.selection
        self._apply(loading=True)
        return self._spawn(self._run_fetch(generation, selection))

    def change_selection(self, selection: S) -> asyncio.Task:
        self._bind_loop()
        self._apply(selection=selection)
        return self.refresh()

    def acknowledge_error(self) -> None:
        """Clear the error slot after the UI has shown it."""
        if self._state.error is None:
            return
        self._bind_loop()
        self._apply(error=None)

    async def wait_idle(self) -> None:
        """Wait until every task spawned so far has settled."""
        while self._tasks:
            await asyncio.gather(*list(self._tasks), return_exceptions=True)

    def close(self) -> None:
        """Detach observers; results of in-flight tasks are ignored from now on."""
        self._closed = True
        self._observers.clear()

    # ------------------------------------------------------------------
    # Subclass hooks
    # ------------------------------------------------------------------
    async def _fetch(self, selection: Optional[S]) -> T:
        raise NotImplementedError

    # ------------------------------------------------------------------
    # Internal helpers
    # ------------------------------------------------------------------
    async def _run_fetch(self, generation: int, selection: Optional[S]) -> None:
        try:
            data = await self._fetch(selection)
        except Exception as exc:
            if self._is_stale(generation):
                LOGGER.debug("%s: ignoring failure of superseded request %d", type(self).__name__, generation)
                return
            LOGGER.warning("%s: fetch for %r failed: %s", type(self).__name__, selection, exc)
            self._apply(loading=False, error=self.error_message(exc))
            return
        if self._is_stale(generation):
            LOGGER.debug("%s: dropping result of superseded request %d", type(self).__name__, generation)
            return
        self._apply(data=data, loading=False, error=None)

    def _is_stale(self, generation: int) -> bool:
        if self._closed:
            return True
        return self.discard_stale and generation != self._generation

    def _spawn(self, coro: Awaitable[R]) -> "asyncio.Task[R]":
        loop = self._bind_loop()
        task = loop.create_task(coro)
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    def _bind_loop(self) -> asyncio.AbstractEventLoop:
        try:
            running = asyncio.get_running_loop()
        except RuntimeError:
            raise RuntimeError(
                f"{type(self).__name__} commands must be issued from the UI event loop"
            ) from None
        if self._loop is None:
            self._loop = running
        elif running is not self._loop:
            raise RuntimeError(f"{type(self).__name__} is bound to a different event loop")
        return running

    def _apply(self, **changes: Any) -> None:
        """Replace the snapshot in one step and notify observers."""
        if self._closed:
            return
        self._bind_loop()
        self._state = self._state.evolve(**changes)
        for observer in list(self._observers):
            observer(self._state)

    @staticmethod
    def error_message(exc: Exception) -> str:
        if isinstance(exc, UseCaseError):
            return exc.message
        return str(exc) or "Unexpected error."


__all__ = ["StateObserver", "ViewStateController"]
