"""Click-to-navigate transition controller for content cards.

Architecture:
    A card click starts an exit animation and should change route when it
    ends. Three independent sources can signal completion:

    1. the animated element's animation-end event (subscribed once)
    2. a fallback timer, in case the event never fires
    3. an immediate fallback when the animated element is absent

    They race. Each source only *attempts* the ``armed -> fired``
    transition in ``complete()``; the first attempt cancels the other
    pending sources and invokes the route change, later attempts are
    no-ops. Clicks while armed or fired are ignored.

    One controller per card instance (or per list when a list must allow a
    single navigation across all its cards). ``teardown()`` is called when
    the card goes away; it cancels pending sources without navigating.
"""

from __future__ import annotations

import asyncio
import inspect
from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import Protocol

from ..core.config import CatalogSettings
from ..core.enums import NavigationState, NavigationTrigger
from .telemetry import Telemetry

Navigate = Callable[[str], Awaitable[None] | None]


class AnimatedElement(Protocol):
    """The card sub-element that plays the exit animation."""

    def mark_activated(self) -> None:
        """Start the exit animation."""
        ...

    def on_animation_end(self, callback: Callable[[], None]) -> Callable[[], None]:
        """Subscribe ``callback`` to animation end; returns an unsubscribe function."""
        ...


class CardView(Protocol):
    def animated_element(self) -> AnimatedElement | None:
        ...


@dataclass
class ClickEvent:
    """A user click on a card."""

    card: CardView
    path: str
    default_prevented: bool = False

    def prevent_default(self) -> None:
        self.default_prevented = True


class NavigationTransitionController:
    """Turns card clicks into exactly one route change."""

    def __init__(
        self,
        navigate: Navigate,
        *,
        timeout_ms: int | None = None,
        settings: CatalogSettings | None = None,
        telemetry: Telemetry | None = None,
        loop: asyncio.AbstractEventLoop | None = None,
    ) -> None:
        """Initialize controller.

        Args:
            navigate: Route-change primitive, sync or async
            timeout_ms: Fallback delay (defaults to settings.navigation_timeout_ms)
            settings: Catalog settings
            telemetry: Logger capability
            loop: Event loop for the timer (defaults to the running loop at click time)
        """
        settings = settings or CatalogSettings()
        self._navigate = navigate
        self._timeout_ms = settings.navigation_timeout_ms if timeout_ms is None else timeout_ms
        self._telemetry = telemetry or Telemetry.quiet()
        self._loop = loop

        self._state = NavigationState.IDLE
        self._path: str | None = None
        self._timer: asyncio.TimerHandle | None = None
        self._unsubscribe: Callable[[], None] | None = None
        self._task: asyncio.Future | None = None
        self._torn_down = False
        self.fired_by: NavigationTrigger | None = None
        self.navigation_count = 0

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def path(self) -> str | None:
        return self._path

    @property
    def timer_pending(self) -> bool:
        """True while the fallback timer is scheduled and not cancelled."""
        return self._timer is not None and not self._timer.cancelled()

    @property
    def navigation_task(self) -> asyncio.Future | None:
        """Task running an async route change, if any."""
        return self._task

    def on_click(self, event: ClickEvent) -> None:
        """Handle a click on the card."""
        event.prevent_default()
        if self._torn_down or self._state is not NavigationState.IDLE:
            self._telemetry.debug(
                "navigation_click_ignored", path=event.path, state=self._state.value
            )
            return

        self._loop = self._loop or asyncio.get_running_loop()
        self._state = NavigationState.ARMED
        self._path = event.path
        self._telemetry.debug("navigation_armed", path=event.path)

        self._timer = self._loop.call_later(self._timeout_ms / 1000.0, self._on_timeout)

        element = event.card.animated_element()
        if element is not None:
            element.mark_activated()
            unsubscribe = element.on_animation_end(self._on_animation_end)
            if self._state is NavigationState.ARMED:
                self._unsubscribe = unsubscribe
            else:
                # Animation ended during subscription
                unsubscribe()
            return

        self._telemetry.debug("navigation_element_missing", path=event.path)
        self.complete(NavigationTrigger.IMMEDIATE)

    def complete(self, trigger: NavigationTrigger) -> bool:
        """Attempt the ``armed -> fired`` transition.

        Returns:
            True if this call performed the navigation
        """
        if self._torn_down or self._state is not NavigationState.ARMED:
            return False

        self._state = NavigationState.FIRED
        self.fired_by = trigger
        self._cancel_pending()

        path = self._path or ""
        self.navigation_count += 1
        self._telemetry.debug("navigation_fired", path=path, trigger=trigger.value)

        result = self._navigate(path)
        if inspect.isawaitable(result):
            self._task = asyncio.ensure_future(result, loop=self._loop)
        return True

    def teardown(self) -> None:
        """Cancel pending completion sources; never navigates afterwards."""
        self._cancel_pending()
        self._torn_down = True

    def _on_animation_end(self) -> None:
        self.complete(NavigationTrigger.ANIMATION_END)

    def _on_timeout(self) -> None:
        self._timer = None
        if self._state is NavigationState.ARMED:
            self._telemetry.debug("navigation_timeout_fallback", path=self._path)
        self.complete(NavigationTrigger.TIMEOUT)

    def _cancel_pending(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
        if self._unsubscribe is not None:
            self._unsubscribe()
            self._unsubscribe = None
