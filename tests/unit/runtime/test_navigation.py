"""Unit tests for the card navigation transition controller."""

from __future__ import annotations

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from atelier.works.core import CatalogSettings, NavigationState, NavigationTrigger
from atelier.works.runtime import ClickEvent, NavigationTransitionController


class FakeElement:
    """Animated sub-element that records subscriptions."""

    def __init__(self) -> None:
        self.activated = False
        self.listeners: list = []

    def mark_activated(self) -> None:
        self.activated = True

    def on_animation_end(self, callback):
        self.listeners.append(callback)

        def unsubscribe():
            if callback in self.listeners:
                self.listeners.remove(callback)

        return unsubscribe

    def finish_animation(self) -> None:
        for callback in list(self.listeners):
            callback()


class FinishedElement(FakeElement):
    """Element whose animation has already ended when a listener subscribes."""

    def on_animation_end(self, callback):
        unsubscribe = super().on_animation_end(callback)
        callback()
        return unsubscribe


class FakeCard:
    def __init__(self, element: FakeElement | None) -> None:
        self._element = element

    def animated_element(self):
        return self._element


class TestNavigationImmediateFallback:
    """Expected sub-element absent at click time."""

    @pytest.mark.asyncio
    async def test_fires_synchronously_and_cancels_timer(self):
        navigate = MagicMock(return_value=None)
        controller = NavigationTransitionController(navigate, timeout_ms=20)

        controller.on_click(ClickEvent(card=FakeCard(None), path="/all-works/alpha"))

        navigate.assert_called_once_with("/all-works/alpha")
        assert controller.state is NavigationState.FIRED
        assert controller.fired_by is NavigationTrigger.IMMEDIATE
        assert controller.timer_pending is False

        await asyncio.sleep(0.05)
        navigate.assert_called_once()
        assert controller.navigation_count == 1


class TestNavigationRace:
    """Only the first completion source has effect."""

    @pytest.mark.asyncio
    async def test_double_click_navigates_once(self):
        navigate = MagicMock(return_value=None)
        element = FakeElement()
        card = FakeCard(element)
        controller = NavigationTransitionController(navigate, timeout_ms=20)

        first = ClickEvent(card=card, path="/all-works/alpha")
        second = ClickEvent(card=card, path="/all-works/alpha")
        controller.on_click(first)
        controller.on_click(second)

        assert second.default_prevented
        assert len(element.listeners) == 1

        element.finish_animation()
        await asyncio.sleep(0.05)

        navigate.assert_called_once_with("/all-works/alpha")

    @pytest.mark.asyncio
    async def test_animation_end_wins(self):
        navigate = MagicMock(return_value=None)
        element = FakeElement()
        controller = NavigationTransitionController(navigate, timeout_ms=20)

        controller.on_click(ClickEvent(card=FakeCard(element), path="/all-works/beta"))
        assert element.activated
        assert controller.state is NavigationState.ARMED
        assert controller.timer_pending

        element.finish_animation()

        assert controller.fired_by is NavigationTrigger.ANIMATION_END
        assert controller.timer_pending is False
        assert element.listeners == []

        await asyncio.sleep(0.05)
        navigate.assert_called_once_with("/all-works/beta")

    @pytest.mark.asyncio
    async def test_animation_already_finished_cancels_timer_and_listener(self):
        """An element reporting the end while subscribing leaves nothing pending."""
        navigate = MagicMock(return_value=None)
        element = FinishedElement()
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.on_click(ClickEvent(card=FakeCard(element), path="/all-works/epsilon"))

        assert controller.state is NavigationState.FIRED
        assert controller.fired_by is NavigationTrigger.ANIMATION_END
        assert controller.timer_pending is False
        assert element.listeners == []

        await asyncio.sleep(0.03)
        navigate.assert_called_once_with("/all-works/epsilon")

    @pytest.mark.asyncio
    async def test_timeout_fallback_wins(self):
        navigate = MagicMock(return_value=None)
        element = FakeElement()
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.on_click(ClickEvent(card=FakeCard(element), path="/all-works/gamma"))
        navigate.assert_not_called()

        await asyncio.sleep(0.05)

        navigate.assert_called_once_with("/all-works/gamma")
        assert controller.fired_by is NavigationTrigger.TIMEOUT
        assert element.listeners == []

    @pytest.mark.asyncio
    async def test_late_triggers_are_noops(self):
        navigate = MagicMock(return_value=None)
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.on_click(ClickEvent(card=FakeCard(FakeElement()), path="/x"))
        assert controller.complete(NavigationTrigger.ANIMATION_END) is True
        assert controller.complete(NavigationTrigger.TIMEOUT) is False
        assert controller.complete(NavigationTrigger.IMMEDIATE) is False

        await asyncio.sleep(0.03)
        assert navigate.call_count == 1

    @pytest.mark.asyncio
    async def test_click_after_fired_ignored(self):
        navigate = MagicMock(return_value=None)
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.on_click(ClickEvent(card=FakeCard(None), path="/a"))
        controller.on_click(ClickEvent(card=FakeCard(None), path="/b"))

        navigate.assert_called_once_with("/a")

    def test_complete_while_idle_does_nothing(self):
        navigate = MagicMock()
        controller = NavigationTransitionController(navigate)

        assert controller.complete(NavigationTrigger.TIMEOUT) is False
        assert controller.state is NavigationState.IDLE
        navigate.assert_not_called()


class TestNavigationTeardown:
    @pytest.mark.asyncio
    async def test_teardown_cancels_pending_navigation(self):
        navigate = MagicMock(return_value=None)
        element = FakeElement()
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.on_click(ClickEvent(card=FakeCard(element), path="/all-works/delta"))
        controller.teardown()

        assert controller.timer_pending is False
        assert element.listeners == []
        await asyncio.sleep(0.03)
        navigate.assert_not_called()

    @pytest.mark.asyncio
    async def test_clicks_after_teardown_ignored(self):
        navigate = MagicMock(return_value=None)
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.teardown()
        controller.on_click(ClickEvent(card=FakeCard(None), path="/x"))

        navigate.assert_not_called()
        assert controller.state is NavigationState.IDLE


class TestNavigationConfiguration:
    @pytest.mark.asyncio
    async def test_async_navigate_is_scheduled(self):
        navigate = AsyncMock(return_value=None)
        controller = NavigationTransitionController(navigate, timeout_ms=10)

        controller.on_click(ClickEvent(card=FakeCard(None), path="/async"))
        assert controller.navigation_task is not None
        await controller.navigation_task

        navigate.assert_awaited_once_with("/async")

    @pytest.mark.asyncio
    async def test_timeout_defaults_to_settings(self):
        loop = asyncio.get_running_loop()
        navigate = MagicMock(return_value=None)
        controller = NavigationTransitionController(
            navigate, settings=CatalogSettings(navigation_timeout_ms=1500)
        )

        before = loop.time()
        controller.on_click(ClickEvent(card=FakeCard(FakeElement()), path="/slow"))

        assert controller.timer_pending
        assert controller._timer.when() - before == pytest.approx(1.5, abs=0.1)
        controller.teardown()
