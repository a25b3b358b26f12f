"""Page interaction state: hero slider, navigation drawer, scroll header, parallax.

Each controller owns its state explicitly; nothing lives at module level. Timers
go through a scheduler with a ``call_later(delay, callback)`` method returning a
handle with ``cancel()``, which is exactly what an asyncio event loop offers.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, List, Optional, Sequence, Tuple

log = logging.getLogger("uvicorn.error")

DEFAULT_SLIDE_PERIOD_MS = 7000
HEADER_ACTIVE_AT = 50
BACK_TOP_VIEWPORTS = 1.5
PARALLAX_RANGE = 10


class AsyncioScheduler:
    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None):
        self.loop = loop

    def call_later(self, delay: float, callback: Callable[[], Any]):
        loop = self.loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)


# ────────────────────────────────────────────────────────────────────────────
# Hero slider
# ────────────────────────────────────────────────────────────────────────────
class SliderState(Enum):
    RUNNING = "running"
    PAUSED = "paused"
    STOPPED = "stopped"


class SlideRotator:
    """Rotates through ``count`` slides every ``period_ms`` milliseconds.

    Transitions:
      start   any     -> RUNNING (timer re-armed)
      pause   RUNNING -> PAUSED  (pointer over the prev/next controls)
      resume  PAUSED  -> RUNNING (pointer left the controls)
      stop    any     -> STOPPED

    Every transition cancels the current timer before arming a new one, so at
    most one advance timer exists at any time.
    """

    def __init__(
        self,
        count: int,
        period_ms: int = DEFAULT_SLIDE_PERIOD_MS,
        scheduler=None,
        on_change: Optional[Callable[[int, int], None]] = None,
    ):
        if count < 1:
            raise ValueError("slider needs at least one slide")
        if period_ms <= 0:
            raise ValueError("slide period must be positive")
        self.count = count
        self.period_ms = period_ms
        self.scheduler = scheduler or AsyncioScheduler()
        self.on_change = on_change
        self.index = 0
        self.state = SliderState.STOPPED
        self._timer = None

    @property
    def timer_armed(self) -> bool:
        return self._timer is not None

    def start(self):
        self._cancel()
        self.state = SliderState.RUNNING
        self._arm()

    def pause(self):
        if self.state is not SliderState.RUNNING:
            return
        self._cancel()
        self.state = SliderState.PAUSED

    def resume(self):
        if self.state is not SliderState.PAUSED:
            return
        self.state = SliderState.RUNNING
        self._arm()

    def stop(self):
        self._cancel()
        self.state = SliderState.STOPPED

    def next(self) -> int:
        return self._go((self.index + 1) % self.count)

    def prev(self) -> int:
        return self._go((self.index - 1) % self.count)

    def _go(self, index: int) -> int:
        previous, self.index = self.index, index
        if self.on_change is not None:
            self.on_change(previous, index)
        return index

    def _arm(self):
        self._cancel()
        self._timer = self.scheduler.call_later(self.period_ms / 1000.0, self._tick)

    def _cancel(self):
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None

    def _tick(self):
        self._timer = None
        if self.state is not SliderState.RUNNING:
            return
        self.next()
        self._arm()


# ────────────────────────────────────────────────────────────────────────────
# Navigation drawer
# ────────────────────────────────────────────────────────────────────────────
class NavDrawer:
    def __init__(self):
        self.open = False

    @property
    def body_classes(self) -> List[str]:
        return ["nav-active"] if self.open else []

    def toggle(self) -> bool:
        self.open = not self.open
        return self.open

    def close_from_overlay(self) -> bool:
        if self.open:
            self.toggle()
        return self.open

    # links close the drawer too, after navigation has been kicked off
    close_from_link = close_from_overlay


# ────────────────────────────────────────────────────────────────────────────
# Scroll-driven header and back-to-top button
# ────────────────────────────────────────────────────────────────────────────
@dataclass
class HeaderState:
    active: bool = False
    hidden: bool = False
    back_top_visible: bool = False


class ScrollTracker:
    def __init__(self, viewport_height: float):
        self.viewport_height = viewport_height
        self.last_scroll_pos = 0.0
        self.state = HeaderState()

    def on_scroll(self, y: float, nav_open: bool = False) -> HeaderState:
        """Update header flags for a new scroll position.

        Ignored entirely while the navigation drawer is open. The header turns
        solid past ``HEADER_ACTIVE_AT`` px and hides while scrolling down; the
        back-to-top button shows after 1.5 viewport heights.
        """
        if nav_open:
            return self.state
        self.state.back_top_visible = y >= self.viewport_height * BACK_TOP_VIEWPORTS
        if y >= HEADER_ACTIVE_AT:
            self.state.active = True
            self.state.hidden = self.last_scroll_pos < y
            self.last_scroll_pos = y
        else:
            self.state.active = False
            self.state.hidden = False
        return self.state


def parallax_offsets(
    client_x: float,
    client_y: float,
    width: float,
    height: float,
    speeds: Sequence[float],
) -> List[Tuple[float, float]]:
    """Per-item ``translate3d`` offsets in px for a pointer position.

    The pointer maps to [-5, 5] on each axis, inverted so items drift away
    from the cursor, then scaled by each item's own speed.
    """
    if width <= 0 or height <= 0:
        return [(0.0, 0.0) for _ in speeds]
    x = -((client_x / width) * PARALLAX_RANGE - PARALLAX_RANGE / 2)
    y = -((client_y / height) * PARALLAX_RANGE - PARALLAX_RANGE / 2)
    return [(x * speed, y * speed) for speed in speeds]


# ────────────────────────────────────────────────────────────────────────────
# Page controller
# ────────────────────────────────────────────────────────────────────────────
class PageController:
    """Owns all interaction state for one mounted page."""

    def __init__(self, slide_count: int, viewport_height: float, *, period_ms: int = DEFAULT_SLIDE_PERIOD_MS, scheduler=None):
        self.slider = SlideRotator(slide_count, period_ms=period_ms, scheduler=scheduler)
        self.nav = NavDrawer()
        self.scroll = ScrollTracker(viewport_height)
        self.mounted = False

    def mount(self):
        self.mounted = True
        self.slider.start()
        log.debug("page controller mounted (%d slides)", self.slider.count)

    def on_scroll(self, y: float) -> HeaderState:
        return self.scroll.on_scroll(y, nav_open=self.nav.open)

    def on_pointer_over_controls(self):
        self.slider.pause()

    def on_pointer_out_controls(self):
        self.slider.resume()

    def teardown(self):
        self.slider.stop()
        self.mounted = False
