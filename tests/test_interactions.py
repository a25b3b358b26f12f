"""
Tests for page interaction state: slider timer lifecycle, nav drawer,
scroll-driven header flags and parallax offsets.
"""

import pytest

from interactions import (
    NavDrawer,
    PageController,
    ScrollTracker,
    SlideRotator,
    SliderState,
    parallax_offsets,
)

PERIOD_S = 7.0


@pytest.fixture
def slider(scheduler):
    return SlideRotator(3, period_ms=7000, scheduler=scheduler)


class TestSlideRotator:

    def test_advances_once_per_period(self, slider, scheduler):
        slider.start()
        scheduler.advance(PERIOD_S - 1.0)
        assert slider.index == 0
        scheduler.advance(1.0)
        assert slider.index == 1

    def test_wraps_from_last_to_first(self, slider, scheduler):
        slider.start()
        scheduler.advance(PERIOD_S * 3)
        assert slider.index == 0
        scheduler.advance(PERIOD_S)
        assert slider.index == 1

    def test_manual_navigation_wraps(self, slider):
        assert slider.prev() == 2
        assert slider.next() == 0
        assert slider.next() == 1

    def test_pause_stops_advancing(self, slider, scheduler):
        slider.start()
        slider.pause()
        assert slider.state is SliderState.PAUSED
        assert not slider.timer_armed
        scheduler.advance(PERIOD_S * 5)
        assert slider.index == 0

    def test_resume_does_not_overlap_timers(self, slider, scheduler):
        slider.start()
        scheduler.advance(3.0)
        slider.pause()
        slider.resume()
        slider.resume()
        assert len(scheduler.pending) == 1
        scheduler.advance(PERIOD_S)
        assert slider.index == 1

    def test_repeated_pause_resume_keeps_single_timer(self, slider, scheduler):
        slider.start()
        for _ in range(5):
            slider.pause()
            slider.resume()
        slider.start()
        assert len(scheduler.pending) == 1
        scheduler.advance(PERIOD_S)
        assert slider.index == 1

    def test_resume_without_pause_is_ignored(self, slider, scheduler):
        slider.resume()
        assert slider.state is SliderState.STOPPED
        assert scheduler.pending == []

    def test_stop_cancels_timer(self, slider, scheduler):
        slider.start()
        slider.stop()
        assert scheduler.pending == []
        scheduler.advance(PERIOD_S * 2)
        assert slider.index == 0

    def test_on_change_reports_transition(self, scheduler):
        seen = []
        s = SlideRotator(2, scheduler=scheduler, on_change=lambda old, new: seen.append((old, new)))
        s.start()
        scheduler.advance(PERIOD_S * 2)
        assert seen == [(0, 1), (1, 0)]

    @pytest.mark.parametrize("count, period", [(0, 7000), (3, 0)])
    def test_invalid_configuration(self, scheduler, count, period):
        with pytest.raises(ValueError):
            SlideRotator(count, period_ms=period, scheduler=scheduler)


class TestNavDrawer:

    def test_toggle(self):
        nav = NavDrawer()
        assert nav.toggle() is True
        assert nav.body_classes == ["nav-active"]
        assert nav.toggle() is False
        assert nav.body_classes == []

    def test_overlay_and_link_only_close(self):
        nav = NavDrawer()
        assert nav.close_from_overlay() is False
        nav.toggle()
        assert nav.close_from_link() is False
        assert nav.open is False


class TestScrollTracker:

    def test_header_activates_past_threshold(self):
        tracker = ScrollTracker(viewport_height=800)
        assert tracker.on_scroll(49).active is False
        state = tracker.on_scroll(50)
        assert state.active is True
        assert state.hidden is True

    def test_header_shows_again_on_scroll_up(self):
        tracker = ScrollTracker(viewport_height=800)
        tracker.on_scroll(400)
        state = tracker.on_scroll(300)
        assert state.active is True
        assert state.hidden is False

    def test_back_top_after_one_and_a_half_viewports(self):
        tracker = ScrollTracker(viewport_height=800)
        assert tracker.on_scroll(1199).back_top_visible is False
        assert tracker.on_scroll(1200).back_top_visible is True
        assert tracker.on_scroll(10).back_top_visible is False

    def test_ignored_while_nav_open(self):
        tracker = ScrollTracker(viewport_height=800)
        state = tracker.on_scroll(2000, nav_open=True)
        assert state.active is False
        assert state.back_top_visible is False
        assert tracker.last_scroll_pos == 0


class TestParallax:

    def test_centre_is_still(self):
        assert parallax_offsets(500, 300, 1000, 600, [1, 2]) == [(0.0, 0.0), (0.0, 0.0)]

    def test_offsets_inverted_and_scaled_per_item(self):
        offsets = parallax_offsets(0, 600, 1000, 600, [1, 2])
        assert offsets == [(5.0, -5.0), (10.0, -10.0)]

    def test_zero_viewport(self):
        assert parallax_offsets(1, 1, 0, 0, [1]) == [(0.0, 0.0)]


class TestPageController:

    def test_lifecycle(self, scheduler):
        page = PageController(3, viewport_height=800, scheduler=scheduler)
        page.mount()
        page.on_pointer_over_controls()
        scheduler.advance(PERIOD_S * 2)
        assert page.slider.index == 0
        page.on_pointer_out_controls()
        scheduler.advance(PERIOD_S)
        assert page.slider.index == 1
        page.teardown()
        assert scheduler.pending == []
        assert page.mounted is False

    def test_scroll_respects_open_nav(self, scheduler):
        page = PageController(1, viewport_height=800, scheduler=scheduler)
        page.nav.toggle()
        assert page.on_scroll(500).active is False
