"""Unit tests for RateSettings."""

import pytest

from core.settings import RateSettings


class TestRateSettings:

    def test_defaults(self):
        s = RateSettings()
        assert s.frame_cap == 200
        assert s.tick_rate == 120
        assert not s.paused

    def test_tick_duration(self):
        s = RateSettings(tick_rate=120)
        assert s.tick_duration_ms() == pytest.approx(1000 / 120)

    def test_zero_tick_rate_pauses(self):
        s = RateSettings()
        s.set_tick_rate(0)
        assert s.paused
        assert s.tick_duration_ms() is None

    def test_poll_timeout(self):
        s = RateSettings(frame_cap=200)
        assert s.poll_timeout_ms() == 5
        s.set_frame_cap(30)
        assert s.poll_timeout_ms() == 33

    def test_zero_frame_cap_uses_one_ms(self):
        s = RateSettings()
        s.set_frame_cap(0)
        assert s.poll_timeout_ms() == 1

    def test_setters_clamp(self):
        s = RateSettings()
        s.set_frame_cap(1000)
        s.set_tick_rate(999)
        assert s.frame_cap == 240
        assert s.tick_rate == 200
        s.set_frame_cap(-5)
        s.set_tick_rate(-1)
        assert s.frame_cap == 0
        assert s.tick_rate == 0

    def test_setters_accept_floats(self):
        s = RateSettings()
        s.set_tick_rate(60.0)
        assert s.tick_rate == 60
        assert isinstance(s.tick_rate, int)
