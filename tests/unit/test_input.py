"""Unit tests for keyboard command translation and polling."""

import pygame
import pytest

from core.input import Command, KeyboardInput, translate_key


class FakeEventQueue:
    """Stands in for pygame.event.wait / pygame.time.get_ticks."""

    def __init__(self, events, cost_ms=1):
        self.events = list(events)
        self.now = 0
        self.cost_ms = cost_ms
        self.waits = []

    def get_ticks(self):
        return self.now

    def wait(self, timeout):
        self.waits.append(timeout)
        if self.events:
            self.now += self.cost_ms
            return self.events.pop(0)
        self.now += timeout
        return pygame.event.Event(pygame.NOEVENT)


@pytest.fixture
def queue(monkeypatch):
    def install(events, cost_ms=1):
        q = FakeEventQueue(events, cost_ms)
        monkeypatch.setattr(pygame.event, "wait", q.wait)
        monkeypatch.setattr(pygame.time, "get_ticks", q.get_ticks)
        return q
    return install


def keydown(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


class TestTranslateKey:

    def test_mapped_keys(self):
        assert translate_key(pygame.K_w) is Command.BUMP_UP
        assert translate_key(pygame.K_s) is Command.BUMP_DOWN
        assert translate_key(pygame.K_SPACE) is Command.SPAWN

    @pytest.mark.parametrize("key", [pygame.K_q, pygame.K_ESCAPE, pygame.K_a, pygame.K_RETURN])
    def test_other_keys_quit(self, key):
        assert translate_key(key) is Command.QUIT


class TestKeyboardInput:

    def test_timeout_is_noop(self, queue):
        q = queue([])
        assert KeyboardInput().poll(5) is Command.NONE
        assert q.waits == [5]

    def test_key_press(self, queue):
        queue([keydown(pygame.K_SPACE)])
        assert KeyboardInput().poll(5) is Command.SPAWN

    def test_window_close_quits(self, queue):
        queue([pygame.event.Event(pygame.QUIT)])
        assert KeyboardInput().poll(5) is Command.QUIT

    def test_non_key_events_keep_waiting(self, queue):
        q = queue([pygame.event.Event(pygame.MOUSEMOTION, pos=(1, 1), rel=(0, 0), buttons=(0, 0, 0)),
                   keydown(pygame.K_w)])
        assert KeyboardInput().poll(10) is Command.BUMP_UP
        assert q.waits == [10, 9]

    def test_non_key_events_do_not_extend_timeout(self, queue):
        q = queue([pygame.event.Event(pygame.KEYUP, key=pygame.K_w)] * 3, cost_ms=2)
        assert KeyboardInput().poll(5) is Command.NONE
        assert q.now == 6

    def test_zero_timeout_waits_at_least_one_ms(self, queue):
        q = queue([])
        assert KeyboardInput().poll(0) is Command.NONE
        assert q.waits == [1]
