"""Tests for structured logging and log hooks."""

from __future__ import annotations

import logging

import pytest
import structlog

import optres
from optres import add_log_hook, clear_log_hooks, configure_logging, remove_log_hook, wrap
from optres._logging import logging_enabled


@pytest.fixture
def configured():
    """Configure logging at DEBUG and restore the previous state afterwards."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    configure_logging('DEBUG')
    yield
    structlog.reset_defaults()
    root.handlers[:] = handlers
    root.setLevel(level)


def fails():
    raise ValueError('boom')


class TestLogging:
    def test_silent_until_configured(self) -> None:
        events = []
        add_log_hook(events.append)
        assert not logging_enabled()
        wrap(fails)
        assert events == []

    def test_capture_is_logged(self, configured) -> None:
        events = []
        add_log_hook(events.append)
        wrap(fails)
        captured = [e for e in events if e['event'] == 'exception_captured']
        assert len(captured) == 1
        assert captured[0]['boundary'] == 'wrap'
        assert captured[0]['exc_type'] == 'ValueError'
        assert captured[0]['exc_message'] == 'boom'

    def test_remove_hook(self, configured) -> None:
        events = []
        add_log_hook(events.append)
        remove_log_hook(events.append)
        wrap(fails)
        assert events == []

    def test_clear_hooks(self, configured) -> None:
        events = []
        add_log_hook(events.append)
        clear_log_hooks()
        wrap(fails)
        assert events == []

    def test_failing_hook_does_not_break_logging(self, configured) -> None:
        events = []

        def broken(event):
            raise RuntimeError('hook failed')

        add_log_hook(broken)
        add_log_hook(events.append)
        assert wrap(fails).is_err()
        assert len(events) == 1

    def test_hook_api_is_public(self) -> None:
        for name in ('add_log_hook', 'remove_log_hook', 'clear_log_hooks', 'configure_logging'):
            assert name in optres.__all__
            assert callable(getattr(optres, name))
