"""Tests for logging helpers."""

import logging

from common.logging_utils import Timer, extra_context, is_debug_enabled, safe_url


def test_safe_url_strips_credentials_and_query():
    assert safe_url("https://user:pw@repo.example.org:8443/maven2/x/?token=abc#frag") == (
        "https://repo.example.org:8443/maven2/x/"
    )


def test_extra_context_drops_none():
    assert extra_context(event="parse", target=None, count=0) == {"event": "parse", "count": 0}


def test_is_debug_enabled():
    logger = logging.getLogger("releasehunt.test")
    logger.setLevel(logging.INFO)
    assert not is_debug_enabled(logger)
    logger.setLevel(logging.DEBUG)
    assert is_debug_enabled(logger)


def test_timer_reports_non_negative_duration():
    with Timer() as t:
        pass
    assert t.duration_ms() >= 0
