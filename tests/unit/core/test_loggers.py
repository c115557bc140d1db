from __future__ import annotations

"""
Unit tests for the logger implementations.

Verifies:
1. The d/i/w/e call shapes and message assembly.
2. The enabled switch, filters and the read-once pending tag.
3. DebugLogger tag derivation, chunking and destinations.
"""

import logging
import os
import sys
import threading

import pytest

from logify.core import callsite
from logify.core.formatter import render_exception
from logify.core.loggers import DebugLogger
from logify.domain.config import LoggerConfig
from logify.domain.levels import Level

MODULE_TAIL = __name__.rsplit(".", 1)[-1]


def _raised(exc: BaseException) -> BaseException:
    try:
        raise exc
    except BaseException as caught:
        return caught


# -----------------------------------------------------------------------------
# BaseLogger
# -----------------------------------------------------------------------------

def test_each_method_maps_to_its_level(recorder):
    recorder.d("a")
    recorder.i("b")
    recorder.w("c")
    recorder.e("d")

    assert [r[0] for r in recorder.records] == [Level.DEBUG, Level.INFO, Level.WARNING, Level.ERROR]
    assert recorder.messages == ["a", "b", "c", "d"]


def test_exception_only_call_logs_rendered_trace(recorder):
    exc = _raised(OSError("disk"))

    recorder.e(exc)

    level, _, message, logged_exc = recorder.records[0]
    assert level is Level.ERROR
    assert message == render_exception(exc)
    assert logged_exc is exc


def test_exception_with_formatted_message(recorder):
    exc = _raised(ValueError("bad"))

    recorder.w(exc, "retry %d of %d", 2, 3)

    assert recorder.messages == ["retry 2 of 3\n" + render_exception(exc)]


def test_exception_with_none_message_uses_trace(recorder):
    exc = _raised(ValueError("bad"))
    recorder.d(exc, None)
    assert recorder.messages == [render_exception(exc)]


def test_empty_message_without_exception_is_dropped(recorder):
    recorder.i("")
    recorder.i()
    assert recorder.records == []


def test_non_string_message_is_stringified(recorder):
    recorder.i(42)
    assert recorder.messages == ["42"]


def test_bad_format_arguments_propagate(recorder):
    with pytest.raises(TypeError):
        recorder.i("%d", "x")


def test_disabled_logger_drops_everything_until_reenabled(recorder):
    recorder.filters.set_levels([Level.ERROR])
    recorder.is_logging_enabled = False
    recorder.e("hidden")

    recorder.is_logging_enabled = True
    recorder.i("filtered")
    recorder.e("shown")

    assert recorder.messages == ["shown"]


def test_pending_tag_is_read_once(recorder):
    recorder.set_tag("X").i("first")
    recorder.i("second")

    assert recorder.tags == ["X", None]


def test_pending_tag_is_thread_local(recorder):
    recorder.set_tag("Main")
    seen = []

    def worker():
        recorder.i("from worker")
        seen.append(recorder.tags[-1])

    t = threading.Thread(target=worker)
    t.start()
    t.join()

    recorder.i("from main")
    assert seen == [None]
    assert recorder.tags[-1] == "Main"


def test_tag_filter_applies_to_resolved_tag(recorder):
    recorder.filters.set_tags(["Net"])

    recorder.set_tag("Net").i("kept")
    recorder.i("untagged")
    recorder.set_tag("Db").i("other")

    assert recorder.messages == ["kept"]


def test_filtered_call_still_consumes_pending_tag(recorder):
    recorder.filters.set_levels([Level.ERROR])
    recorder.set_tag("X").i("dropped")
    recorder.e("kept")

    assert recorder.tags == [None]


def test_stack_trace_logs_and_returns_frames(recorder):
    text = recorder.stack_trace()

    assert "test_stack_trace_logs_and_returns_frames" in text
    assert recorder.messages == ["stackTrace\n" + text]
    assert recorder.records[0][0] is Level.INFO


def test_stack_trace_with_custom_header(recorder):
    text = recorder.stack_trace("checkpoint")
    assert recorder.messages[0].startswith("checkpoint\n")
    assert text


# -----------------------------------------------------------------------------
# DebugLogger
# -----------------------------------------------------------------------------

class CollectingLogger(DebugLogger):
    """DebugLogger whose emitted bodies are kept for inspection."""

    def __init__(self, config=None):
        super().__init__(config)
        self.bodies = []

    def emit(self, level, body):
        self.bodies.append((level, body))


def test_console_line_uses_auto_tag(capsys):
    logger = DebugLogger(LoggerConfig(base_tag="UnitPlain", tag_detail=False))

    logger.i("hello")

    err = capsys.readouterr().err
    assert f"[I] UnitPlain: {MODULE_TAIL} -> hello" in err
    logger.close()


def test_auto_tag_detail_has_function_and_line():
    logger = CollectingLogger(LoggerConfig(base_tag="UnitDetail"))

    line = sys._getframe().f_lineno + 1
    logger.w("careful")

    level, body = logger.bodies[0]
    assert level is Level.WARNING
    assert body == f"{MODULE_TAIL}:test_auto_tag_detail_has_function_and_line:{line} -> careful"
    logger.close()


def test_auto_tag_inside_method_uses_class_name():
    logger = CollectingLogger(LoggerConfig(base_tag="UnitClass", tag_detail=False))

    class Checkout:
        def run(self):
            logger.i("paid")

    Checkout().run()

    assert logger.bodies[0][1] == "Checkout -> paid"
    logger.close()


def test_explicit_tag_wins_then_auto_tag_returns():
    logger = CollectingLogger(LoggerConfig(base_tag="UnitOnce", tag_detail=False))

    logger.set_tag("X").i("one")
    logger.i("two")

    assert [b for _, b in logger.bodies] == ["X -> one", f"{MODULE_TAIL} -> two"]
    logger.close()


def test_static_fallback_tag_without_call_site(monkeypatch):
    monkeypatch.setattr(callsite, "find_call_site", lambda *args, **kwargs: None)
    logger = CollectingLogger(LoggerConfig(base_tag="UnitFallback"))

    logger.i("x")

    assert logger.bodies[0][1] == "Logify -> x"
    logger.close()


def test_long_message_is_emitted_in_chunks():
    logger = CollectingLogger(LoggerConfig(base_tag="UnitChunks"))

    logger.set_tag("T").e("z" * 9000)

    assert [len(b) for _, b in logger.bodies] == [len("T -> ") + n for n in (4000, 4000, 1000)]
    assert all(level is Level.ERROR for level, _ in logger.bodies)
    logger.close()


def test_file_destination_only_when_path_configured(tmp_path):
    console_only = DebugLogger(LoggerConfig(base_tag="UnitNoFile"))
    with_file = DebugLogger(LoggerConfig(base_tag="UnitFile", log_path=str(tmp_path / "logs")))

    assert console_only.file_sink is None
    with_file.set_tag("Disk").i("persisted")

    day_dirs = os.listdir(tmp_path / "logs")
    assert len(day_dirs) == 1
    files = os.listdir(tmp_path / "logs" / day_dirs[0])
    content = (tmp_path / "logs" / day_dirs[0] / files[0]).read_text(encoding="utf-8")
    assert content.endswith("[I] UnitFile: Disk -> persisted\n")

    console_only.close()
    with_file.close()


def test_system_style_defers_to_host_handlers(caplog):
    logger = DebugLogger(LoggerConfig(base_tag="UnitSystem", use_system_style=True))

    with caplog.at_level(logging.DEBUG, logger="UnitSystem"):
        logger.set_tag("Host").d("native")

    assert caplog.records[-1].name == "UnitSystem"
    assert caplog.records[-1].levelno == logging.DEBUG
    assert caplog.records[-1].getMessage() == "Host -> native"
    logger.close()
