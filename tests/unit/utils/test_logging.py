"""Test structured logging setup."""
import io
import json

import pytest
import structlog

from numberflow.diffing.formatted_diff import diff_formatted
from numberflow.diffing.raw_diff import diff_raw
from numberflow.models.changes import CursorContext
from numberflow.utils.logging import get_logger, setup_logging


@pytest.fixture(autouse=True)
def _reset_structlog():
    yield
    structlog.reset_defaults()


def _bad_context():
    return CursorContext(cursor_position=9, selection_start=0, old_length=3)


class TestSetupLogging:
    def test_json_output(self, capsys):
        setup_logging("INFO")
        get_logger("numberflow.test").info("edit_processed", kind="insert")
        line = capsys.readouterr().out.strip().splitlines()[-1]
        payload = json.loads(line)
        assert payload["event"] == "edit_processed"
        assert payload["kind"] == "insert"
        assert payload["level"] == "info"
        assert payload["component"] == "numberflow.test"
        assert "timestamp" in payload

    def test_debug_fallback_events_filtered_at_info(self, capsys):
        setup_logging("INFO")
        diff_raw("123", "1234", _bad_context())
        assert "raw_diff_fallback" not in capsys.readouterr().out

    def test_debug_fallback_events_visible_at_debug(self, capsys):
        setup_logging("debug")
        diff_raw("123", "1234", _bad_context())
        assert "raw_diff_fallback" in capsys.readouterr().out

    def test_level_defaults_to_settings(self, monkeypatch):
        monkeypatch.setenv("NUMBERFLOW_LOG_LEVEL", "DEBUG")
        stream = io.StringIO()
        setup_logging(stream=stream)
        diff_formatted("1,234", "12,345", CursorContext(cursor_position=5, selection_start=0, old_length=99))

        events = [json.loads(line) for line in stream.getvalue().splitlines()]
        fallback = next(e for e in events if e["event"] == "formatted_diff_fallback")
        assert fallback["component"] == "numberflow.diffing.formatted_diff"
        assert fallback["old_length"] == 99

    def test_unknown_level_rejected(self):
        with pytest.raises(ValueError):
            setup_logging("bogus")
