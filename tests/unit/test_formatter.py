import os
import time

from datetime import datetime, timezone
from pathlib import Path

import pytest

from logger_factory.logger import caller_label, render
from logger_factory.logger import fields as fields_module
from logger_factory.logger.fields import RuntimeFields, display_error, local_time, uptime

NOW = datetime(2026, 3, 4, 5, 6, 7, 8_000, tzinfo=timezone.utc)


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        ("/srv/app/index.js", "Index"),
        ("C:\\projects\\app\\index.ts", "Index"),
        ("/srv/app/worker", "Worker"),
        ("/srv/app/my.module.py", "My.module"),
        ("/srv/app/camelCase.py", "CamelCase"),
        ("", ""),
        (None, ""),
    ],
)
def test_caller_label(filename, expected):
    assert caller_label(filename) == expected


def test_caller_label_replacement():
    assert caller_label("/srv/app/index.js", {"Index": "Main"}) == "Main"
    assert caller_label("/srv/app/other.js", {"Index": "Main"}) == "Other"


def test_every_occurrence_is_replaced():
    assert render("$[message] and $[message]", RuntimeFields("hi")) == "hi and hi"


def test_substituted_values_are_not_rescanned():
    assert render("$[message]", RuntimeFields("$[pid]")) == "$[pid]"


def test_unknown_and_malformed_tokens_are_left_alone():
    template = "$[bogus] $[message $message] $[]"
    assert render(template, RuntimeFields("hi")) == template


def test_date_fields_are_unpadded():
    fields = RuntimeFields("hi", now=NOW)
    rendered = render("$[month]/$[day]/$[year] $[hour]:$[minute]:$[second].$[ms]", fields)
    assert rendered == "3/4/2026 5:6:7.8"


def test_time_and_timezone():
    fields = RuntimeFields("hi", now=NOW)
    assert render("$[time]", fields) == "3/4/2026, 5:06:07 AM"
    assert render("$[timezone]", fields) == "UTC"


def test_process_fields():
    rendered = render("$[pid] $[ppid]", RuntimeFields("hi"))
    assert rendered == f"{os.getpid()} {os.getppid()}"
    assert float(render("$[uptime]", RuntimeFields("hi"))) >= 0


def test_time_uses_an_unpadded_twelve_hour_clock():
    assert local_time(datetime(2026, 12, 31, 0, 5, 9)) == "12/31/2026, 12:05:09 AM"
    assert local_time(datetime(2026, 1, 2, 13, 0, 0)) == "1/2/2026, 1:00:00 PM"


@pytest.mark.skipif(not Path("/proc/self/stat").exists(), reason="needs /proc")
def test_uptime_is_the_age_of_the_process():
    since_import = time.monotonic() - fields_module._STARTED_AT
    assert uptime() >= since_import - 0.05


def test_uptime_falls_back_to_time_since_import(monkeypatch, tmp_path):
    monkeypatch.setattr(fields_module, "_STAT", tmp_path / "missing")
    measured = uptime()
    assert 0 <= measured <= time.monotonic() - fields_module._STARTED_AT


def test_caller_and_error_fields():
    fields = RuntimeFields("hi", error=KeyError("id"), caller="Main")
    assert render("[$[caller]] $[err]", fields) == "[Main] KeyError: 'id'"


def test_memory_units_agree_within_one_render():
    rendered = render("$[memory-b] $[memory-kb] $[memory-mb] $[memory-rss]", RuntimeFields("hi"))
    b, kb, mb, rss = rendered.split(" ")
    assert int(b) > 0
    assert b == rss
    assert float(kb) == int(b) / 1024
    assert float(mb) == int(b) / (1024 * 1024)


def test_memory_summary_lists_every_figure():
    summary = render("$[memory]", RuntimeFields("hi"))
    assert summary.startswith("rss=")
    assert "heap_total=" in summary
    assert "heap_used=" in summary
    assert summary.endswith("external=")


def test_failing_field_degrades_to_empty_string(monkeypatch):
    def broken():
        raise RuntimeError("no stats")

    monkeypatch.setattr(fields_module, "memory_usage", broken)
    assert render("<$[memory-rss]> $[message]", RuntimeFields("hi")) == "<> hi"


@pytest.mark.parametrize(
    ("error", "expected"),
    [
        (None, ""),
        (ValueError("boom"), "ValueError: boom"),
        (ValueError(), "ValueError"),
        ("plain text", "plain text"),
        (42, "42"),
    ],
)
def test_display_error(error, expected):
    assert display_error(error) == expected
