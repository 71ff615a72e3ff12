"""Argument vectors and output parsing of each dialog type."""

from __future__ import annotations

from datetime import date

import pytest
from pydantic import ValidationError

from zenity_bridge.core.domain.applications import (
    Calendar,
    Entry,
    ErrorMessage,
    InfoMessage,
    Question,
    WarningMessage,
)
from zenity_bridge.core.domain.month import Month
from zenity_bridge.core.errors import ParseResultError


def test_defaults_render_only_the_mode_flag():
    assert InfoMessage().to_argv() == ["--info"]
    assert WarningMessage().to_argv() == ["--warning"]
    assert ErrorMessage().to_argv() == ["--error"]
    assert Question().to_argv() == ["--question"]
    assert Entry().to_argv() == ["--entry"]
    assert Calendar().to_argv() == ["--calendar"]


def test_info_options_in_order():
    info = InfoMessage(text="Done", ok_label="Great", no_wrap=True, no_markup=True, ellipsize=True)
    assert info.to_argv() == [
        "--info",
        "--text=Done",
        "--ok-label=Great",
        "--no-wrap",
        "--no-markup",
        "--ellipsize",
    ]


def test_warning_shares_message_options():
    warning = WarningMessage().with_text("Disk almost full").set_ellipsize()
    assert warning.to_argv() == ["--warning", "--text=Disk almost full", "--ellipsize"]


def test_error_builders_return_copies():
    base = ErrorMessage(text="Boom")
    configured = base.set_no_wrap().set_no_markup()
    assert base.to_argv() == ["--error", "--text=Boom"]
    assert configured.to_argv() == ["--error", "--text=Boom", "--no-wrap", "--no-markup"]


def test_question_options_in_order():
    question = (
        Question(text="Delete?")
        .with_ok_label("Delete")
        .with_cancel_label("Keep")
        .set_no_wrap()
        .set_default_cancel()
    )
    assert question.to_argv() == [
        "--question",
        "--text=Delete?",
        "--ok-label=Delete",
        "--cancel-label=Keep",
        "--no-wrap",
        "--default-cancel",
    ]


def test_entry_options_in_order():
    entry = Entry(text="Password").with_entry_text("hunter2").set_hide_text()
    assert entry.to_argv() == ["--entry", "--text=Password", "--entry-text=hunter2", "--hide-text"]
    assert entry.parse("typed") == "typed"


def test_calendar_renders_month_as_number():
    calendar = Calendar(text="Pick", day=17).with_month(10).with_year(2026)
    assert calendar.month is Month.OCTOBER
    assert calendar.to_argv() == ["--calendar", "--text=Pick", "--day=17", "--month=10", "--year=2026"]


def test_calendar_custom_format_without_parsing():
    calendar = Calendar().with_format("%Y-%m-%d")
    assert calendar.to_argv() == ["--calendar", "--date-format=%Y-%m-%d"]
    assert calendar.parse("2026-10-17") == "2026-10-17"


def test_calendar_parsing_always_sends_a_format():
    calendar = Calendar().set_parse_date()
    assert calendar.to_argv() == ["--calendar", "--date-format=%d/%m/%y"]
    assert calendar.parse("17/10/26") == date(2026, 10, 17)


def test_calendar_parsing_uses_custom_format():
    calendar = Calendar(format="%Y-%m-%d", parse_date=True)
    assert calendar.parse("2026-10-17\n") == date(2026, 10, 17)


def test_calendar_parse_failure_raises():
    with pytest.raises(ParseResultError):
        Calendar(parse_date=True).parse("not a date")


@pytest.mark.parametrize("day", [0, 32])
def test_calendar_rejects_impossible_days(day):
    with pytest.raises(ValidationError):
        Calendar(day=day)
