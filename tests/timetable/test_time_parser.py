import pytest

from src.class_attendance.class_attendance.core.exceptions import TimeFormatError, ValidationError
from src.class_attendance.class_attendance.timetable.time_parser import (
    ReferenceTimeParser,
    StrictTimeParser,
    get_time_parser,
    parse_time_to_minutes,
)


@pytest.mark.parametrize(
    "text, expected",
    [
        ("9:00", 540),
        ("12:20", 740),
        ("2:50pm", 890),
        ("12:00am", 0),
        ("12:00pm", 720),
        ("12pm", 720),
        ("7am", 420),
        (" 14:05 ", 845),
        ("3:15 PM", 915),
        ("23:59", 1439),
        ("0:00", 0),
    ],
)
def test_reference_parser(text, expected):
    assert parse_time_to_minutes(text) == expected


def test_hour_without_suffix_is_taken_literally():
    # "2:00" is 02:00, not 14:00
    assert parse_time_to_minutes("2:00") == 120


@pytest.mark.parametrize("text", ["", "abc", "9:7", "9:60", "24:00", "13pm", "0am", "9:00xm", ":30"])
def test_reference_parser_rejects_malformed(text):
    with pytest.raises(TimeFormatError):
        parse_time_to_minutes(text)


def test_time_format_error_is_validation_error():
    with pytest.raises(ValidationError):
        ReferenceTimeParser().to_minutes("noon")


def test_strict_parser_accepts_only_padded_24h():
    parser = StrictTimeParser()
    assert parser.to_minutes("09:00") == 540
    assert parser.to_minutes("14:00") == 840

    for bad in ("9:00", "2:50pm", "24:00"):
        with pytest.raises(TimeFormatError):
            parser.to_minutes(bad)


def test_get_time_parser_by_name():
    assert isinstance(get_time_parser("strict"), StrictTimeParser)
    assert isinstance(get_time_parser("reference"), ReferenceTimeParser)
