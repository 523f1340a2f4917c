from datetime import datetime, timedelta, timezone

import pytest

from volmgmt.scansettings import Settings, UsageError, compile_regex, parse_size, parse_time
from volmgmt.sizes import format_bytes, parse_bytes

UTC = timezone.utc


def test_compile_empty_is_none():
    assert compile_regex("") is None


def test_compile_forces_case_insensitive():
    pattern = compile_regex("abc")
    assert pattern.pattern == "(?i)abc"
    assert pattern.search("xxABCxx")


def test_compile_keeps_existing_flag():
    assert compile_regex("(?i)abc").pattern == "(?i)abc"


def test_compile_invalid_raises_usage_error():
    with pytest.raises(UsageError, match="Unable to compile regular expression"):
        compile_regex("(")


def test_parse_size_empty_is_zero():
    assert parse_size("") == 0


def test_parse_size_matches_parse_bytes():
    assert parse_size("1 KiB") == parse_bytes("1024")


def test_parse_size_invalid():
    with pytest.raises(UsageError, match="Unable to parse file size"):
        parse_size("junk")


def test_parse_time_empty_is_none():
    assert parse_time("", UTC) is None


def test_parse_time_in_given_zone():
    assert parse_time("2021-03-04 05:06:07", UTC) == datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC)


def test_parse_time_keeps_explicit_offset():
    parsed = parse_time("2021-03-04T05:06:07+02:00", UTC)
    assert parsed.utcoffset() == timedelta(hours=2)


def test_parse_time_without_zone_is_aware():
    assert parse_time("2021-03-04 05:06:07").tzinfo is not None
    assert parse_time("2021-03-04 05:06:07").year == 2021


def test_parse_time_invalid():
    with pytest.raises(UsageError, match="Unable to parse time"):
        parse_time("not a time at all", UTC)


def test_summary_empty_with_single_reader():
    assert Settings(limit=1).summary() == ""


def test_summary_lines_in_order():
    settings = Settings(include=compile_regex("foo"), list_files=True, limit=1)
    assert settings.summary() == "Include: (?i)foo\nList Files: On\n"


def test_summary_flags_and_limit():
    settings = Settings(exclude=compile_regex("bar"), progress=True, verbose=True, limit=4)
    assert settings.summary() == (
        "Exclude: (?i)bar\nProgress: On\nVerbose: On\nConcurrent Reads: 4\n"
    )


def test_summary_sizes():
    settings = Settings(bigger_than=2000, smaller_than=5000, limit=1)
    assert settings.summary() == (
        f"Bigger Than: {format_bytes(2000)}\nSmaller Than: {format_bytes(5000)}\n"
    )


def test_summary_times():
    settings = Settings(after=datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC), limit=1)
    assert settings.summary() == "After: 2021-03-04 05:06:07 +0000 UTC\n"
    before = Settings(before=datetime(2021, 3, 4, 5, 6, 7, tzinfo=UTC), limit=1).summary()
    assert before.startswith("Before: 2021-03-04 05:06:07")