"""Tests for relative token ages (core/humanize.py).

Coverage:
* RFC 3339 parsing — accepted and rejected shapes.
* Duration rendering — unit selection and truncation at each boundary.
* ``humanize_created`` / ``humanize_timestamp`` never raise.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from robot_tokens.core.humanize import (
    NOT_AVAILABLE,
    human_duration,
    humanize_created,
    humanize_timestamp,
    parse_rfc3339,
)


def _rfc3339(moment: datetime) -> str:
    return moment.strftime("%Y-%m-%dT%H:%M:%SZ")


# ---------------------------------------------------------------------------
# parse_rfc3339
# ---------------------------------------------------------------------------

class TestParseRfc3339:
    def test_utc_designator(self) -> None:
        parsed = parse_rfc3339("2024-01-02T03:04:05Z")
        assert parsed == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_lowercase_separators(self) -> None:
        parsed = parse_rfc3339("2024-01-02t03:04:05z")
        assert parsed == datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)

    def test_positive_offset(self) -> None:
        parsed = parse_rfc3339("2024-01-02T05:04:05+02:00")
        assert parsed is not None
        assert parsed.astimezone(timezone.utc) == datetime(
            2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc,
        )

    def test_negative_offset(self) -> None:
        parsed = parse_rfc3339("2024-01-01T22:04:05-05:00")
        assert parsed is not None
        assert parsed.astimezone(timezone.utc) == datetime(
            2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc,
        )

    def test_nanosecond_fraction_truncated(self) -> None:
        parsed = parse_rfc3339("2024-01-02T03:04:05.123456789Z")
        assert parsed is not None
        assert parsed.microsecond == 123456

    def test_short_fraction_padded(self) -> None:
        parsed = parse_rfc3339("2024-01-02T03:04:05.5Z")
        assert parsed is not None
        assert parsed.microsecond == 500000

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "not-a-date",
            "2024-01-02",
            "2024-01-02T03:04:05",
            "2024-01-02 03:04:05Z",
            "2024-13-02T03:04:05Z",
            "2024-02-30T03:04:05Z",
            "2024-01-02T03:04:05+24:00",
            "1717243200",
        ],
    )
    def test_rejected(self, value: str) -> None:
        assert parse_rfc3339(value) is None


# ---------------------------------------------------------------------------
# human_duration
# ---------------------------------------------------------------------------

class TestHumanDuration:
    @pytest.mark.parametrize(
        ("delta", "expected"),
        [
            (timedelta(seconds=-5), "<invalid>"),
            (timedelta(seconds=-1), "0s"),
            (timedelta(0), "0s"),
            (timedelta(seconds=59), "59s"),
            (timedelta(seconds=60), "1m"),
            (timedelta(seconds=119), "1m"),
            (timedelta(minutes=2, seconds=30), "2m"),
            (timedelta(minutes=59, seconds=59), "59m"),
            (timedelta(seconds=3600), "1h"),
            (timedelta(seconds=7200), "2h"),
            (timedelta(hours=3, minutes=59), "3h"),
            (timedelta(hours=23, minutes=59), "23h"),
            (timedelta(seconds=90000), "1d"),
            (timedelta(hours=50), "2d"),
            (timedelta(days=7, hours=23), "7d"),
            (timedelta(days=364, hours=23), "364d"),
            (timedelta(days=365), "1y"),
            (timedelta(days=740), "2y"),
            (timedelta(days=365 * 10 + 100), "10y"),
        ],
    )
    def test_unit_selection(self, delta: timedelta, expected: str) -> None:
        assert human_duration(delta) == expected

    def test_sub_second_remainder_truncated(self) -> None:
        assert human_duration(timedelta(seconds=59, milliseconds=999)) == "59s"


# ---------------------------------------------------------------------------
# humanize_timestamp / humanize_created
# ---------------------------------------------------------------------------

class TestHumanizeTimestamp:
    def test_two_hours_ago(self, now: datetime) -> None:
        created = _rfc3339(now - timedelta(seconds=7200))
        assert humanize_timestamp(created, now) == "2h"

    def test_none_is_not_available(self, now: datetime) -> None:
        assert humanize_timestamp(None, now) == NOT_AVAILABLE

    def test_garbage_is_not_available(self, now: datetime) -> None:
        assert humanize_timestamp("yesterday", now) == NOT_AVAILABLE

    def test_non_string_value_is_coerced(self, now: datetime) -> None:
        assert humanize_timestamp(12345, now) == NOT_AVAILABLE

    def test_unprintable_value_is_not_available(self, now: datetime) -> None:
        class _Unprintable:
            def __str__(self) -> str:
                raise RuntimeError("boom")

        assert humanize_timestamp(_Unprintable(), now) == NOT_AVAILABLE

    def test_naive_now_treated_as_utc(self, now: datetime) -> None:
        created = _rfc3339(now - timedelta(days=3))
        assert humanize_timestamp(created, now.replace(tzinfo=None)) == "3d"

    def test_defaults_to_current_time(self) -> None:
        created = _rfc3339(datetime.now(timezone.utc) - timedelta(days=3))
        assert humanize_timestamp(created) == "3d"


class TestHumanizeCreated:
    def test_missing_key(self, now: datetime) -> None:
        assert humanize_created({}, now) == NOT_AVAILABLE

    def test_other_keys_ignored(self, now: datetime) -> None:
        assert humanize_created({"updatedAt": _rfc3339(now)}, now) == NOT_AVAILABLE

    def test_none_value(self, now: datetime) -> None:
        assert humanize_created({"createdAt": None}, now) == NOT_AVAILABLE

    def test_unparsable_value(self, now: datetime) -> None:
        assert humanize_created({"createdAt": "2024-06-01"}, now) == NOT_AVAILABLE

    def test_nested_value(self, now: datetime) -> None:
        assert humanize_created({"createdAt": {"seconds": 1}}, now) == NOT_AVAILABLE

    def test_valid_value(self, now: datetime) -> None:
        meta = {"createdAt": _rfc3339(now - timedelta(minutes=5, seconds=7))}
        assert humanize_created(meta, now) == "5m"
