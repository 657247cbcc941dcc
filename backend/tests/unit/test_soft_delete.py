"""Unit tests for the soft-delete lifecycle helpers."""

from datetime import datetime, timedelta, timezone

from cmsstore.domain.entities import Page
from cmsstore.domain.soft_delete import (
    DATETIME_FORMAT,
    MAX_DATETIME,
    is_soft_deleted,
    now_datetime_string,
    parse_datetime,
)


def test_sentinel_is_live():
    assert not is_soft_deleted(MAX_DATETIME)


def test_timestamp_equal_to_now_is_soft_deleted():
    now = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
    assert is_soft_deleted("2025-06-01 12:00:00", now=now)
    assert not is_soft_deleted("2025-06-01 12:00:01", now=now)


def test_future_timestamp_becomes_soft_deleted_when_the_clock_passes_it():
    moment = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone.utc)
    value = moment.strftime(DATETIME_FORMAT)
    assert not is_soft_deleted(value, now=moment - timedelta(seconds=1))
    assert is_soft_deleted(value, now=moment + timedelta(seconds=1))


def test_blank_or_malformed_timestamp_is_live():
    assert not is_soft_deleted("")
    assert not is_soft_deleted("not a date")
    assert parse_datetime("   ") is None


def test_parse_datetime_assumes_utc():
    parsed = parse_datetime("2025-01-02 03:04:05")
    assert parsed == datetime(2025, 1, 2, 3, 4, 5, tzinfo=timezone.utc)


def test_entity_soft_delete_state_follows_the_clock():
    page = Page()
    assert not page.is_soft_deleted
    page.soft_deleted_at = now_datetime_string()
    assert page.is_soft_deleted
    page.soft_deleted_at = "2999-01-01 00:00:00"
    assert not page.is_soft_deleted
