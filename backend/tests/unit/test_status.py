"""Unit tests for the order / reservation status vocabulary."""

import pytest

from app.domain.entities import BookingStatus, is_open, next_statuses, normalize_status, parse_status


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("pending", "PENDING"),
        ("CANCELED", "CANCELLED"),
        ("cancelled", "CANCELLED"),
        ("REJECTING", "REJECTED"),
        ("InProgress", "IN_PROGRESS"),
        ("in-progress", "IN_PROGRESS"),
        (" completed ", "COMPLETED"),
    ],
)
def test_normalize_status_folds_known_variants(raw, expected):
    assert normalize_status(raw) == expected


def test_normalize_status_keeps_unknown_values_upper_cased():
    assert normalize_status("on_hold") == "ON_HOLD"
    assert normalize_status(None) == ""


def test_parse_status_rejects_unknown():
    assert parse_status("canceled") is BookingStatus.CANCELLED
    assert parse_status("shipped") is None
    assert parse_status("") is None


def test_next_statuses_are_advisory_follow_ups():
    assert next_statuses("PENDING") == ["ACCEPTED", "REJECTED", "CANCELLED"]
    assert next_statuses("accepted") == ["IN_PROGRESS", "COMPLETED", "CANCELLED"]
    assert next_statuses("IN_PROGRESS") == ["COMPLETED", "CANCELLED"]
    assert next_statuses("COMPLETED") == []
    assert next_statuses("mystery") == []


def test_is_open():
    assert is_open("PENDING")
    assert is_open("ACCEPTED")
    assert not is_open("COMPLETED")
    assert not is_open("canceled")
