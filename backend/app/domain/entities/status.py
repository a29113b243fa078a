"""Order / reservation status vocabulary.

The remote API owns the status of every order and reservation; the values
seen in the wild are inconsistent (``CANCELLED`` vs ``CANCELED``, a stray
``REJECTING``). Everything that reads a status goes through
``normalize_status`` so filters and counters agree on one spelling.
"""

from enum import Enum


class BookingStatus(str, Enum):
    """Canonical statuses shared by orders and reservations."""

    PENDING = "PENDING"
    ACCEPTED = "ACCEPTED"
    REJECTED = "REJECTED"
    IN_PROGRESS = "IN_PROGRESS"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


_ALIASES: dict[str, BookingStatus] = {
    "CANCELED": BookingStatus.CANCELLED,
    "REJECTING": BookingStatus.REJECTED,
    "INPROGRESS": BookingStatus.IN_PROGRESS,
    "IN-PROGRESS": BookingStatus.IN_PROGRESS,
}

# Follow-up statuses offered in the status dropdown. Not enforced: the
# server decides whether a transition is accepted.
_NEXT: dict[BookingStatus, tuple[BookingStatus, ...]] = {
    BookingStatus.PENDING: (
        BookingStatus.ACCEPTED,
        BookingStatus.REJECTED,
        BookingStatus.CANCELLED,
    ),
    BookingStatus.ACCEPTED: (
        BookingStatus.IN_PROGRESS,
        BookingStatus.COMPLETED,
        BookingStatus.CANCELLED,
    ),
    BookingStatus.IN_PROGRESS: (
        BookingStatus.COMPLETED,
        BookingStatus.CANCELLED,
    ),
}


def parse_status(raw: str | None) -> BookingStatus | None:
    """Map a raw status string to a BookingStatus, or None if unknown."""
    key = (raw or "").strip().upper()
    if not key:
        return None
    if key in _ALIASES:
        return _ALIASES[key]
    try:
        return BookingStatus(key)
    except ValueError:
        return None


def normalize_status(raw: str | None) -> str:
    """Return the canonical spelling of ``raw``; unknown values are upper-cased."""
    known = parse_status(raw)
    if known is not None:
        return known.value
    return (raw or "").strip().upper()


def next_statuses(raw: str | None) -> list[str]:
    known = parse_status(raw)
    if known is None:
        return []
    return [s.value for s in _NEXT.get(known, ())]


def is_open(raw: str | None) -> bool:
    """True while a booking is neither completed nor cancelled."""
    return normalize_status(raw) not in (
        BookingStatus.COMPLETED.value,
        BookingStatus.CANCELLED.value,
    )
