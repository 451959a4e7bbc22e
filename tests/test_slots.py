from datetime import datetime, timedelta, timezone

import pytest

from salon.models.tables import Appointments, OnlineAppointments
from salon.services.clock import BusinessClock
from salon.services.slots import (
    SlotPolicy,
    available_slots,
    booked_times,
    drop_elapsed,
    time_str_to_minutes,
)

TEMPLATE = ("09:00", "10:00", "11:00")
FULL_DAY = tuple(f"{h:02d}:{m:02d}" for h in range(8, 20) for m in (0, 30))


def fixed_clock(year, month, day, hour, minute=0, second=0):
    """BusinessClock frozen at the given UTC-3 wall time."""
    local = datetime(year, month, day, hour, minute, second, tzinfo=timezone(timedelta(hours=-3)))
    utc = local.astimezone(timezone.utc)
    return BusinessClock(-3, source=lambda: utc)


def add_online(db, date, time, status="pending"):
    db.add(OnlineAppointments(
        client_name="Ana",
        client_phone="11987654321",
        appointment_date=date,
        appointment_time=time,
        status=status,
    ))
    db.commit()


def add_manual(db, date, time, status="scheduled"):
    db.add(Appointments(appointment_date=date, appointment_time=time, status=status))
    db.commit()


def test_booked_slot_removed(db):
    add_online(db, "2024-06-01", "10:00", status="confirmed")
    clock = fixed_clock(2024, 5, 20, 12)

    slots = available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE), clock)

    assert slots == ["09:00", "11:00"]


def test_both_tables_are_merged(db):
    add_online(db, "2024-06-01", "09:00")
    add_manual(db, "2024-06-01", "11:00")
    clock = fixed_clock(2024, 5, 20, 12)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE), clock) == ["10:00"]
    assert booked_times(db, "2024-06-01") == {"09:00", "11:00"}


def test_cancelled_bookings_do_not_block(db):
    add_online(db, "2024-06-01", "09:00", status="cancelled")
    add_manual(db, "2024-06-01", "10:00", status="cancelled")
    clock = fixed_clock(2024, 5, 20, 12)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE), clock) == list(TEMPLATE)


def test_seconds_in_stored_time_are_ignored(db):
    add_manual(db, "2024-06-01", "10:00:00")
    clock = fixed_clock(2024, 5, 20, 12)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE), clock) == ["09:00", "11:00"]


def test_other_dates_do_not_block(db):
    add_online(db, "2024-06-02", "10:00")
    clock = fixed_clock(2024, 5, 20, 12)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE), clock) == list(TEMPLATE)


def test_today_drops_times_within_margin(db):
    clock = fixed_clock(2024, 6, 1, 9, 29)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE, 30), clock) == ["10:00", "11:00"]


def test_today_slot_at_exact_margin_is_closed(db):
    clock = fixed_clock(2024, 6, 1, 9, 30)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE, 30), clock) == ["11:00"]


def test_today_without_margin(db):
    clock = fixed_clock(2024, 6, 1, 9, 59, 59)

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE, 0), clock) == ["10:00", "11:00"]


def test_past_dates_are_not_time_filtered(db):
    clock = fixed_clock(2024, 6, 1, 23, 0)

    assert available_slots(db, "2024-05-31", SlotPolicy(TEMPLATE), clock) == list(TEMPLATE)


def test_malformed_date_matches_nothing(db):
    add_online(db, "2024-06-01", "10:00")
    clock = fixed_clock(2024, 6, 1, 8)

    assert available_slots(db, "01/06/2024", SlotPolicy(TEMPLATE), clock) == list(TEMPLATE)


def test_business_timezone_decides_today(db):
    # 01:00 UTC on June 2nd is still June 1st, 22:00 in the salon
    clock = BusinessClock(-3, source=lambda: datetime(2024, 6, 2, 1, 0, tzinfo=timezone.utc))

    assert available_slots(db, "2024-06-01", SlotPolicy(TEMPLATE), clock) == []
    assert available_slots(db, "2024-06-02", SlotPolicy(TEMPLATE), clock) == list(TEMPLATE)


@pytest.mark.parametrize("margin", [0, 15, 30, 90])
def test_today_never_offers_slots_before_cutoff(db, margin):
    add_online(db, "2024-06-01", "12:30")
    add_manual(db, "2024-06-01", "15:00")
    policy = SlotPolicy(FULL_DAY, margin)

    for minute_of_day in range(0, 24 * 60, 7):
        hour, minute = divmod(minute_of_day, 60)
        clock = fixed_clock(2024, 6, 1, hour, minute)
        cutoff = minute_of_day + margin

        slots = available_slots(db, "2024-06-01", policy, clock)

        assert "12:30" not in slots and "15:00" not in slots
        assert all(time_str_to_minutes(s) > cutoff for s in slots)
        expected = [
            s for s in FULL_DAY
            if s not in ("12:30", "15:00") and time_str_to_minutes(s) > cutoff
        ]
        assert slots == expected


def test_drop_elapsed_uses_seconds():
    now = datetime(2024, 6, 1, 9, 30, 1)
    assert drop_elapsed(["10:00", "10:01"], now, 30) == ["10:01"]


def test_time_conversions():
    assert time_str_to_minutes("09:30") == 570
    assert time_str_to_minutes("09:30:59") == 570


def test_policy_rejects_negative_margin():
    with pytest.raises(ValueError):
        SlotPolicy(TEMPLATE, -1)
