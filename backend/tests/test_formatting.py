from datetime import datetime, timedelta, timezone

from gainz.formatting import display_name, session_duration, session_status, set_summary

T0 = datetime(2025, 12, 17, 9, 0, tzinfo=timezone.utc)


def test_status():
    assert session_status(None) == "Active"
    assert session_status(T0) == "Completed"


def test_duration_minutes_only():
    assert session_duration(T0, T0 + timedelta(minutes=42, seconds=59)) == "42m"
    assert session_duration(T0, T0) == "0m"


def test_duration_hours_and_minutes():
    assert session_duration(T0, T0 + timedelta(hours=1, minutes=5)) == "1h 5m"
    assert session_duration(T0, T0 + timedelta(hours=2)) == "2h 0m"


def test_duration_runs_until_now_when_active():
    assert session_duration(T0, None, now=T0 + timedelta(minutes=90)) == "1h 30m"


def test_duration_accepts_naive_store_values():
    naive_start = T0.replace(tzinfo=None)
    assert session_duration(naive_start, T0 + timedelta(minutes=10)) == "10m"


def test_duration_missing_or_backwards():
    assert session_duration(None, T0) is None
    assert session_duration(T0, T0 - timedelta(minutes=1)) is None


def test_set_summary():
    assert set_summary(8, 225) == "8 reps × 225.0 lbs"
    assert set_summary(10, 82.25) == "10 reps × 82.2 lbs"


def test_display_name():
    assert display_name("Squat") == "Squat"
    assert display_name("") == "Unnamed"
    assert display_name(None) == "Unnamed"
