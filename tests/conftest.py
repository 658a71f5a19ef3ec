"""Shared fixtures for the hotel domain tests."""

from datetime import date, timedelta
from pathlib import Path
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from Config.settings import LOG_LEVEL_ENV, TIMEZONE_ENV, get_settings  # noqa: E402
from Guests.guest import Guest  # noqa: E402
from Hotels.booking import Reservation  # noqa: E402
from Hotels.structure import Room, Service  # noqa: E402


@pytest.fixture(autouse=True)
def local_settings(monkeypatch: pytest.MonkeyPatch):
    """Run every test against default settings so "today" is the local date."""

    monkeypatch.delenv(LOG_LEVEL_ENV, raising=False)
    monkeypatch.delenv(TIMEZONE_ENV, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture()
def tomorrow() -> date:
    return date.today() + timedelta(days=1)


@pytest.fixture()
def guest(tomorrow: date) -> Guest:
    return Guest(
        first_name="Ada",
        last_name="Lovelace",
        email="ada.lovelace@example.com",
        check_in_date=tomorrow,
    )


@pytest.fixture()
def room() -> Room:
    return Room(room_number=101, type="Single", capacity=1, price=500.0)


@pytest.fixture()
def reservation(guest: Guest, room: Room, tomorrow: date) -> Reservation:
    return Reservation(
        guest=guest,
        room=room,
        start_date=tomorrow,
        end_date=tomorrow + timedelta(days=3),
    )


@pytest.fixture()
def breakfast() -> Service:
    return Service(name="Breakfast", price=50)
