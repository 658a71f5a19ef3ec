'''
Demonstration driver for the hotel domain model.

Builds guests, rooms, reservations and invoices from valid and invalid data
and prints what happens:
- construction of guests and rooms
- validation failures (empty name, bad email, past date, negative price)
- email checks through the validation facade
- updates through validated assignment
- billing a reservation and recomputing a stale invoice total
'''

import logging
from datetime import timedelta
from typing import Callable, Optional

from pydantic import BaseModel

from Billing.invoice import Invoice
from Config.settings import get_settings
from Guests.guest import Guest
from Hotels.booking import Reservation
from Hotels.structure import Room, Service
from Validation.errors import HotelError
from utils import today, validate_email

logger = logging.getLogger(__name__)


def attempt(label: str, build: Callable[[], object]) -> Optional[object]:
    '''Run build, printing the result or the validation failure under label.'''

    try:
        result = build()
    except HotelError as e:
        logger.warning("%s rejected", label, extra={"error": str(e)})
        print(f"{label}: {e}")
        return None
    if isinstance(result, BaseModel):
        print(f"{label}:\n{result}")
    return result


def demonstrate_creation() -> tuple[Guest, Room]:
    print(">>> Creating objects:")
    guest = Guest(first_name="John", last_name="Doe", email="john.doe@example.com",
                  check_in_date=today() + timedelta(days=1))
    other_guest = Guest(first_name="Alice", last_name="Brown", email="alice.brown@example.com",
                        check_in_date=today() + timedelta(days=2))
    room = Room(room_number=101, type="Single", capacity=1, price=500.0)
    other_room = Room(room_number=202, type="Double", capacity=2, price=750.0)
    for entity in (guest, other_guest, room, other_room):
        print(entity)
    return guest, room


def demonstrate_validation() -> None:
    print("\n>>> Demonstrating validation (successful and failed cases):")
    tomorrow = today() + timedelta(days=1)
    attempt("Valid guest created", lambda: Guest(
        first_name="Emma", last_name="White", email="emma.white@example.com",
        check_in_date=today() + timedelta(days=3)))
    attempt("Invalid guest (empty first name)", lambda: Guest(
        first_name="", last_name="Stone", email="invalid@example.com", check_in_date=tomorrow))
    attempt("Invalid guest (email format)", lambda: Guest(
        first_name="Tom", last_name="Green", email="wrong_email", check_in_date=tomorrow))
    attempt("Invalid guest (past date)", lambda: Guest(
        first_name="Sara", last_name="Moon", email="sara.moon@example.com",
        check_in_date=today() - timedelta(days=2)))
    attempt("Invalid room (negative price)", lambda: Room(
        room_number=303, type="Suite", capacity=2, price=-200.0))


def demonstrate_email_checks() -> None:
    print("\n>>> Demonstrating email checks:")
    for email in ("example@mail.com", "wrong@@mail"):
        print(f"Email {email} valid? {validate_email(email)}")


def demonstrate_updates(guest: Guest, room: Room) -> None:
    print("\n>>> Demonstrating updates:")
    guest.last_name = "Doe-Smith"
    room.price = 600.0
    print(f"Updated guest:\n{guest}")
    print(f"Updated room:\n{room}")

    def zero_price() -> None:
        room.price = 0

    attempt("Unsuccessful case (zero price)", zero_price)


def demonstrate_billing(guest: Guest, room: Room) -> Invoice:
    print("\n>>> Demonstrating billing:")
    start = today() + timedelta(days=1)
    reservation = Reservation(guest=guest, room=room, start_date=start, end_date=start + timedelta(days=3))
    reservation.add_service(Service(name="Breakfast", price=50))
    reservation.add_service(Service(name="Parking", price=30))
    invoice = Invoice(reservation=reservation, issue_date=today())
    print(f"Total before calculation: {invoice.total_amount}")
    print(f"Total after calculation: {invoice.calculate_total_amount()}")

    reservation.add_service(Service(name="Laundry", price=20))
    print(f"Total after adding a service (not recomputed): {invoice.total_amount}")
    print(f"Total after recomputing: {invoice.calculate_total_amount()}")

    attempt("Invalid reservation (end before start)", lambda: Reservation(
        guest=guest, room=room, start_date=start, end_date=start - timedelta(days=1)))
    return invoice


def main() -> None:
    settings = get_settings()
    logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    logger.info("Starting hotel demo", extra={"timezone": settings.timezone})

    print("=== DEMONSTRATION OF THE HOTEL DOMAIN ===\n")
    guest, room = demonstrate_creation()
    demonstrate_validation()
    demonstrate_email_checks()
    demonstrate_updates(guest, room)
    demonstrate_billing(guest, room)
    print("\n=== END OF DEMONSTRATION ===")


if __name__ == "__main__":
    main()
