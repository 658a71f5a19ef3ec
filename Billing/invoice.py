"""Invoice model billing a reservation's room and services."""
import logging
from datetime import date
from textwrap import indent
from typing import Any

from pydantic import BaseModel, ConfigDict, PrivateAttr, field_validator

from Hotels.booking import Reservation
from Validation.errors import HotelError
from utils import require_instance, require_not_past

logger = logging.getLogger(__name__)


class Invoice(BaseModel):
    """
    Invoice issued for a reservation.

    The total starts at 0 and only changes when calculate_total_amount() is
    called; later changes to the reservation leave it stale until then.
    """

    model_config = ConfigDict(validate_assignment=True)

    reservation: Reservation
    issue_date: date
    _total_amount: float = PrivateAttr(default=0.0)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except HotelError as e:
            raise e.with_context("Invalid invoice's value.") from e

    @field_validator("reservation", mode="before")
    @classmethod
    def validate_reservation(cls, value: Any) -> Any:
        return require_instance(value, Reservation, "reservation", "Reservation")

    @field_validator("issue_date", mode="before")
    @classmethod
    def validate_issue_date(cls, value: Any) -> Any:
        return require_not_past(value, "issue_date", "Issue date")

    @property
    def total_amount(self) -> float:
        return self._total_amount

    def calculate_total_amount(self) -> float:
        """
        Recompute the total as the room price plus every service price.

        Returns:
            float: The new total, also stored on the invoice.
        """
        total = float(self.reservation.room.price)
        for service in self.reservation.services:
            total += service.price
        self._total_amount = total
        logger.debug(
            "Invoice total recomputed",
            extra={"room_number": self.reservation.room.room_number, "total_amount": total},
        )
        return total

    def __hash__(self) -> int:
        return hash((self.reservation, self.issue_date, self._total_amount))

    def __str__(self) -> str:
        return (
            f"Invoice reservation:\n{indent(str(self.reservation), '  ')}"
            f"Invoice total amount: {self._total_amount}\n"
            f"Invoice issue date: {self.issue_date.isoformat()}\n"
        )

    def to_dict(self) -> dict[str, Any]:
        return {
            "reservation": self.reservation.to_dict(),
            "total_amount": self._total_amount,
            "issue_date": self.issue_date.isoformat(),
        }
