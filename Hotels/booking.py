'''
Reservation model tying a guest to a room for a period of stay.
'''
from datetime import date
from textwrap import indent
from typing import Any
from pydantic import BaseModel, ConfigDict, Field, field_validator, ValidationInfo
from Guests.guest import Guest
from Hotels.structure import Room, Service
from Validation.errors import HotelError
from utils import require, require_date, require_instance, require_not_past, require_present, validate_date


def _check_service(service: Any) -> Service:
    return require_instance(service, Service, "services", "Service")


def _nested(label: str, entity: BaseModel) -> str:
    return f"{label}:\n{indent(str(entity), '  ')}"


class Reservation(BaseModel):

    model_config = ConfigDict(validate_assignment=True)

    guest : Guest
    room : Room
    start_date : date
    end_date : date
    services : list[Service] = Field(default_factory=list)

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except HotelError as e:
            raise e.with_context("Invalid reservation value.") from e

    @field_validator("guest", mode="before")
    @classmethod
    def validate_guest(cls, value: Any) -> Any:
        return require_instance(value, Guest, "guest", "Guest")

    @field_validator("room", mode="before")
    @classmethod
    def validate_room(cls, value: Any) -> Any:
        return require_instance(value, Room, "room", "Room")

    @field_validator("start_date", mode="before")
    @classmethod
    def validate_start_date(cls, value: Any, info: ValidationInfo) -> Any:
        require_not_past(value, "start_date", "Start date")
        # only set when moving the start of an existing reservation
        end_date = info.data.get("end_date")
        if end_date is not None:
            require(validate_date(end_date, value), "start_date", "Start date can't be after end date")
        return value

    @field_validator("end_date", mode="before")
    @classmethod
    def validate_end_date(cls, value: Any, info: ValidationInfo) -> Any:
        require_date(value, "end_date", "End date")
        require(
            validate_date(value, info.data.get("start_date")),
            "end_date",
            "End date can't be before start date",
        )
        return value

    @field_validator("services", mode="before")
    @classmethod
    def validate_services(cls, value: Any) -> Any:
        # duplicates are allowed, every element must be a Service
        require_present(value, "services", "Services list")
        require(isinstance(value, (list, tuple)), "services", "Services must be a list")
        for service in value:
            _check_service(service)
        return value

    def add_service(self, service: Service) -> None:
        ''' Append a service to the reservation. '''
        self.services.append(_check_service(service))

    def __hash__(self) -> int:
        return hash((self.guest, self.room, self.start_date, self.end_date, tuple(self.services)))

    def __str__(self) -> str:
        services = "".join(indent(str(service), "  ") for service in self.services) or "  none\n"
        return (
            f"{_nested('Reservation guest', self.guest)}"
            f"{_nested('Reservation room', self.room)}"
            f"Reservation start date: {self.start_date.isoformat()}\n"
            f"Reservation end date: {self.end_date.isoformat()}\n"
            f"Reservation services:\n{services}"
        )

    def to_dict(self) -> dict[str, Any]:
        """
        Serialize the reservation, nesting guest, room and services.

        Returns:
            dict[str, Any]: Mapping with ISO formatted dates.
        """
        return {
            "guest": self.guest.to_dict(),
            "room": self.room.to_dict(),
            "start_date": self.start_date.isoformat(),
            "end_date": self.end_date.isoformat(),
            "services": [service.to_dict() for service in self.services],
        }
