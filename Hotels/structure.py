'''
Structure class implementation for Hotels module: rooms and the extra
services a guest can add to a stay.
'''
from typing import Any
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo
from Validation.errors import HotelError
from utils import (
    require,
    require_present,
    validate_integer,
    validate_non_negative_number,
    validate_positive_number,
    validate_string,
)

ROOM_LABELS = {"room_number": "Room number", "capacity": "Capacity", "price": "Price"}

class Room(BaseModel):

    model_config = ConfigDict(validate_assignment=True)

    room_number : int
    type : str
    capacity : int # maximum number of people in the room
    price : float

    @field_validator("room_number", "capacity", "price", mode="before")
    @classmethod
    def validate_positive(cls, value: Any, info: ValidationInfo) -> Any:
        # zero is rejected too
        label = ROOM_LABELS[info.field_name]
        require_present(value, info.field_name, label)
        require(validate_positive_number(value), info.field_name, f"{label} must be positive")
        if info.field_name != "price":
            require(validate_integer(value), info.field_name, f"{label} must be a whole number")
        return value

    @field_validator("type", mode="before")
    @classmethod
    def validate_type(cls, value: Any) -> Any:
        require_present(value, "type", "Room type")
        require(validate_string(value), "type", "Room type can not be empty")
        return value

    def __hash__(self) -> int:
        return hash((self.room_number, self.type, self.capacity, self.price))

    def __str__(self) -> str:
        return (
            f"Room number: {self.room_number}\n"
            f"Room type: {self.type}\n"
            f"Room capacity: {self.capacity}\n"
            f"Room price: {self.price}\n"
        )

    def to_dict(self) -> dict[str, str | int | float]:
        """
        Serialize the room into a dictionary.

        Returns:
            dict[str, str | int | float]: Mapping of every room field.
        """
        return {
            "room_number": self.room_number,
            "type": self.type,
            "capacity": self.capacity,
            "price": self.price,
        }


class Service(BaseModel):

    model_config = ConfigDict(validate_assignment=True)

    name : str
    price : int

    def __init__(self, **data: Any) -> None:
        try:
            super().__init__(**data)
        except HotelError as e:
            raise e.with_context("Invalid service's value.") from e

    @field_validator("name", mode="before")
    @classmethod
    def validate_name(cls, value: Any) -> Any:
        require_present(value, "name", "Service name")
        require(validate_string(value), "name", "Service name can not be empty")
        return value

    @field_validator("price", mode="before")
    @classmethod
    def validate_price(cls, value: Any) -> Any:
        # free services are allowed
        require_present(value, "price", "Price")
        require(validate_non_negative_number(value), "price", "Price can't be negative")
        require(validate_integer(value), "price", "Price must be a whole number")
        return value

    def __hash__(self) -> int:
        return hash((self.name, self.price))

    def __str__(self) -> str:
        return f"Service name: {self.name}\nService price: {self.price}\n"

    def to_dict(self) -> dict[str, str | int]:
        return {"name": self.name, "price": self.price}
