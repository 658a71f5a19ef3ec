"""Guest model for the hotel domain."""
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from datetime import date                                          # noqa: E402
from typing import Any                                             # noqa: E402
from pydantic import BaseModel, ConfigDict, field_validator, ValidationInfo  # noqa: E402
from utils import (                                                # noqa: E402
    require,
    require_date,
    require_present,
    today,
    validate_check_in_date,
    validate_email,
    validate_string,
)

NAME_LABELS = {"first_name": "First name", "last_name": "Last name"}


class Guest(BaseModel):
    """Hotel guest with contact details and a check-in date."""

    model_config = ConfigDict(validate_assignment=True)

    first_name: str
    last_name: str
    email: str
    check_in_date: date

    @field_validator("first_name", "last_name", mode="before")
    @classmethod
    def validate_name(cls, value: Any, info: ValidationInfo) -> Any:
        """
        Reject missing or blank names.

        The name is checked trimmed but stored exactly as given.

        Raises:
            MissingValueError: If the name is None.
            InvalidValueError: If the name is empty or only whitespace.
        """
        label = NAME_LABELS[info.field_name]
        require_present(value, info.field_name, label)
        require(validate_string(value), info.field_name, f"{label} can not be empty")
        return value

    @field_validator("email", mode="before")
    @classmethod
    def validate_email_format(cls, value: Any) -> Any:
        require_present(value, "email", "Email")
        require(validate_email(value), "email", "Email does not match the format")
        return value

    @field_validator("check_in_date", mode="before")
    @classmethod
    def validate_check_in(cls, value: Any) -> Any:
        # check-in is allowed today, never in the past
        require_date(value, "check_in_date", "Check-in date")
        require(
            validate_check_in_date(value),
            "check_in_date",
            f"Check-in date can't be in the past (today is {today().isoformat()})",
        )
        return value

    def __hash__(self) -> int:
        return hash((self.first_name, self.last_name, self.email, self.check_in_date))

    def __str__(self) -> str:
        return (
            f"Guest's first name: {self.first_name}\n"
            f"Guest's last name: {self.last_name}\n"
            f"Guest's email: {self.email}\n"
            f"Guest's check-in date: {self.check_in_date.isoformat()}\n"
        )

    def to_dict(self) -> dict[str, str]:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "email": self.email,
            "check_in_date": self.check_in_date.isoformat(),
        }
