"""
Request Models
==============
Caller-constructed value objects: API credentials and SMS messages.
"""

from dataclasses import dataclass, field
from typing import Optional

from pydantic import BaseModel, ConfigDict, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..exceptions import ValidationError


@dataclass(frozen=True)
class Credentials:
    """Messente API username and password."""
    username: str
    password: str = field(repr=False)

    def __post_init__(self):
        if not self.username or not self.username.strip():
            raise ValidationError("API username is not set")
        if not self.password or not self.password.strip():
            raise ValidationError("API password is not set")


class Message(BaseModel):
    """An outbound SMS."""
    model_config = ConfigDict(frozen=True)

    recipient: str
    text: str
    sender: Optional[str] = None

    @field_validator("recipient")
    @classmethod
    def _recipient_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("recipient is not specified")
        return value

    @field_validator("text")
    @classmethod
    def _text_present(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("SMS text is not specified")
        return value


def compose_message(recipient: Optional[str], text: Optional[str], sender: Optional[str] = None) -> Message:
    """
    Build a Message, mapping pydantic errors to ValidationError.

    Raises:
        ValidationError: If the recipient or text is missing or blank
    """
    try:
        return Message(recipient=recipient, text=text, sender=sender)
    except PydanticValidationError as e:
        reasons = "; ".join(
            f"{'.'.join(str(loc) for loc in error['loc'])}: {error['msg']}"
            for error in e.errors()
        )
        raise ValidationError(f"Can't build message: {reasons}", details=e.errors()) from e
