"""
Mailbox value type: a display name plus a validated email address.
"""

from email import policy
from email.errors import HeaderParseError
from email.utils import formataddr
from typing import Any

from pydantic import BaseModel, ConfigDict, EmailStr, field_validator, model_validator


class Mailbox(BaseModel):
    """
    A named email address such as ``The Gargoyle <gargoyle@example.com>``.

    Accepts the header string form, a mapping with ``name``/``address``,
    or another Mailbox wherever one is validated. Exactly one address is
    allowed, and it must be ASCII.
    """

    model_config = ConfigDict(frozen=True)

    name: str | None = None
    address: EmailStr

    @model_validator(mode="before")
    @classmethod
    def _split_header_form(cls, data: Any) -> Any:
        if isinstance(data, str):
            return _split(data)
        return data

    @field_validator("address")
    @classmethod
    def _ascii_only(cls, value: str) -> str:
        if not value.isascii():
            raise ValueError(f"Address must be ASCII: {value!r}")
        return value

    @classmethod
    def parse(cls, text: str) -> "Mailbox":
        """
        Parse a mailbox from ``Name <address>`` or a bare address.

        Raises:
            ValueError: If the text is not exactly one valid mailbox
        """
        return cls.model_validate(text)

    @property
    def domain(self) -> str:
        """Domain part of the address."""
        return self.address.rpartition("@")[2]

    def __str__(self) -> str:
        return formataddr((self.name or "", self.address))


def _split(text: str) -> dict[str, Any]:
    try:
        header = policy.default.header_factory("To", text.strip())
    except (HeaderParseError, IndexError, ValueError) as e:
        raise ValueError(f"Invalid mailbox: {text!r}") from e

    if header.defects or len(header.groups) != 1:
        raise ValueError(f"Invalid mailbox: {text!r}")

    group = header.groups[0]
    if group.display_name is not None or len(group.addresses) != 1:
        raise ValueError(f"Expected a single mailbox: {text!r}")

    address = group.addresses[0]
    if not address.addr_spec:
        raise ValueError(f"Invalid mailbox: {text!r}")
    return {"name": address.display_name or None, "address": address.addr_spec}
