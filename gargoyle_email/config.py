"""
Configuration model for the email notifier.
"""

from pydantic import BaseModel, ConfigDict, Field, SecretStr

from gargoyle_email.mailbox import Mailbox


class EmailNotifierConfig(BaseModel):
    """
    Static delivery settings for an email notifier.

    The relay is only checked when a notification is sent, so a bad
    relay is reported as a transport setup failure rather than here.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    sender: Mailbox = Field(..., alias="from")
    recipient: Mailbox = Field(..., alias="to")
    relay: str
    username: str
    password: SecretStr
    port: int = Field(465, gt=0, lt=65536)  # Implicit TLS submission
