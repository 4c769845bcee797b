"""
Email models exchanged with the Resend API.
"""

from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Dict, Any


class EmailMessage(BaseModel):
    """Outgoing email, serialised with Resend's field names"""
    model_config = ConfigDict(populate_by_name=True)

    sender: str = Field(..., alias="from")
    to: str
    reply_to: str
    subject: str
    html: str

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class SentEmail(BaseModel):
    id: Optional[str] = None


class ProviderError(BaseModel):
    """Error reported by the email provider (or by the transport reaching it)"""
    name: str = "application_error"
    message: Optional[str] = None
    status_code: Optional[int] = None

    @property
    def summary(self) -> str:
        return self.message or self.name


class SendEmailResult(BaseModel):
    """Outcome of a send: exactly one of data / error is set"""
    data: Optional[SentEmail] = None
    error: Optional[ProviderError] = None
