from pydantic import BaseModel, field_validator
from typing import Optional


class ContactSubmission(BaseModel):
    """Contact form payload as posted by the website"""
    name: str = ""
    email: str = ""
    phone: str = ""
    temat_wybrany: str = ""  # subject code, e.g. "kupno"
    message: str = ""

    @field_validator("*", mode="before")
    @classmethod
    def none_as_empty(cls, value: Optional[str]):
        # The form sends null for untouched fields
        return "" if value is None else value

    def missing_required(self) -> bool:
        return not self.name or not self.email or not self.message
