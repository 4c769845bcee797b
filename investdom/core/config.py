from pydantic_settings import BaseSettings, SettingsConfigDict
from functools import lru_cache
from typing import Optional, List

from investdom.core.mailer import DEFAULT_RESEND_API_URL

DEFAULT_CONTACT_EMAIL = "kontakt@investdom.com.pl"
DEFAULT_SITE_URL = "https://investdom.com.pl"


class Settings(BaseSettings):
    # Resend API key - required only by the contact endpoint
    resend_api_key: Optional[str] = None
    resend_api_url: str = DEFAULT_RESEND_API_URL
    resend_timeout: float = 15.0

    # Where contact form submissions are delivered
    contact_email: Optional[str] = None
    sender_email: str = "Formularz InvestDom <formularz@investdom.com.pl>"

    site_url: str = DEFAULT_SITE_URL

    # CORS settings
    allowed_origins: List[str] = [DEFAULT_SITE_URL]

    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    @property
    def effective_contact_email(self) -> str:
        """Get the recipient address, falling back to the company inbox"""
        return self.contact_email or DEFAULT_CONTACT_EMAIL


@lru_cache
def get_settings() -> Settings:
    return Settings()
