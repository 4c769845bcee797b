"""
Thin async client for the Resend transactional email API.

send() reports provider and network failures through SendEmailResult.error
instead of raising, so callers decide how to surface them.
"""

import json
import logging
from typing import Any, Optional

import httpx

from investdom.models.email import EmailMessage, ProviderError, SendEmailResult, SentEmail

logger = logging.getLogger(__name__)

DEFAULT_RESEND_API_URL = "https://api.resend.com"


class ResendClient:
    def __init__(
        self,
        api_key: str,
        base_url: str = DEFAULT_RESEND_API_URL,
        timeout: float = 15.0,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._transport = transport

    async def send(self, message: EmailMessage) -> SendEmailResult:
        """
        Send a single email through Resend.

        Args:
            message: The email to deliver

        Returns:
            SendEmailResult: data.id on success, error otherwise
        """
        url = f"{self.base_url}/emails"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "Accept": "application/json",
        }

        try:
            async with httpx.AsyncClient(transport=self._transport) as client:
                response = await client.post(
                    url,
                    json=message.to_payload(),
                    headers=headers,
                    timeout=self.timeout,
                )
        except httpx.HTTPError as e:
            logger.error(f"Could not reach Resend API: {str(e)}")
            return SendEmailResult(error=ProviderError(
                name="application_error",
                message=f"Unable to fetch data. The request could not be resolved: {str(e)}",
            ))

        if response.is_success:
            data = _json_or_none(response) or {}
            return SendEmailResult(data=SentEmail(id=_text_or_none(data.get("id"))))

        return SendEmailResult(error=_provider_error(response))


def _json_or_none(response: httpx.Response) -> Optional[dict]:
    try:
        body = response.json()
    except ValueError:
        return None
    return body if isinstance(body, dict) else None


def _text_or_none(value: Any) -> Optional[str]:
    # Resend documents these fields as strings; anything else is stringified
    if value is None:
        return None
    return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)


def _provider_error(response: httpx.Response) -> ProviderError:
    body = _json_or_none(response)
    if body is None:
        return ProviderError(
            name="application_error",
            message=response.reason_phrase or None,
            status_code=response.status_code,
        )

    name = body.get("name")
    status_code = body.get("statusCode")
    if not isinstance(status_code, int) or isinstance(status_code, bool):
        status_code = response.status_code
    return ProviderError(
        name=name if isinstance(name, str) and name else "application_error",
        message=_text_or_none(body.get("message")),
        status_code=status_code,
    )
