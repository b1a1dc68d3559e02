"""Transactional email clients.

Delivers partnership invitation emails through the Resend HTTP API.
"""

import httpx
import logfire

from paire.adapter.error import ProviderError
from paire.domain.service.notification_service import EmailClient, EmailMessage


class TransactionalEmailClient(EmailClient):
    """Base class for email clients.

    Provides type distinction for dependency injection.
    """

    pass


class ResendEmailClient(TransactionalEmailClient):
    """Email client backed by the Resend API."""

    def __init__(
        self,
        api_key: str,
        from_address: str,
        api_url: str = "https://api.resend.com/emails",
        timeout_seconds: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize Resend client.

        Args:
            api_key: Resend API key
            from_address: Sender, e.g. "Paire <no-reply@paire.app>"
            api_url: Resend emails endpoint
            timeout_seconds: Request timeout
            transport: Optional httpx transport (tests)
        """
        self.api_key = api_key
        self.from_address = from_address
        self.api_url = api_url
        self.timeout_seconds = timeout_seconds
        self._transport = transport

    async def send(self, message: EmailMessage) -> None:
        """Send one email.

        Args:
            message: Message to deliver

        Raises:
            ProviderError: On transport failure or a non-2xx response
        """
        payload = {
            "from": self.from_address,
            "to": [message.to_email],
            "subject": message.subject,
        }
        payload["html" if message.is_html else "text"] = message.body

        with logfire.span("resend.send", subject=message.subject):
            try:
                async with httpx.AsyncClient(
                    timeout=self.timeout_seconds, transport=self._transport
                ) as client:
                    response = await client.post(
                        self.api_url,
                        json=payload,
                        headers={"Authorization": f"Bearer {self.api_key}"},
                    )
            except httpx.HTTPError as e:
                logfire.error("Email delivery failed", error=str(e))
                raise ProviderError(f"Email delivery failed: {e}") from e

            if response.status_code >= 400:
                logfire.error(
                    "Email provider rejected message",
                    status_code=response.status_code,
                    body=response.text[:500],
                )
                raise ProviderError(
                    f"Email provider returned {response.status_code}"
                )

            logfire.info("Email accepted by provider", status_code=response.status_code)


class MockEmailClient(TransactionalEmailClient):
    """Mock email client for testing and local development.

    Records messages instead of sending them.
    """

    def __init__(self) -> None:
        self.sent: list[EmailMessage] = []

    async def send(self, message: EmailMessage) -> None:
        """Record the message."""
        self.sent.append(message)
        logfire.info("Mock email recorded", to_count=1, subject=message.subject)
