"""Email infrastructure providers."""

from dishka import Scope, provide
import logfire

from paire.adapter.email import MockEmailClient, ResendEmailClient
from paire.config import Settings
from paire.domain.service import EmailClient
from paire.util.di.base import ProviderBase
from paire.util.error import ConfigurationError


class EmailProvider(ProviderBase):
    """Email component base."""

    __mock_component__ = "email"


class ProdEmailProvider(EmailProvider):
    """Production email provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_email_client(self, settings: Settings) -> EmailClient:
        """Provide email client.

        Without an API key, test and development environments record emails
        locally instead of sending them.

        Raises:
            ConfigurationError: If no API key is set in staging/production
        """
        if not settings.email.api_key:
            if settings.environment in ("test", "development"):
                logfire.warn(
                    "EMAIL__API_KEY not set, invitation emails will not be sent",
                    environment=settings.environment,
                )
                return MockEmailClient()
            raise ConfigurationError(
                f"EMAIL__API_KEY is required in {settings.environment}"
            )

        return ResendEmailClient(
            api_key=settings.email.api_key,
            from_address=settings.email.from_address,
            api_url=settings.email.api_url,
            timeout_seconds=settings.email.timeout_seconds,
        )
