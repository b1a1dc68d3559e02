"""Email delivery adapters."""

from paire.adapter.email.client import (
    MockEmailClient,
    ResendEmailClient,
    TransactionalEmailClient,
)

__all__ = [
    "MockEmailClient",
    "ResendEmailClient",
    "TransactionalEmailClient",
]
