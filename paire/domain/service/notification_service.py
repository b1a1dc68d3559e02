"""Notification domain service.

Invitations reach the invitee out of band, by email. This service renders
the invitation email; delivery is delegated to an ``EmailClient`` adapter.
"""

from html import escape

import logfire

from paire.domain.model import Invitation, UserProfile
from paire.domain.model.common import DomainModel

from .base import Service


class EmailMessage(DomainModel):
    """Outbound email."""

    to_email: str
    to_name: str
    subject: str
    body: str
    is_html: bool = True


class EmailClient:
    """Generic email delivery interface."""

    async def send(self, message: EmailMessage) -> None:
        """Deliver an email.

        Args:
            message: Message to deliver

        Raises:
            ProviderError: If the provider rejects the message
        """
        raise NotImplementedError


class NotificationService(Service):
    """Domain service for partnership notifications."""

    def __init__(self, email_client: EmailClient) -> None:
        """Initialize notification service.

        Args:
            email_client: Email delivery adapter
        """
        self.email_client = email_client

    async def send_invitation_email(
        self,
        inviter: UserProfile,
        invitation: Invitation,
        accept_url: str,
        expiry_days: int,
    ) -> EmailMessage:
        """Email an invitation link to the invitee.

        Args:
            inviter: Inviting user's profile
            invitation: The persisted invitation
            accept_url: Link carrying the invitation token
            expiry_days: Validity window mentioned in the email

        Returns:
            The message handed to the email client
        """
        inviter_name = inviter.display_name or inviter.email.root
        message = EmailMessage(
            to_email=invitation.invitee_email.root,
            to_name=invitation.invitee_email.root,
            subject=f"{inviter_name} invited you to be their financial partner",
            body=_render_invitation_body(inviter_name, accept_url, expiry_days),
        )

        with logfire.span(
            "notification_service.send_invitation_email",
            invitation_id=str(invitation.id),
        ):
            await self.email_client.send(message)
            logfire.info("Invitation email sent", invitation_id=str(invitation.id))
            return message


def _render_invitation_body(inviter_name: str, accept_url: str, expiry_days: int) -> str:
    name = escape(inviter_name)
    url = escape(accept_url, quote=True)
    return f"""<html>
<body style="font-family: Arial, sans-serif; line-height: 1.6; color: #333;">
  <div style="max-width: 600px; margin: 0 auto; padding: 20px;">
    <h2 style="color: #7c3aed;">Partnership Invitation</h2>
    <p>Hello!</p>
    <p><strong>{name}</strong> has invited you to become their financial partner on <strong>Paire</strong>.</p>
    <p>By accepting this invitation, you'll be able to:</p>
    <ul>
      <li>Share expenses, income, and financial data</li>
      <li>Track who added each transaction</li>
      <li>Manage your household budget together</li>
    </ul>
    <p style="margin: 30px 0;">
      <a href="{url}" style="background: #7c3aed; color: white; padding: 12px 30px; text-decoration: none; border-radius: 6px; display: inline-block; font-weight: bold;">Accept invitation</a>
    </p>
    <p style="font-size: 12px; color: #666;">
      This invitation will expire in {expiry_days} days. If you didn't expect this invitation, you can safely ignore this email.
    </p>
  </div>
</body>
</html>"""
