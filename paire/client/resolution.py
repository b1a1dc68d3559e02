"""Invitation resolution: what happens when someone follows an invitation link.

Each run ends in a tagged outcome, decided in order (first match wins):

1. no token                          -> RedirectToLogin
2. token, anonymous                  -> RedirectToLogin
3. token, signed in:
   a. details lookup fails           -> RedirectToPartnership
   b. expired / not pending / not
      addressed to this email        -> RedirectToPartnership
   c. otherwise                      -> AttemptAccept, then ShowSuccess
                                        (or RedirectToPartnership on failure)

The login redirect does not carry the token: after signing in the user
lands on the partnership screen, where pending invitations are listed.
Any failure sends the user to the partnership screen; nothing is retried.
"""

import asyncio
from collections.abc import Awaitable, Callable
from typing import Literal, Union

import logfire
from pydantic import BaseModel, ConfigDict

from paire.client.api import PartnershipApi
from paire.client.error import ClientError
from paire.client.identity import IdentityContext
from paire.client.navigation import Navigator, login_url, partnership_url
from paire.config import ClientSettings
from paire.domain.value import InvitationStatus, emails_match
from paire.util.observability import redact_token


class _Outcome(BaseModel):
    model_config = ConfigDict(frozen=True)


class RedirectToLogin(_Outcome):
    kind: Literal["redirect_to_login"] = "redirect_to_login"
    return_path: str


class RedirectToPartnership(_Outcome):
    kind: Literal["redirect_to_partnership"] = "redirect_to_partnership"
    reason: str


class AttemptAccept(_Outcome):
    kind: Literal["attempt_accept"] = "attempt_accept"
    token: str


class ShowSuccess(_Outcome):
    kind: Literal["show_success"] = "show_success"
    partnership_id: str
    message: str = "Partnership created successfully!"


ResolutionOutcome = Union[
    RedirectToLogin, RedirectToPartnership, AttemptAccept, ShowSuccess
]


class InvitationResolutionFlow:
    """Resolves an invitation link for the given identity.

    ``outcomes`` records every outcome the run passed through, so a
    successful run reads ``[AttemptAccept, ShowSuccess]``.
    """

    def __init__(
        self,
        api: PartnershipApi,
        navigator: Navigator,
        settings: ClientSettings | None = None,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        """Initialize the flow.

        Args:
            api: Partnership API
            navigator: Where redirects go
            settings: Routing and delay configuration
            sleep: Awaitable delay, replaced in tests
        """
        self.api = api
        self.navigator = navigator
        self.settings = settings or ClientSettings()
        self._sleep = sleep
        self.outcomes: list[ResolutionOutcome] = []

    async def decide(
        self, token: str | None, identity: IdentityContext
    ) -> ResolutionOutcome:
        """Pick the first outcome without accepting or navigating.

        Returns AttemptAccept when the invitation looks acceptable.
        """
        return_path = self.settings.partnership_path

        if not token:
            return RedirectToLogin(return_path=return_path)

        if not identity.is_authenticated:
            return RedirectToLogin(return_path=return_path)

        try:
            details = await self.api.get_invitation_details(token)
        except (ClientError, ValueError) as e:
            logfire.warn(
                "Invitation lookup failed", token=redact_token(token), error=str(e)
            )
            return RedirectToPartnership(reason="lookup_failed")

        if details.is_expired:
            return RedirectToPartnership(reason="expired")
        if details.status != InvitationStatus.PENDING:
            return RedirectToPartnership(reason="not_pending")
        if not emails_match(identity.email, details.invitee_email):
            return RedirectToPartnership(reason="email_mismatch")

        return AttemptAccept(token=token)

    async def run(
        self, token: str | None, identity: IdentityContext
    ) -> ResolutionOutcome:
        """Resolve the link and navigate. Returns the final outcome."""
        self.outcomes = []

        with logfire.span(
            "invitation_resolution.run",
            has_token=bool(token),
            authenticated=identity.is_authenticated,
        ):
            outcome = await self.decide(token, identity)
            self.outcomes.append(outcome)

            if isinstance(outcome, RedirectToLogin):
                self.navigator.navigate(login_url(self.settings, outcome.return_path))
                return outcome

            if isinstance(outcome, RedirectToPartnership):
                self.navigator.navigate(partnership_url(self.settings))
                return outcome

            return await self._accept(outcome)

    async def _accept(self, attempt: AttemptAccept) -> ResolutionOutcome:
        try:
            partnership = await self.api.accept_invitation(attempt.token)
        except (ClientError, ValueError) as e:
            logfire.warn(
                "Invitation acceptance failed",
                token=redact_token(attempt.token),
                error=str(e),
            )
            outcome: ResolutionOutcome = RedirectToPartnership(reason="accept_failed")
            self.outcomes.append(outcome)
            self.navigator.navigate(partnership_url(self.settings))
            return outcome

        outcome = ShowSuccess(partnership_id=partnership.id)
        self.outcomes.append(outcome)
        logfire.info("Invitation accepted", partnership_id=partnership.id)

        await self._sleep(self.settings.accept_redirect_delay_seconds)
        self.navigator.navigate(partnership_url(self.settings))
        return outcome
