"""Shared state for the in-memory repositories."""

from paire.domain.model import Invitation, Partnership, UserProfile
from paire.domain.value import InvitationId, PartnershipId, UserId


class InMemoryStore:
    """Tables backing the in-memory repositories.

    One store is shared by all repositories of a container so that state
    written in one request is visible to the next, like a database.
    """

    def __init__(self) -> None:
        self.users: dict[UserId, UserProfile] = {}
        self.invitations: dict[InvitationId, Invitation] = {}
        self.partnerships: dict[PartnershipId, Partnership] = {}
