"""PostgreSQL implementation of Invitation repository."""

from datetime import datetime
from typing import Optional

from sqlalchemy import and_, insert, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from paire.domain.model import Invitation
from paire.domain.repository import InvitationRepository
from paire.domain.value import (
    Email,
    InvitationId,
    InvitationStatus,
    InvitationToken,
    UserId,
)
from paire.persistence.mappers import invitation_to_dict, row_to_invitation
from paire.persistence.tables import invitations_table


class PostgresInvitationRepository(InvitationRepository):
    """PostgreSQL implementation of InvitationRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, invitation_id: InvitationId) -> Optional[Invitation]:
        """Find an invitation by ID."""
        stmt = select(invitations_table).where(invitations_table.c.id == invitation_id)
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_by_token(self, token: InvitationToken) -> Optional[Invitation]:
        """Find an invitation by its token.

        Args:
            token: Invitation token to look up

        Returns:
            Invitation if found, None otherwise
        """
        stmt = select(invitations_table).where(
            invitations_table.c.token == token.root
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_invitation(dict(row)) if row else None

    async def find_pending_for_invitee(
        self, email: Email, now: datetime
    ) -> list[Invitation]:
        """Find live invitations addressed to an email, newest first."""
        stmt = (
            select(invitations_table)
            .where(
                and_(
                    invitations_table.c.invitee_email == email.root,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                    invitations_table.c.expires_at > now,
                )
            )
            .order_by(invitations_table.c.created_at.desc())
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def exists_pending_for_pair(
        self, inviter_id: UserId, invitee_email: Email, now: datetime
    ) -> bool:
        """Check for a live invitation from the inviter to the email."""
        stmt = select(invitations_table.c.id).where(
            and_(
                invitations_table.c.inviter_id == inviter_id,
                invitations_table.c.invitee_email == invitee_email.root,
                invitations_table.c.status == InvitationStatus.PENDING.value,
                invitations_table.c.expires_at > now,
            )
        )
        result = await self.session.execute(stmt)
        return result.first() is not None

    async def find_by_inviter(
        self, inviter_id: UserId, limit: int = 50, offset: int = 0
    ) -> list[Invitation]:
        """Find invitations sent by a user with pagination."""
        stmt = (
            select(invitations_table)
            .where(invitations_table.c.inviter_id == inviter_id)
            .order_by(invitations_table.c.created_at.desc())
            .limit(limit)
            .offset(offset)
        )
        result = await self.session.execute(stmt)
        return [row_to_invitation(dict(row)) for row in result.mappings().all()]

    async def save(self, invitation: Invitation) -> Invitation:
        """Save an invitation (create or update)."""
        invitation_dict = invitation_to_dict(invitation)

        existing = await self.find_by_id(invitation.id)
        if existing:
            stmt = (
                update(invitations_table)
                .where(invitations_table.c.id == invitation.id)
                .values(**invitation_dict)
            )
        else:
            stmt = insert(invitations_table).values(**invitation_dict)

        await self.session.execute(stmt)
        await self.session.flush()
        return invitation

    async def transition_status(
        self,
        invitation_id: InvitationId,
        new_status: InvitationStatus,
        accepted_by_user_id: UserId | None = None,
        accepted_at: datetime | None = None,
    ) -> bool:
        """Conditionally move a PENDING invitation to ``new_status``.

        The status predicate in the UPDATE makes this a compare-and-set: a
        concurrent transaction blocks on the row lock and then matches zero
        rows.
        """
        values: dict = {"status": new_status.value}
        if new_status == InvitationStatus.ACCEPTED:
            values["accepted_by_user_id"] = accepted_by_user_id
            values["accepted_at"] = accepted_at

        stmt = (
            update(invitations_table)
            .where(
                and_(
                    invitations_table.c.id == invitation_id,
                    invitations_table.c.status == InvitationStatus.PENDING.value,
                )
            )
            .values(**values)
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
