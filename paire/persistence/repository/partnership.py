"""PostgreSQL implementation of Partnership repository."""

from typing import Optional

from sqlalchemy import delete, insert, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from paire.domain.error import PartnershipConflictError
from paire.domain.model import Partnership
from paire.domain.repository import PartnershipRepository
from paire.domain.value import PartnershipId, UserId
from paire.persistence.mappers import partnership_to_dict, row_to_partnership
from paire.persistence.tables import partnership_members_table, partnerships_table


class PostgresPartnershipRepository(PartnershipRepository):
    """PostgreSQL implementation of PartnershipRepository."""

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with database session.

        Args:
            session: SQLAlchemy async session
        """
        self.session = session

    async def find_by_id(self, partnership_id: PartnershipId) -> Optional[Partnership]:
        """Find a partnership by ID."""
        stmt = select(partnerships_table).where(
            partnerships_table.c.id == partnership_id
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership(dict(row)) if row else None

    async def find_by_user(self, user_id: UserId) -> Optional[Partnership]:
        """Find the partnership a user belongs to via the members table."""
        stmt = (
            select(partnerships_table)
            .join(
                partnership_members_table,
                partnership_members_table.c.partnership_id == partnerships_table.c.id,
            )
            .where(partnership_members_table.c.user_id == user_id)
        )
        result = await self.session.execute(stmt)
        row = result.mappings().first()
        return row_to_partnership(dict(row)) if row else None

    async def create(self, partnership: Partnership) -> Partnership:
        """Insert the partnership and one member row per user.

        Runs in a savepoint so a uniqueness violation leaves the outer
        transaction usable.

        Raises:
            PartnershipConflictError: If either member already has a partnership
        """
        try:
            async with self.session.begin_nested():
                await self.session.execute(
                    insert(partnerships_table).values(**partnership_to_dict(partnership))
                )
                await self.session.execute(
                    insert(partnership_members_table),
                    [
                        {"partnership_id": partnership.id, "user_id": partnership.user1_id},
                        {"partnership_id": partnership.id, "user_id": partnership.user2_id},
                    ],
                )
        except IntegrityError as e:
            raise PartnershipConflictError(
                "One of these users already has a partner"
            ) from e
        return partnership

    async def delete(self, partnership_id: PartnershipId) -> bool:
        """Delete a partnership; member rows cascade."""
        stmt = delete(partnerships_table).where(
            partnerships_table.c.id == partnership_id
        )
        result = await self.session.execute(stmt)
        await self.session.flush()
        return result.rowcount == 1
