"""Identity of the signed-in user, as seen by the client.

The client never looks the session up itself; whoever owns login builds an
``IdentityContext`` and passes it in.
"""

from pydantic import BaseModel, ConfigDict


class IdentityContext(BaseModel):
    """Current user, or the anonymous identity."""

    model_config = ConfigDict(frozen=True)

    user_id: str | None = None
    email: str | None = None

    @property
    def is_authenticated(self) -> bool:
        return self.user_id is not None

    @classmethod
    def anonymous(cls) -> "IdentityContext":
        return cls()
