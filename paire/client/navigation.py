"""Frontend navigation targets."""

from typing import Protocol
from urllib.parse import urlencode

from paire.config import ClientSettings


class Navigator(Protocol):
    """Moves the user to another screen (``window.location`` in a browser)."""

    def navigate(self, url: str) -> None: ...


def partnership_url(settings: ClientSettings) -> str:
    """The partnership screen, including the app basename."""
    return f"{settings.basename}{settings.partnership_path}"


def login_url(settings: ClientSettings, return_path: str) -> str:
    """The login screen, returning to ``return_path`` after sign-in.

    ``return_path`` is relative to the basename, e.g. ``/partnership``.
    """
    query = urlencode({"redirect": return_path})
    return f"{settings.basename}{settings.login_path}?{query}"
