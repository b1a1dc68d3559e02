"""Client errors."""

from paire.client.messages import MessageCategory


class ClientError(Exception):
    """Base client error."""

    pass


class ApiError(ClientError):
    """The partnership API failed or answered with an error status.

    ``status_code`` is None when no response was received.
    """

    def __init__(self, status_code: int | None, detail: str):
        self.status_code = status_code
        self.detail = detail
        super().__init__(f"API error {status_code}: {detail}")


class ApiNotFoundError(ApiError):
    """404 from the API."""

    pass


class ApiUnauthorizedError(ApiError):
    """401 from the API (no or expired session)."""

    pass


class InvitationValidationError(ClientError):
    """An invitation failed a local precondition. No request was made."""

    def __init__(self, category: MessageCategory):
        self.category = category
        super().__init__(category.default_text)
