"""Domain layer errors."""


class DomainError(Exception):
    """Base domain error."""

    pass


class ValidationError(DomainError):
    """Domain validation error."""

    pass


class BusinessRuleViolationError(DomainError):
    """Business rule violation error."""

    pass


class NotFoundError(DomainError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        self.resource = resource
        self.identifier = identifier
        super().__init__(f"{resource} not found: {identifier}")


class NotAuthorizedError(DomainError):
    """Raised when a user acts on a resource they are not part of."""

    def __init__(self, resource: str, resource_id: str, user_id: str):
        super().__init__(
            f"User {user_id} is not authorized to modify {resource} {resource_id}"
        )


class InvalidEmailError(ValidationError):
    """Raised when an invitation targets a malformed email address."""

    def __init__(self, email: str):
        self.email = email
        super().__init__("Invalid email address")


class SelfInvitationError(ValidationError):
    """Raised when a user tries to invite their own email address."""

    def __init__(self) -> None:
        super().__init__("You cannot invite yourself")


class DisplayNameRequiredError(ValidationError):
    """Raised when the inviter has not set a display name."""

    def __init__(self) -> None:
        super().__init__("Please complete your profile first: set a display name")


class PartnershipConflictError(BusinessRuleViolationError):
    """Raised when linking would give a user a second partnership."""

    pass


class DuplicateInvitationError(BusinessRuleViolationError):
    """Raised when a live invitation to the same email already exists."""

    pass


class InvitationNotActionableError(DomainError):
    """Raised when an invitation cannot be acted on (unknown or already used)."""

    def __init__(self, message: str = "Invitation not found or already used"):
        super().__init__(message)


class InvitationEmailMismatchError(DomainError):
    """Raised when the accepting user is not the invitee."""

    def __init__(self) -> None:
        super().__init__("This invitation is for a different email address")


class InvitationExpiredError(DomainError):
    """Raised when accepting an invitation past its expiry."""

    def __init__(self) -> None:
        super().__init__("This invitation has expired")


class InviteeUnavailableError(BusinessRuleViolationError):
    """Raised when the invited user already has a partner."""

    pass
