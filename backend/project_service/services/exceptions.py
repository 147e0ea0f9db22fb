"""Domain errors raised by the service layer."""


class ProjectNotFoundError(LookupError):
    """Raised when a project is not found."""

    pass


class MemberNotFoundError(LookupError):
    """Raised when a user is not a member of a project."""

    pass


class MemberConflictError(ValueError):
    """Raised when a user is already a member with a different role."""

    pass
