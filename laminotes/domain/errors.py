"""
Domain Errors

Typed failures raised by the core. Every error carries a stable machine
readable ``code`` and a human readable ``message``; none of them represents a
process fault, callers retry, re-fetch or surface them to the user.
"""


class DomainError(Exception):
    code = "DOMAIN_ERROR"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class MalformedInput(DomainError):
    """Boundary payload failed validation; ``field`` names the first offender"""

    code = "MALFORMED_INPUT"

    def __init__(self, field: str, message: str):
        self.field = field
        super().__init__(f"{field}: {message}")


class InvalidChange(DomainError):
    code = "INVALID_CHANGE"


class StaleWrite(DomainError):
    """Optimistic version token no longer matches the stored document"""

    code = "STALE_WRITE"


class IndexOutOfRange(DomainError):
    code = "INDEX_OUT_OF_RANGE"


class InvalidTransition(DomainError):
    code = "INVALID_TRANSITION"


class AlreadyMember(DomainError):
    code = "ALREADY_MEMBER"


class PermissionDenied(DomainError):
    code = "PERMISSION_DENIED"


class NotFound(DomainError):
    code = "NOT_FOUND"


class InvitationExists(DomainError):
    """A pending invitation for the same team and email is still open"""

    code = "INVITATION_EXISTS"
