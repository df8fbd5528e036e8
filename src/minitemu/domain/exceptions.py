"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the shell can catch them uniformly and display user-friendly messages.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A value is out of range or a business rule was violated."""


class NotFoundError(DomainException):
    """A requested product or user does not exist."""


class InsufficientStock(DomainException):
    """A stock reduction asked for more units than are available."""


class DuplicateUsername(DomainException):
    """A username is already registered (under any role)."""


class AuthenticationError(DomainException):
    """Username and password did not match a registered identity."""


class AuthorizationError(DomainException):
    """The current session may not perform the requested command."""


class EmptyCartError(DomainException):
    """Checkout was attempted on a cart with no lines."""
