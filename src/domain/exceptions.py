"""
Domain exceptions - Semantic error types for the sign-up flow.

This module defines domain-specific exceptions that communicate
business rule violations without leaking infrastructure details.
"""


class SignupError(Exception):
    """Base class for sign-up domain errors."""

    pass


class ValidationFailed(SignupError):
    """Submission rejected before any state change (user-correctable)."""

    pass


class MissingField(ValidationFailed):
    """Name, email or password is empty after trimming."""

    def __init__(self, fields: list[str]) -> None:
        self.fields = fields
        super().__init__(f"Missing required field(s): {', '.join(fields)}")


class SubmissionInFlight(SignupError):
    """A previous submission is still waiting for its credential digest."""

    pass


class CryptoUnavailable(SignupError):
    """The SHA-256 digest primitive cannot be used in this environment."""

    pass


class PersistenceCorrupt(SignupError):
    """Stored collection could not be decoded into records."""

    pass


class PersistenceUnavailable(SignupError):
    """The backing store rejected a read or write."""

    pass


class GateMismatch(SignupError):
    """Candidate secret did not match the reviewer gate secret."""

    pass


class AccountNotFound(SignupError):
    """No account with the requested id."""

    pass


class GateLockedOut(GateMismatch):
    """Configured attempt limit reached; the gate no longer compares secrets."""

    pass
