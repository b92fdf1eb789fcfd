"""
API request and response models.

Pydantic models for FastAPI endpoint validation and OpenAPI schema generation.
Blank-field validation is left to the domain so the submitter always gets the
same feedback text.
"""

from datetime import datetime

from pydantic import BaseModel, Field

from src.domain.models import AccountView, FeedbackMessage, Notification


class SignupRequest(BaseModel):
    """Request model for a sign-up submission."""

    name: str = Field(default="", description="Full name")
    email: str = Field(default="", description="Email address")
    password: str = Field(default="", description="Password (only its SHA-256 digest is stored)")
    extra: str = Field(default="", description="Extra info (phone, role, etc.)")


class SignupResponse(BaseModel):
    """Response model for a successful sign-up."""

    message: str
    account_id: str


class FormUpdateRequest(BaseModel):
    """Partial update of the sign-up form draft."""

    name: str | None = None
    email: str | None = None
    password: str | None = None
    extra: str | None = None


class FormResponse(BaseModel):
    """Sign-up form draft; the password itself is never echoed."""

    name: str
    email: str
    extra: str
    has_password: bool


class FeedbackResponse(BaseModel):
    """Live feedback message."""

    kind: str
    text: str
    expires_after: float | None

    @classmethod
    def from_message(cls, message: FeedbackMessage) -> "FeedbackResponse":
        return cls(kind=message.kind.value, text=message.text, expires_after=message.expires_after)


class GateRequest(BaseModel):
    """Request model for unlocking the reviewer panel."""

    password: str


class GateResponse(BaseModel):
    """Reviewer gate state with its transient message, if any."""

    unlocked: bool
    message: str | None = None


class AccountResponse(BaseModel):
    """Account as shown on the reviewer panel (no credential)."""

    id: str
    name: str
    email: str
    extra: str
    created_at: datetime

    @classmethod
    def from_view(cls, view: AccountView) -> "AccountResponse":
        return cls(id=view.id, name=view.name, email=view.email, extra=view.extra, created_at=view.created_at)


class NotificationPayloadResponse(BaseModel):
    """Redacted account snapshot carried by a notification."""

    id: str
    name: str
    email: str
    extra: str
    created_at: datetime


class NotificationResponse(BaseModel):
    """Reviewer notification."""

    id: str
    title: str
    time: datetime
    payload: NotificationPayloadResponse

    @classmethod
    def from_notification(cls, notification: Notification) -> "NotificationResponse":
        payload = notification.payload
        return cls(
            id=notification.id,
            title=notification.title,
            time=notification.time,
            payload=NotificationPayloadResponse(
                id=payload.id,
                name=payload.name,
                email=payload.email,
                extra=payload.extra,
                created_at=payload.created_at,
            ),
        )


class ErrorResponse(BaseModel):
    """Standard error response model."""

    detail: str
