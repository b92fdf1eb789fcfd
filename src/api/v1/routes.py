"""
API v1 routes.

Defines REST endpoints for the sign-up flow, the access gate and the
gated reviewer panel.
"""

from collections.abc import Awaitable

from fastapi import APIRouter, Depends, HTTPException, Response, status

from src.api.dependencies import get_dashboard, get_registration_service, require_unlocked
from src.api.models import (
    AccountResponse,
    ErrorResponse,
    FeedbackResponse,
    FormResponse,
    FormUpdateRequest,
    GateRequest,
    GateResponse,
    NotificationResponse,
    SignupRequest,
    SignupResponse,
)
from src.domain.dashboard import Dashboard
from src.domain.exceptions import (
    AccountNotFound,
    CryptoUnavailable,
    GateLockedOut,
    GateMismatch,
    MissingField,
    SubmissionInFlight,
)
from src.domain.models import Account
from src.domain.registration import (
    CRYPTO_UNAVAILABLE_TEXT,
    IN_FLIGHT_TEXT,
    MISSING_FIELD_TEXT,
    SUCCESS_TEXT,
    RegistrationService,
    SignupForm,
)

router = APIRouter(tags=["v1"])

EXPORT_MEDIA_TYPE = "text/plain"


def _form_response(form: SignupForm) -> FormResponse:
    return FormResponse(name=form.name, email=form.email, extra=form.extra, has_password=bool(form.password))


async def _run_submission(submission: Awaitable[Account]) -> SignupResponse:
    """Await a submit coroutine and map domain errors to HTTP errors."""
    try:
        account = await submission
    except MissingField:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=MISSING_FIELD_TEXT,
        ) from None
    except SubmissionInFlight:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=IN_FLIGHT_TEXT) from None
    except CryptoUnavailable:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail=CRYPTO_UNAVAILABLE_TEXT,
        ) from None
    return SignupResponse(message=SUCCESS_TEXT, account_id=account.id)


@router.post(
    "/signup",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Another sign-up is in progress"},
        400: {"model": ErrorResponse, "description": "Name, email or password missing"},
        503: {"model": ErrorResponse, "description": "Password hashing unavailable"},
    },
    summary="Sign up a new user",
    description="Create an account and send the reviewer a notification "
    "containing every submitted field except the password.",
)
async def signup(
    request_data: SignupRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> SignupResponse:
    """
    Register a new account.

    - **name**, **email**, **password**: required, must not be blank
    - **extra**: optional free text
    """
    return await _run_submission(
        service.submit(request_data.name, request_data.email, request_data.password, request_data.extra),
    )


@router.get("/form", response_model=FormResponse, summary="Read the sign-up form draft")
async def read_form(service: RegistrationService = Depends(get_registration_service)) -> FormResponse:
    return _form_response(service.form)


@router.put("/form", response_model=FormResponse, summary="Update the sign-up form draft")
async def update_form(
    request_data: FormUpdateRequest,
    service: RegistrationService = Depends(get_registration_service),
) -> FormResponse:
    form = service.update_form(**request_data.model_dump(exclude_none=True))
    return _form_response(form)


@router.post(
    "/form/submit",
    response_model=SignupResponse,
    status_code=status.HTTP_201_CREATED,
    responses={
        409: {"model": ErrorResponse, "description": "Another sign-up is in progress"},
        400: {"model": ErrorResponse, "description": "Name, email or password missing"},
        503: {"model": ErrorResponse, "description": "Password hashing unavailable"},
    },
    summary="Submit the sign-up form draft",
)
async def submit_form(service: RegistrationService = Depends(get_registration_service)) -> SignupResponse:
    """Submit the current draft; on success the draft is cleared."""
    return await _run_submission(service.submit_form())


@router.get("/feedback", response_model=FeedbackResponse | None, summary="Current feedback message")
async def read_feedback(dashboard: Dashboard = Depends(get_dashboard)) -> FeedbackResponse | None:
    message = dashboard.feedback.current
    return FeedbackResponse.from_message(message) if message is not None else None


@router.post(
    "/feedback/acknowledge",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Dismiss the current feedback message",
)
async def acknowledge_feedback(dashboard: Dashboard = Depends(get_dashboard)) -> None:
    dashboard.feedback.acknowledge()


@router.get("/gate", response_model=GateResponse, summary="Reviewer gate state")
async def read_gate(dashboard: Dashboard = Depends(get_dashboard)) -> GateResponse:
    message = dashboard.gate.messages.current
    return GateResponse(unlocked=dashboard.gate.unlocked, message=message.text if message else None)


@router.post(
    "/gate",
    response_model=GateResponse,
    responses={
        401: {"model": ErrorResponse, "description": "Wrong password"},
        429: {"model": ErrorResponse, "description": "Attempt limit reached"},
    },
    summary="Unlock the reviewer panel",
)
async def unlock_gate(
    request_data: GateRequest,
    dashboard: Dashboard = Depends(get_dashboard),
) -> GateResponse:
    try:
        dashboard.gate.unlock(request_data.password)
    except GateLockedOut as e:
        raise HTTPException(status_code=status.HTTP_429_TOO_MANY_REQUESTS, detail=str(e)) from None
    except GateMismatch as e:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail=str(e)) from None
    message = dashboard.gate.messages.current
    return GateResponse(unlocked=True, message=message.text if message else None)


@router.get(
    "/admin/notifications",
    response_model=list[NotificationResponse],
    responses={403: {"model": ErrorResponse, "description": "Reviewer panel is locked"}},
    summary="List reviewer notifications",
)
async def list_notifications(dashboard: Dashboard = Depends(require_unlocked)) -> list[NotificationResponse]:
    return [NotificationResponse.from_notification(n) for n in dashboard.feed.entries()]


@router.delete(
    "/admin/notifications",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse, "description": "Reviewer panel is locked"}},
    summary="Clear all notifications",
)
async def clear_notifications(dashboard: Dashboard = Depends(require_unlocked)) -> None:
    dashboard.feed.clear()


@router.get(
    "/admin/accounts",
    response_model=list[AccountResponse],
    responses={403: {"model": ErrorResponse, "description": "Reviewer panel is locked"}},
    summary="List accounts",
)
async def list_accounts(dashboard: Dashboard = Depends(require_unlocked)) -> list[AccountResponse]:
    return [AccountResponse.from_view(view) for view in dashboard.registry.views()]


@router.delete(
    "/admin/accounts/{account_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    responses={403: {"model": ErrorResponse, "description": "Reviewer panel is locked"}},
    summary="Remove an account",
    description="Removes the account only; its notification stays in the feed.",
)
async def remove_account(account_id: str, dashboard: Dashboard = Depends(require_unlocked)) -> None:
    dashboard.registry.remove(account_id)


@router.get(
    "/admin/accounts/{account_id}/export",
    response_class=Response,
    responses={
        200: {"content": {EXPORT_MEDIA_TYPE: {}}, "description": "Copyable account info"},
        403: {"model": ErrorResponse, "description": "Reviewer panel is locked"},
        404: {"model": ErrorResponse, "description": "Account not found"},
    },
    summary="Export account info",
)
async def export_account(account_id: str, dashboard: Dashboard = Depends(require_unlocked)) -> Response:
    """Id, name, email and extra as compact JSON text, ready to paste."""
    try:
        blob = dashboard.registry.export(account_id)
    except AccountNotFound:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Account not found") from None
    return Response(content=blob, media_type=EXPORT_MEDIA_TYPE)
