"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

from fastapi import Depends, HTTPException, Request, status

from src.adapters.notify.console import ConsoleNotificationSink
from src.domain.dashboard import Dashboard
from src.domain.registration import RegistrationService

GATE_LOCKED_DETAIL = "Reviewer panel is locked"

# Module-level singleton - ConsoleNotificationSink is stateless
_notification_sink = ConsoleNotificationSink()


def get_notification_sink() -> ConsoleNotificationSink:
    """Get console notification sink (singleton)."""
    return _notification_sink


def get_dashboard(request: Request) -> Dashboard:
    """
    Get the dashboard from app state.

    The dashboard is created and loaded during app lifespan startup.
    """
    return request.app.state.dashboard


def get_registration_service(dashboard: Dashboard = Depends(get_dashboard)) -> RegistrationService:
    """Registration engine bound to the dashboard's registry, feed and feedback."""
    return dashboard.registration


def require_unlocked(dashboard: Dashboard = Depends(get_dashboard)) -> Dashboard:
    """
    Guard for reviewer-panel routes.

    Raises 403 until the access gate has been unlocked.
    """
    if not dashboard.gate.unlocked:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail=GATE_LOCKED_DETAIL)
    return dashboard
