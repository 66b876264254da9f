"""
FastAPI dependencies - Dependency injection factories.

This module provides Depends() factories for injecting
domain services and infrastructure adapters into routes.
"""

import httpx
from fastapi import Depends, Request

from followup_notifier.adapters.email.console import ConsoleEmailSender
from followup_notifier.adapters.email.resend import ResendEmailSender
from followup_notifier.adapters.repository.supabase import SupabaseRecordStore
from followup_notifier.adapters.templates.jinja import JinjaFollowUpRenderer
from followup_notifier.config.settings import Settings, get_settings
from followup_notifier.domain.followup import FollowUpService
from followup_notifier.domain.ports import EmailSender

# Module-level singletons - both are stateless
_renderer = JinjaFollowUpRenderer()
_console_sender = ConsoleEmailSender()


def get_http_client(request: Request) -> httpx.AsyncClient:
    """
    Get the shared HTTP client from app state.

    The client is created during app lifespan startup and stored in app.state.
    """
    return request.app.state.http_client


def get_record_store(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> SupabaseRecordStore:
    """Create the Supabase store on the shared HTTP client."""
    return SupabaseRecordStore(
        http_client,
        base_url=settings.supabase_url,
        api_key=settings.supabase_anon_key,
    )


def get_email_sender(
    http_client: httpx.AsyncClient = Depends(get_http_client),
    settings: Settings = Depends(get_settings),
) -> EmailSender:
    """Select the email sender configured by EMAIL_BACKEND."""
    if settings.email_backend == "console":
        return _console_sender
    return ResendEmailSender(
        http_client,
        api_key=settings.resend_api_key,
        api_url=settings.resend_api_url,
    )


def get_renderer() -> JinjaFollowUpRenderer:
    """Get the Jinja2 follow-up renderer (singleton)."""
    return _renderer


def get_follow_up_service(
    store: SupabaseRecordStore = Depends(get_record_store),
    email_sender: EmailSender = Depends(get_email_sender),
    renderer: JinjaFollowUpRenderer = Depends(get_renderer),
    settings: Settings = Depends(get_settings),
) -> FollowUpService:
    """
    Create the follow-up service with injected dependencies.

    Wires together the store, renderer and email sender for the domain service.
    """
    return FollowUpService(
        store=store,
        renderer=renderer,
        email_sender=email_sender,
        app_url=settings.app_url,
        sender_address=settings.email_from,
    )
