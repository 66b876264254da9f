"""
Shared test fixtures and configuration.

This module provides pytest fixtures for:
- Settings pointing at fake Supabase/Resend endpoints
- Sample user and request records
"""

from datetime import UTC, datetime

import pytest

from followup_notifier.config.settings import Settings
from followup_notifier.domain.ports import RequestRecord, UserRecord

SUPABASE_URL = "https://project.supabase.co"
RESEND_API_URL = "https://api.resend.test"
APP_URL = "https://app.example.com"


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(
        _env_file=None,
        supabase_url=SUPABASE_URL,
        supabase_anon_key="anon-key",
        resend_api_key="re_test_key",
        resend_api_url=RESEND_API_URL,
        email_backend="resend",
        email_from="Bidi <notifications@yourdomain.com>",
        app_url=APP_URL,
    )


@pytest.fixture
def user_record() -> UserRecord:
    """User row as returned by the store."""
    return UserRecord(email="a@b.com", full_name="Alice")


@pytest.fixture
def request_record() -> RequestRecord:
    """Request row as returned by the store."""
    return RequestRecord(
        title="Need a DJ",
        description="For a wedding",
        created_at=datetime(2024, 1, 1, tzinfo=UTC),
    )
