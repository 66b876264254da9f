"""
Unit tests for domain ports and exceptions.

Tests verify:
- Exceptions are properly structured
- Records are immutable value objects
- Domain purity (zero framework imports)
"""

from dataclasses import FrozenInstanceError
from pathlib import Path

import pytest

from followup_notifier.domain.exceptions import (
    INVALID_FIELDS_MESSAGE,
    DeliveryError,
    FollowUpError,
    MethodNotAllowed,
    RecordLookupError,
    TriggerValidationError,
)
from followup_notifier.domain.ports import Trigger

DOMAIN_DIR = Path(__file__).resolve().parents[2] / "followup_notifier" / "domain"


class TestExceptions:
    """Tests for the domain exception hierarchy."""

    @pytest.mark.parametrize(
        "exc_type",
        [MethodNotAllowed, TriggerValidationError, RecordLookupError, DeliveryError],
    )
    def test_all_inherit_from_follow_up_error(self, exc_type: type[Exception]) -> None:
        assert issubclass(exc_type, FollowUpError)

    def test_method_not_allowed_message(self) -> None:
        assert str(MethodNotAllowed()) == "Method not allowed"

    def test_trigger_validation_message(self) -> None:
        assert str(TriggerValidationError()) == "Missing required fields: requestId or userId"

    def test_trigger_validation_custom_message(self) -> None:
        assert str(TriggerValidationError(INVALID_FIELDS_MESSAGE)) == (
            "Invalid fields: requestId and userId must be strings"
        )

    def test_lookup_error_keeps_reason(self) -> None:
        assert str(RecordLookupError("Failed to fetch user data: x")) == (
            "Failed to fetch user data: x"
        )


class TestRecords:
    """Tests for domain records."""

    def test_trigger_is_frozen(self) -> None:
        trigger = Trigger(request_id="r1", user_id="u1")
        with pytest.raises(FrozenInstanceError):
            trigger.request_id = "r2"  # type: ignore[misc]


class TestDomainPurity:
    """Domain layer has no framework or transport imports."""

    @pytest.mark.parametrize("module", ["fastapi", "pydantic", "httpx", "jinja2"])
    def test_no_framework_imports_in_domain(self, module: str) -> None:
        offenders = [
            path.name
            for path in DOMAIN_DIR.glob("*.py")
            if f"import {module}" in path.read_text() or f"from {module}" in path.read_text()
        ]
        assert offenders == [], f"{module} import found in {offenders}"
