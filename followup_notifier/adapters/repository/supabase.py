"""
Supabase record store adapter - Implements RecordStore protocol.

Reads users and requests through the PostgREST API that Supabase exposes
under `/rest/v1`. Every lookup is an equality filter on `id` issued in
single-object mode (`Accept: application/vnd.pgrst.object+json`): PostgREST
answers 406 with a JSON error when zero or several rows match, so the
single-row contract is enforced by the store itself.
"""

import logging
from datetime import datetime
from typing import Any

import httpx
from pydantic import BaseModel, ValidationError

from followup_notifier.adapters._utils import error_message
from followup_notifier.domain.exceptions import RecordLookupError
from followup_notifier.domain.ports import RequestRecord, UserRecord

logger = logging.getLogger(__name__)

SINGLE_OBJECT_MEDIA_TYPE = "application/vnd.pgrst.object+json"
ROW_COUNT_MESSAGE = "JSON object requested, multiple (or no) rows returned"


class _UserRow(BaseModel):
    email: str
    full_name: str | None = None


class _RequestRow(BaseModel):
    title: str
    description: str | None = None
    created_at: datetime


class SupabaseRecordStore:
    """
    Implements RecordStore protocol via the Supabase REST API.

    Uses structural subtyping - no explicit inheritance from Protocol.
    The httpx client is shared and owned by the application lifespan.
    """

    def __init__(self, http_client: httpx.AsyncClient, base_url: str, api_key: str) -> None:
        """
        Initialize store with a shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
            base_url: Supabase project URL
            api_key: Supabase anon (or service) key
        """
        self._client = http_client
        self._base_url = base_url.rstrip("/")
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Accept": SINGLE_OBJECT_MEDIA_TYPE,
        }

    async def fetch_user(self, user_id: str) -> UserRecord:
        """Fetch the user's email and display name."""
        data = await self._fetch_one("users", "email,full_name", user_id, label="user")
        try:
            row = _UserRow.model_validate(data)
        except ValidationError as e:
            raise RecordLookupError(f"Failed to fetch user data: {e}") from e
        return UserRecord(email=row.email, full_name=row.full_name or "")

    async def fetch_request(self, request_id: str) -> RequestRecord:
        """Fetch the request's title, description and creation time."""
        data = await self._fetch_one(
            "requests", "title,description,created_at", request_id, label="request"
        )
        try:
            row = _RequestRow.model_validate(data)
        except ValidationError as e:
            raise RecordLookupError(f"Failed to fetch request data: {e}") from e
        return RequestRecord(
            title=row.title,
            description=row.description or "",
            created_at=row.created_at,
        )

    async def _fetch_one(
        self, table: str, columns: str, record_id: str, *, label: str
    ) -> dict[str, Any]:
        """
        Query `table` for the single row whose id equals `record_id`.

        Raises:
            RecordLookupError: On transport failure, an error response, or a
                row count other than one
        """
        url = f"{self._base_url}/rest/v1/{table}"
        params = {"select": columns, "id": f"eq.{record_id}"}

        logger.debug("Fetching %s %s from store", label, record_id)

        try:
            response = await self._client.get(url, params=params, headers=self._headers)
        except httpx.HTTPError as e:
            raise RecordLookupError(f"Failed to fetch {label} data: {e}") from e

        if response.is_error:
            raise RecordLookupError(f"Failed to fetch {label} data: {error_message(response)}")

        try:
            body = response.json()
        except ValueError as e:
            raise RecordLookupError(f"Failed to fetch {label} data: {e}") from e

        # Some proxies drop the single-object Accept header and return an array
        if isinstance(body, list):
            if len(body) != 1:
                raise RecordLookupError(f"Failed to fetch {label} data: {ROW_COUNT_MESSAGE}")
            body = body[0]

        if not isinstance(body, dict):
            raise RecordLookupError(f"Failed to fetch {label} data: {ROW_COUNT_MESSAGE}")
        return body
