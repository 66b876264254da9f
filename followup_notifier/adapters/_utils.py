"""Shared utilities for the HTTP adapters."""

import httpx


def error_message(response: httpx.Response) -> str:
    """
    Extract the failure reason reported by an upstream API.

    Supabase (PostgREST) and Resend both return a JSON object with a
    `message` field on errors. Falls back to the raw body, then to the
    status line.
    """
    try:
        body = response.json()
    except ValueError:
        body = None

    if isinstance(body, dict) and body.get("message"):
        return str(body["message"])
    return response.text or f"HTTP {response.status_code} {response.reason_phrase}".strip()
