"""Repository adapters - Structured-data store implementations."""

from .supabase import SupabaseRecordStore

__all__ = ["SupabaseRecordStore"]
