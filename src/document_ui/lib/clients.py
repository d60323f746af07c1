"""
Supabase client factory.

Provides singleton access to the Supabase client used by the
SupabaseRemoteCollection adapters.

Environment variables used:
- SUPABASE_URL: Project URL
- SUPABASE_KEY: Anon or service-role key
- SUPABASE_SCHEMA: Postgres schema holding the tables (default "public")
"""

import functools
import os

from dotenv import load_dotenv
from supabase import Client, create_client

load_dotenv()


def schema() -> str:
    """Return the configured Postgres schema name."""
    return os.getenv("SUPABASE_SCHEMA", "public") or "public"


@functools.cache
def supabase() -> Client:
    """
    Return a Supabase client, creating one if necessary.

    Raises:
        RuntimeError: If SUPABASE_URL or SUPABASE_KEY is not set.
    """
    url = os.getenv("SUPABASE_URL")
    key = os.getenv("SUPABASE_KEY")
    if not url or not key:
        raise RuntimeError("Set SUPABASE_URL and SUPABASE_KEY in .env or environment variables")
    return create_client(url, key)
