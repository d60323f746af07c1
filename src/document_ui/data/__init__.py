"""
Static and demo data for the Document UI.

This package contains fixture rows used by the in-memory store for
development, testing, and demonstrations without a Supabase project.

Modules:
- demo_records: Sample clients, catalog items and documents
"""
