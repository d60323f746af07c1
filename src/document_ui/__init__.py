"""
Document UI: clients, catalog items and commercial documents.

A Reflex web application for authoring invoices, quotations, handover
reports and receipts, backed by Supabase or an in-memory demo store.
"""

__version__ = "0.1.0"
