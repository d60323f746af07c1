"""
Local library modules shared by the Document UI.

Modules:
    logs: Logging utilities
    objects: JSON serialization for log output
    clients: Supabase client factory
    debounce: Trailing-edge debounce for async callbacks
"""

from document_ui.lib import clients, debounce, logs, objects

__all__ = ["clients", "debounce", "logs", "objects"]
