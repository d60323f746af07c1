"""Reflex configuration for the Document UI application."""

import reflex as rx
from reflex.constants import StateManagerMode

config = rx.Config(
    app_name="document_ui",
    # Use the src directory structure
    app_module_import="document_ui.app",
    # Screen states hold live collection objects in backend vars
    state_manager_mode=StateManagerMode.MEMORY,
)
