"""
Exception hierarchy for the Document UI.

Every error carries a short title and a human-readable description so it
can be turned into a single user-facing Notice without extra formatting at
the call site.

    DocumentUIError
    ├── ValidationError       (caught before any remote call)
    │   ├── LedgerValidationError
    │   └── FormValidationError
    └── RemoteError           (store select/insert/update/delete failed)
        └── DecodeError       (store returned a malformed record)
"""

from document_ui.models.common import Notice


class DocumentUIError(Exception):
    """Base class for all application errors."""

    title = "Something went wrong"

    def __init__(self, description: str, title: str | None = None) -> None:
        super().__init__(description)
        self.description = description
        if title:
            self.title = title

    def to_notice(self) -> Notice:
        """Return the error as an error-level notice."""
        return Notice.error(self.title, self.description)


class ValidationError(DocumentUIError):
    title = "Incomplete data"


class LedgerValidationError(ValidationError):
    """Raised when a ledger is not ready to be submitted."""


class FormValidationError(ValidationError):
    """Raised when a client or catalog form is missing required fields."""


class RemoteError(DocumentUIError):
    title = "Request failed"


class DecodeError(RemoteError):
    """Raised when a stored record is missing or has a malformed required field."""

    title = "Unexpected data"

    def __init__(self, table: str, field: str, reason: str = "missing") -> None:
        super().__init__(f"{table}.{field} is {reason}")
        self.table = table
        self.field = field
