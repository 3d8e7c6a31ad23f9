class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class NotFoundError(DomainError):
    """Raised when a referenced class, session or student does not exist."""


class RosterImportError(DomainError):
    """Base for failures of the roster import workflow.

    These are reported to the user as a single notice and never escape the
    import preview step.
    """

    reason = "import_error"


class UnsupportedFormat(RosterImportError):
    """Uploaded file extension is not .xlsx, .xls or .csv."""

    reason = "unsupported_format"


class ParseError(RosterImportError):
    """Uploaded file could not be read as tabular data."""

    reason = "parse_error"


class NoValidRows(RosterImportError):
    """Every row failed required-field validation."""

    reason = "no_valid_rows"


class StoreError(DomainError):
    """The data store rejected an operation. Carries its message verbatim."""
