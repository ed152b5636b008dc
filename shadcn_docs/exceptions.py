"""
Custom exceptions for the shadcn_docs package.

Error philosophy:
  - InvalidInputError      → FAIL FAST: bad caller arguments, raised before any fetch.
  - MethodNotFoundError    → FAIL FAST: a tool call named an unknown tool.
  - ComponentNotFoundError → TERMINAL: the component page does not exist upstream.
  - InternalError          → TERMINAL: any other fetch or processing failure.
  - FetchError subclasses  → raised by the fetcher, translated by the service.

Missing sections, headings or code blocks are not errors at all: extractors
return an empty value and the query still succeeds. Nothing is retried.
"""

from typing import Optional


class ShadcnDocsError(Exception):
    """Base exception for all shadcn_docs errors."""

    code = "error"

    def __init__(self, message: str, details: Optional[dict] = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def to_response(self) -> dict:
        """Convert to the error payload returned to tool callers."""
        return {
            "error": type(self).__name__,
            "code": self.code,
            "message": self.message,
            "details": self.details
        }


# --- Query-level errors: surfaced to the caller ---

class InvalidInputError(ShadcnDocsError):
    """Raised when a query argument is missing, empty or not a string."""

    code = "invalid_params"


class MethodNotFoundError(ShadcnDocsError):
    """Raised when a tool call names a tool that does not exist."""

    code = "method_not_found"

    def __init__(self, tool_name: str, details: Optional[dict] = None):
        super().__init__(f"Unknown tool: {tool_name}", details)
        self.tool_name = tool_name


class ComponentNotFoundError(ShadcnDocsError):
    """Raised when the upstream documentation has no page for a component."""

    code = "not_found"

    def __init__(
        self,
        component_name: str,
        context: Optional[str] = None,
        details: Optional[dict] = None
    ):
        # context names what was asked for, e.g. 'Component examples for "x"'
        context = context or f'Component "{component_name}"'
        super().__init__(f"{context} not found", details)
        self.component_name = component_name


class InternalError(ShadcnDocsError):
    """Raised for any other upstream or processing failure."""

    code = "internal_error"


# --- Fetch-level errors: raised by fetchers, mapped by the service ---

class FetchError(ShadcnDocsError):
    """Base class for document fetch failures."""

    code = "fetch_error"

    def __init__(
        self,
        message: str,
        url: str,
        status: Optional[int] = None,
        details: Optional[dict] = None
    ):
        super().__init__(message, details)
        self.url = url
        self.status = status  # None when no response was received


class DocumentNotFoundError(FetchError):
    """The upstream server answered 404 for the requested resource."""

    code = "not_found"


class TransientFetchError(FetchError):
    """Any other fetch failure: non-404 status, timeout, connection error."""
