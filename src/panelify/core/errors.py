"""Failure outcomes reported by DocumentSession operations"""


class SessionError(Exception):
    """Base class for failures reported by a session operation."""


class ReadFailure(SessionError):
    """The document could not be read; session state was left unchanged."""


class StoreFailure(SessionError):
    """The placement could not be saved; the baseline was not advanced."""
