"""Base error for Vimania."""


class VimaniaError(Exception):
    """Base class for recoverable Vimania errors.

    Errors of this kind are caught at the session boundary and reported to
    the user as a warning; they are never fatal to the host.
    """
