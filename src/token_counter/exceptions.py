# src/token_counter/exceptions.py


class TokenCounterError(Exception):
    """Base class for errors raised by token_counter."""


class EncodingError(TokenCounterError):
    """Unknown model, or content the encoder cannot take."""


class ScanError(TokenCounterError):
    """A fatal problem with the root path; the run cannot produce a report."""
