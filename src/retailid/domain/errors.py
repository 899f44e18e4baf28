"""Exception taxonomy for retail identifier parsing and encoding.

Every error raised by the domain layer derives from :class:`RetailIdError`
so the resolver can treat any of them as "try the next candidate".
Each class also derives from the closest builtin so callers that only
know about ``ValueError`` and friends keep working.
"""

from __future__ import annotations


class RetailIdError(Exception):
    """Base class for all retail identifier errors."""


class FormatError(RetailIdError, ValueError):
    """Input has the wrong length, charset, or shape."""


class EmptyInputError(FormatError):
    """Input was empty (or whitespace only)."""


class MalformedUrlError(FormatError):
    """A URL-shaped input is missing its domain or short code segment."""


class UnderflowError(RetailIdError, ValueError):
    """A VarInt ran off the end of its buffer before terminating."""


class VarIntOverflowError(RetailIdError, OverflowError):
    """A VarInt exceeded the maximum safe integer while decoding."""


class UnrecognizedIdError(RetailIdError, ValueError):
    """The resolver exhausted every encoding and validation mode."""


class ConfigurationError(RetailIdError, RuntimeError):
    """The runtime lacks something required, e.g. a secure random source."""
