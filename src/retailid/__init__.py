"""retailid — resolve and encode compact retail identifier URLs."""

from retailid.domain.errors import (
    ConfigurationError,
    EmptyInputError,
    FormatError,
    MalformedUrlError,
    RetailIdError,
    UnderflowError,
    UnrecognizedIdError,
    VarIntOverflowError,
)
from retailid.domain.ids import ObjectIdentifier
from retailid.domain.pair import RetailIdPair, encode_short_url
from retailid.domain.resolver import ParsedRetailId, RetailIdResolver, resolve
from retailid.domain.types import Encoding, ValidationMode
from retailid.domain.varint import VarInt

__version__ = "0.1.0"

__all__ = [
    "ConfigurationError",
    "EmptyInputError",
    "Encoding",
    "FormatError",
    "MalformedUrlError",
    "ObjectIdentifier",
    "ParsedRetailId",
    "RetailIdError",
    "RetailIdPair",
    "RetailIdResolver",
    "UnderflowError",
    "UnrecognizedIdError",
    "ValidationMode",
    "VarInt",
    "VarIntOverflowError",
    "__version__",
    "encode_short_url",
    "resolve",
]
