"""
Short, URL-safe random identifiers over a 62-symbol alphabet.

Importing the package creates the process-wide generators (see
``rid.generators``); nothing else happens on import, logging included.
"""

from .alphabet import ALPHABET, EXTENDED_ALPHABET, map_byte
from .entropy import CryptoEntropySource, CryptoGenerator
from .errors import (
    EntropySourceFailure,
    InvalidLengthError,
    InvalidNumericIdError,
    RidError,
)
from .generators import (
    crypto_generator,
    fast_generator,
    format_dashed_numeric_id,
    new_identifier,
    new_identifier16,
    new_identifier16_crypto,
    new_identifier16_math,
    new_identifier20,
    new_identifier20_crypto,
    new_identifier20_math,
    new_identifier_crypto,
    new_identifier_math,
    new_numeric_id,
    new_signed_identifier20,
    uniform_int63_crypto,
)
from .signing import sign
from .streams import DualStreamGenerator
from .validators import (
    validate_format,
    validate_identifier16,
    validate_identifier20,
    validate_signed_identifier20,
)

__all__ = [
    "ALPHABET",
    "EXTENDED_ALPHABET",
    "map_byte",
    "CryptoEntropySource",
    "CryptoGenerator",
    "DualStreamGenerator",
    "EntropySourceFailure",
    "InvalidLengthError",
    "InvalidNumericIdError",
    "RidError",
    "crypto_generator",
    "fast_generator",
    "format_dashed_numeric_id",
    "new_identifier",
    "new_identifier16",
    "new_identifier16_crypto",
    "new_identifier16_math",
    "new_identifier20",
    "new_identifier20_crypto",
    "new_identifier20_math",
    "new_identifier_crypto",
    "new_identifier_math",
    "new_numeric_id",
    "new_signed_identifier20",
    "sign",
    "uniform_int63_crypto",
    "validate_format",
    "validate_identifier16",
    "validate_identifier20",
    "validate_signed_identifier20",
]
