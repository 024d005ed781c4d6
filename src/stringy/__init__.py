"""Unicode-aware, immutable string manipulation.

    >>> from stringy import create
    >>> create("Fòô Bàř").slugify().text
    'foo-bar'

The Stringy value type lives in stringy.stringy; stringy.static offers
the same operations as plain functions on str.
"""

from stringy.core.entities import ENT_COMPAT, ENT_NOQUOTES, ENT_QUOTES
from stringy.exceptions import (
    ImmutableError,
    InvalidArgumentError,
    MethodNotFoundError,
    OutOfRangeError,
    StringyError,
)
from stringy.stringy import Stringy, create

__version__ = "1.0.0"

__all__ = [
    # Value type
    "Stringy",
    "create",
    # HTML entity quote modes
    "ENT_COMPAT",
    "ENT_NOQUOTES",
    "ENT_QUOTES",
    # Exceptions
    "ImmutableError",
    "InvalidArgumentError",
    "MethodNotFoundError",
    "OutOfRangeError",
    "StringyError",
]
