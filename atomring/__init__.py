"""AtomRing: reaction engine for the circular atom-fusion board.

Usage:
    from atomring import Field, PLUS, atom

    field = Field([atom(1), atom(2), atom(3), atom(1)])
    field.insert(PLUS, 0)   # -> (He He Li)
"""

from .errors import (
    AtomRingError,
    CatalogError,
    ConfigurationError,
    FieldIndexError,
    InvalidArgumentError,
    InvalidStateError,
)
from .field import Field
from .listeners import (
    FieldListener,
    InsertEvent,
    LoggingListener,
    ReactionEvent,
    RecordingListener,
    RemoveEvent,
)
from .models import DARK_PLUS, PLUS, Atom, SpecialAtom, Token
from .periodic_table import PeriodicTable, atom, max_atom, parse_token

__version__ = "1.0.0"

__all__ = [
    "DARK_PLUS",
    "PLUS",
    "Atom",
    "AtomRingError",
    "CatalogError",
    "ConfigurationError",
    "Field",
    "FieldIndexError",
    "FieldListener",
    "InsertEvent",
    "InvalidArgumentError",
    "InvalidStateError",
    "LoggingListener",
    "PeriodicTable",
    "ReactionEvent",
    "RecordingListener",
    "RemoveEvent",
    "SpecialAtom",
    "Token",
    "atom",
    "max_atom",
    "parse_token",
]
