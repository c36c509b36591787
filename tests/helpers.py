"""Builders shared across atomring tests."""

from atomring.field import Field
from atomring.models import Token
from atomring.periodic_table import atom


def field_of(*entries: "int | Token") -> Field:
    """Build a field from atomic numbers and/or special atoms."""
    return Field([atom(entry) if isinstance(entry, int) else entry for entry in entries])
