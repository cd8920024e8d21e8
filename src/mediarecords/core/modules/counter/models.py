"""Auto-incrementing counters for sequential numbering."""

from pydantic import BaseModel


class Counter(BaseModel):
    """Named atomic counter.

    Stored one document per name in the ``counters`` collection, unique on ``name``.
    """

    name: str
    value: int = 0  # Last value handed out; next allocation returns value + 1
