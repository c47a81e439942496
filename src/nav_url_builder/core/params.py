"""Ordered URL query parameters."""

from dataclasses import dataclass, field
from typing import Iterable


@dataclass(frozen=True)
class Parameter:
    """A query parameter. Equality and hashing use the key only."""
    key: str
    value: str = field(compare=False)


def render_parameters(parameters: Iterable[Parameter], separator: str = "&") -> str:
    """Join parameters as ``key=value`` in the given order.

    Values are inserted verbatim; callers encode free text before building
    a Parameter. A key may appear only once.
    """
    parameters = list(parameters)
    seen: set[str] = set()
    for p in parameters:
        if p.key in seen:
            raise ValueError(f"Duplicate URL parameter '{p.key}'")
        seen.add(p.key)
    return separator.join(f"{p.key}={p.value}" for p in parameters)
