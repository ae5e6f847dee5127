"""Shared field types for request schemas."""

from typing import Annotated

from pydantic import BeforeValidator, StringConstraints, conlist

# Present and non-blank after trimming.
RequiredStr = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1)]

TechName = Annotated[str, StringConstraints(strip_whitespace=True, min_length=1, max_length=100)]


def coerce_to_list(value: object) -> object:
    """Wrap a bare string into a one-element list; leave anything else for list validation."""
    if isinstance(value, str):
        return [value]
    return value


# A comma-separated string stays a single entry.
TechStack = Annotated[
    conlist(TechName, min_length=1, max_length=50),
    BeforeValidator(coerce_to_list),
]
