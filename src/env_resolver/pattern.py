"""
Filename patterns and their expansion into concrete candidates.

A pattern is an ordered sequence of parts. Each part is either a literal
filename fragment or a fragment carrying the `$1` placeholder, which is
replaced with the active environment name. Optional parts may be left out,
so a pattern with `k` optional parts describes `2 ** k` filenames.
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Iterable, List, Mapping, Tuple, Union

from pydantic import BaseModel, ConfigDict, ValidationError

from .exceptions import InvalidPattern


PLACEHOLDER = "$1"


class PartType(str, Enum):
    """Kind of a pattern part."""

    FILENAME = "filename"  # literal fragment, used as-is
    NODE_ENV = "node_env"  # fragment with the environment placeholder


class PatternPart(BaseModel):
    """One fragment of a filename pattern.

    Validates from the external mapping form
    `{"value": ".$1", "type": "node_env", "optional": True}`.
    """

    model_config = ConfigDict(frozen=True)

    value: str
    type: PartType
    optional: bool = False


PatternLike = Iterable[Union[PatternPart, Mapping[str, Any]]]


DEFAULT_PATTERN: Tuple[PatternPart, ...] = (
    PatternPart(value=".env", type=PartType.FILENAME),
    PatternPart(value=".$1", type=PartType.NODE_ENV, optional=True),
)

FALLBACK_FILENAME = ".env"

FALLBACK_PATTERN: Tuple[PatternPart, ...] = (PatternPart(value=FALLBACK_FILENAME, type=PartType.FILENAME),)


def coerce_pattern(pattern: PatternLike) -> List[PatternPart]:
    """Validate a pattern given as parts or plain mappings."""
    parts: List[PatternPart] = []
    for index, part in enumerate(pattern):
        if isinstance(part, PatternPart):
            parts.append(part)
            continue
        try:
            parts.append(PatternPart.model_validate(part))
        except ValidationError as exc:
            raise InvalidPattern(index=index, reason=str(exc)) from exc
    return parts


def normalize_part(part: PatternPart, env: str) -> str:
    """Return the literal contribution of `part` for environment `env`.

    Only the first placeholder is substituted; a part without one is
    returned unchanged.
    """
    if part.type is PartType.NODE_ENV:
        return part.value.replace(PLACEHOLDER, env, 1)
    return part.value


def generate_combinations(pattern: PatternLike, env: str) -> List[str]:
    """Expand `pattern` into every filename it describes.

    For each optional part, every combination built so far is first copied
    to the end of the list without the part, then the part is appended to
    the existing one. The all-included combination therefore stays first,
    and candidate priority follows this exact order. Duplicates are kept.
    """
    combinations: List[List[str]] = [[]]
    for part in coerce_pattern(pattern):
        processed = normalize_part(part, env)
        current_length = len(combinations)
        for i in range(current_length):
            if part.optional:
                combinations.append(list(combinations[i]))
            combinations[i].append(processed)

    return ["".join(parts) for parts in combinations]
