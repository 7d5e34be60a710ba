"""Backend version compatibility check."""

import re
from typing import Any, Sequence, Tuple

VersionTuple = Tuple[int, int, int]

# Oldest meme-generator-rs release whose /meme/infos payload we understand
MIN_BACKEND_VERSION: VersionTuple = (0, 2, 2)

_LEADING_DIGITS = re.compile(r"\d+")


def _component(part: str) -> int:
    match = _LEADING_DIGITS.match(part.strip())
    return int(match.group()) if match else 0


def parse_version(value: Any) -> VersionTuple:
    """Parse "major.minor.patch" into a 3-tuple.

    A component counts by its leading digits ("2-beta" -> 2); anything else,
    including a missing component, is 0. Non-string input parses as 0.0.0.
    """
    if not isinstance(value, str):
        return (0, 0, 0)
    text = value.strip()
    if text[:1] in ("v", "V"):
        text = text[1:]
    parts = [_component(p) for p in text.split(".")[:3]]
    parts += [0] * (3 - len(parts))
    return (parts[0], parts[1], parts[2])


def version_meets(actual: Any, minimum: Sequence[int] = MIN_BACKEND_VERSION) -> bool:
    """True iff `actual` is at least `minimum`, compared major, minor, then patch."""
    required = tuple(int(c) for c in list(minimum)[:3])
    required += (0,) * (3 - len(required))
    return parse_version(actual) >= required


def format_version(version: Sequence[int]) -> str:
    return ".".join(str(c) for c in version)
