"""Journey records and loading.

A journey is one observed path of step labels (usually page paths) with
the number of sessions that followed it and its share of all sessions.
"""

from __future__ import annotations

import json
import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from journeyflow.exceptions import JourneyInputError

logger = logging.getLogger(__name__)

# Keys that may wrap the journey list in a JSON document
_ENVELOPE_KEYS = ("journeys", "data")


@dataclass(frozen=True)
class Journey:
    """One weighted path through a sequence of steps.

    Attributes:
        path: Ordered step labels
        count: Number of times this exact path was observed
        percentage: Share of all journeys, in percent

    Example:
        >>> j = Journey.from_dict({"path": ["/", "/pricing"], "count": 4, "percentage": 20})
        >>> j.path, j.count
        (('/', '/pricing'), 4)
    """

    path: tuple[str, ...]
    count: int
    percentage: float = 0.0

    def __len__(self) -> int:
        return len(self.path)

    @classmethod
    def from_dict(cls, data: dict[str, Any], index: int | None = None) -> Journey:
        """Build a Journey from its JSON form, validating field types."""
        if not isinstance(data, dict):
            raise JourneyInputError("expected an object", index, data)

        path = data.get("path")
        if not isinstance(path, (list, tuple)):
            raise JourneyInputError("'path' must be a list of strings", index, data)
        if not all(isinstance(step, str) for step in path):
            raise JourneyInputError("every step in 'path' must be a string", index, data)

        count = data.get("count", 0)
        if isinstance(count, bool) or not isinstance(count, int) or count < 0:
            raise JourneyInputError("'count' must be a non-negative integer", index, data)

        percentage = data.get("percentage", 0.0)
        if isinstance(percentage, bool) or not isinstance(percentage, (int, float)):
            raise JourneyInputError("'percentage' must be a number", index, data)

        return cls(path=tuple(path), count=count, percentage=float(percentage))

    def to_dict(self) -> dict[str, Any]:
        return {"path": list(self.path), "count": self.count, "percentage": self.percentage}


def parse_journeys(entries: Any) -> list[Journey]:
    """Convert decoded JSON (a list, or an envelope holding one) to Journeys."""
    if isinstance(entries, dict):
        for key in _ENVELOPE_KEYS:
            if key in entries:
                entries = entries[key]
                break
        else:
            raise JourneyInputError(f"object has none of the keys {', '.join(_ENVELOPE_KEYS)}")

    if not isinstance(entries, list):
        raise JourneyInputError(f"expected a list of journeys, got {type(entries).__name__}")

    return [
        entry if isinstance(entry, Journey) else Journey.from_dict(entry, index)
        for index, entry in enumerate(entries)
    ]


def load_journeys(source: str | Path | Sequence[Any] | dict[str, Any]) -> list[Journey]:
    """Load journeys from a file path, a JSON string, or decoded data.

    Args:
        source: Path to a JSON file, a JSON document, or a list/envelope
            of journey dicts (Journey instances pass through unchanged)

    Returns:
        Journeys in input order

    Raises:
        JourneyInputError: If the data is not valid journey input
    """
    if isinstance(source, Path) or (isinstance(source, str) and not source.lstrip().startswith(("[", "{"))):
        path = Path(source)
        if not path.is_file():
            raise JourneyInputError(f"file not found: {path}")
        text = path.read_text(encoding="utf-8")
        logger.debug("Loading journeys from %s", path)
    elif isinstance(source, str):
        text = source
    else:
        return parse_journeys(list(source) if not isinstance(source, (list, dict)) else source)

    try:
        data = json.loads(text)
    except json.JSONDecodeError as e:
        raise JourneyInputError(f"not valid JSON ({e})") from e

    journeys = parse_journeys(data)
    logger.debug("Loaded %d journeys", len(journeys))
    return journeys


def sort_journeys(journeys: Iterable[Journey]) -> list[Journey]:
    """Order journeys by descending count, keeping input order for ties."""
    return sorted(journeys, key=lambda j: j.count, reverse=True)
