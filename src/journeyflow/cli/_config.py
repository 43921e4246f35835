"""Project-level configuration from pyproject.toml.

Reads the [tool.journeyflow] section to provide default cutoffs, step
count, domain and layout overrides for the CLI.
"""

from __future__ import annotations

import logging
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from journeyflow.layout.engine import LayoutConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JourneyflowConfig:
    """Configuration from [tool.journeyflow] in pyproject.toml."""

    max_journeys: int | None = None
    steps: int | None = None
    domain: str | None = None
    layout: dict[str, Any] = field(default_factory=dict)

    def layout_config(self, **overrides: Any) -> LayoutConfig:
        """LayoutConfig from configured values, then non-None overrides."""
        config = LayoutConfig().with_overrides(self.layout)
        if self.steps is not None:
            config = config.with_overrides({"steps": self.steps})
        return config.with_overrides(overrides)


def find_pyproject(start: Path | None = None) -> Path | None:
    """Walk up from start directory to find pyproject.toml."""
    current = (start or Path.cwd()).resolve()
    for directory in (current, *current.parents):
        candidate = directory / "pyproject.toml"
        if candidate.is_file():
            return candidate
    return None


def load_config(start: Path | None = None) -> JourneyflowConfig:
    """Load [tool.journeyflow] from the nearest pyproject.toml.

    Returns default config if no pyproject.toml or no [tool.journeyflow] section.
    """
    path = find_pyproject(start)
    if path is None:
        return JourneyflowConfig()

    if sys.version_info >= (3, 11):
        import tomllib
    else:
        try:
            import tomli as tomllib
        except ImportError:
            return JourneyflowConfig()

    with open(path, "rb") as f:
        data = tomllib.load(f)

    section = data.get("tool", {}).get("journeyflow", {})
    if not section:
        return JourneyflowConfig()

    layout = dict(section.get("layout", {}))
    unknown = sorted(set(layout) - LayoutConfig.field_names())
    if unknown:
        logger.warning("Ignoring unknown [tool.journeyflow.layout] keys in %s: %s", path, ", ".join(unknown))
        layout = {k: v for k, v in layout.items() if k not in unknown}

    return JourneyflowConfig(
        max_journeys=section.get("max_journeys"),
        steps=section.get("steps"),
        domain=section.get("domain"),
        layout=layout,
    )
