"""Node and link coloring."""

from journeyflow.styles.segments import (
    DEFAULT_COLOR,
    FALLBACK_LINK_COLOR,
    PALETTE,
    SegmentColorer,
    segment_key,
)

__all__ = ["DEFAULT_COLOR", "FALLBACK_LINK_COLOR", "PALETTE", "SegmentColorer", "segment_key"]
