"""History Manager — bounded, order-preserving, dedup-on-push log of prior configurations.

Invariants:
    - Capacity is fixed at MAX_HISTORY_ENTRIES (5); pushing onto a full log evicts the oldest
    - Entries are ordered most recent first
    - Pushing a config with no source (type none or missing path) is a no-op
    - Pushing a config whose (type, path, shape, frame, glow) equals the head is a no-op
    - Reverting never modifies history

Design Decisions:
    - HistoryLog as an explicit immutable ring buffer: eviction lives in one place instead
      of slicing scattered across call sites
    - saved_at injected by the caller when determinism matters (tests, replays)
"""

from dataclasses import dataclass
from datetime import datetime, timezone

from logo_engine.core.domain_types import (
    GlowIntensity, MAX_HISTORY_ENTRIES, SourceType,
)
from logo_engine.core.logo_config import HistoryEntry, LogoConfiguration


def _utc_now_iso() -> str:
    return datetime.now(timezone.utc).isoformat().replace("+00:00", "Z")


def snapshot_entry(config: LogoConfiguration, saved_at: str | None = None) -> HistoryEntry:
    """Freeze every cosmetic field of the config, not just its source."""
    return HistoryEntry(
        source_type=config.source_type,
        path=config.path or "",
        saved_at=saved_at or _utc_now_iso(),
        artist=config.artist or None,
        shape=config.shape,
        frame=config.frame,
        icon_color=config.icon_color,
        frame_color=config.frame_color,
        glow=config.glow,
        glow_color=config.glow_color,
        crop=config.crop,
    )


@dataclass(frozen=True)
class HistoryLog:
    """Fixed-capacity push-front log."""
    entries: tuple[HistoryEntry, ...] = ()
    capacity: int = MAX_HISTORY_ENTRIES

    def __post_init__(self):
        if len(self.entries) > self.capacity:
            object.__setattr__(self, "entries", self.entries[: self.capacity])

    def __len__(self) -> int:
        return len(self.entries)

    @property
    def head(self) -> HistoryEntry | None:
        return self.entries[0] if self.entries else None

    def push(self, entry: HistoryEntry) -> "HistoryLog":
        """Prepend unless it duplicates the head; evict beyond capacity."""
        if self.head is not None and self.head.dedup_key == entry.dedup_key:
            return self
        return HistoryLog((entry,) + self.entries, self.capacity)


def push_history(
    history: tuple[HistoryEntry, ...],
    config: LogoConfiguration,
    saved_at: str | None = None,
) -> tuple[HistoryEntry, ...]:
    """Remember `config` in front of `history`. Never fails."""
    if not config.has_source:
        return history
    return HistoryLog(tuple(history)).push(snapshot_entry(config, saved_at)).entries


def revert_to_history(
    entry: HistoryEntry, history: tuple[HistoryEntry, ...],
) -> LogoConfiguration:
    """Rebuild a full configuration from `entry`, keeping `history` unchanged."""
    return LogoConfiguration(
        source_type=entry.source_type,
        path=entry.path,
        artist=entry.artist,
        shape=entry.shape,
        frame=entry.frame,
        icon_color=entry.icon_color,
        frame_color=entry.frame_color,
        glow=entry.glow or GlowIntensity.NONE,
        glow_color=entry.glow_color,
        crop=entry.crop,
        history=tuple(history),
    )


def previous_uploads(history: tuple[HistoryEntry, ...]) -> tuple[HistoryEntry, ...]:
    """Entries that point at uploaded images, most recent first."""
    return tuple(e for e in history if e.source_type == SourceType.CUSTOM_IMAGE)
