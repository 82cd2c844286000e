# Area: Core
"""
breakout_rules._core.events — Event types and event records
============================================================

Defines the discrete events fed to the state machine, plus decoding of
the plain-dict event records used by event scripts and engine bindings.

Record format:
    {"type": "BLOCK_HIT", "key": 12}
    {"type": "BALL_LOST"}
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Union

from .enums import EventKind
from .state import is_block_key
from ..errors import EventRecordError


@dataclass(frozen=True)
class Launch:
    """Player launched the ball."""
    kind: ClassVar[EventKind] = EventKind.LAUNCH


@dataclass(frozen=True)
class BallLost:
    """Ball left the play area through the bottom boundary."""
    kind: ClassVar[EventKind] = EventKind.BALL_LOST


@dataclass(frozen=True)
class BlockHit:
    """Ball struck the block identified by ``key``."""
    key: int
    kind: ClassVar[EventKind] = EventKind.BLOCK_HIT


@dataclass(frozen=True)
class AllBlocksCleared:
    """Frame check found no blocks left."""
    kind: ClassVar[EventKind] = EventKind.ALL_BLOCKS_CLEARED


@dataclass(frozen=True)
class ResetGame:
    """Unconditional return to the initial state (game over)."""
    kind: ClassVar[EventKind] = EventKind.RESET_GAME


Event = Union[Launch, BallLost, BlockHit, AllBlocksCleared, ResetGame]

_EVENT_CLASSES = {
    EventKind.LAUNCH: Launch,
    EventKind.BALL_LOST: BallLost,
    EventKind.BLOCK_HIT: BlockHit,
    EventKind.ALL_BLOCKS_CLEARED: AllBlocksCleared,
    EventKind.RESET_GAME: ResetGame,
}

# Legacy action names (accept both for compatibility)
EVENT_ALIASES: Dict[str, EventKind] = {
    "PLAY": EventKind.LAUNCH,
    "RESET_BALL": EventKind.BALL_LOST,
}


def resolve_event_kind(name: str) -> EventKind:
    """
    Map a record type name to its EventKind.

    Raises:
        KeyError: If the name is neither canonical nor an alias
    """
    normalized = name.strip().upper()
    if normalized in EVENT_ALIASES:
        return EVENT_ALIASES[normalized]
    return EventKind[normalized]


def parse_event(record: Dict[str, Any]) -> Event:
    """
    Decode one event record.

    Args:
        record: Dict with a ``type`` field and, for BLOCK_HIT, a ``key``

    Returns:
        The decoded event

    Raises:
        EventRecordError: If the record is malformed
    """
    if not isinstance(record, dict):
        raise EventRecordError(record, f"expected object, got {type(record).__name__}")

    name = record.get("type")
    if not isinstance(name, str) or not name.strip():
        raise EventRecordError(record, "missing required field: type")

    try:
        kind = resolve_event_kind(name)
    except KeyError:
        raise EventRecordError(record, f"unknown event type: {name}") from None

    if kind is EventKind.BLOCK_HIT:
        key = record.get("key")
        if not is_block_key(key):
            raise EventRecordError(record, "BLOCK_HIT requires an integer key")
        return BlockHit(key=key)

    return _EVENT_CLASSES[kind]()


def event_to_record(event: Event) -> Dict[str, Any]:
    """Encode an event as a plain dict record."""
    record: Dict[str, Any] = {"type": event.kind.value}
    if isinstance(event, BlockHit):
        record["key"] = event.key
    return record
