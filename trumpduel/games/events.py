'''
    File name: trumpduel/games/events.py
    Date created: 10/05/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional


class EventType(str, Enum):
    """
    Notifications the engine emits to its observers.
    """

    GAME_STARTED = 'game_started'
    ROUND_STARTED = 'round_started'
    COIN_TOSSED = 'coin_tossed'
    TRUMP_SELECTED = 'trump_selected'
    CARDS_DEALT = 'cards_dealt'
    CARD_PLAYED = 'card_played'
    INVALID_PLAY = 'invalid_play'
    TRICK_RESOLVED = 'trick_resolved'
    ROUND_ENDED = 'round_ended'
    GAME_OVER = 'game_over'
    DIFFICULTY_CHANGED = 'difficulty_changed'
    GAME_RESTARTED = 'game_restarted'


@dataclass(frozen=True)
class GameEvent:
    """
    A single engine notification.

    Attributes:
        event_type: What happened.
        sequence_num: Position of the event in the engine's event stream.
        player: Name of the player who caused the event, if any.
        data: Event-specific fields.
    """

    event_type: EventType
    sequence_num: int
    player: Optional[str] = None
    data: Dict[str, Any] = field(default_factory=dict)
