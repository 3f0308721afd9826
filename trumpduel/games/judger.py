'''
    File name: trumpduel/games/judger.py
    Date created: 10/02/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import numbers
from typing import Iterable, List, Optional, TYPE_CHECKING

from . import config
from .action_event import ActionEvent, DeclareTrumpAction, PlayCardAction
from .card import TrumpDuelCard

if TYPE_CHECKING:
    from .game import TrumpDuelGame


def is_legal_play(card: TrumpDuelCard, lead_suit: Optional[str], visible_cards: Iterable[TrumpDuelCard]) -> bool:
    """
    Checks the suit-following rule against the cards the player can see.
    - Opening a trick: any card.
    - Holding the lead suit in hand or face up: only the lead suit.
    - Otherwise: any card, there is no obligation to trump.
    Face-down cards never count, even though they become playable later.
    """

    if lead_suit is None:
        return True

    has_lead_suit = any(c.suit == lead_suit for c in visible_cards)
    if has_lead_suit:
        return card.suit == lead_suit

    return True


class TrumpDuelJudger:
    """
    Determines the set of legal actions for a player at any point of time.
    """

    def __init__(self, game: 'TrumpDuelGame') -> None:
        """
        Initializes TrumpDuelJudger.
        """

        self.game: 'TrumpDuelGame' = game

    def get_valid_plays(self, player_id: int) -> List[PlayCardAction]:
        """
        Lists every occupied hand slot, then every face-up slot, holding a legal card.
        """

        round = self.game.round
        if round is None:
            return []

        player = round.players[player_id]
        visible_cards = player.get_visible_cards()
        lead_suit = round.lead_suit

        valid_plays = []
        for index, card in enumerate(player.hand):
            if card is not None and is_legal_play(card, lead_suit, visible_cards):
                valid_plays.append(PlayCardAction(card, config.ZONE_HAND, index))

        for index, column in enumerate(player.layout):
            if column.is_playable() and is_legal_play(column.open_card, lead_suit, visible_cards):
                valid_plays.append(PlayCardAction(column.open_card, config.ZONE_FACE_UP, index))

        return valid_plays

    def validate_play(self, player_id: int, zone: str, index: int) -> Optional[str]:
        """
        Returns the reason a play must be rejected, or None if it is legal.
        """

        round = self.game.round
        if round is None:
            return "No round is in progress."

        if zone not in config.PLAYABLE_ZONES:
            return f"Unknown zone '{zone}'. Cards can only be played from {', '.join(config.PLAYABLE_ZONES)}."

        num_slots = config.NUM_HAND_SLOTS if zone == config.ZONE_HAND else config.NUM_COLUMNS_PER_PLAYER
        if not isinstance(index, numbers.Integral) or isinstance(index, bool) or not 0 <= index < num_slots:
            return f"Slot {index} does not exist in {zone}."

        player = round.players[player_id]
        card = player.card_at(zone, index)
        if card is None:
            return f"Slot {index} in {zone} is empty."

        if not is_legal_play(card, round.lead_suit, player.get_visible_cards()):
            return "Invalid play! You must follow suit if possible."

        return None

    def get_legal_actions(self) -> List[ActionEvent]:
        """
        List of legal actions for the current player.
        """

        phase = self.game.phase

        if phase == config.PHASE_TRUMP_SELECTION:
            return [DeclareTrumpAction(suit) for suit in DeclareTrumpAction.VALID_TRUMPS]

        if phase == config.PHASE_PLAYING:
            round = self.game.round
            if len(round.trick_moves) >= 2:
                return []
            return self.get_valid_plays(round.current_player_id)

        return []
