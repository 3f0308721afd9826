'''
    File name: trumpduel/games/player.py
    Date created: 10/02/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

from typing import Optional, List

from . import config
from .card import TrumpDuelCard


class _CardColumn:
    """
    Helper class to represent a face-up slot and the face-down slot below it.
    """

    def __init__(self) -> None:
        """
        Initializes empty card column.
        """

        self.open_card: Optional[TrumpDuelCard] = None
        self.closed_card: Optional[TrumpDuelCard] = None

    def is_playable(self) -> bool:
        """
        A column is playable if it has an open card.
        """

        return self.open_card is not None

    def has_card_underneath(self) -> bool:
        """
        Checks if playing the open card will reveal a closed card.
        """

        return self.closed_card is not None

    def play_card(self) -> TrumpDuelCard:
        """
        Removes the open card and promotes the closed card to the open position.
        """

        assert self.is_playable(), "Cannot play a card from an empty column."

        played_card = self.open_card
        self.open_card = self.closed_card
        self.closed_card = None

        return played_card

    def __repr__(self) -> str:
        """
        Representation of the card column.
        """
        return f"_CardColumn(open={self.open_card}, closed={self.closed_card is not None})"


class TrumpDuelPlayer:
    """
    Manages the hand, the card columns and the trick counters of one player.
    """

    def __init__(self, player_id: int) -> None:
        """
        Initializes TrumpDuelPlayer.
        """

        if player_id not in {config.PLAYER_ID, config.COMPUTER_ID}:
            raise ValueError(f"Invalid player_id '{player_id}'. Must be 0 or 1.")

        self.player_id: int = player_id
        self.score: int = 0
        self.reset_round()

    def reset_round(self) -> None:
        """
        Empties every slot and the trick counters for a new round.
        """

        self.hand: List[Optional[TrumpDuelCard]] = [None] * config.NUM_HAND_SLOTS
        self.layout: List[_CardColumn] = [_CardColumn() for _ in range(config.NUM_COLUMNS_PER_PLAYER)]
        self.tricks_won: int = 0
        self.won_tricks: List[List[tuple[int, TrumpDuelCard]]] = []

    @property
    def face_up(self) -> List[Optional[TrumpDuelCard]]:
        return [col.open_card for col in self.layout]

    @property
    def face_down(self) -> List[Optional[TrumpDuelCard]]:
        return [col.closed_card for col in self.layout]

    def get_hand_cards(self) -> List[TrumpDuelCard]:
        return [card for card in self.hand if card is not None]

    def get_face_up_cards(self) -> List[TrumpDuelCard]:
        return [col.open_card for col in self.layout if col.is_playable()]

    def get_visible_cards(self) -> List[TrumpDuelCard]:
        """
        Returns the remaining hand and face-up cards, the only cards that bind suit following.
        """

        return self.get_hand_cards() + self.get_face_up_cards()

    def get_hidden_cards(self) -> List[TrumpDuelCard]:
        """
        Returns a list of all cards that are face down.
        """

        return [col.closed_card for col in self.layout if col.has_card_underneath()]

    def count_remaining_cards(self) -> int:
        """
        Counts the cards left in hand and face up.
        """

        return len(self.get_visible_cards())

    def card_at(self, zone: str, index: int) -> Optional[TrumpDuelCard]:
        """
        Looks up the card in a slot, None for an empty slot.
        """

        if zone == config.ZONE_HAND:
            return self.hand[index]
        if zone == config.ZONE_FACE_UP:
            return self.layout[index].open_card
        raise ValueError(f"Invalid zone '{zone}'. Must be one of {config.PLAYABLE_ZONES}.")

    def remove_card(self, zone: str, index: int) -> TrumpDuelCard:
        """
        Empties a slot. Emptying a face-up slot reveals the face-down card below it.
        """

        if zone == config.ZONE_HAND:
            card = self.hand[index]
            assert card is not None, f"{self} has no card in hand slot {index}."
            self.hand[index] = None
            return card

        if zone == config.ZONE_FACE_UP:
            return self.layout[index].play_card()

        raise ValueError(f"Invalid zone '{zone}'. Must be one of {config.PLAYABLE_ZONES}.")

    def find_slot_for_card(self, card_to_find: TrumpDuelCard) -> Optional[tuple[str, int]]:
        """
        Finds the zone and index that currently hold a specific card.
        """

        for index, card in enumerate(self.hand):
            if card is not None and card == card_to_find:
                return config.ZONE_HAND, index

        for index, column in enumerate(self.layout):
            if column.is_playable() and column.open_card == card_to_find:
                return config.ZONE_FACE_UP, index

        return None

    def add_points(self, points: int) -> None:
        """
        Adds a round score to the cumulative game score.
        """
        self.score += points

    @property
    def name(self) -> str:
        return config.PLAYER_NAMES[self.player_id]

    def __str__(self) -> str:
        """
        String representation of the player.
        """
        return self.name.capitalize()
