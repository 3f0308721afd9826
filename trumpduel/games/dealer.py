'''
    File name: trumpduel/games/dealer.py
    Date created: 10/02/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

from collections import deque
from typing import List
import numpy as np

from .player import TrumpDuelPlayer
from .card import TrumpDuelCard
from . import config


def build_deck() -> List[TrumpDuelCard]:
    """
    Returns the 30-card deck in canonical order.
    """

    deck = TrumpDuelCard.get_deck()

    assert len(deck) == config.NUM_CARDS_IN_DECK, "The deck must hold exactly 30 cards."
    assert len(set(deck)) == len(deck), "The deck must not contain duplicates."

    return deck


def shuffle_deck(deck: List[TrumpDuelCard], np_random: np.random.RandomState) -> List[TrumpDuelCard]:
    """
    Returns a uniformly shuffled copy of the deck using Fisher-Yates.
    """

    shuffled = list(deck)
    for i in range(len(shuffled) - 1, 0, -1):
        j = np_random.randint(0, i + 1)
        shuffled[i], shuffled[j] = shuffled[j], shuffled[i]

    return shuffled


class TrumpDuelDealer:
    """
    The TrumpDuelDealer shuffles the deck and deals cards in the two phases.
    """

    def __init__(self, np_random: np.random.RandomState) -> None:
        """
        Initializes TrumpDuelDealer.
        """

        self.np_random: np.random.RandomState = np_random

        self.shuffled_deck: List[TrumpDuelCard] = shuffle_deck(build_deck(), self.np_random)

        self._card_stack: deque[TrumpDuelCard] = deque(self.shuffled_deck)

    @property
    def pending_cards(self) -> List[TrumpDuelCard]:
        """
        Cards not dealt yet, in dealing order.
        """
        return list(self._card_stack)

    def deal_phase_one(self, players: List[TrumpDuelPlayer]) -> None:
        """
        Deals the 5 hand cards to each player, alternating player and computer.
        Then the dealer will pause until trump has been selected.
        """

        assert len(players) == config.NUM_PLAYERS, "Dealing requires exactly two players."
        assert len(self._card_stack) == config.NUM_CARDS_IN_DECK, "Phase one starts from a full deck."

        player, computer = players[config.PLAYER_ID], players[config.COMPUTER_ID]

        for i in range(config.NUM_HAND_SLOTS):
            player.hand[i] = self._card_stack.popleft()
            computer.hand[i] = self._card_stack.popleft()

    def deal_phase_two(self, players: List[TrumpDuelPlayer]) -> None:
        """
        Deal the remaining 20 cards after the trump has been selected.
        - Deals 5 face-down cards each, alternating.
        - Deals 5 face-up cards each on top of them, alternating.
        """
        assert len(players) == config.NUM_PLAYERS, "Dealing requires exactly two players."

        player, computer = players[config.PLAYER_ID], players[config.COMPUTER_ID]

        for i in range(config.NUM_COLUMNS_PER_PLAYER):
            player.layout[i].closed_card = self._card_stack.popleft()
            computer.layout[i].closed_card = self._card_stack.popleft()

        for i in range(config.NUM_COLUMNS_PER_PLAYER):
            player.layout[i].open_card = self._card_stack.popleft()
            computer.layout[i].open_card = self._card_stack.popleft()

        assert len(self._card_stack) == 0, "All cards should have been dealt."
