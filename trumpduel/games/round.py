'''
    File name: trumpduel/games/round.py
    Date created: 10/03/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import logging
from typing import List, Optional, Tuple

from . import config
from .player import TrumpDuelPlayer
from .dealer import TrumpDuelDealer
from .card import TrumpDuelCard
from .action_event import PlayCardAction

log = logging.getLogger(__name__)


def determine_trick_winner(trick_moves: List[Tuple[int, TrumpDuelCard]], trump_suit: str, lead_suit: str) -> int:
    """
    Determines the winner of a complete trick.
    - A single trump wins, two trumps compare by value.
    - Without trumps, a single lead-suit card wins, two lead-suit cards compare by value.
    """

    assert len(trick_moves) == 2, "A trick must have exactly two cards to determine a winner."

    (first_id, first_card), (second_id, second_card) = trick_moves
    first_trump = first_card.suit == trump_suit
    second_trump = second_card.suit == trump_suit

    if first_trump != second_trump:
        return first_id if first_trump else second_id

    if first_trump and second_trump:
        return first_id if first_card.value > second_card.value else second_id

    first_follows = first_card.suit == lead_suit
    second_follows = second_card.suit == lead_suit

    if first_follows and second_follows:
        return first_id if first_card.value > second_card.value else second_id

    if second_follows and not first_follows:
        return second_id

    return first_id


class TrumpDuelRound:
    """
    Manages the zones, the current trick and the played cards of a single round.
    """

    def __init__(self, dealer: TrumpDuelDealer, players: List[TrumpDuelPlayer], trump_selector_id: int) -> None:
        """
        Initializes TrumpDuelRound.
        """

        self.dealer: TrumpDuelDealer = dealer
        self.players: List[TrumpDuelPlayer] = players
        self.trump_selector_id: int = trump_selector_id

        self.current_player_id: int = trump_selector_id
        self.trick_leader_id: int = trump_selector_id
        self.trump_suit: Optional[str] = None

        self.trick_moves: List[Tuple[int, TrumpDuelCard]] = []
        self.lead_suit: Optional[str] = None
        self.tricks_played: int = 0
        self.played_cards: List[TrumpDuelCard] = []

    def set_trump(self, trump_suit: str) -> None:
        """
        Fixes the trump suit for the rest of the round.
        """

        assert self.trump_suit is None, "Trump can only be selected once per round."

        self.trump_suit = trump_suit

    def target_for(self, player_id: int) -> int:
        """
        Number of tricks a player has to reach this round.
        """

        if player_id == self.trump_selector_id:
            return config.TRUMP_SELECTOR_TARGET
        return config.OPPONENT_TARGET

    def play_card(self, action: PlayCardAction) -> TrumpDuelCard:
        """
        Removes the card from its slot and adds it to the trick.
        Returns the card that was played.
        """

        assert self.trump_suit is not None, "Cannot play a card before trump is selected."
        assert len(self.trick_moves) < 2, "A trick never holds more than two cards."

        player = self.players[self.current_player_id]

        zone, index = action.zone, action.index
        if zone is None or index is None:
            slot = player.find_slot_for_card(action.card)
            assert slot is not None, f"{player} tried to play {action.card}, which is not in their hand or face up."
            zone, index = slot

        card = player.remove_card(zone, index)
        assert card == action.card, f"{player} tried to play {action.card} but slot {zone}[{index}] held {card}."

        self.trick_moves.append((self.current_player_id, card))
        log.debug("%s played %s from %s[%d]", player, card, zone, index)

        if len(self.trick_moves) == 1:
            self.lead_suit = card.suit
            self.current_player_id = 1 - self.current_player_id

        return card

    def is_trick_complete(self) -> bool:
        return len(self.trick_moves) == 2

    def resolve_trick(self) -> Tuple[int, TrumpDuelCard]:
        """
        Awards the trick and updates state. Returns the winner and the winning card.
        """

        winner_id = determine_trick_winner(self.trick_moves, self.trump_suit, self.lead_suit)
        winning_card = next(card for player_id, card in self.trick_moves if player_id == winner_id)

        for _, card in self.trick_moves:
            self.played_cards.append(card)

        winner = self.players[winner_id]
        winner.tricks_won += 1
        winner.won_tricks.append(list(self.trick_moves))

        self.trick_moves = []
        self.lead_suit = None
        self.tricks_played += 1
        self.trick_leader_id = winner_id
        self.current_player_id = winner_id

        return winner_id, winning_card

    def is_over(self) -> bool:
        """
        Checks if the round is over, i.e. nobody has cards left in hand or face up.
        """

        return all(player.count_remaining_cards() == 0 for player in self.players)
