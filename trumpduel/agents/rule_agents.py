'''
    File name: trumpduel/agents/rule_agents.py
    Date created: 10/06/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import random
from collections import Counter
from typing import Iterable, List, Optional

from trumpduel.games import config
from trumpduel.games.action_event import DeclareTrumpAction, PlayCardAction
from trumpduel.games.card import TrumpDuelCard


def _lowest(plays: List[PlayCardAction]) -> PlayCardAction:
    """
    Lowest value play, the first one on ties.
    """
    return min(plays, key=lambda a: a.card.value)


def _highest(plays: List[PlayCardAction]) -> PlayCardAction:
    """
    Highest value play, the first one on ties.
    """
    return max(plays, key=lambda a: a.card.value)


def select_trump_suit(hand_cards: Iterable[TrumpDuelCard]) -> str:
    """
    Scores every suit as 2 * high cards + suit length over the hand cards and picks the best.
    Ties go to the suit that comes first in suit order.
    """

    hand_cards = [card for card in hand_cards if card is not None]
    suit_counts = Counter(card.suit for card in hand_cards)
    high_cards = Counter(card.suit for card in hand_cards if card.rank in config.HIGH_CARD_RANKS)

    best_suit = config.VALID_SUITS[0]
    best_score = -1
    for suit in config.VALID_SUITS:
        score = high_cards[suit] * 2 + suit_counts[suit]
        if score > best_score:
            best_score = score
            best_suit = suit

    return best_suit


def get_remaining_cards_in_suit(suit: str, played_cards: Iterable[TrumpDuelCard]) -> List[TrumpDuelCard]:
    """
    Cards of a suit that have not been played yet, wherever they are.
    """

    played = set(played_cards)
    return [card for card in TrumpDuelCard.get_deck() if card.suit == suit and card not in played]


def is_highest_remaining(card: TrumpDuelCard, played_cards: Iterable[TrumpDuelCard]) -> bool:
    """
    Checks if a card is a master card: no unplayed card of its suit is higher.
    """

    remaining = get_remaining_cards_in_suit(card.suit, played_cards)
    return not any(c.value > card.value and c != card for c in remaining)


class _TrumpDuelRuleAgent:
    """
    Shared plumbing of the rule agents: seeding, trump selection and the rlcard-style step.
    """

    def __init__(self, seed=None, rng: Optional[random.Random] = None):
        """
        Initializes the agent with its own random source.
        """

        self.use_raw = True
        self.rng = rng if rng is not None else random.Random(seed)

    def seed(self, seed=None):
        """
        Sets a seed.
        """

        self.rng = random.Random(seed)

    def select_trump(self, raw_info: dict) -> DeclareTrumpAction:
        """
        Picks the trump suit from the hand cards only.
        """

        return DeclareTrumpAction(select_trump_suit(raw_info['my_hand']))

    def select_play(self, valid_plays: List[PlayCardAction], raw_info: dict) -> Optional[PlayCardAction]:
        raise NotImplementedError

    def step(self, state):
        """
        Selects a legal action.
        """

        raw_info = state['raw_state_info']

        if raw_info['round_phase'] == config.PHASE_TRUMP_SELECTION:
            return self.select_trump(raw_info)

        valid_plays = [a for a in state['raw_legal_actions'] if isinstance(a, PlayCardAction)]
        return self.select_play(valid_plays, raw_info)

    def eval_step(self, state):
        """
        Selects a legal action for evaluation.
        """

        action = self.step(state)
        return action, {}


class TrumpDuelEasyRuleAgent(_TrumpDuelRuleAgent):
    """
    A stochastic agent: sometimes random, otherwise the lowest or the highest card.
    """

    def select_play(self, valid_plays, raw_info):
        if not valid_plays:
            return None

        if self.rng.random() < config.EASY_RANDOM_PLAY_PROBABILITY:
            return self.rng.choice(valid_plays)

        if self.rng.random() < config.EASY_LOWEST_PLAY_PROBABILITY:
            return _lowest(valid_plays)
        return _highest(valid_plays)


class TrumpDuelMediumRuleAgent(_TrumpDuelRuleAgent):
    """
    A deterministic agent that only reasons about the opponent's face-up cards.
    """

    def select_play(self, valid_plays, raw_info):
        if not valid_plays:
            return None

        if not raw_info['trick_moves']:
            return self._select_leading_play(valid_plays, raw_info)
        return self._select_following_play(valid_plays, raw_info)

    def _select_leading_play(self, valid_plays, raw_info):
        opponent_face_up = raw_info['opponent_visible_cards']

        # An Ace wins if the opponent shows no Ace of that suit
        for action in valid_plays:
            if action.card.rank == 'A' and not any(c.suit == action.card.suit and c.rank == 'A' for c in opponent_face_up):
                return action

        # Low cards in suits where the opponent shows nothing or something stronger
        safe_plays = []
        for action in valid_plays:
            opponent_max = max((c.value for c in opponent_face_up if c.suit == action.card.suit), default=0)
            if action.card.value < opponent_max or opponent_max == 0:
                safe_plays.append(action)
        if safe_plays:
            return _lowest(safe_plays)

        return _lowest(valid_plays)

    def _select_following_play(self, valid_plays, raw_info):
        opponent_face_up = raw_info['opponent_visible_cards']
        trump_suit = raw_info['trump_suit']
        lead_suit = raw_info['lead_suit']
        led_card = raw_info['trick_moves'][0][1]

        lead_suit_plays = [a for a in valid_plays if a.card.suit == lead_suit]
        trump_plays = [a for a in valid_plays if a.card.suit == trump_suit]

        if lead_suit_plays:
            winning_plays = [a for a in lead_suit_plays if a.card.value > led_card.value]
            unbeatable_plays = [
                a for a in winning_plays
                if not any(c.suit == lead_suit and c.value > a.card.value for c in opponent_face_up)
            ]
            if unbeatable_plays:
                return _lowest(unbeatable_plays)
            return _lowest(lead_suit_plays)

        if trump_plays and led_card.suit != trump_suit:
            lowest_trump = _lowest(trump_plays)
            opponent_beats_it = any(c.suit == trump_suit and c.value > lowest_trump.card.value for c in opponent_face_up)
            if not opponent_beats_it:
                return lowest_trump

        return _lowest(valid_plays)


class TrumpDuelHardRuleAgent(_TrumpDuelRuleAgent):
    """
    An agent counting the played cards to know which cards are masters of their suit.
    Risk taking depends on how many tricks are still needed to reach the target.
    """

    def select_play(self, valid_plays, raw_info):
        if not valid_plays:
            return None

        target = config.TRUMP_SELECTOR_TARGET if raw_info['trump_selector_id'] == raw_info['player_id'] else config.OPPONENT_TARGET
        tricks_needed = target - raw_info['my_tricks_won']
        tricks_remaining = config.TOTAL_TRICKS - raw_info['tricks_played']

        if not raw_info['trick_moves']:
            return self._select_leading_play(valid_plays, raw_info, tricks_needed, tricks_remaining)
        return self._select_following_play(valid_plays, raw_info, tricks_needed, tricks_remaining)

    def _select_leading_play(self, valid_plays, raw_info, tricks_needed, tricks_remaining):
        trump_suit = raw_info['trump_suit']
        played_cards = raw_info['played_cards']

        master_plays = [a for a in valid_plays if is_highest_remaining(a.card, played_cards)]

        # Cash masters while tricks are needed, saving trumps
        if master_plays and tricks_needed > 0:
            non_trump_masters = [a for a in master_plays if a.card.suit != trump_suit]
            if non_trump_masters:
                return non_trump_masters[0]
            return master_plays[0]

        # Behind schedule: draw trumps with the highest master trump
        if tricks_needed > tricks_remaining / 2:
            master_trumps = [a for a in valid_plays if a.card.suit == trump_suit and is_highest_remaining(a.card, played_cards)]
            if master_trumps:
                return _highest(master_trumps)

        # Probe with a low side suit card
        non_trump_plays = [a for a in valid_plays if a.card.suit != trump_suit]
        if non_trump_plays:
            return _lowest(non_trump_plays)

        return _lowest(valid_plays)

    def _select_following_play(self, valid_plays, raw_info, tricks_needed, tricks_remaining):
        trump_suit = raw_info['trump_suit']
        lead_suit = raw_info['lead_suit']
        played_cards = raw_info['played_cards']
        led_card = raw_info['trick_moves'][0][1]

        lead_suit_plays = [a for a in valid_plays if a.card.suit == lead_suit]
        trump_plays = [a for a in valid_plays if a.card.suit == trump_suit]

        if lead_suit_plays:
            winning_plays = [a for a in lead_suit_plays if a.card.value > led_card.value]
            if not winning_plays:
                return _lowest(lead_suit_plays)

            remaining_in_suit = get_remaining_cards_in_suit(lead_suit, played_cards)
            guaranteed_plays = [
                a for a in winning_plays
                if not any(c.value > a.card.value and c != a.card for c in remaining_in_suit)
            ]
            if guaranteed_plays:
                return _lowest(guaranteed_plays)

            if tricks_needed > tricks_remaining - 2:
                return _lowest(winning_plays)

            return _lowest(lead_suit_plays)

        if trump_plays and led_card.suit != trump_suit:
            if tricks_needed > 0:
                master_trumps = [a for a in trump_plays if is_highest_remaining(a.card, played_cards)]
                if master_trumps:
                    return _lowest(master_trumps)

                opponent_trumps = [c for c in raw_info['opponent_visible_cards'] if c.suit == trump_suit]
                if not opponent_trumps or tricks_needed >= tricks_remaining / 2:
                    return _lowest(trump_plays)

            non_trump_plays = [a for a in valid_plays if a.card.suit != trump_suit]
            if non_trump_plays:
                return _lowest(non_trump_plays)
            return _lowest(trump_plays)

        return _lowest(valid_plays)
