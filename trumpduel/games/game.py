'''
    File name: trumpduel/games/game.py
    Date created: 10/03/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import copy
import logging
from typing import List, Dict, Any, Optional
import numpy as np

from . import config
from .player import TrumpDuelPlayer
from .dealer import TrumpDuelDealer
from .round import TrumpDuelRound
from .judger import TrumpDuelJudger
from .action_event import ActionEvent, DeclareTrumpAction, PlayCardAction
from .card import TrumpDuelCard

log = logging.getLogger(__name__)


class TrumpDuelGame:
    """
    TrumpDuelGame runs the round lifecycle and keeps the cumulative game state.

    Phases follow setup -> coin-toss (first round only) -> trump-selection ->
    dealing-remaining -> playing -> round-end -> trump-selection ... -> game-over.
    """

    def __init__(self, seed: Optional[int] = None) -> None:
        """
        Initializes TrumpDuelGame.
        """

        self.np_random: np.random.RandomState = np.random.RandomState(seed)
        self.judger: TrumpDuelJudger = TrumpDuelJudger(game=self)
        self.players: List[TrumpDuelPlayer] = [TrumpDuelPlayer(i) for i in range(config.NUM_PLAYERS)]
        self.restart()

    def seed(self, seed: int) -> None:
        """
        Sets a seed.
        """

        self.np_random = np.random.RandomState(seed)

    def restart(self) -> None:
        """
        Resets scores, round number, phase, trump and played cards.
        """

        for player in self.players:
            player.score = 0
            player.reset_round()

        self.phase: str = config.PHASE_SETUP
        self.round: Optional[TrumpDuelRound] = None
        self.round_number: int = 1
        self.game_over: bool = False
        self.winner_id: Optional[int] = None
        self.last_trump_selector: Optional[int] = None
        self.coin_toss_winner: Optional[int] = None
        self.is_first_round: bool = True
        self.last_round_result: Optional[Dict[str, Any]] = None

    @staticmethod
    def get_num_players() -> int:
        """
        Returns the number of players.
        """

        return config.NUM_PLAYERS

    @staticmethod
    def get_num_actions() -> int:
        """
        Returns the total number of unique actions in the game.
        """

        return ActionEvent.get_num_actions()

    def _advance(self, expected_phases: tuple, next_phase: str) -> None:
        assert self.phase in expected_phases, f"Cannot enter '{next_phase}' from '{self.phase}'."
        log.debug("Phase %s -> %s", self.phase, next_phase)
        self.phase = next_phase

    def start_new_round(self) -> None:
        """
        Resets the round state and deals the hand cards.
        The first round continues with a coin toss, later rounds alternate the trump selector.
        """

        if self.game_over:
            raise ValueError("Cannot start a round in a completed game. Restart first.")

        assert self.phase in (config.PHASE_SETUP, config.PHASE_ROUND_END), \
            f"Cannot start a new round from '{self.phase}'."

        if self.phase == config.PHASE_ROUND_END:
            self.round_number += 1

        for player in self.players:
            player.reset_round()

        dealer = TrumpDuelDealer(self.np_random)
        dealer.deal_phase_one(self.players)

        if self.is_first_round:
            self.round = TrumpDuelRound(dealer, self.players, trump_selector_id=config.PLAYER_ID)
            self._advance((config.PHASE_SETUP,), config.PHASE_COIN_TOSS)
            return

        self.last_trump_selector = 1 - self.last_trump_selector
        self.round = TrumpDuelRound(dealer, self.players, trump_selector_id=self.last_trump_selector)
        self._advance((config.PHASE_ROUND_END,), config.PHASE_TRUMP_SELECTION)

    def toss_coin(self, call: str) -> tuple[str, int]:
        """
        Flips a fair coin against the player's call. The winner selects trump in the first round.
        """

        if call not in config.COIN_SIDES:
            raise ValueError(f"Invalid coin call '{call}'. Must be one of {config.COIN_SIDES}.")

        assert self.phase == config.PHASE_COIN_TOSS, f"Cannot toss the coin during '{self.phase}'."

        result = config.COIN_SIDES[0] if self.np_random.rand() < 0.5 else config.COIN_SIDES[1]
        winner_id = config.PLAYER_ID if call == result else config.COMPUTER_ID

        self.coin_toss_winner = winner_id
        self.last_trump_selector = winner_id
        self.is_first_round = False

        self.round.trump_selector_id = winner_id
        self.round.current_player_id = winner_id
        self.round.trick_leader_id = winner_id

        self._advance((config.PHASE_COIN_TOSS,), config.PHASE_TRUMP_SELECTION)

        return result, winner_id

    def declare_trump(self, action: DeclareTrumpAction) -> None:
        """
        Fixes the trump suit of the round.
        """

        self._advance((config.PHASE_TRUMP_SELECTION,), config.PHASE_DEALING_REMAINING)
        self.round.set_trump(action.trump_suit)

    def deal_remaining(self) -> None:
        """
        Deals the face-down and face-up cards, the trump selector leads the first trick.
        """

        self._advance((config.PHASE_DEALING_REMAINING,), config.PHASE_PLAYING)
        self.round.dealer.deal_phase_two(self.players)

        self.round.current_player_id = self.round.trump_selector_id
        self.round.trick_leader_id = self.round.trump_selector_id

    def step(self, action: ActionEvent) -> tuple[Dict[str, Any], int]:
        """
        Executes an action and transitions to the next state.
        Trump selection deals the remaining cards and a completed trick resolves immediately.
        """

        if isinstance(action, int):
            decoded_action = ActionEvent.from_action_id(action)
        else:
            decoded_action = action

        if self.is_over():
            raise ValueError("Cannot perform an action in a completed game.")

        if isinstance(decoded_action, DeclareTrumpAction):
            self.declare_trump(decoded_action)
            self.deal_remaining()
        elif isinstance(decoded_action, PlayCardAction):
            self.play_card(decoded_action)
            if self.round.is_trick_complete():
                self.resolve_trick()

        next_player_id = self.get_player_id()
        next_state = self.get_state(next_player_id)

        return next_state, next_player_id

    def play_card(self, action: PlayCardAction) -> TrumpDuelCard:
        """
        Plays a card for the current player.
        """

        assert self.phase == config.PHASE_PLAYING, "Cannot play a card outside of the 'playing' phase."

        return self.round.play_card(action)

    def resolve_trick(self) -> tuple[int, TrumpDuelCard]:
        """
        Resolves the complete trick and ends the round after the last one.
        """

        assert self.phase == config.PHASE_PLAYING, "Cannot resolve a trick outside of the 'playing' phase."

        winner_id, winning_card = self.round.resolve_trick()

        if self.round.is_over():
            self.end_round()

        return winner_id, winning_card

    def get_round_scores(self) -> List[int]:
        """
        Points of each player for the round: tricks won above their target.
        """

        return [
            max(0, player.tricks_won - self.round.target_for(player.player_id))
            for player in self.players
        ]

    def end_round(self) -> Dict[str, Any]:
        """
        Scores the round and checks whether the game is over.
        """

        assert self.round.is_over(), "Cannot score a round that is still being played."

        round_scores = self.get_round_scores()
        for player, points in zip(self.players, round_scores):
            player.add_points(points)

        self.last_round_result = {
            'round_number': self.round_number,
            'round_scores': round_scores,
            'totals': [player.score for player in self.players],
            'tricks_won': [player.tricks_won for player in self.players],
            'trump_selector_id': self.round.trump_selector_id,
        }

        # The player's score is checked first
        winners = [player.player_id for player in self.players if player.score >= config.WIN_SCORE]
        if winners:
            self.game_over = True
            self.winner_id = winners[0]
            self._advance((config.PHASE_PLAYING,), config.PHASE_GAME_OVER)
        else:
            self._advance((config.PHASE_PLAYING,), config.PHASE_ROUND_END)

        self.last_round_result['winner_id'] = self.winner_id

        return self.last_round_result

    def get_state(self, player_id: int) -> Dict[str, Any]:
        """
        Generates the state a specific player is allowed to see.
        """

        player = self.players[player_id]
        opponent = self.players[1 - player_id]
        round = self.round

        if self.phase == config.PHASE_PLAYING and round.current_player_id == player_id:
            legal_actions = self.judger.get_legal_actions()
        elif self.phase == config.PHASE_TRUMP_SELECTION and round.trump_selector_id == player_id:
            legal_actions = self.judger.get_legal_actions()
        else:
            legal_actions = []

        raw_state_info = {
            'round_phase': self.phase,
            'player_id': player_id,
            'my_hand': list(player.hand),
            'my_face_up': player.face_up,
            'my_cards': player.get_visible_cards(),
            'opponent_face_up': opponent.face_up,
            'opponent_visible_cards': opponent.get_face_up_cards(),
            'trick_moves': list(round.trick_moves) if round else [],
            'lead_suit': round.lead_suit if round else None,
            'trump_suit': round.trump_suit if round else None,
            'trump_selector_id': round.trump_selector_id if round else None,
            'current_player_id': self.get_player_id(),
            'trick_leader_id': round.trick_leader_id if round else None,
            'tricks_played': round.tricks_played if round else 0,
            'my_tricks_won': player.tricks_won,
            'opponent_tricks_won': opponent.tricks_won,
            'my_target': round.target_for(player_id) if round else None,
            'played_cards': list(round.played_cards) if round else [],
            'my_score': player.score,
            'opponent_score': opponent.score,
            'round_number': self.round_number,
        }

        return {
            'legal_actions': {action.action_id: True for action in legal_actions},
            'raw_legal_actions': legal_actions,
            'raw_state_info': raw_state_info,
        }

    def get_snapshot(self) -> Dict[str, Any]:
        """
        Read-only copy of the whole game for rendering.
        """

        round = self.round

        return copy.deepcopy({
            'phase': self.phase,
            'round_number': self.round_number,
            'game_over': self.game_over,
            'winner': config.PLAYER_NAMES[self.winner_id] if self.winner_id is not None else None,
            'trump_suit': round.trump_suit if round else None,
            'trump_selector': config.PLAYER_NAMES[round.trump_selector_id] if round and self.phase != config.PHASE_COIN_TOSS else None,
            'current_player': config.PLAYER_NAMES[self.get_player_id()] if self.phase == config.PHASE_PLAYING else None,
            'trick': [(config.PLAYER_NAMES[pid], card) for pid, card in round.trick_moves] if round else [],
            'lead_suit': round.lead_suit if round else None,
            'trick_count': round.tricks_played if round else 0,
            'played_cards': list(round.played_cards) if round else [],
            'players': {
                player.name: {
                    'hand': list(player.hand),
                    'face_up': player.face_up,
                    'face_down': player.face_down,
                    'score': player.score,
                    'tricks_won': player.tricks_won,
                    'won_tricks': player.won_tricks,
                }
                for player in self.players
            },
        })

    def get_player_id(self) -> int:
        """
        Returns the ID of the player of the current turn.
        """

        if self.round is None:
            return config.PLAYER_ID

        if self.phase == config.PHASE_TRUMP_SELECTION:
            return self.round.trump_selector_id

        return self.round.current_player_id

    def is_over(self) -> bool:
        """
        Checks if the game has ended.
        """

        return self.game_over
