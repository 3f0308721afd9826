'''
    File name: trumpduel/games/engine.py
    Date created: 10/07/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import logging
from collections import deque
from typing import Any, Callable, Dict, List, Optional

from . import config
from .action_event import DeclareTrumpAction, PlayCardAction
from .card import suit_symbol
from .events import EventType, GameEvent
from .game import TrumpDuelGame
from .scheduler import TaskScheduler
from trumpduel.agents import load_agent

log = logging.getLogger(__name__)


class TrumpDuelEngine:
    """
    Entry point for a UI: one human player against the computer.

    The engine owns the game, paces the computer and the trick resolution through
    delayed tasks and reports everything that happens as GameEvents. Observers only
    read; all changes go through the public methods.
    """

    def __init__(self, config_overrides: Optional[Dict[str, Any]] = None, scheduler: Optional[TaskScheduler] = None) -> None:
        """
        Initializes TrumpDuelEngine.
        """

        engine_config = dict(config.DEFAULT_ENGINE_CONFIG)
        engine_config.update(config_overrides or {})
        self.config: Dict[str, Any] = engine_config

        self.game: TrumpDuelGame = TrumpDuelGame(seed=engine_config['seed'])
        self.scheduler: TaskScheduler = scheduler if scheduler is not None else TaskScheduler()

        self.difficulty: str = self._check_difficulty(engine_config['difficulty'])
        self.pending_difficulty: Optional[str] = None
        self.agent = load_agent(self.difficulty, seed=engine_config['seed'])

        self._observers: List[Callable[[GameEvent], None]] = []
        self._sequence_num: int = 0
        self._generation: int = 0
        self.game_log: deque = deque(maxlen=config.GAME_LOG_SIZE)

        self.game_started: bool = False
        self.resolving_trick: bool = False
        self.computer_thinking: bool = False

        self._add_to_log("Game ready - Click 'Start Game' to begin")

    # Observers and game log

    def subscribe(self, callback: Callable[[GameEvent], None]) -> None:
        """
        Registers a callback receiving every GameEvent.
        """
        self._observers.append(callback)

    def unsubscribe(self, callback: Callable[[GameEvent], None]) -> None:
        self._observers.remove(callback)

    def _emit(self, event_type: EventType, player_id: Optional[int] = None, **data: Any) -> None:
        self._sequence_num += 1
        event = GameEvent(
            event_type=event_type,
            sequence_num=self._sequence_num,
            player=config.PLAYER_NAMES[player_id] if player_id is not None else None,
            data=data,
        )
        for callback in list(self._observers):
            callback(event)

    def _add_to_log(self, message: str, level: int = logging.INFO) -> None:
        self.game_log.append(message)
        log.log(level, message)

    def clear_log(self) -> None:
        self.game_log.clear()
        self.game_log.append("Log cleared...")

    # Scheduling

    def _schedule(self, delay_key: str, callback: Callable[[], None]) -> None:
        """
        Schedules a step. Steps scheduled before a restart are dropped when they come due.
        """

        generation = self._generation

        def run() -> None:
            if generation != self._generation:
                log.debug("Dropping %s scheduled before restart", callback.__name__)
                return
            callback()

        self.scheduler.call_later(self.config[delay_key], run)

    def tick(self) -> int:
        """
        Runs the delayed steps that are due.
        """
        return self.scheduler.run_pending()

    # Lifecycle

    @property
    def phase(self) -> str:
        return self.game.phase

    def start_game(self) -> None:
        """
        Starts the first round of a fresh game.
        """

        if self.game_started:
            raise ValueError("The game has already been started. Restart to play again.")

        self.game_started = True
        self._emit(EventType.GAME_STARTED)
        self.start_new_round()

    def start_new_round(self) -> None:
        """
        Deals the hand cards of a new round. The first round waits for the coin toss.
        """

        if self.game.is_over():
            raise ValueError("Cannot start a round in a completed game. Restart first.")
        if self.phase not in (config.PHASE_SETUP, config.PHASE_ROUND_END):
            raise ValueError(f"Cannot start a new round during '{self.phase}'.")

        self.game_started = True

        if self.pending_difficulty is not None:
            self.difficulty = self.pending_difficulty
            self.agent = load_agent(self.difficulty, seed=self.config['seed'])
            self.pending_difficulty = None

        self.resolving_trick = False
        self.computer_thinking = False

        self.game.start_new_round()
        self._emit(EventType.ROUND_STARTED, round_number=self.game.round_number, difficulty=self.difficulty)

        if self.phase == config.PHASE_COIN_TOSS:
            self._add_to_log("Call heads or tails to decide who selects trump first.")
            return

        self._begin_trump_selection()

    def call_coin_toss(self, call: str) -> str:
        """
        Tosses the coin for the first round against the player's call. Returns the result.
        """

        if self.phase != config.PHASE_COIN_TOSS:
            raise ValueError(f"There is no coin toss during '{self.phase}'.")

        result, winner_id = self.game.toss_coin(call)

        if winner_id == config.PLAYER_ID:
            self._add_to_log(f"Coin toss: {result.upper()}! You won and will choose trump first.")
        else:
            self._add_to_log(f"Coin toss: {result.upper()}! Computer won and will choose trump first.")

        self._emit(EventType.COIN_TOSSED, winner_id, call=call, result=result)
        self._begin_trump_selection()

        return result

    def _begin_trump_selection(self) -> None:
        if self.game.round_number == 1:
            self._add_to_log("Game started! Select your trump suit.")
        else:
            self._add_to_log(f"Round {self.game.round_number} started!")

        if self.game.round.trump_selector_id == config.COMPUTER_ID:
            self._add_to_log("Computer is selecting trump...")
            self._schedule('trump_selection_delay', self._computer_select_trump)

    def _computer_select_trump(self) -> None:
        if self.phase != config.PHASE_TRUMP_SELECTION or self.game.round.trump_selector_id != config.COMPUTER_ID:
            return

        state = self.game.get_state(config.COMPUTER_ID)
        action = self.agent.step(state)
        self._apply_trump(action)

    def set_trump(self, suit: str) -> None:
        """
        The player's trump choice, only when the player is the trump selector.
        """

        if self.phase != config.PHASE_TRUMP_SELECTION:
            raise ValueError(f"Trump cannot be selected during '{self.phase}'.")
        if self.game.round.trump_selector_id != config.PLAYER_ID:
            raise ValueError("The computer selects trump this round.")

        self._apply_trump(DeclareTrumpAction(suit))

    def _apply_trump(self, action: DeclareTrumpAction) -> None:
        self.game.declare_trump(action)
        selector_id = self.game.round.trump_selector_id
        suit = action.trump_suit

        if selector_id == config.COMPUTER_ID:
            self._add_to_log(f"Computer selected {suit} {suit_symbol(suit)} as trump. Computer goes first!")
        else:
            self._add_to_log(f"You selected {suit} {suit_symbol(suit)} as trump. You go first!")

        self._emit(EventType.TRUMP_SELECTED, selector_id, trump_suit=suit)
        self._schedule('deal_remaining_delay', self._deal_remaining)

    def _deal_remaining(self) -> None:
        if self.phase != config.PHASE_DEALING_REMAINING:
            return

        self.game.deal_remaining()
        self._emit(EventType.CARDS_DEALT, round_number=self.game.round_number)

        if self.game.round.current_player_id == config.COMPUTER_ID:
            self.request_computer_move()
        else:
            self._add_to_log("Your turn to play")

    def set_difficulty(self, difficulty: str) -> None:
        """
        Changes the difficulty, effective from the next round.
        """

        self.pending_difficulty = self._check_difficulty(difficulty)
        self._add_to_log(f"Difficulty changed to {difficulty.upper()}. Will apply on new game/round.")
        self._emit(
            EventType.DIFFICULTY_CHANGED,
            difficulty=difficulty,
            description=config.DIFFICULTY_DESCRIPTIONS[difficulty],
        )

    @staticmethod
    def _check_difficulty(difficulty: str) -> str:
        if difficulty not in config.DIFFICULTIES:
            raise ValueError(f"Invalid difficulty '{difficulty}'. Must be one of {config.DIFFICULTIES}.")
        return difficulty

    def restart(self) -> None:
        """
        Resets the whole game to the setup phase, keeping the difficulty.
        """

        self._generation += 1
        self.game.restart()

        if self.pending_difficulty is not None:
            self.difficulty = self.pending_difficulty
            self.pending_difficulty = None
        self.agent = load_agent(self.difficulty, seed=self.config['seed'])

        self.game_started = False
        self.resolving_trick = False
        self.computer_thinking = False

        self.clear_log()
        self._add_to_log("Game reset - Click 'Start Game' to begin")
        self._emit(EventType.GAME_RESTARTED)

    # Playing

    def _reject(self, reason: str) -> bool:
        self._add_to_log(reason, logging.WARNING)
        self._emit(EventType.INVALID_PLAY, config.PLAYER_ID, reason=reason)
        return False

    def submit_play(self, zone: str, index: int) -> bool:
        """
        The player's play from a hand or face-up slot.
        Returns False and leaves the state unchanged if the play is rejected.
        """

        if self.phase != config.PHASE_PLAYING:
            return self._reject("Cards can only be played while a round is being played.")
        if self.resolving_trick:
            return self._reject("Wait for the trick to be resolved.")
        if self.game.round.current_player_id != config.PLAYER_ID:
            return self._reject("It is not your turn.")

        reason = self.game.judger.validate_play(config.PLAYER_ID, zone, index)
        if reason is not None:
            return self._reject(reason)

        index = int(index)
        card = self.game.round.players[config.PLAYER_ID].card_at(zone, index)
        self._apply_play(config.PLAYER_ID, PlayCardAction(card, zone, index))

        return True

    def request_computer_move(self) -> bool:
        """
        Schedules the computer's play. Ignored while a move is pending or the computer cannot act.
        """

        if self.computer_thinking or not self._computer_can_play():
            return False

        self.computer_thinking = True
        self._schedule('computer_move_delay', self._computer_play)

        return True

    def _computer_can_play(self) -> bool:
        return (
            not self.resolving_trick
            and self.phase == config.PHASE_PLAYING
            and self.game.round.current_player_id == config.COMPUTER_ID
            and len(self.game.round.trick_moves) < 2
        )

    def _computer_play(self) -> None:
        if not self._computer_can_play():
            self.computer_thinking = False
            return

        state = self.game.get_state(config.COMPUTER_ID)
        action = self.agent.step(state)
        self.computer_thinking = False

        if action is None:
            log.debug("Computer has no cards left to play")
            return

        self._apply_play(config.COMPUTER_ID, action)

    def _apply_play(self, player_id: int, action: PlayCardAction) -> None:
        player = self.game.round.players[player_id]
        revealed_before = player.face_down[action.index] if action.zone == config.ZONE_FACE_UP else None

        card = self.game.play_card(action)

        if player_id == config.PLAYER_ID:
            self._add_to_log(f"You played {card}")
        else:
            self._add_to_log(f"Computer played {card}")

        self._emit(
            EventType.CARD_PLAYED, player_id,
            card=card, zone=action.zone, index=action.index, revealed=revealed_before,
        )

        if self.game.round.is_trick_complete():
            self.resolving_trick = True
            self._schedule('trick_resolution_delay', self._resolve_trick)
        elif self.game.round.current_player_id == config.COMPUTER_ID:
            self._add_to_log("Computer is playing...", logging.DEBUG)
            self.request_computer_move()

    def _resolve_trick(self) -> None:
        if not self.resolving_trick or not self.game.round.is_trick_complete():
            return

        winner_id, winning_card = self.game.resolve_trick()
        self.resolving_trick = False

        if winner_id == config.PLAYER_ID:
            self._add_to_log(f"You won the trick with {winning_card}!")
        else:
            self._add_to_log(f"Computer won the trick with {winning_card}.")

        self._emit(
            EventType.TRICK_RESOLVED, winner_id,
            winning_card=winning_card, trick_count=self.game.round.tricks_played,
        )

        if self.phase in (config.PHASE_ROUND_END, config.PHASE_GAME_OVER):
            self._finish_round()
        elif winner_id == config.COMPUTER_ID:
            self._add_to_log("Computer leads next trick")
            self.request_computer_move()
        else:
            self._add_to_log("You lead the next trick")

    def _finish_round(self) -> None:
        result = self.game.last_round_result
        player_points, computer_points = result['round_scores']
        player_total, computer_total = result['totals']

        self._add_to_log(
            f"Round {result['round_number']} Complete! "
            f"Player: +{player_points} points, Computer: +{computer_points} points"
        )
        self._emit(
            EventType.ROUND_ENDED,
            round_number=result['round_number'],
            round_scores={'player': player_points, 'computer': computer_points},
            totals={'player': player_total, 'computer': computer_total},
            tricks_won={'player': result['tricks_won'][0], 'computer': result['tricks_won'][1]},
        )

        if not self.game.is_over():
            self._add_to_log("Click 'New Round' to continue")
            return

        winner_id = self.game.winner_id
        winner_name = config.PLAYER_NAMES[winner_id]
        self._add_to_log(f"Game Over! {winner_name.capitalize()} wins with {result['totals'][winner_id]} points!")
        self._emit(
            EventType.GAME_OVER, winner_id,
            winner=winner_name,
            final_scores={'player': player_total, 'computer': computer_total},
        )

    def get_snapshot(self) -> Dict[str, Any]:
        """
        Read-only view of the game for rendering.
        """

        snapshot = self.game.get_snapshot()
        snapshot.update({
            'difficulty': self.difficulty,
            'pending_difficulty': self.pending_difficulty,
            'game_started': self.game_started,
            'resolving_trick': self.resolving_trick,
            'computer_thinking': self.computer_thinking,
            'game_log': list(self.game_log),
        })

        return snapshot
