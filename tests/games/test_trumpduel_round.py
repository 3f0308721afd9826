'''
    File name: tests/games/test_trumpduel_round.py
    Date created: 10/08/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import unittest
import numpy as np

from trumpduel.games import config

from trumpduel.games.card import TrumpDuelCard
from trumpduel.games.action_event import DeclareTrumpAction, PlayCardAction
from trumpduel.games.judger import is_legal_play
from trumpduel.games.round import determine_trick_winner
from trumpduel.games.game import TrumpDuelGame

C = TrumpDuelCard.from_index


def _set_cards(player, hand=(), face_up=(), face_down=()):
    """
    Replaces every slot of a player with fixed cards.
    """

    player.hand = list(hand) + [None] * (config.NUM_HAND_SLOTS - len(hand))
    for i, column in enumerate(player.layout):
        column.open_card = face_up[i] if i < len(face_up) else None
        column.closed_card = face_down[i] if i < len(face_down) else None


def _playing_game(trump_suit='hearts', selector_id=config.PLAYER_ID):
    """
    Game in the playing phase of the first round with a fixed trump selector.
    """

    game = TrumpDuelGame(seed=11)
    game.start_new_round()
    game.toss_coin('heads')
    game.round.trump_selector_id = selector_id
    game.declare_trump(DeclareTrumpAction(trump_suit))
    game.deal_remaining()
    return game


class TestTrickWinner(unittest.TestCase):
    """
    Tests for determine_trick_winner.
    """

    def test_higher_lead_suit_card_wins(self):
        """
        Tests that a higher card of the lead suit wins without trumps.
        """

        moves = [(0, C('10_clubs')), (1, C('K_clubs'))]
        self.assertEqual(determine_trick_winner(moves, 'hearts', 'clubs'), 1)

        moves = [(0, C('A_clubs')), (1, C('K_clubs'))]
        self.assertEqual(determine_trick_winner(moves, 'hearts', 'clubs'), 0)

    def test_trump_beats_higher_card(self):
        """
        Tests that any trump beats a non-trump regardless of value.
        """

        moves = [(0, C('A_clubs')), (1, C('7_hearts'))]
        self.assertEqual(determine_trick_winner(moves, 'hearts', 'clubs'), 1)

        moves = [(1, C('8_hearts')), (0, C('A_spades'))]
        self.assertEqual(determine_trick_winner(moves, 'hearts', 'hearts'), 1)

    def test_higher_trump_wins(self):
        """
        Tests that two trumps compare by value.
        """

        moves = [(0, C('K_hearts')), (1, C('A_hearts'))]
        self.assertEqual(determine_trick_winner(moves, 'hearts', 'hearts'), 1)

    def test_off_suit_discard_loses(self):
        """
        Tests that a card of a third suit never wins.
        """

        moves = [(0, C('8_clubs')), (1, C('A_spades'))]
        self.assertEqual(determine_trick_winner(moves, 'hearts', 'clubs'), 0)

    def test_incomplete_trick(self):
        """
        Tests that a single card cannot be resolved.
        """

        with self.assertRaises(AssertionError):
            determine_trick_winner([(0, C('8_clubs'))], 'hearts', 'clubs')


class TestPlayValidator(unittest.TestCase):
    """
    Tests for the suit-following rule and TrumpDuelJudger.
    """

    def setUp(self):
        """
        Game with a trick led by the computer in hearts, the player to follow.
        """

        self.game = _playing_game(trump_suit='spades')
        self.player = self.game.players[config.PLAYER_ID]
        round = self.game.round
        round.trick_moves = [(config.COMPUTER_ID, C('J_hearts'))]
        round.lead_suit = 'hearts'
        round.current_player_id = config.PLAYER_ID

    def test_is_legal_play(self):
        """
        Tests the rule on its own.
        """

        visible = [C('K_spades'), C('9_hearts')]

        self.assertTrue(is_legal_play(C('K_spades'), None, visible))
        self.assertTrue(is_legal_play(C('9_hearts'), 'hearts', visible))
        self.assertFalse(is_legal_play(C('K_spades'), 'hearts', visible))
        self.assertTrue(is_legal_play(C('K_spades'), 'clubs', visible))

    def test_must_follow_with_face_up_card(self):
        """
        Tests that a lead-suit card face up forces following suit.
        """

        _set_cards(self.player, hand=[C('K_spades')], face_up=[C('9_hearts')])

        plays = self.game.judger.get_valid_plays(config.PLAYER_ID)

        self.assertEqual([(a.card, a.zone, a.index) for a in plays], [(C('9_hearts'), config.ZONE_FACE_UP, 0)])
        self.assertEqual(
            self.game.judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, 0),
            "Invalid play! You must follow suit if possible.",
        )
        self.assertIsNone(self.game.judger.validate_play(config.PLAYER_ID, config.ZONE_FACE_UP, 0))

    def test_face_down_cards_do_not_bind(self):
        """
        Tests that a lead-suit card face down does not force following suit.
        """

        _set_cards(self.player, hand=[C('K_spades')], face_up=[C('8_clubs')], face_down=[C('A_hearts')])

        plays = self.game.judger.get_valid_plays(config.PLAYER_ID)

        self.assertEqual([a.card for a in plays], [C('K_spades'), C('8_clubs')])
        self.assertIsNone(self.game.judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, 0))

    def test_validator_correctness_for_all_hands(self):
        """
        Tests for dealt hands and every lead suit that legal plays follow suit whenever possible.
        """

        for seed in range(10):
            game = TrumpDuelGame(seed=seed)
            game.start_new_round()
            game.toss_coin('tails')
            game.declare_trump(DeclareTrumpAction('hearts'))
            game.deal_remaining()

            for player_id in (config.PLAYER_ID, config.COMPUTER_ID):
                visible = game.players[player_id].get_visible_cards()
                for lead_suit in config.VALID_SUITS:
                    game.round.lead_suit = lead_suit
                    plays = game.judger.get_valid_plays(player_id)
                    if any(c.suit == lead_suit for c in visible):
                        self.assertTrue(all(a.card.suit == lead_suit for a in plays))
                    else:
                        self.assertEqual(len(plays), len(visible))

    def test_rejection_reasons(self):
        """
        Tests the reasons for malformed plays.
        """

        _set_cards(self.player, hand=[C('9_hearts')])
        judger = self.game.judger

        self.assertEqual(judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, 3), "Slot 3 in hand is empty.")
        self.assertEqual(judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, 5), "Slot 5 does not exist in hand.")
        self.assertEqual(judger.validate_play(config.PLAYER_ID, config.ZONE_FACE_UP, -1), "Slot -1 does not exist in face_up.")
        self.assertIn("Unknown zone", judger.validate_play(config.PLAYER_ID, 'face_down', 0))
        self.assertIsNone(judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, 0))

    def test_slot_index_types(self):
        """
        Tests that any integer type is accepted as slot index but booleans and floats are not.
        """

        _set_cards(self.player, hand=[C('9_hearts'), C('10_hearts')])
        judger = self.game.judger

        self.assertIsNone(judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, np.int64(1)))
        self.assertEqual(judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, True), "Slot True does not exist in hand.")
        self.assertEqual(judger.validate_play(config.PLAYER_ID, config.ZONE_HAND, 1.0), "Slot 1.0 does not exist in hand.")

    def test_no_legal_actions_for_full_trick(self):
        """
        Tests that nothing can be played on a complete trick.
        """

        self.game.round.trick_moves.append((config.PLAYER_ID, C('9_hearts')))

        self.assertEqual(self.game.judger.get_legal_actions(), [])


class TestTrumpDuelRound(unittest.TestCase):
    """
    Tests for TrumpDuelRound.
    """

    def setUp(self):
        """
        Game in the playing phase, trump hearts, player leads.
        """

        self.game = _playing_game(trump_suit='hearts', selector_id=config.PLAYER_ID)
        self.round = self.game.round
        self.player, self.computer = self.game.players

    def test_selector_leads_first_trick(self):
        """
        Tests that the trump selector leads the first trick.
        """

        self.assertEqual(self.round.current_player_id, config.PLAYER_ID)
        self.assertEqual(self.round.trick_leader_id, config.PLAYER_ID)
        self.assertEqual(self.round.target_for(config.PLAYER_ID), 8)
        self.assertEqual(self.round.target_for(config.COMPUTER_ID), 7)

    def test_play_and_resolve_trick(self):
        """
        Tests a full trick from lead to resolution.
        """

        _set_cards(self.player, hand=[C('10_clubs')], face_up=[C('8_spades')])
        _set_cards(self.computer, hand=[C('K_clubs')], face_up=[C('9_spades')])

        self.round.play_card(PlayCardAction(C('10_clubs'), config.ZONE_HAND, 0))

        self.assertEqual(self.round.lead_suit, 'clubs')
        self.assertEqual(self.round.current_player_id, config.COMPUTER_ID)
        self.assertFalse(self.round.is_trick_complete())

        self.round.play_card(PlayCardAction(C('K_clubs')))

        self.assertTrue(self.round.is_trick_complete())

        winner_id, winning_card = self.round.resolve_trick()

        self.assertEqual(winner_id, config.COMPUTER_ID)
        self.assertEqual(winning_card, C('K_clubs'))
        self.assertEqual(self.computer.tricks_won, 1)
        self.assertEqual(self.round.played_cards, [C('10_clubs'), C('K_clubs')])
        self.assertEqual(self.round.trick_moves, [])
        self.assertIsNone(self.round.lead_suit)
        self.assertEqual(self.round.tricks_played, 1)
        self.assertEqual(self.round.current_player_id, config.COMPUTER_ID)
        self.assertEqual(self.round.trick_leader_id, config.COMPUTER_ID)
        self.assertFalse(self.round.is_over())

    def test_third_play_on_full_trick(self):
        """
        Tests that a trick never takes a third card.
        """

        _set_cards(self.player, hand=[C('10_clubs'), C('J_clubs')])
        _set_cards(self.computer, hand=[C('K_clubs')])

        self.round.play_card(PlayCardAction(C('10_clubs'), config.ZONE_HAND, 0))
        self.round.play_card(PlayCardAction(C('K_clubs'), config.ZONE_HAND, 0))

        with self.assertRaises(AssertionError):
            self.round.play_card(PlayCardAction(C('J_clubs'), config.ZONE_HAND, 1))

        self.assertEqual(len(self.round.trick_moves), 2)
        self.assertEqual(self.player.hand[1], C('J_clubs'))

    def test_play_card_not_held(self):
        """
        Tests that a card the player does not hold cannot be played.
        """

        _set_cards(self.player, hand=[C('10_clubs')])

        with self.assertRaises(AssertionError):
            self.round.play_card(PlayCardAction(C('A_clubs')))

    def test_trump_is_set_once(self):
        """
        Tests that the trump suit cannot change within a round.
        """

        with self.assertRaises(AssertionError):
            self.round.set_trump('spades')


if __name__ == '__main__':
    unittest.main()
