'''
    File name: tests/ranking/test_difficulty_ranking.py
    Date created: 10/12/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import os
import csv
import tempfile
import unittest

import glicko2

from trumpduel.agents import load_agent
from helper.difficulty_ranking import (
    RankingConfig,
    play_game,
    play_matchup_batch,
    print_ranking_table,
    save_winrate_matrix,
    run_tournament,
)


class TestDifficultyRanking(unittest.TestCase):
    """
    Tests for the difficulty tournament.
    """

    def test_play_game(self):
        """
        Tests that a simulated game ends with consistent scores.
        """

        agents = [load_agent('hard', seed=1), load_agent('easy', seed=2)]
        winner_id, scores, rounds = play_game(agents, seed=17)

        self.assertGreaterEqual(rounds, 1)
        if winner_id is not None:
            self.assertGreaterEqual(scores[winner_id], 1)
        else:
            self.assertEqual(scores, [0, 0])

    def test_play_game_is_reproducible(self):
        results = [
            play_game([load_agent('medium', seed=3), load_agent('medium', seed=4)], seed=23)
            for _ in range(2)
        ]
        self.assertEqual(results[0], results[1])

    def test_play_matchup_batch(self):
        """
        Tests that every game of a batch is counted once.
        """

        name_a, name_b, results = play_matchup_batch(('easy', 'hard', 6, 100))

        self.assertEqual((name_a, name_b), ('easy', 'hard'))
        self.assertEqual(results['a_wins'] + results['b_wins'] + results['draws'], 6)
        self.assertGreaterEqual(results['rounds'], 6)

    def test_ranking_table_and_matrix(self):
        """
        Tests the printed table and the CSV win rate matrix.
        """

        names = ['easy', 'medium']
        players = {name: glicko2.Player() for name in names}
        players['medium'].update_player([players['easy'].rating], [players['easy'].rd], [1])
        stats = {
            'easy': {'wins': 1, 'losses': 3, 'draws': 0, 'total_matches': 4, 'score_diff': -2},
            'medium': {'wins': 3, 'losses': 1, 'draws': 0, 'total_matches': 4, 'score_diff': 2},
        }

        lines = print_ranking_table(players, stats, round_num=1, total_games_played=4)

        self.assertTrue(lines[3].startswith('1     medium'))
        self.assertIn('75.0%', lines[3])

        head_to_head = {('easy', 'medium'): {'total': 4, 'p0_wins': 1, 'p1_wins': 3, 'draws': 0}}
        with tempfile.TemporaryDirectory() as output_dir:
            path = save_winrate_matrix(names, head_to_head, output_dir)
            with open(path, newline='') as f:
                rows = list(csv.reader(f))

        self.assertEqual(rows[0], ['v Difficulty', 'easy', 'medium'])
        self.assertEqual(rows[1], ['easy', '-', '25.0%'])
        self.assertEqual(rows[2], ['medium', '75.0%', '-'])

    def test_run_tournament(self):
        """
        Tests a tiny tournament end to end.
        """

        with tempfile.TemporaryDirectory() as output_dir:
            ranking_config = RankingConfig(workers=1, batch_size=2, total_games=2, output_dir=output_dir)
            global_stats = run_tournament(ranking_config)

            self.assertTrue(os.path.exists(os.path.join(output_dir, 'matrix_winrate.csv')))
            self.assertTrue(os.path.exists(os.path.join(output_dir, 'final_ranking.txt')))

        for stats in global_stats.values():
            self.assertEqual(stats['total_matches'], 4)
            self.assertEqual(stats['wins'] + stats['losses'] + stats['draws'], 4)


if __name__ == '__main__':
    unittest.main()
