'''
    File name: /helper/difficulty_ranking.py
    Date created: 10/12/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

import os
import csv
import time
import random
import argparse
import itertools
import dataclasses
import logging
from collections import defaultdict
from multiprocessing import Pool
import multiprocessing as mp

from tqdm import tqdm
import glicko2

from trumpduel.agents import DIFFICULTY_AGENTS, load_agent
from trumpduel.games import config
from trumpduel.games.game import TrumpDuelGame
from trumpduel.utils import setup_logging

log = logging.getLogger('trumpduel.ranking')

# Games hardly ever need more than a few rounds, longer ones count as draws
MAX_ROUNDS_PER_GAME = 50


@dataclasses.dataclass
class RankingConfig:
    workers: int = 4
    batch_size: int = 40
    total_games: int = 2000
    master_seed: int = 21000
    output_dir: str = "difficulty_ranking_results"


def play_game(agents, seed):
    """
    Plays one game between two agents without any delays.
    Returns the winner ID (None for a draw), the final scores and the number of rounds.
    """

    game = TrumpDuelGame(seed=seed)
    coin_rng = random.Random(seed)

    game.start_new_round()
    game.toss_coin(coin_rng.choice(config.COIN_SIDES))

    while not game.is_over():
        if game.phase == config.PHASE_ROUND_END:
            if game.round_number >= MAX_ROUNDS_PER_GAME:
                break
            game.start_new_round()
            continue

        player_id = game.get_player_id()
        state = game.get_state(player_id)
        action, _ = agents[player_id].eval_step(state)
        game.step(action)

    scores = [player.score for player in game.players]
    return game.winner_id, scores, game.round_number


def play_matchup_batch(args):
    """
    Plays a batch of games, each difficulty taking both seats equally often.
    """

    name_a, name_b, num_games, seed = args

    results = {'a_wins': 0, 'b_wins': 0, 'draws': 0, 'a_score_diff': 0, 'rounds': 0}
    games_per_side = num_games // 2

    for swapped in (False, True):
        for i in range(games_per_side):
            game_seed = seed + i + (games_per_side if swapped else 0)
            agent_a = load_agent(name_a, seed=game_seed)
            agent_b = load_agent(name_b, seed=game_seed + 1)
            agents = [agent_b, agent_a] if swapped else [agent_a, agent_b]
            seat_a = 1 if swapped else 0

            winner_id, scores, rounds = play_game(agents, game_seed)

            results['rounds'] += rounds
            results['a_score_diff'] += scores[seat_a] - scores[1 - seat_a]
            if winner_id is None:
                results['draws'] += 1
            elif winner_id == seat_a:
                results['a_wins'] += 1
            else:
                results['b_wins'] += 1

    return name_a, name_b, results


def print_ranking_table(players, global_stats, round_num, total_games_played):
    """
    Prints the ranking table to console.
    """

    sorted_players = sorted(players.items(), key=lambda x: x[1].rating, reverse=True)

    header = (
        f"{'Rank':<5} {'Difficulty':<12} {'ELO':>6} {'Winrate':>8} "
        f"{'W':>6} {'L':>6} {'D':>5} {'Match':>6} {'Ø Diff':>7} {'RD':>6}"
    )
    separator = "-" * 76

    output_lines = [
        f"\nStandings after Round {round_num} ({total_games_played} games per matchup).",
        header,
        separator,
    ]

    for rank, (name, p) in enumerate(sorted_players, start=1):
        s = global_stats[name]
        matches = s['total_matches']
        winrate = (s['wins'] / matches * 100) if matches > 0 else 0.0
        avg_diff = s['score_diff'] / matches if matches > 0 else 0.0

        output_lines.append(
            f"{rank:<5} {name:<12} {p.rating:>6.0f} {winrate:>7.1f}% "
            f"{s['wins']:>6} {s['losses']:>6} {s['draws']:>5} {matches:>6} {avg_diff:>7.2f} {p.rd:>6.0f}"
        )

    output_lines.append(separator + "\n")

    for line in output_lines:
        print(line)

    return output_lines


def save_winrate_matrix(names, head_to_head, output_dir):
    """
    Saves the win rate of each difficulty against every other one.
    """

    path = os.path.join(output_dir, "matrix_winrate.csv")

    with open(path, 'w', newline='') as f:
        writer = csv.writer(f)
        writer.writerow(['v Difficulty'] + names)

        for row_name in names:
            row = [row_name]
            for col_name in names:
                if row_name == col_name:
                    row.append("-")
                    continue

                key = tuple(sorted((row_name, col_name)))
                stats = head_to_head[key]
                wins = stats['p0_wins'] if key[0] == row_name else stats['p1_wins']
                row.append(f"{(wins / stats['total']) * 100:.1f}%" if stats['total'] else "-")
            writer.writerow(row)

    return path


def run_tournament(ranking_config: RankingConfig):
    """
    Runs the full tournament and outputs the results.
    """

    os.makedirs(ranking_config.output_dir, exist_ok=True)
    names = list(DIFFICULTY_AGENTS.keys())
    log.info(f"Ranking difficulties: {', '.join(names)}")

    head_to_head = defaultdict(lambda: {'total': 0, 'p0_wins': 0, 'p1_wins': 0, 'draws': 0})
    global_stats = {name: {'wins': 0, 'losses': 0, 'draws': 0, 'total_matches': 0, 'score_diff': 0} for name in names}
    players = {name: glicko2.Player() for name in names}

    unique_pairs = list(itertools.combinations(names, 2))
    batch_size = ranking_config.batch_size
    total_rounds = max(1, ranking_config.total_games // batch_size)

    log.info(f"Starting Tournament: {ranking_config.total_games} games per matchup, {total_rounds} rounds.")
    start_time = time.time()

    try:
        with Pool(processes=ranking_config.workers) as pool:
            for round_idx in range(1, total_rounds + 1):
                round_seed_base = ranking_config.master_seed + (round_idx * 9999)
                job_args = [
                    (a, b, batch_size, round_seed_base + i * 123)
                    for i, (a, b) in enumerate(unique_pairs)
                ]

                results_batch = list(tqdm(
                    pool.imap_unordered(play_matchup_batch, job_args),
                    total=len(job_args),
                    desc=f"Round {round_idx}/{total_rounds}",
                    leave=False,
                ))

                updates = defaultdict(lambda: {'ratings': [], 'rds': [], 'outcomes': []})

                for name_a, name_b, res in results_batch:
                    key = tuple(sorted((name_a, name_b)))
                    h2h = head_to_head[key]
                    h2h['total'] += batch_size
                    h2h['draws'] += res['draws']
                    if key[0] == name_a:
                        h2h['p0_wins'] += res['a_wins']
                        h2h['p1_wins'] += res['b_wins']
                    else:
                        h2h['p0_wins'] += res['b_wins']
                        h2h['p1_wins'] += res['a_wins']

                    for name, wins, losses, diff in (
                        (name_a, res['a_wins'], res['b_wins'], res['a_score_diff']),
                        (name_b, res['b_wins'], res['a_wins'], -res['a_score_diff']),
                    ):
                        stats = global_stats[name]
                        stats['total_matches'] += batch_size
                        stats['wins'] += wins
                        stats['losses'] += losses
                        stats['draws'] += res['draws']
                        stats['score_diff'] += diff

                    score_a = (res['a_wins'] + 0.5 * res['draws']) / batch_size
                    updates[name_a]['ratings'].append(players[name_b].rating)
                    updates[name_a]['rds'].append(players[name_b].rd)
                    updates[name_a]['outcomes'].append(score_a)
                    updates[name_b]['ratings'].append(players[name_a].rating)
                    updates[name_b]['rds'].append(players[name_a].rd)
                    updates[name_b]['outcomes'].append(1.0 - score_a)

                for name, p in players.items():
                    data = updates[name]
                    if data['ratings']:
                        p.update_player(data['ratings'], data['rds'], data['outcomes'])
                    else:
                        p.did_not_compete()

                table_lines = print_ranking_table(players, global_stats, round_idx, round_idx * batch_size)
                save_winrate_matrix(names, head_to_head, ranking_config.output_dir)

                with open(os.path.join(ranking_config.output_dir, "final_ranking.txt"), 'w', encoding='utf-8') as f:
                    f.write("\n".join(table_lines) + "\n")

    except KeyboardInterrupt:
        log.warning("Tournament interrupted!")

    log.info(f"Tournament Complete in {(time.time() - start_time) / 60:.1f} minutes.")
    log.info(f"Results saved to {ranking_config.output_dir}/")

    return global_stats


def main():
    setup_logging()
    parser = argparse.ArgumentParser("Difficulty ranking for the trump duel computer opponents")

    for field in dataclasses.fields(RankingConfig):
        parser.add_argument(
            f'--{field.name}', type=field.type, default=field.default,
            help=f"Set {field.name} (default: {field.default})",
        )

    args = parser.parse_args()
    run_tournament(RankingConfig(**vars(args)))


if __name__ == "__main__":
    mp.set_start_method('spawn')
    main()
