''' Computer opponents, one rule agent per difficulty
'''
from trumpduel.agents.rule_agents import (
    TrumpDuelEasyRuleAgent,
    TrumpDuelMediumRuleAgent,
    TrumpDuelHardRuleAgent,
    select_trump_suit,
    is_highest_remaining,
    get_remaining_cards_in_suit,
)

DIFFICULTY_AGENTS = {
    'easy': TrumpDuelEasyRuleAgent,
    'medium': TrumpDuelMediumRuleAgent,
    'hard': TrumpDuelHardRuleAgent,
}


def load_agent(difficulty, seed=None, rng=None):
    ''' Builds the rule agent of a difficulty
    '''
    if difficulty not in DIFFICULTY_AGENTS:
        raise ValueError(f"Invalid difficulty '{difficulty}'. Must be one of {tuple(DIFFICULTY_AGENTS)}.")
    return DIFFICULTY_AGENTS[difficulty](seed=seed, rng=rng)
