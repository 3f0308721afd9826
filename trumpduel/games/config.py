'''
    File name: trumpduel/games/config.py
    Date created: 10/02/2026
    Date last modified: 10/19/2026
'''

# Deck Configuration

# Defines suits and ranks, suit order is also the trump heuristic tie-break order
VALID_SUITS: tuple[str, ...] = ('hearts', 'diamonds', 'clubs', 'spades')
VALID_RANKS: tuple[str, ...] = ('7', '8', '9', '10', 'J', 'Q', 'K', 'A')

# The 7 only exists in these suits
SEVEN_SUITS: tuple[str, ...] = ('hearts', 'spades')

# Defines trick-taking value of each rank
RANK_VALUES: dict[str, int] = {
    '7': 7, '8': 8, '9': 9, '10': 10, 'J': 11, 'Q': 12, 'K': 13, 'A': 14
}

SUIT_SYMBOLS: dict[str, str] = {
    'hearts': '♥', 'diamonds': '♦', 'clubs': '♣', 'spades': '♠'
}

# Ranks counted as high cards by the trump heuristic
HIGH_CARD_RANKS: tuple[str, ...] = ('J', 'Q', 'K', 'A')

NUM_CARDS_IN_DECK: int = len(VALID_SUITS) * (len(VALID_RANKS) - 1) + len(SEVEN_SUITS)


# Player and Layout Configuration

NUM_PLAYERS: int = 2
PLAYER_ID: int = 0
COMPUTER_ID: int = 1
PLAYER_NAMES: tuple[str, ...] = ('player', 'computer')

NUM_HAND_SLOTS: int = 5
NUM_COLUMNS_PER_PLAYER: int = 5

ZONE_HAND: str = 'hand'
ZONE_FACE_UP: str = 'face_up'
PLAYABLE_ZONES: tuple[str, ...] = (ZONE_HAND, ZONE_FACE_UP)

CARDS_PER_PLAYER: int = NUM_HAND_SLOTS + 2 * NUM_COLUMNS_PER_PLAYER
TOTAL_TRICKS: int = CARDS_PER_PLAYER


# Scoring Configuration

TRUMP_SELECTOR_TARGET: int = 8
OPPONENT_TARGET: int = 7

# A side reaching this cumulative score wins the game
WIN_SCORE: int = 1


# Lifecycle Configuration

PHASE_SETUP: str = 'setup'
PHASE_COIN_TOSS: str = 'coin-toss'
PHASE_TRUMP_SELECTION: str = 'trump-selection'
PHASE_DEALING_REMAINING: str = 'dealing-remaining'
PHASE_PLAYING: str = 'playing'
PHASE_ROUND_END: str = 'round-end'
PHASE_GAME_OVER: str = 'game-over'

COIN_SIDES: tuple[str, ...] = ('heads', 'tails')


# Action Space Configuration

NUM_DECLARE_TRUMP_ACTIONS: int = len(VALID_SUITS)

FIRST_DECLARE_TRUMP_ACTION_ID: int = 0
FIRST_PLAY_CARD_ACTION_ID: int = FIRST_DECLARE_TRUMP_ACTION_ID + NUM_DECLARE_TRUMP_ACTIONS

TOTAL_NUM_ACTIONS: int = NUM_DECLARE_TRUMP_ACTIONS + NUM_CARDS_IN_DECK


# Computer Opponent Configuration

DIFFICULTIES: tuple[str, ...] = ('easy', 'medium', 'hard')
DEFAULT_DIFFICULTY: str = 'medium'

DIFFICULTY_DESCRIPTIONS: dict[str, str] = {
    'easy': "Relaxed AI that makes random choices. Great for learning!",
    'medium': "Balanced AI that analyzes visible cards.",
    'hard': "Expert AI that tracks all played cards and plays optimally!",
}

EASY_RANDOM_PLAY_PROBABILITY: float = 0.4
EASY_LOWEST_PLAY_PROBABILITY: float = 0.5


# Engine Configuration

# Delays in seconds, purely for pacing
DEFAULT_ENGINE_CONFIG: dict = {
    'difficulty': DEFAULT_DIFFICULTY,
    'seed': None,
    'computer_move_delay': 1.0,
    'trick_resolution_delay': 1.5,
    'trump_selection_delay': 1.5,
    'deal_remaining_delay': 2.0,
}

GAME_LOG_SIZE: int = 50
