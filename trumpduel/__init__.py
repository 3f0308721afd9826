name = "trumpduel"
__version__ = "1.0.0"

from trumpduel.games.game import TrumpDuelGame
from trumpduel.games.engine import TrumpDuelEngine
from trumpduel.utils import setup_logging
