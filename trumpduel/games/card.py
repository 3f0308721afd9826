'''
    File name: trumpduel/games/card.py
    Date created: 10/02/2026
    Date last modified: 10/19/2026
    Python Version: 3.9+
'''

from . import config
from rlcard.games.base import Card


# Canonical deck order: 8 to A in every suit, then the two 7s
_CANONICAL_ORDER: tuple[tuple[str, str], ...] = tuple(
    [(suit, rank) for suit in config.VALID_SUITS for rank in config.VALID_RANKS if rank != '7']
    + [(suit, '7') for suit in config.SEVEN_SUITS]
)


class TrumpDuelCard(Card):
    """
    TrumpDuelCard implements the properties of a card in the 30-card deck.
    """

    suits: tuple[str, ...] = config.VALID_SUITS
    ranks: tuple[str, ...] = config.VALID_RANKS

    def __init__(self, suit: str, rank: str) -> None:
        """
        Initializes a TrumpDuelCard.
        """
        super().__init__(suit, rank)

        if suit not in self.suits:
            raise ValueError(f"Invalid suit '{suit}'. Must be one of {self.suits}.")
        if rank not in self.ranks:
            raise ValueError(f"Invalid rank '{rank}'. Must be one of {self.ranks}.")
        if rank == '7' and suit not in config.SEVEN_SUITS:
            raise ValueError(f"The 7 only exists in {config.SEVEN_SUITS}, not in '{suit}'.")

        self.card_id: int = _CANONICAL_ORDER.index((suit, rank))
        self.value: int = config.RANK_VALUES[rank]

    def __str__(self) -> str:
        """
        String representation of a card.
        """
        return f'{self.rank}{suit_symbol(self.suit)}'

    def __repr__(self) -> str:
        """
        Representation of card object.
        """
        return f"TrumpDuelCard('{self.suit}', '{self.rank}')"

    def __eq__(self, other: object) -> bool:
        """
        Equality check based on card ID.
        """
        if not isinstance(other, TrumpDuelCard):
            return NotImplemented
        return self.card_id == other.card_id

    def __hash__(self) -> int:
        """
        Hash based on card ID.
        """
        return hash(self.card_id)

    def get_index(self) -> str:
        """
        Returns the index string of the card, e.g. '10_clubs'.
        """
        return f'{self.rank}_{self.suit}'

    @staticmethod
    def card(card_id: int) -> 'TrumpDuelCard':
        """
        Gets a valid card instance from the deck using the ID.
        """
        if not 0 <= card_id < len(_DECK):
            raise IndexError(f"card_id {card_id} is out of range. Must be between 0 and {len(_DECK) - 1}.")
        return _DECK[card_id]

    @staticmethod
    def from_index(index: str) -> 'TrumpDuelCard':
        """
        Parses an index string such as '10_clubs'.
        """
        rank, sep, suit = index.partition('_')
        if not sep:
            raise ValueError(f"Invalid card index '{index}'. Expected '<rank>_<suit>'.")
        return TrumpDuelCard(suit, rank)

    @staticmethod
    def get_deck() -> list['TrumpDuelCard']:
        """
        Returns a copy of the 30-card deck in canonical order.
        """
        return _DECK.copy()


def suit_of(card: TrumpDuelCard) -> str:
    """
    Returns the suit of a card.
    """
    return card.suit


def rank_of(card: TrumpDuelCard) -> str:
    """
    Returns the rank of a card.
    """
    return card.rank


def value_of(card: TrumpDuelCard) -> int:
    """
    Returns the trick-taking value of a card, 7 up to 14 for the Ace.
    """
    return config.RANK_VALUES[card.rank]


def suit_symbol(suit: str) -> str:
    """
    Returns the display symbol of a suit.
    """
    return config.SUIT_SYMBOLS[suit]


# Source deck to only generate once
_DECK: list[TrumpDuelCard] = [TrumpDuelCard(suit, rank) for suit, rank in _CANONICAL_ORDER]

assert len(_DECK) == config.NUM_CARDS_IN_DECK, "The deck must hold exactly 30 cards."
