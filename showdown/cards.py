from dataclasses import dataclass
from enum import Enum
from types import MappingProxyType

from showdown import config

JACK = 11
QUEEN = 12
KING = 13
ACE = 14

_RANK_VALUES = MappingProxyType(
    {
        "2": 2,
        "3": 3,
        "4": 4,
        "5": 5,
        "6": 6,
        "7": 7,
        "8": 8,
        "9": 9,
        "10": 10,
        "J": JACK,
        "Q": QUEEN,
        "K": KING,
        "A": ACE,
    }
)

_TEN_GLYPH = "T"


class Suit(str, Enum):
    CLUBS = "C"
    DIAMONDS = "D"
    HEARTS = "H"
    SPADES = "S"


class NotACard(ValueError):
    """Base for every way a token can fail to be a card."""

    @property
    def token(self):
        return self.args[0]


class InvalidCardLength(NotACard):
    pass


class InvalidCard(NotACard):
    pass


class InvalidRank(NotACard):
    pass


class InvalidSuit(NotACard):
    pass


@dataclass(frozen=True)
class Card:
    rank: int
    suit: Suit

    def __post_init__(self):
        if not 2 <= self.rank <= ACE:
            raise InvalidRank(str(self.rank))

        try:
            suit = Suit(self.suit)
        except ValueError:
            raise InvalidSuit(str(self.suit)) from None

        # Frozen: "S" is stored as Suit.SPADES
        object.__setattr__(self, "suit", suit)

    def __lt__(self, other):
        return self.rank < other.rank


def rank_value(glyph: str) -> int:
    if glyph == _TEN_GLYPH and config.ACCEPT_TEN_AS_T:
        return 10

    try:
        return _RANK_VALUES[glyph]
    except KeyError:
        raise InvalidRank(glyph) from None


def parse_card(token: str) -> Card:
    """Turns a token such as "4S" or "10H" into a Card.

    Raises one of the NotACard subclasses, checking the length first, then the
    "10" prefix of three character tokens, then the suit and finally the rank.
    """
    if len(token) == 2:
        glyph = token[0]
    elif len(token) == 3:
        glyph = token[0:2]
        if glyph != "10":
            raise InvalidCard(token)
    else:
        raise InvalidCardLength(token)

    try:
        suit = Suit(token[-1])
    except ValueError:
        raise InvalidSuit(token) from None

    try:
        rank = rank_value(glyph)
    except InvalidRank:
        raise InvalidRank(token) from None

    return Card(rank, suit)
