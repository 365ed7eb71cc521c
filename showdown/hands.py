import logging
from enum import IntEnum
from typing import Annotated
from typing import ClassVar
from typing import List
from typing import Literal
from typing import Sequence
from typing import Tuple
from typing import Union

from pydantic import BaseModel
from pydantic import ConfigDict
from pydantic import Field
from pydantic import field_validator

from showdown import config
from showdown.cards import ACE
from showdown.cards import Card
from showdown.cards import parse_card

logger = logging.getLogger(__name__)

HAND_SIZE = 5

# Ace plays low
WHEEL = (2, 3, 4, 5, ACE)
_WHEEL_TIEBREAK = (5, 4, 3, 2, 1)

Rank = Annotated[int, Field(ge=2, le=ACE)]
FiveRanks = Tuple[Rank, Rank, Rank, Rank, Rank]


class Value(IntEnum):
    HIGH_CARD = 1
    PAIR = 2
    TWO_PAIRS = 3
    SET = 4
    STRAIGHT = 5
    FLUSH = 6
    FULL_HOUSE = 7
    QUAD = 8
    STRAIGHT_FLUSH = 9


class MalformedHand(ValueError):
    pass


class DuplicateCard(MalformedHand):
    pass


class UnknownCategory(TypeError):
    pass


class _Category(BaseModel):
    """Common base of the hand categories.

    Payload ranks are stored ascending. The descending comparison happens in
    tiebreak(), so every variant orders the same way as sort_key().
    """

    model_config = ConfigDict(frozen=True)

    value: ClassVar[Value]

    @field_validator("ranks", "kickers", check_fields=False)
    @classmethod
    def _ascending(cls, ranks):
        return tuple(sorted(ranks))

    def __lt__(self, other):
        if not isinstance(other, _Category):
            return NotImplemented
        return sort_key(self) < sort_key(other)

    def __le__(self, other):
        if not isinstance(other, _Category):
            return NotImplemented
        return sort_key(self) <= sort_key(other)

    def __gt__(self, other):
        if not isinstance(other, _Category):
            return NotImplemented
        return sort_key(self) > sort_key(other)

    def __ge__(self, other):
        if not isinstance(other, _Category):
            return NotImplemented
        return sort_key(self) >= sort_key(other)


class _FiveCards(_Category):
    ranks: FiveRanks


class _Run(_FiveCards):
    @property
    def is_wheel(self):
        return tuple(self.ranks) == WHEEL

    @property
    def high_card(self):
        if self.is_wheel:
            return 5
        return self.ranks[-1]


class StraightFlush(_Run):
    value: ClassVar[Value] = Value.STRAIGHT_FLUSH
    kind: Literal["straight_flush"] = "straight_flush"


class FourOfAKind(_Category):
    value: ClassVar[Value] = Value.QUAD
    kind: Literal["four_of_a_kind"] = "four_of_a_kind"
    quad: Rank
    kicker: Rank


class FullHouse(_Category):
    value: ClassVar[Value] = Value.FULL_HOUSE
    kind: Literal["full_house"] = "full_house"
    triple: Rank
    pair: Rank


class Flush(_FiveCards):
    value: ClassVar[Value] = Value.FLUSH
    kind: Literal["flush"] = "flush"


class Straight(_Run):
    value: ClassVar[Value] = Value.STRAIGHT
    kind: Literal["straight"] = "straight"


class ThreeOfAKind(_Category):
    value: ClassVar[Value] = Value.SET
    kind: Literal["three_of_a_kind"] = "three_of_a_kind"
    triple: Rank
    kickers: Tuple[Rank, Rank]


class TwoPair(_Category):
    value: ClassVar[Value] = Value.TWO_PAIRS
    kind: Literal["two_pair"] = "two_pair"
    high_pair: Rank
    low_pair: Rank
    kicker: Rank


class OnePair(_Category):
    value: ClassVar[Value] = Value.PAIR
    kind: Literal["one_pair"] = "one_pair"
    pair: Rank
    kickers: Tuple[Rank, Rank, Rank]


class HighCard(_FiveCards):
    value: ClassVar[Value] = Value.HIGH_CARD
    kind: Literal["high_card"] = "high_card"


HandCategory = Annotated[
    Union[
        StraightFlush,
        FourOfAKind,
        FullHouse,
        Flush,
        Straight,
        ThreeOfAKind,
        TwoPair,
        OnePair,
        HighCard,
    ],
    Field(discriminator="kind"),
]


def parse_hand(hand: str) -> List[Card]:
    cards = [parse_card(token) for token in hand.split()]

    if len(cards) != HAND_SIZE:
        raise MalformedHand("Hand has wrong number of cards", hand)

    if config.REJECT_DUPLICATE_CARDS and len(set(cards)) != HAND_SIZE:
        raise DuplicateCard("Hand contains the same card twice", hand)

    return cards


def _get_value_groups(ranks):
    ret = [0] * (ACE + 1)
    for rank in ranks:
        ret[rank] += 1

    return ret


def _get_matched_values(value_groups) -> List[List[int]]:
    # lengths[n - 1] holds, ascending, every rank seen exactly n times
    lengths: List[List[int]] = [[] for _ in range(HAND_SIZE)]

    for rank, count in enumerate(value_groups):
        if count:
            lengths[count - 1].append(rank)

    return lengths


def _is_straight(ranks):
    if ranks == WHEEL:
        return True

    return all(high == low + 1 for low, high in zip(ranks, ranks[1:]))


def _classify(ranks, is_flush, is_straight, lengths):
    if is_flush and is_straight:
        return StraightFlush(ranks=ranks)

    # A quad
    if lengths[3]:
        return FourOfAKind(quad=lengths[3][0], kicker=lengths[0][0])

    if is_flush:
        return Flush(ranks=ranks)

    if is_straight:
        return Straight(ranks=ranks)

    # A full house
    if lengths[2] and lengths[1]:
        return FullHouse(triple=lengths[2][0], pair=lengths[1][0])

    if lengths[2]:
        return ThreeOfAKind(triple=lengths[2][0], kickers=lengths[0])

    # Two pairs and a kicker
    if len(lengths[1]) == 2:
        low_pair, high_pair = lengths[1]
        return TwoPair(high_pair=high_pair, low_pair=low_pair, kicker=lengths[0][0])

    # A pair and three kickers
    if lengths[1]:
        return OnePair(pair=lengths[1][0], kickers=lengths[0])

    return HighCard(ranks=ranks)


def classify(cards: Sequence[Card]) -> HandCategory:
    """Assigns five cards, in any order, to exactly one hand category."""
    if len(cards) != HAND_SIZE:
        raise MalformedHand("Hand has wrong number of cards", cards)

    ranks = tuple(sorted(card.rank for card in cards))
    is_flush = len(set(card.suit for card in cards)) == 1
    lengths = _get_matched_values(_get_value_groups(ranks))

    category = _classify(ranks, is_flush, _is_straight(ranks), lengths)
    logger.debug("Classified %s as %r", ranks, category)
    return category


def _descending(ranks):
    return tuple(sorted(ranks, reverse=True))


def _run_tiebreak(category):
    if category.is_wheel:
        return _WHEEL_TIEBREAK
    return _descending(category.ranks)


_TIEBREAKERS = {
    StraightFlush: _run_tiebreak,
    FourOfAKind: lambda c: (c.quad, c.kicker),
    FullHouse: lambda c: (c.triple, c.pair),
    Flush: lambda c: _descending(c.ranks),
    Straight: _run_tiebreak,
    ThreeOfAKind: lambda c: (c.triple,) + _descending(c.kickers),
    TwoPair: lambda c: (c.high_pair, c.low_pair, c.kicker),
    OnePair: lambda c: (c.pair,) + _descending(c.kickers),
    HighCard: lambda c: _descending(c.ranks),
}


def tiebreak(category: HandCategory) -> Tuple[int, ...]:
    """Returns the ranks that decide between two hands of the same category,
    most significant first."""
    try:
        breaker = _TIEBREAKERS[type(category)]
    except KeyError:
        raise UnknownCategory(category) from None

    return breaker(category)


def sort_key(category: HandCategory):
    # tiebreak() rejects anything that is not a hand category
    breaker = tiebreak(category)
    return (category.value, breaker)


def compare(a: HandCategory, b: HandCategory) -> int:
    key_a = sort_key(a)
    key_b = sort_key(b)
    return (key_a > key_b) - (key_a < key_b)
