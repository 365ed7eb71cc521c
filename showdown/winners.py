import logging
from dataclasses import dataclass
from typing import Iterator
from typing import List
from typing import Optional
from typing import Sequence

from showdown.cards import NotACard
from showdown.hands import HandCategory
from showdown.hands import MalformedHand
from showdown.hands import classify
from showdown.hands import parse_hand
from showdown.hands import sort_key

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EvaluatedHand:
    # Position of the hand in the caller's sequence. The string itself is never
    # copied, so winners are handed back as the caller's own objects.
    index: int
    category: HandCategory

    @property
    def sort_key(self):
        return sort_key(self.category)


def evaluate_hand(hand: str) -> HandCategory:
    return classify(parse_hand(hand))


def rank_hands(hands: Sequence[str]) -> List[EvaluatedHand]:
    """Evaluates every hand and returns them best first.

    Hands that tie keep their input order. Any hand that fails to parse aborts
    the whole call with NotACard or MalformedHand.
    """
    evaluated_hands = [
        EvaluatedHand(index, evaluate_hand(hand)) for index, hand in enumerate(hands)
    ]
    return sorted(evaluated_hands, key=lambda hand: hand.sort_key, reverse=True)


def _get_winners(hands: Sequence[str]) -> Iterator[str]:
    it = iter(rank_hands(hands))
    first = next(it, None)
    if first is None:
        return

    yield hands[first.index]
    argmax = first.sort_key
    for evaluated in it:
        if evaluated.sort_key != argmax:
            break
        yield hands[evaluated.index]


def get_winners(hands: Sequence[str]) -> List[str]:
    return list(_get_winners(hands))


def winning_hands(hands: Sequence[str]) -> Optional[List[str]]:
    """Returns the hands that tie for best, in input order.

    None signals either an empty batch or a batch holding at least one
    malformed hand. A batch of one wins without being looked at.
    """
    if not hands:
        return None

    if len(hands) == 1:
        return [hands[0]]

    try:
        winners = get_winners(hands)
    except (NotACard, MalformedHand) as ex:
        logger.info("Rejecting batch of %d hands: %r", len(hands), ex)
        return None

    logger.info("Winners:  %s", winners)
    return winners
