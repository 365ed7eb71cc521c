from dataclasses import FrozenInstanceError

import pytest

from showdown import config
from showdown.cards import ACE
from showdown.cards import Card
from showdown.cards import InvalidCard
from showdown.cards import InvalidCardLength
from showdown.cards import InvalidRank
from showdown.cards import InvalidSuit
from showdown.cards import NotACard
from showdown.cards import Suit
from showdown.cards import parse_card


@pytest.mark.parametrize(
    "token,rank,suit",
    [
        ("2C", 2, Suit.CLUBS),
        ("9D", 9, Suit.DIAMONDS),
        ("10H", 10, Suit.HEARTS),
        ("TH", 10, Suit.HEARTS),
        ("JS", 11, Suit.SPADES),
        ("QC", 12, Suit.CLUBS),
        ("KD", 13, Suit.DIAMONDS),
        ("AS", ACE, Suit.SPADES),
    ],
)
def test_parse_card(token, rank, suit):
    assert parse_card(token) == Card(rank, suit)


@pytest.mark.parametrize(
    "token,error",
    [
        ("", InvalidCardLength),
        ("2", InvalidCardLength),
        ("10HH", InvalidCardLength),
        ("11S", InvalidCard),
        ("1OS", InvalidCard),
        ("2X", InvalidSuit),
        ("2h", InvalidSuit),
        ("10X", InvalidSuit),
        ("ZS", InvalidRank),
        ("1S", InvalidRank),
        ("XS", InvalidRank),
    ],
)
def test_parse_card_errors(token, error):
    with pytest.raises(error) as ex:
        parse_card(token)

    assert ex.value.token == token
    assert isinstance(ex.value, NotACard)
    assert isinstance(ex.value, ValueError)


def test_suit_checked_before_rank():
    # Neither glyph is valid: the suit is reported
    with pytest.raises(InvalidSuit):
        parse_card("ZZ")


def test_ten_as_t_can_be_disabled(monkeypatch):
    monkeypatch.setattr(config, "ACCEPT_TEN_AS_T", False)

    with pytest.raises(InvalidRank):
        parse_card("TH")

    assert parse_card("10H") == Card(10, Suit.HEARTS)


def test_card_is_immutable():
    card = parse_card("AS")
    with pytest.raises(FrozenInstanceError):
        card.rank = 2

    assert hash(card) == hash(Card(ACE, Suit.SPADES))


def test_card_rank_bounds():
    with pytest.raises(InvalidRank) as ex:
        Card(15, Suit.CLUBS)

    assert ex.value.token == "15"

    with pytest.raises(InvalidRank):
        Card(1, Suit.CLUBS)


def test_card_ordering():
    assert parse_card("2S") < parse_card("10C") < parse_card("AH")
    assert sorted([parse_card("KD"), parse_card("3C")]) == [
        Card(3, Suit.CLUBS),
        Card(13, Suit.DIAMONDS),
    ]


def test_card_suit_must_be_a_suit():
    with pytest.raises(InvalidSuit) as ex:
        Card(5, "X")

    assert ex.value.token == "X"

    # Plain glyphs are stored as their Suit
    assert Card(5, "S").suit is Suit.SPADES
