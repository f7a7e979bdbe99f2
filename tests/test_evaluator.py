import pytest

from poks.cards import Card, Rank, Suit
from poks.evaluator import HandCategory, evaluate, winners

_RANKS = dict(zip("23456789TJQKA", Rank))
_SUITS = {"c": Suit.CLUBS, "d": Suit.DIAMONDS, "h": Suit.HEARTS, "s": Suit.SPADES}


def cards(text):
    return [Card(_RANKS[token[0]], _SUITS[token[1]]) for token in text.split()]


@pytest.mark.parametrize(
    ("text", "category"),
    [
        ("As Ks Qs Js Ts", HandCategory.STRAIGHT_FLUSH),
        ("9c 9d 9h 9s 2c", HandCategory.FOUR_OF_A_KIND),
        ("3c 3d 3h 7s 7c", HandCategory.FULL_HOUSE),
        ("2h 7h 9h Jh Kh", HandCategory.FLUSH),
        ("5c 6d 7h 8s 9c", HandCategory.STRAIGHT),
        ("Ac 2d 3h 4s 5c", HandCategory.STRAIGHT),
        ("Qc Qd Qh 4s 9c", HandCategory.THREE_OF_A_KIND),
        ("Jc Jd 4h 4s 9c", HandCategory.TWO_PAIR),
        ("Tc Td 4h 8s 2c", HandCategory.PAIR),
        ("Ac Jd 4h 8s 2c", HandCategory.HIGH_CARD),
    ],
)
def test_categories(text, category):
    assert evaluate(cards(text)).category is category


def test_wheel_is_lowest_straight():
    assert evaluate(cards("Ac 2d 3h 4s 5c")) < evaluate(cards("2c 3d 4h 5s 6c"))


def test_best_five_of_seven():
    assert evaluate(cards("As Ks Qs Js Ts 2c 2d")).category is HandCategory.STRAIGHT_FLUSH


def test_order_of_cards_does_not_matter():
    hand = cards("Jc Jd 4h 4s 9c 2d Kh")
    assert evaluate(hand) == evaluate(list(reversed(hand)))


def test_kicker_decides_between_equal_pairs():
    assert evaluate(cards("Ac Ad Kh 8s 2c")) > evaluate(cards("Ah As Qh 8d 2d"))


def test_higher_category_beats_lower():
    assert evaluate(cards("2c 3c 4c 5c 7c")) > evaluate(cards("Ac Ad Ah Ks Kc"[:11] + " 9d"))


def test_winners_single():
    board = "2c 7d 9h Js 4c"
    assert winners([cards("Ac Ad " + board), cards("Kc Kd " + board)]) == [0]


def test_winners_split_when_board_plays():
    board = "As Ks Qs Js Ts"
    assert winners([cards("2c 3d " + board), cards("4h 5h " + board)]) == [0, 1]


@pytest.mark.parametrize("text", ["As Ks Qs Js", "As Ks Qs Js Ts 9s 8s 7s"])
def test_wrong_card_count_is_rejected(text):
    with pytest.raises(ValueError):
        evaluate(cards(text))


def test_duplicate_cards_are_rejected():
    with pytest.raises(ValueError):
        evaluate(cards("As As Qs Js Ts"))


def test_winners_needs_hands():
    with pytest.raises(ValueError):
        winners([])