"""
Property-based tests for the deck and the game loop.

Uses hypothesis to check that draws never duplicate or lose cards and that
scores always add up, whatever the seed or deck contents.
"""

import random
from typing import List

import pytest
from hypothesis import given, settings, strategies as st

from highlow.core import Card, Deck, HighLow, Rank, RoundOutcome, Suit, determine_winner

FULL_DECK: List[Card] = [Card(suit, rank) for suit in Suit for rank in Rank]

seed_strategy = st.integers(min_value=0, max_value=2 ** 32 - 1)
card_strategy = st.sampled_from(FULL_DECK)
score_strategy = st.integers(min_value=0, max_value=26)


@pytest.mark.property_test
@given(seed_strategy)
def test_full_draw_is_a_permutation(seed: int):
    """Property: 52 draws return every card exactly once."""
    deck = Deck(random.Random(seed))

    drawn = [deck.draw_card() for _ in range(52)]

    assert len(set(drawn)) == 52
    assert set(drawn) == set(FULL_DECK)
    assert deck.is_empty


@pytest.mark.property_test
@given(seed_strategy, st.integers(min_value=0, max_value=52))
def test_deck_shrinks_by_one_per_draw(seed: int, draws: int):
    """Property: each draw removes exactly the returned card."""
    deck = Deck(random.Random(seed))

    for i in range(draws):
        card = deck.draw_card()
        assert card not in deck.cards
        assert deck.cards_remaining == 51 - i


@pytest.mark.property_test
@settings(max_examples=50)
@given(seed_strategy)
def test_scores_add_up(seed: int):
    """Property: wins plus ties always equal the number of rounds."""
    result = HighLow(rng=random.Random(seed)).play()

    assert len(result.rounds) == 26
    assert result.player1_score + result.player2_score + result.ties == 26
    assert result.outcome is determine_winner(result.player1_score, result.player2_score)


@pytest.mark.property_test
@given(seed_strategy, st.permutations(FULL_DECK), st.integers(min_value=0, max_value=52))
def test_partial_decks(seed: int, cards: List[Card], size: int):
    """Property: a deck of n cards plays n // 2 rounds and leaves n % 2 cards."""
    game = HighLow(deck=Deck(random.Random(seed), cards=cards[:size]))

    result = game.play()

    assert len(result.rounds) == size // 2
    assert result.cards_left == size % 2
    assert game.deck.cards_remaining == size % 2


@pytest.mark.property_test
@given(card_strategy, card_strategy)
def test_card_order_uses_rank_only(card1: Card, card2: Card):
    """Property: < is decided by rank ordinal and is never symmetric."""
    assert (card1 < card2) == (card1.rank.ordinal < card2.rank.ordinal)
    assert not (card1 < card2 and card2 < card1)
    if card1.rank == card2.rank:
        assert not card1 < card2
        assert (card1 == card2) == (card1.suit == card2.suit)


@pytest.mark.property_test
@given(score_strategy, score_strategy)
def test_winner_is_strictly_higher_score(player1_score: int, player2_score: int):
    """Property: the winner holds the strictly higher score; equal scores tie."""
    outcome = determine_winner(player1_score, player2_score)

    if player1_score == player2_score:
        assert outcome is RoundOutcome.TIE
    elif player1_score > player2_score:
        assert outcome is RoundOutcome.PLAYER1
    else:
        assert outcome is RoundOutcome.PLAYER2
