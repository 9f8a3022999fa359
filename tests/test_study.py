# tests/test_study.py
import random

from kana_tutor.models import StudyCursor, StudyDeck
from kana_tutor.study import (
    build_deck, current_card, deck_progress, next_card, prev_card, restart_deck,
)


def test_ordered_deck_matches_source_for_every_category(dataset):
    for category_id, category in dataset.items():
        deck = build_deck(dataset, category_id, ordered=True)
        assert deck.entries == category.entries
        assert deck.ordered is True
        assert deck.category == category_id


def test_shuffled_deck_is_permutation(dataset):
    deck = build_deck(dataset, "KATAKANA_BASIC", ordered=False, rng=random.Random(1))
    source = dataset["KATAKANA_BASIC"].entries
    assert len(deck.entries) == len(source)
    assert set(deck.entries) == set(source)
    assert deck.ordered is False


def test_shuffled_deck_uses_rng(small_dataset, zero_rng):
    deck = build_deck(small_dataset, "HIRA", ordered=False, rng=zero_rng)
    assert [e.char for e in deck.entries] == ["い", "う", "え", "お", "か", "あ"]


def test_build_deck_does_not_touch_dataset(small_dataset):
    before = small_dataset["HIRA"].entries
    build_deck(small_dataset, "HIRA", ordered=False, rng=random.Random(3))
    assert small_dataset["HIRA"].entries == before


def test_unknown_category_gives_empty_deck(small_dataset):
    deck = build_deck(small_dataset, "MISSING", ordered=False)
    assert deck.entries == ()
    assert build_deck(small_dataset, "EMPTY", ordered=True).entries == ()


def test_restart_reshuffles(dataset):
    rng = random.Random(42)
    first = build_deck(dataset, "HIRAGANA_BASIC", ordered=False, rng=rng)
    second = restart_deck(dataset, first, rng=rng)
    assert set(first.entries) == set(second.entries)
    assert first.entries != second.entries
    assert second.ordered is False


def test_restart_ordered_keeps_order(dataset):
    first = build_deck(dataset, "N5_VERBS", ordered=True)
    second = restart_deck(dataset, first)
    assert second == first


def test_next_card_advances(small_dataset):
    deck = build_deck(small_dataset, "HIRA", ordered=True)
    cursor = next_card(deck, StudyCursor())
    assert cursor.index == 1
    assert not cursor.finished
    assert current_card(deck, cursor).char == "い"


def test_next_card_on_last_finishes(small_dataset):
    deck = build_deck(small_dataset, "TINY", ordered=True)
    cursor = next_card(deck, StudyCursor(index=1))
    assert cursor.finished
    assert cursor.index == 1


def test_walk_whole_deck(small_dataset):
    deck = build_deck(small_dataset, "KATA", ordered=True)
    cursor = StudyCursor()
    seen = []
    while not cursor.finished:
        seen.append(current_card(deck, cursor).char)
        cursor = next_card(deck, cursor)
    assert seen == ["ア", "イ", "ウ", "エ", "オ"]


def test_prev_card(small_dataset):
    assert prev_card(StudyCursor(index=3)).index == 2
    assert prev_card(StudyCursor(index=0)).index == 0


def test_current_card_out_of_range(small_dataset):
    deck = build_deck(small_dataset, "TINY", ordered=True)
    assert current_card(deck, StudyCursor(index=5)) is None
    assert current_card(StudyDeck(category="EMPTY", ordered=True), StudyCursor()) is None


def test_deck_progress(small_dataset):
    deck = build_deck(small_dataset, "TINY", ordered=True)
    assert deck_progress(deck, StudyCursor()) == 0.5
    assert deck_progress(deck, StudyCursor(index=1)) == 1.0


def test_deck_progress_empty_deck():
    deck = StudyDeck(category="EMPTY", ordered=False)
    assert deck_progress(deck, StudyCursor()) == 0.0
