"""Flashcard study decks and navigation through them."""
import logging

from kana_tutor.dataset import get_entries
from kana_tutor.models import Category, Entry, StudyCursor, StudyDeck
from kana_tutor.shuffle import shuffle

logger = logging.getLogger(__name__)


def build_deck(dataset: dict[str, Category], category: str, ordered: bool, rng=None) -> StudyDeck:
    """Build a deck for one category, in source order or freshly shuffled.

    An unknown or empty category gives an empty deck rather than an error.
    """
    entries = get_entries(dataset, category)
    if not ordered:
        entries = shuffle(entries, rng)
    logger.debug("Built %s deck for %s with %d cards",
                 "ordered" if ordered else "shuffled", category, len(entries))
    return StudyDeck(category=category, ordered=ordered, entries=tuple(entries))


def restart_deck(dataset: dict[str, Category], deck: StudyDeck, rng=None) -> StudyDeck:
    """Rebuild the same deck; shuffled decks get a new permutation."""
    return build_deck(dataset, deck.category, deck.ordered, rng)


def current_card(deck: StudyDeck, cursor: StudyCursor) -> Entry | None:
    if 0 <= cursor.index < len(deck.entries):
        return deck.entries[cursor.index]
    return None


def next_card(deck: StudyDeck, cursor: StudyCursor) -> StudyCursor:
    """Move forward one card, or mark the deck finished on the last card."""
    if cursor.index < len(deck.entries) - 1:
        return StudyCursor(index=cursor.index + 1)
    return StudyCursor(index=cursor.index, finished=True)


def prev_card(cursor: StudyCursor) -> StudyCursor:
    if cursor.index > 0:
        return StudyCursor(index=cursor.index - 1)
    return StudyCursor(index=0)


def deck_progress(deck: StudyDeck, cursor: StudyCursor) -> float:
    """Fraction of the deck seen so far, counting the current card."""
    if not deck.entries:
        return 0.0
    return min(cursor.index + 1, len(deck.entries)) / len(deck.entries)
