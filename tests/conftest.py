import pytest

from kana_tutor.dataset import load_dataset, load_modes
from kana_tutor.models import Category, Entry


class FixedRandom:
    """Random source whose randrange always returns the lowest index."""

    def randrange(self, stop):
        return 0


class TopRandom:
    """Random source whose randrange always returns the highest index."""

    def randrange(self, stop):
        return stop - 1


def _category(category_id, kind, rows):
    entries = tuple(
        Entry(char=char, romaji=romaji, row=romaji[0], kind=kind, category=category_id, meaning=meaning)
        for char, romaji, meaning in rows
    )
    return Category(id=category_id, label=category_id.title(), kind=kind, entries=entries)


@pytest.fixture
def small_dataset():
    """A hand-built dataset: two full kana categories, a two-entry category and an empty one."""
    return {
        "HIRA": _category("HIRA", "hiragana", [
            ("あ", "a", None), ("い", "i", None), ("う", "u", None),
            ("え", "e", None), ("お", "o", None), ("か", "ka", None),
        ]),
        "KATA": _category("KATA", "katakana", [
            ("ア", "a", None), ("イ", "i", None), ("ウ", "u", None),
            ("エ", "e", None), ("オ", "o", None),
        ]),
        "TINY": _category("TINY", "vocabulary", [
            ("いぬ", "inu", "dog"), ("ねこ", "neko", "cat"),
        ]),
        "EMPTY": Category(id="EMPTY", label="Empty", kind="grammar"),
    }


@pytest.fixture(scope="session")
def dataset():
    return load_dataset()


@pytest.fixture(scope="session")
def modes():
    return load_modes()


@pytest.fixture
def zero_rng():
    return FixedRandom()


@pytest.fixture
def top_rng():
    return TopRandom()
