"""Load the packaged character table and quiz-mode table."""
import json
import logging
from pathlib import Path

from kana_tutor.models import Bucket, Category, Entry, KINDS, QuizMode

CONTENT_DIR = Path(__file__).parent / "content"
DATASET_FILE = CONTENT_DIR / "kana.json"
MODES_FILE = CONTENT_DIR / "modes.json"

logger = logging.getLogger(__name__)


class UnknownQuizMode(KeyError):
    """Raised when a quiz mode identifier is not in the mode table."""


def load_dataset(path: str | Path | None = None) -> dict[str, Category]:
    """Read every category and its entries from kana.json.

    Each entry row is ``[char, romaji, row]`` or ``[char, romaji, row, meaning]``.
    """
    data = json.loads(Path(path or DATASET_FILE).read_text(encoding="utf-8"))
    dataset = {}
    for category_id, category in data["categories"].items():
        kind = category["kind"]
        if kind not in KINDS:
            raise ValueError(f"Unknown kind {kind!r} for category {category_id}")
        entries = []
        seen = set()
        for row in category["entries"]:
            char, romaji, group = row[:3]
            meaning = row[3] if len(row) > 3 else None
            if char in seen:
                raise ValueError(f"Duplicate entry {char!r} in category {category_id}")
            seen.add(char)
            entries.append(Entry(
                char=char, romaji=romaji, row=group, kind=kind,
                category=category_id, meaning=meaning,
            ))
        dataset[category_id] = Category(
            id=category_id, label=category["label"], kind=kind, entries=tuple(entries),
        )
    logger.debug("Loaded %d categories from %s", len(dataset), path or DATASET_FILE)
    return dataset


def load_modes(path: str | Path | None = None) -> dict[str, QuizMode]:
    """Read the quiz-mode table from modes.json, keyed by mode id."""
    data = json.loads(Path(path or MODES_FILE).read_text(encoding="utf-8"))
    modes = {}
    for mode in data["modes"]:
        buckets = tuple(
            Bucket(name=b["name"], categories=tuple(b["categories"]), count=int(b["count"]))
            for b in mode.get("buckets", [])
        )
        modes[mode["id"]] = QuizMode(
            id=mode["id"],
            title=mode["title"],
            categories=tuple(mode.get("categories", [])),
            buckets=buckets,
        )
    return modes


def get_mode(modes: dict[str, QuizMode], mode_id: str) -> QuizMode:
    try:
        return modes[mode_id]
    except KeyError:
        raise UnknownQuizMode(mode_id) from None


def get_entries(dataset: dict[str, Category], category: str) -> tuple:
    """Entries of one category in source order; empty for an unknown category."""
    found = dataset.get(category)
    if found is None or not found.entries:
        logger.warning("Category %s has no entries", category)
        return ()
    return found.entries


def pool_entries(dataset: dict[str, Category], categories) -> list:
    """Union the entries of several categories, in the order the categories are given."""
    pool = []
    for category in categories:
        pool.extend(get_entries(dataset, category))
    return pool


def category_label(dataset: dict[str, Category], category: str) -> str:
    found = dataset.get(category)
    return found.label if found else category
