"""Data classes for the kana tutor domain model."""
from dataclasses import dataclass, field
from typing import Optional

HIRAGANA = "hiragana"
KATAKANA = "katakana"
VOCABULARY = "vocabulary"
KANJI = "kanji"
GRAMMAR = "grammar"
PHRASE = "phrase"

KINDS = (HIRAGANA, KATAKANA, VOCABULARY, KANJI, GRAMMAR, PHRASE)


@dataclass(frozen=True)
class Entry:
    char: str
    romaji: str
    row: str
    kind: str
    category: str
    meaning: Optional[str] = None

    @property
    def display_text(self) -> str:
        """Text shown on a quiz option: the meaning if there is one, else the reading."""
        return self.meaning or self.romaji

    @property
    def reading_label(self) -> str:
        if self.kind == KANJI:
            return "On / Kun"
        if self.kind == GRAMMAR:
            return "Reading"
        return "Romaji"


@dataclass(frozen=True)
class Category:
    id: str
    label: str
    kind: str
    entries: tuple = ()


@dataclass(frozen=True)
class Bucket:
    name: str
    categories: tuple
    count: int


@dataclass(frozen=True)
class QuizMode:
    id: str
    title: str
    categories: tuple = ()
    buckets: tuple = ()

    @property
    def is_balanced(self) -> bool:
        return bool(self.buckets)


@dataclass(frozen=True)
class StudyDeck:
    category: str
    ordered: bool
    entries: tuple = ()


@dataclass
class StudyCursor:
    index: int = 0
    finished: bool = False


@dataclass(frozen=True)
class QuizQuestion:
    target: Entry
    options: tuple


@dataclass(frozen=True)
class QuizSession:
    mode_id: str
    title: str
    questions: tuple = ()


@dataclass(frozen=True)
class QuizResult:
    question: QuizQuestion
    selected: Entry
    is_correct: bool


@dataclass
class QuizAttempt:
    session: QuizSession
    results: list = field(default_factory=list)
    finished: bool = False

    @property
    def current_index(self) -> int:
        return len(self.results)
