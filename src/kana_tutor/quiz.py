"""Quiz engine: session building, distractors and answer scoring."""
import logging

from kana_tutor.dataset import get_entries, get_mode, pool_entries
from kana_tutor.models import (
    Category, Entry, QuizAttempt, QuizMode, QuizQuestion, QuizResult, QuizSession,
)
from kana_tutor.shuffle import shuffle

QUESTION_COUNT = 30
DISTRACTOR_COUNT = 3

logger = logging.getLogger(__name__)


class QuizFinishedError(Exception):
    """Raised when an answer arrives for an attempt that is already finished."""


def select_pooled_targets(mode: QuizMode, dataset: dict[str, Category], rng=None) -> list:
    pool = pool_entries(dataset, mode.categories)
    return shuffle(pool, rng)[:QUESTION_COUNT]


def select_balanced_targets(mode: QuizMode, dataset: dict[str, Category], rng=None) -> list:
    """Take each bucket's fixed count from its own pool so every topic is represented."""
    targets = []
    for bucket in mode.buckets:
        pool = pool_entries(dataset, bucket.categories)
        selected = shuffle(pool, rng)[:bucket.count]
        if len(selected) < bucket.count:
            logger.warning("Bucket %s has only %d of %d targets",
                           bucket.name, len(selected), bucket.count)
        targets.extend(selected)
    return targets[:QUESTION_COUNT]


def make_question(target: Entry, dataset: dict[str, Category], rng=None) -> QuizQuestion:
    """Build one question with up to three distractors from the target's own category."""
    candidates = [e for e in get_entries(dataset, target.category) if e.char != target.char]
    distractors = shuffle(candidates, rng)[:DISTRACTOR_COUNT]
    if len(distractors) < DISTRACTOR_COUNT:
        logger.info("Only %d distractors for %s in %s",
                    len(distractors), target.char, target.category)
    options = shuffle([target, *distractors], rng)
    return QuizQuestion(target=target, options=tuple(options))


def build_session(mode: QuizMode, dataset: dict[str, Category], rng=None) -> QuizSession:
    if mode.is_balanced:
        targets = select_balanced_targets(mode, dataset, rng)
    else:
        targets = select_pooled_targets(mode, dataset, rng)
    # Mix buckets so their order does not show in the question order
    targets = shuffle(targets, rng)
    questions = tuple(make_question(t, dataset, rng) for t in targets)
    if len(questions) < QUESTION_COUNT:
        logger.warning("Quiz %s has %d questions (wanted %d)",
                       mode.id, len(questions), QUESTION_COUNT)
    logger.debug("Built quiz %s with %d questions", mode.id, len(questions))
    return QuizSession(mode_id=mode.id, title=mode.title, questions=questions)


def build_session_for(mode_id: str, modes: dict[str, QuizMode], dataset: dict[str, Category],
                      rng=None) -> QuizSession:
    return build_session(get_mode(modes, mode_id), dataset, rng)


def start_attempt(session: QuizSession) -> QuizAttempt:
    return QuizAttempt(session=session, finished=not session.questions)


def current_question(attempt: QuizAttempt) -> QuizQuestion | None:
    if attempt.finished:
        return None
    return attempt.session.questions[attempt.current_index]


def record_answer(attempt: QuizAttempt, index: int, selected: Entry) -> QuizResult:
    """Score the answer to question ``index`` and append it to the attempt's results.

    Questions are answered strictly in order. Answers for a finished attempt
    raise QuizFinishedError; answers for any question other than the next
    unanswered one raise ValueError. Neither touches the results.
    """
    if attempt.finished:
        logger.warning("Answer for question %d after quiz %s finished",
                       index, attempt.session.mode_id)
        raise QuizFinishedError(f"Quiz {attempt.session.mode_id} is already finished")
    if index != attempt.current_index:
        raise ValueError(f"Expected answer for question {attempt.current_index}, got {index}")
    question = attempt.session.questions[index]
    result = QuizResult(
        question=question,
        selected=selected,
        is_correct=selected.char == question.target.char,
    )
    attempt.results.append(result)
    if len(attempt.results) == len(attempt.session.questions):
        attempt.finished = True
    return result


def quiz_progress(attempt: QuizAttempt) -> float:
    total = len(attempt.session.questions)
    if total == 0:
        return 0.0
    return len(attempt.results) / total


def final_score(results: list) -> int:
    return sum(1 for r in results if r.is_correct)


def accuracy(results: list) -> float:
    """Share of correct answers, 0.0 when nothing has been answered."""
    if not results:
        return 0.0
    return final_score(results) / len(results)
