"""Quiz result summary: grade label, per-category breakdown and missed entries."""
from kana_tutor.dataset import category_label
from kana_tutor.models import Category


def get_result_label(score: int, total: int) -> str:
    if total and score == total:
        return "Perfect!"
    elif total and score >= total * 0.8:
        return "Great job"
    return "Keep practising"


def get_result_color(score: int, total: int) -> str:
    if total and score == total:
        return "green"
    elif total and score >= total * 0.8:
        return "yellow"
    return "red"


def get_category_scores(results: list, dataset: dict[str, Category]) -> list[dict]:
    """Scores grouped by the target's category, in order of first appearance."""
    totals = {}
    for r in results:
        category = r.question.target.category
        row = totals.setdefault(category, {"total": 0, "correct": 0})
        row["total"] += 1
        row["correct"] += int(r.is_correct)
    return [
        {
            "category": category,
            "label": category_label(dataset, category),
            "total": row["total"],
            "correct": row["correct"],
            "score": round((row["correct"] / row["total"]) * 100, 1),
        }
        for category, row in totals.items()
    ]


def get_missed_entries(results: list) -> list:
    """Targets answered wrongly, in answer order, each listed once."""
    missed = []
    seen = set()
    for r in results:
        target = r.question.target
        key = (target.category, target.char)
        if not r.is_correct and key not in seen:
            seen.add(key)
            missed.append(target)
    return missed
