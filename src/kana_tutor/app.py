"""Interactive CLI application."""
import logging
import os

from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from kana_tutor.dashboard import (
    get_category_scores, get_missed_entries, get_result_color, get_result_label,
)
from kana_tutor.dataset import category_label, get_mode, load_dataset, load_modes
from kana_tutor.models import StudyCursor
from kana_tutor.quiz import (
    accuracy, build_session, current_question, final_score, record_answer, start_attempt,
)
from kana_tutor.study import build_deck, current_card, next_card, prev_card, restart_deck

console = Console()

LOG_LEVEL_ENV = "KANA_TUTOR_LOG_LEVEL"
EXIT_WORDS = ("q", "menu")


class SessionExitRequested(Exception):
    """Raised when the user leaves a study deck or quiz before the end."""


def session_prompt(prompt: str, choices: list[str] | None = None, default: str | None = None) -> str:
    """Prompt inside a session; 'q' or 'menu' leaves the session."""
    kwargs = {}
    if choices:
        kwargs["choices"] = [*choices, *EXIT_WORDS]
        kwargs["show_choices"] = False
    if default is not None:
        kwargs["default"] = default
    answer = Prompt.ask(prompt, **kwargs)
    if answer.strip().lower() in EXIT_WORDS:
        raise SessionExitRequested()
    return answer


def session_int_prompt(prompt: str, choices: list[str]) -> int:
    return int(session_prompt(prompt, choices=choices))


def configure_logging() -> None:
    level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def show_welcome():
    console.print(Panel(
        "[bold]Japanese Kana & N5 Trainer[/bold]\n[dim]Flashcards and 30-question quizzes[/dim]",
        title="Welcome", border_style="blue",
    ))


def show_menu():
    console.print("\n[bold]Commands:[/bold]")
    commands = [
        ("study", "Flashcards, shuffled"),
        ("ordered", "Flashcards, in order"),
        ("quiz", "30-question quiz"),
        ("categories", "List all categories"),
        ("quit", "Exit"),
    ]
    for cmd, desc in commands:
        console.print(f"  [cyan]{cmd:<14}[/cyan] {desc}")


def run_study_session(dataset: dict, deck) -> None:
    if not deck.entries:
        console.print("[yellow]No cards in this category![/yellow]")
        return
    label = category_label(dataset, deck.category)
    cursor = StudyCursor()
    while True:
        card = current_card(deck, cursor)
        total = len(deck.entries)
        console.print(Panel(
            f"[bold]{card.char}[/bold]", title=f"{label} {cursor.index + 1}/{total}", border_style="cyan",
        ))
        session_prompt("[dim]Press Enter to flip[/dim]", default="")
        back = f"[bold]{card.romaji}[/bold]"
        if card.meaning:
            back += f"\n{card.meaning}"
        console.print(Panel(back, title=card.reading_label, border_style="green"))

        action = session_prompt("[n]ext / [p]revious", choices=["n", "p"], default="n")
        if action == "p":
            cursor = prev_card(cursor)
            continue
        cursor = next_card(deck, cursor)
        if cursor.finished:
            console.print(f"[green]Finished {label}: {total} cards.[/green]")
            question = "Study again from the start?" if deck.ordered else "Shuffle and study again?"
            again = session_prompt(question, choices=["y", "n"], default="n")
            if again != "y":
                return
            deck = restart_deck(dataset, deck)
            cursor = StudyCursor()


def run_quiz_session(dataset: dict, session):
    attempt = start_attempt(session)
    if not session.questions:
        console.print("[yellow]No questions available![/yellow]")
        return attempt
    total = len(session.questions)
    console.print(f"\n[bold]{session.title}[/bold]: {total} questions\n")
    while not attempt.finished:
        index = attempt.current_index
        q = current_question(attempt)
        console.print(Panel(f"[bold]{q.target.char}[/bold]", title=f"Question {index + 1}/{total}",
                            border_style="cyan"))
        for i, option in enumerate(q.options, 1):
            console.print(f"  [cyan]{i})[/cyan] {option.display_text}")
        choice = session_int_prompt("\nYour answer", choices=[str(i) for i in range(1, len(q.options) + 1)])
        result = record_answer(attempt, index, q.options[choice - 1])
        if result.is_correct:
            console.print("[green]Correct![/green]")
        else:
            console.print(f"[red]Incorrect.[/red] {q.target.char} = [green]{q.target.display_text}[/green]")
        console.print()
    show_results(dataset, attempt)
    return attempt


def show_results(dataset: dict, attempt) -> None:
    results = attempt.results
    score = final_score(results)
    total = len(attempt.session.questions)
    color = get_result_color(score, total)
    console.print(Panel(
        f"[bold]Score: {score}/{total} ({accuracy(results) * 100:.0f}%)[/bold]\n"
        f"[{color}]{get_result_label(score, total)}[/{color}]",
        title=attempt.session.title, border_style=color,
    ))

    table = Table(title="Answers")
    table.add_column("#", justify="right")
    table.add_column("Character", style="bold")
    table.add_column("Your answer")
    table.add_column("Correct answer")
    for i, r in enumerate(results, 1):
        mark = "[green]✓[/green]" if r.is_correct else "[red]✗[/red]"
        table.add_row(
            str(i), r.question.target.char,
            f"{mark} {r.selected.display_text}",
            "" if r.is_correct else r.question.target.display_text,
        )
    console.print(table)

    scores = get_category_scores(results, dataset)
    if len(scores) > 1:
        breakdown = Table(title="By Category")
        breakdown.add_column("Category", style="cyan")
        breakdown.add_column("Correct", justify="right")
        breakdown.add_column("Score", justify="right")
        for cs in scores:
            breakdown.add_row(cs["label"], f"{cs['correct']}/{cs['total']}", f"{cs['score']}%")
        console.print(breakdown)

    missed = get_missed_entries(results)
    if missed:
        console.print("\n[bold]Review these:[/bold]")
        for entry in missed:
            console.print(f"  [red]{entry.char}[/red] {entry.romaji} ({entry.display_text})")


def choose_category(dataset: dict) -> str:
    ids = list(dataset)
    for i, category_id in enumerate(ids, 1):
        console.print(f"  [cyan]{i:>2}[/cyan]) {dataset[category_id].label}")
    choice = session_int_prompt("Select category", choices=[str(i) for i in range(1, len(ids) + 1)])
    return ids[choice - 1]


def cmd_study(dataset: dict, ordered: bool):
    console.print(f"\n[bold]Flashcards ({'in order' if ordered else 'shuffled'})[/bold]")
    category = choose_category(dataset)
    deck = build_deck(dataset, category, ordered)
    run_study_session(dataset, deck)


def cmd_quiz(dataset: dict, modes: dict):
    console.print("\n[bold]Quiz[/bold]")
    ids = list(modes)
    for i, mode_id in enumerate(ids, 1):
        console.print(f"  [cyan]{i}[/cyan]) {modes[mode_id].title}")
    choice = session_int_prompt("Quiz mode", choices=[str(i) for i in range(1, len(ids) + 1)])
    session = build_session(get_mode(modes, ids[choice - 1]), dataset)
    run_quiz_session(dataset, session)


def cmd_categories(dataset: dict):
    table = Table(title="Categories")
    table.add_column("Category", style="cyan")
    table.add_column("Kind")
    table.add_column("Cards", justify="right")
    for category in dataset.values():
        table.add_row(category.label, category.kind, str(len(category.entries)))
    console.print(table)


def main():
    configure_logging()
    dataset = load_dataset()
    modes = load_modes()

    show_welcome()

    while True:
        show_menu()
        choice = Prompt.ask("\n[bold]>[/bold]", default="quiz").strip().lower()
        try:
            if choice == "study":
                cmd_study(dataset, ordered=False)
            elif choice == "ordered":
                cmd_study(dataset, ordered=True)
            elif choice == "quiz":
                cmd_quiz(dataset, modes)
            elif choice == "categories":
                cmd_categories(dataset)
            elif choice in ("quit", "exit", "q"):
                console.print("[dim]がんばって! Good luck with your studies.[/dim]")
                break
            else:
                console.print("[red]Unknown command. Try again.[/red]")
        except SessionExitRequested:
            console.print("[dim]Back to the menu.[/dim]")
        except KeyboardInterrupt:
            console.print("\n[dim]Use 'quit' to exit.[/dim]")
        except Exception as e:
            console.print(f"[red]Error: {e}[/red]")


if __name__ == "__main__":
    main()
