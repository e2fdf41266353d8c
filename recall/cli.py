"""
Recall: developer CLI for the grading and scheduling engine.

Commands:
- recall grade      - Grade an answer against accepted answers and keywords
- recall schedule   - Compute the next SM-2 state for a score
"""
from __future__ import annotations

import random
import sys
from typing import List, Optional

import typer
from loguru import logger
from rich.console import Console
from rich.panel import Panel
from rich.table import Table

from .config import get_settings
from .errors import InvalidItemError
from .grading import AnswerScorer
from .models import FeedbackCategory, QuizItem
from .scheduling import SM2Scheduler

# =============================================================================
# CLI Setup
# =============================================================================

app = typer.Typer(
    name="recall",
    help="Recall: grade free-text answers and schedule reviews",
    no_args_is_help=True,
)
console = Console()

CATEGORY_STYLES = {
    FeedbackCategory.PERFECT: "bold green",
    FeedbackCategory.EXCELLENT: "green",
    FeedbackCategory.GOOD: "cyan",
    FeedbackCategory.NEEDS_WORK: "yellow",
    FeedbackCategory.INCORRECT: "bold red",
}


# =============================================================================
# Commands
# =============================================================================

@app.command()
def grade(
    answer: str = typer.Argument(..., help="The learner's answer"),
    accepted: List[str] = typer.Option(..., "--accepted", "-a", help="Accepted answer (repeatable)"),
    keyword: List[str] = typer.Option([], "--keyword", "-k", help="Keyword (repeatable)"),
    weight: List[float] = typer.Option([], "--weight", "-w", help="Keyword weight, in keyword order"),
    seed: Optional[int] = typer.Option(None, "--seed", help="Pin the feedback phrasing"),
) -> None:
    """Grade an answer and show the score breakdown."""
    try:
        item = QuizItem(
            prompt="",
            accepted_answers=accepted,
            keywords=keyword,
            keyword_weights=weight or None,
        )
    except InvalidItemError as e:
        console.print(f"[bold red]Invalid item:[/bold red] {e}")
        raise typer.Exit(code=2)

    rng = random.Random(seed) if seed is not None else None
    result = AnswerScorer(rng=rng).evaluate(answer, item)
    style = CATEGORY_STYLES[result.feedback.category]

    content = f"[{style}]{result.score}%[/{style}]  {result.feedback.message}"
    if result.feedback.details:
        content += f"\n[dim]{result.feedback.details}[/dim]"
    content += f"\n\nExpected: {result.expected_answer}"
    console.print(Panel(
        content,
        title=f"[bold]{result.feedback.category.value}[/bold]",
        border_style=style,
        padding=(1, 2),
    ))

    if result.keyword_details:
        table = Table(title=f"Keywords ({result.keyword_score}%)")
        table.add_column("Keyword")
        table.add_column("Weight", justify="right")
        table.add_column("Found", justify="center")
        for detail in result.keyword_details:
            found = "[green]✓[/green]" if detail.found else "[red]✗[/red]"
            table.add_row(detail.keyword, f"{detail.weight:g}", found)
        console.print(table)


@app.command()
def schedule(
    score: int = typer.Argument(..., min=0, max=100, help="Evaluation score (0-100)"),
    ease: float = typer.Option(2.5, "--ease", "-e", help="Current ease factor"),
    interval: int = typer.Option(0, "--interval", "-i", min=0, help="Current interval in days"),
    repetitions: int = typer.Option(0, "--repetitions", "-r", min=0, help="Consecutive passes"),
) -> None:
    """Show the next SM-2 state for a review score."""
    result = SM2Scheduler().schedule(score, ease, interval, repetitions)

    table = Table(title=f"SM-2 (quality {result.quality})")
    table.add_column("Field")
    table.add_column("Before", justify="right")
    table.add_column("After", justify="right")
    table.add_row("Ease factor", f"{ease:.2f}", f"{result.ease_factor:.2f}")
    table.add_row("Interval (days)", str(interval), str(result.interval))
    table.add_row("Repetitions", str(repetitions), str(result.repetitions))
    console.print(table)
    console.print(f"Next review: {result.next_review_at:%Y-%m-%d %H:%M} UTC")


# =============================================================================
# Entry Point
# =============================================================================

def main() -> None:
    """CLI entry point."""
    # Configure logging
    logger.remove()
    logger.add(
        sys.stderr,
        level=get_settings().log_level,
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )

    app()


if __name__ == "__main__":
    main()
