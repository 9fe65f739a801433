"""
Typer CLI for the MathQuest adaptive engine.

Commands:
    mathquest question   - Generate one adaptive question for a topic tag
    mathquest check      - Check a free-text answer against a correct answer
    mathquest recommend  - Show the recommended level for a mastery profile
    mathquest taxonomy   - List knowledge points by domain and level range
    mathquest practice   - Interactive practice loop with feedback

Usage:
    mathquest --help
    mathquest question --tag fractions --accuracy 0.9 --avg-time 15000 --seed 7
    mathquest question --tag trig --lang zh --json
    mathquest check "1/2" "0.5"
    mathquest recommend --accuracy 0.4 --level 3
    mathquest practice --tag knowledge_check --rounds 5
"""

from __future__ import annotations

import json
import random
import sys
import time
from dataclasses import replace

import typer
from loguru import logger
from rich import print as rprint
from rich.console import Console
from rich.panel import Panel
from rich.prompt import Prompt
from rich.table import Table

from mathquest.config import get_settings
from mathquest.core.classifier import infer_domain_from_tag, resolve_generation_tag
from mathquest.core.mastery import recommend_next_level
from mathquest.core.models import AdaptiveQuestion, MasteryDomain, MasteryProfile
from mathquest.core.taxonomy import KNOWLEDGE_POINT_TAXONOMY
from mathquest.core.validator import validate_answer
from mathquest.engine.builder import build_adaptive_question
from mathquest.engine.feedback import grade_attempt
from mathquest.engine.session import PracticeTrack

app = typer.Typer(
    help="MathQuest: adaptive bilingual math questions from a topic tag and a mastery profile",
    no_args_is_help=True,
)

console = Console()


# ========================================
# Option helpers
# ========================================


def _build_profile(accuracy: float, avg_time: float, streak: int, level: float) -> MasteryProfile:
    if not 0.0 <= accuracy <= 1.0:
        raise typer.BadParameter("accuracy must be between 0 and 1", param_hint="--accuracy")
    if avg_time < 0:
        raise typer.BadParameter("average time cannot be negative", param_hint="--avg-time")
    if streak < 0:
        raise typer.BadParameter("streak cannot be negative", param_hint="--streak")
    return MasteryProfile(accuracy=accuracy, avg_time_ms=avg_time, streak=streak, level=level)


def _resolve_lang(lang: str | None) -> str:
    lang = lang or get_settings().default_language
    if lang not in ("en", "zh"):
        raise typer.BadParameter("language must be 'en' or 'zh'", param_hint="--lang")
    return lang


def _render_question(question: AdaptiveQuestion, lang: str, show_answer: bool = True) -> None:
    title = f"[bold cyan]{question.domain.display_name}[/bold cyan] · level {question.level}"
    console.print(Panel(question.prompt(lang), title=title, subtitle=question.knowledge_point_slug))
    for i, hint in enumerate(question.hints, start=1):
        rprint(f"  [dim]Hint {i}:[/dim] {hint.get(lang)}")
    if show_answer:
        rprint(f"\n  [green]Answer:[/green] {question.answer}")
        rprint(f"  [cyan]Why:[/cyan] {question.explanation(lang)}")
    rprint(f"  [magenta]Fun fact:[/magenta] {question.fun_fact(lang)}\n")


# ========================================
# Commands
# ========================================


@app.command("question")
def question_command(
    tag: str = typer.Option(..., "--tag", "-t", help="Topic tag, e.g. 'fractions', 'CCSS-HSA', 'GRADE_6'"),
    accuracy: float = typer.Option(0.0, "--accuracy", help="Rolling accuracy, 0-1"),
    avg_time: float = typer.Option(0.0, "--avg-time", help="Rolling average response time in ms"),
    streak: int = typer.Option(0, "--streak", help="Current correct-answer streak"),
    level: float = typer.Option(1.0, "--level", help="Current level, 1-5"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible output"),
    lang: str | None = typer.Option(None, "--lang", help="Display language: en or zh"),
    as_json: bool = typer.Option(False, "--json", help="Print the question as JSON"),
) -> None:
    """
    Generate one adaptive question.

    Examples:
        mathquest question --tag fractions
        mathquest question --tag calculus --accuracy 0.95 --avg-time 12000 --level 4 --seed 3
    """
    profile = _build_profile(accuracy, avg_time, streak, level)
    lang = _resolve_lang(lang)

    rng = random.Random(seed)
    generation_tag = resolve_generation_tag(tag, 0, rng)
    question = build_adaptive_question(generation_tag, profile, rng=rng)
    if seed is not None:
        question = replace(question, seed=seed)

    if as_json:
        typer.echo(json.dumps(question.to_dict(), ensure_ascii=False, indent=2))
        return
    _render_question(question, lang)


@app.command("check")
def check_command(
    user_answer: str = typer.Argument(..., help="The learner's answer"),
    correct_answer: str = typer.Argument(..., help="The canonical answer"),
) -> None:
    """
    Check whether two answers are equivalent.

    Exits with code 1 when they are not, so the command can be scripted.
    """
    tolerance = get_settings().answer_tolerance
    if validate_answer(user_answer, correct_answer, tolerance=tolerance):
        rprint(f"[green]✓ Correct[/green]  {user_answer!r} matches {correct_answer!r}")
        return
    rprint(f"[red]✗ Incorrect[/red]  {user_answer!r} does not match {correct_answer!r}")
    raise typer.Exit(code=1)


@app.command("recommend")
def recommend_command(
    accuracy: float = typer.Option(0.0, "--accuracy", help="Rolling accuracy, 0-1"),
    avg_time: float = typer.Option(0.0, "--avg-time", help="Rolling average response time in ms"),
    streak: int = typer.Option(0, "--streak", help="Current correct-answer streak"),
    level: float = typer.Option(1.0, "--level", help="Current level, 1-5"),
    tag: str | None = typer.Option(None, "--tag", "-t", help="Also show the domain this tag maps to"),
) -> None:
    """Show the level the next question would be generated at."""
    profile = _build_profile(accuracy, avg_time, streak, level)
    next_level = recommend_next_level(profile)

    table = Table(title="Level Recommendation", show_header=True)
    table.add_column("Field", style="cyan")
    table.add_column("Value", justify="right")
    table.add_row("Accuracy", f"{profile.accuracy:.0%}")
    table.add_row("Avg time (ms)", f"{profile.avg_time_ms:,.0f}")
    table.add_row("Streak", str(profile.streak))
    table.add_row("Current level", f"{profile.level:g}")
    table.add_row("Next level", f"[bold green]{next_level}[/bold green]")
    if tag is not None:
        table.add_row("Domain", infer_domain_from_tag(tag).display_name)
    console.print(table)


@app.command("taxonomy")
def taxonomy_command(
    domain: str | None = typer.Option(None, "--domain", "-d", help="Only show one domain, e.g. ALGEBRA"),
) -> None:
    """List the knowledge-point taxonomy."""
    selected: MasteryDomain | None = None
    if domain is not None:
        try:
            selected = MasteryDomain(domain.strip().upper())
        except ValueError:
            names = ", ".join(d.value for d in MasteryDomain)
            raise typer.BadParameter(f"unknown domain {domain!r}; choose one of {names}", param_hint="--domain")

    table = Table(title="Knowledge Points", show_header=True)
    table.add_column("Domain", style="cyan")
    table.add_column("Slug")
    table.add_column("Name")
    table.add_column("名称")
    table.add_column("Levels", justify="center")
    for kp in KNOWLEDGE_POINT_TAXONOMY:
        if selected is not None and kp.domain != selected:
            continue
        table.add_row(kp.domain.display_name, kp.slug, kp.name_en, kp.name_zh, f"{kp.min_level}-{kp.max_level}")
    console.print(table)


@app.command("practice")
def practice_command(
    tag: str = typer.Option(..., "--tag", "-t", help="Topic tag to practice"),
    rounds: int = typer.Option(5, "--rounds", "-n", help="Number of questions"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for reproducible questions"),
    lang: str | None = typer.Option(None, "--lang", help="Display language: en or zh"),
) -> None:
    """
    Interactive practice: answer questions and watch the level adapt.

    Type 'q' (or close the input) to stop early.
    """
    if rounds < 1:
        raise typer.BadParameter("rounds must be at least 1", param_hint="--rounds")
    lang = _resolve_lang(lang)

    rng = random.Random(seed)
    track = PracticeTrack(rng=rng)
    profile = MasteryProfile()
    correct = 0

    for attempt in range(rounds):
        question = track.next_question(tag, profile, attempts=attempt)
        rprint(f"[bold]Question {attempt + 1}/{rounds}[/bold]")
        console.print(Panel(question.prompt(lang), title=question.domain.display_name))

        started = time.monotonic()
        try:
            answer = Prompt.ask("Your answer")
        except EOFError:
            rprint()
            break
        if answer.strip().lower() == "q":
            break
        elapsed_ms = (time.monotonic() - started) * 1000

        result = grade_attempt(question, answer, elapsed_ms, profile, rng=rng)
        profile = result.updated_profile
        if result.is_correct:
            correct += 1
            rprint("[green]✓ Correct![/green]")
        else:
            rprint(f"[red]✗ Not quite.[/red] The answer is [bold]{result.correct_answer}[/bold]")
            rprint(f"  [yellow]{result.encouragement.get(lang)}[/yellow]")
            rprint(f"  [dim]Tip:[/dim] {result.coaching_tip.get(lang)}")
        rprint(f"  [cyan]Why:[/cyan] {result.explanation.get(lang)}")
        rprint(f"  [dim]Concept:[/dim] {result.concept_note.get(lang)}")
        rprint(f"  [magenta]Fun fact:[/magenta] {question.fun_fact(lang)}\n")

    rprint(
        f"[bold]Done.[/bold] {correct} correct · accuracy {profile.accuracy:.0%} · "
        f"level {profile.level:g} · streak {profile.streak}"
    )


def main() -> None:
    """Entry point for the CLI."""
    settings = get_settings()
    logger.remove()
    logger.add(
        sys.stderr,
        level=settings.log_level.upper(),
        format="<dim>{time:HH:mm:ss}</dim> | <level>{level: <8}</level> | {message}",
    )
    app()


if __name__ == "__main__":
    main()
