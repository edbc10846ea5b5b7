"""CLI for the combo generator.

Developer CLI that exercises the same generation path a presentation layer
would call, plus a bulk invariant check over many seeded trials.
"""

import random

import typer
from loguru import logger
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table

from kickcombo.config.settings import settings
from kickcombo.core.logger import VALID_LOG_LEVELS, normalize_log_level, setup_logger
from kickcombo.generation.errors import ComboInvariantError
from kickcombo.generation.generator import generate_moves
from kickcombo.generation.invariants import MAX_COMBO_MOVES, MIN_COMBO_MOVES
from kickcombo.generation.schema.combo_spec import DEFAULT_RULES, GenerationRequest, Level, Mode, Rules, Stance
from kickcombo.share import build_share_url, combo_text, format_share_text

console = Console()

app = typer.Typer(
    name="kickcombo",
    help="Kickboxing combination generator",
    add_completion=False,
)


@app.callback()
def main(
    log_level: str | None = typer.Option(None, "--log-level", help="Override KICKCOMBO_LOG_LEVEL"),
) -> None:
    level = settings.log_level
    if log_level is not None:
        level = normalize_log_level(log_level)
        if level is None:
            console.print(
                f"[red]Invalid options:[/red] unknown log level {escape(repr(log_level))}. "
                f"Valid levels are: {', '.join(sorted(VALID_LOG_LEVELS))}"
            )
            raise typer.Exit(code=1)
    setup_logger(level=level, log_file=settings.log_file)


def _build_request(
    count: int,
    stance: str,
    level: str,
    mode: str,
    allow_same_move: bool,
    no_category_repeat: bool,
) -> GenerationRequest:
    rules = Rules(
        avoid_same_move_in_a_row=not allow_same_move,
        avoid_same_category_in_a_row=no_category_repeat,
        finisher_bias=DEFAULT_RULES.finisher_bias,
    )
    try:
        return GenerationRequest(count=count, stance=stance, level=level, mode=mode, rules=rules)
    except ValidationError as e:
        console.print(f"[red]Invalid options:[/red] {escape(str(e))}")
        raise typer.Exit(code=1) from e


@app.command()
def generate(
    count: int = typer.Option(4, "--count", "-n", help=f"Number of moves ({MIN_COMBO_MOVES}-{MAX_COMBO_MOVES}, clamped)"),
    stance: str = typer.Option(Stance.ORTHODOX.value, "--stance", "-s", help="orthodox | southpaw"),
    level: str = typer.Option(Level.BEGINNER.value, "--level", "-l", help="beginner | intermediate | advanced"),
    mode: str = typer.Option(Mode.KICKBOXING.value, "--mode", "-m", help="kickboxing | boxing"),
    seed: int | None = typer.Option(None, "--seed", help="Seed for a repeatable combo"),
    share: bool = typer.Option(False, "--share", help="Also print share text and link"),
    allow_same_move: bool = typer.Option(False, "--allow-same-move", help="Allow the same move twice in a row"),
    no_category_repeat: bool = typer.Option(False, "--no-category-repeat", help="Forbid any category twice in a row"),
) -> None:
    """Generate one combo and print it."""
    request = _build_request(count, stance, level, mode, allow_same_move, no_category_repeat)
    rng = random.Random(seed) if seed is not None else None
    moves = generate_moves(request, rng=rng)

    table = Table(title=f"{request.level.value} / {request.stance.value} / {request.mode.value}")
    table.add_column("#", justify="right")
    table.add_column("Move")
    table.add_column("Category")
    for i, move in enumerate(moves, start=1):
        table.add_row(str(i), move.label, move.category.value)
    console.print(table)

    labels = [m.label for m in moves]
    console.print(combo_text(labels))

    if share:
        text = format_share_text(labels)
        console.print(Panel(text, title="Share"))
        console.print(build_share_url(text), soft_wrap=True)


@app.command()
def check(
    trials: int = typer.Option(500, "--trials", "-t", min=1, help="Trials per stance/level/mode combination"),
    seed: int = typer.Option(0, "--seed", help="Base seed"),
) -> None:
    """Generate many combos and verify every invariant holds."""
    failures = 0
    total = 0
    for mode in Mode:
        for level in Level:
            for stance in Stance:
                rng = random.Random(f"{seed}-{mode.value}-{level.value}-{stance.value}")
                for i in range(trials):
                    count = MIN_COMBO_MOVES + i % (MAX_COMBO_MOVES - MIN_COMBO_MOVES + 1)
                    request = GenerationRequest(count=count, stance=stance, level=level, mode=mode, rules=DEFAULT_RULES)
                    total += 1
                    try:
                        generate_moves(request, rng=rng)
                    except ComboInvariantError as e:
                        failures += 1
                        logger.warning(f"Invariant check failed: {e}")

    if failures:
        console.print(f"[red]{failures}/{total} combos violated an invariant[/red]")
        raise typer.Exit(code=1)
    console.print(f"[green]All {total} combos passed[/green]")


if __name__ == "__main__":
    app()
