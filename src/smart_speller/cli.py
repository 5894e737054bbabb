"""Command line entrypoint for the spelling corrector."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import NoReturn
from uuid import uuid4

import typer

from smart_speller.checksums import ALGORITHMS
from smart_speller.config import settings
from smart_speller.error_handling import (
    SpellerError,
    raise_parsing_error,
    raise_resource_not_found,
    raise_validation_error,
)
from smart_speller.evaluation import Scores
from smart_speller.logging_utils import bind_request_context, configure_service_logging
from smart_speller.normalization import normalize as normalize_text
from smart_speller.normalization import to_words
from smart_speller.spelling.edit_distance import distance as edit_distance
from smart_speller.spelling.speller import SmartSpeller
from smart_speller.startup_setup import initialize_speller

app = typer.Typer(help="Frequency ranked spelling correction", no_args_is_help=True)


def _fail(error: SpellerError) -> NoReturn:
    typer.secho(str(error), fg=typer.colors.RED, err=True)
    raise typer.Exit(code=1)


def _speller(ctx: typer.Context) -> SmartSpeller:
    try:
        return initialize_speller(ctx.obj)
    except SpellerError as e:
        _fail(e)


@app.callback()
def main(
    ctx: typer.Context,
    corpus: Path | None = typer.Option(
        None, "--corpus", help="Frequency dictionary (word and count per line)"
    ),
    max_distance: int | None = typer.Option(
        None, "--max-distance", min=1, max=3, help="Maximum edit distance indexed"
    ),
    max_candidates: int | None = typer.Option(
        None, "--max-candidates", min=1, help="Candidate budget for sentence expansion"
    ),
    log_level: str = typer.Option(settings.LOG_LEVEL, "--log-level", help="Logging level"),
) -> None:
    """Configure logging and the corrector settings shared by every command."""

    if log_level.upper() not in logging.getLevelNamesMapping():
        raise typer.BadParameter(f"Unknown log level {log_level!r}", param_hint="--log-level")

    configure_service_logging(
        settings.SERVICE_NAME, environment=settings.ENVIRONMENT.value, log_level=log_level
    )
    bind_request_context(str(uuid4()), command=ctx.invoked_subcommand)

    overrides: dict[str, object] = {"LOG_LEVEL": log_level}
    if corpus is not None:
        overrides["CORPUS_PATH"] = str(corpus)
    if max_distance is not None:
        overrides["MAX_EDIT_DISTANCE"] = max_distance
    if max_candidates is not None:
        overrides["MAX_SENTENCE_CANDIDATES"] = max_candidates
    ctx.obj = settings.model_copy(update=overrides)


@app.command()
def correct(ctx: typer.Context, word: str = typer.Argument(..., help="Word to correct")) -> None:
    """Print the most likely correction of WORD."""

    typer.echo(_speller(ctx).correct(word))


@app.command()
def candidates(
    ctx: typer.Context,
    word: str = typer.Argument(..., help="Word to look up"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
) -> None:
    """List every suggestion for WORD with its edit distance and frequency."""

    suggestions = _speller(ctx).suggestions(word)
    if as_json:
        typer.echo(json.dumps([s.model_dump() for s in suggestions], indent=2))
        return
    for suggestion in suggestions:
        typer.echo(f"{suggestion.word}\t{suggestion.distance}\t{suggestion.frequency}")


@app.command()
def process(
    ctx: typer.Context,
    sentence: str = typer.Argument(..., help="Sentence to correct"),
    top: int | None = typer.Option(None, "--top", min=1, help="Show only the N best candidates"),
    as_json: bool = typer.Option(False, "--json", help="Emit JSON instead of text"),
) -> None:
    """Rank candidate corrections of SENTENCE by probability."""

    report = _speller(ctx).report(sentence, top=top)
    if as_json:
        typer.echo(report.model_dump_json(indent=2))
        return
    for candidate in report.candidates:
        typer.echo(f"{candidate.probability:.6f}\t{candidate.sentence}")


@app.command()
def distance(
    source: str = typer.Argument(..., help="First string"),
    target: str = typer.Argument(..., help="Second string"),
) -> None:
    """Print the Damerau-Levenshtein distance between SOURCE and TARGET."""

    typer.echo(edit_distance(source, target))


@app.command()
def normalize(text: str = typer.Argument(..., help="Text to normalize")) -> None:
    """Lowercase TEXT and collapse stuttered words."""

    typer.echo(normalize_text(text))


@app.command()
def numerics(text: str = typer.Argument(..., help="Text with numbers")) -> None:
    """Spell out the numbers in TEXT."""

    typer.echo(to_words(text))


@app.command()
def checksum(
    algorithm: str = typer.Argument(..., help=f"One of: {', '.join(sorted(ALGORITHMS))}"),
    number: str = typer.Argument(..., help="Digits to check"),
    check: int | None = typer.Option(None, "--check", min=0, help="Check value to validate"),
) -> None:
    """Generate the check value for NUMBER, or validate it against --check."""

    try:
        module = ALGORITHMS.get(algorithm.lower())
        if module is None:
            raise_validation_error(
                service=settings.SERVICE_NAME,
                operation="checksum",
                field="algorithm",
                message=f"Unknown checksum algorithm '{algorithm}'",
                choices=sorted(ALGORITHMS),
            )
        if not number.isdigit():
            raise_validation_error(
                service=settings.SERVICE_NAME,
                operation="checksum",
                field="number",
                message=f"Not a digit string: {number!r}",
            )
    except SpellerError as e:
        _fail(e)

    if check is None:
        typer.echo(module.generate(number))
        return

    valid = module.validate_with_check(number, check)
    typer.echo("valid" if valid else "invalid")
    if not valid:
        raise typer.Exit(code=1)


def _load_matrix(path: Path) -> dict[str, dict[str, int]]:
    if not path.is_file():
        raise_resource_not_found(
            service=settings.SERVICE_NAME,
            operation="score",
            resource_type="Confusion matrix",
            resource_id=str(path),
        )
    try:
        matrix = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise_parsing_error(
            service=settings.SERVICE_NAME,
            operation="score",
            parse_target=str(path),
            message=f"Invalid JSON: {e}",
        )
    if not isinstance(matrix, dict) or not all(isinstance(row, dict) for row in matrix.values()):
        raise_parsing_error(
            service=settings.SERVICE_NAME,
            operation="score",
            parse_target=str(path),
            message="Expected an object of gold categories mapping to system counts",
        )
    try:
        return {
            gold: {system: int(count) for system, count in row.items()}
            for gold, row in matrix.items()
        }
    except (TypeError, ValueError) as e:
        raise_parsing_error(
            service=settings.SERVICE_NAME,
            operation="score",
            parse_target=str(path),
            message=f"Counts must be integers: {e}",
        )


@app.command()
def score(
    matrix_json: Path = typer.Argument(..., help="JSON confusion matrix: {gold: {system: count}}"),
    show_matrix: bool = typer.Option(False, "--matrix", help="Also print the matrix"),
    output_dir: Path | None = typer.Option(
        None, "--output-dir", help="Write scores.csv and matrix.csv here instead of printing"
    ),
) -> None:
    """Print precision, recall and F1 for a confusion matrix."""

    try:
        scores = Scores(_load_matrix(matrix_json))
        if output_dir is not None:
            scores.write_scores(output_dir / "scores.csv")
            scores.write_matrix(output_dir / "matrix.csv")
            typer.secho(f"Reports written to {output_dir}", fg=typer.colors.GREEN)
            return
    except SpellerError as e:
        _fail(e)

    typer.echo(scores.format_scores(), nl=False)
    if show_matrix:
        typer.echo(scores.format_matrix(), nl=False)


if __name__ == "__main__":
    app()
