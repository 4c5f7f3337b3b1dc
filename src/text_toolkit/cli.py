from __future__ import annotations

"""CLI entrypoint for text-toolkit."""

import logging
from pathlib import Path
from typing import Any, Dict, Iterator, Optional

import typer
from rich.console import Console
from rich.table import Table

from .analysis import distance_and_similarity, word_count
from .config import (
    ProfileModel,
    ProfileNotFoundError,
    list_available_profiles,
    load_profile,
)
from .generators import random_string
from .transform import (
    slugify as slugify_text,
    to_camel_case,
    to_kebab_case,
    to_snake_case,
    to_title_case,
    truncate as truncate_text,
)
from .utils import jsonio
from .utils.seeds import make_rng

app = typer.Typer(help="String transformation, validation and similarity helpers.")
console = Console()
logger = logging.getLogger(__name__)

CASE_STYLES = ("camel", "kebab", "snake", "title")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
    )
    logging.getLogger("text_toolkit").setLevel(level)


def _profile_or_exit(profile_id: str) -> ProfileModel:
    try:
        return load_profile(profile_id)
    except ProfileNotFoundError:
        console.print(f"[red]Unknown profile[/red]: {profile_id}")
        raise typer.Exit(code=1)
    except ValueError as exc:
        console.print(f"[red]Invalid profile[/red] {profile_id}: {exc}")
        raise typer.Exit(code=1)


@app.command(name="similarity")
def similarity_cmd(
    a: str = typer.Argument(..., help="First string."),
    b: str = typer.Argument(..., help="Second string."),
) -> None:
    table = Table(title="Similarity")
    table.add_column("metric")
    table.add_column("value", justify="right")
    distance, score = distance_and_similarity(a, b)
    table.add_row("distance", str(distance))
    table.add_row("similarity", f"{score:.3f}")
    console.print(table)


@app.command()
def slugify(
    text: str = typer.Argument(..., help="Text to slugify."),
    profile: str = typer.Option("default", "--profile", "-p", help="Options profile."),
) -> None:
    options = _profile_or_exit(profile).slugify
    result = slugify_text(text, **options.model_dump())
    console.print(result, markup=False, emoji=False, soft_wrap=True)


@app.command()
def truncate(
    text: str = typer.Argument(..., help="Text to shorten."),
    length: Optional[int] = typer.Option(
        None, "--length", "-l", help="Override the profile's length."
    ),
    profile: str = typer.Option("default", "--profile", "-p", help="Options profile."),
) -> None:
    options = _profile_or_exit(profile).truncate
    if length is not None:
        options = options.model_copy(update={"length": length})
    payload = options.model_dump()
    result = truncate_text(text, payload.pop("length"), **payload)
    console.print(result, markup=False, emoji=False, soft_wrap=True)


@app.command()
def case(
    style: str = typer.Argument(..., help="One of camel, kebab, snake, title."),
    text: str = typer.Argument(..., help="Text to convert."),
    profile: str = typer.Option("default", "--profile", "-p", help="Options profile."),
) -> None:
    if style not in CASE_STYLES:
        console.print(f"[red]Unknown case style[/red]: {style}")
        raise typer.Exit(code=1)
    options = _profile_or_exit(profile).case
    if style == "camel":
        result = to_camel_case(text, preserve_numbers=options.preserve_numbers)
    elif style == "kebab":
        result = to_kebab_case(text, separator=options.separator)
    elif style == "snake":
        result = to_snake_case(text)
    else:
        result = to_title_case(text)
    console.print(result, markup=False, emoji=False, soft_wrap=True)


@app.command()
def words(text: str = typer.Argument(..., help="Text to analyse.")) -> None:
    table = Table(title="Word Counts")
    table.add_column("word")
    table.add_column("count", justify="right")
    for word, count in word_count(text).items():
        table.add_row(word, str(count))
    console.print(table)


@app.command()
def random(
    length: Optional[int] = typer.Option(None, "--length", "-l", help="Output length."),
    charset: Optional[str] = typer.Option(None, "--charset", "-c", help="Characters to draw from."),
    seed: Optional[int] = typer.Option(None, "--seed", help="Seed for reproducible output."),
    profile: str = typer.Option("default", "--profile", "-p", help="Options profile."),
) -> None:
    options = _profile_or_exit(profile).random
    rng = make_rng(seed) if seed is not None else None
    result = random_string(
        options.length if length is None else length,
        options.charset if charset is None else charset,
        rng=rng,
    )
    console.print(result, markup=False, emoji=False, soft_wrap=True)


def _score_rows(rows: Iterator[Any], source: Path) -> Iterator[Dict[str, Any]]:
    for index, row in enumerate(rows, start=1):
        if not isinstance(row, dict) or not isinstance(row.get("a"), str) or not isinstance(
            row.get("b"), str
        ):
            raise ValueError(f"Row {index} of {source} needs string fields 'a' and 'b'")
        distance, score = distance_and_similarity(row["a"], row["b"])
        yield {**row, "distance": distance, "similarity": score}


@app.command()
def batch(
    input_path: Path = typer.Argument(..., help="JSONL file with 'a' and 'b' fields."),
    output_path: Path = typer.Argument(..., help="Where to write the scored JSONL."),
) -> None:
    if not input_path.exists():
        console.print(f"[red]Input not found:[/red] {input_path}")
        raise typer.Exit(code=1)
    try:
        written = jsonio.write_jsonl(
            output_path, _score_rows(jsonio.iter_jsonl(input_path), input_path)
        )
    except ValueError as exc:
        console.print(f"[red]Invalid input:[/red] {exc}")
        raise typer.Exit(code=1)
    logger.debug("Scored %d rows from %s", written, input_path)
    console.print(f"Scored {written} rows into [green]{output_path}[/green]")


@app.command()
def profiles() -> None:
    table = Table(title="Profiles")
    table.add_column("id")
    table.add_column("description")
    for profile_id in list_available_profiles():
        table.add_row(profile_id, load_profile(profile_id).description or "")
    console.print(table)


if __name__ == "__main__":  # pragma: no cover
    app()
