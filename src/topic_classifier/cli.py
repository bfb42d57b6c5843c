"""Command-line interface for the topic classifier.

Provides ``train``, ``classify``, and ``stats`` commands with rich
terminal output using the ``click`` and ``rich`` libraries.

Usage::

    topic-classifier train --data training_data.csv
    topic-classifier classify "Record ocean temperatures threaten coral reefs"
    topic-classifier stats
"""

from __future__ import annotations

import json
import logging
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .categories import valid_categories
from .classifier import TopicClassifier
from .config import Settings
from .errors import TopicClassifierError
from .training_data import TrainingReport, train_from_csv

console = Console()
err_console = Console(stderr=True)

# Curation can add thousands of words; only show a sample.
_MAX_WORDS_SHOWN = 20


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False)],
    )


def _fail(message: str) -> NoReturn:
    console.print(f"[bold red]Error:[/] {escape(message)}")
    sys.exit(1)


@click.group()
@click.version_option(package_name="topic-classifier")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Naive Bayes topic classifier.

    Train on a labelled CSV, then classify short texts into one of the
    fixed topic categories.
    """
    _configure_logging(verbose)
    try:
        ctx.obj = Settings.from_env()
    except ValueError as e:
        _fail(str(e))


@main.command()
@click.option("--data", "-d", "data_path", type=click.Path(path_type=Path), default=None,
              help="Training CSV with TEXT and CATEGORY columns.")
@click.option("--model", "-m", "model_path", type=click.Path(path_type=Path), default=None,
              help="Where to write the trained model.")
@click.option("--min-categories", type=click.IntRange(min=1), default=None,
              help="Promote words seen in this many categories to stop words.")
@click.option("--curate/--no-curate", default=None,
              help="Run stop-word curation after training.")
@click.pass_obj
def train(
    settings: Settings,
    data_path: Path | None,
    model_path: Path | None,
    min_categories: int | None,
    curate: bool | None,
) -> None:
    """Train a model from a labelled CSV file.

    Example: topic-classifier train --data training_data.csv
    """
    data_path = data_path or settings.data_path
    model_path = model_path or settings.model_path
    if min_categories is None:
        min_categories = settings.min_categories
    curate = settings.curate if curate is None else curate

    console.print(f"Loading training data from [bold]{escape(str(data_path))}[/]...")
    console.print(f"Valid categories: {escape(', '.join(valid_categories()))}\n")

    classifier = TopicClassifier()
    try:
        report = train_from_csv(classifier.model, data_path)
    except TopicClassifierError as e:
        _fail(str(e))

    console.print("[bold green]Training complete![/]")
    console.print(f"Total training examples: {report.trained}")
    _render_skipped(report)
    _render_stats(classifier.stats())

    if curate:
        console.print("\nAnalyzing word distribution across categories...")
        try:
            added = classifier.promote_multi_category_words(min_categories)
        except TopicClassifierError as e:
            console.print(
                f"[bold yellow]Warning:[/] Could not analyze multi-category words: {escape(str(e))}"
            )
        else:
            _render_added_words(added)

    console.print(f"\nSaving model to [bold]{escape(str(model_path))}[/]...")
    try:
        classifier.save(model_path)
    except TopicClassifierError as e:
        _fail(f"Error saving model: {e}")
    console.print("[bold green]Model saved successfully![/]")


@main.command()
@click.argument("text")
@click.option("--model", "-m", "model_path", type=click.Path(path_type=Path), default=None,
              help="Trained model file.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def classify(settings: Settings, text: str, model_path: Path | None, output: str) -> None:
    """Predict the category of TEXT.

    Example: topic-classifier classify "Record breaking ocean temperatures"
    """
    model_path = model_path or settings.model_path

    try:
        classifier = TopicClassifier.load(model_path)
        result = classifier.classify_detailed(text)
    except TopicClassifierError as e:
        _fail(str(e))

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    console.print(f"Classifying text: \"{escape(text)}\"")
    console.print(f"Predicted category: [bold cyan]{escape(result.category.value)}[/]")


@main.command()
@click.option("--model", "-m", "model_path", type=click.Path(path_type=Path), default=None,
              help="Trained model file.")
@click.pass_obj
def stats(settings: Settings, model_path: Path | None) -> None:
    """Show statistics for a trained model."""
    model_path = model_path or settings.model_path
    try:
        classifier = TopicClassifier.load(model_path)
    except TopicClassifierError as e:
        _fail(str(e))

    _render_stats(classifier.stats())
    console.print(f"  Stop words: {len(classifier.model.stop_words)}")


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_skipped(report: TrainingReport) -> None:
    if report.skipped_empty:
        console.print(f"[dim]Skipped {report.skipped_empty} rows with missing values[/]")
    if report.skipped_invalid:
        console.print(
            f"[yellow]Skipped {len(report.skipped_invalid)} rows with invalid categories[/]"
        )
        for row in report.skipped_invalid:
            console.print(f"  line {row.line}: '{escape(row.category)}'")


def _render_stats(stats: dict) -> None:
    table = Table(title="Training examples per category", show_lines=False)
    table.add_column("Category", style="cyan")
    table.add_column("Documents", justify="right")
    for category, count in stats["category_counts"].items():
        table.add_row(escape(category), str(count))
    console.print(table)

    console.print("[bold]Model statistics[/]")
    console.print(f"  Total documents: {stats['total_documents']}")
    console.print(f"  Vocabulary size: {stats['vocabulary_size']}")


def _render_added_words(added: list[str]) -> None:
    if not added:
        console.print("No additional words needed to be added to stop words.")
        return

    console.print(f"Added {len(added)} multi-category words to stop words list.")
    sample = ", ".join(added[:_MAX_WORDS_SHOWN])
    if len(added) <= _MAX_WORDS_SHOWN:
        console.print(f"Words added: {escape(sample)}")
    else:
        console.print(
            f"Sample words added: {escape(sample)} ... "
            f"(and {len(added) - _MAX_WORDS_SHOWN} more)"
        )


if __name__ == "__main__":
    main()
