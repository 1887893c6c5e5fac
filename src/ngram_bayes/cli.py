"""Command-line interface for N-gram Bayes.

Provides ``classify`` and ``stats`` commands with rich terminal output
using the ``click`` and ``rich`` libraries.

Usage::

    ngram-bayes classify --training training.json "I love this"
    ngram-bayes classify --training training.json --interactive
    ngram-bayes stats --training training.json
"""

from __future__ import annotations

import json
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from .classifier import ClassifierModel
from .models import ClassificationResult
from .training import from_training_set, load_training_set

console = Console()

EXIT_WORDS = frozenset({"exit", "quit"})


def _build_model(
    training: Path,
    ngram_size: Optional[int],
    smoothing: Optional[float],
) -> ClassifierModel:
    """Load a training set, apply option overrides and train a model."""
    try:
        training_set = load_training_set(training)
        overrides = {}
        if ngram_size is not None:
            overrides["ngram_size"] = ngram_size
        if smoothing is not None:
            overrides["smoothing_parameter"] = smoothing
        if overrides:
            training_set.config = replace(training_set.config, **overrides)
        return from_training_set(training_set)
    except (FileNotFoundError, ValueError) as e:
        console.print(f"[bold red]Error:[/] {e}")
        sys.exit(1)


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@click.group()
@click.version_option(package_name="ngram-bayes")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
def main(verbose: bool) -> None:
    """N-gram Bayes -- Naive Bayes text classification.

    Train a model from a labeled training set and score text against
    every label.
    """
    _configure_logging(verbose)


@main.command()
@click.argument("text", required=False)
@click.option("--training", "-t", required=True, type=click.Path(path_type=Path),
              help="Path to a JSON training set.")
@click.option("--interactive", "-i", is_flag=True,
              help="Keep reading lines from stdin until EOF or 'exit'.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.option("--ngram-size", "-n", type=int, default=None,
              help="Override the training set's n-gram size.")
@click.option("--smoothing", "-s", type=float, default=None,
              help="Override the training set's smoothing parameter.")
def classify(
    text: str | None,
    training: Path,
    interactive: bool,
    output: str,
    ngram_size: int | None,
    smoothing: float | None,
) -> None:
    """Score text against every label in a training set.

    Scores TEXT once, or each line from stdin with --interactive. Without
    either, a single line is read from stdin.

    Example: ngram-bayes classify --training training.json "I love this"
    """
    model = _build_model(training, ngram_size, smoothing)

    if text is not None:
        _emit(model.classify(text), output)
        return

    stdin = click.get_text_stream("stdin")
    if not interactive:
        _emit(model.classify(stdin.readline().strip()), output)
        return

    if output == "rich":
        console.print("[dim]Interactive mode is active. Type your input and press Enter:[/]")
    for line in stdin:
        line = line.strip()
        if not line:
            continue
        if line.lower() in EXIT_WORDS:
            break
        _emit(model.classify(line), output)


@main.command()
@click.option("--training", "-t", required=True, type=click.Path(path_type=Path),
              help="Path to a JSON training set.")
@click.option("--ngram-size", "-n", type=int, default=None,
              help="Override the training set's n-gram size.")
def stats(training: Path, ngram_size: int | None) -> None:
    """Show per-label document counts and vocabulary sizes.

    Example: ngram-bayes stats --training training.json
    """
    model = _build_model(training, ngram_size, None)

    table = Table(title=f"Model — {training.name}")
    table.add_column("Label", style="cyan")
    table.add_column("Documents", justify="right")
    table.add_column("Features", justify="right")
    for label in sorted(model.labels):
        table.add_row(
            label,
            str(model.document_count(label)),
            str(len(model.vocabulary(label))),
        )

    console.print(table)
    console.print(
        f"n-gram size: {model.config.ngram_size} | "
        f"smoothing: {model.config.smoothing_parameter} | "
        f"documents: {model.total_document_count}"
    )


# ------------------------------------------------------------------
# Rendering helpers
# ------------------------------------------------------------------

def _emit(result: ClassificationResult, output: str) -> None:
    if output == "json":
        click.echo(json.dumps(result.to_dict()))
    else:
        _render_result(result)


def _render_result(result: ClassificationResult) -> None:
    """Render label scores as a rich table, best first."""
    table = Table(show_header=True)
    table.add_column("Label", style="cyan")
    table.add_column("Log score", justify="right")

    for label, score in result.ranked():
        style = "bold green" if label == result.predicted_label else None
        table.add_row(label, f"{score:.4f}", style=style)

    console.print(table)
    console.print(f"Predicted: [bold green]{result.predicted_label}[/]")


if __name__ == "__main__":
    main()
