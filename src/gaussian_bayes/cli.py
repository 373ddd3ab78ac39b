"""Command-line interface for the Gaussian Naive Bayes classifier.

Provides ``menu``, ``evaluate``, ``summarize``, and ``datasets`` commands
with rich terminal output using the ``click`` and ``rich`` libraries.

Usage::

    gaussian-bayes menu
    gaussian-bayes evaluate datasets/iris.csv --detailed
    gaussian-bayes evaluate train.csv --test test.csv --output json
    gaussian-bayes summarize datasets/banknote_authentication.csv
"""

from __future__ import annotations

import json
import logging
import math
import sys
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from .config import BUILTIN_DATASETS, ENV_PREFIX, Settings, load_settings
from .exceptions import GaussianBayesError
from .loader import Dataset
from .models import ClassSummary
from .pipeline import EvaluationResult, Evaluator

console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
        force=True,
    )


def _fail(exc: Exception) -> NoReturn:
    console.print(f"[bold red]Error:[/] {escape(str(exc))}")
    sys.exit(1)


def _fmt(value: float) -> str:
    if math.isnan(value):
        return "nan"
    return f"{value:.4f}"


@click.group()
@click.version_option(package_name="gaussian-bayes")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging.")
@click.pass_context
def main(ctx: click.Context, verbose: bool) -> None:
    """Gaussian Naive Bayes classification of tabular datasets.

    Fits per-class feature distributions and reports how accurately the
    model classifies a dataset.
    """
    try:
        settings = load_settings()
    except ValueError as e:
        _fail(e)
    _configure_logging("DEBUG" if verbose else settings.log_level)
    ctx.obj = settings


@main.command()
@click.pass_obj
def menu(settings: Settings) -> None:
    """Pick a built-in dataset and self-evaluate on it.

    Example: gaussian-bayes menu
    """
    prompt = "\n".join(f"{i}. {b.title}" for i, b in enumerate(BUILTIN_DATASETS, 1))
    choices = [str(i) for i in range(1, len(BUILTIN_DATASETS) + 1)]
    selection = click.prompt(prompt, type=click.Choice(choices), show_choices=False,
                             prompt_suffix="\n: ")

    builtin = BUILTIN_DATASETS[int(selection) - 1]
    path = settings.dataset_path(builtin.key)
    if not path.is_file():
        _fail(FileNotFoundError(
            f"{builtin.title} file not found: {path}. "
            f"Set {ENV_PREFIX}DATA_DIR to a directory containing {builtin.filename}."
        ))
    try:
        result = Evaluator(strict=settings.strict).evaluate(path)
    except (GaussianBayesError, OSError) as e:
        _fail(e)

    click.echo(result.accuracy.summary())


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--test", "-t", "test_file", default=None,
              type=click.Path(exists=True, dir_okay=False, path_type=Path),
              help="Score on this dataset instead of the training data.")
@click.option("--strict", is_flag=True,
              help="Fail on classes with fewer than two training rows.")
@click.option("--detailed", "-d", is_flag=True, help="Show per-class metrics.")
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def evaluate(
    settings: Settings,
    file: Path,
    test_file: Path | None,
    strict: bool,
    detailed: bool,
    output: str,
) -> None:
    """Fit on a CSV dataset and report classification accuracy.

    Example: gaussian-bayes evaluate datasets/iris.csv
    """
    evaluator = Evaluator(strict=strict or settings.strict)

    try:
        result = evaluator.evaluate(file, test_file)
    except (GaussianBayesError, OSError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps(result.to_dict(), indent=2))
        return

    if detailed:
        _render_report(result)
    click.echo(result.accuracy.summary())


@main.command()
@click.argument("file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output", "-o", type=click.Choice(["rich", "json"]), default="rich",
              help="Output format.")
@click.pass_obj
def summarize(settings: Settings, file: Path, output: str) -> None:
    """Show the per-class feature means and standard deviations.

    Example: gaussian-bayes summarize datasets/iris.csv
    """
    try:
        dataset, summaries = Evaluator(strict=settings.strict).summarize(file)
    except (GaussianBayesError, OSError) as e:
        _fail(e)

    if output == "json":
        click.echo(json.dumps({
            "dataset": dataset.name,
            "features": dataset.feature_names,
            "classes": [
                {**s.to_dict(), "name": dataset.label_names[s.label]} for s in summaries
            ],
        }, indent=2))
    else:
        _render_summaries(dataset, summaries)


@main.command()
@click.pass_obj
def datasets(settings: Settings) -> None:
    """List the built-in datasets offered by ``menu``."""
    table = Table(title=f"Built-in datasets ({settings.resolved_data_dir})")
    table.add_column("#", justify="right", width=3)
    table.add_column("Key", style="cyan", no_wrap=True)
    table.add_column("Title")
    table.add_column("File")
    table.add_column("Found", justify="center", no_wrap=True)

    for i, builtin in enumerate(BUILTIN_DATASETS, 1):
        path = settings.dataset_path(builtin.key)
        found = "[green]yes[/]" if path.is_file() else "[red]no[/]"
        table.add_row(str(i), builtin.key, builtin.title, str(path), found)

    console.print(table)


# ------------------------------------------------------------------
# Rich rendering helpers
# ------------------------------------------------------------------

def _render_summaries(dataset: Dataset, summaries: list[ClassSummary]) -> None:
    """Render class summaries as one table per class."""
    console.print()
    for summary in summaries:
        name = escape(dataset.label_names[summary.label])
        table = Table(title=f"{name} ({summary.count} rows)", show_lines=False)
        table.add_column("Feature", style="cyan")
        table.add_column("Mean", justify="right")
        table.add_column("Stdev", justify="right")

        for i, (avg, std) in enumerate(zip(summary.means, summary.stdevs)):
            feature = dataset.feature_names[i] if i < len(dataset.feature_names) else f"x{i}"
            table.add_row(feature, _fmt(avg), _fmt(std))

        console.print(table)
        console.print()


def _render_report(result: EvaluationResult) -> None:
    """Render per-class precision, recall and F1."""
    report = result.report
    table = Table(title=f"{result.train_name} → {result.test_name}", show_lines=False)
    table.add_column("Class", style="cyan")
    table.add_column("Precision", justify="right")
    table.add_column("Recall", justify="right")
    table.add_column("F1", justify="right")
    table.add_column("Support", justify="right")

    for cls, m in report.per_class.items():
        table.add_row(
            escape(result.label_name(cls)),
            f"{m['precision']:.4f}",
            f"{m['recall']:.4f}",
            f"{m['f1']:.4f}",
            str(report.support.get(cls, 0)),
        )

    console.print(table)
    console.print(f"Macro F1: [bold]{report.macro_f1:.4f}[/]")
    console.print()


if __name__ == "__main__":
    main()
