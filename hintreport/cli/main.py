"""Command-line interface for the hint report aggregator."""

import logging
from pathlib import Path
from typing import List, Optional, Tuple

import click
import yaml
from rich.console import Console
from rich.logging import RichHandler

from .. import __version__
from ..core.analysis import AnalysisAggregate, AnalysisOptions, format_scan_time
from ..core.category import STATUS_PASS
from ..core.i18n import available_languages
from ..core.problem import Problem
from ..reporters.json_reporter import JSONReporter

console = Console(stderr=True)


def load_problems(path: str) -> List[Problem]:
    """Load problems from a JSON or YAML file.

    The file holds either a list of problems or a mapping with a
    ``problems`` list.

    Args:
        path: File to read

    Returns:
        Parsed problems, in file order

    Raises:
        click.ClickException: If the file cannot be parsed
    """
    try:
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise click.ClickException(f"Could not parse {path}: {e}")

    if isinstance(data, dict):
        data = data.get("problems", [])
    if data is None:
        data = []
    if not isinstance(data, list):
        raise click.ClickException(f"Expected a list of problems in {path}")

    problems = []
    for index, entry in enumerate(data):
        try:
            problems.append(Problem.from_dict(entry))
        except (KeyError, ValueError, TypeError, AttributeError) as e:
            raise click.ClickException(f"Invalid problem #{index} in {path}: {e}")

    return problems


def validate_language(ctx: click.Context, param: click.Parameter, value: Optional[str]) -> Optional[str]:
    """Accept language tags whose primary subtag has a catalog."""
    if value is None:
        return value

    languages = available_languages()
    primary = value.lower().replace("_", "-").split("-")[0]
    if primary not in languages:
        raise click.BadParameter(
            f"'{value}' has no catalog (available: {', '.join(languages)})"
        )
    return value


def parse_pass_rule(value: str) -> Tuple[str, str]:
    """Split a ``CATEGORY:RULE`` option value."""
    category, sep, rule = value.partition(":")
    if not sep or not category or not rule:
        raise click.BadParameter(
            f"'{value}' is not in CATEGORY:RULE form", param_hint="--pass-rule"
        )
    return category, rule


def build_result(
    problems: List[Problem],
    url: str,
    options: AnalysisOptions,
    language: Optional[str] = None,
    categories: Tuple[str, ...] = (),
    pass_rules: Tuple[str, ...] = (),
    exclude_categories: Tuple[str, ...] = (),
) -> AnalysisAggregate:
    """Aggregate problems into an analysis result.

    Categories and passed rules are registered before the problems are added;
    excluded categories are removed afterwards.
    """
    result = AnalysisAggregate(url, options)

    for name in categories:
        result.add_category(name, language)

    for value in pass_rules:
        category_name, rule_name = parse_pass_rule(value)
        category, _ = result.find_or_create_category(category_name, language)
        category.add_rule(rule_name, STATUS_PASS)

    result.add_problems(problems, language)

    for name in exclude_categories:
        result.remove_category(name)

    return result


@click.group()
@click.version_option(version=__version__, prog_name="hintreport")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx: click.Context, verbose: bool):
    """Hint Report - Aggregate analysis problems into a category/rule report."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose

    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(message)s",
            handlers=[RichHandler(console=console, show_path=False)],
        )


@cli.command("aggregate")
@click.argument("problems_file", type=click.Path(exists=True, dir_okay=False))
@click.option("--url", "-u", default="", help="URL that was analyzed")
@click.option("--status", default="finished", help="Status of the analysis run")
@click.option("--scan-time", type=click.IntRange(min=0), default=0,
              help="Duration of the analysis in milliseconds")
@click.option("--date", help="When the analysis started")
@click.option("--tool-version", help="Version of the analysis tool")
@click.option("--scanner/--local", "is_scanner", default=False,
              help="Keep root-relative asset paths (online scanner)")
@click.option("--language", "-l", callback=validate_language,
              help="Language for category names")
@click.option("--category", "-c", "categories", multiple=True,
              help="Category to include even without problems")
@click.option("--pass-rule", "pass_rules", multiple=True,
              help="Passed rule as CATEGORY:RULE")
@click.option("--exclude-category", "-x", "exclude_categories", multiple=True,
              help="Category to remove from the report")
@click.option("--no-problems", is_flag=True, help="Only keep counts for each rule")
@click.option("--compact", is_flag=True, help="Write JSON without indentation")
@click.option("--output", "-o", type=click.Path(dir_okay=False),
              help="File to write the report to (default: stdout)")
@click.option("--quiet", "-q", is_flag=True, help="Do not print the summary")
def aggregate(
    problems_file: str,
    url: str,
    status: str,
    scan_time: int,
    date: Optional[str],
    tool_version: Optional[str],
    is_scanner: bool,
    language: Optional[str],
    categories: tuple,
    pass_rules: tuple,
    exclude_categories: tuple,
    no_problems: bool,
    compact: bool,
    output: Optional[str],
    quiet: bool,
):
    """Aggregate the problems in PROBLEMS_FILE (JSON or YAML)."""
    problems = load_problems(problems_file)

    options = AnalysisOptions(
        status=status,
        scan_time=scan_time,
        date=date,
        version=tool_version,
        is_scanner=is_scanner,
    )
    result = build_result(
        problems,
        url,
        options,
        language=language,
        categories=categories,
        pass_rules=pass_rules,
        exclude_categories=exclude_categories,
    )

    reporter = JSONReporter(
        output_dir=str(Path(output).parent) if output else None,
        indent=None if compact else 2,
        include_problems=not no_problems,
    )

    if output:
        path = reporter.save(result, filename=Path(output).name)
        if not quiet:
            console.print(f"Report written to [cyan]{path}[/cyan]")
    else:
        click.echo(reporter.generate(result).decode("utf-8"))

    if not quiet:
        _print_summary(result, len(problems))


def _print_summary(result: AnalysisAggregate, problem_count: int) -> None:
    color = "red" if result.finding_count else "green"
    console.print(
        f"[{color}]{result.finding_count} findings[/{color}] from "
        f"{problem_count} problems in {len(result.categories)} categories "
        f"(scan time {result.elapsed_display})"
    )


@cli.command("scan-time")
@click.argument("milliseconds", type=click.IntRange(min=0))
def scan_time(milliseconds: int):
    """Print MILLISECONDS formatted as [hh:]mm:ss."""
    click.echo(format_scan_time(milliseconds))


def main():
    """Entry point for the CLI."""
    cli(obj={})


if __name__ == "__main__":
    main()
