import logging

import click

from .fuzz import SCORERS
from .pipeline import build_scorer, run_pipeline


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging")
def main(verbose):
    """
    Fuzzy string similarity scores (CLI)
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )


@main.command()
@click.argument("s1")
@click.argument("s2")
@click.option("--scorer", "scorer_name", default="all", show_default=True,
              help="Scorer name, or 'all' for every scorer")
@click.option("--force-ascii/--no-force-ascii", default=True, show_default=True)
@click.option("--full-process/--no-full-process", default=True, show_default=True)
def score(s1, s2, scorer_name, force_ascii, full_process):
    """Score S1 against S2."""
    names = sorted(SCORERS) if scorer_name == "all" else [scorer_name]
    try:
        for name in names:
            scorer = build_scorer({"scorer": name, "force_ascii": force_ascii,
                                   "full_process": full_process})
            click.echo(f"{name}: {scorer(s1, s2)}")
    except ValueError as e:
        raise click.ClickException(str(e))


@main.command()
@click.option("--input", "input_csv", required=True, help="Path to CSV of queries")
@click.option("--output", "output_csv", required=True, help="Path to output CSV")
@click.option("--choices", "choices_path", required=True, help="Path to choices (CSV or one per line)")
@click.option("--config", "config_path", default=None, help="Optional YAML config path")
def match(input_csv, output_csv, choices_path, config_path):
    """Match every query in a CSV against a list of choices."""
    try:
        df, review_path = run_pipeline(
            input_csv=input_csv,
            output_csv=output_csv,
            choices_path=choices_path,
            config_path=config_path
        )
    except (ValueError, FileNotFoundError) as e:
        raise click.ClickException(str(e))
    click.echo(f"Saved {len(df)} matched rows to: {output_csv}")
    if review_path:
        click.echo(f"Saved review queue to: {review_path}")


if __name__ == "__main__":
    main()
