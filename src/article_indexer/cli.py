"""CLI entry point for article-indexer."""

import locale
import sys

import click

from .config import load_config
from .exceptions import ConfigError
from .grouping import distinct_primary_tags, group_by_tag
from .scanner import build_catalog
from .writer import write_catalog


def _use_user_collation(verbose: bool) -> None:
    """Sort tag names with the user's collation rules instead of code points."""
    try:
        locale.setlocale(locale.LC_COLLATE, "")
    except locale.Error as e:
        if verbose:
            click.echo(f"Using default collation: {e}", err=True)


@click.command()
@click.option(
    "--root",
    type=click.Path(),
    default=None,
    help="Root folder of the article tree (default: ARTICLE_ROOT env var)",
)
@click.option(
    "--output-dir",
    type=click.Path(),
    default=None,
    help="Where metadata JSON and README.md are written "
    "(default: ARTICLE_OUTPUT_DIR env var, or the parent of the root)",
)
@click.option(
    "--intro",
    type=click.Path(),
    default=None,
    help="Static introduction prepended to README.md (default: <output-dir>/intro.md)",
)
@click.option(
    "--raw-base-url",
    type=str,
    default=None,
    help="Base URL for raw document links (default: ARTICLE_RAW_BASE_URL env var)",
)
@click.option(
    "--dry-run",
    is_flag=True,
    default=False,
    help="Scan and report without writing any files",
)
@click.option(
    "--verbose", "-v",
    is_flag=True,
    default=False,
    help="Enable verbose output",
)
def main(root, output_dir, intro, raw_base_url, dry_run, verbose):
    """Index the article tree and regenerate the metadata files and README.

    Example: ARTICLE_ROOT=../articles article-indexer
    """
    try:
        config = load_config(
            article_root=root,
            output_dir=output_dir,
            intro_path=intro,
            raw_base_url=raw_base_url,
            verbose=verbose,
        )
    except ConfigError as e:
        click.echo(f"Configuration error: {e}", err=True)
        sys.exit(2)

    if verbose:
        click.echo(f"Article root: {config.article_root}")
        click.echo(f"Output dir: {config.resolved_output_dir}")

    _use_user_collation(verbose)

    try:
        catalog = build_catalog(config)
    except OSError as e:
        click.echo(f"Failed to read articles: {e}", err=True)
        sys.exit(1)

    groups = group_by_tag(catalog.articles)

    if verbose:
        click.echo(f"Tags: {', '.join(distinct_primary_tags(catalog.articles)) or '-'}")
        for slug in catalog.slugs:
            click.echo(f"  /{slug}")

    summary = (
        f"{len(catalog.articles)} article(s), {len(catalog.series)} series, "
        f"{len(groups)} tag group(s)"
    )

    if dry_run:
        click.echo(f"Dry run: found {summary}")
        sys.exit(0)

    try:
        paths = write_catalog(catalog, config)
    except OSError as e:
        click.echo(f"Failed to write files: {e}", err=True)
        sys.exit(1)

    for path in paths:
        click.echo(f"Wrote {path}")
    if catalog.skipped:
        click.echo(f"Skipped {len(catalog.skipped)} unreadable file(s)", err=True)
    click.echo(f"Done! Indexed {summary}")
