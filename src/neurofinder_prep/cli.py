from __future__ import annotations
import logging, os

import click
import polars as pl

from .config import PrepareConfig, resolve_datasets
from .core.constants import DEFAULT_MAX_FRAMES, ENV_LOG_LEVEL


def _setup_logging() -> None:
    level = os.environ.get(ENV_LOG_LEVEL, "INFO").upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def _print_table(df: pl.DataFrame) -> None:
    with pl.Config(tbl_rows=-1, tbl_cols=-1, fmt_str_lengths=80):
        click.echo(str(df))


@click.group()
def cli():
    """Neurofinder dataset preparation CLI"""
    _setup_logging()


@cli.command()
@click.argument("dataset_ids", nargs=-1)
@click.option("--frames", "max_frames", type=click.IntRange(min=0), default=DEFAULT_MAX_FRAMES,
              show_default=True, help="Max sample frames copied per dataset")
@click.option("--all-frames", is_flag=True, default=False,
              help="Copy every frame (overrides --frames)")
def prepare(dataset_ids, max_frames, all_frames):
    """Download, extract, catalogue and publish datasets (default: the full catalog)."""
    from .steps.pipeline import prepare_datasets
    from .steps.inventory import results_frame

    config = PrepareConfig.from_env(
        max_frames=None if all_frames else max_frames,
        show_progress=True,
    )
    ids = resolve_datasets(dataset_ids, config)
    cap = "all" if config.max_frames is None else config.max_frames
    click.echo(f"[neurofinder-prep prepare] {len(ids)} dataset(s) -> {config.datasets_dir} (frames: {cap})")

    results = prepare_datasets(ids, config)
    _print_table(results_frame(results))
    click.echo("[neurofinder-prep prepare] done")


@cli.command()
@click.argument("dataset_ids", nargs=-1)
def status(dataset_ids):
    """Show what is already on disk for each dataset (no downloads)."""
    from .steps.inventory import dataset_status
    from .io.fs_local import LocalFS

    config = PrepareConfig.from_env()
    fs = LocalFS(config.datasets_dir, config.publish_root)
    _print_table(dataset_status(resolve_datasets(dataset_ids, config), fs))


if __name__ == "__main__":
    cli()
