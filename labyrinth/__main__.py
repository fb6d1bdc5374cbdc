#!/usr/bin/env python3
"""
Labyrinth console
Plays the labyrinth minigame in a terminal.
"""
import sys
import logging
from pathlib import Path
from datetime import datetime

import click

from labyrinth import config


def setup_logging(debug: bool = False, logs_dir: Path | None = None) -> Path:
    """Configure logging to a session file and to stderr.

    Returns:
        Path to the log file
    """
    logs_dir = logs_dir or config.get_logs_dir()
    logs_dir.mkdir(parents=True, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    log_file = logs_dir / f"labyrinth_{timestamp}.log"

    # File handler - always verbose
    file_handler = logging.FileHandler(log_file, encoding='utf-8')
    file_handler.setLevel(logging.DEBUG)
    file_formatter = logging.Formatter(
        '%(asctime)s | %(levelname)-8s | %(name)s | %(message)s',
        datefmt='%H:%M:%S'
    )
    file_handler.setFormatter(file_formatter)

    # Console handler - keep the game output readable
    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(logging.DEBUG if debug else logging.ERROR)
    console_formatter = logging.Formatter('%(levelname)s: %(message)s')
    console_handler.setFormatter(console_formatter)

    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.addHandler(file_handler)
    root_logger.addHandler(console_handler)

    return log_file


def print_validation(catalog_id: str, catalogs_dir: str | None) -> bool:
    """Validate a catalog and print the findings"""
    from labyrinth.engine.validator import validate_catalog

    result = validate_catalog(catalog_id, catalogs_dir)

    click.echo(f"\n{'='*60}")
    click.echo(f"Catalog Validation: {catalog_id}")
    click.echo(f"{'='*60}\n")

    if result.errors:
        click.echo(f"ERRORS ({len(result.errors)}):")
        for error in result.errors:
            click.echo(f"  - {error}")
        click.echo()

    if result.warnings:
        click.echo(f"WARNINGS ({len(result.warnings)}):")
        for warning in result.warnings:
            click.echo(f"  - {warning}")
        click.echo()

    if result.is_valid:
        click.echo("Catalog is valid!")
    else:
        click.echo(f"Catalog has {len(result.errors)} error(s)")

    return result.is_valid


@click.command()
@click.option('--catalog', 'catalog_id', default=None, help='Room catalog to play')
@click.option('--catalogs-dir', type=click.Path(exists=True, file_okay=False),
              default=None, help='Path to catalogs directory')
@click.option('--seed', type=int, default=None, help='Seed for room generation')
@click.option('--debug', is_flag=True, help='Enable debug mode')
@click.option('--validate', is_flag=True, help='Validate the catalog and exit')
def main(catalog_id: str | None, catalogs_dir: str | None, seed: int | None,
         debug: bool, validate: bool):
    """Play the Labyrinth minigame."""
    catalog_id = catalog_id or config.get_catalog_id()

    if validate:
        try:
            is_valid = print_validation(catalog_id, catalogs_dir)
        except FileNotFoundError as e:
            click.echo(f"Error: {e}")
            sys.exit(1)
        sys.exit(0 if is_valid else 1)

    log_file = setup_logging(debug=debug)

    logger = logging.getLogger(__name__)
    logger.info("=" * 60)
    logger.info("Labyrinth starting")
    logger.info(f"Catalog: {catalog_id}")
    logger.info(f"Log file: {log_file}")
    logger.info("=" * 60)

    from labyrinth.engine.catalog import CatalogLoader, RandomRoomCatalog
    from labyrinth.engine.session import LabyrinthSession

    try:
        catalog_data = CatalogLoader(catalogs_dir).load_catalog(catalog_id)
    except (FileNotFoundError, ValueError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if seed is None:
        seed = config.get_seed()
    session = LabyrinthSession(
        RandomRoomCatalog(catalog_data, seed=seed),
        tutorial=catalog_data.catalog.tutorial,
    )

    try:
        for line in session.start():
            click.echo(line)

        while session.is_active:
            try:
                raw_command = input()
            except EOFError:
                break
            for line in session.process(raw_command):
                click.echo(line)
    except Exception as e:
        logger.exception(f"Fatal error: {e}")
        raise
    finally:
        logger.info("Labyrinth shutdown")


if __name__ == "__main__":
    main()
