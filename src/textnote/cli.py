"""TextNote CLI - daily plain-text notes."""

import logging
import sys
from datetime import date

import click

from .config import load_config
from .core.errors import TextNoteError
from .workflows import delete_sections, get_store, new_template, open_note


def _parse_date(target_date: str | None) -> date:
    if not target_date:
        return date.today()
    try:
        return date.fromisoformat(target_date)
    except ValueError:
        raise click.BadParameter(f"expected YYYY-MM-DD, got {target_date!r}", param_hint="--date")


def _split_names(values: tuple[str, ...]) -> list[str]:
    """Flatten repeated and comma-separated section names."""
    names = []
    for value in values:
        names.extend(n.strip() for n in value.split(",") if n.strip())
    return names


def _fail(e: Exception) -> None:
    click.echo(f"Error: {e}", err=True)
    sys.exit(1)


date_option = click.option(
    "--date", "-d", "target_date", default=None,
    help="Note date (YYYY-MM-DD), defaults to today",
)


@click.group()
@click.version_option(package_name="textnote")
@click.option("--debug", is_flag=True, help="Enable debug logging")
def main(debug: bool):
    """TextNote - daily plain-text notes."""
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=logging.DEBUG if debug else logging.WARNING,
    )


@main.command("open")
@date_option
@click.option("--copy", "-c", "copy", multiple=True,
              help="Section names to copy from the previous day (repeat or comma-separate)")
@click.option("--delete", "-D", "delete", is_flag=True,
              help="Delete the previous day's sections after copy (no-op without --copy)")
def open_cmd(target_date: str | None, copy: tuple[str, ...], delete: bool):
    """Open a day's note in the editor, creating it if needed."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        open_note(config, target, copy=_split_names(copy), delete=delete)
    except (TextNoteError, ValueError) as e:
        _fail(e)


@main.command()
@date_option
def show(target_date: str | None):
    """Print a day's note."""
    config = load_config()
    target = _parse_date(target_date)
    store = get_store(config)
    try:
        template = new_template(config, target)
        if not store.exists(template):
            click.echo(f"Error: file [{store.path_for(template)}] for note does not exist", err=True)
            sys.exit(1)
        store.read(template)
    except (TextNoteError, ValueError) as e:
        _fail(e)
    click.echo(template.render(), nl=False)


@main.command("delete-section")
@click.argument("names", nargs=-1, required=True)
@date_option
def delete_section(names: tuple[str, ...], target_date: str | None):
    """Clear one or more sections of a day's note."""
    config = load_config()
    target = _parse_date(target_date)
    store = get_store(config)
    try:
        template = new_template(config, target)
        delete_sections(store, template, _split_names(names))
    except (TextNoteError, ValueError) as e:
        _fail(e)
    click.echo(f"Cleared {', '.join(_split_names(names))} in {store.path_for(template)}")


@main.command()
@date_option
def path(target_date: str | None):
    """Print the file path of a day's note."""
    config = load_config()
    target = _parse_date(target_date)
    try:
        template = new_template(config, target)
    except ValueError as e:
        _fail(e)
    click.echo(str(get_store(config).path_for(template)))


if __name__ == "__main__":
    main()
