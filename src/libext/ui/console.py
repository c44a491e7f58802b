"""Terminal presentation helpers with optional Rich support.

Rich is imported lazily inside each helper so that the core and infra
layers stay importable without it.  A helper that actually needs Rich
raises :class:`~libext.exceptions.EnvironmentError` when it is missing.
"""

from __future__ import annotations

from typing import Any

from libext.core.hashmap import HashMap
from libext.core.models import Colour
from libext.core.scalars import to_padded_string
from libext.exceptions import EnvironmentError, missing_dependency_hint


def _load_rich_console_class() -> type[Any]:
	"""Return ``rich.console.Console`` class or raise ``EnvironmentError``."""
	try:
		from rich.console import Console
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed.",
			hint=missing_dependency_hint("rich"),
		) from exc
	return Console


def _import_rich_table() -> type[Any]:
	"""Import rich table lazily for map rendering."""
	try:
		from rich.table import Table
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed.",
			hint=missing_dependency_hint("rich"),
		) from exc
	return Table


def _import_rich_text() -> type[Any]:
	"""Import rich text lazily for colour swatches."""
	try:
		from rich.text import Text
	except ModuleNotFoundError as exc:
		raise EnvironmentError(
			"rich is not installed.",
			hint=missing_dependency_hint("rich"),
		) from exc
	return Text


def get_rich_console() -> Any:
	"""Create a Rich console instance targeting stderr."""
	console_class = _load_rich_console_class()
	return console_class(stderr=True)


# ---------------------------------------------------------------------------
# Renderables
# ---------------------------------------------------------------------------

def _contrast_style(colour: Colour) -> str:
	"""Pick black or white text for legibility on *colour*."""
	luminance = 0.299 * colour.r + 0.587 * colour.g + 0.114 * colour.b
	return "black" if luminance > 127 else "white"


def colour_swatch(colour: Colour) -> Any:
	"""Return a Rich ``Text`` showing the hex code on its own colour."""
	text_class = _import_rich_text()
	code = colour.to_hex()
	return text_class(f" {code} ", style=f"{_contrast_style(colour)} on {code.lower()}")


def hashmap_table(mapping: HashMap[Any], *, title: str = "Entries") -> Any:
	"""Build a Rich table with one row per entry, ordered by key.

	The row-number column is zero-padded to the width of the largest
	row number so the column stays aligned.
	"""
	table_class = _import_rich_table()

	table = table_class(
		title=title,
		show_header=True,
		header_style="bold magenta",
		border_style="dim",
	)
	table.add_column("#", justify="right", style="dim")
	table.add_column("Key", justify="left", style="bold")
	table.add_column("Value", justify="left")

	rows = sorted(mapping.to_list(lambda key, value: (key, value)), key=lambda row: row[0])
	width = len(str(len(rows)))
	for index, (key, value) in enumerate(rows, start=1):
		table.add_row(to_padded_string(index, width), key, repr(value))
	return table


def print_hashmap(mapping: HashMap[Any], *, title: str = "Entries", console: Any = None) -> None:
	"""Render :func:`hashmap_table` to *console* (stderr by default)."""
	table = hashmap_table(mapping, title=title)
	target = console if console is not None else get_rich_console()
	target.print(table)
