# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parser collaborator for the builder's parse entry points.

Text goes through the lark grammar in `grammar.lark` and comes back as jsast
nodes plus a tuple of `Diagnostic`s for syntax that the given `ParseOptions`
do not enable.
"""

from __future__ import annotations

from typing import Tuple

from .diagnostics import Diagnostic
from .options import DEFAULT_PARSE_OPTIONS, ParseOptions, ParserEntry
from . import parser as _parser


def do_parse(options: ParseOptions, entry: ParserEntry, text: str) -> Tuple[object, Tuple[Diagnostic, ...]]:
	"""
	Parse `text` starting at `entry`.

	Returns `(tree, diagnostics)`: an `Expression` for `ParserEntry.EXPRESSION`,
	a tuple of statements for `ParserEntry.MODULE_BODY`.
	"""
	return _parser.parse(options, entry, text)


__all__ = ["do_parse", "Diagnostic", "ParseOptions", "ParserEntry", "DEFAULT_PARSE_OPTIONS"]
