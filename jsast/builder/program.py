# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Program assembly and the parse entry points.

Every entry point takes the parser's `ParseOptions` as a parameter defaulting
to `DEFAULT_PARSE_OPTIONS`. Diagnostics the parser returns next to the tree
are dropped here; call `jsast.parser.do_parse` to see them.
"""

from __future__ import annotations

import logging
from typing import Sequence

from .. import ast as js
from ..errors import MultipleStatementsError
from ..parser import DEFAULT_PARSE_OPTIONS, ParseOptions, ParserEntry, do_parse

logger = logging.getLogger(__name__)


def mk_program(stmts: Sequence[js.Statement], *, comments: Sequence[js.Comment] = ()) -> js.Program:
	return js.Program(tuple(stmts), tuple(comments))


def ast_of_string(entry: ParserEntry, text: str, options: ParseOptions = DEFAULT_PARSE_OPTIONS):
	tree, diagnostics = do_parse(options, entry, text)
	if diagnostics:
		logger.debug("dropping %d parser diagnostic(s)", len(diagnostics))
	return tree


def expression_of_string(text: str, options: ParseOptions = DEFAULT_PARSE_OPTIONS) -> js.Expression:
	return ast_of_string(ParserEntry.EXPRESSION, text, options)


def statement_of_string(text: str, options: ParseOptions = DEFAULT_PARSE_OPTIONS) -> js.Statement:
	"""Parse exactly one top-level statement; anything else raises `MultipleStatementsError`."""
	statements = ast_of_string(ParserEntry.MODULE_BODY, text, options)
	if len(statements) != 1:
		raise MultipleStatementsError(len(statements))
	return statements[0]


def program_of_string(text: str, options: ParseOptions = DEFAULT_PARSE_OPTIONS) -> js.Program:
	return mk_program(ast_of_string(ParserEntry.MODULE_BODY, text, options))
