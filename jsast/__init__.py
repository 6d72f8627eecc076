# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
jsast: immutable syntax trees for JavaScript with Flow-style annotations.

  ast:      node dataclasses and operator enums
  builder:  smart constructors plus the parse entry points
  parser:   lark-based parser producing the same node shapes
"""

from .errors import MalformedNodeError, MultipleStatementsError, ParseError
from .parser import DEFAULT_PARSE_OPTIONS, ParseOptions, ParserEntry
from .builder.program import (
	ast_of_string,
	expression_of_string,
	mk_program,
	program_of_string,
	statement_of_string,
)

__all__ = [
	"MalformedNodeError",
	"MultipleStatementsError",
	"ParseError",
	"DEFAULT_PARSE_OPTIONS",
	"ParseOptions",
	"ParserEntry",
	"ast_of_string",
	"expression_of_string",
	"mk_program",
	"program_of_string",
	"statement_of_string",
]
