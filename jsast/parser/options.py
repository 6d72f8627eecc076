# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parser configuration.

`ParseOptions` is the record of syntax-extension toggles handed to the parser
with every call. A disabled extension is still parsed, but each use of it is
reported as a diagnostic next to the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ParserEntry(Enum):
	"""Which grammar start symbol a parse begins at."""

	EXPRESSION = "expression_entry"
	MODULE_BODY = "module_body"


@dataclass(frozen=True)
class ParseOptions:
	class_instance_fields: bool = True
	class_static_fields: bool = True
	decorators: bool = True
	export_star_as: bool = True
	optional_chaining: bool = True
	nullish_coalescing: bool = True
	types: bool = True
	# Strict mode from the start; otherwise only a "use strict" directive enables it.
	use_strict: bool = False


DEFAULT_PARSE_OPTIONS = ParseOptions()
