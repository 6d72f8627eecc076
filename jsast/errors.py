# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Error kinds raised by jsast.

Grammar-level failures from lark (`lark.UnexpectedInput` and subclasses) are
not wrapped: they propagate to the caller unchanged. The classes below cover
what lark cannot see.
"""

from __future__ import annotations


class MalformedNodeError(ValueError):
	"""
	A node was constructed with fields that violate a cross-field invariant
	(mismatched JSX tags, inconsistent shorthand property, ...).
	"""


class ParseError(ValueError):
	"""
	Source text was accepted by the grammar but rejected while building the
	tree (e.g. an arrow parameter list that is not a valid pattern).
	"""


class MultipleStatementsError(ParseError):
	"""`statement_of_string` received text that is not exactly one statement."""

	def __init__(self, count: int) -> None:
		super().__init__("Multiple statements found" if count > 1 else "No statement found")
		self.count = count
