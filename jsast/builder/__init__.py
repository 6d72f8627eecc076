# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Smart constructors for jsast nodes, one module per node family.

Every builder fills `loc` with `LOC_NONE` and picks the defaults documented on
it; callers needing other shapes construct the `jsast.ast` classes directly.
"""

__all__ = [
	"classes",
	"comments",
	"expressions",
	"functions",
	"jsx",
	"literals",
	"patterns",
	"program",
	"statements",
	"types",
]
