# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Type annotation builders."""

from __future__ import annotations

from typing import Optional, Sequence

from .. import ast as js


def mixed() -> js.KeywordType:
	return js.KeywordType("mixed")


def keyword(name: str) -> js.KeywordType:
	return js.KeywordType(name)


def annotation(t: js.Type) -> js.TypeAnnotation:
	return js.TypeAnnotation(t)


def generic(name: str, targs: Optional[Sequence[js.Type]] = None) -> js.GenericType:
	"""`Name` or `Name<targs...>`."""
	return js.GenericType(
		js.Identifier(name),
		js.TypeArgs(tuple(targs)) if targs is not None else None,
	)


def nullable(t: js.Type) -> js.NullableType:
	return js.NullableType(t)


def union(*ts: js.Type) -> js.UnionType:
	return js.UnionType(tuple(ts))
