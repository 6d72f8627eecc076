# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Class shape and class member builders."""

from __future__ import annotations

from typing import Optional, Sequence

from .. import ast as js
from ..errors import MalformedNodeError


def implements(id: js.Identifier, targs: Optional[js.TypeArgs] = None) -> js.ClassImplements:
	return js.ClassImplements(id, targs)


def make(
	elements: Sequence[js.ClassElement],
	*,
	super_: Optional[js.Expression] = None,
	implements: Sequence[js.ClassImplements] = (),
	id: Optional[js.Identifier] = None,
	decorators: Sequence[js.Decorator] = (),
) -> js.Class:
	"""
	Build a `Class` whose body holds `elements` in the order given.

	The superclass, when present, carries no type arguments.
	"""
	extends = js.ClassExtends(super_) if super_ is not None else None
	return js.Class(
		body=js.ClassBody(tuple(elements)),
		id=id,
		extends=extends,
		implements=tuple(implements),
		decorators=tuple(decorators),
	)


def method(
	key: js.PropertyKey,
	function: js.Function,
	*,
	kind: str = "method",
	static: bool = False,
) -> js.ClassMethod:
	if kind not in ("constructor", "method", "get", "set"):
		raise MalformedNodeError(f"unknown class method kind: {kind!r}")
	return js.ClassMethod(key=key, value=function, kind=kind, static=static)


def property_(
	key: js.PropertyKey,
	value: Optional[js.Expression] = None,
	*,
	annot: Optional[js.TypeAnnotation] = None,
	static: bool = False,
) -> js.ClassProperty:
	return js.ClassProperty(key=key, value=value, annot=annot, static=static)


def decorator(expr: js.Expression) -> js.Decorator:
	return js.Decorator(expr)
