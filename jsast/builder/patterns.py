# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Destructuring pattern builders.

`identifier`, `array`, `assignment` and `object_` are single-name
conveniences without type annotations. `array_of`, `object_of`,
`object_property` and `rest` build the general forms.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .. import ast as js


def identifier(name: str) -> js.IdentifierPattern:
	return js.IdentifierPattern(js.Identifier(name))


def array(name: str) -> js.ArrayPattern:
	"""`[name]`"""
	return js.ArrayPattern((identifier(name),))


def assignment(name: str, default: js.Expression) -> js.AssignmentPattern:
	"""`name = default`"""
	return js.AssignmentPattern(identifier(name), default)


def object_(name: str) -> js.ObjectPattern:
	"""`{ name }`"""
	return js.ObjectPattern((object_property(js.Identifier(name), identifier(name), shorthand=True),))


def array_of(
	elements: Sequence[Optional[Union[js.Pattern, js.RestElement]]],
	annot: Optional[js.TypeAnnotation] = None,
) -> js.ArrayPattern:
	return js.ArrayPattern(tuple(elements), annot=annot)


def object_of(
	properties: Sequence[Union[js.ObjectPatternProperty, js.RestElement]],
	annot: Optional[js.TypeAnnotation] = None,
) -> js.ObjectPattern:
	return js.ObjectPattern(tuple(properties), annot=annot)


def object_property(key: js.PropertyKey, pattern: js.Pattern, shorthand: bool = False) -> js.ObjectPatternProperty:
	return js.ObjectPatternProperty(key, pattern, shorthand=shorthand)


def rest(argument: js.Pattern) -> js.RestElement:
	return js.RestElement(argument)
