# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
JSX builders.

`element` derives the closing tag from the opening tag name, so elements
built here always have a matching (or absent, when self-closing) closing tag.
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .. import ast as js

JSXAttributeValue = Union[js.Literal, js.JSXExpressionContainer, js.JSXElement]


def identifier(name: str) -> js.JSXIdentifier:
	return js.JSXIdentifier(name)


def attr_identifier(name: str) -> js.JSXIdentifier:
	return js.JSXIdentifier(name)


def attr_literal(lit: js.Literal) -> js.Literal:
	return lit


def attr(name: js.JSXIdentifier, value: Optional[JSXAttributeValue] = None) -> js.JSXAttribute:
	return js.JSXAttribute(name, value)


def element(
	name: js.JSXName,
	*,
	self_closing: bool = False,
	attrs: Sequence[Union[js.JSXAttribute, js.JSXSpreadAttribute]] = (),
	children: Sequence[js.JSXChild] = (),
) -> js.JSXElement:
	return js.JSXElement(
		opening=js.JSXOpeningElement(name, self_closing=self_closing, attributes=tuple(attrs)),
		closing=None if self_closing else js.JSXClosingElement(name),
		children=tuple(children),
	)


def child_element(
	name: js.JSXName,
	*,
	loc: js.Located = js.LOC_NONE,
	self_closing: bool = False,
	attrs: Sequence[Union[js.JSXAttribute, js.JSXSpreadAttribute]] = (),
	children: Sequence[js.JSXChild] = (),
) -> js.JSXElement:
	"""An `element` placed as the child of another element."""
	built = element(name, self_closing=self_closing, attrs=attrs, children=children)
	if loc is js.LOC_NONE:
		return built
	return js.JSXElement(built.opening, built.closing, built.children, loc=loc)


def text(s: str) -> js.JSXText:
	return js.JSXText(s, s)


def expression_container(expr: js.Expression) -> js.JSXExpressionContainer:
	return js.JSXExpressionContainer(expr)
