# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Builders for the function shape shared by declarations, expressions, arrows and methods."""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .. import ast as js


def body_block(stmts: Sequence[js.Statement]) -> js.BlockStatement:
	return js.BlockStatement(tuple(stmts))


def body_expression(expr: js.Expression) -> js.Expression:
	return expr


def make(
	id: Optional[js.Identifier],
	expression: bool,
	params: Sequence[js.Pattern],
	*,
	generator: bool = False,
	is_async: bool = False,
	body: Optional[Union[js.BlockStatement, js.Expression]] = None,
	rest: Optional[js.RestElement] = None,
	return_type: Optional[js.TypeAnnotation] = None,
	tparams: Optional[js.TypeParameters] = None,
) -> js.Function:
	"""
	Build a `Function`. The default body is an empty block.

	`expression` must agree with the body: True for an expression body, False
	for a block. A mismatch raises `MalformedNodeError`.
	"""
	if body is None:
		body = body_block(())
	return js.Function(
		id=id,
		params=js.FunctionParams(tuple(params), rest),
		body=body,
		is_async=is_async,
		is_generator=generator,
		expression=expression,
		return_type=return_type,
		tparams=tparams,
	)
