# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Statement builders.

Loop helpers follow the two shapes a `for-in`/`for-of` head can take: a fresh
declaration (`for_in_declarator`, `for_of_declarator`) or an existing pattern
(`for_in_pattern`, `for_of_pattern`).
"""

from __future__ import annotations

from typing import Optional, Sequence, Union

from .. import ast as js
from . import classes, functions, literals, patterns

LoopLeft = Union[js.VariableDeclaration, js.Pattern]


def empty() -> js.EmptyStatement:
	return js.EmptyStatement()


def block(children: Sequence[js.Statement]) -> js.BlockStatement:
	return js.BlockStatement(tuple(children))


def while_(test: js.Expression, body: js.Statement) -> js.WhileStatement:
	return js.WhileStatement(test, body)


def do_while(body: js.Statement, test: js.Expression) -> js.DoWhileStatement:
	return js.DoWhileStatement(body, test)


def for_(
	init: js.Expression,
	test: Optional[js.Expression],
	update: Optional[js.Expression],
	body: js.Statement,
) -> js.ForStatement:
	"""`for (init; test; update) body` with an expression initializer."""
	return js.ForStatement(init=init, test=test, update=update, body=body)


def for_in(left: LoopLeft, right: js.Expression, body: js.Statement, each: bool = False) -> js.ForInStatement:
	return js.ForInStatement(left, right, body, each=each)


def for_in_declarator(
	declarations: Sequence[js.VariableDeclarator],
	kind: js.VariableKind = js.VariableKind.VAR,
) -> js.VariableDeclaration:
	return js.VariableDeclaration(tuple(declarations), kind=kind)


def for_in_pattern(patt: js.Pattern) -> js.Pattern:
	return patt


def for_of(left: LoopLeft, right: js.Expression, body: js.Statement, is_async: bool = False) -> js.ForOfStatement:
	return js.ForOfStatement(left, right, body, is_async=is_async)


for_of_declarator = for_in_declarator
for_of_pattern = for_in_pattern


def expression(
	expr: js.Expression,
	*,
	loc: js.Located = js.LOC_NONE,
	directive: Optional[str] = None,
) -> js.ExpressionStatement:
	return js.ExpressionStatement(expr, directive=directive, loc=loc)


def labeled(label: js.Identifier, body: js.Statement) -> js.LabeledStatement:
	return js.LabeledStatement(label, body)


def variable_declarator_generic(id: js.Pattern, init: Optional[js.Expression]) -> js.VariableDeclarator:
	return js.VariableDeclarator(id, init)


def variable_declarator(name: str, init: Optional[js.Expression] = None) -> js.VariableDeclarator:
	return js.VariableDeclarator(patterns.identifier(name), init)


def variable_declaration(
	declarations: Sequence[js.VariableDeclarator],
	kind: js.VariableKind = js.VariableKind.VAR,
) -> js.VariableDeclaration:
	return js.VariableDeclaration(tuple(declarations), kind=kind)


def function_declaration(
	id: js.Identifier,
	*,
	loc: js.Located = js.LOC_NONE,
	params: Sequence[js.Pattern] = (),
	body: Optional[Sequence[js.Statement]] = None,
) -> js.FunctionDeclaration:
	"""`function id(params) { body }`; `body` is a list of statements."""
	block_body = functions.body_block(body) if body is not None else None
	fn = functions.make(id, False, params, body=block_body)
	return js.FunctionDeclaration(fn, loc=loc)


def class_declaration(
	elements: Sequence[js.ClassElement],
	*,
	super_: Optional[js.Expression] = None,
	implements: Sequence[js.ClassImplements] = (),
	id: Optional[js.Identifier] = None,
) -> js.ClassDeclaration:
	return js.ClassDeclaration(classes.make(elements, super_=super_, implements=implements, id=id))


def if_(
	test: js.Expression,
	consequent: js.Statement,
	alternate: Optional[js.Statement] = None,
) -> js.IfStatement:
	return js.IfStatement(test, consequent, alternate)


def return_(expr: Optional[js.Expression] = None) -> js.ReturnStatement:
	return js.ReturnStatement(expr)


def directive(txt: str) -> js.ExpressionStatement:
	"""A directive prologue entry such as `"use strict";`."""
	return expression(literals.string(txt), directive=txt)


def break_(label: Optional[js.Identifier] = None) -> js.BreakStatement:
	return js.BreakStatement(label)


def continue_(label: Optional[js.Identifier] = None) -> js.ContinueStatement:
	return js.ContinueStatement(label)


def throw(argument: js.Expression) -> js.ThrowStatement:
	return js.ThrowStatement(argument)


def catch_clause(body: Sequence[js.Statement], param: Optional[js.Pattern] = None) -> js.CatchClause:
	return js.CatchClause(block(body), param)


def try_(
	body: Sequence[js.Statement],
	*,
	handler: Optional[js.CatchClause] = None,
	finalizer: Optional[Sequence[js.Statement]] = None,
) -> js.TryStatement:
	return js.TryStatement(
		block(body),
		handler=handler,
		finalizer=block(finalizer) if finalizer is not None else None,
	)
