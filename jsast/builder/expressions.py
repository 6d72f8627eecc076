# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Expression builders.

Optional chains are built link by link: `optional_member_expression` and
`optional_call` take an explicit `optional` flag, which should be True only for
the link written with `?.`. Later links of the same chain are built with
`optional=False`.
"""

from __future__ import annotations

from dataclasses import replace
from typing import Optional, Sequence, Union

from .. import ast as js
from . import classes, functions, literals, types

ObjectMember = Union[js.ObjectProperty, js.ObjectMethod, js.SpreadElement]


def identifier(name: str) -> js.Identifier:
	return js.Identifier(name)


def this() -> js.ThisExpression:
	return js.ThisExpression()


def call_node(
	callee: js.Expression,
	*,
	targs: Optional[js.TypeArgs] = None,
	args: Sequence[js.Argument] = (),
) -> js.CallExpression:
	return js.CallExpression(callee, tuple(args), targs)


def call(callee: js.Expression, *, args: Sequence[js.Argument] = ()) -> js.CallExpression:
	return call_node(callee, args=args)


def optional_call(
	callee: js.Expression,
	*,
	optional: bool,
	args: Sequence[js.Argument] = (),
) -> js.OptionalCallExpression:
	return js.OptionalCallExpression(call_node(callee, args=args), optional)


def function_(
	*,
	generator: bool = False,
	params: Sequence[js.Pattern] = (),
	body: Optional[Union[js.BlockStatement, js.Expression]] = None,
) -> js.FunctionExpression:
	"""An anonymous `function` expression; the default body is an empty block."""
	fn = functions.make(None, _is_expression_body(body), params, generator=generator, body=body)
	return js.FunctionExpression(fn)


def arrow_function(
	*,
	params: Sequence[js.Pattern] = (),
	body: Optional[Union[js.BlockStatement, js.Expression]] = None,
) -> js.ArrowFunctionExpression:
	fn = functions.make(None, _is_expression_body(body), params, body=body)
	return js.ArrowFunctionExpression(fn)


def _is_expression_body(body) -> bool:
	return body is not None and not isinstance(body, js.BlockStatement)


def class_(
	elements: Sequence[js.ClassElement],
	*,
	super_: Optional[js.Expression] = None,
	id: Optional[js.Identifier] = None,
) -> js.ClassExpression:
	return js.ClassExpression(classes.make(elements, super_=super_, id=id))


def literal(lit: js.Literal) -> js.Literal:
	return lit


def array(elements: Sequence[Optional[js.Argument]] = ()) -> js.ArrayExpression:
	return js.ArrayExpression(tuple(elements))


def assignment(
	left: js.Pattern,
	right: js.Expression,
	operator: js.AssignmentOperator = js.AssignmentOperator.ASSIGN,
) -> js.AssignmentExpression:
	return js.AssignmentExpression(left, right, operator)


def binary(op: js.BinaryOperator, left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return js.BinaryExpression(op, left, right)


def plus(left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return binary(js.BinaryOperator.PLUS, left, right)


def minus(left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return binary(js.BinaryOperator.MINUS, left, right)


def mult(left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return binary(js.BinaryOperator.MULT, left, right)


def instanceof(left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return binary(js.BinaryOperator.INSTANCEOF, left, right)


def in_(left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return binary(js.BinaryOperator.IN, left, right)


def equal(left: js.Expression, right: js.Expression) -> js.BinaryExpression:
	return binary(js.BinaryOperator.EQUAL, left, right)


def conditional(test: js.Expression, consequent: js.Expression, alternate: js.Expression) -> js.ConditionalExpression:
	return js.ConditionalExpression(test, consequent, alternate)


def logical(op: js.LogicalOperator, left: js.Expression, right: js.Expression) -> js.LogicalExpression:
	return js.LogicalExpression(op, left, right)


def logical_and(left: js.Expression, right: js.Expression) -> js.LogicalExpression:
	return logical(js.LogicalOperator.AND, left, right)


def logical_or(left: js.Expression, right: js.Expression) -> js.LogicalExpression:
	return logical(js.LogicalOperator.OR, left, right)


def nullish(left: js.Expression, right: js.Expression) -> js.LogicalExpression:
	return logical(js.LogicalOperator.NULLISH_COALESCE, left, right)


def unary(op: js.UnaryOperator, argument: js.Expression) -> js.UnaryExpression:
	return js.UnaryExpression(op, argument)


def unary_plus(argument: js.Expression) -> js.UnaryExpression:
	return unary(js.UnaryOperator.PLUS, argument)


def unary_minus(argument: js.Expression) -> js.UnaryExpression:
	return unary(js.UnaryOperator.MINUS, argument)


def unary_not(argument: js.Expression) -> js.UnaryExpression:
	return unary(js.UnaryOperator.NOT, argument)


def update(op: js.UpdateOperator, argument: js.Expression, *, prefix: bool) -> js.UpdateExpression:
	return js.UpdateExpression(op, argument, prefix)


def increment(argument: js.Expression, *, prefix: bool) -> js.UpdateExpression:
	return update(js.UpdateOperator.INCREMENT, argument, prefix=prefix)


def decrement(argument: js.Expression, *, prefix: bool) -> js.UpdateExpression:
	return update(js.UpdateOperator.DECREMENT, argument, prefix=prefix)


# --- object literals


def object_property_key(k: str) -> js.Identifier:
	return js.Identifier(k)


def object_property_key_literal(k: js.Literal) -> js.Literal:
	return k


def object_property_key_literal_from_string(k: str) -> js.Literal:
	return literals.string(k)


def object_property_computed_key(k: js.Expression) -> js.ComputedKey:
	return js.ComputedKey(k)


def object_method(
	key: js.PropertyKey,
	*,
	body: Optional[js.BlockStatement] = None,
	params: Sequence[js.Pattern] = (),
	generator: bool = False,
	is_async: bool = False,
) -> js.ObjectMethod:
	fn = functions.make(None, False, params, generator=generator, is_async=is_async, body=body)
	return js.ObjectMethod(key, fn)


def object_property(key: js.PropertyKey, value: js.Expression, *, shorthand: bool = False) -> js.ObjectProperty:
	return js.ObjectProperty(key, value, shorthand=shorthand)


def object_property_with_literal(k: js.Literal, v: js.Expression, *, shorthand: bool = False) -> js.ObjectProperty:
	return object_property(object_property_key_literal(k), v, shorthand=shorthand)


def object_(properties: Sequence[ObjectMember]) -> js.ObjectExpression:
	return js.ObjectExpression(tuple(properties))


# --- member access


def member(obj: js.Expression, *, property: str) -> js.MemberExpression:
	"""`obj.property`"""
	return js.MemberExpression(obj, js.Identifier(property))


def member_computed(obj: js.Expression, *, property: str) -> js.MemberExpression:
	"""`obj[property]` where `property` names a variable."""
	return js.MemberExpression(obj, js.Identifier(property), computed=True)


def member_computed_expr(obj: js.Expression, *, property: js.Expression) -> js.MemberExpression:
	"""`obj[property]`"""
	return js.MemberExpression(obj, property, computed=True)


def member_expression(expr: js.MemberExpression) -> js.MemberExpression:
	return expr


def member_expression_ident_by_name(obj: js.Expression, name: str) -> js.MemberExpression:
	return member_expression(member(obj, property=name))


def member_expression_computed_string(obj: js.Expression, s: str) -> js.MemberExpression:
	"""`obj["s"]`"""
	return member_expression(member_computed_expr(obj, property=literal(literals.string(s))))


def optional_member_expression(expr: js.MemberExpression, *, optional: bool) -> js.OptionalMemberExpression:
	return js.OptionalMemberExpression(expr, optional)


def new_(
	callee: js.Expression,
	*,
	targs: Optional[js.TypeArgs] = None,
	args: Sequence[js.Argument] = (),
) -> js.NewExpression:
	return js.NewExpression(callee, tuple(args), targs)


def sequence(exprs: Sequence[js.Expression]) -> js.SequenceExpression:
	return js.SequenceExpression(tuple(exprs))


def expression(expr: js.Expression) -> js.Expression:
	"""An expression in argument position, as opposed to `spread`."""
	return expr


def spread(expr: js.Expression) -> js.SpreadElement:
	return js.SpreadElement(expr)


def jsx_element(elem: js.JSXElement, *, loc: js.Located = js.LOC_NONE) -> js.JSXElement:
	if loc is js.LOC_NONE:
		return elem
	return replace(elem, loc=loc)


def true_() -> js.Literal:
	return literal(literals.bool_(True))


def false_() -> js.Literal:
	return literal(literals.bool_(False))


def typecast(expr: js.Expression, annotation: js.Type) -> js.TypeCastExpression:
	"""`(expr: annotation)`"""
	return js.TypeCastExpression(expr, types.annotation(annotation))
