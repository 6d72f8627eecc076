# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Function shape and class shape builders."""

import pytest

from jsast import ast as js
from jsast.builder import classes
from jsast.builder import expressions as E
from jsast.builder import functions
from jsast.builder import patterns as P
from jsast.builder import types as T
from jsast.errors import MalformedNodeError


def test_make_defaults_to_empty_block() -> None:
	fn = functions.make(js.Identifier("f"), False, [P.identifier("a")])
	assert fn.body == js.BlockStatement(())
	assert fn.params == js.FunctionParams((P.identifier("a"),), None)
	assert fn.is_async is False
	assert fn.is_generator is False
	assert fn.return_type is None
	assert fn.tparams is None


def test_make_with_expression_body() -> None:
	fn = functions.make(None, True, [], body=functions.body_expression(E.identifier("x")))
	assert fn.expression is True
	assert fn.body == js.Identifier("x")


def test_expression_flag_must_match_body() -> None:
	with pytest.raises(MalformedNodeError):
		functions.make(None, True, [])
	with pytest.raises(MalformedNodeError):
		functions.make(None, False, [], body=E.identifier("x"))


def test_make_carries_rest_and_return_type() -> None:
	fn = functions.make(
		None,
		False,
		[],
		is_async=True,
		generator=True,
		rest=P.rest(P.identifier("args")),
		return_type=T.annotation(T.mixed()),
	)
	assert fn.params.rest == js.RestElement(P.identifier("args"))
	assert fn.return_type == js.TypeAnnotation(js.KeywordType("mixed"))
	assert fn.is_async and fn.is_generator


def test_arrow_functions_are_never_named() -> None:
	fn = functions.make(js.Identifier("f"), False, [])
	with pytest.raises(MalformedNodeError):
		js.ArrowFunctionExpression(fn)


def test_class_make_defaults() -> None:
	cls = classes.make([])
	assert cls.id is None
	assert cls.extends is None
	assert cls.implements == ()
	assert cls.decorators == ()
	assert cls.body == js.ClassBody(())


def test_class_superclass_has_no_type_args() -> None:
	cls = classes.make([], super_=E.identifier("Base"), id=js.Identifier("C"))
	assert cls.extends == js.ClassExtends(js.Identifier("Base"), None)


def test_class_keeps_element_order_and_implements() -> None:
	ctor = classes.method(
		js.Identifier("constructor"),
		functions.make(None, False, []),
		kind="constructor",
	)
	field = classes.property_(js.Identifier("count"), E.literal(js.Literal(0, "0")), static=True)
	getter = classes.method(js.Identifier("size"), functions.make(None, False, []), kind="get")
	iface = classes.implements(js.Identifier("Sized"), js.TypeArgs((T.keyword("number"),)))
	cls = classes.make([ctor, field, getter], implements=[iface])
	assert cls.body.elements == (ctor, field, getter)
	assert cls.implements == (iface,)
	assert cls.body.elements[1].static is True


def test_unknown_method_kind_is_rejected() -> None:
	with pytest.raises(MalformedNodeError):
		classes.method(js.Identifier("m"), functions.make(None, False, []), kind="static")


def test_decorator_wraps_expression() -> None:
	deco = classes.decorator(E.identifier("sealed"))
	cls = classes.make([], decorators=[deco])
	assert cls.decorators == (js.Decorator(js.Identifier("sealed")),)


def test_type_builders() -> None:
	assert T.generic("Array", [T.keyword("string")]) == js.GenericType(
		js.Identifier("Array"), js.TypeArgs((js.KeywordType("string"),))
	)
	assert T.generic("Foo").targs is None
	assert T.nullable(T.mixed()) == js.NullableType(js.KeywordType("mixed"))
	assert T.union(T.keyword("string"), T.keyword("number")).types == (
		js.KeywordType("string"),
		js.KeywordType("number"),
	)
