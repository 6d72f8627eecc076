# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Statement builders."""

import pytest

from jsast import ast as js
from jsast.builder import expressions as E
from jsast.builder import literals
from jsast.builder import patterns as P
from jsast.builder import statements as S
from jsast.errors import MalformedNodeError


def test_directive_sets_field_and_literal_to_same_text() -> None:
	stmt = S.directive("use strict")
	assert stmt.directive == "use strict"
	assert isinstance(stmt.expression, js.Literal)
	assert stmt.expression.value == "use strict"


def test_expression_statement_defaults() -> None:
	stmt = S.expression(E.identifier("x"))
	assert stmt.directive is None
	assert stmt.loc is js.LOC_NONE


def test_for_wraps_init_expression() -> None:
	i = E.identifier("i")
	stmt = S.for_(
		E.assignment(P.identifier("i"), E.literal(literals.number(0, "0"))),
		None,
		E.increment(i, prefix=False),
		S.empty(),
	)
	assert isinstance(stmt.init, js.AssignmentExpression)
	assert stmt.test is None
	assert stmt.update == js.UpdateExpression(js.UpdateOperator.INCREMENT, i, False)


def test_for_in_left_forms() -> None:
	decl = S.for_in_declarator([S.variable_declarator("k")], js.VariableKind.CONST)
	stmt = S.for_in(decl, E.identifier("obj"), S.block([]))
	assert stmt.left.kind is js.VariableKind.CONST
	assert stmt.each is False
	patt = S.for_in(S.for_in_pattern(P.identifier("k")), E.identifier("obj"), S.empty(), each=True)
	assert patt.left == P.identifier("k")
	assert patt.each is True


def test_for_in_declaration_needs_one_binding() -> None:
	decl = S.for_in_declarator([S.variable_declarator("a"), S.variable_declarator("b")])
	with pytest.raises(MalformedNodeError):
		S.for_in(decl, E.identifier("o"), S.empty())


def test_loop_left_must_be_declaration_or_pattern() -> None:
	with pytest.raises(MalformedNodeError):
		S.for_of(E.identifier("x"), E.identifier("xs"), S.empty())


def test_for_of_async() -> None:
	stmt = S.for_of(S.for_of_declarator([S.variable_declarator("v")]), E.identifier("xs"), S.empty(), is_async=True)
	assert stmt.is_async is True
	assert stmt.left.kind is js.VariableKind.VAR


def test_variable_declaration() -> None:
	decl = S.variable_declaration(
		[S.variable_declarator("x", E.literal(literals.number(1, "1"))), S.variable_declarator_generic(P.object_("y"), None)],
		js.VariableKind.LET,
	)
	assert decl.kind is js.VariableKind.LET
	assert decl.declarations[0].id == P.identifier("x")
	assert decl.declarations[1].init is None


def test_function_declaration_wraps_statement_list() -> None:
	body = [S.return_(E.identifier("a"))]
	stmt = S.function_declaration(js.Identifier("f"), params=[P.identifier("a")], body=body)
	assert stmt.function.id == js.Identifier("f")
	assert stmt.function.body == js.BlockStatement(tuple(body))
	assert stmt.function.expression is False
	empty = S.function_declaration(js.Identifier("g"))
	assert empty.function.body == js.BlockStatement(())


def test_class_declaration() -> None:
	stmt = S.class_declaration([], id=js.Identifier("A"), super_=E.identifier("B"))
	assert stmt.class_.id == js.Identifier("A")
	assert stmt.class_.extends.expression == js.Identifier("B")


def test_control_flow_builders() -> None:
	stmt = S.if_(E.true_(), S.break_(js.Identifier("outer")))
	assert stmt.alternate is None
	labeled = S.labeled(js.Identifier("outer"), S.while_(E.true_(), S.block([stmt])))
	assert labeled.body.test == js.Literal(True, "true")
	assert S.do_while(S.continue_(), E.false_()).test == js.Literal(False, "false")
	assert S.return_().argument is None


def test_try_needs_handler_or_finalizer() -> None:
	with pytest.raises(MalformedNodeError):
		S.try_([S.empty()])
	stmt = S.try_([S.throw(E.identifier("e"))], handler=S.catch_clause([], P.identifier("err")))
	assert stmt.handler.param == P.identifier("err")
	assert stmt.finalizer is None
	done = S.try_([], finalizer=[S.empty()])
	assert done.finalizer == js.BlockStatement((js.EmptyStatement(),))


def test_sequence_fields_are_stored_as_tuples() -> None:
	stmt = S.expression(E.identifier("a"))
	block = js.BlockStatement([stmt])
	assert block.body == (stmt,)
	assert hash(block) == hash(js.BlockStatement((stmt,)))
	prog = js.Program(s for s in [stmt, stmt])
	assert prog.statements == (stmt, stmt)
