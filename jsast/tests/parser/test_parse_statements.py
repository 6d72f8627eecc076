# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Statement and module parsing."""

import pytest

from jsast import ast as js
from jsast import program_of_string, statement_of_string
from jsast.errors import ParseError

a, b, c = js.Identifier("a"), js.Identifier("b"), js.Identifier("c")
EMPTY_BLOCK = js.BlockStatement(())


def _expr_stmt(name: str) -> js.ExpressionStatement:
	return js.ExpressionStatement(js.Identifier(name))


def test_if_else() -> None:
	assert statement_of_string("if (a) b; else c;") == js.IfStatement(a, _expr_stmt("b"), _expr_stmt("c"))
	assert statement_of_string("if (a) {}").alternate is None


def test_loops() -> None:
	assert statement_of_string("while (a) {}") == js.WhileStatement(a, EMPTY_BLOCK)
	assert statement_of_string("do b; while (a);") == js.DoWhileStatement(_expr_stmt("b"), a)
	stmt = statement_of_string("for (let i = 0; i < a; i++) {}")
	assert stmt.init == js.VariableDeclaration(
		(js.VariableDeclarator(js.IdentifierPattern(js.Identifier("i")), js.Literal(0, "0")),),
		js.VariableKind.LET,
	)
	assert stmt.test == js.BinaryExpression(js.BinaryOperator.LESS_THAN, js.Identifier("i"), a)
	assert stmt.update == js.UpdateExpression(js.UpdateOperator.INCREMENT, js.Identifier("i"), False)
	assert statement_of_string("for (;;) {}") == js.ForStatement(None, None, None, EMPTY_BLOCK)


def test_for_in_from_expression_head() -> None:
	assert statement_of_string("for (a in b) {}") == js.ForInStatement(js.IdentifierPattern(a), b, EMPTY_BLOCK)
	member = statement_of_string("for (a.b in c);")
	assert member.left == js.ExpressionPattern(js.MemberExpression(a, b))
	assert member.body == js.EmptyStatement()
	of = statement_of_string("for (a.b of c);")
	assert of == js.ForOfStatement(js.ExpressionPattern(js.MemberExpression(a, b)), c, js.EmptyStatement())
	call = statement_of_string("for (a().b in c);")
	assert call.left == js.ExpressionPattern(js.MemberExpression(js.CallExpression(a), b))


def test_for_in_right_side_keeps_precedence() -> None:
	stmt = statement_of_string("for (a in b || c) {}")
	assert stmt.right == js.LogicalExpression(js.LogicalOperator.OR, b, c)


def test_for_head_without_in_is_rejected() -> None:
	with pytest.raises(ParseError):
		statement_of_string("for (a) {}")


def test_for_in_and_for_of_declarations() -> None:
	stmt = statement_of_string("for (const k in a) {}")
	assert stmt.left == js.VariableDeclaration(
		(js.VariableDeclarator(js.IdentifierPattern(js.Identifier("k"))),),
		js.VariableKind.CONST,
	)
	of = statement_of_string("for (let [k, v] of a) {}")
	assert isinstance(of, js.ForOfStatement)
	assert of.left.declarations[0].id == js.ArrayPattern((
		js.IdentifierPattern(js.Identifier("k")),
		js.IdentifierPattern(js.Identifier("v")),
	))
	assert of.is_async is False
	bare = statement_of_string("for (a of b) {}")
	assert bare.left == js.IdentifierPattern(a)


def test_for_await() -> None:
	stmt = statement_of_string("for await (const x of a) {}")
	assert stmt.is_async is True


def test_labels_break_continue() -> None:
	stmt = statement_of_string("outer: for (;;) { break outer; continue; }")
	assert stmt == js.LabeledStatement(
		js.Identifier("outer"),
		js.ForStatement(None, None, None, js.BlockStatement((
			js.BreakStatement(js.Identifier("outer")),
			js.ContinueStatement(),
		))),
	)


def test_switch() -> None:
	stmt = statement_of_string("switch (a) { case 1: b; break; default: c; }")
	assert stmt == js.SwitchStatement(a, (
		js.SwitchCase(js.Literal(1, "1"), (_expr_stmt("b"), js.BreakStatement())),
		js.SwitchCase(None, (_expr_stmt("c"),)),
	))


def test_try_catch_finally_throw() -> None:
	stmt = statement_of_string("try { throw a; } catch (e) { b; } finally { c; }")
	assert stmt.block == js.BlockStatement((js.ThrowStatement(a),))
	assert stmt.handler == js.CatchClause(
		js.BlockStatement((_expr_stmt("b"),)),
		js.IdentifierPattern(js.Identifier("e")),
	)
	assert stmt.finalizer == js.BlockStatement((_expr_stmt("c"),))
	assert statement_of_string("try {} catch {}").handler.param is None


def test_variable_declarations_with_patterns() -> None:
	stmt = statement_of_string("var {a, b: [, c] = d, ...e} = f, g;")
	assert stmt.kind is js.VariableKind.VAR
	first, second = stmt.declarations
	assert first.id == js.ObjectPattern((
		js.ObjectPatternProperty(a, js.IdentifierPattern(a), shorthand=True),
		js.ObjectPatternProperty(b, js.AssignmentPattern(
			js.ArrayPattern((None, js.IdentifierPattern(c))),
			js.Identifier("d"),
		)),
		js.RestElement(js.IdentifierPattern(js.Identifier("e"))),
	))
	assert first.init == js.Identifier("f")
	assert second == js.VariableDeclarator(js.IdentifierPattern(js.Identifier("g")))


def test_function_declaration() -> None:
	stmt = statement_of_string("async function f(a, b = 1, ...c) { return a; }")
	fn = stmt.function
	assert fn.id == js.Identifier("f")
	assert fn.is_async is True
	assert fn.params == js.FunctionParams(
		(js.IdentifierPattern(a), js.AssignmentPattern(js.IdentifierPattern(b), js.Literal(1, "1"))),
		js.RestElement(js.IdentifierPattern(c)),
	)
	assert fn.body == js.BlockStatement((js.ReturnStatement(a),))
	assert fn.expression is False


def test_class_declaration_members() -> None:
	stmt = statement_of_string(
		"class A extends B { constructor() { super(); } static m() {} get x() { return 1; } y = 2; static z; }"
	)
	cls = stmt.class_
	assert cls.id == js.Identifier("A")
	assert cls.extends == js.ClassExtends(js.Identifier("B"))
	ctor, m, x, y, z = cls.body.elements
	assert ctor.kind == "constructor"
	assert ctor.value.body == js.BlockStatement((js.ExpressionStatement(js.CallExpression(js.Super())),))
	assert (m.kind, m.static) == ("method", True)
	assert x.kind == "get"
	assert y == js.ClassProperty(js.Identifier("y"), js.Literal(2, "2"))
	assert z == js.ClassProperty(js.Identifier("z"), static=True)


def test_class_method_modifiers() -> None:
	cls = statement_of_string("class A { static constructor() {} async *gen() {} set v(x) {} static() {} }").class_
	static_ctor, gen, setter, named_static = cls.body.elements
	assert static_ctor.kind == "method"
	assert gen.value.is_async and gen.value.is_generator
	assert setter.kind == "set"
	assert named_static.key == js.Identifier("static")
	assert named_static.static is False


def test_decorators() -> None:
	cls = statement_of_string("@a @b.c class A { @d m() {} }").class_
	assert cls.decorators == (js.Decorator(a), js.Decorator(js.MemberExpression(b, c)))
	assert cls.body.elements[0].decorators == (js.Decorator(js.Identifier("d")),)


def test_decorator_calls_and_parenthesized_decorators() -> None:
	cls = statement_of_string("@a.b(c, 1) @(a || b) class A {\n  @c\n  m() {}\n}").class_
	callee = js.MemberExpression(a, b)
	assert cls.decorators == (
		js.Decorator(js.CallExpression(callee, (c, js.Literal(1, "1")))),
		js.Decorator(js.LogicalExpression(js.LogicalOperator.OR, a, b)),
	)
	assert cls.body.elements[0].decorators == (js.Decorator(c),)


def test_decorated_class_property_is_rejected() -> None:
	with pytest.raises(ParseError):
		statement_of_string("class A { @d x = 1; }")


def test_debugger_and_empty() -> None:
	prog = program_of_string("debugger; ;")
	assert prog.statements == (js.DebuggerStatement(), js.EmptyStatement())


def test_directive_prologue() -> None:
	prog = program_of_string('"use strict"; \'other\'; "not a directive" + 1; "late";')
	first, second, third, fourth = prog.statements
	assert first == js.ExpressionStatement(js.Literal("use strict", '"use strict"'), directive="use strict")
	assert second.directive == "other"
	assert third.directive is None
	assert fourth.directive is None


def test_function_body_directive() -> None:
	fn = statement_of_string('function f() { "use strict"; }').function
	assert fn.body.body[0].directive == "use strict"


def test_imports() -> None:
	stmt = statement_of_string('import a, {b as c, d} from "m";')
	assert stmt == js.ImportDeclaration(
		(
			js.ImportDefaultSpecifier(a),
			js.ImportSpecifier(b, c),
			js.ImportSpecifier(js.Identifier("d"), js.Identifier("d")),
		),
		js.Literal("m", '"m"'),
	)
	ns = statement_of_string("import * as ns from 'm';")
	assert ns.specifiers == (js.ImportNamespaceSpecifier(js.Identifier("ns")),)
	assert statement_of_string('import "m";').specifiers == ()


def test_exports() -> None:
	src = js.Literal("m", '"m"')
	assert statement_of_string('export * from "m";') == js.ExportAllDeclaration(src)
	assert statement_of_string('export * as ns from "m";') == js.ExportAllDeclaration(src, js.Identifier("ns"))
	named = statement_of_string('export {a as b, c} from "m";')
	assert named.specifiers == (js.ExportSpecifier(a, b), js.ExportSpecifier(c, c))
	assert named.source == src
	decl = statement_of_string("export const x = 1;")
	assert isinstance(decl.declaration, js.VariableDeclaration)
	assert decl.specifiers == ()


def test_export_default_forms() -> None:
	fn = statement_of_string("export default function () {}")
	assert isinstance(fn.declaration, js.FunctionDeclaration)
	assert fn.declaration.function.id is None
	cls = statement_of_string("export default class A {}")
	assert cls.declaration.class_.id == js.Identifier("A")
	expr = statement_of_string("export default a + 1;")
	assert expr.declaration == js.BinaryExpression(js.BinaryOperator.PLUS, a, js.Literal(1, "1"))
