# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Syntax tree for a JavaScript dialect with Flow-style type annotations.

Every node is a frozen dataclass and every sequence child is a tuple, so a
tree cannot be changed after it is built. Nodes carry a `loc` that defaults
to `LOC_NONE`; nothing in jsast computes real source positions.

Cross-field invariants that can be checked locally are enforced in
`__post_init__` and raise `MalformedNodeError`.
"""

from __future__ import annotations

import inspect
from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple, Union

from .errors import MalformedNodeError


def _node(cls):
	"""
	Declare a frozen dataclass node whose `Tuple[...]` fields store tuples.

	Any other iterable passed for such a field is copied into a tuple before
	the class's own `__post_init__` checks run.
	"""
	sequence_fields = tuple(
		name
		for name, annotation in inspect.get_annotations(cls).items()
		if str(annotation).startswith("Tuple[")
	)
	check = cls.__dict__.get("__post_init__")

	def __post_init__(self) -> None:
		for name in sequence_fields:
			value = getattr(self, name)
			if not isinstance(value, tuple):
				object.__setattr__(self, name, tuple(value))
		if check is not None:
			check(self)

	cls.__post_init__ = __post_init__
	return dataclass(frozen=True)(cls)


@_node
class Located:
	line: int
	column: int


# Sentinel for "no position". Every builder uses it.
LOC_NONE = Located(line=0, column=0)


class Expression:
	loc: Located


class Statement:
	loc: Located


class Pattern:
	loc: Located


class Type:
	loc: Located


class Comment:
	loc: Located


class JSXChild:
	loc: Located


class ClassElement:
	loc: Located


# --- operators -------------------------------------------------------------


class BinaryOperator(Enum):
	EQUAL = "=="
	NOT_EQUAL = "!="
	STRICT_EQUAL = "==="
	STRICT_NOT_EQUAL = "!=="
	LESS_THAN = "<"
	LESS_THAN_EQUAL = "<="
	GREATER_THAN = ">"
	GREATER_THAN_EQUAL = ">="
	LSHIFT = "<<"
	RSHIFT = ">>"
	RSHIFT3 = ">>>"
	PLUS = "+"
	MINUS = "-"
	MULT = "*"
	EXP = "**"
	DIV = "/"
	MOD = "%"
	BIT_OR = "|"
	XOR = "^"
	BIT_AND = "&"
	IN = "in"
	INSTANCEOF = "instanceof"


class LogicalOperator(Enum):
	OR = "||"
	AND = "&&"
	NULLISH_COALESCE = "??"


class UnaryOperator(Enum):
	MINUS = "-"
	PLUS = "+"
	NOT = "!"
	BIT_NOT = "~"
	TYPEOF = "typeof"
	VOID = "void"
	DELETE = "delete"
	AWAIT = "await"


class UpdateOperator(Enum):
	INCREMENT = "++"
	DECREMENT = "--"


class AssignmentOperator(Enum):
	ASSIGN = "="
	PLUS_ASSIGN = "+="
	MINUS_ASSIGN = "-="
	MULT_ASSIGN = "*="
	EXP_ASSIGN = "**="
	DIV_ASSIGN = "/="
	MOD_ASSIGN = "%="
	LSHIFT_ASSIGN = "<<="
	RSHIFT_ASSIGN = ">>="
	RSHIFT3_ASSIGN = ">>>="
	BIT_OR_ASSIGN = "|="
	BIT_XOR_ASSIGN = "^="
	BIT_AND_ASSIGN = "&="


class VariableKind(Enum):
	VAR = "var"
	LET = "let"
	CONST = "const"


# --- leaves ----------------------------------------------------------------


@_node
class Identifier(Expression):
	name: str
	loc: Located = LOC_NONE


@_node
class Literal(Expression):
	"""
	A literal value plus the exact source text it was written as.

	`value` is a `str`, a number (`float`, or `int` when built by hand), a
	`bool`, or `None` for `null`.
	"""

	value: object
	raw: str
	loc: Located = LOC_NONE


# --- type annotations ------------------------------------------------------


@_node
class TypeAnnotation:
	type_: Type
	loc: Located = LOC_NONE


@_node
class KeywordType(Type):
	"""any / mixed / empty / void / null / number / string / boolean / symbol"""

	keyword: str
	loc: Located = LOC_NONE


@_node
class QualifiedTypeIdentifier:
	qualification: Union[Identifier, "QualifiedTypeIdentifier"]
	id: Identifier
	loc: Located = LOC_NONE


@_node
class TypeArgs:
	types: Tuple[Type, ...]
	loc: Located = LOC_NONE


@_node
class GenericType(Type):
	id: Union[Identifier, QualifiedTypeIdentifier]
	targs: Optional[TypeArgs] = None
	loc: Located = LOC_NONE


@_node
class NullableType(Type):
	argument: Type
	loc: Located = LOC_NONE


@_node
class ArrayType(Type):
	element: Type
	loc: Located = LOC_NONE


@_node
class UnionType(Type):
	types: Tuple[Type, ...]
	loc: Located = LOC_NONE


@_node
class IntersectionType(Type):
	types: Tuple[Type, ...]
	loc: Located = LOC_NONE


@_node
class TupleType(Type):
	types: Tuple[Type, ...]
	loc: Located = LOC_NONE


@_node
class ObjectTypeProperty:
	key: Union[Identifier, Literal]
	value: Type
	optional: bool = False
	loc: Located = LOC_NONE


@_node
class ObjectType(Type):
	properties: Tuple[ObjectTypeProperty, ...] = ()
	exact: bool = False
	loc: Located = LOC_NONE


@_node
class StringLiteralType(Type):
	value: str
	raw: str
	loc: Located = LOC_NONE


@_node
class NumberLiteralType(Type):
	value: float
	raw: str
	loc: Located = LOC_NONE


@_node
class BooleanLiteralType(Type):
	value: bool
	loc: Located = LOC_NONE


@_node
class TypeParameter:
	name: str
	bound: Optional[TypeAnnotation] = None
	default: Optional[Type] = None
	loc: Located = LOC_NONE


@_node
class TypeParameters:
	params: Tuple[TypeParameter, ...]
	loc: Located = LOC_NONE


# --- patterns --------------------------------------------------------------


@_node
class ComputedKey:
	expression: Expression
	loc: Located = LOC_NONE


PropertyKey = Union[Identifier, Literal, ComputedKey]


@_node
class IdentifierPattern(Pattern):
	name: Identifier
	annot: Optional[TypeAnnotation] = None
	optional: bool = False
	loc: Located = LOC_NONE


@_node
class RestElement:
	argument: Pattern
	loc: Located = LOC_NONE


@_node
class ArrayPattern(Pattern):
	# None marks a hole: `[, b]`
	elements: Tuple[Optional[Union[Pattern, RestElement]], ...]
	annot: Optional[TypeAnnotation] = None
	loc: Located = LOC_NONE


@_node
class AssignmentPattern(Pattern):
	left: Pattern
	right: Expression
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if isinstance(self.right, Pattern) or not isinstance(self.right, Expression):
			raise MalformedNodeError(
				f"assignment pattern default must be an expression, got {type(self.right).__name__}"
			)


@_node
class ObjectPatternProperty:
	key: PropertyKey
	pattern: Pattern
	shorthand: bool = False
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if not self.shorthand:
			return
		bound = self.pattern.left if isinstance(self.pattern, AssignmentPattern) else self.pattern
		if not (
			isinstance(self.key, Identifier)
			and isinstance(bound, IdentifierPattern)
			and bound.name.name == self.key.name
		):
			raise MalformedNodeError("shorthand object pattern property must bind its own key name")


@_node
class ObjectPattern(Pattern):
	properties: Tuple[Union[ObjectPatternProperty, RestElement], ...]
	annot: Optional[TypeAnnotation] = None
	loc: Located = LOC_NONE


@_node
class ExpressionPattern(Pattern):
	"""A non-binding assignment target such as `a.b` in `a.b = 1`."""

	expression: Expression
	loc: Located = LOC_NONE


# --- functions and classes -------------------------------------------------


@_node
class FunctionParams:
	params: Tuple[Pattern, ...] = ()
	rest: Optional[RestElement] = None
	loc: Located = LOC_NONE


@_node
class Function:
	"""
	The function shape shared by declarations, function expressions, arrow
	functions and object/class methods.

	`expression` is true exactly when `body` is a single expression rather
	than a `BlockStatement`.
	"""

	id: Optional[Identifier]
	params: FunctionParams
	body: Union["BlockStatement", Expression]
	is_async: bool = False
	is_generator: bool = False
	expression: bool = False
	return_type: Optional[TypeAnnotation] = None
	tparams: Optional[TypeParameters] = None
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if self.expression == isinstance(self.body, BlockStatement):
			raise MalformedNodeError(
				"function body is {} but expression={}".format(
					"a block" if isinstance(self.body, BlockStatement) else "an expression",
					self.expression,
				)
			)


@_node
class Decorator:
	expression: Expression
	loc: Located = LOC_NONE


@_node
class ClassExtends:
	expression: Expression
	targs: Optional[TypeArgs] = None
	loc: Located = LOC_NONE


@_node
class ClassImplements:
	id: Identifier
	targs: Optional[TypeArgs] = None
	loc: Located = LOC_NONE


@_node
class ClassMethod(ClassElement):
	key: PropertyKey
	value: Function
	kind: str = "method"  # "constructor", "method", "get", "set"
	static: bool = False
	decorators: Tuple[Decorator, ...] = ()
	loc: Located = LOC_NONE


@_node
class ClassProperty(ClassElement):
	key: PropertyKey
	value: Optional[Expression] = None
	annot: Optional[TypeAnnotation] = None
	static: bool = False
	loc: Located = LOC_NONE


@_node
class ClassBody:
	elements: Tuple[ClassElement, ...] = ()
	loc: Located = LOC_NONE


@_node
class Class:
	body: ClassBody
	id: Optional[Identifier] = None
	tparams: Optional[TypeParameters] = None
	extends: Optional[ClassExtends] = None
	implements: Tuple[ClassImplements, ...] = ()
	decorators: Tuple[Decorator, ...] = ()
	loc: Located = LOC_NONE


# --- JSX -------------------------------------------------------------------


@_node
class JSXIdentifier:
	name: str
	loc: Located = LOC_NONE


@_node
class JSXMemberExpression:
	object: Union[JSXIdentifier, "JSXMemberExpression"]
	property: JSXIdentifier
	loc: Located = LOC_NONE


JSXName = Union[JSXIdentifier, JSXMemberExpression]


def jsx_name_text(name: JSXName) -> str:
	"""Render a JSX tag name the way it is spelled in source (`a.b.c`)."""
	if isinstance(name, JSXMemberExpression):
		return f"{jsx_name_text(name.object)}.{name.property.name}"
	return name.name


@_node
class JSXEmptyExpression:
	loc: Located = LOC_NONE


@_node
class JSXExpressionContainer(JSXChild):
	expression: Union[Expression, JSXEmptyExpression]
	loc: Located = LOC_NONE


@_node
class JSXText(JSXChild):
	value: str
	raw: str
	loc: Located = LOC_NONE


@_node
class JSXAttribute:
	name: JSXIdentifier
	value: Optional[Union[Literal, JSXExpressionContainer, "JSXElement"]] = None
	loc: Located = LOC_NONE


@_node
class JSXSpreadAttribute:
	argument: Expression
	loc: Located = LOC_NONE


@_node
class JSXOpeningElement:
	name: JSXName
	self_closing: bool = False
	attributes: Tuple[Union[JSXAttribute, JSXSpreadAttribute], ...] = ()
	loc: Located = LOC_NONE


@_node
class JSXClosingElement:
	name: JSXName
	loc: Located = LOC_NONE


@_node
class JSXElement(Expression, JSXChild):
	opening: JSXOpeningElement
	closing: Optional[JSXClosingElement] = None
	children: Tuple[JSXChild, ...] = ()
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if self.opening.self_closing != (self.closing is None):
			raise MalformedNodeError(
				f"<{jsx_name_text(self.opening.name)}>: closing tag must be present "
				"exactly when the element is not self-closing"
			)
		if self.closing is not None:
			opened = jsx_name_text(self.opening.name)
			closed = jsx_name_text(self.closing.name)
			if opened != closed:
				raise MalformedNodeError(f"closing tag </{closed}> does not match <{opened}>")


# --- statements ------------------------------------------------------------


@_node
class EmptyStatement(Statement):
	loc: Located = LOC_NONE


@_node
class BlockStatement(Statement):
	body: Tuple[Statement, ...] = ()
	loc: Located = LOC_NONE


@_node
class ExpressionStatement(Statement):
	expression: Expression
	# Raw text of a directive prologue entry ("use strict"), else None.
	directive: Optional[str] = None
	loc: Located = LOC_NONE


@_node
class IfStatement(Statement):
	test: Expression
	consequent: Statement
	alternate: Optional[Statement] = None
	loc: Located = LOC_NONE


@_node
class LabeledStatement(Statement):
	label: Identifier
	body: Statement
	loc: Located = LOC_NONE


@_node
class BreakStatement(Statement):
	label: Optional[Identifier] = None
	loc: Located = LOC_NONE


@_node
class ContinueStatement(Statement):
	label: Optional[Identifier] = None
	loc: Located = LOC_NONE


@_node
class WhileStatement(Statement):
	test: Expression
	body: Statement
	loc: Located = LOC_NONE


@_node
class DoWhileStatement(Statement):
	body: Statement
	test: Expression
	loc: Located = LOC_NONE


@_node
class VariableDeclarator:
	id: Pattern
	init: Optional[Expression] = None
	loc: Located = LOC_NONE


@_node
class VariableDeclaration(Statement):
	declarations: Tuple[VariableDeclarator, ...]
	kind: VariableKind = VariableKind.VAR
	loc: Located = LOC_NONE


def _check_loop_left(stmt: str, left: object) -> None:
	if isinstance(left, VariableDeclaration):
		if len(left.declarations) != 1:
			raise MalformedNodeError(f"{stmt} declaration must declare exactly one binding")
		return
	if not isinstance(left, Pattern):
		raise MalformedNodeError(
			f"{stmt} left side must be a declaration or a pattern, got {type(left).__name__}"
		)


@_node
class ForStatement(Statement):
	init: Optional[Union[VariableDeclaration, Expression]]
	test: Optional[Expression]
	update: Optional[Expression]
	body: Statement
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if self.init is not None and not isinstance(self.init, (VariableDeclaration, Expression)):
			raise MalformedNodeError(f"for-loop init must be a declaration or an expression, got {type(self.init).__name__}")


@_node
class ForInStatement(Statement):
	left: Union[VariableDeclaration, Pattern]
	right: Expression
	body: Statement
	each: bool = False
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		_check_loop_left("for-in", self.left)


@_node
class ForOfStatement(Statement):
	left: Union[VariableDeclaration, Pattern]
	right: Expression
	body: Statement
	is_async: bool = False
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		_check_loop_left("for-of", self.left)


@_node
class ReturnStatement(Statement):
	argument: Optional[Expression] = None
	loc: Located = LOC_NONE


@_node
class ThrowStatement(Statement):
	argument: Expression
	loc: Located = LOC_NONE


@_node
class CatchClause:
	body: BlockStatement
	param: Optional[Pattern] = None
	loc: Located = LOC_NONE


@_node
class TryStatement(Statement):
	block: BlockStatement
	handler: Optional[CatchClause] = None
	finalizer: Optional[BlockStatement] = None
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if self.handler is None and self.finalizer is None:
			raise MalformedNodeError("try statement needs a catch clause or a finally block")


@_node
class SwitchCase:
	# None for `default:`
	test: Optional[Expression]
	consequent: Tuple[Statement, ...] = ()
	loc: Located = LOC_NONE


@_node
class SwitchStatement(Statement):
	discriminant: Expression
	cases: Tuple[SwitchCase, ...] = ()
	loc: Located = LOC_NONE


@_node
class DebuggerStatement(Statement):
	loc: Located = LOC_NONE


@_node
class FunctionDeclaration(Statement):
	function: Function
	loc: Located = LOC_NONE


@_node
class ClassDeclaration(Statement):
	class_: Class
	loc: Located = LOC_NONE


@_node
class ImportSpecifier:
	imported: Identifier
	local: Identifier
	loc: Located = LOC_NONE


@_node
class ImportDefaultSpecifier:
	local: Identifier
	loc: Located = LOC_NONE


@_node
class ImportNamespaceSpecifier:
	local: Identifier
	loc: Located = LOC_NONE


@_node
class ImportDeclaration(Statement):
	specifiers: Tuple[Union[ImportSpecifier, ImportDefaultSpecifier, ImportNamespaceSpecifier], ...]
	source: Literal
	loc: Located = LOC_NONE


@_node
class ExportSpecifier:
	local: Identifier
	exported: Identifier
	loc: Located = LOC_NONE


@_node
class ExportNamedDeclaration(Statement):
	declaration: Optional[Statement] = None
	specifiers: Tuple[ExportSpecifier, ...] = ()
	source: Optional[Literal] = None
	loc: Located = LOC_NONE


@_node
class ExportDefaultDeclaration(Statement):
	declaration: Union[Statement, Expression]
	loc: Located = LOC_NONE


@_node
class ExportAllDeclaration(Statement):
	source: Literal
	# Set for `export * as ns from "mod"`.
	exported: Optional[Identifier] = None
	loc: Located = LOC_NONE


# --- expressions -----------------------------------------------------------


@_node
class ThisExpression(Expression):
	loc: Located = LOC_NONE


@_node
class Super(Expression):
	loc: Located = LOC_NONE


@_node
class SpreadElement:
	argument: Expression
	loc: Located = LOC_NONE


@_node
class ArrayExpression(Expression):
	elements: Tuple[Optional[Union[Expression, SpreadElement]], ...] = ()
	loc: Located = LOC_NONE


@_node
class ObjectProperty:
	key: PropertyKey
	value: Expression
	shorthand: bool = False
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if self.shorthand and not (
			isinstance(self.key, Identifier)
			and isinstance(self.value, Identifier)
			and self.key.name == self.value.name
		):
			raise MalformedNodeError("shorthand object property must use its key as the value")


@_node
class ObjectMethod:
	key: PropertyKey
	value: Function
	kind: str = "method"  # "method", "get", "set"
	loc: Located = LOC_NONE


@_node
class ObjectExpression(Expression):
	properties: Tuple[Union[ObjectProperty, ObjectMethod, SpreadElement], ...] = ()
	loc: Located = LOC_NONE


@_node
class FunctionExpression(Expression):
	function: Function
	loc: Located = LOC_NONE


@_node
class ArrowFunctionExpression(Expression):
	function: Function
	loc: Located = LOC_NONE

	def __post_init__(self) -> None:
		if self.function.id is not None:
			raise MalformedNodeError("arrow functions cannot be named")


@_node
class ClassExpression(Expression):
	class_: Class
	loc: Located = LOC_NONE


Argument = Union[Expression, SpreadElement]


@_node
class CallExpression(Expression):
	callee: Expression
	arguments: Tuple[Argument, ...] = ()
	targs: Optional[TypeArgs] = None
	loc: Located = LOC_NONE


@_node
class OptionalCallExpression(Expression):
	"""
	A call inside an optional chain. `optional` is true only for the link
	written with `?.`; later links of the same chain carry False.
	"""

	call: CallExpression
	optional: bool
	loc: Located = LOC_NONE


@_node
class NewExpression(Expression):
	callee: Expression
	arguments: Tuple[Argument, ...] = ()
	targs: Optional[TypeArgs] = None
	loc: Located = LOC_NONE


@_node
class MemberExpression(Expression):
	object: Expression
	property: Expression
	computed: bool = False
	loc: Located = LOC_NONE


@_node
class OptionalMemberExpression(Expression):
	member: MemberExpression
	optional: bool
	loc: Located = LOC_NONE


@_node
class SequenceExpression(Expression):
	expressions: Tuple[Expression, ...]
	loc: Located = LOC_NONE


@_node
class UnaryExpression(Expression):
	operator: UnaryOperator
	argument: Expression
	loc: Located = LOC_NONE


@_node
class BinaryExpression(Expression):
	operator: BinaryOperator
	left: Expression
	right: Expression
	loc: Located = LOC_NONE


@_node
class LogicalExpression(Expression):
	operator: LogicalOperator
	left: Expression
	right: Expression
	loc: Located = LOC_NONE


@_node
class AssignmentExpression(Expression):
	left: Pattern
	right: Expression
	operator: AssignmentOperator = AssignmentOperator.ASSIGN
	loc: Located = LOC_NONE


@_node
class UpdateExpression(Expression):
	operator: UpdateOperator
	argument: Expression
	prefix: bool
	loc: Located = LOC_NONE


@_node
class ConditionalExpression(Expression):
	test: Expression
	consequent: Expression
	alternate: Expression
	loc: Located = LOC_NONE


@_node
class YieldExpression(Expression):
	argument: Optional[Expression] = None
	delegate: bool = False
	loc: Located = LOC_NONE


@_node
class TypeCastExpression(Expression):
	expression: Expression
	annot: TypeAnnotation
	loc: Located = LOC_NONE


# --- comments and program --------------------------------------------------


@_node
class BlockComment(Comment):
	text: str
	loc: Located = LOC_NONE


@_node
class LineComment(Comment):
	text: str
	loc: Located = LOC_NONE


@_node
class Program:
	statements: Tuple[Statement, ...] = ()
	comments: Tuple[Comment, ...] = ()
	loc: Located = LOC_NONE
