# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
lark driver for `grammar.lark` and conversion of lark trees into jsast nodes.

Tokens are pulled from lark's contextual lexer and fed to an interactive
LALR parser one at a time by `SemicolonInserter`, which adds the `;` tokens
JavaScript leaves implicit and applies the line break restrictions after
`return`, `break`, `continue`, `throw` and before postfix `++`/`--`.
"""

from __future__ import annotations

import html
import logging
from dataclasses import replace
from functools import lru_cache
from pathlib import Path
from typing import Dict, List, Optional, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedToken

from .. import ast as js
from ..errors import ParseError
from . import lexical
from .diagnostics import Diagnostic
from .options import ParseOptions, ParserEntry

logger = logging.getLogger(__name__)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")

# Binding power of each binary operator; `**` is the only right-associative one.
_PRECEDENCE = {
	"??": 1,
	"||": 2,
	"&&": 3,
	"|": 4,
	"^": 5,
	"&": 6,
	"==": 7,
	"!=": 7,
	"===": 7,
	"!==": 7,
	"<": 8,
	">": 8,
	"<=": 8,
	">=": 8,
	"in": 8,
	"instanceof": 8,
	"<<": 9,
	">>": 9,
	">>>": 9,
	"+": 10,
	"-": 10,
	"*": 11,
	"/": 11,
	"%": 11,
	"**": 12,
}

_LOGICAL_OPERATORS = {"||", "&&", "??"}

_KEYWORD_TYPES = {"any", "mixed", "empty", "number", "string", "boolean", "symbol"}

_PROPERTY_KEY_RULES = {"ident_name", "string_key", "number_key", "computed_key"}

_FUNCTION_PARTS = {"async_kw", "generator_star", "type_params", "params", "return_annot", "block"}

_LINE_TERMINATORS = "\n\r  "


@lru_cache(maxsize=None)
def _parser() -> Lark:
	logger.debug("building parser from %s", _GRAMMAR_PATH)
	return Lark(
		_GRAMMAR_PATH.read_text(encoding="utf-8"),
		parser="lalr",
		lexer="contextual",
		start=[entry.value for entry in ParserEntry],
		maybe_placeholders=False,
	)


def parse(options: ParseOptions, entry: ParserEntry, text: str):
	"""
	Parse `text` from `entry` and return `(result, diagnostics)`.

	`result` is an `Expression` for `ParserEntry.EXPRESSION` and a tuple of
	statements for `ParserEntry.MODULE_BODY`. lark's `UnexpectedInput` errors
	propagate unchanged; a line break after `throw` raises `ParseError`.
	"""
	logger.debug("parsing %s (%d chars)", entry.value, len(text))
	tree = SemicolonInserter(text).run(_parser().parse_interactive(text, start=entry.value))
	builder = _TreeBuilder(options)
	if entry is ParserEntry.EXPRESSION:
		result = builder.expression(tree.children[0])
	else:
		result = builder.statement_list(tree.children, directives=True)
	return result, tuple(builder.diagnostics)


_RESERVED_WORDS = frozenset((
	"break", "case", "catch", "class", "const", "continue", "debugger", "default",
	"delete", "do", "else", "export", "extends", "finally", "for", "function", "if",
	"import", "in", "instanceof", "let", "new", "return", "super", "switch", "this",
	"throw", "try", "typeof", "var", "void", "while", "yield", "await", "null",
	"true", "false",
))


@lru_cache(maxsize=None)
def _keyword_types() -> Dict[str, str]:
	types = {"in": "IN", "instanceof": "INSTANCEOF"}
	for terminal in _parser().terminals:
		pattern = terminal.pattern
		if pattern.type == "str" and pattern.value in _RESERVED_WORDS:
			types[pattern.value] = terminal.name
	return types


class SemicolonInserter:
	"""
	Feeds lexed tokens to a lark interactive parser, adding the `;` tokens
	JavaScript leaves implicit.

	A `;` goes in before a rejected token that is a `}` or the first on its
	line, and before a rejected end of input. A line break right after
	`return`, `break` or `continue` ends the statement, one right after
	`throw` is an error, and `++`/`--` at the start of a line never apply to
	the line before.

	The contextual lexer hands out IDENT for a reserved word in states that
	could not take the keyword; such tokens are given their keyword type
	here unless they follow `.` or `?.`.
	"""

	RESTRICTED = {"RETURN", "BREAK", "CONTINUE"}
	UPDATE = {"INCREMENT", "DECREMENT"}
	MEMBER_ACCESS = {".", "?."}

	def __init__(self, text: str) -> None:
		self.text = text
		self.keywords = _keyword_types()
		self.previous: Optional[Token] = None
		self.inserted_at: Optional[int] = None

	def run(self, interactive) -> Tree:
		lexer = interactive.lexer_thread
		tokens = lexer.lex(interactive.parser_state)
		while True:
			try:
				token = next(tokens)
			except StopIteration:
				break
			except UnexpectedToken as err:
				# Lexed by the root lexer after the state's own lexer failed.
				# The generator is finished but the lexer position is kept.
				token = err.token
				tokens = lexer.lex(interactive.parser_state)
			token = self._retype(token)
			self._feed(interactive, token)
			self.previous = token
		return self._finish(interactive)

	def _retype(self, token: Token) -> Token:
		if token.type != "IDENT" or token.value not in self.keywords:
			return token
		if self.previous is not None and self.previous.value in self.MEMBER_ACCESS:
			return token
		return Token.new_borrow_pos(self.keywords[token.value], token.value, token)

	def _feed(self, interactive, token: Token) -> None:
		if self._ends_statement(interactive, token):
			self._insert(interactive, token.start_pos)
		if token.type != "RBRACE" and not self._line_break_before(token):
			interactive.feed_token(token)
			return
		saved = _save(interactive)
		try:
			interactive.feed_token(token)
		except UnexpectedToken:
			_restore(interactive, saved)
			if token.start_pos == self.inserted_at or "_SEMI" not in interactive.accepts():
				raise
			self._insert(interactive, token.start_pos)
			interactive.feed_token(token)

	def _ends_statement(self, interactive, token: Token) -> bool:
		previous = self.previous
		if previous is None or token.type == "_SEMI" or not self._line_break_before(token):
			return False
		if previous.type == "THROW":
			raise ParseError(f"line break after 'throw' at offset {previous.start_pos}")
		if previous.type in self.RESTRICTED:
			return "_SEMI" in interactive.accepts()
		if token.type in self.UPDATE:
			# Statement starts take `;` too; they also take an identifier.
			accepted = interactive.accepts()
			return "_SEMI" in accepted and "IDENT" not in accepted
		return False

	def _finish(self, interactive) -> Tree:
		saved = _save(interactive)
		try:
			return interactive.feed_eof(self.previous)
		except UnexpectedToken:
			_restore(interactive, saved)
			if "_SEMI" not in interactive.accepts():
				raise
			self._insert(interactive, len(self.text))
			return interactive.feed_eof(self.previous)

	def _insert(self, interactive, pos: int) -> None:
		logger.debug("inserting ';' before offset %d", pos)
		self.inserted_at = pos
		interactive.feed_token(Token("_SEMI", ";"))

	def _line_break_before(self, token: Token) -> bool:
		return _follows_line_break(self.text, token.start_pos)


# A rejected token may already have triggered reductions.
def _save(interactive):
	state = interactive.parser_state
	return list(state.state_stack), list(state.value_stack)


def _restore(interactive, saved) -> None:
	state = interactive.parser_state
	state.state_stack[:] = saved[0]
	state.value_stack[:] = saved[1]


def _follows_line_break(text: str, pos: int) -> bool:
	i = pos - 1
	while i >= 0:
		ch = text[i]
		if ch in _LINE_TERMINATORS:
			return True
		if ch == "/" and i > 0 and text[i - 1] == "*":
			start = text.rfind("/*", 0, i - 1)
			if start < 0:
				return False
			# A comment spanning lines counts as a line break.
			if any(c in _LINE_TERMINATORS for c in text[start:i]):
				return True
			i = start - 1
			continue
		if not ch.isspace():
			return False
		i -= 1
	return False


class _TreeBuilder:
	"""
	Turns one lark parse tree into jsast nodes.

	Collects a diagnostic for each syntax extension that is used while
	disabled in `options`, and for strict-mode violations.
	"""

	def __init__(self, options: ParseOptions) -> None:
		self.options = options
		self.diagnostics: List[Diagnostic] = []
		self.strict = options.use_strict
		self._reported: set = set()

	# --- diagnostics --------------------------------------------------------

	def _require(self, enabled: bool, code: str, what: str) -> None:
		if enabled or code in self._reported:
			return
		self._reported.add(code)
		self.diagnostics.append(Diagnostic(message=f"{what} is not enabled", code=code))

	def _strict_violation(self, code: str, message: str) -> None:
		if self.strict:
			self.diagnostics.append(Diagnostic(message=message, code=code))

	def _require_types(self) -> None:
		self._require(self.options.types, "E-TYPES", "type annotation syntax")

	# --- statements ---------------------------------------------------------

	def statement_list(self, children, *, directives: bool) -> Tuple[js.Statement, ...]:
		statements: List[js.Statement] = []
		in_prologue = directives
		for child in children:
			if in_prologue:
				text = _directive_text(child)
				if text is None:
					in_prologue = False
				else:
					if text == "use strict":
						self.strict = True
					literal = self._string_literal(child.children[0].children[0])
					statements.append(js.ExpressionStatement(literal, directive=text))
					continue
			statements.append(self.statement(child))
		return tuple(statements)

	def statement(self, tree: Tree) -> js.Statement:
		method = getattr(self, f"_stmt_{_name(tree)}", None)
		if method is None:
			raise ParseError(f"unsupported statement: {_name(tree)}")
		return method(tree)

	def _stmt_block(self, tree: Tree) -> js.BlockStatement:
		return js.BlockStatement(self.statement_list(tree.children, directives=False))

	def _stmt_empty_stmt(self, tree: Tree) -> js.EmptyStatement:
		return js.EmptyStatement()

	def _stmt_var_stmt(self, tree: Tree) -> js.VariableDeclaration:
		return self._var_decl(tree.children[0])

	def _var_decl(self, tree: Tree) -> js.VariableDeclaration:
		kind_node, *declarators = tree.children
		return js.VariableDeclaration(
			declarations=tuple(self._var_declarator(d) for d in declarators),
			kind=js.VariableKind(kind_node.children[0].value),
		)

	def _var_declarator(self, tree: Tree) -> js.VariableDeclarator:
		target = self.binding(tree.children[0])
		init = self.expression(tree.children[1]) if len(tree.children) > 1 else None
		return js.VariableDeclarator(id=target, init=init)

	def _stmt_expr_stmt(self, tree: Tree) -> js.ExpressionStatement:
		return js.ExpressionStatement(self.expression(tree.children[0]))

	def _stmt_if_stmt(self, tree: Tree) -> js.IfStatement:
		test, consequent, *rest = tree.children
		return js.IfStatement(
			test=self.expression(test),
			consequent=self.statement(consequent),
			alternate=self.statement(rest[0]) if rest else None,
		)

	def _stmt_while_stmt(self, tree: Tree) -> js.WhileStatement:
		test, body = tree.children
		return js.WhileStatement(self.expression(test), self.statement(body))

	def _stmt_do_while_stmt(self, tree: Tree) -> js.DoWhileStatement:
		body, test = tree.children
		return js.DoWhileStatement(self.statement(body), self.expression(test))

	def _stmt_for_stmt(self, tree: Tree) -> js.ForStatement:
		init = test = update = None
		body = None
		for child in tree.children:
			name = _name(child)
			if name == "for_init":
				inner = child.children[0]
				init = self._var_decl(inner) if _name(inner) == "var_decl" else self.expression(inner)
			elif name == "for_test":
				test = self.expression(child.children[0])
			elif name == "for_update":
				update = self.expression(child.children[0])
			else:
				body = self.statement(child)
		return js.ForStatement(init=init, test=test, update=update, body=body)

	def _stmt_for_in_stmt(self, tree: Tree) -> js.ForInStatement:
		kind_node, target, right, body = _subtrees(tree)
		left = js.VariableDeclaration(
			declarations=(js.VariableDeclarator(id=self.binding(target)),),
			kind=js.VariableKind(kind_node.children[0].value),
		)
		return js.ForInStatement(left, self.expression(right), self.statement(body))

	def _stmt_for_of_stmt(self, tree: Tree) -> js.ForOfStatement:
		parts = _subtrees(tree)
		is_async = _name(parts[0]) == "for_await"
		if is_async:
			parts = parts[1:]
		if len(parts) == 4:
			kind_node, target, right, body = parts
			left = js.VariableDeclaration(
				declarations=(js.VariableDeclarator(id=self.binding(target)),),
				kind=js.VariableKind(kind_node.children[0].value),
			)
		else:
			target, right, body = parts
			left = self._to_pattern(self.expression(target), binding=False)
		return js.ForOfStatement(left, self.expression(right), self.statement(body), is_async=is_async)

	def _stmt_for_cover_stmt(self, tree: Tree) -> js.ForInStatement:
		head, body = tree.children
		if _name(head) != "binary" or head.children[1].children[0].value != "in":
			raise ParseError("expected ';' or 'in' in for statement head")
		operands = [self.expression(child) for child in head.children[0::2]]
		ops = [child.children[0].value for child in head.children[1::2]]
		left = self._to_pattern(operands[0], binding=False)
		right = self._fold_binary(operands[1:], ops[1:])
		return js.ForInStatement(left, right, self.statement(body))

	def _stmt_return_stmt(self, tree: Tree) -> js.ReturnStatement:
		if tree.children:
			return js.ReturnStatement(self.expression(tree.children[0]))
		return js.ReturnStatement()

	def _stmt_break_stmt(self, tree: Tree) -> js.BreakStatement:
		return js.BreakStatement(_optional_identifier(tree))

	def _stmt_continue_stmt(self, tree: Tree) -> js.ContinueStatement:
		return js.ContinueStatement(_optional_identifier(tree))

	def _stmt_throw_stmt(self, tree: Tree) -> js.ThrowStatement:
		return js.ThrowStatement(self.expression(tree.children[0]))

	def _stmt_try_stmt(self, tree: Tree) -> js.TryStatement:
		block = self._stmt_block(tree.children[0])
		handler = finalizer = None
		for child in tree.children[1:]:
			if _name(child) == "catch_clause":
				handler = self._catch_clause(child)
			else:
				finalizer = self._stmt_block(child.children[0])
		return js.TryStatement(block, handler=handler, finalizer=finalizer)

	def _catch_clause(self, tree: Tree) -> js.CatchClause:
		*param, body = tree.children
		return js.CatchClause(
			body=self._stmt_block(body),
			param=self.binding(param[0]) if param else None,
		)

	def _stmt_switch_stmt(self, tree: Tree) -> js.SwitchStatement:
		discriminant, *cases = tree.children
		built = []
		for case in cases:
			if _name(case) == "default_case":
				built.append(js.SwitchCase(None, self.statement_list(case.children, directives=False)))
			else:
				test, *body = case.children
				built.append(js.SwitchCase(self.expression(test), self.statement_list(body, directives=False)))
		return js.SwitchStatement(self.expression(discriminant), tuple(built))

	def _stmt_labeled_stmt(self, tree: Tree) -> js.LabeledStatement:
		label, body = tree.children
		return js.LabeledStatement(js.Identifier(label.value), self.statement(body))

	def _stmt_debugger_stmt(self, tree: Tree) -> js.DebuggerStatement:
		return js.DebuggerStatement()

	def _stmt_function_decl(self, tree: Tree) -> js.FunctionDeclaration:
		return js.FunctionDeclaration(self._function(tree))

	def _stmt_class_decl(self, tree: Tree) -> js.ClassDeclaration:
		return js.ClassDeclaration(self._class(tree))

	# --- modules ------------------------------------------------------------

	def _stmt_import_decl(self, tree: Tree) -> js.ImportDeclaration:
		*clauses, source = tree.children
		specifiers = []
		for clause in clauses:
			parts = clause.children if _name(clause) == "import_clause" else [clause]
			for part in parts:
				specifiers.extend(self._import_specifiers(part))
		return js.ImportDeclaration(tuple(specifiers), self._string_literal(source))

	def _import_specifiers(self, tree: Tree):
		name = _name(tree)
		if name == "import_default":
			return [js.ImportDefaultSpecifier(js.Identifier(tree.children[0].value))]
		if name == "import_namespace":
			return [js.ImportNamespaceSpecifier(js.Identifier(tree.children[0].value))]
		specifiers = []
		for spec in tree.children:
			imported = _ident_name(spec.children[0])
			local = js.Identifier(spec.children[1].value) if len(spec.children) > 1 else imported
			specifiers.append(js.ImportSpecifier(imported, local))
		return specifiers

	def _stmt_import_bare(self, tree: Tree) -> js.ImportDeclaration:
		return js.ImportDeclaration((), self._string_literal(tree.children[0]))

	def _stmt_export_all(self, tree: Tree) -> js.ExportAllDeclaration:
		return js.ExportAllDeclaration(self._string_literal(tree.children[0]))

	def _stmt_export_all_as(self, tree: Tree) -> js.ExportAllDeclaration:
		self._require(self.options.export_star_as, "E-EXPORT-STAR-AS", "`export * as` syntax")
		exported, source = tree.children
		return js.ExportAllDeclaration(self._string_literal(source), exported=_ident_name(exported))

	def _stmt_export_default(self, tree: Tree) -> js.ExportDefaultDeclaration:
		value = tree.children[0]
		name = _name(value)
		if name == "default_function":
			return js.ExportDefaultDeclaration(js.FunctionDeclaration(self._function(value)))
		if name == "default_class":
			return js.ExportDefaultDeclaration(js.ClassDeclaration(self._class(value)))
		return js.ExportDefaultDeclaration(self.expression(value))

	def _stmt_export_named(self, tree: Tree) -> js.ExportNamedDeclaration:
		clause, *source = tree.children
		specifiers = []
		for spec in clause.children:
			local = _ident_name(spec.children[0])
			exported = _ident_name(spec.children[1]) if len(spec.children) > 1 else local
			specifiers.append(js.ExportSpecifier(local, exported))
		return js.ExportNamedDeclaration(
			specifiers=tuple(specifiers),
			source=self._string_literal(source[0].children[0]) if source else None,
		)

	def _stmt_export_declaration(self, tree: Tree) -> js.ExportNamedDeclaration:
		return js.ExportNamedDeclaration(declaration=self.statement(tree.children[0]))

	# --- functions and classes ----------------------------------------------

	def _function(self, tree: Tree, *, is_async: bool = False, is_generator: bool = False) -> js.Function:
		"""Build the function shape from a declaration, expression or method tree."""
		fn_id = None
		tparams = None
		params = js.FunctionParams()
		return_type = None
		body = None
		for child in tree.children:
			if isinstance(child, Token):
				fn_id = js.Identifier(child.value)
				continue
			name = _name(child)
			if name not in _FUNCTION_PARTS:
				continue
			if name == "async_kw":
				is_async = True
			elif name == "generator_star":
				is_generator = True
			elif name == "type_params":
				tparams = self._type_params(child)
			elif name == "params":
				params = self._params(child)
			elif name == "return_annot":
				return_type = self._type_annotation(child)
			else:
				body = self._function_body(child)
		return js.Function(
			id=fn_id,
			params=params,
			body=body,
			is_async=is_async,
			is_generator=is_generator,
			expression=False,
			return_type=return_type,
			tparams=tparams,
		)

	def _function_body(self, block: Tree) -> js.BlockStatement:
		outer_strict = self.strict
		try:
			return js.BlockStatement(self.statement_list(block.children, directives=True))
		finally:
			self.strict = outer_strict

	def _params(self, tree: Tree) -> js.FunctionParams:
		if not tree.children:
			return js.FunctionParams()
		params = []
		rest = None
		for child in tree.children[0].children:
			if _name(child) == "rest_param":
				rest = self._rest(child)
			else:
				params.append(self.binding(child))
		return js.FunctionParams(tuple(params), rest)

	def _rest(self, tree: Tree) -> js.RestElement:
		return js.RestElement(self.binding(tree.children[0]))

	def _decorators(self, tree: Tree) -> Tuple[js.Decorator, ...]:
		self._require(self.options.decorators, "E-DECORATORS", "decorator syntax")
		return tuple(js.Decorator(self.expression(d.children[0])) for d in tree.children)

	def _class(self, tree: Tree) -> js.Class:
		class_id = None
		tparams = None
		extends = None
		implements: Tuple[js.ClassImplements, ...] = ()
		decorators: Tuple[js.Decorator, ...] = ()
		body = js.ClassBody()
		for child in tree.children:
			if isinstance(child, Token):
				class_id = js.Identifier(child.value)
				continue
			name = _name(child)
			if name == "decorators":
				decorators = self._decorators(child)
			elif name == "type_params":
				tparams = self._type_params(child)
			elif name == "class_extends":
				superclass, *targs = child.children
				extends = js.ClassExtends(
					self.expression(superclass),
					self._type_args(targs[0]) if targs else None,
				)
			elif name == "class_implements":
				self._require_types()
				implements = tuple(self._implements(item) for item in child.children)
			elif name == "class_body":
				body = js.ClassBody(tuple(
					self._class_element(element)
					for element in child.children
					if _name(element) != "class_empty"
				))
		return js.Class(
			body=body,
			id=class_id,
			tparams=tparams,
			extends=extends,
			implements=implements,
			decorators=decorators,
		)

	def _implements(self, tree: Tree) -> js.ClassImplements:
		ident, *targs = tree.children
		return js.ClassImplements(js.Identifier(ident.value), self._type_args(targs[0]) if targs else None)

	def _class_element(self, tree: Tree) -> js.ClassElement:
		decorators: Tuple[js.Decorator, ...] = ()
		static = False
		modifiers: Tuple[str, ...] = ()
		key = None
		for child in tree.children:
			name = _name(child)
			if name == "decorators":
				decorators = self._decorators(child)
			elif name == "static_kw":
				static = True
			elif name == "method_kind":
				modifiers = tuple(token.value for token in child.children)
			elif name in _PROPERTY_KEY_RULES and key is None:
				key = self._property_key(child)
		if _name(tree) == "class_property":
			return self._class_property(tree, key, static, decorators)
		kind, function = self._method(tree, modifiers)
		if kind == "method" and not static and isinstance(key, js.Identifier) and key.name == "constructor":
			kind = "constructor"
		return js.ClassMethod(key=key, value=function, kind=kind, static=static, decorators=decorators)

	def _class_property(self, tree: Tree, key, static: bool, decorators) -> js.ClassProperty:
		if decorators:
			raise ParseError("decorators on class properties are not supported")
		if static:
			self._require(self.options.class_static_fields, "E-CLASS-STATIC-FIELDS", "static class fields")
		else:
			self._require(self.options.class_instance_fields, "E-CLASS-INSTANCE-FIELDS", "class instance fields")
		annot = None
		value = None
		seen_key = False
		for child in tree.children:
			name = _name(child)
			if name == "type_annot":
				annot = self._type_annotation(child)
			elif name in _PROPERTY_KEY_RULES and not seen_key:
				seen_key = True
			elif name not in ("decorators", "static_kw"):
				value = self.expression(child)
		return js.ClassProperty(key=key, value=value, annot=annot, static=static)

	def _method(self, tree: Tree, modifiers: Tuple[str, ...]) -> Tuple[str, js.Function]:
		kind = "method"
		if modifiers and modifiers[0] in ("get", "set"):
			kind = modifiers[0]
		function = self._function(
			tree,
			is_async="async" in modifiers,
			is_generator="*" in modifiers,
		)
		return kind, function

	def _property_key(self, tree: Tree) -> js.PropertyKey:
		name = _name(tree)
		if name == "ident_name":
			return _ident_name(tree)
		if name == "string_key":
			return self._string_literal(tree.children[0])
		if name == "number_key":
			return self._number_literal(tree.children[0])
		return js.ComputedKey(self.expression(tree.children[0]))

	# --- patterns -----------------------------------------------------------

	def binding(self, tree: Tree) -> js.Pattern:
		name = _name(tree)
		if name == "binding_ident":
			ident, *rest = tree.children
			optional = False
			annot = None
			for child in rest:
				if _name(child) == "optional_mark":
					optional = True
				else:
					annot = self._type_annotation(child)
			return js.IdentifierPattern(js.Identifier(ident.value), annot=annot, optional=optional)
		if name == "binding_default":
			target, default = tree.children
			return js.AssignmentPattern(self.binding(target), self.expression(default))
		if name == "array_binding":
			annot = None
			elements = []
			for child in tree.children:
				if isinstance(child, Tree) and _name(child) == "type_annot":
					annot = self._type_annotation(child)
				else:
					elements.append(child)
			return js.ArrayPattern(_holey(elements, self._array_binding_element), annot=annot)
		if name == "object_binding":
			annot = None
			properties = []
			for child in tree.children:
				if _name(child) == "type_annot":
					annot = self._type_annotation(child)
				else:
					properties.append(self._binding_property(child))
			return js.ObjectPattern(tuple(properties), annot=annot)
		raise ParseError(f"unsupported binding: {name}")

	def _array_binding_element(self, tree: Tree):
		if _name(tree) == "rest_param":
			return self._rest(tree)
		return self.binding(tree)

	def _binding_property(self, tree: Tree):
		name = _name(tree)
		if name == "rest_param":
			return self._rest(tree)
		if name == "binding_shorthand":
			key = _ident_name(tree.children[0])
			pattern: js.Pattern = js.IdentifierPattern(key)
			if len(tree.children) > 1:
				pattern = js.AssignmentPattern(pattern, self.expression(tree.children[1]))
			return js.ObjectPatternProperty(key, pattern, shorthand=True)
		key_node, target = tree.children
		return js.ObjectPatternProperty(self._property_key(key_node), self.binding(target))

	def _to_pattern(self, expr: js.Expression, *, binding: bool) -> js.Pattern:
		"""
		Reinterpret an expression parsed through a cover form as a pattern.

		With `binding=False` (assignment and for-loop targets) member
		expressions are accepted and wrapped in `ExpressionPattern`.
		"""
		if isinstance(expr, js.Identifier):
			return js.IdentifierPattern(expr)
		if isinstance(expr, js.ArrayExpression):
			elements = []
			for element in expr.elements:
				if element is None:
					elements.append(None)
				elif isinstance(element, js.SpreadElement):
					elements.append(js.RestElement(self._to_pattern(element.argument, binding=binding)))
				else:
					elements.append(self._to_pattern(element, binding=binding))
			return js.ArrayPattern(tuple(elements))
		if isinstance(expr, js.ObjectExpression):
			properties = []
			for prop in expr.properties:
				if isinstance(prop, js.SpreadElement):
					properties.append(js.RestElement(self._to_pattern(prop.argument, binding=binding)))
				elif isinstance(prop, js.ObjectProperty):
					properties.append(js.ObjectPatternProperty(
						prop.key,
						self._to_pattern(prop.value, binding=binding),
						shorthand=prop.shorthand,
					))
				else:
					raise ParseError("object methods cannot appear in a destructuring pattern")
			return js.ObjectPattern(tuple(properties))
		if isinstance(expr, js.AssignmentExpression) and expr.operator is js.AssignmentOperator.ASSIGN:
			if binding and isinstance(expr.left, js.ExpressionPattern):
				raise ParseError("invalid binding target: MemberExpression")
			return js.AssignmentPattern(expr.left, expr.right)
		if not binding and isinstance(expr, js.MemberExpression):
			return js.ExpressionPattern(expr)
		kind = "binding" if binding else "assignment"
		raise ParseError(f"invalid {kind} target: {type(expr).__name__}")

	# --- expressions --------------------------------------------------------

	def expression(self, tree: Tree) -> js.Expression:
		method = getattr(self, f"_expr_{_name(tree)}", None)
		if method is None:
			raise ParseError(f"unsupported expression: {_name(tree)}")
		return method(tree)

	def _expr_identifier(self, tree: Tree) -> js.Identifier:
		return js.Identifier(tree.children[0].value)

	def _expr_this_expr(self, tree: Tree) -> js.ThisExpression:
		return js.ThisExpression()

	def _expr_super_expr(self, tree: Tree) -> js.Super:
		return js.Super()

	def _expr_number_lit(self, tree: Tree) -> js.Literal:
		return self._number_literal(tree.children[0])

	def _expr_string_lit(self, tree: Tree) -> js.Literal:
		return self._string_literal(tree.children[0])

	def _expr_true_lit(self, tree: Tree) -> js.Literal:
		return js.Literal(True, "true")

	def _expr_false_lit(self, tree: Tree) -> js.Literal:
		return js.Literal(False, "false")

	def _expr_null_lit(self, tree: Tree) -> js.Literal:
		return js.Literal(None, "null")

	def _number_literal(self, token: Token) -> js.Literal:
		raw = token.value
		if lexical.is_legacy_octal(raw):
			self._strict_violation("E-STRICT-OCTAL", f"legacy octal literal {raw} in strict mode")
		return js.Literal(lexical.decode_number(raw), raw)

	def _string_literal(self, token: Token) -> js.Literal:
		raw = token.value
		if lexical.has_octal_escape(raw):
			self._strict_violation("E-STRICT-OCTAL-ESCAPE", "octal escape sequence in strict mode")
		return js.Literal(lexical.decode_string(raw), raw)

	def _expr_array_lit(self, tree: Tree) -> js.ArrayExpression:
		return js.ArrayExpression(_holey(tree.children, self._element))

	def _element(self, tree: Tree):
		if _name(tree) == "spread_elem":
			return js.SpreadElement(self.expression(tree.children[0]))
		return self.expression(tree)

	def _expr_object_lit(self, tree: Tree) -> js.ObjectExpression:
		return js.ObjectExpression(tuple(self._object_member(member) for member in tree.children))

	def _object_member(self, tree: Tree):
		name = _name(tree)
		if name == "spread_elem":
			return js.SpreadElement(self.expression(tree.children[0]))
		if name == "object_shorthand":
			ident = _ident_name(tree.children[0])
			return js.ObjectProperty(ident, ident, shorthand=True)
		if name == "object_prop":
			key, value = tree.children
			return js.ObjectProperty(self._property_key(key), self.expression(value))
		modifiers: Tuple[str, ...] = ()
		key = None
		for child in tree.children:
			child_name = _name(child)
			if child_name == "method_kind":
				modifiers = tuple(token.value for token in child.children)
			elif child_name in _PROPERTY_KEY_RULES and key is None:
				key = self._property_key(child)
		kind, function = self._method(tree, modifiers)
		return js.ObjectMethod(key=key, value=function, kind=kind)

	def _expr_paren_cover(self, tree: Tree) -> js.Expression:
		items = tree.children
		if not items:
			raise ParseError("empty parentheses are only valid as arrow function parameters")
		if any(_name(item) == "rest_param" for item in items):
			raise ParseError("rest element is only valid in arrow function parameters")
		typed = [item for item in items if _name(item) == "typed_item"]
		if typed:
			if len(items) > 1:
				raise ParseError("a type cast must be the only expression in its parentheses")
			self._require_types()
			inner, annot = typed[0].children
			return js.TypeCastExpression(self.expression(inner), js.TypeAnnotation(self.type_(annot)))
		if len(items) == 1:
			return self.expression(items[0])
		return js.SequenceExpression(tuple(self.expression(item) for item in items))

	def _expr_function_expr(self, tree: Tree) -> js.FunctionExpression:
		return js.FunctionExpression(self._function(tree))

	def _expr_class_expr(self, tree: Tree) -> js.ClassExpression:
		return js.ClassExpression(self._class(tree))

	def _expr_arrow_ident(self, tree: Tree) -> js.ArrowFunctionExpression:
		*head, param, body = tree.children
		params = js.FunctionParams((js.IdentifierPattern(js.Identifier(param.value)),))
		return self._arrow(bool(head), params, body)

	def _expr_arrow_cover(self, tree: Tree) -> js.ArrowFunctionExpression:
		*head, cover, body = tree.children
		return self._arrow(bool(head), self._arrow_params(cover), body)

	def _arrow_params(self, cover: Tree) -> js.FunctionParams:
		params = []
		rest = None
		items = cover.children
		for index, item in enumerate(items):
			name = _name(item)
			if name == "rest_param":
				if index != len(items) - 1:
					raise ParseError("rest parameter must be the last parameter")
				rest = self._rest(item)
			elif name == "typed_item":
				inner, annot = item.children
				target = self._to_pattern(self.expression(inner), binding=True)
				if not isinstance(target, js.IdentifierPattern):
					raise ParseError("only plain parameters can carry a type annotation")
				params.append(replace(target, annot=self._type_annotation_of(annot)))
			else:
				params.append(self._to_pattern(self.expression(item), binding=True))
		return js.FunctionParams(tuple(params), rest)

	def _arrow(self, is_async: bool, params: js.FunctionParams, body: Tree) -> js.ArrowFunctionExpression:
		if _name(body) == "block":
			built = self._function_body(body)
		else:
			built = self.expression(body)
		function = js.Function(
			id=None,
			params=params,
			body=built,
			is_async=is_async,
			expression=not isinstance(built, js.BlockStatement),
		)
		return js.ArrowFunctionExpression(function)

	def _expr_sequence(self, tree: Tree) -> js.SequenceExpression:
		return js.SequenceExpression(tuple(self.expression(child) for child in tree.children))

	def _expr_assignment(self, tree: Tree) -> js.AssignmentExpression:
		left, op_node, right = tree.children
		operator = js.AssignmentOperator(op_node.children[0].value)
		target = self.expression(left)
		if operator is not js.AssignmentOperator.ASSIGN and not isinstance(
			target, (js.Identifier, js.MemberExpression)
		):
			raise ParseError(f"invalid target for '{operator.value}'")
		return js.AssignmentExpression(
			left=self._to_pattern(target, binding=False),
			right=self.expression(right),
			operator=operator,
		)

	def _expr_yield_expr(self, tree: Tree) -> js.YieldExpression:
		if tree.children:
			return js.YieldExpression(self.expression(tree.children[0]))
		return js.YieldExpression()

	def _expr_yield_delegate(self, tree: Tree) -> js.YieldExpression:
		return js.YieldExpression(self.expression(tree.children[0]), delegate=True)

	def _expr_conditional(self, tree: Tree) -> js.ConditionalExpression:
		test, consequent, alternate = (self.expression(child) for child in tree.children)
		return js.ConditionalExpression(test, consequent, alternate)

	def _expr_binary(self, tree: Tree) -> js.Expression:
		operands = [self.expression(child) for child in tree.children[0::2]]
		ops = [child.children[0].value for child in tree.children[1::2]]
		return self._fold_binary(operands, ops)

	def _fold_binary(self, operands: List[js.Expression], ops: List[str]) -> js.Expression:
		output = [operands[0]]
		pending: List[str] = []
		for op, operand in zip(ops, operands[1:]):
			while pending and _binds_before(pending[-1], op):
				self._reduce_binary(output, pending.pop())
			pending.append(op)
			output.append(operand)
		while pending:
			self._reduce_binary(output, pending.pop())
		return output[0]

	def _reduce_binary(self, output: List[js.Expression], op: str) -> None:
		right = output.pop()
		left = output.pop()
		if op in _LOGICAL_OPERATORS:
			if op == "??":
				self._require(self.options.nullish_coalescing, "E-NULLISH-COALESCING", "nullish coalescing")
			output.append(js.LogicalExpression(js.LogicalOperator(op), left, right))
		else:
			output.append(js.BinaryExpression(js.BinaryOperator(op), left, right))

	def _expr_unary(self, tree: Tree) -> js.UnaryExpression:
		op_node, argument = tree.children
		operator = js.UnaryOperator(op_node.children[0].value)
		built = self.expression(argument)
		if operator is js.UnaryOperator.DELETE and isinstance(built, js.Identifier):
			self._strict_violation("E-STRICT-DELETE", f"cannot delete unqualified name '{built.name}' in strict mode")
		return js.UnaryExpression(operator, built)

	def _expr_postfix_update(self, tree: Tree) -> js.UpdateExpression:
		argument, op_node = tree.children
		return js.UpdateExpression(js.UpdateOperator(op_node.children[0].value), self.expression(argument), prefix=False)

	def _expr_prefix_update(self, tree: Tree) -> js.UpdateExpression:
		op_node, argument = tree.children
		return js.UpdateExpression(js.UpdateOperator(op_node.children[0].value), self.expression(argument), prefix=True)

	def _expr_chain(self, tree: Tree) -> js.Expression:
		head, *suffixes = tree.children
		expr = self.expression(head)
		in_chain = False
		for suffix in suffixes:
			kind = _name(suffix)
			optional = kind.startswith("opt_")
			if optional:
				self._require(self.options.optional_chaining, "E-OPTIONAL-CHAINING", "optional chaining")
				in_chain = True
			if kind.endswith("dot_suffix"):
				node = js.MemberExpression(expr, js.Identifier(suffix.children[0].value))
			elif kind.endswith("index_suffix"):
				node = js.MemberExpression(expr, self.expression(suffix.children[0]), computed=True)
			else:
				node = js.CallExpression(expr, self._arguments(suffix.children[0]))
			# Links after the first `?.` stay inside the chain with optional=False.
			if in_chain and isinstance(node, js.MemberExpression):
				expr = js.OptionalMemberExpression(node, optional)
			elif in_chain:
				expr = js.OptionalCallExpression(node, optional)
			else:
				expr = node
		return expr

	def _arguments(self, tree: Tree) -> Tuple[js.Argument, ...]:
		return tuple(self._element(child) for child in tree.children)

	def _expr_decorator_member(self, tree: Tree) -> js.MemberExpression:
		obj, prop = tree.children
		return js.MemberExpression(self.expression(obj), js.Identifier(prop.value))

	def _expr_decorator_call(self, tree: Tree) -> js.CallExpression:
		callee, args = tree.children
		return js.CallExpression(self.expression(callee), self._arguments(args))

	def _expr_new_expr(self, tree: Tree) -> js.NewExpression:
		callee, *args = tree.children
		return js.NewExpression(self.expression(callee), self._arguments(args[0]) if args else ())

	def _expr_new_member(self, tree: Tree) -> js.MemberExpression:
		obj, prop = tree.children
		return js.MemberExpression(self.expression(obj), js.Identifier(prop.value))

	def _expr_new_index(self, tree: Tree) -> js.MemberExpression:
		obj, prop = tree.children
		return js.MemberExpression(self.expression(obj), self.expression(prop), computed=True)

	# --- JSX ----------------------------------------------------------------

	def _expr_jsx_element(self, tree: Tree) -> js.JSXElement:
		start, *children, closing = tree.children
		name, attributes = self._jsx_tag(start)
		closing_name = self._jsx_name(closing.children[0])
		opened = js.jsx_name_text(name)
		closed = js.jsx_name_text(closing_name)
		if opened != closed:
			raise ParseError(f"expected closing tag </{opened}>, found </{closed}>")
		return js.JSXElement(
			opening=js.JSXOpeningElement(name, self_closing=False, attributes=attributes),
			closing=js.JSXClosingElement(closing_name),
			children=tuple(self._jsx_child(child) for child in children),
		)

	def _expr_jsx_self_closing(self, tree: Tree) -> js.JSXElement:
		name, attributes = self._jsx_tag(tree.children[0])
		return js.JSXElement(opening=js.JSXOpeningElement(name, self_closing=True, attributes=attributes))

	def _jsx_tag(self, tree: Tree):
		name_node, *attrs = tree.children
		return self._jsx_name(name_node), tuple(self._jsx_attribute(attr) for attr in attrs)

	def _jsx_name(self, tree: Tree) -> js.JSXName:
		if _name(tree) == "jsx_member":
			obj, prop = tree.children
			return js.JSXMemberExpression(self._jsx_name(obj), _jsx_identifier(prop))
		return _jsx_identifier(tree)

	def _jsx_attribute(self, tree: Tree):
		if _name(tree) == "jsx_spread_attribute":
			return js.JSXSpreadAttribute(self.expression(tree.children[0]))
		name_node, *value = tree.children
		if not value:
			return js.JSXAttribute(_jsx_identifier(name_node))
		value_node = value[0]
		kind = _name(value_node)
		if kind == "jsx_string":
			raw = value_node.children[0].value
			built = js.Literal(html.unescape(raw[1:-1]), raw)
		elif kind == "jsx_attr_expression":
			built = js.JSXExpressionContainer(self.expression(value_node.children[0]))
		else:
			built = self.expression(value_node)
		return js.JSXAttribute(_jsx_identifier(name_node), built)

	def _jsx_child(self, tree: Tree) -> js.JSXChild:
		kind = _name(tree)
		if kind == "jsx_text":
			raw = tree.children[0].value
			return js.JSXText(html.unescape(raw), raw)
		if kind == "jsx_expression_child":
			if tree.children:
				return js.JSXExpressionContainer(self.expression(tree.children[0]))
			return js.JSXExpressionContainer(js.JSXEmptyExpression())
		return self.expression(tree)

	# --- types --------------------------------------------------------------

	def _type_annotation(self, tree: Tree) -> js.TypeAnnotation:
		return self._type_annotation_of(tree.children[0])

	def _type_annotation_of(self, tree: Tree) -> js.TypeAnnotation:
		self._require_types()
		return js.TypeAnnotation(self.type_(tree))

	def type_(self, tree: Tree) -> js.Type:
		name = _name(tree)
		if name == "type_ref":
			type_name, *targs = tree.children
			ident = self._type_name(type_name)
			if not targs and isinstance(ident, js.Identifier) and ident.name in _KEYWORD_TYPES:
				return js.KeywordType(ident.name)
			return js.GenericType(ident, self._type_args(targs[0]) if targs else None)
		if name == "union_t":
			return js.UnionType(tuple(self.type_(child) for child in tree.children))
		if name == "intersection_t":
			return js.IntersectionType(tuple(self.type_(child) for child in tree.children))
		if name == "nullable_t":
			return js.NullableType(self.type_(tree.children[0]))
		if name == "array_t":
			return js.ArrayType(self.type_(tree.children[0]))
		if name == "tuple_t":
			return js.TupleType(tuple(self.type_(child) for child in tree.children))
		if name == "object_t":
			return js.ObjectType(tuple(self._object_type_property(child) for child in tree.children))
		if name == "string_t":
			raw = tree.children[0].value
			return js.StringLiteralType(lexical.decode_string(raw), raw)
		if name == "number_t":
			raw = tree.children[0].value
			return js.NumberLiteralType(lexical.decode_number(raw), raw)
		if name == "negative_number_t":
			raw = tree.children[0].value
			return js.NumberLiteralType(-lexical.decode_number(raw), f"-{raw}")
		if name in ("true_t", "false_t"):
			return js.BooleanLiteralType(name == "true_t")
		if name == "null_t":
			return js.KeywordType("null")
		if name == "void_t":
			return js.KeywordType("void")
		raise ParseError(f"unsupported type: {name}")

	def _type_name(self, tree: Tree):
		if _name(tree) == "type_qualified":
			qualification, ident = tree.children
			return js.QualifiedTypeIdentifier(self._type_name(qualification), js.Identifier(ident.value))
		return js.Identifier(tree.children[0].value)

	def _object_type_property(self, tree: Tree) -> js.ObjectTypeProperty:
		key_node, *rest = tree.children
		if _name(key_node) == "type_key_string":
			token = key_node.children[0]
			key = js.Literal(lexical.decode_string(token.value), token.value)
		else:
			key = _ident_name(key_node.children[0])
		optional = len(rest) > 1
		return js.ObjectTypeProperty(key, self.type_(rest[-1]), optional=optional)

	def _type_args(self, tree: Tree) -> js.TypeArgs:
		self._require_types()
		return js.TypeArgs(tuple(self.type_(child) for child in tree.children))

	def _type_params(self, tree: Tree) -> js.TypeParameters:
		self._require_types()
		params = []
		for param in tree.children:
			ident, *rest = param.children
			bound = None
			default = None
			for child in rest:
				if _name(child) == "type_annot":
					bound = self._type_annotation(child)
				else:
					default = self.type_(child)
			params.append(js.TypeParameter(ident.value, bound=bound, default=default))
		return js.TypeParameters(tuple(params))


def _binds_before(left: str, right: str) -> bool:
	"""True when the pending operator `left` must be applied before `right`."""
	if left == right == "**":
		return False
	return _PRECEDENCE[left] >= _PRECEDENCE[right]


_NOTHING = object()


def _holey(children, build) -> tuple:
	"""
	Build array elements from a bracketed list that kept its `[`, `,`, `]`
	tokens, so `[a, , b]` yields a `None` hole in the middle.
	"""
	elements = []
	pending = _NOTHING
	for child in children:
		if isinstance(child, Token):
			if child.value == ",":
				elements.append(None if pending is _NOTHING else pending)
				pending = _NOTHING
			continue
		pending = build(child)
	if pending is not _NOTHING:
		elements.append(pending)
	return tuple(elements)


def _directive_text(tree: Tree) -> Optional[str]:
	"""Return the raw directive text if `tree` is a bare string expression statement."""
	if _name(tree) != "expr_stmt":
		return None
	expr = tree.children[0]
	if not isinstance(expr, Tree) or _name(expr) != "string_lit":
		return None
	return expr.children[0].value[1:-1]


def _subtrees(tree: Tree) -> List[Tree]:
	return [child for child in tree.children if isinstance(child, Tree)]


def _optional_identifier(tree: Tree) -> Optional[js.Identifier]:
	if tree.children:
		return js.Identifier(tree.children[0].value)
	return None


def _ident_name(tree: Tree) -> js.Identifier:
	return js.Identifier(tree.children[0].value)


def _jsx_identifier(tree: Tree) -> js.JSXIdentifier:
	return js.JSXIdentifier("".join(token.value for token in tree.children))


def _name(node: Tree | Token) -> str:
	if isinstance(node, Tree):
		data = node.data
		if isinstance(data, Token):
			return data.value
		return data
	if isinstance(node, Token):
		return node.type
	return str(node)
