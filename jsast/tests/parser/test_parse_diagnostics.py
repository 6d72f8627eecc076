# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Diagnostics for disabled syntax extensions and strict mode."""

import pytest

from jsast import ast as js
from jsast.parser import DEFAULT_PARSE_OPTIONS, Diagnostic, ParseOptions, ParserEntry, do_parse


def _codes(source: str, options: ParseOptions = DEFAULT_PARSE_OPTIONS, entry: ParserEntry = ParserEntry.MODULE_BODY) -> list:
	_, diagnostics = do_parse(options, entry, source)
	assert all(isinstance(d, Diagnostic) for d in diagnostics)
	return [d.code for d in diagnostics]


def test_default_options_enable_everything() -> None:
	source = """
		@dec class A { x = 1; static y = 2; }
		export * as ns from "m";
		let v: number = a?.b ?? c;
	"""
	assert _codes(source) == []
	assert DEFAULT_PARSE_OPTIONS.use_strict is False


@pytest.mark.parametrize(
	"options, source, code",
	[
		(ParseOptions(optional_chaining=False), "a?.b;", "E-OPTIONAL-CHAINING"),
		(ParseOptions(nullish_coalescing=False), "a ?? b;", "E-NULLISH-COALESCING"),
		(ParseOptions(decorators=False), "@d class A {}", "E-DECORATORS"),
		(ParseOptions(class_instance_fields=False), "class A { x = 1; }", "E-CLASS-INSTANCE-FIELDS"),
		(ParseOptions(class_static_fields=False), "class A { static x = 1; }", "E-CLASS-STATIC-FIELDS"),
		(ParseOptions(export_star_as=False), 'export * as ns from "m";', "E-EXPORT-STAR-AS"),
		(ParseOptions(types=False), "let x: number = 1;", "E-TYPES"),
		(ParseOptions(types=False), "(x: any);", "E-TYPES"),
	],
)
def test_disabled_feature_is_reported(options: ParseOptions, source: str, code: str) -> None:
	assert _codes(source, options) == [code]


def test_disabled_feature_still_parses() -> None:
	tree, diagnostics = do_parse(ParseOptions(optional_chaining=False), ParserEntry.EXPRESSION, "a?.b?.c")
	assert isinstance(tree, js.OptionalMemberExpression)
	assert len(diagnostics) == 1


def test_strict_mode_from_options() -> None:
	strict = ParseOptions(use_strict=True)
	assert _codes("010;", strict) == ["E-STRICT-OCTAL"]
	assert _codes("delete x;", strict) == ["E-STRICT-DELETE"]
	assert _codes("'\\07';", strict) == ["E-STRICT-OCTAL-ESCAPE"]
	assert _codes("delete x.y; '\\0';", strict) == []


def test_sloppy_mode_allows_legacy_forms() -> None:
	assert _codes("010; delete x;") == []


def test_use_strict_directive_enables_strict_mode() -> None:
	assert _codes('"use strict"; delete x;') == ["E-STRICT-DELETE"]


def test_function_directive_is_scoped_to_its_body() -> None:
	source = 'function f() { "use strict"; delete a; } delete b;'
	assert _codes(source) == ["E-STRICT-DELETE"]
