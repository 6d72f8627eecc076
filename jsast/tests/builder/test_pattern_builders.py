# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Pattern builders and the invariants checked by pattern nodes."""

import pytest

from jsast import ast as js
from jsast.builder import expressions as E
from jsast.builder import literals
from jsast.builder import patterns as P
from jsast.errors import MalformedNodeError


def test_identifier_has_no_annotation() -> None:
	patt = P.identifier("x")
	assert patt.name == js.Identifier("x")
	assert patt.annot is None
	assert patt.optional is False
	assert patt.loc is js.LOC_NONE


def test_object_shorthand_binds_its_key() -> None:
	patt = P.object_("x")
	assert isinstance(patt, js.ObjectPattern)
	assert patt.annot is None
	assert len(patt.properties) == 1
	prop = patt.properties[0]
	assert prop.shorthand is True
	assert prop.key == js.Identifier("x")
	assert prop.pattern == P.identifier("x")


def test_array_wraps_single_identifier() -> None:
	assert P.array("a") == js.ArrayPattern((P.identifier("a"),))


def test_assignment_pairs_identifier_and_default() -> None:
	patt = P.assignment("a", literals.number(1, "1"))
	assert patt.left == P.identifier("a")
	assert patt.right == js.Literal(1, "1")


def test_general_array_and_object_forms() -> None:
	arr = P.array_of([P.identifier("a"), None, P.rest(P.identifier("r"))])
	assert arr.elements[1] is None
	assert isinstance(arr.elements[2], js.RestElement)
	obj = P.object_of([
		P.object_property(js.Identifier("k"), P.array("v")),
		P.rest(P.identifier("others")),
	])
	assert obj.properties[0].shorthand is False
	assert obj.properties[0].pattern == P.array("v")


def test_shorthand_with_default_is_accepted() -> None:
	prop = P.object_property(js.Identifier("x"), P.assignment("x", E.identifier("d")), shorthand=True)
	assert prop.shorthand


def test_shorthand_with_other_name_is_rejected() -> None:
	with pytest.raises(MalformedNodeError):
		P.object_property(js.Identifier("x"), P.identifier("y"), shorthand=True)


def test_assignment_default_cannot_be_a_pattern() -> None:
	with pytest.raises(MalformedNodeError):
		js.AssignmentPattern(P.identifier("a"), P.identifier("b"))
