# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from .. import ast as js


def block(txt: str, *, loc: js.Located = js.LOC_NONE) -> js.BlockComment:
	return js.BlockComment(txt, loc=loc)


def line(txt: str, *, loc: js.Located = js.LOC_NONE) -> js.LineComment:
	return js.LineComment(txt, loc=loc)
