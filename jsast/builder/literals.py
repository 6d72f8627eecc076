# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Literal builders.

`string` renders its raw text in double-quoted JSON form; the JSON escape
table is a subset of the one the parser decodes, so the raw text reads back
as the same value. `number` keeps the caller's raw text verbatim.
"""

from __future__ import annotations

import json
from typing import Union

from .. import ast as js


def string(value: str) -> js.Literal:
	return js.Literal(value, json.dumps(value, ensure_ascii=False))


def number(value: Union[int, float], raw: str) -> js.Literal:
	# raw is not checked against value: `1e3` and `1000` are both fine for 1000.
	return js.Literal(value, raw)


def bool_(value: bool) -> js.Literal:
	return js.Literal(value, "true" if value else "false")


def null() -> js.Literal:
	return js.Literal(None, "null")
