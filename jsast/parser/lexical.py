# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Decoding of literal token text into Python values.

Handles the escape sequences of single- and double-quoted string literals and
the decimal, hexadecimal, octal, binary and legacy-octal number forms.
"""

from __future__ import annotations

import math
import re

_STRING_ESCAPE = re.compile(
	r"\\(u\{[0-9a-fA-F]+\}|u[0-9a-fA-F]{4}|x[0-9a-fA-F]{2}|[0-3][0-7]{0,2}|[4-7][0-7]?|\r\n|[\s\S])"
)

_SIMPLE_ESCAPES = {
	"n": "\n",
	"t": "\t",
	"r": "\r",
	"b": "\b",
	"f": "\f",
	"v": "\v",
	# Line continuations.
	"\n": "",
	"\r": "",
	"\r\n": "",
	"\u2028": "",
	"\u2029": "",
}

_LEGACY_OCTAL = re.compile(r"0[0-7]+")


def _replace_escape(match: re.Match) -> str:
	seq = match.group(1)
	if seq.startswith("u{"):
		return chr(int(seq[2:-1], 16))
	if seq[0] == "u" and len(seq) == 5:
		return chr(int(seq[1:], 16))
	if seq[0] == "x" and len(seq) == 3:
		return chr(int(seq[1:], 16))
	if seq[0] in "01234567":
		return chr(int(seq, 8))
	return _SIMPLE_ESCAPES.get(seq, seq)


def decode_string(raw: str) -> str:
	"""
	Return the value of a quoted string literal token, quotes included in `raw`.

	`\\uXXXX` pairs that form a UTF-16 surrogate pair are combined into one
	code point; a lone surrogate is kept as is.
	"""
	if len(raw) < 2 or raw[0] not in "\"'" or raw[-1] != raw[0]:
		raise ValueError(f"not a quoted string literal: {raw!r}")
	value = _STRING_ESCAPE.sub(_replace_escape, raw[1:-1])
	return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "surrogatepass")


def has_octal_escape(raw: str) -> bool:
	"""True when the literal uses a legacy octal escape (anything but a lone `\\0`)."""
	for match in _STRING_ESCAPE.finditer(raw):
		seq = match.group(1)
		if seq[0] in "01234567" and not (seq == "0" and not _next_is_digit(raw, match.end())):
			return True
	return False


def _next_is_digit(raw: str, pos: int) -> bool:
	return pos < len(raw) and raw[pos].isdigit()


def is_legacy_octal(raw: str) -> bool:
	return _LEGACY_OCTAL.fullmatch(raw) is not None


def _integer(digits: str, base: int) -> float:
	try:
		return float(int(digits, base))
	except OverflowError:
		return math.inf


def decode_number(raw: str) -> float:
	"""
	Return the numeric value of a number literal token.

	Values beyond the double range become infinity, as `1e400` does.
	"""
	prefix = raw[:2].lower()
	if prefix == "0x":
		return _integer(raw[2:], 16)
	if prefix == "0o":
		return _integer(raw[2:], 8)
	if prefix == "0b":
		return _integer(raw[2:], 2)
	if is_legacy_octal(raw):
		return _integer(raw, 8)
	return float(raw)
