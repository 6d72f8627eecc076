# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Auxiliary parser output returned next to the tree."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Diagnostic:
	message: str
	code: str | None = None
	severity: str = "error"
