# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Label resolver tests: typed instruction lists and text listings.
"""

from __future__ import annotations

import pytest

from minasm import asm_nodes as M
from minasm.errors import LabelResolutionError
from minasm.labels import collect_labels, resolve_labels, resolve_text


def test_backward_jump():
	code = [
		M.Set("a", "5"),
		M.LabelDef("test"),
		M.Op("add", "a", "a", "1"),
		M.Jump("test"),
		M.End(),
	]
	assert resolve_labels(code) == [
		M.Set("a", "5"),
		M.Op("add", "a", "a", "1"),
		M.Jump(1),
		M.End(),
	]


def test_backward_jump_text():
	lines = [
		"set a 5",
		"label test",
		"op add a a 1",
		"jump test always null null",
		"end",
	]
	assert resolve_text(lines) == [
		"set a 5",
		"op add a a 1",
		"jump 1 always null null",
		"end",
	]


def test_forward_jump_keeps_condition():
	lines = [
		"set eax 5",
		"jump .test equal eax 0",
		"op add a a 1",
		"label .test",
		"end",
	]
	assert resolve_text(lines) == [
		"set eax 5",
		"jump 3 equal eax 0",
		"op add a a 1",
		"end",
	]


def test_multiple_labels():
	lines = [
		"set x 1",
		"label .whileLbl0",
		"op lessThanEq eax x 10",
		"jump .contLbl0 equal eax 0",
		"op add x x 1",
		"sensor eax block1 @enabled",
		"set y eax",
		"set eax y",
		"jump .ifLbl1 equal eax 0",
		"jump end always null null",
		"label .ifLbl1",
		'print "x is "',
		"print x",
		"printflush message1",
		"jump .whileLbl0 always null null",
		"label .contLbl0",
		"label end",
		"end",
	]
	assert resolve_text(lines) == [
		"set x 1",
		"op lessThanEq eax x 10",
		"jump 13 equal eax 0",
		"op add x x 1",
		"sensor eax block1 @enabled",
		"set y eax",
		"set eax y",
		"jump 9 equal eax 0",
		"jump 13 always null null",
		'print "x is "',
		"print x",
		"printflush message1",
		"jump 1 always null null",
		"end",
	]


def test_short_jump_form_text():
	lines = ["label top", "set a 1", "jump top always", "label done extra"]
	assert resolve_text(lines + ["jump done"]) == ["set a 1", "jump 0 always", "jump 2"]


def test_short_jump_to_undefined_label_is_fatal():
	with pytest.raises(LabelResolutionError) as excinfo:
		resolve_labels([M.RawJump("nowhere", ("always",))])
	assert excinfo.value.subject == "nowhere"


def test_trailing_label_resolves_to_length():
	code = [M.Jump("done"), M.Set("a", "1"), M.LabelDef("done")]
	assert resolve_labels(code) == [M.Jump(2), M.Set("a", "1")]


def test_consecutive_labels_share_index():
	stripped, labels = collect_labels([M.LabelDef("a"), M.LabelDef("b"), M.End()])
	assert stripped == [M.End()]
	assert labels == {"a": 0, "b": 0}


def test_undefined_label_is_fatal():
	with pytest.raises(LabelResolutionError) as excinfo:
		resolve_labels([M.Jump("nowhere"), M.End()])
	assert excinfo.value.reason_code == "undefined-label"
	assert excinfo.value.subject == "nowhere"
	assert "invalid jump to label 'nowhere'" in str(excinfo.value)


def test_duplicate_label_last_definition_wins():
	# Not rejected; the later position is used.
	code = [
		M.LabelDef("dup"),
		M.Set("a", "1"),
		M.LabelDef("dup"),
		M.Set("a", "2"),
		M.Jump("dup"),
	]
	assert resolve_labels(code) == [M.Set("a", "1"), M.Set("a", "2"), M.Jump(1)]


def test_resolution_is_idempotent():
	code = [M.LabelDef("top"), M.Set("a", "1"), M.Jump("top", "lessThan", "a", "3"), M.End()]
	once = resolve_labels(code)
	assert resolve_labels(once) == once
	text = resolve_text(["label top", "set a 1", "jump top always null null"])
	assert resolve_text(text) == text


def test_input_is_not_mutated():
	code = [M.LabelDef("x"), M.Jump("x")]
	resolve_labels(code)
	assert code == [M.LabelDef("x"), M.Jump("x")]
