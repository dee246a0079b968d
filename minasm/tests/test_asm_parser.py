# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

import pytest

from minasm import asm_nodes as M
from minasm.asm_parser import parse_line, parse_listing
from minasm.asm_printer import format_code, format_instr


def test_label_line():
	assert parse_line("label .ifLbl0") == M.LabelDef(".ifLbl0")


def test_symbolic_and_numeric_jump():
	assert parse_line("jump loop equal eax 0") == M.Jump("loop", "equal", "eax", "0")
	assert parse_line("jump 12 always null null") == M.Jump(12)


@pytest.mark.parametrize(
	"text",
	[
		"set a 5",
		'print "label x"',
		'print "x is "',
		"label",
		"labels x",
		"jump",
		"",
	],
)
def test_other_lines_stay_verbatim(text):
	assert parse_line(text) == M.Raw(text)


def test_quoted_label_name_is_not_a_label():
	assert parse_line('label "x"') == M.Raw('label "x"')
	assert parse_line('jump "x" always null null') == M.Raw('jump "x" always null null')


def test_label_with_extra_fields_keeps_name():
	assert parse_line("label top x") == M.LabelDef("top")


def test_jump_with_other_operand_shapes():
	assert parse_line("jump top always") == M.RawJump("top", ("always",))
	assert parse_line("jump top") == M.RawJump("top", ())
	assert parse_line('jump top equal x "s"') == M.RawJump("top", ("equal", "x", '"s"'))
	assert parse_line("jump 4 always") == M.RawJump(4, ("always",))


def test_listing_skips_blank_lines():
	listing = "set a 1\n\nlabel top\n  jump top always null null  \n"
	assert parse_listing(listing) == [M.Raw("set a 1"), M.LabelDef("top"), M.Jump("top")]


def test_printer_round_trip_of_generated_shapes():
	code = [
		M.Set("a", "1"),
		M.Op("add", "eax", "a", "2"),
		M.Write("eax", "bank1", "bp"),
		M.Read("ebx", "bank1", "bp"),
		M.Print("eax"),
		M.PrintFlush("message1"),
		M.Draw("line", ("5", "5", "10", "10", "0", "0")),
		M.DrawFlush("display1"),
		M.Sensor("eax", "block1", "@enabled"),
		M.End(),
	]
	assert format_code(code) == [
		"set a 1",
		"op add eax a 2",
		"write eax bank1 bp",
		"read ebx bank1 bp",
		"print eax",
		"printflush message1",
		"draw line 5 5 10 10 0 0",
		"drawflush display1",
		"sensor eax block1 @enabled",
		"end",
	]
	for instr in (
		M.LabelDef("x"),
		M.Jump("x", "equal", "eax", "0"),
		M.Jump(3),
		M.RawJump("x", ("always",)),
		M.RawJump(3, ()),
	):
		assert parse_line(format_instr(instr)) == instr
