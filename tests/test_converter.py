"""Tests for the markup converter and the strippers."""

import io

import pytest

from dahlia.config import DahliaConfig
from dahlia.constants import Depth
from dahlia.converter import Dahlia, clean, clean_ansi
from dahlia.resolver import InvalidCodeError

EXPECTED_TEST_OUTPUT = (
    "\x1b[38;2;0;0;0m0\x1b[38;2;0;0;170m1\x1b[38;2;0;170;0m2\x1b[38;2;0;170;170m3"
    "\x1b[38;2;170;0;0m4\x1b[38;2;170;0;170m5\x1b[38;2;255;170;0m6"
    "\x1b[38;2;170;170;170m7\x1b[38;2;85;85;85m8\x1b[38;2;85;85;255m9"
    "\x1b[38;2;85;255;85ma\x1b[38;2;85;255;255mb\x1b[38;2;255;85;85mc"
    "\x1b[38;2;255;85;255md\x1b[38;2;255;255;85me\x1b[38;2;255;255;255mf"
    "\x1b[38;2;221;214;5mg\x1b[0m\x1b[1ml\x1b[0m\x1b[9mm\x1b[0m\x1b[4mn"
    "\x1b[0m\x1b[3mo\x1b[0m"
)


class TestClean:
    def test_clean(self):
        assert clean("hmm &3&oyes&r.", "&") == "hmm yes."

    def test_default_marker(self):
        assert clean("&2>be me") == ">be me"

    def test_custom_marker(self):
        assert clean("i'm !4!lballing!r!", "!") == "i'm balling!"

    def test_hex_and_background(self):
        assert clean("&~[#00ff00]a&[#ABCDEF]b&~c", "&") == "ab"

    def test_idempotent(self):
        s = "&3 &~[#000000]x&z &r &~a"
        once = clean(s, "&")
        assert clean(once, "&") == once

    def test_other_marker_untouched(self):
        assert clean("&3x", "@") == "&3x"


class TestCleanAnsi:
    def test_clean_ansi(self):
        text = "hmm \x1b[38;2;0;170;170m\x1b[3myes\x1b[0m.\x1b[0m"
        assert clean_ansi(text) == "hmm yes."

    def test_all_depths(self):
        for depth in Depth:
            d = Dahlia(depth)
            assert clean_ansi(d.convert("&~a&lbold &[#102030]x&~5y")) == "bold xy"


class TestConvert:
    def test_convert(self):
        d = Dahlia(Depth.HIGH, False, "&")
        assert d.convert("hmm &3&oyes&r.") == "hmm \x1b[38;2;0;170;170m\x1b[3myes\x1b[0m.\x1b[0m"

    def test_background(self):
        d = Dahlia(Depth.HIGH, False, "&")
        assert d.convert("hmm &~3yes&r.") == "hmm \x1b[48;2;0;170;170myes\x1b[0m.\x1b[0m"

    def test_custom_marker(self):
        d = Dahlia(Depth.HIGH, False, "@")
        assert d.convert("hmm @3@oyes@r.") == "hmm \x1b[38;2;0;170;170m\x1b[3myes\x1b[0m.\x1b[0m"

    def test_metacharacter_marker(self):
        d = Dahlia(Depth.TTY, marker="$")
        assert d.convert("$4x") == "\x1b[31mx\x1b[0m"

    def test_plain_text_gets_reset(self):
        assert Dahlia().convert("plain text") == "plain text\x1b[0m"

    def test_no_reset(self):
        assert Dahlia(no_reset=True).convert("plain text") == "plain text"

    def test_existing_reset_not_doubled(self):
        assert Dahlia().convert("&lx&r") == "\x1b[1mx\x1b[0m"

    def test_empty(self):
        assert Dahlia().convert("") == "\x1b[0m"
        assert Dahlia(no_reset=True).convert("") == ""

    def test_low_depth_background(self):
        d = Dahlia(Depth.TTY, no_reset=True)
        assert d.convert("&3&~3") == "\x1b[36m\x1b[46m"

    def test_medium_depth(self):
        d = Dahlia(Depth.MEDIUM, no_reset=True)
        assert d.convert("&a&~a&n") == "\x1b[38;5;83m\x1b[48;5;83m\x1b[4m"

    def test_hex_at_low_depth(self):
        d = Dahlia(Depth.TTY, no_reset=True)
        assert d.convert("&[#0a0B0c]x&~[#ffffff]") == "\x1b[38;2;10;11;12mx\x1b[48;2;255;255;255m"

    def test_unknown_codes_pass_through(self):
        d = Dahlia(no_reset=True)
        assert d.convert("R&D & co &z") == "R&D & co &z"

    def test_symbolic_pass_before_hex(self):
        # the bare "&" is not rescanned once "&3" is replaced
        d = Dahlia(Depth.TTY, no_reset=True)
        assert d.convert("&&3[#000000]") == "&\x1b[36m[#000000]"

    def test_hex_after_symbolic(self):
        d = Dahlia(Depth.TTY, no_reset=True)
        assert d.convert("&[#00000a]&1") == "\x1b[38;2;0;0;10m\x1b[34m"

    def test_invalid_code_aborts(self, monkeypatch):
        import dahlia.converter as converter

        # every code the token regex admits is in the shipped tables,
        # so a failing resolver stands in for a table miss
        def fake_resolve(code, bg, depth):
            if code == "5":
                raise InvalidCodeError(code)
            return "<%s>" % code

        monkeypatch.setattr(converter, "resolve", fake_resolve)
        with pytest.raises(InvalidCodeError) as exc_info:
            Dahlia().convert("&1ok &~5bad")
        assert exc_info.value.code == "5"
        assert str(exc_info.value) == "Invalid code: &~5"


class TestNoColor:
    def test_strips_markup(self):
        d = Dahlia(no_color=True)
        assert d.convert("hmm &3&oyes&r.") == "hmm yes."

    def test_no_reset_appended(self):
        assert Dahlia(no_color=True).convert("plain") == "plain"

    def test_custom_marker(self):
        assert Dahlia(marker="!", no_color=True).convert("!~[#aabbcc]a!lb") == "ab"


class TestDahlia:
    def test_defaults(self):
        d = Dahlia()
        assert d.depth is Depth.HIGH
        assert d.marker == "&"
        assert d.no_reset is False
        assert d.no_color is False

    def test_attributes_read_only(self):
        d = Dahlia()
        with pytest.raises(AttributeError):
            d.marker = "@"

    def test_int_depth(self):
        assert Dahlia(8).depth is Depth.MEDIUM

    def test_invalid_depth(self):
        with pytest.raises(ValueError):
            Dahlia(16)

    @pytest.mark.parametrize("marker", ["", "&&"])
    def test_invalid_marker(self, marker):
        with pytest.raises(ValueError):
            Dahlia(marker=marker)

    def test_from_config(self):
        cfg = DahliaConfig(depth=Depth.MEDIUM, marker="@", no_reset=True, no_color=False)
        d = Dahlia.from_config(cfg)
        assert d.depth is Depth.MEDIUM
        assert d.marker == "@"
        assert d.convert("@f") == "\x1b[38;5;15m"

    def test_repr(self):
        assert repr(Dahlia(Depth.TTY, marker="@")) == (
            "Dahlia(depth=<Depth.TTY: 3>, no_reset=False, marker='@', no_color=False)"
        )

    def test_self_test(self):
        assert Dahlia(Depth.HIGH, False, "&").test() == EXPECTED_TEST_OUTPUT

    def test_self_test_custom_marker(self):
        assert Dahlia(marker="@").test() == EXPECTED_TEST_OUTPUT

    def test_self_test_no_color(self):
        assert Dahlia(no_color=True).test() == "0123456789abcdefglmno"

    def test_reset(self):
        buf = io.StringIO()
        Dahlia(Depth.TTY).reset(buf)
        assert buf.getvalue() == "\x1b[0m"

    def test_reset_stdout(self, capsys):
        Dahlia().reset()
        assert capsys.readouterr().out == "\x1b[0m"

    def test_print(self, capsys):
        d = Dahlia(Depth.TTY)
        d.print("Hello &3World&r!", "&lhi", sep="|")
        assert capsys.readouterr().out == "Hello \x1b[36mWorld\x1b[0m!\x1b[0m|\x1b[1mhi\x1b[0m\n"

    def test_input(self, monkeypatch):
        prompts = []

        def fake_input(prompt):
            prompts.append(prompt)
            return "answer"

        monkeypatch.setattr("builtins.input", fake_input)
        assert Dahlia(Depth.TTY).input("&2> ") == "answer"
        assert prompts == ["\x1b[32m> \x1b[0m"]
