"""Tests for lua_literal.options."""

import pytest

from lua_literal.options import MAX_DEPTH, FormatOptions, resolve_options


class TestDefaults:
    def test_defaults(self):
        opts = FormatOptions()
        assert opts.eol == "\n"
        assert opts.single_quote is True
        assert opts.multiline_string is False
        assert opts.indent == 2
        assert opts.max_depth == MAX_DEPTH

    def test_pretty_by_default(self):
        assert FormatOptions().pretty


class TestIndent:
    def test_int_indent(self):
        assert FormatOptions(indent=4).indent_for(2) == " " * 8

    def test_str_indent(self):
        assert FormatOptions(indent="\t").indent_for(3) == "\t\t\t"

    @pytest.mark.parametrize("indent", [None, 0, ""])
    def test_falsy_indent_is_compact(self, indent):
        opts = FormatOptions(indent=indent)
        assert not opts.pretty
        assert opts.indent_for(5) == ""

    def test_negative_indent(self):
        with pytest.raises(ValueError):
            FormatOptions(indent=-1)

    def test_false_indent_is_compact(self):
        opts = FormatOptions(indent=False)
        assert opts.indent is None
        assert not opts.pretty

    def test_bool_indent_rejected(self):
        with pytest.raises(TypeError):
            FormatOptions(indent=True)


class TestResolve:
    def test_none(self):
        assert resolve_options(None) == FormatOptions()

    def test_instance_passthrough(self):
        opts = FormatOptions(eol="\r\n")
        assert resolve_options(opts) is opts

    def test_mapping_with_camel_case(self):
        opts = resolve_options({"singleQuote": False, "multilineString": True, "indent": None})
        assert opts.single_quote is False
        assert opts.multiline_string is True
        assert opts.indent is None

    def test_overrides_win(self):
        opts = resolve_options({"indent": 4}, indent="  ", eol="\r\n")
        assert opts.indent == "  "
        assert opts.eol == "\r\n"

    def test_unknown_option(self):
        with pytest.raises(TypeError):
            resolve_options({"spaces": 2})

    def test_bad_option_type(self):
        with pytest.raises(TypeError):
            resolve_options(single_quote="yes")

    def test_bad_options_object(self):
        with pytest.raises(TypeError):
            resolve_options(42)
