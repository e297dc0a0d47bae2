"""Tests for the vim modeline detector."""

import pytest

from find_indent.core.modeline import (
    apply_vim_modeline,
    apply_vim_option,
    modeline_options,
)
from find_indent.core.settings import OverrideSettings


class TestModelineOptions:
    def test_form_one_blank_separated(self):
        assert modeline_options("# vim: ts=4 sts=4 et") == ["ts=4", "sts=4", "et"]

    def test_form_one_colon_separated(self):
        assert modeline_options("   vi:noai:sw=3 ts=6") == ["noai", "sw=3", "ts=6"]

    def test_form_one_accepts_set_with_trailing_colon(self):
        assert modeline_options("# vim: set ts=4 sw=4:") == ["set", "ts=4", "sw=4"]

    def test_form_two_with_blank_before_colon(self):
        assert modeline_options("-- vim: set sts=4 et :") == ["sts=4", "et"]

    def test_form_two_with_trailing_text(self):
        assert modeline_options("/* vim: set ai tw=75: */") == ["ai", "tw=75"]

    def test_short_set(self):
        assert modeline_options("/* vim: se ts=2: */") == ["ts=2"]

    def test_ex_and_versioned_tags(self):
        assert modeline_options("# ex: ts=3") == ["ts=3"]
        assert modeline_options("# vim<700: ts=3") == ["ts=3"]
        assert modeline_options("# vim>600: set ts=3 :") == ["ts=3"]

    @pytest.mark.parametrize(
        "line",
        [
            "vim: ts=4",              # tag must follow a blank
            "navi: ts=4",
            "# vim:",
            "# vim: ts=4 */",
            "print('hello world')",
        ],
    )
    def test_not_a_modeline(self, line):
        assert modeline_options(line) is None


class TestApplyVimOption:
    def test_soft_tab_stop(self):
        s = OverrideSettings()
        assert apply_vim_option("sts=4", s)
        assert apply_vim_option("softtabstop=2", s)
        assert s.soft_tab_stop == 2

    def test_tab_stop(self):
        s = OverrideSettings()
        assert apply_vim_option("ts=4", s)
        assert s.tab_stop == 4
        assert apply_vim_option("tabstop=3", s)
        assert s.tab_stop == 3

    @pytest.mark.parametrize(
        "token, use_tabs",
        [("et", False), ("expandtab", False), ("noet", True), ("noexpandtab", True)],
    )
    def test_expand_tab(self, token, use_tabs):
        s = OverrideSettings()
        assert apply_vim_option(token, s)
        assert s.use_tabs is use_tabs

    def test_case_insensitive(self):
        s = OverrideSettings()
        apply_vim_option("TS=8", s)
        apply_vim_option("NoEt", s)
        assert s.tab_stop == 8
        assert s.use_tabs is True

    @pytest.mark.parametrize("token", ["set", "sw=4", "ts=0", "ts=x", "ft=perl", "ai"])
    def test_other_tokens_ignored(self, token):
        s = OverrideSettings()
        assert not apply_vim_option(token, s)
        assert s == OverrideSettings()


class TestApplyVimModeline:
    def test_updates_settings(self):
        s = OverrideSettings()
        apply_vim_modeline("# vim: set ts=4 noet :", s)
        assert s.tab_stop == 4
        assert s.use_tabs is True
        assert s.soft_tab_stop is None

    def test_plain_line_leaves_settings_alone(self):
        s = OverrideSettings()
        apply_vim_modeline("my $x = 1;", s)
        assert s == OverrideSettings()
