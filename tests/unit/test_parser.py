"""
Command line parsing tests.
"""

from commands import split_command_line, tokenize


class TestTokenize:
    def test_splits_on_runs_of_whitespace(self):
        assert tokenize("warp  set\thome   now") == ["warp", "set", "home", "now"]

    def test_blank_line_has_no_tokens(self):
        assert tokenize("   ") == []

    def test_case_is_preserved(self):
        assert tokenize("Warp Home") == ["Warp", "Home"]


class TestSplitCommandLine:
    def test_prefixed_line(self):
        assert split_command_line("/warp set home") == ["warp", "set", "home"]

    def test_plain_chat_is_not_a_command(self):
        assert split_command_line("signal/noise ratio") is None
        assert split_command_line("hello everyone") is None

    def test_bare_prefix_is_not_a_command(self):
        assert split_command_line("/   ") is None

    def test_custom_prefix(self):
        assert split_command_line("!ping", prefix="!") == ["ping"]
