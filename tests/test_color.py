import io

from nixtree.color import colorize_nix, use_color


class FakeTerminal(io.StringIO):
    def isatty(self) -> bool:
        return True


def test_plain_stream_is_not_colored(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    assert not use_color(io.StringIO())
    assert colorize_nix("{ a = 1; }", io.StringIO()) == "{ a = 1; }"


def test_terminal_is_colored(monkeypatch):
    monkeypatch.delenv("NO_COLOR", raising=False)
    colored = colorize_nix("{ a = 1; }", FakeTerminal())
    assert "\x1b[" in colored
    assert not colored.endswith("\n")


def test_no_color_disables_highlighting(monkeypatch):
    monkeypatch.setenv("NO_COLOR", "1")
    assert not use_color(FakeTerminal())
    assert colorize_nix("null", FakeTerminal()) == "null"
