"""
End-to-end colorize tests

Tests the full pipeline: markup source → tokens → node tree → styled text

Validates the rendering properties: plain text passes through, recognized
tags emit their code and a clear, enclosing styles are re-applied after an
inner tag closes, and unknown or malformed markup comes out literally.
"""

import pytest
from concurrent.futures import ThreadPoolExecutor

import emojicolors
from emojicolors import colorize, strip, emoji_to_ansi
from emojicolors.lib.parser import Parser
from emojicolors.lib.renderer import Renderer
from emojicolors.lib.styles import StyleRegistry


CLEAR = "\x1b[0m"
RED = "\x1b[31m"
BLUE = "\x1b[34m"
GREEN = "\x1b[32m"
BOLD = "\x1b[1m"
UNDERLINE = "\x1b[4m"
BOLD_RED = "\x1b[1;31m"


class TestPlainText:
    """Text without tags is returned unchanged"""

    @pytest.mark.parametrize("source", [
        "",
        "hello",
        "multi\nline\n",
        "math: 3 > 2 and 1 < 2",
        "<>",
        "unicode 🔴 outside tags",
    ])
    def test_plain_text_unchanged(self, source):
        """No markers, no change"""
        assert colorize(source) == source


class TestSingleTags:
    """Test one recognized tag"""

    def test_basic_color(self):
        """Emoji tag inside surrounding text"""
        assert colorize("some <🔴>red</🔴> text") == f"some {RED}red{CLEAR} text"

    def test_bold_color_single_emoji(self):
        """Bold color through its own symbol"""
        assert colorize("some <🟥>red</🟥> text") == f"some {BOLD_RED}red{CLEAR} text"

    @pytest.mark.parametrize("alias", ["🔴", "❤", "❤\ufe0f", "red", "r"])
    def test_every_alias(self, alias):
        """Every alias renders the same code"""
        assert colorize(f"<{alias}>body</{alias}>") == f"{RED}body{CLEAR}"

    def test_alias_equivalence(self):
        """Two aliases of one style give identical output"""
        assert colorize("<hi>t</hi>") == colorize("<💎>t</💎>") == colorize("<bright>t</bright>")

    def test_empty_tag(self):
        """Recognized tag with no content still emits code and clear"""
        assert colorize("<u></u>") == f"{UNDERLINE}{CLEAR}"


class TestNesting:
    """Enclosing styles come back after an inner tag closes"""

    def test_nesting_reapplication(self):
        """Outer color is re-applied after the inner clear"""
        result = colorize("<🔴>a <🔵>b</🔵> c</🔴>")
        assert result == f"{RED}a {BLUE}b{CLEAR}{RED} c{CLEAR}"

    def test_bold_and_color_separately(self):
        """Modifier wrapping a color"""
        result = colorize("some <🧱><🔴>red</🔴></🧱> text")
        assert result == f"some {BOLD}{RED}red{CLEAR}{BOLD}{CLEAR} text"

    def test_three_levels(self):
        """Every ancestor is re-applied, outermost first"""
        result = colorize("<r>a<u>b<🧱>c</🧱>d</u>e</r>")
        assert result == (
            f"{RED}a{UNDERLINE}b{BOLD}c{CLEAR}{RED}{UNDERLINE}d{CLEAR}{RED}e{CLEAR}"
        )

    def test_siblings(self):
        """Sibling tags each re-apply the same parent"""
        result = colorize("<r><g>1</g><b>2</b></r>")
        assert result == f"{RED}{GREEN}1{CLEAR}{RED}{BLUE}2{CLEAR}{RED}{CLEAR}"

    def test_same_style_nested(self):
        """Nesting a style in itself still re-applies it"""
        result = colorize("<r>a<r>b</r>c</r>")
        assert result == f"{RED}a{RED}b{CLEAR}{RED}c{CLEAR}"


class TestUnknownTags:
    """Unknown tags are literal and transparent"""

    def test_unknown_tag_transparency(self):
        """Nested unknown tags come back verbatim"""
        source = "<unknown>x<nested>y</nested>z</unknown>"
        assert colorize(source) == source

    def test_unknown_inside_known(self):
        """Unknown tags do not join the style stack"""
        result = colorize("<r>a<x>b<u>c</u></x>d</r>")
        assert result == f"{RED}a<x>b{UNDERLINE}c{CLEAR}{RED}</x>d{CLEAR}"

    def test_known_inside_unknown(self):
        """A known tag under an unknown one has no ancestors to re-apply"""
        assert colorize("<x><r>a</r></x>") == f"<x>{RED}a{CLEAR}</x>"

    def test_unterminated_unknown_gets_closed(self):
        """Unknown open tag without close is rendered with a close marker"""
        assert colorize("<foo>bar") == "<foo>bar</foo>"

    def test_case_matters(self):
        """<RED> is not a style"""
        assert colorize("<RED>x</RED>") == "<RED>x</RED>"


class TestMalformed:
    """Malformed markup never raises"""

    def test_mismatched_close_tolerance(self):
        """</Q> is kept as text, R is still applied"""
        result = colorize("<r>a</Q>")
        assert result == f"{RED}a</Q>{CLEAR}"
        assert "</Q>" in result
        assert result.startswith(f"{RED}a")

    def test_mismatched_close_then_real_close(self):
        """The real close still ends the style"""
        assert colorize("<r>a</Q>b</r>c") == f"{RED}a</Q>b{CLEAR}c"

    def test_stray_close(self):
        """Close marker with nothing open is literal"""
        assert colorize("a</r>b") == "a</r>b"

    def test_unterminated_known_tag(self):
        """Unclosed tag runs to end of input and is still cleared"""
        assert colorize("x<r>abc") == f"x{RED}abc{CLEAR}"

    def test_unterminated_nested(self):
        """Unclosed nested tags still re-apply their ancestors"""
        assert colorize("<r>a<u>b") == f"{RED}a{UNDERLINE}b{CLEAR}{RED}{CLEAR}"

    @pytest.mark.parametrize("source", ["<", "</", "</>", "<<r>>", "<r", "a<>b</>", ">"])
    def test_odd_input(self, source):
        """Odd bracket sequences produce a string"""
        assert isinstance(colorize(source), str)

    def test_very_deep_nesting(self):
        """Nesting far past the ceiling renders without RecursionError"""
        depth = 5000
        result = colorize("<r>" * depth + "x" + "</r>" * depth)
        assert result.startswith(RED)
        assert "x" in result

    def test_nesting_ceiling_from_settings(self, monkeypatch):
        """Tags past appsettings.max_nesting_depth stay literal"""
        from emojicolors.config import appsettings

        monkeypatch.setattr(appsettings, "max_nesting_depth", 1)
        assert colorize("<r><u>x</u></r>") == f"{RED}<u>x</u>{CLEAR}"

    def test_deepest_allowed_ceiling(self, monkeypatch):
        """The highest accepted ceiling still renders deep input"""
        from emojicolors.config import appsettings

        monkeypatch.setattr(appsettings, "max_nesting_depth", 400)
        depth = 1000
        result = colorize("<r>" * depth + "x" + "</r>" * depth)
        assert result.startswith(RED * 400 + "<r>" * 600 + "x" + "</r>" * 600 + CLEAR + RED * 399)
        assert result.endswith(CLEAR + RED + CLEAR)

    def test_ceiling_reopened_after_close(self):
        """A suppressed marker does not outlive the tag it was opened in"""
        result = Parser("<r><g>x</r><g>y</g>z", max_depth=1).parse()
        rendered = Renderer().render(result, [])
        assert rendered == f"{RED}<g>x{CLEAR}{GREEN}y{CLEAR}z"


class TestComposition:
    """Concatenation of self-contained markup"""

    @pytest.mark.parametrize("s1,s2", [
        ("<r>a</r>", "<u>b</u>"),
        ("plain ", "<🧱><🔴>x</🔴></🧱>"),
        ("<x>y</x>", "tail"),
    ])
    def test_sequential_independence(self, s1, s2):
        """colorize(s1 + s2) == colorize(s1) + colorize(s2)"""
        assert colorize(s1 + s2) == colorize(s1) + colorize(s2)

    def test_tags_spanning_boundary(self):
        """Tags spanning the split do not distribute"""
        s1, s2 = "<r>a", "b</r>"
        assert colorize(s1 + s2) != colorize(s1) + colorize(s2)

    def test_deterministic_across_threads(self):
        """Concurrent calls give identical results"""
        source = "<r>a <u>b</u> <hi>c</hi></r>"
        expected = colorize(source)

        with ThreadPoolExecutor(max_workers=8) as pool:
            results = list(pool.map(colorize, [source] * 64))

        assert all(result == expected for result in results)


class TestStrip:
    """Test tag removal"""

    def test_strip_recognized(self):
        """Recognized tags vanish, text stays"""
        assert strip("some <🔴>red <u>and</u> underlined</🔴> text") == (
            "some red and underlined text"
        )

    def test_strip_keeps_unknown(self):
        """Unknown tags stay literal"""
        assert strip("<r>a</r> <x>b</x>") == "a <x>b</x>"

    def test_strip_keeps_mismatched(self):
        """Mismatched close markers stay literal"""
        assert strip("<r>a</Q>") == "a</Q>"

    def test_strip_has_no_escape_codes(self):
        """No escape character survives stripping"""
        assert "\x1b" not in strip("<🟥>x</🟥><🧱>y</🧱>")


class TestCustomRegistry:
    """Rendering with a custom style table"""

    def test_custom_codes(self, tmp_path):
        """Codes and clear come from the supplied registry"""
        path = tmp_path / "styles.yaml"
        path.write_text(
            'clear: "[/]"\n'
            'styles:\n'
            '  - {name: alert, code: "[A]", symbols: ["🚨"]}\n'
            '  - {name: quiet, code: "[Q]", keywords: [q]}\n',
            encoding="utf-8",
        )
        registry = StyleRegistry(styles_file=str(path))

        assert colorize("<🚨>x<q>y</q>z</🚨>", registry) == "[A]x[Q]y[/][A]z[/]"
        assert colorize("<r>x</r>", registry) == "<r>x</r>"

    def test_renderer_with_active_stack(self):
        """Rendering under an existing stack re-applies it on close"""
        nodes = Parser("<u>x</u>").parse()
        assert Renderer().render(nodes, [RED]) == f"{UNDERLINE}x{CLEAR}{RED}"


class TestPackageExports:
    """Test the top-level package surface"""

    def test_emoji_constants_colorize(self):
        """Constants build markup that renders"""
        red = emojicolors.EMOJI_RED
        assert colorize(f"<{red}>x</{red}>") == f"{RED}x{CLEAR}"

    def test_emoji_to_ansi(self):
        """Module-level map matches the constants"""
        mapping = emoji_to_ansi()
        assert mapping[emojicolors.EMOJI_BOLD] == BOLD
        assert mapping[emojicolors.EMOJI_UNDERLINE] == UNDERLINE
        assert mapping["⬛"] == mapping[emojicolors.EMOJI_BOLD_BLACK]
        assert emojicolors.ANSI_RESET == CLEAR
