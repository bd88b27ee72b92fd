from pathlib import Path
import sys
import unittest

SERVER_DIR = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(SERVER_DIR))

from ansi_parser import handle_ansi_output
from html_render import render_html, render_node
from link_detector import PlainTextDetector
from theme import Theme, available_themes, get_theme


def nodes(text):
    return handle_ansi_output(text, PlainTextDetector())


class RenderHtmlTests(unittest.TestCase):
    def test_basic_color_without_theme_has_class_only(self):
        self.assertEqual(
            render_html(nodes("\x1b[1;31mred")),
            '<span><span class="code-bold code-foreground-colored">red</span></span>',
        )

    def test_basic_color_resolved_by_theme(self):
        html = render_node(nodes("\x1b[31mred")[0], get_theme("dark"))
        self.assertEqual(
            html, '<span class="code-foreground-colored" style="color: rgb(205, 49, 49)">red</span>'
        )

    def test_custom_color_always_inline(self):
        self.assertEqual(
            render_node(nodes("\x1b[48;2;1;2;3mx")[0]),
            '<span class="code-background-colored" style="background-color: rgb(1, 2, 3)">x</span>',
        )

    def test_plain_text_is_escaped(self):
        self.assertEqual(render_node(nodes("a<b & c")[0]), "<span>a&lt;b &amp; c</span>")

    def test_links_render_as_anchors(self):
        node = handle_ansi_output("go https://example.com")[0]
        self.assertEqual(
            render_node(node),
            '<span>go <a href="https://example.com">https://example.com</a></span>',
        )

    def test_one_span_per_node(self):
        html = render_html(nodes("\x1b[1ma\x1b[0mb"))
        self.assertEqual(html, '<span><span class="code-bold">a</span><span>b</span></span>')

    def test_empty(self):
        self.assertEqual(render_html([]), "<span></span>")


class ThemeTests(unittest.TestCase):
    def test_builtin_themes(self):
        self.assertEqual(available_themes(), ["dark", "light"])
        self.assertEqual(get_theme("light").resolve(2, "foreground"), (0, 188, 0))

    def test_unknown_theme(self):
        with self.assertRaises(ValueError):
            get_theme("solarized")

    def test_invalid_role_or_index(self):
        theme = get_theme("dark")
        with self.assertRaises(ValueError):
            theme.resolve(1, "border")
        with self.assertRaises(ValueError):
            theme.resolve(16, "foreground")

    def test_custom_palette_serves_both_roles(self):
        colors = tuple((i, i, i) for i in range(16))
        theme = Theme("custom", colors)
        self.assertEqual(theme.resolve(9, "background"), (9, 9, 9))
        self.assertEqual(theme.resolve(9, "foreground"), (9, 9, 9))

    def test_palette_must_have_16_colors(self):
        with self.assertRaises(ValueError):
            Theme("short", ((0, 0, 0),))


if __name__ == "__main__":
    unittest.main()
