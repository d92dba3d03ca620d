"""Tests for CSS minification."""

import pytest

from textsmith.css.minifier import minify


class TestMinify:
    def test_collapses_whitespace_and_punctuation(self):
        assert minify("a {\n  color : red ;\n}\n") == "a{color:red}"

    def test_combinators_and_lists(self):
        assert minify("ul > li + a ~ b , p { margin : 0 }") == "ul>li+a~b,p{margin:0}"

    def test_descendant_space_kept(self):
        assert minify("div   p { color: red; }") == "div p{color:red}"

    def test_value_spaces_kept(self):
        assert minify("a { margin: 0  auto; }") == "a{margin:0 auto}"

    def test_important_spacing(self):
        assert minify("a { color: red  !important; }") == "a{color:red!important}"

    def test_only_last_semicolon_removed(self):
        assert minify("a{color:red;;}") == "a{color:red;}"

    def test_empty(self):
        assert minify("   \n ") == ""

    def test_comments_not_touched(self):
        assert minify("/* keep */ a { }") == "/* keep */ a{}"


class TestIdempotence:
    @pytest.mark.parametrize(
        "css",
        [
            "a {\n  color : red ;\n}\n",
            "ul > li + a ~ b , p { margin : 0 }",
            "body { margin: 0; padding: 0 }\n\nh1 { color: blue !important; }",
            "@media print { a { color: black; } }",
            "",
        ],
    )
    def test_minify_twice_equals_once(self, css):
        once = minify(css)
        assert minify(once) == once
