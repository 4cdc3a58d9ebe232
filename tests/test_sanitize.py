"""Tests for cleanread.sanitize - allowlist HTML sanitizer."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup, Comment

from cleanread.sanitize import ALLOWED_ATTRS, ALLOWED_TAGS, is_script_url, sanitize_html

HOSTILE_INPUTS = [
    '<p onclick="steal()">Hello <b onmouseover="x()">world</b></p>',
    '<script>alert(1)</script><p>after</p>',
    '<div><scr<script>ipt>alert(1)</script></div>',
    '<a href="javascript:alert(1)">click</a>',
    '<a href="  JaVaScRiPt:alert(1)">click</a>',
    '<a href="java\tscript:alert(1)">click</a>',
    '<img src="javascript:alert(1)" onerror="alert(2)" alt="x">',
    '<iframe src="https://evil.example"></iframe><p>text</p>',
    '<svg><g onload="alert(1)"><text>svg text</text></g></svg>',
    '<form action="/x"><input value="v"><button>Go</button></form>',
    '<table><tr><td colspan="2" style="color:red" onclick="x()">cell</td></tr></table>',
    '<div><section><article><aside><p>deep <em>nest</em></p></aside></article></section></div>',
    '<p>unclosed <b>bold <i>italic</p> trailing',
    '<!-- secret --><p>visible</p>',
    '<style>p { color: red }</style><p>styled</p>',
    '<object data="x.swf"><embed src="x.swf"></object>',
    '<math><mi>x</mi></math>',
    '<p>a &lt;script&gt; b</p>',
]


def _elements(html: str) -> list:
    return BeautifulSoup(html, "html.parser").find_all(True)


# ---------------------------------------------------------------------------
# Allowlist closure
# ---------------------------------------------------------------------------

class TestAllowlist:
    @pytest.mark.parametrize("dirty", HOSTILE_INPUTS)
    def test_only_allowed_tags(self, dirty):
        for el in _elements(sanitize_html(dirty)):
            assert el.name in ALLOWED_TAGS

    @pytest.mark.parametrize("dirty", HOSTILE_INPUTS)
    def test_only_allowed_attributes(self, dirty):
        for el in _elements(sanitize_html(dirty)):
            allowed = ALLOWED_ATTRS.get(el.name, frozenset())
            assert set(el.attrs) <= allowed, f"<{el.name}> kept {el.attrs}"

    def test_policy_matches_contract(self):
        assert len(ALLOWED_TAGS) == 36
        assert "script" not in ALLOWED_TAGS
        assert ALLOWED_ATTRS["a"] == {"href", "title"}
        assert ALLOWED_ATTRS["img"] == {"src", "alt", "title", "width", "height"}
        assert ALLOWED_ATTRS["td"] == ALLOWED_ATTRS["th"] == {"colspan", "rowspan"}
        assert set(ALLOWED_ATTRS) == {"a", "img", "td", "th"}

    def test_allowed_attributes_kept(self):
        out = sanitize_html(
            '<a href="/story" title="Story" class="link">x</a>'
            '<img src="/a.png" alt="A" width="10" height="20" loading="lazy">',
        )
        a = BeautifulSoup(out, "lxml").find("a")
        img = BeautifulSoup(out, "lxml").find("img")
        assert a.attrs == {"href": "/story", "title": "Story"}
        assert img.attrs == {"src": "/a.png", "alt": "A", "width": "10", "height": "20"}

    def test_table_spans_kept(self):
        out = sanitize_html('<table><tr><th rowspan="2" scope="row">h</th><td colspan="3">d</td></tr></table>')
        soup = BeautifulSoup(out, "lxml")
        assert soup.find("th").attrs == {"rowspan": "2"}
        assert soup.find("td").attrs == {"colspan": "3"}


# ---------------------------------------------------------------------------
# Script execution surface
# ---------------------------------------------------------------------------

class TestScriptSurface:
    @pytest.mark.parametrize("dirty", HOSTILE_INPUTS)
    def test_no_script_tag_or_handlers(self, dirty):
        out = sanitize_html(dirty)
        assert "<script" not in out.lower()
        for el in _elements(out):
            assert not any(name.startswith("on") for name in el.attrs)

    @pytest.mark.parametrize("dirty", HOSTILE_INPUTS)
    def test_no_javascript_urls(self, dirty):
        for el in _elements(sanitize_html(dirty)):
            for attr in ("href", "src"):
                if el.has_attr(attr):
                    assert not is_script_url(el[attr])

    def test_javascript_href_replaced_with_placeholder(self):
        out = sanitize_html('<a href="javascript:alert(1)">click</a>')
        a = BeautifulSoup(out, "lxml").find("a")
        assert a["href"] == "#"
        assert a.get_text() == "click"

    def test_javascript_src_removed(self):
        out = sanitize_html('<img src=" javascript:alert(1)" alt="pic">')
        img = BeautifulSoup(out, "lxml").find("img")
        assert not img.has_attr("src")
        assert img["alt"] == "pic"

    def test_ordinary_urls_untouched(self):
        out = sanitize_html('<a href="https://example.com/javascript-tips">tips</a>')
        assert 'href="https://example.com/javascript-tips"' in out

    def test_script_contents_dropped(self):
        out = sanitize_html("<p>before</p><script>alert('x')</script><p>after</p>")
        assert "alert" not in out
        assert out == "<p>before</p><p>after</p>"

    def test_is_script_url(self):
        assert is_script_url("javascript:void(0)")
        assert is_script_url("  JAVASCRIPT:x")
        assert is_script_url("java\nscript:x")
        assert not is_script_url("https://example.com")
        assert not is_script_url("#")


# ---------------------------------------------------------------------------
# Unwrapping
# ---------------------------------------------------------------------------

class TestUnwrap:
    def test_aside_unwrapped_content_kept(self):
        out = sanitize_html("<aside><p>Keep me</p></aside>")
        assert "<p>Keep me</p>" in out
        assert "aside" not in out

    def test_unwrap_preserves_sibling_order(self):
        out = sanitize_html("<div>one <font>two <em>three</em></font> four</div>")
        assert out == "<div>one two <em>three</em> four</div>"

    def test_nested_disallowed_wrappers(self):
        out = sanitize_html("<article><nav><header><p>inner</p></header></nav></article>")
        assert out == "<p>inner</p>"

    def test_attributes_cleaned_inside_unwrapped(self):
        out = sanitize_html('<center><p style="x" onclick="y()">t</p></center>')
        assert out == "<p>t</p>"

    def test_title_text_kept_when_unwrapped(self):
        out = sanitize_html("<head><title>Harbour news</title></head><p>body</p>")
        assert "<title" not in out and "<head" not in out
        assert "Harbour news" in out
        assert out.endswith("<p>body</p>")

    def test_comments_removed(self):
        out = sanitize_html("<p>a<!-- hidden -->b</p>")
        assert "hidden" not in out
        soup = BeautifulSoup(out, "lxml")
        assert not soup.find_all(string=lambda s: isinstance(s, Comment))
        assert soup.get_text() == "ab"


# ---------------------------------------------------------------------------
# Idempotence & degenerate input
# ---------------------------------------------------------------------------

class TestStability:
    @pytest.mark.parametrize("dirty", HOSTILE_INPUTS)
    def test_idempotent(self, dirty):
        once = sanitize_html(dirty)
        assert sanitize_html(once) == once

    def test_fixture_idempotent(self, article_html):
        once = sanitize_html(article_html)
        assert sanitize_html(once) == once

    def test_empty_input(self):
        assert sanitize_html("") == ""

    def test_whitespace_only_is_stable(self):
        once = sanitize_html("  \n<!-- gone -->\n")
        assert once.strip() == ""
        assert sanitize_html(once) == once

    def test_comment_between_whitespace_is_stable(self):
        once = sanitize_html("<p>a</p>\n<!-- c -->\n<p>b</p>")
        assert once == "<p>a</p>\n<p>b</p>"
        assert sanitize_html(once) == once

    def test_unwrap_between_whitespace_is_stable(self):
        once = sanitize_html("<p>a</p>\n<aside>\n<p>b</p>\n</aside>\n")
        assert "<aside" not in once
        assert sanitize_html(once) == once

    def test_deeply_nested_allowed_tags(self):
        out = sanitize_html("<div>" * 1500 + "<p>deep text</p>" + "</div>" * 1500)
        assert "<p>deep text</p>" in out
        assert out.count("<div>") == 1500

    def test_deeply_nested_disallowed_tags(self):
        out = sanitize_html("<aside>" * 1500 + "<p>deep text</p>" + "</aside>" * 1500)
        assert out == "<p>deep text</p>"

    @pytest.mark.parametrize("dirty", ["<", "<<>>", "</p></div>", "<p", "\x00\x01"])
    def test_garbage_does_not_raise(self, dirty):
        assert isinstance(sanitize_html(dirty), str)

    def test_plain_text_passes_through(self):
        assert sanitize_html("just text") == "just text"
