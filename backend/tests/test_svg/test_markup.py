"""Tests for template markup helpers."""

from tests.conftest import EMPTY_SVG, HEAD_SVG, UNKNOWN_TOKEN_SVG

from lookalike.svg.markup import inner_markup, substitute_tokens, template_tokens


def test_substitute_known_tokens():
    out = substitute_tokens("{{a}}-{{b}}-{{a}}", {"a": "1", "b": "2"})
    assert out == "1-2-1"


def test_unknown_tokens_kept_verbatim():
    assert substitute_tokens("{{a}} {{zzz}}", {"a": "1"}) == "1 {{zzz}}"


def test_malformed_tokens_untouched():
    assert substitute_tokens("{{ a }} {a} {{a-b}}", {"a": "1"}) == "{{ a }} {a} {{a-b}}"


def test_template_tokens():
    assert template_tokens(HEAD_SVG) == {"skin"}
    assert template_tokens(UNKNOWN_TOKEN_SVG) == {"sparkle"}
    assert template_tokens("<g/>") == set()


def test_inner_markup():
    assert inner_markup(HEAD_SVG) == '<circle cx="100" cy="100" r="70" fill="{{skin}}"/>'


def test_inner_markup_keeps_nested_defs():
    svg = '<SVG viewBox="0 0 10 10">\n  <defs><linearGradient id="g"/></defs>\n  <rect/>\n</SVG>'
    assert inner_markup(svg) == '<defs><linearGradient id="g"/></defs>\n  <rect/>'


def test_inner_markup_empty_and_missing():
    assert inner_markup(EMPTY_SVG) == ""
    assert inner_markup("<g><rect/></g>") is None
