"""Tests for Handlebars view rendering."""

import pytest

from backend.render import RenderError, render_template


def test_render_simple_variable():
    assert render_template("Hello {{name}}!", {"name": "Hoth"}) == "Hello Hoth!"


def test_render_escapes_html():
    assert render_template("{{name}}", {"name": "<b>"}) == "&lt;b&gt;"


def test_render_each_loop():
    tpl = "{{#each items}}{{this}} {{/each}}"
    assert render_template(tpl, {"items": ["a", "b", "c"]}) == "a b c "


def test_render_if_empty_list():
    tpl = "{{#if rows}}some{{else}}none{{/if}}"
    assert render_template(tpl, {"rows": []}) == "none"
    assert render_template(tpl, {"rows": [1]}) == "some"


def test_capitalize_helper():
    assert render_template("{{capitalize word}}", {"word": "planets"}) == "Planets"


def test_render_invalid_template():
    with pytest.raises(RenderError):
        render_template("{{> missing_partial}}", {})
