"""Tests for sharegen.templates."""

from __future__ import annotations

import pytest
from jinja2 import StrictUndefined, TemplateSyntaxError, UndefinedError

from sharegen.templates import TemplateEngine


def test_render_string():
    engine = TemplateEngine()
    assert engine.fill_in_string("Hello {{ name }}!", {"name": "World"}) == "Hello World!"


def test_keeps_trailing_newline():
    engine = TemplateEngine()
    assert engine.fill_in_string("line {{ n }}\n", {"n": 1}) == "line 1\n"


def test_no_autoescape():
    engine = TemplateEngine()
    assert engine.fill_in_string("{{ x }}", {"x": "<b>&</b>"}) == "<b>&</b>"


def test_undefined_renders_empty():
    engine = TemplateEngine()
    assert engine.fill_in_string("[{{ missing }}]", {}) == "[]"


def test_environment_options_passed_through():
    engine = TemplateEngine(undefined=StrictUndefined)
    with pytest.raises(UndefinedError):
        engine.fill_in_string("{{ missing }}", {})


def test_syntax_error_names_template():
    engine = TemplateEngine()
    with pytest.raises(TemplateSyntaxError) as excinfo:
        engine.fill_in_string("{% if %}", {}, name="out/gen.txt")
    assert excinfo.value.name == "out/gen.txt"


def test_attribute_access_on_objects():
    class Dist:
        name = "Foo-Bar"
        version = "1.0"

    engine = TemplateEngine()
    result = engine.fill_in_string("{{ dist.name }} {{ dist.version }}", {"dist": Dist()})
    assert result == "Foo-Bar 1.0"


def test_jinja_conditionals():
    engine = TemplateEngine()
    source = "{% if include_methods %}Methods: {{ methods }}{% endif %}"
    assert engine.fill_in_string(source, {"include_methods": True, "methods": "RCT"}) == "Methods: RCT"
    assert engine.fill_in_string(source, {"include_methods": False, "methods": "RCT"}) == ""


def test_jinja_loops():
    engine = TemplateEngine()
    result = engine.fill_in_string(
        "{% for item in items %}- {{ item }}\n{% endfor %}", {"items": ["a", "b", "c"]},
    )
    assert result == "- a\n- b\n- c\n"
