"""Tests for the shortcode and markdown template tags."""

from unittest import mock

import pytest
from django.template import Context, Template, TemplateSyntaxError
from django.template.loader import render_to_string
from django.utils.safestring import mark_safe


class TestShortcodeFilters:
    def test_expand_and_strip_filters(self) -> None:
        html = render_to_string("filters.html", {"text": "a [upper]b[/upper] c"})

        assert html == "a B c|a  c"

    def test_expand_filter_output_is_not_escaped(self) -> None:
        template = Template("{% load shortcode_tags %}{{ text|shortcodes }}")

        html = template.render(Context({"text": "[upper]<b>x</b>[/upper]"}))

        assert html == "<B>X</B>"

    def test_expand_filter_escapes_text_around_shortcodes(self) -> None:
        template = Template("{% load shortcode_tags %}{{ text|shortcodes }}")

        html = template.render(Context({"text": "<script>x</script> [greet] [[greet]]"}))

        assert html == "&lt;script&gt;x&lt;/script&gt; Hello, world! [greet]"

    def test_expand_filter_keeps_safe_input(self) -> None:
        template = Template("{% load shortcode_tags %}{{ text|shortcodes }}")

        html = template.render(Context({"text": mark_safe("<em>[greet]</em>")}))

        assert html == "<em>Hello, world!</em>"

    def test_expand_filter_without_autoescape(self) -> None:
        template = Template("{% load shortcode_tags %}{% autoescape off %}{{ text|shortcodes }}{% endautoescape %}")

        html = template.render(Context({"text": "<em>[greet]</em>"}))

        assert html == "<em>Hello, world!</em>"

    def test_strip_filter_escapes_unsafe_input(self) -> None:
        template = Template("{% load shortcode_tags %}{{ text|strip_shortcodes }}")

        html = template.render(Context({"text": "<i>[greet]</i>"}))

        assert html == "&lt;i&gt;&lt;/i&gt;"

    def test_filters_accept_non_strings(self) -> None:
        template = Template("{% load shortcode_tags %}{{ value|shortcodes }}")

        assert template.render(Context({"value": 42})) == "42"


class TestShortcodesBlockTag:
    def test_default_mode_expands(self) -> None:
        assert render_to_string("block.html", {"word": "quiet"}) == "QUIET"

    def test_literal_mode(self) -> None:
        assert render_to_string("block_strip.html") == "ab"

    @pytest.mark.parametrize(
        ("mode", "expected"),
        [("expand", "xYz"), ("strip", "xz"), ("unset", "x[upper]y[/upper]z")],
    )
    def test_variable_mode(self, mode, expected) -> None:
        assert render_to_string("block_var.html", {"mode": mode}) == expected

    def test_quoted_mode(self) -> None:
        template = Template('{% load shortcode_tags %}{% shortcodes "strip" %}[greet]!{% endshortcodes %}')

        assert template.render(Context()) == "!"

    def test_unknown_quoted_mode_is_a_syntax_error(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            Template('{% load shortcode_tags %}{% shortcodes "explode" %}{% endshortcodes %}')

    def test_too_many_arguments(self) -> None:
        with pytest.raises(TemplateSyntaxError):
            Template("{% load shortcode_tags %}{% shortcodes strip expand %}{% endshortcodes %}")

    def test_block_content_is_autoescaped_before_expansion(self) -> None:
        template = Template("{% load shortcode_tags %}{% shortcodes %}[greet name={{ name }}]{% endshortcodes %}")

        assert template.render(Context({"name": "<b>"})) == "Hello, <b>!"


class TestMarkdownTags:
    @mock.patch("shortcodes.markdown.renderer.pypandoc.convert_text", side_effect=lambda text, **kwargs: f"<p>{text}</p>")
    def test_markdown_filter_expands(self, convert_text) -> None:
        template = Template("{% load markdown_tags %}{{ body|markdown }}")

        html = template.render(Context({"body": "say [greet]"}))

        assert html == "<p>say Hello, world!</p>"
        assert convert_text.call_args.kwargs["to"] == "html5"

    @mock.patch("shortcodes.markdown.renderer.pypandoc.convert_text", side_effect=lambda text, **kwargs: text)
    def test_markdown_stripped_filter(self, convert_text) -> None:
        template = Template("{% load markdown_tags %}{{ body|markdown_stripped }}")

        assert template.render(Context({"body": "say [greet]"})) == "say "

    @mock.patch("shortcodes.markdown.renderer.pypandoc.convert_text", side_effect=lambda text, **kwargs: text)
    def test_markdown_with_context_mode(self, convert_text) -> None:
        template = Template(
            '{% load markdown_tags %}{% markdown_with_context body "unset" %}|{% markdown_with_context body %}'
        )

        html = template.render(Context({"body": "[upper]a[/upper]", "shortcode_mode": "strip"}))

        assert html == "[upper]a[/upper]|"
