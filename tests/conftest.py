import django
import pytest
from django.conf import settings

TEMPLATES = {
    "page.html": "<h1>{{ title }}</h1>\n[greet name=\"{{ name }}\"]\n[upper]{{ body }}[/upper]",
    "plain.txt": "Before [upper]loud[/upper] after [[greet]]",
    "block.html": "{% load shortcode_tags %}{% shortcodes %}[upper]{{ word }}[/upper]{% endshortcodes %}",
    "block_strip.html": "{% load shortcode_tags %}{% shortcodes strip %}a[greet]b{% endshortcodes %}",
    "block_var.html": "{% load shortcode_tags %}{% shortcodes mode %}x[upper]y[/upper]z{% endshortcodes %}",
    "filters.html": "{% load shortcode_tags %}{{ text|shortcodes }}|{{ text|strip_shortcodes }}",
}


def pytest_configure(config):
    if settings.configured:
        return

    settings.configure(
        DEBUG=True,
        SECRET_KEY="shortcodes-tests",
        INSTALLED_APPS=[
            "shortcodes",
            "tests",
        ],
        TEMPLATES=[
            {
                "BACKEND": "django.template.backends.django.DjangoTemplates",
                "APP_DIRS": False,
                "OPTIONS": {
                    "loaders": [("django.template.loaders.locmem.Loader", TEMPLATES)],
                },
            }
        ],
        SHORTCODES={
            "DEFAULT_MODE": "unset",
            "MARKDOWN_MODE": "expand",
        },
    )
    django.setup()


@pytest.fixture
def registry():
    """A fresh registry, independent from the autodiscovered one."""
    from shortcodes.registry import TagRegistry

    return TagRegistry()


@pytest.fixture
def calls():
    return []


@pytest.fixture
def recorder(calls):
    """Handler that records its arguments and renders a marker."""

    def handler(attrs, body, tag):
        calls.append((attrs, body, tag))
        return "<X>"

    return handler
