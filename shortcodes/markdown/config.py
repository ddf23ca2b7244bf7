from shortcodes.conf import get_shortcode_config


def get_pandoc_config():
    """
    Configuration for pypandoc/Pandoc markdown rendering.

    ``raw_html`` must stay enabled: expanded shortcodes are usually HTML and
    have to reach the output untouched. SHORTCODES["PANDOC_EXTRA_ARGS"]
    replaces the argument list entirely when set.
    """
    extra_args = get_shortcode_config()["PANDOC_EXTRA_ARGS"]
    if extra_args is not None:
        return {"extra_args": list(extra_args)}

    return {
        "extra_args": [
            "--from=markdown+autolink_bare_uris+strikeout+superscript+subscript+task_lists+smart+pipe_tables+definition_lists+footnotes+fenced_code_blocks+fenced_code_attributes+raw_html+header_attributes",
            # Math rendering with MathJax
            "--mathjax",
        ],
    }
