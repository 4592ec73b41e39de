"""Render the form page and the response (receipt) page."""

from __future__ import annotations

from mould.ast import FormModel
from mould.templates import get_html_engine

FORM_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>{{ title }}</title>
    {{ stylesheet|safe }}
  </head>
  <body>
{{ content|safe }}
  </body>
</html>
"""

# ``{{ Data }}`` is left in place for the form server, which renders the
# page again with a ``ResponderData`` instance.
RESPONSE_PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
  <head>
    <meta charset="utf-8">
    <title>Form submitted</title>
    {{ stylesheet|safe }}
  </head>
  <body>
    <h1>Response successful</h1>
    <p>Your response: </p>
    <pre>
    <code>
{% raw %}{{ Data }}{% endraw %}

    </code>
    </pre>
    <p><b>Bookmark this page</b> as a receipt or if you want to review what you responded some time in the future</p>
  </body>
</html>
"""


def render_form_page(model: FormModel, stylesheet: str) -> str:
    return get_html_engine().render(
        FORM_PAGE_TEMPLATE,
        {
            "title": model.page.title,
            "stylesheet": stylesheet,
            "content": "\n".join(model.fragments),
        },
        name="form_page",
    )


def render_response_page(stylesheet: str) -> str:
    return get_html_engine().render(
        RESPONSE_PAGE_TEMPLATE,
        {"stylesheet": stylesheet},
        name="response_page",
    )


__all__ = [
    "FORM_PAGE_TEMPLATE",
    "RESPONSE_PAGE_TEMPLATE",
    "render_form_page",
    "render_response_page",
]
