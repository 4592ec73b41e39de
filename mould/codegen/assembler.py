"""Two-pass document assembler turning directives into a :class:`FormModel`."""

from __future__ import annotations

import html
import logging
from typing import Callable, Dict, Iterable, Optional

from mould.ast import Directive, ElementKind, FormModel, PageMeta, Theme

from .dispatch import dispatch

logger = logging.getLogger(__name__)

FORM_OPEN = '<form action="/" method="post">'
SUBMIT_CONTROL = '<div><button type="submit">Submit</button></div>'
FORM_CLOSE = "</form>"

# Metadata kinds contributing a field to the generated content model.
CONTENT_FIELDS: Dict[str, str] = {
    ElementKind.TITLE.value: "Title",
    ElementKind.DESCRIPTION.value: "Description",
    ElementKind.IMAGE.value: "Image",
    ElementKind.PASSWORD.value: "Password",
    ElementKind.USER.value: "User",
}

_HEADER_RENDERERS: Dict[str, Callable[[str], str]] = {
    ElementKind.TITLE.value: lambda value: f"<h1>{html.escape(value)}</h1>",
    ElementKind.DESCRIPTION.value: lambda value: f"<p>{value}</p>",
    ElementKind.IMAGE.value: lambda value: f'<img src="{html.escape(value, quote=True)}">',
}

_PAGE_ATTRIBUTES: Dict[str, str] = {
    ElementKind.TITLE.value: "title",
    ElementKind.DESCRIPTION.value: "description",
    ElementKind.IMAGE.value: "image",
    ElementKind.PASSWORD.value: "password",
    ElementKind.USER.value: "user",
}

_THEME_ATTRIBUTES: Dict[str, str] = {
    ElementKind.BACKGROUND.value: "background",
    ElementKind.TITLE_COLOR.value: "title_color",
    ElementKind.FOREGROUND.value: "body",
}


def _collect_metadata(directives: Iterable[Directive], model: FormModel) -> None:
    header_slots: Dict[str, int] = {}
    for directive in directives:
        element = directive.element
        if element in _PAGE_ATTRIBUTES:
            setattr(model.page, _PAGE_ATTRIBUTES[element], directive.value)
        elif element in _THEME_ATTRIBUTES:
            setattr(model.theme, _THEME_ATTRIBUTES[element], directive.value)
        else:
            continue

        content_name = CONTENT_FIELDS.get(element)
        if content_name and content_name not in model.content_fields:
            model.content_fields.append(content_name)

        renderer = _HEADER_RENDERERS.get(element)
        if renderer is None:
            continue
        fragment = renderer(directive.value)
        if element in header_slots:
            # A repeated directive replaces the fragment in place.
            model.header[header_slots[element]] = fragment
        else:
            header_slots[element] = len(model.header)
            model.header.append(fragment)


def _collect_fields(directives: Iterable[Directive], model: FormModel) -> None:
    model.body.append(FORM_OPEN)
    for directive in directives:
        if directive.is_metadata and directive.element != ElementKind.PARAGRAPH.value:
            continue
        output = dispatch(directive)
        if output is None:
            logger.warning(
                "Skipping unknown element %r on line %s", directive.element, directive.line
            )
            model.skipped.append(directive)
            continue
        model.body.extend(output.fragments)
        if output.field_spec is not None:
            model.fields.append(output.field_spec)
        if output.extraction is not None:
            model.extractions.append(output.extraction)
    model.body.append(SUBMIT_CONTROL)
    model.body.append(FORM_CLOSE)


def assemble_form(directives: Iterable[Directive], *, default_user: Optional[str] = None) -> FormModel:
    """
    Build the form model from parsed directives.

    Metadata directives are collected first, then field directives are
    dispatched in source order, so interleaved metadata never changes the
    order of the generated fields.
    """
    directives = list(directives)
    page = PageMeta() if default_user is None else PageMeta(user=default_user)
    model = FormModel(page=page, theme=Theme())
    _collect_metadata(directives, model)
    _collect_fields(directives, model)
    logger.debug(
        "Assembled form with %d field(s) and %d content field(s)",
        len(model.fields),
        len(model.content_fields),
    )
    return model


__all__ = [
    "CONTENT_FIELDS",
    "FORM_CLOSE",
    "FORM_OPEN",
    "SUBMIT_CONTROL",
    "assemble_form",
]
