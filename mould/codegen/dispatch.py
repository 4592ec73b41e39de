"""Element dispatch table mapping directive kinds to their generation rules."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from mould.ast import Directive, ElementKind, ExtractionSpec, FieldSpec

from .naming import derive_key_and_title
from .renderers import (
    RenderContext,
    render_email,
    render_hidden,
    render_label,
    render_number,
    render_paragraph,
    render_radio,
    render_range,
    render_text_input,
    render_textarea,
)

Renderer = Callable[[RenderContext], None]


@dataclass(frozen=True)
class ElementRule:
    """
    Generation rules for one element kind.

    ``render`` appends the element's own fragments. ``labelled`` adds the
    shared ``<label>`` fragment before them, and ``produces_field`` wraps the
    fragments in a ``<div>`` and yields an answer field plus its extraction
    statement.
    """

    kind: ElementKind
    render: Renderer
    labelled: bool = True
    produces_field: bool = True


@dataclass
class ElementOutput:
    fragments: List[str] = field(default_factory=list)
    field_spec: Optional[FieldSpec] = None
    extraction: Optional[ExtractionSpec] = None


ELEMENT_RULES: Dict[str, ElementRule] = {
    rule.kind.value: rule
    for rule in (
        ElementRule(ElementKind.INPUT, render_text_input),
        ElementRule(ElementKind.TEXTAREA, render_textarea),
        ElementRule(ElementKind.HIDDEN, render_hidden, labelled=False),
        ElementRule(ElementKind.EMAIL, render_email),
        ElementRule(ElementKind.NUMBER, render_number),
        ElementRule(ElementKind.RANGE, render_range),
        ElementRule(ElementKind.RADIO, render_radio, labelled=False),
        ElementRule(ElementKind.PARAGRAPH, render_paragraph, labelled=False, produces_field=False),
    )
}


def dispatch(directive: Directive) -> Optional[ElementOutput]:
    """Apply the rule registered for ``directive.element``, if any."""
    rule = ELEMENT_RULES.get(directive.element)
    if rule is None:
        return None

    key, title = derive_key_and_title(directive.title, directive.key)
    ctx = RenderContext(directive=directive, key=key, title=title)
    if not rule.produces_field:
        rule.render(ctx)
        return ElementOutput(fragments=ctx.body_lines)

    ctx.body_lines.append("<div>")
    if rule.labelled:
        render_label(ctx)
    rule.render(ctx)
    ctx.body_lines.append("</div>")
    return ElementOutput(
        fragments=ctx.body_lines,
        field_spec=FieldSpec(
            key=key,
            title=title,
            required=directive.required,
            label=directive.title,
            element=directive.element,
            line=directive.line,
        ),
        extraction=ExtractionSpec(attribute=title, key=key),
    )


__all__ = ["ELEMENT_RULES", "ElementOutput", "ElementRule", "dispatch"]
