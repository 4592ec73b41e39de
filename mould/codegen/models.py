"""Render the generated Pydantic model module for a form."""

from __future__ import annotations

import keyword
import logging
from typing import Optional, Set

from mould.ast import FieldSpec, FormModel
from mould.errors import MouldCodegenError
from mould.templates import get_code_engine

logger = logging.getLogger(__name__)

_RESERVED_ATTRIBUTES = {"parse_post", "model_config"}

MODEL_TEMPLATE = '''"""Form models generated by mould. Do not edit by hand."""

from __future__ import annotations

from typing import Mapping

from pydantic import BaseModel, ConfigDict, Field

BASIC_PASSWORD = {{ page.password|py_string }}
BASIC_USER = {{ page.user|py_string }}


class FormContent(BaseModel):
{% for name in content_fields %}
    {{ name }}: str = ""
{% else %}
    pass
{% endfor %}


class FormAnswer(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

{% for field in fields %}
    {{ field.title }}: str = Field(default="", alias={{ field.key|py_string }})
{% endfor %}
{% if fields %}

{% endif %}
    def parse_post(self, form: Mapping[str, str]) -> None:
        """Populate the answer from submitted form values."""
{% for statement in extractions %}
        self.{{ statement.attribute }} = form.get({{ statement.key|py_string }}, "")
{% endfor %}


class ResponderData(BaseModel):
    Data: str = ""
'''


def _check_attribute(spec: FieldSpec, seen: Set[str]) -> None:
    name = spec.title
    problem: Optional[str] = None
    if not name.isidentifier():
        problem = "is not a valid Python identifier"
    elif keyword.iskeyword(name):
        problem = "is a reserved Python keyword"
    elif name.startswith("_") or name in _RESERVED_ATTRIBUTES:
        problem = "is reserved on generated models"
    elif name in seen:
        problem = "is generated by more than one field"
    if problem is not None:
        raise MouldCodegenError(
            f"Answer attribute {name!r} derived from {spec.label or spec.key!r} {problem}",
            line=spec.line,
            hint="Give the field an explicit '#key' made of letters, digits and hyphens",
        )
    seen.add(name)


def validate_fields(model: FormModel) -> None:
    """Ensure every answer field maps to a distinct, usable attribute name."""
    seen: Set[str] = set()
    for spec in model.fields:
        _check_attribute(spec, seen)


def render_model_module(model: FormModel) -> str:
    """Return the source of the generated model module."""
    validate_fields(model)
    source = get_code_engine().render(
        MODEL_TEMPLATE,
        {
            "page": model.page,
            "content_fields": model.content_fields,
            "fields": model.fields,
            "extractions": model.extractions,
        },
        name="generated_form_model",
    )
    logger.debug("Generated model module:\n%s", source)
    return source


__all__ = ["MODEL_TEMPLATE", "render_model_module", "validate_fields"]
