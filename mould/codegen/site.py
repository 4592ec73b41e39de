"""Write the generated model package and the two HTML pages to disk."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Callable, Dict, List, Optional, Tuple

from mould.ast import FormModel
from mould.errors import MouldError
from mould.templates import TemplateError

from .models import render_model_module
from .pages import render_form_page, render_response_page
from .stylesheet import DEFAULT_THEME, render_stylesheet

if TYPE_CHECKING:  # pragma: no cover - used for type hints only
    from mould.config import BuildConfig

logger = logging.getLogger(__name__)

PACKAGE_INIT = '"""Form package generated by mould."""\n'

Artifact = Tuple[Path, Callable[[], str]]


@dataclass
class BuildReport:
    written: List[Path] = field(default_factory=list)
    failures: Dict[Path, str] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures


def load_stylesheet(path: Optional[Path]) -> Optional[str]:
    """Read an external stylesheet, or return ``None`` to use the built-in one."""
    if path is None:
        return None
    try:
        return Path(path).read_text(encoding="utf-8")
    except OSError as exc:
        logger.error("Could not read stylesheet %s, using the built-in one: %s", path, exc)
        return None


def _artifacts(model: FormModel, config: "BuildConfig", external_css: Optional[str]) -> List[Artifact]:
    stylesheet = render_stylesheet(
        model.theme,
        external_css=external_css,
        defaults=config.theme_defaults or DEFAULT_THEME,
    )
    return [
        (config.package_dir / "__init__.py", lambda: PACKAGE_INIT),
        (config.package_dir / config.model_file, lambda: render_model_module(model)),
        (config.out / config.form_page, lambda: render_form_page(model, stylesheet)),
        (config.out / config.response_page, lambda: render_response_page(stylesheet)),
    ]


def render_artifacts(
    model: FormModel,
    config: "BuildConfig",
    external_css: Optional[str] = None,
) -> Dict[Path, str]:
    """Render every artefact in memory, keyed by its output path."""
    return {path: render() for path, render in _artifacts(model, config, external_css)}


def write_artifacts(
    model: FormModel,
    config: "BuildConfig",
    external_css: Optional[str] = None,
) -> BuildReport:
    """
    Render and write each artefact independently.

    A failure to render or write one file is logged and recorded in the
    report; the remaining files are still written.
    """
    report = BuildReport()
    for path, render in _artifacts(model, config, external_css):
        try:
            content = render()
            path.parent.mkdir(parents=True, exist_ok=True)
            path.write_text(content, encoding="utf-8")
        except (MouldError, TemplateError, OSError) as exc:
            detail = exc.format() if isinstance(exc, MouldError) else str(exc)
            logger.error("Failed to write %s: %s", path, detail)
            report.failures[path] = detail
            continue
        logger.info("Wrote %s", path)
        report.written.append(path)
    return report


__all__ = [
    "BuildReport",
    "PACKAGE_INIT",
    "load_stylesheet",
    "render_artifacts",
    "write_artifacts",
]
