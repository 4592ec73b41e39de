"""Build configuration support for the Mould CLI."""

from __future__ import annotations

import json
import tomllib
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any, Dict, Optional

from mould.ast import Theme
from mould.codegen.stylesheet import DEFAULT_THEME

CONFIG_CANDIDATES = ("mould.toml", ".mouldrc")


@dataclass
class BuildConfig:
    """Output locations and compile options, resolved from file and CLI."""

    out: Path = Path(".")
    package: str = "myform"
    model_file: str = "generated_form_model.py"
    form_page: str = "index-template.html"
    response_page: str = "response-template.html"
    default_user: str = "mouldy"
    strict: bool = False
    stylesheet: Optional[Path] = None
    theme_defaults: Theme = field(default_factory=lambda: replace(DEFAULT_THEME))
    source: Optional[Path] = None

    @property
    def package_dir(self) -> Path:
        return self.out / self.package

    def with_overrides(self, **overrides: Any) -> "BuildConfig":
        """Return a copy with every non-``None`` override applied."""
        applied = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **applied)


def _read_json_config(path: Path) -> Dict[str, Any]:
    content = path.read_text(encoding="utf-8")
    return json.loads(content)


def _read_toml_config(path: Path) -> Dict[str, Any]:
    with path.open("rb") as handle:
        return tomllib.load(handle)


def _parse_theme(data: Dict[str, Any]) -> Theme:
    section = data.get("theme") or {}
    return Theme(
        background=str(section.get("background") or DEFAULT_THEME.background),
        title_color=str(section.get("title_color") or DEFAULT_THEME.title_color),
        body=str(section.get("body") or DEFAULT_THEME.body),
    )


def _parse_build(data: Dict[str, Any], root: Path) -> BuildConfig:
    section = data.get("build") or {}
    defaults = BuildConfig()
    out = Path(section.get("out") or defaults.out)
    if not out.is_absolute():
        out = (root / out).resolve()
    stylesheet_raw = section.get("stylesheet")
    stylesheet = Path(stylesheet_raw) if stylesheet_raw else None
    if stylesheet is not None and not stylesheet.is_absolute():
        stylesheet = (root / stylesheet).resolve()
    return BuildConfig(
        out=out,
        package=str(section.get("package") or defaults.package),
        model_file=str(section.get("model_file") or defaults.model_file),
        form_page=str(section.get("form_page") or defaults.form_page),
        response_page=str(section.get("response_page") or defaults.response_page),
        default_user=str(section.get("default_user") or defaults.default_user),
        strict=bool(section.get("strict", defaults.strict)),
        stylesheet=stylesheet,
        theme_defaults=_parse_theme(data),
    )


def locate_config_file(root: Path, explicit: Optional[Path] = None) -> Optional[Path]:
    """Return ``explicit`` as given, or the first candidate found under ``root``."""
    if explicit is not None:
        return explicit
    for candidate in CONFIG_CANDIDATES:
        path = root / candidate
        if path.exists():
            return path
    return None


def load_build_config(root: Path, explicit: Optional[Path] = None) -> BuildConfig:
    root = root.resolve()
    config_path = locate_config_file(root, explicit)
    if config_path is None:
        return BuildConfig(out=root)

    if config_path.suffix == ".toml":
        data = _read_toml_config(config_path)
    else:
        data = _read_json_config(config_path)

    config = _parse_build(data, root)
    config.source = config_path
    return config


__all__ = ["BuildConfig", "CONFIG_CANDIDATES", "load_build_config", "locate_config_file"]
