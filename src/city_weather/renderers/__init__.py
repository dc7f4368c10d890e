"""Pure rendering functions: structured data -> text.

All renderers follow the same pattern:
  - Input: records from ``city_weather.schemas`` plus a display unit
  - Output: str (a text block, ready to print)
  - No side effects, no I/O, no Prefect decorators

Public API:
  - report: build_current_text, build_forecast_text, build_report_text, error_message
  - weather_utils: c_to_f, convert_temperature, format_temperature, condition_icon
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import jinja2

# Shared Jinja2 environment for all renderers
_TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
_jinja_env = jinja2.Environment(
    loader=jinja2.FileSystemLoader(str(_TEMPLATE_DIR)),
    autoescape=jinja2.select_autoescape(enabled_extensions=("html.j2",)),
    trim_blocks=True,
    lstrip_blocks=True,
)


def render_template(template_name: str, **kwargs: Any) -> str:
    """Render a Jinja2 template by name."""
    return _jinja_env.get_template(template_name).render(**kwargs)
