from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from jinja2 import Environment, FileSystemLoader

from suitetally.summary import summarize

if TYPE_CHECKING:
    from suitetally.reporting.nunit import AnyResult

logger = logging.getLogger(__name__)


def generate_html(result: AnyResult) -> str:
    """Render ``result`` and its summary through report.html.j2."""
    tmpl_dir = Path(__file__).parent / "templates"
    env = Environment(loader=FileSystemLoader(str(tmpl_dir)), autoescape=True)
    template = env.get_template("report.html.j2")
    return template.render(
        root=result,
        summary=summarize(result),
    )


def write_html(result: AnyResult, path: Path) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(generate_html(result), encoding="utf-8")
    logger.debug(f"Wrote HTML report for {result.full_name!r} to {path}")
    return path
