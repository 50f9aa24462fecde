"""比較レポートのHTMLレンダラー (Jinja2)."""

import logging

from pathlib import Path

from jinja2 import Environment, FileSystemLoader, StrictUndefined, select_autoescape

from src.application.dtos.report_dto import ReportDto
from src.infrastructure.report.formatters import (
    decode_entities,
    format_decimal,
    format_eur,
    format_yes_no,
)


logger = logging.getLogger(__name__)

TEMPLATES_DIR = Path(__file__).parent / "templates"
REPORT_TEMPLATE = "report.html.j2"


class HtmlReportRenderer:
    """ReportDtoを静的HTMLに変換する."""

    def __init__(self, templates_dir: Path = TEMPLATES_DIR) -> None:
        self._env = Environment(
            loader=FileSystemLoader(templates_dir),
            autoescape=select_autoescape(["html", "j2"]),
            undefined=StrictUndefined,
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self._env.filters["eur"] = format_eur
        self._env.filters["decimal"] = format_decimal
        self._env.filters["yes_no"] = format_yes_no
        self._env.filters["decode_entities"] = decode_entities

    def render(self, report: ReportDto) -> str:
        template = self._env.get_template(REPORT_TEMPLATE)
        return template.render(report=report)

    def write(self, report: ReportDto, output_path: Path) -> Path:
        """レポートをレンダリングしてファイルに書き出す."""
        content = self.render(report)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(content, encoding="utf-8")
        logger.info("レポートを出力: %s (%d文字)", output_path, len(content))
        return output_path
