"""比較レポート生成コマンド."""

import asyncio

from pathlib import Path

import click

from src.application.dtos.report_dto import ProduceReportInputDto
from src.infrastructure.config.settings import Settings
from src.interfaces.cli.base import with_error_handling
from src.interfaces.factories.election_reporter_factory import (
    ElectionReporterFactory,
)


@click.command()
@click.option(
    "--output",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="出力先HTMLファイル（デフォルト: 設定値）",
)
@click.pass_obj
@with_error_handling
def report(settings: Settings, output_path: Path | None):
    """全選挙年の名簿とアンケートから比較レポートを生成する."""
    asyncio.run(_run_report(settings, output_path or settings.report_path))


async def _run_report(settings: Settings, output_path: Path) -> None:
    use_case = ElectionReporterFactory(settings).create_report_usecase()
    result = await use_case.execute(
        ProduceReportInputDto(
            years=list(settings.years),
            available_seats=settings.available_seats,
            output_path=output_path,
        )
    )
    click.echo(
        f"レポートを出力しました: {result.output_path} "
        f"（{result.list_count}名簿 / {result.member_count}候補者 / "
        f"アンケートあり{result.members_with_data}名）"
    )
