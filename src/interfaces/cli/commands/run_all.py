"""一括実行コマンド（変換→アンケート取得→レポート生成）."""

import asyncio

import click

from src.infrastructure.config.settings import Settings
from src.interfaces.cli.base import with_error_handling
from src.interfaces.cli.commands.fetch_applications import _run_fetch
from src.interfaces.cli.commands.report import _run_report
from src.interfaces.cli.commands.transform import _run_transform


@click.command()
@click.option(
    "--skip-fetch",
    is_flag=True,
    help="アンケート取得をスキップ（既存のJSONを使用）",
)
@click.pass_obj
@with_error_handling
def run_all(settings: Settings, skip_fetch: bool):
    """全選挙年の変換・最新年のアンケート取得・レポート生成を順に実行する."""
    asyncio.run(_run_all(settings, skip_fetch))


async def _run_all(settings: Settings, skip_fetch: bool) -> None:
    await _run_transform(settings, list(settings.years))
    if not skip_fetch:
        await _run_fetch(settings, settings.latest_year, settings.request_delay)
    await _run_report(settings, settings.report_path)
