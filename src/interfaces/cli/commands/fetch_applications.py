"""候補者アンケート取得コマンド."""

import asyncio

import click

from src.application.dtos.member_application_fetch_dto import (
    FetchMemberApplicationsInputDto,
)
from src.infrastructure.config.settings import Settings
from src.interfaces.cli.base import with_error_handling
from src.interfaces.factories.election_reporter_factory import (
    ElectionReporterFactory,
)


@click.command()
@click.option(
    "--year",
    type=int,
    default=None,
    help="選挙年（デフォルト: 設定の最新年）",
)
@click.option(
    "--delay",
    type=float,
    default=None,
    help="APIコール間のスリープ秒数（デフォルト: 設定値）",
)
@click.pass_obj
@with_error_handling
def fetch_applications(settings: Settings, year: int | None, delay: float | None):
    """全候補者のアンケートを逐次取得する."""
    asyncio.run(
        _run_fetch(
            settings,
            year if year is not None else settings.latest_year,
            delay if delay is not None else settings.request_delay,
        )
    )


async def _run_fetch(settings: Settings, year: int, delay: float) -> None:
    use_case = ElectionReporterFactory(settings).create_fetch_applications_usecase(
        year
    )
    result = await use_case.execute(
        FetchMemberApplicationsInputDto(year=year, request_delay=delay)
    )

    click.echo(f"=== {result.year}年 アンケート取得結果 ===")
    click.echo(f"  候補者数:   {result.total_members:,}")
    click.echo(f"  取得:       {result.found_applications:,}")
    click.echo(f"  未取得:     {result.missing_applications:,}")
    click.echo(f"  エラー:     {result.errors:,}")
    for detail in result.error_details:
        click.echo(f"    - {detail}")
