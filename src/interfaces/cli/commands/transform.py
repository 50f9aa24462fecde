"""名簿テキスト変換コマンド."""

import asyncio

import click

from src.application.dtos.candidate_list_transform_dto import (
    TransformCandidateListsInputDto,
)
from src.infrastructure.config.settings import Settings
from src.infrastructure.importers._constants import SUPPORTED_YEARS
from src.interfaces.cli.base import with_error_handling
from src.interfaces.factories.election_reporter_factory import (
    ElectionReporterFactory,
)


@click.command()
@click.option(
    "--year",
    type=click.Choice([str(year) for year in SUPPORTED_YEARS]),
    default=None,
    help="選挙年",
)
@click.option(
    "--all",
    "transform_all",
    is_flag=True,
    help="設定された全選挙年を変換",
)
@click.pass_obj
@with_error_handling
def transform(settings: Settings, year: str | None, transform_all: bool):
    """名簿テキスト（lists/{year}.txt）をJSONに変換する."""
    if transform_all:
        years = list(settings.years)
    elif year is not None:
        years = [int(year)]
    else:
        raise click.UsageError("--year または --all を指定してください")

    asyncio.run(_run_transform(settings, years))


async def _run_transform(settings: Settings, years: list[int]) -> None:
    use_case = ElectionReporterFactory(settings).create_transform_usecase()

    for year in years:
        result = await use_case.execute(TransformCandidateListsInputDto(year=year))
        click.echo(
            f"{result.year}年: {result.list_count}名簿 / {result.member_count}候補者"
        )
