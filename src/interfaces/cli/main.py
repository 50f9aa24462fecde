"""election-reporter CLI エントリーポイント."""

import click

from src.infrastructure.config.settings import get_settings
from src.interfaces.cli.base import setup_logging
from src.interfaces.cli.commands.fetch_applications import fetch_applications
from src.interfaces.cli.commands.report import report
from src.interfaces.cli.commands.run_all import run_all
from src.interfaces.cli.commands.transform import transform


@click.group()
@click.option(
    "--log-level",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    default=None,
    help="ログレベル（デフォルト: 設定値）",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str | None):
    """カウナス市議会選挙の候補者名簿比較レポートツール."""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)
    ctx.obj = settings


cli.add_command(transform)
cli.add_command(fetch_applications, "fetch-applications")
cli.add_command(report)
cli.add_command(run_all, "run-all")


if __name__ == "__main__":
    cli()
