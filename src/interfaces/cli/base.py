"""CLI共通ユーティリティ."""

import functools
import logging
import sys

from collections.abc import Callable
from typing import Any

import click

from src.infrastructure.exceptions import InfrastructureError


logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str) -> None:
    """ルートロガーを設定する."""
    logging.basicConfig(level=level.upper(), format=LOG_FORMAT, force=True)


def with_error_handling(func: Callable[..., Any]) -> Callable[..., Any]:
    """コマンド実行時の例外を表示して終了コード1で終了させるデコレーター."""

    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except InfrastructureError as e:
            click.echo(f"エラー: {e.message}", err=True)
            sys.exit(1)
        except Exception as e:
            logger.exception("コマンド実行中に予期しないエラー")
            click.echo(f"予期しないエラー: {e}", err=True)
            sys.exit(1)

    return wrapper
