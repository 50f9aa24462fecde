"""election-reporter CLI テスト用フィクスチャ."""

from collections.abc import Iterator
from pathlib import Path
from unittest.mock import patch

import pytest

from click.testing import CliRunner

from src.infrastructure.config.settings import Settings


LIST_TEXTS = {
    2019: "Nr. 1. Liberalų sąjūdis\n1. Jonas Jonaitis\n2. Petras Petraitis\n",
    2023: (
        "Nr. 4. Darbo partija\n"
        "1. Ona Onaitė\n"
        "2. Jonas Jonaitis\n"
        "Nr. 7. Lietuvos žaliųjų partija\n"
        "1. Antanas Antanaitis\n"
    ),
}


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def settings(tmp_path: Path) -> Settings:
    lists_dir = tmp_path / "lists"
    lists_dir.mkdir()
    for year, text in LIST_TEXTS.items():
        (lists_dir / f"{year}.txt").write_text(text, encoding="utf-8")
    return Settings(
        lists_dir=lists_dir,
        transformed_data_dir=tmp_path / "transformed-data",
        report_path=tmp_path / "report.html",
        years=[2019, 2023],
        available_seats=2,
    )


@pytest.fixture(autouse=True)
def patched_settings(settings: Settings) -> Iterator[Settings]:
    with (
        patch("src.interfaces.cli.main.get_settings", return_value=settings),
        patch("src.interfaces.cli.main.setup_logging"),
    ):
        yield settings
