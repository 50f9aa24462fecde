"""候補者名簿テキストパーサーのユニットテスト."""

import logging

import pytest

from src.infrastructure.importers._constants import ListFormat
from src.infrastructure.importers.candidate_list_text_parser import (
    parse_candidate_list_lines,
    parse_candidate_list_text,
)


class TestHeaderOnlyFormat:
    """HEADER_ONLY書式（2011, 2015年）のテスト."""

    TEXT_2015 = """Lietuvos socialdemokratų partija
1. Andrius Kupčinskas
2. Ona Petraitienė
3. Jonas Jonaitis
Tėvynės sąjunga - Lietuvos krikščionys demokratai
1. Petras Petraitis
2. Rūta Rūtaitė
"""

    def test_parse_lists(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2015.splitlines(), ListFormat.HEADER_ONLY
        )
        assert [lst.name for lst in result] == [
            "LIETUVOS SOCIALDEMOKRATŲ PARTIJA",
            "TĖVYNĖS SĄJUNGA - LIETUVOS KRIKŠČIONYS DEMOKRATAI",
        ]

    def test_last_list_is_emitted(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2015.splitlines(), ListFormat.HEADER_ONLY
        )
        assert len(result) == 2
        assert len(result[1].members) == 2

    def test_members_upper_cased_with_positions(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2015.splitlines(), ListFormat.HEADER_ONLY
        )
        members = result[0].members
        assert [(m.position, m.name) for m in members] == [
            (1, "ANDRIUS KUPČINSKAS"),
            (2, "ONA PETRAITIENĖ"),
            (3, "JONAS JONAITIS"),
        ]

    def test_number_is_none(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2015.splitlines(), ListFormat.HEADER_ONLY
        )
        assert all(lst.number is None for lst in result)

    def test_repeated_header_continues_list(self) -> None:
        lines = [
            "Darbo partija",
            "1. Jonas Jonaitis",
            "DARBO PARTIJA",
            "2. Petras Petraitis",
        ]
        result = parse_candidate_list_lines(lines, ListFormat.HEADER_ONLY)
        assert len(result) == 1
        assert [m.position for m in result[0].members] == [1, 2]

    def test_blank_lines_ignored(self) -> None:
        lines = ["Darbo partija", "", "   ", "1. Jonas Jonaitis", ""]
        result = parse_candidate_list_lines(lines, ListFormat.HEADER_ONLY)
        assert len(result) == 1
        assert result[0].name == "DARBO PARTIJA"
        assert len(result[0].members) == 1


class TestNumberedFormat:
    """NUMBERED書式（2019, 2023年）のテスト."""

    TEXT_2019 = """Nr. 1. Lietuvos Respublikos liberalų sąjūdis
1. Vardenis Pavardenis
2. Jonas Petras Jonaitis
Nr. 2. Visuomeninis rinkimų komitetas „Vieningas Kaunas"
1. Visvaldas Matijošaitis
"""

    def test_parse_names_and_numbers(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2019.splitlines(), ListFormat.NUMBERED
        )
        assert [(lst.number, lst.name) for lst in result] == [
            (1, "LIETUVOS RESPUBLIKOS LIBERALŲ SĄJŪDIS"),
            (2, 'VISUOMENINIS RINKIMŲ KOMITETAS „VIENINGAS KAUNAS"'),
        ]

    def test_every_list_number_strips_trailing_dot(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2019.splitlines(), ListFormat.NUMBERED
        )
        assert result[1].number == 2

    def test_multiple_first_names_kept(self) -> None:
        result = parse_candidate_list_lines(
            self.TEXT_2019.splitlines(), ListFormat.NUMBERED
        )
        assert result[0].members[1].name == "JONAS PETRAS JONAITIS"

    def test_invalid_number_keeps_list(self, caplog: pytest.LogCaptureFixture) -> None:
        lines = ["Nr. X. Darbo partija", "1. Jonas Jonaitis"]
        with caplog.at_level(logging.WARNING):
            result = parse_candidate_list_lines(lines, ListFormat.NUMBERED)
        assert result[0].number is None
        assert result[0].name == "DARBO PARTIJA"
        assert "名簿番号" in caplog.text

    def test_line_without_dot_is_not_header(self) -> None:
        lines = ["Nr. 3. Darbo partija", "1. Jonas Jonaitis", "Pastaba"]
        result = parse_candidate_list_lines(lines, ListFormat.NUMBERED)
        assert len(result) == 1
        assert len(result[0].members) == 1


class TestMemberLineEdgeCases:
    """候補者行の異常系のテスト."""

    def test_member_before_header_skipped(
        self, caplog: pytest.LogCaptureFixture
    ) -> None:
        lines = ["1. Jonas Jonaitis", "Darbo partija", "1. Petras Petraitis"]
        with caplog.at_level(logging.WARNING):
            result = parse_candidate_list_lines(lines, ListFormat.HEADER_ONLY)
        assert len(result) == 1
        assert [m.name for m in result[0].members] == ["PETRAS PETRAITIS"]
        assert "名簿名より前" in caplog.text

    def test_non_numeric_position_skipped(self) -> None:
        lines = ["Nr. 1. Darbo partija", "A. Jonas Jonaitis", "2. Petras Petraitis"]
        result = parse_candidate_list_lines(lines, ListFormat.NUMBERED)
        assert [m.position for m in result[0].members] == [2]

    def test_name_with_initial_dot_kept(self) -> None:
        lines = ["Nr. 1. Darbo partija", "1. Jonas J. Jonaitis"]
        result = parse_candidate_list_lines(lines, ListFormat.NUMBERED)
        assert result[0].members[0].name == "JONAS J. JONAITIS"

    def test_empty_name_skipped(self) -> None:
        lines = ["Nr. 1. Darbo partija", "1.   "]
        result = parse_candidate_list_lines(lines, ListFormat.NUMBERED)
        assert result[0].members == []

    def test_empty_input(self) -> None:
        assert parse_candidate_list_lines([], ListFormat.NUMBERED) == []


class TestParseCandidateListText:
    """テキスト全体→名簿データ変換のテスト."""

    def test_list_names_sorted(self) -> None:
        text = "Žalieji\n1. Jonas Jonaitis\nAtgimimas\n1. Petras Petraitis\n"
        document = parse_candidate_list_text(text, ListFormat.HEADER_ONLY)
        assert [lst.name for lst in document.lists] == ["ŽALIEJI", "ATGIMIMAS"]
        assert document.list_names == ["ATGIMIMAS", "ŽALIEJI"]

    def test_windows_line_endings(self) -> None:
        text = "Nr. 1. Darbo partija\r\n1. Jonas Jonaitis\r\n"
        document = parse_candidate_list_text(text, ListFormat.NUMBERED)
        assert document.lists[0].name == "DARBO PARTIJA"
        assert document.lists[0].members[0].name == "JONAS JONAITIS"
