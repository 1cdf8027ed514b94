"""Tests for the PGN tag section parser."""

from __future__ import annotations

import dataclasses

import pytest

from pgn_import.errors import EmptyPgn, InvalidResult, MissingHeader
from pgn_import.game_headers import GameHeaders
from pgn_import.game_outcome import GameOutcome
from pgn_import.parse_headers__header_parser import parse_headers
from pgn_samples import MISSING_WHITE_PGN, SCHOLARS_MATE_PGN


def _headers(pgn: str) -> tuple[GameHeaders, str]:
    parsed = parse_headers(pgn)
    assert isinstance(parsed, tuple), parsed
    return parsed


def test_parse_headers_reads_dedicated_fields() -> None:
    headers, _ = _headers(SCHOLARS_MATE_PGN)
    assert headers.event == "Casual Game"
    assert headers.site == "https://example.org/game/42"
    assert headers.date == "2024.05.01"
    assert headers.round == "1"
    assert headers.white == "Magnus Carlsen"
    assert headers.black == "Hikaru Nakamura"
    assert headers.result is GameOutcome.WHITE_WINS
    assert dict(headers.other) == {"WhiteElo": "2830", "BlackElo": "2790"}


def test_parse_headers_returns_movetext_after_last_tag() -> None:
    _, move_text = _headers('[White "A"]\n[Black "B"]\n\n1. e4 *')
    assert move_text == "\n\n1. e4 *"


def test_parse_headers_keys_are_case_insensitive() -> None:
    headers, _ = _headers('[white "A"][BLACK "B"][result "0-1"][EVENT "Open"]')
    assert headers.white == "A"
    assert headers.black == "B"
    assert headers.result is GameOutcome.BLACK_WINS
    assert headers.event == "Open"
    assert dict(headers.other) == {}


def test_parse_headers_last_duplicate_wins() -> None:
    headers, _ = _headers('[White "A"][Black "B"][WhiteElo "1500"][WhiteElo "1600"][White "C"]')
    assert headers.white == "C"
    assert headers.other["WhiteElo"] == "1600"


def test_parse_headers_defaults_result_to_ongoing() -> None:
    headers, _ = _headers('[White "A"][Black "B"] 1. e4')
    assert headers.result is GameOutcome.ONGOING
    assert headers.event is None


def test_parse_headers_missing_white() -> None:
    assert parse_headers(MISSING_WHITE_PGN) == MissingHeader("White")


def test_parse_headers_missing_black() -> None:
    assert parse_headers('[White "A"][Result "*"] 1. e4 *') == MissingHeader("Black")


def test_parse_headers_empty_player_counts_as_missing() -> None:
    assert parse_headers('[White ""][Black "B"] 1. e4 *') == MissingHeader("White")


def test_parse_headers_no_tags_reports_white_first() -> None:
    assert parse_headers("1. e4 e5 *") == MissingHeader("White")


def test_parse_headers_invalid_result() -> None:
    assert parse_headers('[White "A"][Black "B"][Result "2-0"]') == InvalidResult("2-0")


def test_parse_headers_invalid_result_is_reported_before_missing_players() -> None:
    assert parse_headers('[Result "draw"] 1. e4') == InvalidResult("draw")


def test_parse_headers_trims_result_value() -> None:
    headers, _ = _headers('[White "A"][Black "B"][Result " 1/2-1/2 "]')
    assert headers.result is GameOutcome.DRAW


@pytest.mark.parametrize("pgn", ["", "   ", "\n\t\n"])
def test_parse_headers_empty_input(pgn: str) -> None:
    assert parse_headers(pgn) == EmptyPgn()


def test_game_headers_are_immutable() -> None:
    headers, _ = _headers(SCHOLARS_MATE_PGN)
    with pytest.raises(dataclasses.FrozenInstanceError):
        headers.white = "someone else"  # type: ignore[misc]
    with pytest.raises(TypeError):
        headers.other["WhiteElo"] = "0"  # type: ignore[index]


def test_game_headers_as_tags() -> None:
    headers = GameHeaders(white="A", black="B", event="Open", extra_tags={"ECO": "C20"})
    assert headers.as_tags() == {
        "Event": "Open",
        "White": "A",
        "Black": "B",
        "Result": "*",
        "ECO": "C20",
    }


def test_parse_headers_ignores_tags_in_brace_comment() -> None:
    pgn = '[White "A"][Black "B"]\n1. e4 e5 {[Note "x"]} 2. Nf3 Nc6 *'
    headers, move_text = _headers(pgn)
    assert dict(headers.other) == {}
    assert move_text == '\n1. e4 e5 {[Note "x"]} 2. Nf3 Nc6 *'


def test_parse_headers_ignores_tags_in_line_comment() -> None:
    pgn = '[White "A"][Black "B"]\n1. e4 e5 ; see [Source "db"]\n2. Nf3 Nc6 *'
    headers, move_text = _headers(pgn)
    assert "Source" not in headers.other
    assert move_text.startswith("\n1. e4 e5")


def test_parse_headers_ignores_result_tag_after_movetext() -> None:
    headers, _ = _headers('[White "A"][Black "B"] 1. e4 {[Result "2-0"]} *')
    assert headers.result is GameOutcome.ONGOING


def test_parse_headers_requires_players_before_movetext() -> None:
    assert parse_headers('1. e4 e5 [White "A"][Black "B"]') == MissingHeader("White")


def test_parse_headers_skips_malformed_tag_lines() -> None:
    headers, _ = _headers('[White "A"]\n[Site ""]\n[Black "B"]\n\n1. e4 *')
    assert headers.black == "B"
    assert headers.site is None


def test_game_headers_keep_extra_tags_in_order() -> None:
    headers = GameHeaders(white="A", black="B", extra_tags={"ECO": "C20", "Opening": "KP"})
    assert headers.extra_tags == (("ECO", "C20"), ("Opening", "KP"))
    assert headers == GameHeaders(
        white="A", black="B", extra_tags=(("ECO", "C20"), ("Opening", "KP"))
    )
