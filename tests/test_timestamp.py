"""Unit tests for timestamp.py functions."""

from __future__ import annotations

from unittest.mock import patch

import pytest

from mensaje.timestamp import (
    MAX_OFFSET,
    compute_offset,
    compute_timestamp,
    utf16_code_units,
)


class TestComputeOffset:
    """Tests for compute_offset."""

    def test_empty_message(self) -> None:
        assert compute_offset("") == 0

    def test_single_character(self) -> None:
        assert compute_offset("a") == 97

    def test_position_weighted_sum(self) -> None:
        # 104*1 + 111*2 + 108*3 + 97*4
        assert compute_offset("hola") == 1038

    def test_reduced_modulo_one_hour(self) -> None:
        message = "z" * 50
        raw = sum(ord("z") * (i + 1) for i in range(50))
        assert raw > MAX_OFFSET
        assert compute_offset(message) == raw % MAX_OFFSET

    @pytest.mark.parametrize(
        "message",
        ["", "hola", "¡Tu Mensaje Hermano!", "x" * 1000, "日本語のメッセージ", "😀"],
    )
    def test_bounded(self, message: str) -> None:
        assert 0 <= compute_offset(message) < MAX_OFFSET

    def test_single_character_change_law(self) -> None:
        original = "mensaje de prueba"
        position = 5
        replacement = "Q"
        changed = original[:position] + replacement + original[position + 1:]

        delta = (ord(replacement) - ord(original[position])) * (position + 1)
        assert compute_offset(changed) == (compute_offset(original) + delta) % MAX_OFFSET

    def test_collisions_are_possible(self) -> None:
        # 3600 apart in raw sum
        assert compute_offset(chr(97)) == compute_offset(chr(97 + MAX_OFFSET))

    def test_astral_characters_count_as_two_code_units(self) -> None:
        # U+1F600 -> D83D DE00
        assert utf16_code_units("😀") == [0xD83D, 0xDE00]
        assert compute_offset("😀") == (0xD83D * 1 + 0xDE00 * 2) % MAX_OFFSET


class TestComputeTimestamp:
    """Tests for compute_timestamp."""

    def test_explicit_base(self) -> None:
        assert compute_timestamp("hola", now=1_700_000_000) == 1_700_001_038

    def test_empty_message_returns_base(self) -> None:
        assert compute_timestamp("", now=1_700_000_000) == 1_700_000_000

    def test_uses_wall_clock_by_default(self) -> None:
        with patch("mensaje.timestamp.time.time", return_value=1_700_000_000.9):
            assert compute_timestamp("hola") == 1_700_001_038

    def test_deterministic_within_same_second(self) -> None:
        with patch("mensaje.timestamp.time.time", return_value=1_234_567.0):
            first = compute_timestamp("same message")
            second = compute_timestamp("same message")
        assert first == second

    def test_same_message_differs_across_time(self) -> None:
        assert compute_timestamp("hola", now=100) != compute_timestamp("hola", now=200)

    def test_within_one_hour_of_now(self) -> None:
        import time

        before = int(time.time())
        value = compute_timestamp("cualquier mensaje")
        after = int(time.time())
        assert before <= value < after + MAX_OFFSET
