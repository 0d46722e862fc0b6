"""Tests for the console helpers of the merge command."""

from __future__ import annotations

import io
from pathlib import Path

import pytest
from rich.console import Console

from partmerge.cli.helpers.merge import (
    confirm_merge,
    present_plan,
    print_group_result,
    print_summary,
)
from partmerge.core.models import MergeGroup, MergePlan, MergeResult, RunOutcome, RunStatus


@pytest.fixture
def console_buffer() -> tuple[Console, io.StringIO]:
    buffer = io.StringIO()
    return Console(file=buffer, width=120), buffer


@pytest.fixture
def group(tmp_path: Path) -> MergeGroup:
    return MergeGroup(
        key="DJI_1234",
        files=["DJI_1234_001.mp4", "DJI_1234_002.mp4"],
        output_path=tmp_path / "DJI_1234.mp4",
    )


class TestConfirmMerge:
    """confirm_merge() only accepts an exact ``y``."""

    @pytest.mark.parametrize("answer", ["y", " y ", "y\n"])
    def test_accepts_y(self, console_buffer: tuple[Console, io.StringIO], answer: str) -> None:
        console, _ = console_buffer

        assert confirm_merge(console, lambda prompt: answer) is True

    @pytest.mark.parametrize("answer", ["Y", "yes", "n", "", "ja"])
    def test_rejects_everything_else(
        self,
        console_buffer: tuple[Console, io.StringIO],
        answer: str,
    ) -> None:
        console, buffer = console_buffer

        assert confirm_merge(console, lambda prompt: answer) is False
        assert "Operation cancelled" in buffer.getvalue()

    @pytest.mark.parametrize("error", [KeyboardInterrupt, EOFError])
    def test_interrupt_cancels(
        self,
        console_buffer: tuple[Console, io.StringIO],
        error: type[BaseException],
    ) -> None:
        console, _ = console_buffer

        def read_line(prompt: str) -> str:
            raise error

        assert confirm_merge(console, read_line) is False


class TestPresentation:
    """Plan and progress output."""

    def test_plan_lists_parts_and_outputs(
        self,
        console_buffer: tuple[Console, io.StringIO],
        group: MergeGroup,
        tmp_path: Path,
    ) -> None:
        console, buffer = console_buffer
        plan = MergePlan(tmp_path, tmp_path, [group], candidates=2)

        present_plan(plan, console)

        output = buffer.getvalue()
        assert "Merge plan (1 groups)" in output
        assert "DJI_1234_001.mp4" in output
        assert "DJI_1234_002.mp4" in output
        assert "DJI_1234.mp4" in output
        assert "Count" in output

    def test_failed_result_shows_reason(
        self,
        console_buffer: tuple[Console, io.StringIO],
        group: MergeGroup,
    ) -> None:
        console, buffer = console_buffer

        print_group_result(MergeResult(group, 1, output="moov atom not found\n"), console)

        output = buffer.getvalue()
        assert "moov atom not found" in output
        assert "DJI_1234: exit status 1" in output

    def test_summary_counts(
        self,
        console_buffer: tuple[Console, io.StringIO],
        group: MergeGroup,
        tmp_path: Path,
    ) -> None:
        console, buffer = console_buffer
        outcome = RunOutcome(
            status=RunStatus.DONE,
            plan=MergePlan(tmp_path, tmp_path, [group, group]),
            results=[MergeResult(group, 0), MergeResult(group, None, error="missing")],
        )

        print_summary(outcome, console)

        assert "1 of 2 groups merged" in buffer.getvalue()
