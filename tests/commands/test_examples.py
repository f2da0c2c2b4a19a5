"""Tests for the --examples flag on every command."""

from __future__ import annotations

import pytest
from click.testing import CliRunner

from selectorctl.cli import cli

EXAMPLES_COMMANDS: list[tuple[list[str], list[str]]] = [
    (["build", "--examples"], ["selectorctl build element=a"]),
    (["combine", "--examples"], ["-c +"]),
    (["render", "--examples"], ["selectorctl render selector.json"]),
    (["area", "--examples"], ["selectorctl area 10 20"]),
]


@pytest.mark.parametrize(
    "args,keywords",
    EXAMPLES_COMMANDS,
    ids=[" ".join(a[:-1]) for a, _ in EXAMPLES_COMMANDS],
)
def test_examples_flag(cli_runner: CliRunner, args: list[str], keywords: list[str]) -> None:
    result = cli_runner.invoke(cli, args)
    assert result.exit_code == 0, result.output
    assert "Examples for" in result.output
    for kw in keywords:
        assert kw in result.output
