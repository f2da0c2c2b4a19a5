"""Tests for the `area` command."""

from __future__ import annotations

import json

import pytest
from click.testing import CliRunner

from selectorctl.cli import cli


@pytest.mark.usefixtures("isolated_cwd")
class TestAreaCommand:
    def test_json(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["--json", "area", "10", "20"])
        assert result.exit_code == 0
        assert json.loads(result.output)["data"]["area"] == 200.0

    def test_non_numeric(self, cli_runner: CliRunner) -> None:
        result = cli_runner.invoke(cli, ["area", "ten", "20"])
        assert result.exit_code == 2
