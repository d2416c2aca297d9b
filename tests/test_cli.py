"""Tests for the ChunkLink command-line interface."""

import json
from unittest.mock import patch

import pytest

from chunklink.api.cli.main import create_parser, main


@pytest.fixture
def project(temp_dir, monkeypatch):
    """Project with a config file and a resolver cache, and no live tool."""
    monkeypatch.setenv("HOME", str(temp_dir))
    (temp_dir / ".chunklink.json").write_text(json.dumps({
        "chunks": [
            {"name": "A", "entry": "./core/e1.js", "exports": "Lib"},
            {"name": "B", "entry": "./blocks/e2.js", "exports": "Lib.Blocks"},
        ],
    }))
    (temp_dir / "chunks.json").write_text(json.dumps({
        "chunk": ["e1:2", "e2:1:e1"],
        "js": ["./core/e1.js", "./core/util/x.js", "./blocks/e2.js"],
    }))
    return temp_dir


class TestParser:
    """Test argument parsing."""

    def test_build_arguments(self):
        args = create_parser().parse_args(
            ["build", ".", "--strict", "--version-string", "1.0.0", "--cache-file", "c.json"]
        )
        assert args.command == "build"
        assert args.strict is True
        assert args.version_string == "1.0.0"
        assert args.cache_file == "c.json"

    def test_config_requires_subcommand(self):
        with pytest.raises(SystemExit):
            create_parser().parse_args(["config"])


class TestCommands:
    """Test command execution end to end."""

    @patch("providers.graph.closure_calculator.shutil.which", return_value=None)
    def test_graph_json_from_cache(self, mock_which, project, capsys):
        main(["graph", str(project), "--json"])

        data = json.loads(capsys.readouterr().out)
        assert data["chunk"] == ["A:2", "B:1:A"]
        assert data["js"][1] == "./core/util/x.js"
        assert data["chunks"][1]["dependencies"] == ["A"]

    def test_config_validate(self, project, capsys):
        main(["config", "validate", str(project)])
        assert "Configuration valid: 2 chunks" in capsys.readouterr().out

    def test_config_validate_without_chunks(self, temp_dir, monkeypatch):
        monkeypatch.setenv("HOME", str(temp_dir))
        with pytest.raises(SystemExit) as exc_info:
            main(["config", "validate", str(temp_dir)])
        assert exc_info.value.code == 1

    def test_config_show(self, project, capsys):
        main(["config", "show", str(project)])
        data = json.loads(capsys.readouterr().out)
        assert data["resolver"]["cache_file"] == "chunks.json"

    @patch("providers.graph.closure_calculator.shutil.which", return_value=None)
    def test_build_failure_exits_non_zero(self, mock_which, project):
        (project / "chunks.json").unlink()
        with pytest.raises(SystemExit) as exc_info:
            main(["build", str(project)])
        assert exc_info.value.code == 1

    def test_invalid_path(self, temp_dir):
        with pytest.raises(SystemExit):
            main(["graph", str(temp_dir / "missing")])
