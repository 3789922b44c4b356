"""
Tests for the command line entry point.
"""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from src import main as cli


@pytest.fixture
def project_file(tmp_path, sample_project):
    path = tmp_path / "project.json"
    path.write_text(json.dumps(sample_project), encoding="utf-8")
    return path


def run_main(*argv):
    with patch("sys.argv", ["src.main", *argv]), patch.object(cli, "setup_logging"):
        with pytest.raises(SystemExit) as exc_info:
            cli.main()
    return exc_info.value.code


class TestParseArgs:
    """Test parse_args()."""

    def test_defaults(self):
        options = cli.parse_args(["game.sb2"])
        assert options["path"] == Path("game.sb2")
        assert options["mode"] == "full"
        assert options["output"] is None
        assert options["max_depth"] == 1000

    def test_all_options(self):
        options = cli.parse_args([
            "game.json",
            "--mode=meta",
            "--output=out/meta.json",
            "--indent=4",
            "--max-depth=50",
            "--max-nodes=500",
            "--log-file=logs/run.log",
            "--log-level=DEBUG",
        ])
        assert options["mode"] == "meta"
        assert options["output"] == Path("out/meta.json")
        assert options["indent"] == 4
        assert options["max_depth"] == 50
        assert options["max_nodes"] == 500
        assert options["log_file"] == Path("logs/run.log")
        assert options["log_level"] == "DEBUG"

    def test_missing_path(self):
        with pytest.raises(ValueError):
            cli.parse_args([])

    def test_unknown_mode(self):
        with pytest.raises(ValueError, match="Unknown mode"):
            cli.parse_args(["game.json", "--mode=server"])

    def test_unknown_option(self):
        with pytest.raises(ValueError, match="Unknown option"):
            cli.parse_args(["game.json", "--verbose"])


class TestMain:
    """Test main() modes."""

    def test_full_mode_prints_augmented_project(self, project_file, capsys):
        assert run_main(str(project_file)) == 0
        output = json.loads(capsys.readouterr().out)
        assert output["objName"] == "Stage"
        assert output["_meta"]["sprites"] == {"count": 2}

    def test_meta_mode(self, project_file, capsys):
        assert run_main(str(project_file), "--mode=meta") == 0
        output = json.loads(capsys.readouterr().out)
        assert list(output)[0] == "scripts"
        assert output["blocks"]["count"] == 11

    def test_info_mode(self, project_file, capsys):
        assert run_main(str(project_file), "--mode=info") == 0
        output = json.loads(capsys.readouterr().out)
        assert output["unique_blocks"] == 9

    def test_output_file(self, project_file, tmp_path):
        out = tmp_path / "analyzed.json"
        assert run_main(str(project_file), f"--output={out}") == 0
        assert "_meta" in json.loads(out.read_text(encoding="utf-8"))

    def test_structural_failure_exits_nonzero(self, tmp_path, capsys):
        path = tmp_path / "broken.json"
        path.write_text(json.dumps({"children": 1}), encoding="utf-8")
        assert run_main(str(path)) == 1
        assert "Analysis failed" in capsys.readouterr().err

    def test_missing_file_exits_nonzero(self, tmp_path):
        assert run_main(str(tmp_path / "missing.json")) == 1

    def test_bad_arguments_print_usage(self, capsys):
        assert run_main() == 1
        assert "Usage:" in capsys.readouterr().err

    def test_file_not_utf8_exits_nonzero(self, tmp_path):
        path = tmp_path / "bad.json"
        path.write_bytes(b'{"objName": "\xff"}')
        assert run_main(str(path)) == 1


class TestRunWatch:
    """Test run_watch() wiring."""

    def _options(self, path, output):
        options = cli.parse_args([str(path), "--mode=watch", f"--output={output}"])
        return options

    def test_initial_analysis_and_shutdown(self, project_file, tmp_path):
        """The project is analyzed once before watching; Ctrl+C returns 0."""
        output = tmp_path / "out" / "analyzed.json"
        service = cli.AnalysisService()

        with patch.object(cli, "ProjectWatcher") as watcher_cls, \
             patch.object(cli.time, "sleep", side_effect=KeyboardInterrupt):
            watcher = watcher_cls.return_value.watch.return_value
            watcher.is_running.return_value = True

            assert cli.run_watch(service, self._options(project_file, output)) == 0

        watcher_cls.return_value.watch.assert_called_once_with(project_file)
        watcher.__enter__.assert_called_once()
        watcher.__exit__.assert_called_once()
        written = json.loads(output.read_text(encoding="utf-8"))
        assert written["_meta"]["sprites"] == {"count": 2}

    def test_change_rewrites_output(self, project_file, tmp_path, sample_project):
        output = tmp_path / "analyzed.json"
        service = cli.AnalysisService()

        with patch.object(cli, "ProjectWatcher") as watcher_cls, \
             patch.object(cli.time, "sleep", side_effect=KeyboardInterrupt):
            watcher_cls.return_value.watch.return_value.is_running.return_value = True
            cli.run_watch(service, self._options(project_file, output))

        on_change = watcher_cls.call_args[0][0]

        sample_project["children"] = sample_project["children"][:1]
        project_file.write_text(json.dumps(sample_project), encoding="utf-8")
        on_change(project_file)

        written = json.loads(output.read_text(encoding="utf-8"))
        assert written["_meta"]["sprites"] == {"count": 1}

    def test_failed_reload_keeps_last_output(self, project_file, tmp_path, caplog):
        output = tmp_path / "analyzed.json"
        service = cli.AnalysisService()

        with patch.object(cli, "ProjectWatcher") as watcher_cls, \
             patch.object(cli.time, "sleep", side_effect=KeyboardInterrupt):
            watcher_cls.return_value.watch.return_value.is_running.return_value = True
            cli.run_watch(service, self._options(project_file, output))

        on_change = watcher_cls.call_args[0][0]
        project_file.write_bytes(b'{"objName": "\xff"}')
        on_change(project_file)

        assert "Error reloading project" in caplog.text
        assert json.loads(output.read_text(encoding="utf-8"))["_meta"]["sprites"] == {"count": 2}
