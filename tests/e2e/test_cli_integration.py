"""End-to-end tests driving the command line entry point."""

import json

import pytest
import yaml

from gofpatterns.cli.main import main


def run_cli(capsys, *argv):
    main(list(argv))
    return capsys.readouterr()


class TestCLIIntegration:
    """Test cases for the gof-patterns command."""

    def test_list_demos_json(self, capsys):
        captured = run_cli(capsys, "--format", "json", "demos", "list")

        names = [d["name"] for d in json.loads(captured.out)["demos"]]
        assert names == [
            "adapter",
            "bridge",
            "builder",
            "command",
            "decorator",
            "factory-method",
            "singleton",
            "strategy",
        ]

    def test_list_by_category(self, capsys):
        captured = run_cli(capsys, "--format", "json", "demos", "list", "--category", "creational")

        names = [d["name"] for d in json.loads(captured.out)["demos"]]
        assert names == ["builder", "factory-method", "singleton"]

    def test_show_demo(self, capsys):
        captured = run_cli(capsys, "demos", "show", "bridge")

        assert "Name:        bridge" in captured.out
        assert "Category:    structural" in captured.out

    def test_run_single_demo_text(self, capsys):
        captured = run_cli(capsys, "demos", "run", "singleton")

        assert captured.out == "Singleton works, both variables contain the same instance.\n"

    def test_run_yaml(self, capsys):
        captured = run_cli(capsys, "--format", "yaml", "demos", "run", "factory-method")

        result = yaml.safe_load(captured.out)["results"][0]
        assert result["name"] == "factory-method"
        assert result["lines"][-1].endswith("{Car is operating}")

    def test_run_table(self, capsys):
        captured = run_cli(capsys, "--format", "table", "demos", "run", "adapter")
        assert "UKEUOneWayPlugAdapter" in captured.out

    def test_run_all(self, capsys):
        captured = run_cli(capsys, "--format", "json", "demos", "run", "--all")

        results = json.loads(captured.out)["results"]
        assert len(results) == 8
        assert all(result["lines"] for result in results)

    def test_run_without_names_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["demos", "run"])

        assert exc_info.value.code == 1
        assert "--all" in capsys.readouterr().err

    def test_run_names_with_category_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["demos", "run", "adapter", "--category", "creational"])

        captured = capsys.readouterr()
        assert exc_info.value.code == 1
        assert "--category can only be used together with --all" in captured.err
        assert captured.out == ""

    def test_run_names_with_all_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["demos", "run", "adapter", "--all"])

        assert exc_info.value.code == 1
        assert "not both" in capsys.readouterr().err

    def test_run_all_with_category(self, capsys):
        captured = run_cli(
            capsys, "--format", "json", "demos", "run", "--all", "--category", "behavioural"
        )

        names = [r["name"] for r in json.loads(captured.out)["results"]]
        assert names == ["command", "strategy"]

    def test_unknown_demo_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["demos", "run", "visitor"])

        assert exc_info.value.code == 1
        assert "Demo 'visitor' not found" in capsys.readouterr().err

    def test_missing_resource_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main([])

        assert exc_info.value.code == 1
        assert "No resource specified" in capsys.readouterr().err

    def test_missing_action_fails(self, capsys):
        with pytest.raises(SystemExit) as exc_info:
            main(["demos"])

        assert exc_info.value.code == 1
        assert "No action specified for demos" in capsys.readouterr().err

    def test_config_file(self, capsys, tmp_path):
        config_file = tmp_path / "config.yml"
        config_file.write_text(
            "demos:\n"
            "  strategy_sample: [z, y, x]\n"
            "output:\n"
            "  default_format: json\n"
            "logging:\n"
            "  destination: none\n"
        )

        captured = run_cli(capsys, "--config", str(config_file), "demos", "run", "strategy")

        lines = json.loads(captured.out)["results"][0]["lines"]
        assert "x,y,z" in lines
        assert "z,y,x" in lines

    def test_missing_config_file_fails(self, capsys, tmp_path):
        with pytest.raises(SystemExit) as exc_info:
            main(["--config", str(tmp_path / "absent.yml"), "demos", "list"])

        assert exc_info.value.code == 1
        assert capsys.readouterr().err.startswith("Error:")

    def test_format_from_environment(self, capsys, monkeypatch):
        monkeypatch.setenv("GOF_PATTERNS_OUTPUT_FORMAT", "json")

        captured = run_cli(capsys, "demos", "show", "adapter")

        assert json.loads(captured.out)["demo"]["name"] == "adapter"
