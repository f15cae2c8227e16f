"""End-to-end CLI tests."""

import json

import pytest

from questpatterns.cli.main import main


class TestCLIIntegration:
    """Test complete CLI scenarios."""

    def test_adapter(self, capsys):
        assert main(["adapter"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "The Warrior:"
        assert "Myrin uses a staff to cast a spell." in out

    def test_composite(self, capsys):
        assert main(["composite"]) == 0
        out = capsys.readouterr().out
        assert out.startswith("Inventory:\n--Weapons:\n")

    def test_singleton(self, capsys):
        assert main(["singleton"]) == 0
        out = capsys.readouterr().out
        assert out.count("Created new instance...") == 1
        assert out.count("Returning singleton with id:") == 2

    def test_strategy_rescue_override(self, capsys):
        assert main(["strategy", "--rescue-reaction", "flee"]) == 0
        out = capsys.readouterr().out.splitlines()
        assert out[-1] == "Ernie the Civilian runs away from the enemy."

    def test_all_uses_configured_demos(self, capsys, tmp_path):
        config_path = tmp_path / "config.json"
        config_path.write_text(json.dumps({"demos": ["strategy", "composite"]}))

        assert main(["--config", str(config_path), "all"]) == 0

        out = capsys.readouterr().out.splitlines()
        assert out[0] == "Sally the Guard draws their weapon to fight the enemy."
        assert "Inventory:" in out
        assert "The Warrior:" not in out

    def test_list(self, capsys):
        assert main(["list"]) == 0
        out = capsys.readouterr().out
        assert "adapter" in out
        assert "seek_protection" in out

    def test_unknown_reaction_is_an_error(self, capsys):
        assert main(["strategy", "--rescue-reaction", "dance"]) == 1
        captured = capsys.readouterr()
        assert "Error: Reaction 'dance' not registered" in captured.err

    def test_bad_config_is_an_error(self, capsys, tmp_path):
        assert main(["--config", str(tmp_path / "absent.yaml"), "adapter"]) == 1
        assert "Configuration file not found" in capsys.readouterr().err

    def test_no_demo(self, capsys):
        assert main([]) == 1
        assert "No demo specified" in capsys.readouterr().err

    def test_debug_logging_stays_off_stdout(self, capsys):
        assert main(["--log-level", "DEBUG", "adapter"]) == 0
        captured = capsys.readouterr()
        assert "Delegating attack" not in captured.out
        assert "Delegating attack" in captured.err

    def test_unknown_subcommand(self):
        with pytest.raises(SystemExit) as exc:
            main(["observer"])
        assert exc.value.code == 2
