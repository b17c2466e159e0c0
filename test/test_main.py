#!/usr/bin/env python3
"""
Tests for the command line runner
"""
import sys
import os
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import argparse
import json
import logging

import pytest

from gridpath.main import EXIT_CONFIG_ERROR, EXIT_NO_ROUTE, EXIT_OK, PathfinderRunner, main, parse_coordinate
from gridpath.pathfinding import render_route, find_path
from gridpath.utils.config_loader import ConfigLoader


@pytest.fixture(autouse=True)
def reset_logging():
    """main() installs its own handlers; drop them so later tests see a clean setup."""
    loggers = [logging.getLogger(), logging.getLogger('search')]
    before = {id(logger): list(logger.handlers) for logger in loggers}
    yield
    for logger in loggers:
        for handler in list(logger.handlers):
            if handler not in before[id(logger)]:
                logger.removeHandler(handler)
                handler.close()
    logging.getLogger('search').propagate = True


def run_cli(tmp_path, *args):
    return main(list(args) + ["--log-dir", str(tmp_path / "logs"), "--log-level", "ERROR"])


class TestCommandLine:
    """Exit codes and printed output"""

    def test_default_world(self, tmp_path, capsys):
        assert run_cli(tmp_path) == EXIT_OK
        out = capsys.readouterr().out
        assert "World: z_world" in out
        assert "Cost:  17" in out
        assert "Steps: 94" in out
        assert "[0 0] [0 1]" in out
        assert "S * * * *" in out

    def test_no_render(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--world", "bunny_world", "--no-render") == EXIT_OK
        out = capsys.readouterr().out
        assert "Cost:  10" in out
        assert "S *" not in out

    def test_json_output(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--world", "shrubbery_world", "--json") == EXIT_OK
        report = json.loads(capsys.readouterr().out)
        assert report["world"] == "shrubbery_world"
        assert report["success"] is True
        assert report["cost"] == 9
        assert report["goal"] == [4, 4]
        assert report["path"][0] == [0, 0]
        assert report["path"][-1] == [4, 4]
        assert report["steps_examined"] == 134

    def test_list_worlds(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--list") == EXIT_OK
        assert capsys.readouterr().out.split() == ["bunny_world", "shrubbery_world", "z_world"]

    def test_unknown_world_is_config_error(self, tmp_path):
        assert run_cli(tmp_path, "--world", "moon_world") == EXIT_CONFIG_ERROR

    def test_missing_worlds_file_is_config_error(self, tmp_path):
        loader = ConfigLoader(config_dir=tmp_path / "nowhere")
        code = main(["--log-dir", str(tmp_path / "logs"), "--log-level", "ERROR"], loader=loader)
        assert code == EXIT_CONFIG_ERROR

    def test_invalid_step_limit_is_config_error(self, tmp_path):
        assert run_cli(tmp_path, "--max-steps", "0") == EXIT_CONFIG_ERROR

    def test_step_limit_without_route(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--max-steps", "2") == EXIT_NO_ROUTE
        assert "No route" in capsys.readouterr().out

    def test_start_outside_grid(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--start", "9,9", "--json") == EXIT_NO_ROUTE
        report = json.loads(capsys.readouterr().out)
        assert report["success"] is False
        assert "outside" in report["failure_reason"]

    def test_custom_goal(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--goal", "2,0", "--json") == EXIT_OK
        report = json.loads(capsys.readouterr().out)
        assert report["cost"] == 11
        assert report["path"][-1] == [2, 0]

    def test_step_estimate_override(self, tmp_path, capsys):
        assert run_cli(tmp_path, "--step-estimate", "1", "--json") == EXIT_OK
        assert json.loads(capsys.readouterr().out)["cost"] == 17

    def test_writes_log_files(self, tmp_path):
        run_cli(tmp_path)
        assert (tmp_path / "logs" / "general.log").exists()


class TestHelpers:
    """Argument parsing and the runner object"""

    def test_parse_coordinate(self):
        assert parse_coordinate("3,4") == (3, 4)

    @pytest.mark.parametrize("text", ["3", "a,b", "1,2,3", ""])
    def test_parse_coordinate_rejects_garbage(self, text):
        with pytest.raises(argparse.ArgumentTypeError):
            parse_coordinate(text)

    def test_runner_uses_world_estimate(self):
        world = ConfigLoader().load_world("z_world")
        runner = PathfinderRunner(world)
        assert runner.pathfinder.step_cost_estimate == 900
        report = runner.run()
        assert report.success
        assert report.cost == 17
        assert report.goal == (4, 4)

    def test_render_route(self):
        world = ConfigLoader().load_world("z_world")
        route, _ = find_path(world.to_grid(), (0, 0), 900)
        assert render_route(world.to_grid(), route).splitlines() == [
            "S * * * *",
            "# # # # *",
            "* * * * *",
            "* # # # #",
            "* * * * G",
        ]

    def test_render_without_route(self):
        assert render_route([[1, 2], [12, 1]]) == ". 2\n# ."
