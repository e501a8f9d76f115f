# Tests for the simulate.py command line

import importlib.util
from pathlib import Path

import pytest


@pytest.fixture
def simulate_module():
    path = Path(__file__).parent.parent.parent / "scripts" / "simulate.py"
    spec = importlib.util.spec_from_file_location("simulate_script", path)
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class TestSimulateParser:

    def test_defaults(self, simulate_module):
        args = simulate_module.build_parser().parse_args([])
        assert args.config == Path("configs/bicycle.yaml")
        assert args.log_level is None
        assert args.duration is None

    def test_log_level_case_insensitive(self, simulate_module):
        args = simulate_module.build_parser().parse_args(["--log-level", "debug"])
        assert args.log_level == "DEBUG"

    def test_unknown_log_level_rejected(self, simulate_module):
        """argparse should exit instead of failing inside logging setup."""
        with pytest.raises(SystemExit):
            simulate_module.build_parser().parse_args(["--log-level", "LOUD"])
