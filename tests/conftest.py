# Pytest configuration and fixtures

import pytest
from dataclasses import replace
import numpy as np
from pathlib import Path
import tempfile
import yaml

from carsim.core.types import VehicleParams
from carsim.env.vehicle import BicycleModel


@pytest.fixture
def seed():
    """Fixed seed for reproducibility."""
    return 42


@pytest.fixture
def rng(seed):
    return np.random.default_rng(seed)


@pytest.fixture
def vehicle_config():
    """Vehicle section in the original flat layout."""
    return {
        "name": "test_car",
        "mass": 2.0,
        "inertia": 0.5,
        "length": 1.5,
        "max_force": 10.0,
        "max_torque": 4.0,
        "max_steering_angle": 0.6,
        "drag": 0.5,
        "x0": [0.0, 0.0, 0.0, 0.0, 0.0, 0.0],
    }


@pytest.fixture
def config(vehicle_config):
    """Standard test configuration."""
    return {
        "vehicle": vehicle_config,
        "simulation": {
            "dt": 0.01,
            "duration": 2.0,
            "schedule": [
                {"duration": 1.0, "throttle": 1.0, "steer": 0.0},
                {"duration": 0.5, "throttle": 0.5, "steer": 1.0},
                {"duration": 0.5, "throttle": 0.0, "steer": 0.0},
            ],
        },
        "logging": {
            "level": "WARNING",
        },
    }


@pytest.fixture
def params(config):
    """Parameters matching the test configuration."""
    v = config["vehicle"]
    return VehicleParams(
        name=v["name"],
        mass=v["mass"],
        inertia=v["inertia"],
        length=v["length"],
        drag=v["drag"],
        max_force=v["max_force"],
        max_torque=v["max_torque"],
        max_steering_angle=v["max_steering_angle"],
        x0=tuple(v["x0"]),
    )


@pytest.fixture
def make_vehicle(params):
    """Factory for vehicles with overridden parameters."""
    def _make(**overrides):
        if "x0" in overrides:
            overrides["x0"] = tuple(overrides["x0"])
        return BicycleModel(replace(params, **overrides))
    return _make


@pytest.fixture
def temp_dir():
    """Create temporary directory for test outputs."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_file(config, temp_dir):
    """Create temporary config file."""
    config_path = temp_dir / "config.yaml"
    with open(config_path, "w") as f:
        yaml.dump(config, f)
    return config_path
