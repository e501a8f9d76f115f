# Configuration loading and validation

import logging
from pathlib import Path
from typing import Any, Dict, List, Union

import numpy as np
import yaml

from .core.types import NUM_STATES, VehicleParams

logger = logging.getLogger(__name__)


VEHICLE_FIELDS = [
    "mass",
    "inertia",
    "length",
    "max_force",
    "max_torque",
    "max_steering_angle",
    "drag",
    "x0",
]


class ConfigError(ValueError):
    """Missing or malformed configuration."""

    def __init__(self, errors: Union[str, List[str]]):
        if isinstance(errors, str):
            errors = [errors]
        self.errors = list(errors)
        super().__init__("; ".join(self.errors))


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def vehicle_section(config: Dict[str, Any]) -> Dict[str, Any]:
    """Return the vehicle section, accepting a flat vehicle-only document."""
    if "vehicle" in config:
        return config["vehicle"] or {}
    return config


def validate_vehicle(vehicle: Dict[str, Any]) -> List[str]:
    """Validate vehicle parameters.

    Args:
        vehicle: Vehicle section of the configuration

    Returns:
        List of validation errors (empty if valid)
    """
    errors = []

    if not isinstance(vehicle, dict):
        return [f"vehicle section must be a mapping, got {type(vehicle).__name__}"]

    for name in VEHICLE_FIELDS:
        if name not in vehicle:
            errors.append(f"vehicle.{name} is required")

    for name in ["mass", "inertia", "length"]:
        if name in vehicle:
            value = vehicle[name]
            if not _is_number(value) or value <= 0:
                errors.append(f"vehicle.{name} must be positive, got {value}")

    for name in ["drag", "max_force", "max_torque"]:
        if name in vehicle:
            value = vehicle[name]
            if not _is_number(value) or value < 0:
                errors.append(f"vehicle.{name} must be non-negative, got {value}")

    # tan(theta) diverges at pi/2
    if "max_steering_angle" in vehicle:
        value = vehicle["max_steering_angle"]
        if not _is_number(value) or not 0 < value < np.pi / 2:
            errors.append(f"vehicle.max_steering_angle must be in (0, pi/2), got {value}")

    if "x0" in vehicle:
        x0 = vehicle["x0"]
        if not isinstance(x0, (list, tuple)) or len(x0) != NUM_STATES:
            errors.append(f"vehicle.x0 must have {NUM_STATES} components, got {x0}")
        elif not all(_is_number(v) for v in x0):
            errors.append(f"vehicle.x0 must be numeric, got {x0}")

    if "name" in vehicle and not isinstance(vehicle["name"], str):
        errors.append(f"vehicle.name must be a string, got {vehicle['name']}")

    return errors


def validate_simulation(simulation: Dict[str, Any]) -> List[str]:
    """Validate the simulation section."""
    errors = []

    if not isinstance(simulation, dict):
        return [f"simulation section must be a mapping, got {type(simulation).__name__}"]

    dt = simulation.get("dt", 0.01)
    if not _is_number(dt) or dt <= 0:
        errors.append(f"simulation.dt must be positive, got {dt}")

    duration = simulation.get("duration", 0.0)
    if not _is_number(duration) or duration < 0:
        errors.append(f"simulation.duration must be non-negative, got {duration}")

    schedule = simulation.get("schedule", [])
    if not isinstance(schedule, list):
        errors.append("simulation.schedule must be a list")
        return errors

    for i, command in enumerate(schedule):
        if not isinstance(command, dict):
            errors.append(f"simulation.schedule[{i}] must be a mapping")
            continue
        step_duration = command.get("duration", 0)
        if not _is_number(step_duration) or step_duration <= 0:
            errors.append(f"simulation.schedule[{i}].duration must be positive, got {step_duration}")
        for name in ["throttle", "steer"]:
            value = command.get(name, 0.0)
            if not _is_number(value) or not -1.0 <= value <= 1.0:
                errors.append(f"simulation.schedule[{i}].{name} must be in [-1, 1], got {value}")

    return errors


def validate_config(config: Dict[str, Any]) -> List[str]:
    """Validate configuration.

    Args:
        config: Configuration dictionary

    Returns:
        List of validation errors (empty if valid)
    """
    if not isinstance(config, dict):
        return ["configuration must be a mapping"]

    errors = validate_vehicle(vehicle_section(config))

    if "simulation" in config:
        errors.extend(validate_simulation(config["simulation"] or {}))

    if "logging" in config:
        logging_section = config["logging"] or {}
        if not isinstance(logging_section, dict):
            errors.append(f"logging section must be a mapping, got {type(logging_section).__name__}")
            return errors
        level = logging_section.get("level", "INFO")
        if not isinstance(level, str) or level.upper() not in ["DEBUG", "INFO", "WARNING", "ERROR"]:
            errors.append(f"logging.level must be DEBUG, INFO, WARNING or ERROR, got {level}")

    return errors


def load_config(config_path: Union[str, Path]) -> Dict[str, Any]:
    """Read and validate a YAML configuration file.

    Raises:
        ConfigError: If the file is missing, unparsable or invalid
    """
    config_path = Path(config_path)
    if not config_path.exists():
        raise ConfigError(f"Config file not found: {config_path}")

    try:
        with open(config_path) as f:
            config = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise ConfigError(f"Could not parse {config_path}: {e}") from e

    errors = validate_config(config)
    if errors:
        raise ConfigError(errors)

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def params_from_config(config: Dict[str, Any]) -> VehicleParams:
    """Build vehicle parameters from a configuration dict.

    Raises:
        ConfigError: If required fields are missing or malformed
    """
    vehicle = vehicle_section(config)
    errors = validate_vehicle(vehicle)
    if errors:
        raise ConfigError(errors)

    return VehicleParams(
        name=vehicle.get("name", "car"),
        mass=float(vehicle["mass"]),
        inertia=float(vehicle["inertia"]),
        length=float(vehicle["length"]),
        drag=float(vehicle["drag"]),
        max_force=float(vehicle["max_force"]),
        max_torque=float(vehicle["max_torque"]),
        max_steering_angle=float(vehicle["max_steering_angle"]),
        x0=tuple(float(v) for v in vehicle["x0"]),
    )
