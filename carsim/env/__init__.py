# Env module - Stateful simulation objects
# May import from core and analysis

from .vehicle import BicycleModel
from .controls import Command, InputMapper, ScriptedDriver
from .runner import SimulationRunner
