# Kinematic bicycle vehicle simulator

__version__ = "0.1.0"
