"""Core constants for the valve gear calculator.

This module defines the fixed literals used by the formula pipeline:
- Reference driver speed and time/length unit factors
- Steam port velocity used to size the port area
- Collection sizes for the parameter model
"""

from __future__ import annotations

# Parameter collection sizes (fixed at construction, never resized)
N_INPUTS = 7
N_OUTPUTS = 9

# Formula literals
# Reference drive wheel speed (rev/min) used for wheel and piston speed
REFERENCE_RPM = 336
MINUTES_PER_HOUR = 60
INCHES_PER_FOOT = 12
SQ_INCHES_PER_SQ_FOOT = 144
# Allowable steam velocity through the port (ft/min)
PORT_STEAM_VELOCITY = 7874

# Persistence
LABEL_SEPARATOR = ":"
DEFAULT_INPUTS_DIR = "inputs"
DEFAULT_INPUTS_FILE = "inputs.txt"
DEFAULT_OUTPUTS_DIR = "outputs"
DEFAULT_OUTPUTS_FILE = "outputs.txt"
