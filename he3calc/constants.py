"""Application-wide constants and session defaults.

Physical constants live in core/physical_constants.py.
"""

APP_NAME = "He-3 Polarization Calculator"
APP_VERSION = "1.0.0"
APP_ORGANIZATION = "NSF Lab"

# Window constraints
MIN_WINDOW_WIDTH = 1100
MIN_WINDOW_HEIGHT = 760

# Sampling
HE3_TIME_INTERVALS = 100       # 101 points
NEUTRON_INTERVALS = 200        # 201 points
BUILDUP_INTERVALS = 240        # 241 points
LOG_SCALE_FLOOR = 0.1          # Å or meV

# Default committed parameters
DEFAULT_INITIAL_POLARIZATION = 70.0   # %
DEFAULT_RELAXATION_TIME_H = 100.0     # hour
DEFAULT_GAS_THICKNESS = 10.0          # amagat·cm
DEFAULT_HE3_POLARIZATION = 70.0       # %
DEFAULT_WAVELENGTH = 5.0              # Å

# Pumping build-up defaults (minutes)
DEFAULT_MAX_POLARIZATION = 70.0       # %
DEFAULT_PUMPING_TIME_MIN = 30.0
DEFAULT_BUILDUP_T1_MIN = 120.0

# Default axis ranges, kept as text like the range fields that edit them
DEFAULT_HE3_RANGE = ("0", "24", "0", "80")        # hour, %
DEFAULT_NEUTRON_RANGE = ("0", "10", "0", "100")   # Å or meV, %
DEFAULT_BUILDUP_RANGE = ("0", "240", "0", "80")   # minute, %

# CSV
CSV_HEADER = ("Time (min)", "Polarization (%)")
