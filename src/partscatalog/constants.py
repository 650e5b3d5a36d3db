# Cache growth/shrink and the initial fill are drawn from [0, headroom // divisor)
CACHE_FRACTION_DIVISOR = 10

# Cooling power weights
CPU_CLOCK_WEIGHT = 10
GPU_CLOCK_WEIGHT = 0.1
MEMORY_WEIGHT = 0.05
COOLING_EFFICIENCY = 0.8

# CPU power bands, compared against cores * threads * max clock (GHz)
HIGH_POWER_THRESHOLD = 20000
MEDIUM_POWER_THRESHOLD = 10000

CLOCK_ADJUSTMENT_GHZ = 0.5

# Every assembled computer ships with this cooler unless one is given
DEFAULT_COOLER_MANUFACTURER = "CoolerMaster"
DEFAULT_COOLER_MODEL = "Hyper 212"
COOLER_SERIAL_SUFFIX = "_Cooler"
