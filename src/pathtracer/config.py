# config.py
"""Default render settings. Every value can be overridden from the command line."""

IMAGE_WIDTH = 400
ASPECT_RATIO = 1.0
SAMPLES_PER_PIXEL = 100
MAX_DEPTH = 50

# Row bands the image is split into; workers default to the CPU count
NUM_JOBS = 32

# Minimum hit distance used by the integrator
T_MIN = 0.001

DEFAULT_SCENE = "cornell_box"
OUTPUT_PATH = "output/image.png"
EARTH_TEXTURE = "earthmap.jpg"

# Named presets: samples per pixel, bounce depth and resolution scale
QUALITY_LEVELS = {
    "preview": {"samples": 8, "depth": 8, "scale": 0.5},
    "balanced": {"samples": 100, "depth": 50, "scale": 1.0},
    "final": {"samples": 1000, "depth": 50, "scale": 1.0},
}
