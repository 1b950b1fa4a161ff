# renderer/tone_mapping.py
import numpy as np

def tone_map(accumulated: np.ndarray, samples: int) -> np.ndarray:
    """
    Converts per-pixel radiance sums into 8-bit RGB.

    NaN channels become black, sums are averaged over the sample count,
    gamma-corrected with a square root (gamma 2) and clamped to [0, 0.999]
    before scaling to 256 levels.
    """
    if samples <= 0:
        raise ValueError(f"Sample count must be positive, got {samples}")
    linear = np.where(np.isnan(accumulated), 0.0, accumulated) / samples
    mapped = np.sqrt(np.maximum(linear, 0.0))
    output = (np.clip(mapped, 0.0, 0.999) * 256).astype("uint8")
    return output
