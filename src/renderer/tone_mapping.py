# renderer/tone_mapping.py
import math
import numpy as np
from numba import njit

@njit
def gamma_quantize(accumulated, samples):
    """
    Turn summed linear radiance into 8-bit color.

    Averages over the sample count, applies gamma 2 (square root), scales by
    255.99 and truncates. Channels are clamped to [0, 255] since radiance is
    not bounded above.
    """
    height, width, channels = accumulated.shape
    output = np.empty((height, width, channels), dtype=np.uint8)
    inv = 1.0 / samples
    for y in range(height):
        for x in range(width):
            for c in range(channels):
                v = accumulated[y, x, c] * inv
                if v > 0.0:
                    v = 255.99 * math.sqrt(v)
                else:
                    v = 0.0
                q = int(v)
                output[y, x, c] = min(255, max(0, q))
    return output
