# renderer/tone_mapping.py
import numpy as np


def to_8bit(image: np.ndarray) -> np.ndarray:
    """
    Clamp a linear float image to [0, 1] and quantize it to uint8,
    rounding to the nearest level.
    """
    clipped = np.clip(np.asarray(image, dtype=np.float64), 0.0, 1.0)
    return np.rint(clipped * 255.0).astype(np.uint8)


def reinhard_tone_mapping(image: np.ndarray, exposure: float = 1.0, white_point: float = 1.0,
                          gamma: float = 2.2) -> np.ndarray:
    """
    Apply Reinhard tone mapping to a linear radiance image.
    Bright highlights are compressed instead of clipped; returns uint8.
    """
    scaled = np.maximum(np.asarray(image, dtype=np.float64), 0.0) * exposure
    mapped = scaled / (1.0 + scaled / white_point)
    mapped = mapped ** (1.0 / gamma)
    return to_8bit(mapped)
