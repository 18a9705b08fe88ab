# core/utils.py

# Shared tolerance for every floating point comparison and for the
# over/under point offsets used by shadow and refraction rays.
EPSILON = 1e-5


def float_equal(a: float, b: float) -> bool:
    """
    Compares two floats within EPSILON. Infinities compare equal to themselves.
    """
    if a == b:
        return True
    return abs(a - b) < EPSILON

