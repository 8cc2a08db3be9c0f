# csgtrace/core/utils.py
import math
from typing import List

# Shared tolerance for near-zero and near-boundary comparisons.
EPSILON = 1e-6


def is_near_zero(value: float) -> bool:
    """
    True if value lies strictly inside (-EPSILON, EPSILON).
    """
    return -EPSILON < value < EPSILON


def quadratic_roots(a: float, b: float, c: float) -> List[float]:
    """
    Positive real roots of a*t^2 + b*t + c = 0, in ascending order.

    A discriminant within EPSILON of zero is treated as a tangent and yields
    at most one root. Roots that are not strictly positive (behind or at the
    ray origin) are dropped, so the result holds 0, 1 or 2 values.
    """
    discriminant = b * b - 4.0 * a * c
    if discriminant < -EPSILON:
        return []
    if discriminant <= EPSILON:
        root = -b / (2.0 * a)
        return [root] if root > 0.0 else []

    sqrt_d = math.sqrt(discriminant)
    near = (-b - sqrt_d) / (2.0 * a)
    far = (-b + sqrt_d) / (2.0 * a)
    return [t for t in (near, far) if t > 0.0]
