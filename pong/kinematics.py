import math
import random


def clamp(value, low, high):
    return max(low, min(high, value))


def magnitude(vx: float, vy: float) -> float:
    return math.hypot(vx, vy)


def normalized_offset(position: float, center: float, half_extent: float, clamp_to_unit: bool = True) -> float:
    # -1 at the top edge, +1 at the bottom edge
    rel = (position - center) / half_extent
    if clamp_to_unit:
        rel = clamp(rel, -1.0, 1.0)
    return rel


def bounce_angle(normalized: float, max_angle: float) -> float:
    return normalized * max_angle


def deflect(speed: float, angle: float, direction: int):
    """Velocity leaving a paddle at `angle`, horizontal sign forced to `direction`."""
    vx = direction * abs(speed * math.cos(angle))
    vy = speed * math.sin(angle)
    return vx, vy


def serve_angle(rng: random.Random, spread: float) -> float:
    return rng.uniform(-spread, spread)
