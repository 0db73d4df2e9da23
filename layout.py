"""Random entity placement (rejection sampling under layout constraints)."""

from __future__ import annotations

from dataclasses import dataclass
import logging
import random
from typing import Iterable, Optional

import config
from utils import ARENA, SAFE_ZONE, Rect, Vec2, distance, in_safe_zone, overlaps


LOG = logging.getLogger(__name__)

ACCEPT_LAST = "accept_last"


@dataclass(frozen=True)
class PlacementPolicy:
    """Tuning for the placement sampler.

    When every attempt is rejected the sampler degrades according to
    `on_exhausted`; the only supported mode keeps the last draw, so a
    placement always terminates even in crowded levels.
    """

    max_attempts: int = config.PLACEMENT_MAX_ATTEMPTS
    edge_margin: float = config.PLACEMENT_EDGE_MARGIN
    gap: float = config.PLACEMENT_GAP
    on_exhausted: str = ACCEPT_LAST

    def __post_init__(self):
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be >= 1, got {self.max_attempts}")
        if self.on_exhausted != ACCEPT_LAST:
            raise ValueError(f"Unknown exhaustion mode '{self.on_exhausted}'")


DEFAULT_POLICY = PlacementPolicy()


@dataclass(frozen=True)
class DistanceConstraint:
    """Keep a placed entity's center at least `min_distance` from `anchor`."""

    anchor: Vec2
    min_distance: float


def _blocked(rect: Rect, exclude_rects: Iterable[Rect], gap: float) -> bool:
    padded = rect.expanded(gap)
    return any(overlaps(padded, r) for r in exclude_rects)


def is_valid_position(
    x: float,
    y: float,
    size: float,
    exclude_rects: Iterable[Rect] = (),
    min_distance_from: Optional[DistanceConstraint] = None,
    policy: PlacementPolicy = DEFAULT_POLICY,
) -> bool:
    """Check a candidate position against every placement constraint."""
    m = policy.edge_margin
    if x < ARENA.left + m or y < ARENA.top + m:
        return False
    if x + size > ARENA.right - m or y + size > ARENA.bottom - m:
        return False
    if in_safe_zone(x, y, size):
        return False
    rect = Rect.from_pos(x, y, size)
    if _blocked(rect, [SAFE_ZONE, *exclude_rects], policy.gap):
        return False
    if min_distance_from is not None:
        if distance(rect.center, min_distance_from.anchor) < min_distance_from.min_distance:
            return False
    return True


def random_position(
    size: float,
    exclude_rects: Iterable[Rect] = (),
    min_distance_from: Optional[DistanceConstraint] = None,
    policy: Optional[PlacementPolicy] = None,
    rng: Optional[random.Random] = None,
) -> Vec2:
    """Pick a random top-left position for a square of `size`.

    Draws uniformly inside the arena minus the edge margin and rejects
    candidates that touch the safe zone, come within `policy.gap` of any
    excluded rect, or sit closer than `min_distance_from` allows. After
    `policy.max_attempts` rejections the last draw is returned as-is.
    """
    if size <= 0:
        raise ValueError(f"size must be positive, got {size}")
    policy = policy or DEFAULT_POLICY
    rng = rng or random
    exclude = list(exclude_rects)

    m = policy.edge_margin
    span_x = max(0.0, ARENA.width - size - m * 2)
    span_y = max(0.0, ARENA.height - size - m * 2)

    x = y = m
    for _ in range(policy.max_attempts):
        x = rng.random() * span_x + m
        y = rng.random() * span_y + m
        if is_valid_position(x, y, size, exclude, min_distance_from, policy):
            return Vec2(x, y)

    LOG.warning(
        "Placement exhausted %d attempts for size %s with %d exclusions; keeping (%.1f, %.1f)",
        policy.max_attempts,
        size,
        len(exclude),
        x,
        y,
    )
    return Vec2(x, y)
