# csgtrace/geometry/csg.py
"""
Merging of child hit lists for boolean composites.

Both children of a composite are intersected on their own, their hits are
tagged with the branch they came from and sorted by distance, and a scan over
the sorted list decides which hits are boundaries of the combined solid.

Only unions can be hit-tested. Inside an overlap the scan tracks which
operands the ray is inside, so each union is a single pass over its hits.
"""
import logging
from typing import List, NamedTuple, Optional, Sequence

from csgtrace.core.ray import Ray
from csgtrace.core.utils import is_near_zero
from csgtrace.geometry.errors import InvariantViolation, NotImplementedFault
from csgtrace.geometry.hittable import Hitpoint
from csgtrace.geometry.shapes import Composition, Shape
from csgtrace.geometry.solidity import is_non_solid

logger = logging.getLogger(__name__)

LEFT_BRANCH = 1
RIGHT_BRANCH = 2


class TaggedHit(NamedTuple):
    """A hit together with the composite branch and sub-shape it came from."""
    branch: int
    shape: Shape
    hit: Hitpoint


def sort_tagged_hits(left: Shape, right: Shape,
                     left_hits: Sequence[Hitpoint],
                     right_hits: Sequence[Hitpoint]) -> List[TaggedHit]:
    """
    Tag and merge both children's hits, ordered by distance.

    The sort is stable, so at equal distance left hits come before right hits.
    """
    tagged = [TaggedHit(LEFT_BRANCH, left, h) for h in left_hits]
    tagged.extend(TaggedHit(RIGHT_BRANCH, right, h) for h in right_hits)
    return sorted(tagged, key=lambda th: th.hit.distance)


def is_grazing(ray: Ray, hit: Hitpoint) -> bool:
    """True if the ray runs tangent to the surface at the hit."""
    return is_near_zero(ray.direction.dot(hit.normal))


def _is_passive(ray: Ray, tagged_hit: TaggedHit) -> bool:
    """True for hits that neither enter nor leave a solid: tangents and sheets."""
    return is_grazing(ray, tagged_hit.hit) or is_non_solid(ray, tagged_hit.hit, tagged_hit.shape)


def find_exit_hit(tagged_hits: Sequence[TaggedHit], start: int,
                  ray: Optional[Ray] = None) -> int:
    """
    Index of the hit where the ray leaves the overlap of both operands.

    The two hits before start are entries into different operands, so the
    scan begins inside both. Each hit from start on flips whether the ray is
    inside its branch; the exit is the first hit after which the ray is
    inside neither. When the ray is given, tangent and sheet hits leave the
    state unchanged.

    Raises:
        InvariantViolation: If the hits run out before the ray leaves both.
    """
    inside = {LEFT_BRANCH: True, RIGHT_BRANCH: True}
    if ray is not None and start >= 1 and _is_passive(ray, tagged_hits[start - 1]):
        inside[tagged_hits[start - 1].branch] = False

    for i in range(start, len(tagged_hits)):
        tagged_hit = tagged_hits[i]
        if ray is not None and _is_passive(ray, tagged_hit):
            continue
        inside[tagged_hit.branch] = not inside[tagged_hit.branch]
        if not any(inside.values()):
            return i
    logger.error("Union merge ran out of hits looking for an exit from index %d", start)
    raise InvariantViolation("No hits in tuple list.")


def merge_union(ray: Ray, tagged_hits: Sequence[TaggedHit]) -> List[Hitpoint]:
    """
    Select the hits of a union that are boundaries of the combined solid.

    Args:
        ray: The ray that produced the hits.
        tagged_hits: Both operands' hits as returned by sort_tagged_hits.

    Returns:
        The kept hits in scan order.
    """
    kept: List[Hitpoint] = []
    count = len(tagged_hits)
    i = 0
    while i < count:
        front = tagged_hits[i]
        if _is_passive(ray, front):
            kept.append(front.hit)
            i += 1
        elif i + 1 == count:
            kept.append(front.hit)
            i += 1
        elif front.branch == tagged_hits[i + 1].branch:
            # Entry and exit of one operand with no overlap in between.
            kept.append(front.hit)
            kept.append(tagged_hits[i + 1].hit)
            i += 2
        else:
            # Entered the other operand while still inside this one; the
            # crossings up to the exit are hidden inside the union.
            exit_index = find_exit_hit(tagged_hits, i + 2, ray)
            logger.debug("Union entry at %d exits at %d", i, exit_index)
            kept.append(front.hit)
            kept.append(tagged_hits[exit_index].hit)
            i = exit_index + 1
    return kept


def intersect_composite(ray: Ray, left: Shape, right: Shape,
                        operator: Composition) -> List[Hitpoint]:
    """
    Boundary hits of the ray on a composite of left and right.

    Raises:
        NotImplementedFault: For subtraction and intersection composites.
        InvariantViolation: If the union merge finds a malformed hit list.
    """
    if operator is not Composition.UNION:
        logger.debug("Hit-testing requested for unsupported %s composite", operator.value)
        raise NotImplementedFault(f"{operator.value.capitalize()} is not implemented yet")

    # Imported here to avoid a circular import with the primitive solvers.
    from csgtrace.geometry.intersection import intersect

    tagged_hits = sort_tagged_hits(left, right, intersect(ray, left), intersect(ray, right))
    return merge_union(ray, tagged_hits)
