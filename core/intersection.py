import math

from core.geometry import ResolvedRay
from settings import INTERSECT_EPS


def intersect(ray, segment, eps=INTERSECT_EPS):
    """Intersect a ray with a segment.

    Uses the two-line parametric form: ``t`` runs along the ray (0 at the
    start, 1 at ``ray.end``) and ``u`` along the segment. A hit needs
    ``t > 0`` and ``u`` within ``[-eps, 1 + eps]`` so that corner hits
    survive rounding.

    Returns (t, point) or None. Parallel or degenerate pairs are never hits.
    """
    x1, y1 = ray.start
    x2, y2 = ray.end
    x3, y3 = segment.a
    x4, y4 = segment.b

    den = (x1 - x2) * (y3 - y4) - (y1 - y2) * (x3 - x4)
    if den == 0:
        return None

    t = ((x1 - x3) * (y3 - y4) - (y1 - y3) * (x3 - x4)) / den
    u = -((x1 - x2) * (y1 - y3) - (y1 - y2) * (x1 - x3)) / den
    if not (math.isfinite(t) and math.isfinite(u)):
        return None

    if t > 0 and -eps <= u <= 1 + eps:
        return t, ray.point_at(t)
    return None


def resolve(ray, segments, eps=INTERSECT_EPS):
    """Nearest hit of ``ray`` among ``segments`` as a ResolvedRay, or None.

    On equal ``t`` the first segment in iteration order wins.
    """
    closest_t = math.inf
    closest_point = None

    for segment in segments:
        hit = intersect(ray, segment, eps)
        if hit is None:
            continue
        t, point = hit
        if t < closest_t:
            closest_t = t
            closest_point = point

    if closest_point is None:
        return None
    return ResolvedRay(ray.start, closest_point, closest_t)


def resolve_all(rays, segments, eps=INTERSECT_EPS):
    """Resolve every ray, dropping the ones that hit nothing."""
    segments = tuple(segments)
    resolved = []
    for ray in rays:
        result = resolve(ray, segments, eps)
        if result is not None:
            resolved.append(result)
    return resolved
