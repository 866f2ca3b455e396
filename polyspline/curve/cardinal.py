"""Cardinal (Catmull-Rom-style) splines through 2D control points, sampled
into dense polylines for path rendering.

The output of spline_points() is a flat, interleaved buffer
x0, y0, x1, y1, ... of exactly buffer_length() values. The first pair is the
"move to" point of a path and every further pair is a "line to" point; the
last pair is always an exact copy of a control point (the last point for
open curves, the first for closed ones).

Algorithm reference: https://www.cubic.org/docs/hermite.htm
"""

import logging
import numbers

import numpy

logger = logging.getLogger(__name__)

DEFAULT_TENSION = 0.5
DEFAULT_SUBDIVISIONS = 20

class InvalidInput(ValueError):
    """Raised when the control points cannot define a spline."""

class InvalidConfiguration(ValueError):
    """Raised for out-of-range tension or subdivision parameters."""

def _check_subdivisions(subdivisions):
    if isinstance(subdivisions, bool) or not isinstance(subdivisions, numbers.Integral):
        raise InvalidConfiguration('subdivisions must be an integer, not {!r}'.format(subdivisions))
    if subdivisions < 1:
        raise InvalidConfiguration('subdivisions must be >= 1, not {}'.format(subdivisions))

def _check_tension(tension):
    if isinstance(tension, bool) or not isinstance(tension, numbers.Real):
        raise InvalidConfiguration('tension must be a number, not {!r}'.format(tension))
    if not numpy.isfinite(tension) or not 0 <= tension <= 1:
        raise InvalidConfiguration('tension must be in the range [0, 1], not {}'.format(tension))

def _as_control_points(points):
    points = numpy.asarray(points, dtype=float)
    if points.ndim != 2 or points.shape[1] != 2:
        raise InvalidInput('points must be an array of shape (n, 2), not {}'.format(points.shape))
    if len(points) < 2:
        raise InvalidInput('at least 2 control points are required, got {}'.format(len(points)))
    return points

def basis_cache(subdivisions):
    """Precompute the cubic Hermite basis functions (h00, h01, h10, h11) at
    parametric positions t = i / subdivisions, for i in [0, subdivisions).

    Returns: array of shape (subdivisions+2, 4). Rows 1 through subdivisions
    are the sampled basis values; row 0 is (1,0,0,0) and the final row is
    (0,1,0,0), the limiting values of the basis at t=0 and t=1."""
    _check_subdivisions(subdivisions)
    t = numpy.arange(subdivisions) / subdivisions
    t2 = t**2
    t3 = t2 * t
    cache = numpy.zeros((subdivisions + 2, 4), dtype=float)
    cache[0, 0] = 1
    cache[1:-1, 0] = 2*t3 - 3*t2 + 1
    cache[1:-1, 1] = 3*t2 - 2*t3
    cache[1:-1, 2] = t3 - 2*t2 + t
    cache[1:-1, 3] = t3 - t2
    cache[-1, 1] = 1
    return cache

def pad_points(points, closed=False):
    """Add one neighbor point before and after a sequence of n control points,
    so that every original point has two neighbors for tangent estimation.

    Open curves repeat the first and last points (zero velocity just outside
    the ends); closed curves wrap around, prepending the last point and
    appending the first.

    Returns: array of shape (n+2, 2)."""
    points = _as_control_points(points)
    if closed:
        ends = points[[-1, 0]]
    else:
        ends = points[[0, -1]]
    return numpy.concatenate([ends[:1], points, ends[1:]])

def wrap_window(points):
    """Return the four-point neighborhood of the segment joining the last
    control point back to the first."""
    points = _as_control_points(points)
    return points[[-2, -1, 0, 1]]

def evaluate_segments(window, basis, tension=DEFAULT_TENSION):
    """Evaluate the Hermite segments between the interior points of a window.

    Parameters:
        window: array of m >= 4 points of shape (m, 2). Segments join
            window[i] and window[i+1] for i in [1, m-2); the outer points only
            serve to estimate tangents.
        basis: basis cache as returned by basis_cache().
        tension: scale factor applied to the tangents.

    Returns: array of shape ((m-3)*subdivisions, 2) of the sampled points, in
    segment order. Each segment's samples start exactly at its first point
    and stop short of its second point."""
    window = numpy.asarray(window, dtype=float)
    tangents = (window[2:] - window[:-2]) * tension
    # control has shape (segments, 4, 2): p1, p2, tangent1, tangent2 per segment
    control = numpy.stack([window[1:-2], window[2:-1], tangents[:-1], tangents[1:]], axis=1)
    samples = numpy.einsum('sj,kjd->ksd', basis[1:-1], control)
    return samples.reshape(-1, 2)

def buffer_length(n, subdivisions, closed=False):
    """Return the number of floats spline_points() produces for n control points."""
    segments = n if closed else n - 1
    return 2 * segments * subdivisions + 2

def spline_points(points, tension=DEFAULT_TENSION, subdivisions=DEFAULT_SUBDIVISIONS, closed=False, dtype=float):
    """Sample a cardinal spline through a set of 2D points.

    Parameters:
        points: array of n >= 2 points x,y; shape=(n,2)
        tension: tangent scale in [0, 1]. 0 gives straight lines between the
            points; larger values give rounder curves.
        subdivisions: number of samples taken along each segment.
        closed: if True, add a segment from the last point back to the first.
        dtype: dtype of the returned buffer.

    Returns a flat array x0, y0, x1, y1, ... of length
    buffer_length(n, subdivisions, closed). The final x,y pair is an exact copy
    of points[0] if closed, or of points[-1] otherwise.

    Raises InvalidInput for fewer than 2 points and InvalidConfiguration for
    bad tension or subdivisions, before anything is computed."""
    points = _as_control_points(points)
    _check_subdivisions(subdivisions)
    _check_tension(tension)
    n = len(points)
    out = numpy.empty(buffer_length(n, subdivisions, closed), dtype=dtype)
    out_points = out.reshape(-1, 2)
    basis = basis_cache(subdivisions)

    samples = evaluate_segments(pad_points(points, closed), basis, tension)
    pos = len(samples)
    out_points[:pos] = samples
    if closed:
        out_points[pos:pos+subdivisions] = evaluate_segments(wrap_window(points), basis, tension)
        pos += subdivisions
    out_points[pos] = points[0] if closed else points[-1]
    logger.debug('Sampled %d control points (tension=%s, subdivisions=%d, closed=%s) into %d values',
        n, tension, subdivisions, closed, len(out))
    return out

def spline_rings(rings, tension=DEFAULT_TENSION, subdivisions=DEFAULT_SUBDIVISIONS, closed=False, dtype=float):
    """Sample a spline through each of several point sequences with the same
    options. Returns a list of flat buffers as from spline_points()."""
    return [spline_points(ring, tension, subdivisions, closed, dtype) for ring in rings]
