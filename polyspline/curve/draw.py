import logging

from . import cardinal
from . import geometry

logger = logging.getLogger(__name__)

def add_to_path(path, buffer, closed=False):
    """Add a sampled spline to a path object.

    Parameters:
        path: object with move_to(x, y), line_to(x, y) and close() methods,
            such as a celiagg.Path.
        buffer: flat x0, y0, x1, y1, ... buffer as from cardinal.spline_points()
        closed: if True, close the sub-path after the last point.

    Returns the path."""
    points = geometry.as_points(buffer)
    if len(points) == 0:
        return path
    path.move_to(*points[0])
    for x, y in points[1:]:
        path.line_to(x, y)
    if closed:
        path.close()
    return path

def spline_path(rings, tension=cardinal.DEFAULT_TENSION, subdivisions=cardinal.DEFAULT_SUBDIVISIONS,
        closed=False, path=None):
    """Build a path from splines through one or more sequences of points.

    Parameters:
        rings: list of point arrays, each of shape (n, 2) with n >= 2.
        tension, subdivisions, closed: see cardinal.spline_points()
        path: path object to add the splines to (see add_to_path()). If None,
            a new celiagg.Path is created. Requires celiagg installed.

    Returns the path, with one sub-path per ring."""
    if path is None:
        import celiagg
        path = celiagg.Path()
    buffers = cardinal.spline_rings(rings, tension, subdivisions, closed, dtype=float)
    for buffer in buffers:
        add_to_path(path, buffer, closed)
    logger.debug('Added %d spline rings to path', len(buffers))
    return path
