import numpy

def as_points(buffer):
    """Return a view of a flat x0, y0, x1, y1, ... buffer as an array of
    shape (m, 2)."""
    buffer = numpy.asarray(buffer)
    if buffer.ndim != 1 or len(buffer) % 2:
        raise ValueError('Interleaved buffer must be one-dimensional with an even length.')
    return buffer.reshape(-1, 2)

def interleave(points):
    """Flatten an array of shape (m, 2) into an x0, y0, x1, y1, ... buffer."""
    points = numpy.asarray(points)
    if points.ndim != 2 or points.shape[1] != 2:
        raise ValueError('points must have shape (m, 2)')
    return points.ravel()
