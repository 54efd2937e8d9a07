# geometry.py


def point_in_circle(px, py, cx, cy, cr):
    """True when (px, py) lies inside or on the circle."""
    dx = px - cx
    dy = py - cy
    return dx * dx + dy * dy <= cr * cr


def circle_intersects_rectangle(cx, cy, cr, x1, y1, x2, y2):
    """
    Checks the circle against the rectangle using the point of the
    rectangle closest to the circle's center.
    """
    closest_x = min(max(cx, x1), x2)
    closest_y = min(max(cy, y1), y2)
    return point_in_circle(closest_x, closest_y, cx, cy, cr)


def rectangle_contains(px, py, x1, y1, x2, y2):
    return x1 <= px <= x2 and y1 <= py <= y2
