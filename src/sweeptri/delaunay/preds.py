'''
Geometric predicates used by the sweep.

The determinants come from geompreds (adaptive, robust arithmetic), the
classification of a determinant as collinear uses a fixed tolerance.
'''
from math import atan2

import geompreds

EPSILON = 1e-12

CW = -1
COLLINEAR = 0
CCW = 1


def orient2d(pa, pb, pc):
    """Orientation of the triangle pa, pb, pc:

    left:     CCW
    straight: COLLINEAR (determinant within EPSILON of zero)
    right:    CW
    """
    det = geompreds.orient2d(pa, pb, pc)
    if -EPSILON < det < EPSILON:
        return COLLINEAR
    elif det > 0:
        return CCW
    return CW


def incircle(pa, pb, pc, pd):
    """Tests whether pd lies strictly inside the circle through pa, pb, pc.

    Pre-condition: pa, pb, pc form a ccw triangle and pa and pd lie on
    opposite sides of pb-pc.

    pd can only be inside the circle when it lies in the wedge at pa
    spanned by pb and pc, which is checked first::

                   a
                   +
                  / \\
                 /   \\
               b/     \\c
               +-------+
              /    B    \\
             /           \\

    Returns False when pd is on the circle.
    """
    if geompreds.orient2d(pa, pb, pd) <= 0:
        return False
    if geompreds.orient2d(pc, pa, pd) <= 0:
        return False
    return geompreds.incircle(pa, pb, pc, pd) > 0


def in_scan_area(pa, pb, pc, pd):
    """Tests whether pd lies in the wedge at pa spanned by pb and pc,
    i.e. whether flipping the edge pb-pc towards pd gives a valid pair of
    triangles (see incircle).
    """
    if geompreds.orient2d(pa, pb, pd) <= 0:
        return False
    if geompreds.orient2d(pc, pa, pd) <= 0:
        return False
    return True


def angle(p, a, b):
    """Signed angle between p->a and p->b in the range [-pi, pi]"""
    ax = a[0] - p[0]
    ay = a[1] - p[1]
    bx = b[0] - p[0]
    by = b[1] - p[1]
    return atan2(ax * by - ay * bx, ax * bx + ay * by)


def basin_angle(p, q):
    """Angle of the vector q->p against the horizontal"""
    return atan2(p[1] - q[1], p[0] - q[0])
