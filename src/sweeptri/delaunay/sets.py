'''
Input units: the things that can be triangulated.

A unit hands its points and constraints to a SweepContext and receives the
resulting triangles.
'''
import logging

from sweeptri.delaunay.context import TriangulationMode
from sweeptri.delaunay.tds import Point

log = logging.getLogger(__name__)


def as_point(pt):
    """Point for pt, pt may be a Point or a tuple (x, y[, z])"""
    if isinstance(pt, Point):
        return pt
    return Point(*pt)


class PointSet(object):
    """Unconstrained triangulation of a set of points (the convex hull of
    the points will be covered)
    """
    mode = TriangulationMode.UNCONSTRAINED

    def __init__(self, points):
        self.points = [as_point(pt) for pt in points]
        self.triangles = []

    def add_triangle(self, triangle):
        self.triangles.append(triangle)

    def add_triangles(self, triangles):
        self.triangles.extend(triangles)

    def clear_triangulation(self):
        self.triangles = []

    def prepare_triangulation(self, tcx):
        self.clear_triangulation()
        tcx.add_points(self.points)


class ConstrainedPointSet(PointSet):
    """Point set with constrained edges.

    Constraints are given either as a flat list of indices into points
    ``[i0, j0, i1, j1, ...]`` or as a flat list of end points
    ``[p0, q0, p1, q1, ...]``.
    """
    mode = TriangulationMode.CONSTRAINED

    def __init__(self, points, index=None, constraints=None):
        super(ConstrainedPointSet, self).__init__(points)
        self.constraints = []
        if index is not None:
            if len(index) % 2:
                raise ValueError("Odd number of indices for constraints")
            for i in range(0, len(index), 2):
                self.constraints.append((self.points[index[i]],
                                         self.points[index[i + 1]]))
        if constraints is not None:
            if len(constraints) % 2:
                raise ValueError("Odd number of end points for constraints")
            for i in range(0, len(constraints), 2):
                self.constraints.append((as_point(constraints[i]),
                                         as_point(constraints[i + 1])))

    def prepare_triangulation(self, tcx):
        super(ConstrainedPointSet, self).prepare_triangulation(tcx)
        # end points that are not in the point set are added as well
        for a, b in self.constraints:
            for point in (a, b):
                if not tcx.has_point(point):
                    tcx.add_point(point)
        for a, b in self.constraints:
            tcx.new_constraint(a, b)


class Polygon(PointSet):
    """Simple polygon, optionally with holes and Steiner points.

    The ring is given without repeating the first point at the end (when it
    is repeated the closing point is removed). Only the triangles inside the
    polygon and outside its holes are kept.
    """
    mode = TriangulationMode.POLYGON

    def __init__(self, points):
        super(Polygon, self).__init__(points)
        if len(self.points) > 1 and self.points[0] == self.points[-1]:
            log.warning("Removed duplicate closing point {}".format(
                self.points[-1]))
            self.points.pop()
        self.holes = []
        self.steiner_points = []

    def __len__(self):
        return len(self.points)

    @property
    def point_count(self):
        """Number of points, including those of holes and Steiner points"""
        count = len(self.points) + len(self.steiner_points)
        for hole in self.holes:
            count += hole.point_count
        return count

    def add_hole(self, polygon):
        """Add a hole, a Polygon lying inside this polygon"""
        if not isinstance(polygon, Polygon):
            polygon = Polygon(polygon)
        self.holes.append(polygon)
        return polygon

    def add_steiner_point(self, point):
        point = as_point(point)
        self.steiner_points.append(point)
        return point

    def add_steiner_points(self, points):
        for point in points:
            self.add_steiner_point(point)

    def clear_steiner_points(self):
        self.steiner_points = []

    def insert_point_after(self, point, new_point):
        """Insert new_point in the ring directly after point"""
        index = self.points.index(point)
        new_point = as_point(new_point)
        self.points.insert(index + 1, new_point)
        return new_point

    def add_point(self, point):
        """Append a point to the ring"""
        point = as_point(point)
        self.points.append(point)
        return point

    def add_points(self, points):
        for point in points:
            self.add_point(point)

    def remove_point(self, point):
        self.points.remove(point)

    def _add_ring_points(self, tcx):
        tcx.add_points(self.points)
        for hole in self.holes:
            hole._add_ring_points(tcx)

    def _add_ring_constraints(self, tcx):
        n = len(self.points)
        for i in range(n):
            tcx.new_constraint(self.points[i], self.points[(i + 1) % n])
        for hole in self.holes:
            hole._add_ring_constraints(tcx)

    def prepare_triangulation(self, tcx):
        self.clear_triangulation()
        # all points first, constraints refer to the points that are kept
        self._add_ring_points(tcx)
        tcx.add_points(self.steiner_points)
        self._add_ring_constraints(tcx)
