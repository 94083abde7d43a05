'''
State of one sweep line triangulation run.
'''
import logging
from enum import Enum

from sweeptri.delaunay.tds import Point, Triangle, Constraint, \
    TriangulationError
from sweeptri.delaunay.front import Node, AdvancingFront
from sweeptri.delaunay.iter import InteriorTriangleIterator
from sweeptri.delaunay.preds import orient2d, COLLINEAR

# size of the margin around the point set for the two seed points,
# relative to the size of the bounding box
ALPHA = 0.3


class TriangulationMode(Enum):
    UNCONSTRAINED = 0
    CONSTRAINED = 1
    POLYGON = 2


class Basin(object):
    """Left, bottom and right node of a basin on the advancing front"""
    __slots__ = ('left_node', 'bottom_node', 'right_node', 'width',
                 'left_highest')

    def __init__(self):
        self.clear()

    def clear(self):
        self.left_node = None
        self.bottom_node = None
        self.right_node = None
        self.width = 0.
        self.left_highest = False


class EdgeEvent(object):
    """The constraint that currently is inserted"""
    __slots__ = ('constrained_edge', 'right')

    def __init__(self):
        self.constrained_edge = None
        self.right = False


class SweepContext(object):
    """Owns the points, triangles and advancing front of one triangulation.

    A context is used for one run only and must not be shared.
    """

    def __init__(self, observer=None, logger=None):
        self.points = []
        self.triangles = []
        self.front = None
        # seed points, lower right (head) and lower left (tail) of the
        # point set
        self.head = None
        self.tail = None
        self.basin = Basin()
        self.edge_event = EdgeEvent()
        self.observer = observer
        if logger is None:
            logger = logging.getLogger("sweeptri.delaunay")
        self.logger = logger
        self.unit = None
        self.mode = None
        self._points_idx = {}

    def prepare_triangulation(self, unit):
        """Let the unit to triangulate add its points and constraints"""
        self.unit = unit
        self.mode = unit.mode
        unit.prepare_triangulation(self)

    # -- input

    def add_point(self, point):
        """Adds a point, returns the point that is kept for its location
        (a point at an already known location is dropped).
        """
        kept = self._points_idx.get(point)
        if kept is not None:
            self.logger.warning("Removed duplicate point {}".format(point))
            return kept
        point.edges = []
        self._points_idx[point] = point
        self.points.append(point)
        return point

    def add_points(self, points):
        for point in points:
            self.add_point(point)

    def has_point(self, point):
        """True if a point at the location of point is known"""
        return point in self._points_idx

    def new_constraint(self, a, b):
        """Make a constraint between two points of the point set"""
        try:
            a = self._points_idx[a]
            b = self._points_idx[b]
        except KeyError as err:
            raise TriangulationError(
                "Constraint end point {} not in point set".format(err))
        if a == b:
            self.logger.warning(
                "Failed to create constraint {} = {}".format(a, b))
            return None
        return Constraint(a, b)

    @property
    def is_degenerate(self):
        """True if there are less than 3 points or all points are
        collinear (nothing to triangulate)
        """
        if len(self.points) < 3:
            return True
        first, second = self.points[0], self.points[1]
        for point in self.points[2:]:
            if orient2d(first, second, point) != COLLINEAR:
                return False
        return True

    # -- sweep set up

    def init_triangulation(self):
        """Make the seed points below the point set and sort the points
        on (y, x)
        """
        xmin = xmax = self.points[0].x
        ymin = ymax = self.points[0].y
        for p in self.points:
            xmin = min(xmin, p.x)
            xmax = max(xmax, p.x)
            ymin = min(ymin, p.y)
            ymax = max(ymax, p.y)
        dx = ALPHA * (xmax - xmin)
        dy = ALPHA * (ymax - ymin)
        self.head = Point(xmax + dx, ymin - dy)
        self.tail = Point(xmin - dx, ymin - dy)
        self.points.sort(key=lambda p: (p.y, p.x))

    def create_advancing_front(self):
        """Initial triangle with the first point and the seed points,
        the front then consists of tail, first point, head.
        """
        triangle = Triangle(self.points[0], self.tail, self.head)
        self.add_to_list(triangle)
        head = Node(triangle.vertices[1], triangle)
        middle = Node(triangle.vertices[0], triangle)
        tail = Node(triangle.vertices[2])
        self.front = AdvancingFront(head, tail)
        head.next = middle
        middle.prev = head
        middle.next = tail
        tail.prev = middle

    # -- triangles

    def add_to_list(self, triangle):
        self.triangles.append(triangle)

    def locate_node(self, point):
        return self.front.locate_node(point.x)

    def map_triangle_to_nodes(self, triangle):
        """Let the front nodes at the open sides of triangle refer to it"""
        for i in range(3):
            if triangle.neighbours[i] is None:
                node = self.front.locate_point(
                    triangle.point_cw(triangle.vertices[i]))
                if node is not None:
                    node.triangle = triangle

    def mesh_clean(self, triangle):
        """Hand all triangles enclosed by constraints, starting at
        triangle, to the unit
        """
        for t in InteriorTriangleIterator(triangle):
            self.unit.add_triangle(t)

    def finalize_triangulation(self):
        """Hand all remaining triangles to the unit"""
        self.unit.add_triangles(
            [t for t in self.triangles if t.vertices[0] is not None])
        self.triangles = []
