'''
Triangle data structure used by the sweep line triangulator.
'''
import logging

from sweeptri.delaunay.preds import orient2d, CCW

log = logging.getLogger(__name__)


class TriangulationError(ValueError):
    """Fatal condition, the mesh cannot be completed"""


class IntersectingConstraintsError(TriangulationError):
    """Two of the input constraints cross each other"""


class PointOnEdgeError(TriangulationError):
    """A point lies in the interior of a constraint that is being inserted,
    only this constraint is dropped.
    """


def ccw(i):
    """Get index (0, 1 or 2) increased with one (ccw)"""
    return (i + 1) % 3


def cw(i):
    """Get index (0, 1 or 2) decreased with one (cw)"""
    return (i - 1) % 3


class Point(object):
    """A point to be triangulated.

    Two points are equal when their x and y are exactly the same.
    The point keeps the constraints for which it is the upper end point.
    """
    __slots__ = ('x', 'y', 'z', 'edges')

    def __init__(self, x, y, z=0.):
        self.x = float(x)
        self.y = float(y)
        self.z = float(z)
        self.edges = []

    def __str__(self):
        return "{0} {1}".format(self.x, self.y)

    def __repr__(self):
        return "Point({0}, {1})".format(self.x, self.y)

    def __getitem__(self, i):
        if i == 0:
            return self.x
        elif i == 1:
            return self.y
        elif i == 2:
            return self.z
        else:
            raise IndexError("No such ordinate: {}".format(i))

    def __eq__(self, other):
        if not isinstance(other, Point):
            return False
        return self.x == other.x and self.y == other.y

    def __ne__(self, other):
        return not self.__eq__(other)

    def __hash__(self):
        return hash((self.x, self.y))

    @property
    def has_edges(self):
        return len(self.edges) > 0

    def edge_to(self, p):
        """Constraint from this (upper) point to lower point p, or None"""
        for edge in self.edges:
            if edge.p == p:
                return edge
        return None


class Constraint(object):
    """Constrained edge, q is the upper point (swept last): it has the larger
    y, or for equal y the larger x.
    The edge is registered at its upper point.
    """
    __slots__ = ('p', 'q')

    def __init__(self, p1, p2):
        self.p = p1
        self.q = p2
        if p1.y > p2.y or (p1.y == p2.y and p1.x > p2.x):
            self.p = p2
            self.q = p1
        self.q.edges.append(self)

    def __str__(self):
        return "LINESTRING({0}, {1})".format(self.p, self.q)


class Triangle(object):
    """Triangle for which its vertices are oriented CCW.

    Neighbour i, constrained[i] and delaunay[i] refer to the side that is
    opposite of vertex i.
    """

    __slots__ = ('vertices', 'neighbours', 'constrained', 'delaunay',
                 'interior')

    def __init__(self, a, b, c):
        self.vertices = [a, b, c]
        self.neighbours = [None] * 3
        self.constrained = [False] * 3
        # flags only valid during one legalization pass
        self.delaunay = [False] * 3
        self.interior = False

    def __str__(self):
        """Conversion to WKT string"""
        if self.vertices[0] is None:
            return "POLYGON EMPTY"
        vertices = [str(v) for v in self.vertices]
        vertices.append(vertices[0])
        return "POLYGON(({0}))".format(", ".join(vertices))

    # -- vertices

    def index(self, p):
        for i in range(3):
            if p == self.vertices[i]:
                return i
        raise TriangulationError(
            "Point {} is not a vertex of triangle {}".format(p, self))

    def contains(self, p):
        return p in self.vertices

    def contains_edge(self, p, q):
        return self.contains(p) and self.contains(q)

    def point_cw(self, p):
        """The point clockwise to given point"""
        return self.vertices[cw(self.index(p))]

    def point_ccw(self, p):
        """The point counter-clockwise to given point"""
        return self.vertices[ccw(self.index(p))]

    def opposite_point(self, t, p):
        """The point of this triangle not shared with neighbour t,
        where p is the point of t not shared with this triangle.
        """
        if t is self:
            raise TriangulationError(
                "Triangle {} is not its own neighbour".format(self))
        return self.point_cw(t.point_cw(p))

    def edge_index(self, p, q):
        """Index of the side between p and q, -1 if it is not a side"""
        a, b, c = self.vertices
        if a == p:
            if b == q:
                return 2
            elif c == q:
                return 1
        elif b == p:
            if c == q:
                return 0
            elif a == q:
                return 2
        elif c == p:
            if a == q:
                return 1
            elif b == q:
                return 0
        return -1

    def legalize(self, opoint, npoint):
        """Rotate the vertex labels so that npoint takes the place next to
        opoint, turning this triangle into its form after an edge flip
        (the companion triangle is rotated by the caller).
        """
        v = self.vertices
        if opoint == v[0]:
            v[1] = v[0]
            v[0] = v[2]
            v[2] = npoint
        elif opoint == v[1]:
            v[2] = v[1]
            v[1] = v[0]
            v[0] = npoint
        elif opoint == v[2]:
            v[0] = v[2]
            v[2] = v[1]
            v[1] = npoint
        else:
            raise TriangulationError(
                "Cannot rotate triangle {} around {}".format(self, opoint))

    # -- neighbours

    def neighbour_cw(self, p):
        """The neighbour clockwise to given point"""
        return self.neighbours[ccw(self.index(p))]

    def neighbour_ccw(self, p):
        """The neighbour counter-clockwise to given point"""
        return self.neighbours[cw(self.index(p))]

    def neighbour_across(self, p):
        """The neighbour across the side opposite of given point"""
        return self.neighbours[self.index(p)]

    def _mark_neighbour(self, p1, p2, t):
        side = self.edge_index(p1, p2)
        if side == -1:
            raise TriangulationError(
                "Triangle {} has no side {} {}".format(self, p1, p2))
        self.neighbours[side] = t

    def mark_neighbour(self, t):
        """Exhaustive search to link t as neighbour, on both sides"""
        a, b, c = self.vertices
        if t.contains_edge(b, c):
            self.neighbours[0] = t
            t._mark_neighbour(b, c, self)
        elif t.contains_edge(a, c):
            self.neighbours[1] = t
            t._mark_neighbour(a, c, self)
        elif t.contains_edge(a, b):
            self.neighbours[2] = t
            t._mark_neighbour(a, b, self)
        else:
            log.warning("Triangles {} and {} share no side".format(self, t))

    def clear_neighbours(self):
        self.neighbours = [None] * 3

    def clear_neighbour(self, t):
        for i in range(3):
            if self.neighbours[i] is t:
                self.neighbours[i] = None
                return

    def clear(self):
        """Unlink from all neighbours and drop the vertices"""
        for t in self.neighbours:
            if t is not None:
                t.clear_neighbour(self)
        self.clear_neighbours()
        self.vertices = [None, None, None]

    # -- constrained edges

    def mark_constrained_edge_index(self, i):
        self.constrained[i] = True

    def mark_constrained_edge(self, p, q):
        side = self.edge_index(p, q)
        if side != -1:
            self.constrained[side] = True

    def get_constrained_edge_cw(self, p):
        return self.constrained[ccw(self.index(p))]

    def get_constrained_edge_ccw(self, p):
        return self.constrained[cw(self.index(p))]

    def get_constrained_edge_across(self, p):
        return self.constrained[self.index(p)]

    def set_constrained_edge_cw(self, p, value):
        self.constrained[ccw(self.index(p))] = value

    def set_constrained_edge_ccw(self, p, value):
        self.constrained[cw(self.index(p))] = value

    # -- delaunay edges

    def get_delaunay_edge_cw(self, p):
        return self.delaunay[ccw(self.index(p))]

    def get_delaunay_edge_ccw(self, p):
        return self.delaunay[cw(self.index(p))]

    def get_delaunay_edge_across(self, p):
        return self.delaunay[self.index(p)]

    def set_delaunay_edge_cw(self, p, value):
        self.delaunay[ccw(self.index(p))] = value

    def set_delaunay_edge_ccw(self, p, value):
        self.delaunay[cw(self.index(p))] = value

    def set_delaunay_edge_across(self, p, value):
        self.delaunay[self.index(p)] = value

    def clear_delaunay_edges(self):
        self.delaunay = [False] * 3

    # -- geometry

    @property
    def is_ccw(self):
        return orient2d(self.vertices[0],
                        self.vertices[1],
                        self.vertices[2]) == CCW

    def area(self):
        a, b, c = self.vertices
        return 0.5 * abs((a.x - c.x) * (b.y - a.y) - (a.x - b.x) * (c.y - a.y))

    def centroid(self):
        a, b, c = self.vertices
        return Point((a.x + b.x + c.x) / 3., (a.y + b.y + c.y) / 3.)


class Edge(object):
    """An edge is a Triangle and an integer [0, 1, 2] that indicates the
    side of the triangle to use as the Edge"""

    def __init__(self, triangle, side):
        self.triangle = triangle
        self.side = side

    def __eq__(self, other):
        return self.triangle is other.triangle and self.side == other.side

    @property
    def segment(self):
        return (self.triangle.vertices[ccw(self.side)],
                self.triangle.vertices[cw(self.side)])

    @property
    def constrained(self):
        return self.triangle.constrained[self.side]
