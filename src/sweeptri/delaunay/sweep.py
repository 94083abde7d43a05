'''
Sweep-line constrained Delaunay triangulation

The sweep follows:

    Domiter, V. and Zalik, B. (2008), Sweep-line algorithm for constrained
    Delaunay triangulation, International Journal of Geographical
    Information Science 22(4), 449-462

Constrained edges are inserted with a flip / scan procedure: triangles
crossed by the edge are flipped one by one, scanning ahead over triangles
that cannot be flipped yet, until the edge is part of the mesh.
'''
import logging
import time
from math import pi

from sweeptri.delaunay.context import SweepContext, TriangulationMode
from sweeptri.delaunay.front import Node
from sweeptri.delaunay.iter import EdgeIterator
from sweeptri.delaunay.preds import orient2d, incircle, in_scan_area, \
    angle, basin_angle, CW, CCW, COLLINEAR, EPSILON
from sweeptri.delaunay.tds import Triangle, TriangulationError, \
    IntersectingConstraintsError, PointOnEdgeError

PI_DIV2 = pi / 2
PI_3DIV4 = 3 * pi / 4


class Sweep(object):
    """Runs the sweep on a prepared SweepContext"""

    def __init__(self, tcx):
        self.tcx = tcx
        self.observer = tcx.observer
        self.flips = 0
        # triangles flipped during the current (outermost) legalization
        self._touched = []
        self._depth = 0

    def triangulate(self):
        tcx = self.tcx
        tcx.init_triangulation()
        tcx.create_advancing_front()
        self.sweep_points()
        if tcx.mode is TriangulationMode.POLYGON:
            self.finalization_polygon()
        else:
            self.finalization_convex_hull()

    def sweep_points(self):
        """Handle the (y, x) sorted points one by one, from bottom to top"""
        points = self.tcx.points
        for i in range(1, len(points)):
            point = points[i]
            if self.observer is not None:
                self.observer.active_point(point)
            node = self.point_event(point)
            for edge in list(point.edges):
                if self.observer is not None:
                    self.observer.active_constraint(edge)
                self.edge_event(edge, node)

    # -------------------------------------------------------------------------
    # Point event
    #

    def point_event(self, point):
        """Find the node left of the new point and make a new triangle.
        Holes and basins that are made by this are filled as well.
        """
        tcx = self.tcx
        node = tcx.locate_node(point)
        if self.observer is not None:
            self.observer.active_node(node)
        new_node = self.new_front_triangle(point, node)
        # the point never has a smaller x than node, due to how nodes are
        # located, so only check +epsilon
        if point.x <= node.point.x + EPSILON:
            self.fill(node)
        self.fill_advancing_front(new_node)
        return new_node

    def new_front_triangle(self, point, node):
        tcx = self.tcx
        triangle = Triangle(point, node.point, node.next.point)
        triangle.mark_neighbour(node.triangle)
        tcx.add_to_list(triangle)
        new_node = Node(point)
        tcx.front.insert_after(node, new_node)
        if self.observer is not None:
            self.observer.active_node(new_node)
        if not self.legalize(triangle):
            tcx.map_triangle_to_nodes(triangle)
        return new_node

    def fill(self, node):
        """Add a triangle on top of node (the bottom of a hole in the front)
        and take the node out of the front.
        """
        tcx = self.tcx
        triangle = Triangle(node.prev.point, node.point, node.next.point)
        # constrained flags are copied from the neighbours in legalize
        triangle.mark_neighbour(node.prev.triangle)
        triangle.mark_neighbour(node.triangle)
        tcx.add_to_list(triangle)
        tcx.front.remove(node)
        if not self.legalize(triangle):
            tcx.map_triangle_to_nodes(triangle)

    def fill_advancing_front(self, n):
        """Fill holes right and left of n and a basin right of it"""
        node = n.next
        while node.has_next:
            if self.is_large_hole(node):
                break
            self.fill(node)
            node = node.next
        node = n.prev
        while node.has_prev:
            if self.is_large_hole(node):
                break
            self.fill(node)
            node = node.prev
        if n.has_next and n.next.has_next:
            if basin_angle(n.point, n.next.next.point) < PI_3DIV4:
                self.fill_basin(n)

    def is_large_hole(self, node):
        """True if the angle at node exceeds 90 degrees (or is negative)"""
        a = angle(node.point, node.next.point, node.prev.point)
        return a > PI_DIV2 or a < 0

    def fill_basin(self, node):
        """Fill the basin right of node.

        First the left, bottom and right node of the basin are found, then
        the basin is filled from the bottom upwards.
        """
        basin = self.tcx.basin
        if orient2d(node.point,
                    node.next.point,
                    node.next.next.point) == CCW:
            basin.left_node = node
        else:
            basin.left_node = node.next
        bottom = basin.left_node
        while bottom.has_next and bottom.point.y >= bottom.next.point.y:
            bottom = bottom.next
        if bottom is basin.left_node:
            # no valid basin
            return
        right = bottom
        while right.has_next and right.point.y < right.next.point.y:
            right = right.next
        if right is bottom:
            # no valid basin
            return
        basin.bottom_node = bottom
        basin.right_node = right
        basin.width = right.point.x - basin.left_node.point.x
        basin.left_highest = basin.left_node.point.y > right.point.y
        self.fill_basin_from(bottom)

    def fill_basin_from(self, node):
        basin = self.tcx.basin
        while not self.is_shallow(node):
            self.fill(node)
            if node.prev is basin.left_node and node.next is basin.right_node:
                return
            elif node.prev is basin.left_node:
                if orient2d(node.point,
                            node.next.point,
                            node.next.next.point) == CW:
                    return
                node = node.next
            elif node.next is basin.right_node:
                if orient2d(node.point,
                            node.prev.point,
                            node.prev.prev.point) == CCW:
                    return
                node = node.prev
            # continue with the neighbour node with lowest y
            elif node.prev.point.y < node.next.point.y:
                node = node.prev
            else:
                node = node.next

    def is_shallow(self, node):
        basin = self.tcx.basin
        if basin.left_highest:
            height = basin.left_node.point.y - node.point.y
        else:
            height = basin.right_node.point.y - node.point.y
        return basin.width > height

    # -------------------------------------------------------------------------
    # Edge event
    #

    def edge_event(self, edge, node):
        """Make the constraint edge part of the mesh, node is the front
        node of its upper point.

        A point lying on the edge is not supported: the edge is skipped.
        """
        tcx = self.tcx
        try:
            tcx.edge_event.constrained_edge = edge
            tcx.edge_event.right = edge.p.x > edge.q.x
            if self.observer is not None:
                self.observer.primary_triangle(node.triangle)
            if self.is_edge_side_of_triangle(node.triangle, edge.p, edge.q):
                return
            # fill the front above the edge first, then flip
            self.fill_edge_event(edge, node)
            self.constrain_edge(edge.p, edge.q, node.triangle, edge.q)
        except PointOnEdgeError as err:
            tcx.logger.warning("Skipping edge {}: {}".format(edge, err))

    def is_edge_side_of_triangle(self, triangle, ep, eq):
        index = triangle.edge_index(ep, eq)
        if index != -1:
            triangle.mark_constrained_edge_index(index)
            neighbour = triangle.neighbours[index]
            if neighbour is not None:
                neighbour.mark_constrained_edge(ep, eq)
            return True
        return False

    def fill_edge_event(self, edge, node):
        if self.tcx.edge_event.right:
            self.fill_right_above_edge_event(edge, node)
        else:
            self.fill_left_above_edge_event(edge, node)

    def fill_right_above_edge_event(self, edge, node):
        while node.next.point.x < edge.p.x:
            if self.observer is not None:
                self.observer.active_node(node)
            # next node below the edge?
            if orient2d(edge.q, node.next.point, edge.p) == CCW:
                self.fill_right_below_edge_event(edge, node)
            else:
                node = node.next

    def fill_right_below_edge_event(self, edge, node):
        while node.point.x < edge.p.x:
            if self.observer is not None:
                self.observer.active_node(node)
            if orient2d(node.point,
                        node.next.point,
                        node.next.next.point) == CCW:
                self.fill_right_concave_edge_event(edge, node)
                return
            # convex, fill what is possible and retry
            self.fill_right_convex_edge_event(edge, node)

    def fill_right_concave_edge_event(self, edge, node):
        while True:
            self.fill(node.next)
            if node.next.point == edge.p:
                return
            # next above the edge?
            if orient2d(edge.q, node.next.point, edge.p) != CCW:
                return
            # next convex?
            if orient2d(node.point,
                        node.next.point,
                        node.next.next.point) != CCW:
                return

    def fill_right_convex_edge_event(self, edge, node):
        while True:
            if orient2d(node.next.point,
                        node.next.next.point,
                        node.next.next.next.point) == CCW:
                self.fill_right_concave_edge_event(edge, node.next)
                return
            # convex, next below the edge?
            if orient2d(edge.q, node.next.next.point, edge.p) != CCW:
                return
            node = node.next

    def fill_left_above_edge_event(self, edge, node):
        while node.prev.point.x > edge.p.x:
            if self.observer is not None:
                self.observer.active_node(node)
            # next node below the edge?
            if orient2d(edge.q, node.prev.point, edge.p) == CW:
                self.fill_left_below_edge_event(edge, node)
            else:
                node = node.prev

    def fill_left_below_edge_event(self, edge, node):
        while node.point.x > edge.p.x:
            if self.observer is not None:
                self.observer.active_node(node)
            if orient2d(node.point,
                        node.prev.point,
                        node.prev.prev.point) == CW:
                self.fill_left_concave_edge_event(edge, node)
                return
            # convex, fill what is possible and retry
            self.fill_left_convex_edge_event(edge, node)

    def fill_left_concave_edge_event(self, edge, node):
        while True:
            self.fill(node.prev)
            if node.prev.point == edge.p:
                return
            # next above the edge?
            if orient2d(edge.q, node.prev.point, edge.p) != CW:
                return
            # next convex?
            if orient2d(node.point,
                        node.prev.point,
                        node.prev.prev.point) != CW:
                return

    def fill_left_convex_edge_event(self, edge, node):
        while True:
            if orient2d(node.prev.point,
                        node.prev.prev.point,
                        node.prev.prev.prev.point) == CW:
                self.fill_left_concave_edge_event(edge, node.prev)
                return
            # convex, next below the edge?
            if orient2d(edge.q, node.prev.prev.point, edge.p) != CW:
                return
            node = node.prev

    def constrain_edge(self, ep, eq, triangle, point):
        """Walk from triangle (having point) towards ep until the segment
        ep-eq is a side of a triangle, or a crossed triangle is found that
        can be flipped.
        """
        while True:
            if triangle is None:
                raise TriangulationError(
                    "No triangle to continue edge {} {}".format(ep, eq))
            if self.observer is not None:
                self.observer.primary_triangle(triangle)
            if self.is_edge_side_of_triangle(triangle, ep, eq):
                return
            p1 = triangle.point_ccw(point)
            o1 = orient2d(eq, p1, ep)
            if o1 == COLLINEAR:
                triangle, eq = self._split_on_point(triangle, ep, eq,
                                                    point, p1)
                point = eq
                continue
            p2 = triangle.point_cw(point)
            o2 = orient2d(eq, p2, ep)
            if o2 == COLLINEAR:
                triangle, eq = self._split_on_point(triangle, ep, eq,
                                                    point, p2)
                point = eq
                continue
            if o1 == o2:
                # rotate to a triangle that crosses the edge
                if o1 == CW:
                    triangle = triangle.neighbour_ccw(point)
                else:
                    triangle = triangle.neighbour_cw(point)
                continue
            # this triangle crosses the edge, start flipping
            self.flip_edge_event(ep, eq, triangle, point)
            return

    def _split_on_point(self, triangle, ep, eq, point, on):
        """Point on lies on the edge ep-eq: constrain eq-on and continue
        with the shortened edge ep-on.
        """
        if not triangle.contains_edge(eq, on):
            raise PointOnEdgeError(
                "point {} on constrained edge not supported".format(on))
        triangle.mark_constrained_edge(eq, on)
        self.tcx.edge_event.constrained_edge.q = on
        return triangle.neighbour_across(point), on

    def flip_edge_event(self, ep, eq, t, p):
        tcx = self.tcx
        while True:
            ot = t.neighbour_across(p)
            if ot is None:
                raise TriangulationError(
                    "Flip failed due to missing triangle at {}".format(t))
            if t.get_constrained_edge_across(p):
                raise IntersectingConstraintsError(
                    "Intersecting constraints at {}, "
                    "inserting {} {}".format(t, ep, eq))
            op = ot.opposite_point(t, p)
            if self.observer is not None:
                self.observer.primary_triangle(t)
                self.observer.secondary_triangle(ot)
            if not in_scan_area(p, t.point_ccw(p), t.point_cw(p), op):
                new_p = self.next_flip_point(ep, eq, ot, op)
                self.flip_scan_edge_event(ep, eq, t, ot, new_p)
                self.constrain_edge(ep, eq, t, p)
                return
            # rotate shared edge one vertex cw
            self.rotate_triangle_pair(t, p, ot, op)
            tcx.map_triangle_to_nodes(t)
            tcx.map_triangle_to_nodes(ot)
            if p == eq and op == ep:
                edge = tcx.edge_event.constrained_edge
                if eq == edge.q and ep == edge.p:
                    t.mark_constrained_edge(ep, eq)
                    ot.mark_constrained_edge(ep, eq)
                    self.legalize(t)
                    self.legalize(ot)
                # otherwise a sub edge of a flip scan is done
                return
            # continue with the triangle that still crosses the edge
            o = orient2d(eq, op, ep)
            if o == COLLINEAR:
                raise PointOnEdgeError(
                    "point {} on constrained edge not supported".format(op))
            t = self.next_flip_triangle(o, t, ot, p, op)

    def next_flip_triangle(self, o, t, ot, p, op):
        """After a flip only one of t and ot crosses the edge, legalize the
        other one and return the crossing one.

        o is orient2d(eq, op, ep).
        """
        if o == CCW:
            # ot does not cross the edge
            kept, crossing = ot, t
        else:
            kept, crossing = t, ot
        kept.delaunay[kept.edge_index(p, op)] = True
        self._depth += 1
        self._touched.append(kept)
        self.legalize(kept)
        self._depth -= 1
        self._clear_delaunay_edge(p, op, self._touched)
        self._touched = []
        return crossing

    def next_flip_point(self, ep, eq, ot, op):
        """Point of ot to traverse to the next triangle while scanning"""
        o = orient2d(eq, op, ep)
        if o == CW:
            return ot.point_ccw(op)
        elif o == CCW:
            return ot.point_cw(op)
        raise PointOnEdgeError(
            "point {} on constrained edge not supported".format(op))

    def flip_scan_edge_event(self, ep, eq, flip_triangle, t, p):
        """Scan for the next point inside the scan area of flip_triangle,
        when found flip towards it.
        """
        while True:
            ot = t.neighbour_across(p)
            if ot is None:
                raise TriangulationError(
                    "Flip scan failed due to missing triangle at {}".format(t))
            op = ot.opposite_point(t, p)
            if self.observer is not None:
                self.observer.primary_triangle(t)
                self.observer.secondary_triangle(ot)
            if in_scan_area(eq,
                            flip_triangle.point_ccw(eq),
                            flip_triangle.point_cw(eq),
                            op):
                # flip with new edge op -> eq
                self.flip_edge_event(eq, op, ot, op)
                return
            p = self.next_flip_point(ep, eq, ot, op)
            t = ot

    # -------------------------------------------------------------------------
    # Delaunay
    #

    def legalize(self, t):
        """Flip t with neighbours for which the Delaunay criterion does not
        hold, returns True if a flip took place.

        If it did, the triangles involved are mapped to the front already.
        """
        self._depth += 1
        flipped = self._legalize(t)
        self._depth -= 1
        if self._depth == 0:
            self._touched = []
        return flipped

    def _legalize(self, t):
        tcx = self.tcx
        for i in range(3):
            if t.delaunay[i]:
                continue
            ot = t.neighbours[i]
            if ot is None:
                continue
            p = t.vertices[i]
            op = ot.opposite_point(t, p)
            oi = ot.index(op)
            # constrained or (during recursion) Delaunay edge: skip
            if ot.constrained[oi] or ot.delaunay[oi]:
                t.constrained[i] = ot.constrained[oi]
                continue
            if incircle(p, t.point_ccw(p), t.point_cw(p), op):
                t.delaunay[i] = True
                ot.delaunay[oi] = True
                mark = len(self._touched)
                self.rotate_triangle_pair(t, p, ot, op)
                self._touched.extend((t, ot))
                # four new edges to check
                if not self.legalize(t):
                    tcx.map_triangle_to_nodes(t)
                if not self.legalize(ot):
                    tcx.map_triangle_to_nodes(ot)
                # the flags of the new edge p-op move along with the flips
                # above, clear them wherever they ended up
                self._clear_delaunay_edge(p, op, self._touched[mark:])
                return True
        return False

    def _clear_delaunay_edge(self, p, q, triangles):
        for triangle in triangles:
            side = triangle.edge_index(p, q)
            if side != -1:
                triangle.delaunay[side] = False

    def legalize_all(self):
        """Flip until every unconstrained edge is locally Delaunay"""
        flipped = True
        while flipped:
            flipped = False
            for t in self.tcx.triangles:
                if t.vertices[0] is not None and self.legalize(t):
                    flipped = True

    def rotate_triangle_pair(self, t, p, ot, op):
        """Rotates a triangle pair one vertex cw::

                  n2                    n2
             P +-----+             P +-----+
               | t  /|               |\\  t |
               |   / |               | \\   |
             n1|  /  |n3           n1|  \\  |n3
               | /   |    after CW   |   \\ |
               |/ oT |               | oT \\|
               +-----+ oP            +-----+
                  n4                    n4
        """
        self.flips += 1
        n1 = t.neighbour_ccw(p)
        n2 = t.neighbour_cw(p)
        n3 = ot.neighbour_ccw(op)
        n4 = ot.neighbour_cw(op)

        ce1 = t.get_constrained_edge_ccw(p)
        ce2 = t.get_constrained_edge_cw(p)
        ce3 = ot.get_constrained_edge_ccw(op)
        ce4 = ot.get_constrained_edge_cw(op)

        de1 = t.get_delaunay_edge_ccw(p)
        de2 = t.get_delaunay_edge_cw(p)
        de3 = ot.get_delaunay_edge_ccw(op)
        de4 = ot.get_delaunay_edge_cw(op)

        t.legalize(p, op)
        ot.legalize(op, p)

        ot.set_delaunay_edge_ccw(p, de1)
        t.set_delaunay_edge_cw(p, de2)
        t.set_delaunay_edge_ccw(op, de3)
        ot.set_delaunay_edge_cw(op, de4)

        ot.set_constrained_edge_ccw(p, ce1)
        t.set_constrained_edge_cw(p, ce2)
        t.set_constrained_edge_ccw(op, ce3)
        ot.set_constrained_edge_cw(op, ce4)

        t.clear_neighbours()
        ot.clear_neighbours()
        if n1 is not None:
            ot.mark_neighbour(n1)
        if n2 is not None:
            t.mark_neighbour(n2)
        if n3 is not None:
            t.mark_neighbour(n3)
        if n4 is not None:
            ot.mark_neighbour(n4)
        t.mark_neighbour(ot)

    # -------------------------------------------------------------------------
    # Finalization
    #

    def finalization_convex_hull(self):
        """Fill the front to a convex hull and remove the triangles that are
        connected to the two seed points.
        """
        tcx = self.tcx
        front = tcx.front
        n1 = front.head.next
        n2 = n1.next
        self.turn_advancing_front_convex(n1, n2)

        # When the first or last three nodes are the points of one triangle
        # we flip first, otherwise a valid triangle would be removed
        n1 = front.tail.prev
        if n1.triangle.contains(n1.next.point) and \
                n1.triangle.contains(n1.prev.point):
            self._flip_corner(n1)
        n1 = front.head.next
        if n1.triangle.contains(n1.prev.point) and \
                n1.triangle.contains(n1.next.point):
            self._flip_corner(n1)

        # lower right boundary
        first = front.head.point
        n2 = front.tail.prev
        t1 = n2.triangle
        p1 = n2.point
        n2.triangle = None
        while True:
            p1 = t1.point_ccw(p1)
            if p1 == first:
                break
            t2 = t1.neighbour_ccw(p1)
            t1.clear()
            t1 = t2

        # lower left boundary
        first = front.head.next.point
        p1 = t1.point_cw(front.head.point)
        t2 = t1.neighbour_cw(front.head.point)
        t1.clear()
        t1 = t2
        while p1 != first:
            p1 = t1.point_ccw(p1)
            t2 = t1.neighbour_ccw(p1)
            t1.clear()
            t1 = t2

        # all triangles attached to the seed nodes are gone, drop the nodes
        front.head = front.head.next
        front.head.prev = None
        front.tail = front.tail.prev
        front.tail.next = None
        front.search_node = front.head

        # the corner flips are not legalized
        self.legalize_all()
        tcx.finalize_triangulation()

    def _flip_corner(self, node):
        tcx = self.tcx
        t = node.triangle
        ot = t.neighbour_across(node.point)
        if ot is None:
            raise TriangulationError(
                "No triangle across {} to flip with".format(node.point))
        self.rotate_triangle_pair(t, node.point,
                                  ot, ot.opposite_point(t, node.point))
        tcx.map_triangle_to_nodes(t)
        tcx.map_triangle_to_nodes(ot)

    def turn_advancing_front_convex(self, b, c):
        """Traverse the front and fill it to form a convex hull"""
        tail = self.tcx.front.tail
        first = b
        while c is not tail:
            if self.observer is not None:
                self.observer.active_node(c)
            if orient2d(b.point, c.point, c.next.point) == CCW:
                # [b, c, d] concave, fill around c
                self.fill(c)
                c = c.next
            elif b is not first and \
                    orient2d(b.prev.point, b.point, c.point) == CCW:
                # [a, b, c] concave, fill around b
                self.fill(b)
                b = b.prev
            else:
                # [a, b, c] convex, nothing to fill
                b = c
                c = c.next

    def finalization_polygon(self):
        """Keep the triangles enclosed by the constraints"""
        tcx = self.tcx
        # find an interior triangle to start with
        node = tcx.front.head.next
        t = node.triangle
        p = node.point
        start = t
        while not t.get_constrained_edge_cw(p):
            t = t.neighbour_ccw(p)
            if t is None or t is start:
                raise TriangulationError(
                    "No constrained edge found around {}".format(p))
        tcx.mesh_clean(t)
        for triangle in tcx.triangles:
            if not triangle.interior:
                triangle.clear()
        tcx.triangles = []


def triangulate(unit, observer=None, logger=None):
    """Triangulate a PointSet, ConstrainedPointSet or Polygon.

    Returns the list of triangles (these are also stored at the unit).
    """
    start = time.perf_counter()
    tcx = SweepContext(observer, logger)
    tcx.prepare_triangulation(unit)
    log = tcx.logger
    if tcx.is_degenerate:
        log.warning("Nothing to triangulate, {} point(s) "
                    "not spanning an area".format(len(tcx.points)))
        return unit.triangles
    sweep = Sweep(tcx)
    sweep.triangulate()
    end = time.perf_counter()
    log.debug("Triangulating took: " + str(end - start) + " secs")
    log.debug("{} vertices".format(len(tcx.points)))
    log.debug("{} triangles".format(len(unit.triangles)))
    log.debug("{} flips".format(sweep.flips))
    if log.isEnabledFor(logging.DEBUG):
        constraint_ct = sum(1 for _ in EdgeIterator(unit.triangles,
                                                    constraints_only=True))
        log.debug("{count} constraints".format(count=constraint_ct))
    return unit.triangles
