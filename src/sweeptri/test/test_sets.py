import unittest

from sweeptri.delaunay.tds import Point
from sweeptri.delaunay.context import SweepContext, TriangulationMode
from sweeptri.delaunay.sets import PointSet, ConstrainedPointSet, Polygon, \
    as_point


class TestPointSet(unittest.TestCase):

    def test_as_point(self):
        p = Point(1, 2)
        self.assertIs(as_point(p), p)
        self.assertEqual(as_point((1, 2)), p)
        self.assertEqual(as_point((1, 2, 3)).z, 3.)

    def test_prepare(self):
        unit = PointSet([(0, 0), (1, 0), (0, 1)])
        self.assertIs(unit.mode, TriangulationMode.UNCONSTRAINED)
        tcx = SweepContext()
        tcx.prepare_triangulation(unit)
        self.assertEqual(len(tcx.points), 3)
        self.assertIs(tcx.mode, TriangulationMode.UNCONSTRAINED)

    def test_duplicates(self):
        unit = PointSet([(0, 0), (1, 0), (0, 0), (0, 1)])
        tcx = SweepContext()
        with self.assertLogs("sweeptri", level="WARNING") as cm:
            tcx.prepare_triangulation(unit)
        self.assertEqual(len(tcx.points), 3)
        self.assertIn("duplicate", cm.output[0])
        # the first instance is kept
        self.assertIs(tcx.points[0], unit.points[0])


class TestConstrainedPointSet(unittest.TestCase):

    def test_index(self):
        unit = ConstrainedPointSet([(0, 0), (1, 0), (1, 1), (0, 1)],
                                   index=[0, 2])
        self.assertIs(unit.mode, TriangulationMode.CONSTRAINED)
        tcx = SweepContext()
        tcx.prepare_triangulation(unit)
        upper = unit.points[2]
        self.assertEqual(len(upper.edges), 1)
        self.assertIs(upper.edges[0].p, unit.points[0])

    def test_constraints(self):
        points = [(0, 0), (1, 0), (1, 1), (0, 1)]
        unit = ConstrainedPointSet(points, constraints=[(1, 0), (0, 1)])
        tcx = SweepContext()
        tcx.prepare_triangulation(unit)
        # registered on the points of the point set, not on the copies
        self.assertEqual(len(tcx.points), 4)
        self.assertEqual(len(unit.points[3].edges), 1)
        self.assertIs(unit.points[3].edges[0].p, unit.points[1])

    def test_new_end_point(self):
        points = [(0, 0), (1, 0), (1, 1), (0, 1)]
        unit = ConstrainedPointSet(points, constraints=[(0, 0), (0.5, 0.5)])
        tcx = SweepContext()
        tcx.prepare_triangulation(unit)
        self.assertEqual(len(tcx.points), 5)
        self.assertTrue(tcx.has_point(Point(0.5, 0.5)))
        self.assertEqual(len(tcx.points[4].edges), 1)

    def test_odd_index(self):
        with self.assertRaises(ValueError):
            ConstrainedPointSet([(0, 0), (1, 0)], index=[0])

    def test_degenerate_constraint(self):
        unit = ConstrainedPointSet([(0, 0), (1, 0), (0, 1)],
                                   constraints=[(0, 0), (0, 0)])
        tcx = SweepContext()
        with self.assertLogs("sweeptri", level="WARNING"):
            tcx.prepare_triangulation(unit)
        self.assertFalse(any(p.has_edges for p in tcx.points))


class TestPolygon(unittest.TestCase):

    def test_closing_point(self):
        with self.assertLogs("sweeptri", level="WARNING"):
            polygon = Polygon([(0, 0), (1, 0), (1, 1), (0, 0)])
        self.assertEqual(len(polygon), 3)
        self.assertIs(polygon.mode, TriangulationMode.POLYGON)

    def test_point_count(self):
        polygon = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        polygon.add_hole([(1, 1), (2, 1), (2, 2)])
        polygon.add_steiner_point((3, 3))
        polygon.add_steiner_points([(3, 1), (1, 3)])
        self.assertEqual(polygon.point_count, 10)
        polygon.clear_steiner_points()
        self.assertEqual(polygon.point_count, 7)

    def test_edit_ring(self):
        polygon = Polygon([(0, 0), (4, 0), (0, 4)])
        first = polygon.points[0]
        new = polygon.insert_point_after(first, (2, -1))
        self.assertIs(polygon.points[1], new)
        polygon.add_point((-1, 2))
        polygon.add_points([(-1, 1)])
        self.assertEqual(len(polygon), 6)
        polygon.remove_point(new)
        self.assertEqual(len(polygon), 5)
        self.assertEqual(polygon.points[-1], Point(-1, 1))

    def test_prepare(self):
        polygon = Polygon([(0, 0), (4, 0), (4, 4), (0, 4)])
        polygon.add_hole(Polygon([(1, 1), (2, 1), (2, 2)]))
        polygon.add_steiner_point((3, 3))
        tcx = SweepContext()
        tcx.prepare_triangulation(polygon)
        self.assertEqual(len(tcx.points), 8)
        # every ring edge is registered once
        self.assertEqual(sum(len(p.edges) for p in tcx.points), 7)


if __name__ == "__main__":
    unittest.main()
