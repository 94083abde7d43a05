import unittest

from sweeptri.delaunay.tds import Point, Constraint, Triangle, Edge, \
    TriangulationError, ccw, cw


class TestPoint(unittest.TestCase):

    def test_equality(self):
        self.assertEqual(Point(1, 2), Point(1.0, 2.0))
        self.assertNotEqual(Point(1, 2), Point(2, 1))
        self.assertNotEqual(Point(1, 2), (1, 2))
        self.assertEqual(len({Point(1, 2), Point(1, 2), Point(0, 0)}), 2)

    def test_getitem(self):
        p = Point(1, 2, 3)
        self.assertEqual((p[0], p[1], p[2]), (1., 2., 3.))
        with self.assertRaises(IndexError):
            p[3]


class TestConstraint(unittest.TestCase):

    def test_upper_point(self):
        a, b = Point(0, 1), Point(5, 0)
        edge = Constraint(a, b)
        self.assertIs(edge.q, a)
        self.assertIs(edge.p, b)
        self.assertEqual(a.edges, [edge])
        self.assertEqual(b.edges, [])
        self.assertIs(a.edge_to(b), edge)

    def test_horizontal(self):
        a, b = Point(3, 1), Point(1, 1)
        edge = Constraint(a, b)
        self.assertIs(edge.q, a)
        self.assertTrue(a.has_edges)
        self.assertFalse(b.has_edges)


class TestTriangle(unittest.TestCase):

    def setUp(self):
        self.a = Point(0, 0)
        self.b = Point(2, 0)
        self.c = Point(0, 2)
        self.d = Point(2, 2)
        self.t = Triangle(self.a, self.b, self.c)
        # shares b-c with t
        self.ot = Triangle(self.d, self.c, self.b)

    def test_index_helpers(self):
        self.assertEqual([ccw(i) for i in range(3)], [1, 2, 0])
        self.assertEqual([cw(i) for i in range(3)], [2, 0, 1])

    def test_index(self):
        t = self.t
        self.assertEqual(t.index(self.b), 1)
        with self.assertRaises(TriangulationError):
            t.index(self.d)

    def test_points(self):
        t = self.t
        self.assertIs(t.point_ccw(self.a), self.b)
        self.assertIs(t.point_cw(self.a), self.c)
        self.assertTrue(t.contains_edge(self.b, self.c))
        self.assertFalse(t.contains_edge(self.b, self.d))

    def test_edge_index(self):
        t = self.t
        self.assertEqual(t.edge_index(self.b, self.c), 0)
        self.assertEqual(t.edge_index(self.c, self.a), 1)
        self.assertEqual(t.edge_index(self.a, self.b), 2)
        self.assertEqual(t.edge_index(self.a, self.d), -1)

    def test_mark_neighbour(self):
        t, ot = self.t, self.ot
        t.mark_neighbour(ot)
        self.assertIs(t.neighbours[0], ot)
        self.assertIs(ot.neighbours[0], t)
        self.assertIs(t.neighbour_across(self.a), ot)
        self.assertIs(ot.opposite_point(t, self.a), self.d)
        self.assertIs(t.opposite_point(ot, self.d), self.a)
        with self.assertRaises(TriangulationError):
            t.opposite_point(t, self.a)

    def test_constrained_edge(self):
        t = self.t
        t.mark_constrained_edge(self.c, self.b)
        self.assertEqual(t.constrained, [True, False, False])
        self.assertTrue(t.get_constrained_edge_across(self.a))
        self.assertFalse(t.get_constrained_edge_cw(self.a))
        t.set_constrained_edge_ccw(self.a, True)
        self.assertTrue(t.constrained[cw(0)])

    def test_delaunay_edges(self):
        t = self.t
        t.set_delaunay_edge_across(self.b, True)
        self.assertTrue(t.get_delaunay_edge_across(self.b))
        t.clear_delaunay_edges()
        self.assertEqual(t.delaunay, [False, False, False])

    def test_legalize(self):
        t = self.t
        # flip b-c to a-d, b is no longer part of t
        t.legalize(self.a, self.d)
        self.assertTrue(t.contains(self.d))
        self.assertFalse(t.contains(self.b))
        self.assertTrue(t.is_ccw)
        with self.assertRaises(TriangulationError):
            t.legalize(self.b, self.a)

    def test_clear(self):
        t, ot = self.t, self.ot
        t.mark_neighbour(ot)
        t.clear()
        self.assertEqual(ot.neighbours, [None, None, None])
        self.assertEqual(str(t), "POLYGON EMPTY")

    def test_geometry(self):
        t = self.t
        self.assertTrue(t.is_ccw)
        self.assertAlmostEqual(t.area(), 2.0)
        centroid = t.centroid()
        self.assertAlmostEqual(centroid.x, 2. / 3.)
        self.assertEqual(str(t),
                         "POLYGON((0.0 0.0, 2.0 0.0, 0.0 2.0, 0.0 0.0))")

    def test_edge(self):
        edge = Edge(self.t, 0)
        self.assertEqual(edge.segment, (self.b, self.c))
        self.assertFalse(edge.constrained)
        self.assertEqual(edge, Edge(self.t, 0))


if __name__ == "__main__":
    unittest.main()
