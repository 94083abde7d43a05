import unittest
from math import pi

from sweeptri.delaunay.tds import Point
from sweeptri.delaunay.preds import orient2d, incircle, in_scan_area, \
    angle, basin_angle, CW, CCW, COLLINEAR


class TestOrientation(unittest.TestCase):

    def test_orient2d(self):
        a, b = Point(0, 0), Point(1, 0)
        self.assertEqual(orient2d(a, b, Point(0.5, 1)), CCW)
        self.assertEqual(orient2d(a, b, Point(0.5, -1)), CW)
        self.assertEqual(orient2d(a, b, Point(2, 0)), COLLINEAR)

    def test_orient2d_tuples(self):
        self.assertEqual(orient2d((0, 0), (1, 1), (2, 2)), COLLINEAR)
        self.assertEqual(orient2d((0, 0), (0, 1), (-1, 0)), CCW)


class TestInCircle(unittest.TestCase):

    def setUp(self):
        # ccw triangle, d candidates lie below b-c (opposite of a)
        self.a = Point(0, 1)
        self.b = Point(-1, 0)
        self.c = Point(1, 0)

    def test_inside(self):
        self.assertTrue(incircle(self.a, self.b, self.c, Point(0, -0.5)))

    def test_outside(self):
        self.assertFalse(incircle(self.a, self.b, self.c, Point(0, -2)))

    def test_on_circle(self):
        # the unit circle passes through (0, -1)
        self.assertFalse(incircle(self.a, self.b, self.c, Point(0, -1)))

    def test_outside_wedge(self):
        # inside the circle, but not in the wedge at a
        self.assertFalse(incircle(self.a, self.b, self.c, Point(-0.9, 0.3)))

    def test_in_scan_area(self):
        self.assertTrue(in_scan_area(self.a, self.b, self.c, Point(0, -5)))
        self.assertFalse(in_scan_area(self.a, self.b, self.c, Point(-5, -1)))


class TestAngles(unittest.TestCase):

    def test_angle(self):
        p = Point(0, 0)
        self.assertAlmostEqual(angle(p, Point(1, 0), Point(0, 1)), pi / 2)
        self.assertAlmostEqual(angle(p, Point(0, 1), Point(1, 0)), -pi / 2)
        self.assertAlmostEqual(angle(p, Point(1, 0), Point(-1, 0)), pi)

    def test_basin_angle(self):
        self.assertAlmostEqual(basin_angle(Point(0, 0), Point(1, 1)),
                               -3 * pi / 4)
        self.assertAlmostEqual(basin_angle(Point(1, 1), Point(0, 0)),
                               pi / 4)


if __name__ == "__main__":
    unittest.main()
