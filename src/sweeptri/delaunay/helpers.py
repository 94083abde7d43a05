'''
Randomized point sets (for testing purposes)
'''
from math import sqrt, pi, cos, sin
from random import randint, random

from sweeptri.delaunay.tds import Point


def random_sorted_vertices(n=10):
    """Returns a list with at most n random points on a grid in [0, 1]
    """
    W = float(n)
    vertices = []
    for _ in range(n):
        x = randint(0, n)
        y = randint(0, n)
        vertices.append((x / W, y / W))
    vertices = list(set(vertices))
    vertices.sort()
    return [Point(x, y) for x, y in vertices]


def random_circle_vertices(n=10, cx=0, cy=0):
    """Returns a list with n random points in a unit circle around (cx, cy)

    Method according to:

    http://www.anderswallin.net/2009/05/uniform-random-points-in-a-circle-using-polar-coordinates/
    """
    vertices = []
    for _ in range(n):
        r = sqrt(random())
        t = 2 * pi * random()
        x = r * cos(t)
        y = r * sin(t)
        vertices.append((x + cx, y + cy))
    vertices = list(set(vertices))
    vertices.sort()
    return [Point(x, y) for x, y in vertices]
