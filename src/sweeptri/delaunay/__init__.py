"""Sweep line Constrained Delaunay Triangulation of point sets and polygons
"""

from sweeptri.delaunay.sweep import triangulate
from sweeptri.delaunay.context import SweepContext, TriangulationMode
from sweeptri.delaunay.sets import PointSet, ConstrainedPointSet, Polygon
from sweeptri.delaunay.tds import Point, Triangle, Edge, \
    TriangulationError, IntersectingConstraintsError, PointOnEdgeError
from sweeptri.delaunay.observer import SweepObserver, TraceObserver
from sweeptri.delaunay.iter import EdgeIterator, InteriorTriangleIterator
from sweeptri.delaunay.inout import output_points, output_triangles, \
    output_edges

__all__ = ("triangulate", "SweepContext", "TriangulationMode",
           "PointSet", "ConstrainedPointSet", "Polygon",
           "Point", "Triangle", "Edge",
           "TriangulationError", "IntersectingConstraintsError",
           "PointOnEdgeError",
           "SweepObserver", "TraceObserver",
           "EdgeIterator", "InteriorTriangleIterator",
           "output_points", "output_triangles", "output_edges")


if __name__ == "__main__":
    import logging
    logging.basicConfig(level=logging.DEBUG)
    from sweeptri.delaunay.helpers import random_circle_vertices
    triangulate(PointSet(random_circle_vertices(15000)))
