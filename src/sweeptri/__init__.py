"""sweeptri - Constrained Delaunay Triangulation by sweep line
"""

import logging

__version__ = '0.1.0.dev0'
__license__ = 'MIT License'
__author__ = 'Martijn Meijers'

from sweeptri.delaunay import triangulate, Point, PointSet, \
    ConstrainedPointSet, Polygon, TriangulationMode, TriangulationError, \
    IntersectingConstraintsError, PointOnEdgeError

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = ["triangulate", "Point", "PointSet", "ConstrainedPointSet",
           "Polygon", "TriangulationMode", "TriangulationError",
           "IntersectingConstraintsError", "PointOnEdgeError"]
