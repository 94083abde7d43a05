'''
Iterators over the triangles of a finished triangulation.
'''
from collections import deque

from sweeptri.delaunay.tds import Edge


class EdgeIterator(object):
    """Iterator over all edges of a list of triangles, every edge is
    returned once.

    Inside the mesh the edge of the triangle with the lowest id is returned,
    along the boundary (no neighbour) the edge is always returned.
    """

    def __init__(self, triangles, constraints_only=False):
        self.triangles = triangles
        self.constraints_only = constraints_only
        self.current_idx = 0  # this is index in the list
        self.pos = -1  # this is index in the triangle (side)

    def __iter__(self):
        return self

    def __next__(self):
        while self.current_idx < len(self.triangles):
            triangle = self.triangles[self.current_idx]
            self.pos += 1
            ret = None
            neighbour = triangle.neighbours[self.pos]
            if neighbour is None or id(triangle) < id(neighbour):
                if not self.constraints_only or \
                        triangle.constrained[self.pos]:
                    ret = Edge(triangle, self.pos)
            if self.pos == 2:
                self.pos = -1
                self.current_idx += 1
            if ret is not None:
                return ret
        raise StopIteration()


class InteriorTriangleIterator(object):
    """Iterator over all triangles that can be reached from the start
    triangle without crossing a constrained edge.

    Every triangle returned is marked as interior.
    """

    def __init__(self, start):
        self.to_visit = deque()
        if start is not None:
            start.interior = True
            self.to_visit.append(start)

    def __iter__(self):
        return self

    def __next__(self):
        if not self.to_visit:
            raise StopIteration()
        triangle = self.to_visit.popleft()
        for i in range(3):
            if triangle.constrained[i]:
                continue
            neighbour = triangle.neighbours[i]
            if neighbour is not None and not neighbour.interior:
                neighbour.interior = True
                self.to_visit.append(neighbour)
        return triangle
