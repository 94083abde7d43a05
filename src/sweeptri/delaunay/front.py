'''
Advancing front: the x-ordered boundary of the part of the mesh that is
already built during the sweep.
'''
from sweeptri.delaunay.tds import TriangulationError


class Node(object):
    """Node on the advancing front.

    The triangle is the triangle that fills the wedge to the right of the
    point of this node.
    """
    __slots__ = ('point', 'triangle', 'prev', 'next', 'value')

    def __init__(self, point, triangle=None):
        self.point = point
        self.triangle = triangle
        self.prev = None
        self.next = None
        self.value = point.x

    def __str__(self):
        return "Node({0})".format(self.point)

    @property
    def has_next(self):
        return self.next is not None

    @property
    def has_prev(self):
        return self.prev is not None


class AdvancingFront(object):
    """Doubly linked list of nodes, kept sorted on x.

    Lookups start from the node found last (the search node), new points
    in the sweep lie close to the previous one.
    """

    def __init__(self, head, tail):
        self.head = head
        self.tail = tail
        self.search_node = head

    def __iter__(self):
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __len__(self):
        return sum(1 for _ in self)

    def insert_after(self, node, new):
        """Link node new directly right of node"""
        new.next = node.next
        new.prev = node
        node.next.prev = new
        node.next = new

    def remove(self, node):
        """Unlink node from the front"""
        node.prev.next = node.next
        node.next.prev = node.prev
        if self.search_node is node:
            self.search_node = node.prev

    def locate_node(self, x):
        """Returns the node whose x-range [node, node.next) contains x,
        None if x is outside the front.
        """
        node = self.search_node
        if x < node.value:
            node = node.prev
            while node is not None:
                if x >= node.value:
                    self.search_node = node
                    return node
                node = node.prev
        else:
            node = node.next
            while node is not None:
                if x < node.value:
                    self.search_node = node.prev
                    return node.prev
                node = node.next
        return None

    def locate_point(self, point):
        """Returns the node that holds point, None if the point is not on
        the front.
        """
        px = point.x
        node = self.search_node
        nx = node.point.x
        if px == nx:
            # two nodes can share an x value for a short time
            if point != node.point:
                node = self._scan_equal_x(node, point)
        elif px < nx:
            node = node.prev
            while node is not None and point != node.point:
                node = node.prev
        else:
            node = node.next
            while node is not None and point != node.point:
                node = node.next
        if node is not None:
            self.search_node = node
        return node

    def _scan_equal_x(self, node, point):
        for step in ('prev', 'next'):
            other = getattr(node, step)
            while other is not None and other.point.x == point.x:
                if other.point == point:
                    return other
                other = getattr(other, step)
        return None

    def check(self):
        """Verify that the front is ordered on x"""
        for node in self:
            if node.next is not None and node.next.value < node.value:
                raise TriangulationError(
                    "Advancing front not ordered at {}".format(node))
