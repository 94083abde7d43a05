'''
Hooks to follow the sweep while it runs (e.g. for visual debugging).
'''


class SweepObserver(object):
    """Base observer, all hooks do nothing.

    Subclass and override the hooks of interest, then pass an instance
    to triangulate().
    """

    def primary_triangle(self, triangle):
        pass

    def secondary_triangle(self, triangle):
        pass

    def active_node(self, node):
        pass

    def active_constraint(self, edge):
        pass

    def active_point(self, point):
        pass

    def clear(self):
        pass


class TraceObserver(SweepObserver):
    """Keeps the element last activated per hook and counts the steps"""

    def __init__(self):
        self.steps = 0
        self.clear()

    def primary_triangle(self, triangle):
        self.primary = triangle
        self.steps += 1

    def secondary_triangle(self, triangle):
        self.secondary = triangle
        self.steps += 1

    def active_node(self, node):
        self.node = node
        self.steps += 1

    def active_constraint(self, edge):
        self.constraint = edge
        self.steps += 1

    def active_point(self, point):
        self.point = point

    def clear(self):
        self.primary = None
        self.secondary = None
        self.node = None
        self.constraint = None
        self.point = None
