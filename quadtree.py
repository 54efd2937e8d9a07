# quadtree.py
import logging
from typing import Generic, Iterable, List, Optional, TypeVar

from geometry import circle_intersects_rectangle, point_in_circle, rectangle_contains
from points import SupportsXY

logger = logging.getLogger(__name__)

QUADRANTS = (1, 2, 3, 4)

P = TypeVar("P", bound=SupportsXY)


class QuadtreeNode(Generic[P]):
    """
    Node of a point quadtree. The node's point anchors the split of its
    rectangle into four quadrants; each quadrant holds at most one child node.
    Quadrant 1 is upper-right, 2 upper-left, 3 lower-left, 4 lower-right,
    with y growing downward.
    """
    def __init__(self, point: P, x1, y1, x2, y2):
        self.point = point
        self.bounds = (x1, y1, x2, y2)
        self.children: List[Optional["QuadtreeNode[P]"]] = [None, None, None, None]

    @classmethod
    def build(cls, points: Iterable[P], x1, y1, x2, y2) -> "QuadtreeNode[P]":
        """Builds a tree anchored at the first point, inserting the rest in order."""
        points = iter(points)
        try:
            first = next(points)
        except StopIteration:
            raise ValueError("cannot build a quadtree from no points") from None
        root = cls(first, x1, y1, x2, y2)
        for p in points:
            root.insert(p)
        return root

    @property
    def x1(self):
        return self.bounds[0]

    @property
    def y1(self):
        return self.bounds[1]

    @property
    def x2(self):
        return self.bounds[2]

    @property
    def y2(self):
        return self.bounds[3]

    def get_child(self, quadrant) -> Optional["QuadtreeNode[P]"]:
        """Returns the child at quadrant 1-4, None if empty or not a quadrant."""
        if quadrant not in QUADRANTS:
            return None
        return self.children[quadrant - 1]

    def has_child(self, quadrant) -> bool:
        return self.get_child(quadrant) is not None

    def _matching_quadrants(self, p):
        """
        Every quadrant whose closed range holds p, with its sub-rectangle.
        Points on the anchor's axes match more than one quadrant.
        """
        x1, y1, x2, y2 = self.bounds
        ax, ay = self.point.x, self.point.y
        px, py = p.x, p.y

        right = ax <= px <= x2
        left = x1 <= px <= ax
        upper = y1 <= py <= ay
        lower = ay <= py <= y2

        matches = []
        if right and upper:
            matches.append((1, (ax, y1, x2, ay)))
        if left and upper:
            matches.append((2, (x1, y1, ax, ay)))
        if left and lower:
            matches.append((3, (x1, ay, ax, y2)))
        if right and lower:
            matches.append((4, (ax, ay, x2, y2)))
        return matches

    def insert(self, p: P) -> None:
        """Inserts a point into every quadrant of the tree that holds it."""
        if not rectangle_contains(p.x, p.y, *self.bounds):
            logger.warning("Inserting %r outside of node bounds %s", p, self.bounds)

        placed = False
        stack = [self]
        while stack:
            node = stack.pop()
            for quadrant, sub_bounds in node._matching_quadrants(p):
                placed = True
                child = node.children[quadrant - 1]
                if child is not None:
                    stack.append(child)
                else:
                    node.children[quadrant - 1] = QuadtreeNode(p, *sub_bounds)
                    logger.debug("New node for %r in quadrant %d, bounds %s", p, quadrant, sub_bounds)

        if not placed:
            logger.warning("Dropped %r: it matches no quadrant of %s", p, self.bounds)

    def all_points(self) -> List[P]:
        """All points of the subtree, in pre-order with quadrants 1 to 4."""
        found = []
        stack = [self]
        while stack:
            node = stack.pop()
            found.append(node.point)
            stack.extend(child for child in reversed(node.children) if child is not None)
        return found

    def size(self) -> int:
        return len(self.all_points())

    def depth(self) -> int:
        """Number of levels in the subtree; a leaf has depth 1."""
        deepest = 0
        stack = [(self, 1)]
        while stack:
            node, level = stack.pop()
            deepest = max(deepest, level)
            stack.extend((child, level + 1) for child in node.children if child is not None)
        return deepest

    def find_in_circle(self, cx, cy, cr) -> List[P]:
        """
        Finds the points within distance cr of (cx, cy), boundary included.
        Subtrees whose rectangle misses the circle are skipped. Results come
        in the same order as all_points().
        """
        hits = []
        stack = [self]
        while stack:
            node = stack.pop()
            if not circle_intersects_rectangle(cx, cy, cr, *node.bounds):
                continue
            if point_in_circle(node.point.x, node.point.y, cx, cy, cr):
                hits.append(node.point)
            stack.extend(child for child in reversed(node.children) if child is not None)
        return hits

    def __len__(self):
        return self.size()

    def __iter__(self):
        return iter(self.all_points())

    def __repr__(self):
        return f"QuadtreeNode({self.point!r}, bounds={self.bounds})"
