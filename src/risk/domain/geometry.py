"""
Geometry helpers over bounding boxes and points.
"""
import math
from .entities import BoundingBox, Point


def iou(box_a: BoundingBox, box_b: BoundingBox) -> float:
    """
    Intersection over Union of two boxes. Returns 0.0 when they do not overlap.
    """
    x_a = max(box_a.x1, box_b.x1)
    y_a = max(box_a.y1, box_b.y1)
    x_b = min(box_a.x2, box_b.x2)
    y_b = min(box_a.y2, box_b.y2)

    inter_area = max(0.0, x_b - x_a) * max(0.0, y_b - y_a)
    if inter_area == 0:
        return 0.0

    return inter_area / (box_a.area + box_b.area - inter_area)


def center(box: BoundingBox) -> Point:
    return box.center


def distance(p: Point, q: Point) -> float:
    return math.hypot(p[0] - q[0], p[1] - q[1])
