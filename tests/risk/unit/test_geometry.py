import math
import pytest
from src.risk.domain.entities import BoundingBox
from src.risk.domain.geometry import iou, center, distance

def test_iou_identical_boxes():
    box = BoundingBox(10, 10, 50, 40)
    assert iou(box, box) == 1.0

def test_iou_disjoint_boxes():
    a = BoundingBox(0, 0, 10, 10)
    b = BoundingBox(20, 20, 30, 30)
    assert iou(a, b) == 0.0

def test_iou_touching_edges_is_zero():
    a = BoundingBox(0, 0, 10, 10)
    b = BoundingBox(10, 0, 20, 10)
    assert iou(a, b) == 0.0

def test_iou_partial_overlap():
    a = BoundingBox(0, 0, 10, 10)
    b = BoundingBox(5, 0, 15, 10)
    # intersection 50, union 150
    assert iou(a, b) == pytest.approx(1 / 3)

def test_iou_is_symmetric():
    a = BoundingBox(0, 0, 100, 80)
    b = BoundingBox(30, 20, 140, 90)
    assert iou(a, b) == iou(b, a)

def test_iou_degenerate_box_is_zero():
    a = BoundingBox(5, 5, 5, 5)
    b = BoundingBox(0, 0, 10, 10)
    assert iou(a, b) == 0.0

def test_center():
    assert center(BoundingBox(0, 0, 10, 20)) == (5.0, 10.0)

def test_distance():
    assert distance((0, 0), (3, 4)) == 5.0
    assert distance((1, 1), (1, 1)) == 0.0
    assert math.isclose(distance((-1, -1), (1, 1)), math.sqrt(8))

def test_invalid_box_rejected():
    with pytest.raises(ValueError):
        BoundingBox(10, 0, 0, 10)
