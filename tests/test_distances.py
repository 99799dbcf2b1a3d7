import numpy as np
import pytest

from botsort.distances import cosine_distance, euclidean_distance, iou


def test_cosine_identical_is_near_zero():
    assert cosine_distance([1.0, 2.0, 3.0], [1.0, 2.0, 3.0]) == pytest.approx(0.0, abs=1e-5)


def test_cosine_orthogonal_is_one():
    assert cosine_distance([1.0, 0.0], [0.0, 5.0]) == pytest.approx(1.0)


def test_cosine_opposite_is_two():
    assert cosine_distance([1.0, 1.0], [-1.0, -1.0]) == pytest.approx(2.0, abs=1e-4)


def test_cosine_zero_vector_does_not_divide_by_zero():
    assert cosine_distance([0.0, 0.0], [1.0, 1.0]) == pytest.approx(1.0)


def test_cosine_is_scale_invariant():
    a = np.array([0.3, -1.2, 4.0])
    b = np.array([2.0, 0.5, 1.0])
    assert cosine_distance(a, b) == pytest.approx(cosine_distance(10 * a, b), abs=1e-5)


def test_euclidean_345():
    assert euclidean_distance([0.0, 0.0], [3.0, 4.0]) == pytest.approx(5.0)


def test_euclidean_symmetric_and_zero_on_self():
    a, b = [1.0, 2.0, -3.0], [4.0, 0.0, 1.0]
    assert euclidean_distance(a, b) == pytest.approx(euclidean_distance(b, a))
    assert euclidean_distance(a, a) == 0.0


def test_iou_identical_boxes_is_one():
    assert iou([10.0, 20.0, 30.0, 40.0], [10.0, 20.0, 30.0, 40.0]) == pytest.approx(1.0)


def test_iou_disjoint_boxes_is_zero():
    assert iou([0.0, 0.0, 10.0, 10.0], [20.0, 20.0, 5.0, 5.0]) == 0.0
    assert iou([0.0, 0.0, 9.0, 9.0], [10.0, 0.0, 9.0, 9.0]) == 0.0


def test_iou_symmetric_and_bounded():
    a = [0.0, 0.0, 20.0, 20.0]
    b = [5.0, 8.0, 30.0, 10.0]
    value = iou(a, b)
    assert value == pytest.approx(iou(b, a))
    assert 0.0 < value < 1.0


def test_iou_contained_box_smaller_than_one():
    outer = [0.0, 0.0, 100.0, 100.0]
    inner = [10.0, 10.0, 20.0, 20.0]
    assert iou(outer, inner) < iou(outer, [0.0, 0.0, 90.0, 90.0]) < 1.0