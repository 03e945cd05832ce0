import pytest

from dstructs.float_vector import FloatVector, VectorFullError


def vector_with(*values, capacity):
    vec = FloatVector(capacity)
    for value in values:
        vec.append(value)
    return vec


def test_new_vector_is_empty_with_capacity():
    vec = FloatVector(3)
    assert (len(vec), vec.capacity) == (0, 3)


def test_append_and_at():
    vec = vector_with(5.0, 2.25, capacity=2)
    assert len(vec) == 2
    assert [vec.at(0), vec.at(1)] == [5.0, 2.25]


@pytest.mark.parametrize("stored, capacity", [((1.5,), 1), ((), 0)])
def test_append_when_full_raises(stored, capacity):
    vec = vector_with(*stored, capacity=capacity)
    with pytest.raises(VectorFullError):
        vec.append(2.5)
    assert len(vec) == len(stored)


def test_negative_capacity_rejected():
    with pytest.raises(ValueError):
        FloatVector(-1)


@pytest.mark.parametrize(
    "operation",
    [
        pytest.param(lambda vec: vec.at(-1), id="at-negative"),
        pytest.param(lambda vec: vec.at(1), id="at-unused"),
        pytest.param(lambda vec: vec.at(5), id="at-beyond"),
        pytest.param(lambda vec: vec.get(4), id="get-beyond-capacity"),
        pytest.param(lambda vec: vec.set(1, 2.0), id="set-unused"),
    ],
)
def test_out_of_bounds_raises(operation):
    with pytest.raises(IndexError):
        operation(vector_with(1.0, capacity=4))


def test_get_reads_unused_slots_as_zero():
    vec = vector_with(7.5, capacity=3)
    assert (vec.get(0), vec.get(2)) == (7.5, 0.0)


def test_set_replaces_value():
    vec = vector_with(1.0, capacity=2)
    vec.set(0, 3.5)
    assert vec.at(0) == 3.5


def test_values_are_single_precision():
    stored = vector_with(0.1, capacity=1).at(0)
    assert abs(stored - 0.1) < 1e-7
    assert stored != 0.1


def test_render_lists_every_slot():
    assert vector_with(5.0, capacity=2).render() == (
        "========================\n"
        "Size: 1\n"
        "Capacity: 2\n"
        "-----------\n"
        "[0] = 5.00\n"
        "[1] = 0.00\n"
        "========================\n"
    )