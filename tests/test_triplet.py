from ratekit.triplet import Triplet, make_triplet


def test_make_triplet_fields():
    t = make_triplet(1, "a", 2.5)
    assert t.first == 1
    assert t.second == "a"
    assert t.third == 2.5


def test_equality():
    assert make_triplet(1, 2, 3) == Triplet(1, 2, 3)
    assert make_triplet(1, 2, 3) != Triplet(1, 2, 4)


def test_lexicographic_ordering():
    assert make_triplet(1, 9, 9) < make_triplet(2, 0, 0)
    assert make_triplet(1, 2, 9) < make_triplet(1, 3, 0)
    assert make_triplet(1, 2, 3) < make_triplet(1, 2, 4)
    assert not (make_triplet(1, 2, 3) < make_triplet(1, 2, 3))
    assert make_triplet(1, 2, 3) <= make_triplet(1, 2, 3)
    assert make_triplet(2, 0, 0) > make_triplet(1, 9, 9)
    assert make_triplet(1, 2, 3) >= make_triplet(1, 2, 3)


def test_sorting_orders_by_first_then_second_then_third():
    items = [make_triplet(2, 1, 1), make_triplet(1, 2, 2), make_triplet(1, 2, 1)]
    assert sorted(items) == [items[2], items[1], items[0]]


def test_unpacking():
    first, second, third = make_triplet("x", "y", "z")
    assert (first, second, third) == ("x", "y", "z")