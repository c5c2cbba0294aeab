from coinage.domain.monetary.ordering import PartialOrdering, WeakOrdering


def test_partial_ordering_predicates():
    assert PartialOrdering.EQUIVALENT.is_eq
    assert PartialOrdering.EQUIVALENT.is_lteq and PartialOrdering.EQUIVALENT.is_gteq
    assert PartialOrdering.LESS.is_lt and PartialOrdering.LESS.is_lteq
    assert PartialOrdering.GREATER.is_gt and PartialOrdering.GREATER.is_gteq

    unordered = PartialOrdering.UNORDERED
    assert not (unordered.is_eq or unordered.is_lt or unordered.is_lteq or unordered.is_gt or unordered.is_gteq)


def test_weak_ordering_of_integers():
    assert WeakOrdering.of(1, 2) == WeakOrdering.LESS
    assert WeakOrdering.of(2, 2) == WeakOrdering.EQUIVALENT
    assert WeakOrdering.of(3, 2) == WeakOrdering.GREATER


def test_weak_ordering_predicates():
    assert WeakOrdering.LESS.is_lt and WeakOrdering.LESS.is_lteq and not WeakOrdering.LESS.is_gteq
    assert WeakOrdering.EQUIVALENT.is_eq and WeakOrdering.EQUIVALENT.is_lteq and WeakOrdering.EQUIVALENT.is_gteq
    assert WeakOrdering.GREATER.is_gt and WeakOrdering.GREATER.is_gteq and not WeakOrdering.GREATER.is_lteq
