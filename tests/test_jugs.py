import pytest

from jugsearch.core.errors import InvalidProblemError
from jugsearch.problems.jugs import Empty, Fill, Jugs, JugsProblem, L, Pour, R, jugs_problem


@pytest.fixture
def jugs():
    return JugsProblem(capacities=(3, 5), target=1)


def test_can_do_fill(jugs):
    assert jugs.action_is_possible((1, 0), Fill(L))
    assert jugs.action_is_possible((1, 0), Fill(R))
    assert jugs.action_is_possible((0, 1), Fill(L))
    assert jugs.action_is_possible((0, 1), Fill(R))

    assert not jugs.action_is_possible((3, 0), Fill(L))
    assert not jugs.action_is_possible((0, 5), Fill(R))


def test_can_do_empty(jugs):
    assert jugs.action_is_possible((1, 0), Empty(L))
    assert jugs.action_is_possible((0, 1), Empty(R))

    assert not jugs.action_is_possible((0, 0), Empty(L))
    assert not jugs.action_is_possible((0, 0), Empty(R))
    assert not jugs.action_is_possible((0, 2), Empty(L))
    assert not jugs.action_is_possible((2, 0), Empty(R))


def test_can_do_pour(jugs):
    assert jugs.action_is_possible((3, 0), Pour(L, R))
    assert jugs.action_is_possible((0, 5), Pour(R, L))
    assert jugs.action_is_possible((3, 4), Pour(L, R))
    assert jugs.action_is_possible((2, 5), Pour(R, L))

    # destination full
    assert not jugs.action_is_possible((3, 5), Pour(L, R))
    assert not jugs.action_is_possible((3, 5), Pour(R, L))
    # source empty
    assert not jugs.action_is_possible((0, 0), Pour(L, R))
    assert not jugs.action_is_possible((0, 0), Pour(R, L))
    assert not jugs.action_is_possible((0, 1), Pour(L, R))
    assert not jugs.action_is_possible((1, 0), Pour(R, L))


def test_pour_into_same_jug_never_possible(jugs):
    assert not jugs.action_is_possible((2, 2), Pour(L, L))
    assert not jugs.action_is_possible((2, 2), Pour(R, R))


def test_after_fill(jugs):
    assert jugs.apply_action((1, 0), Fill(L)) == (3, 0)
    assert jugs.apply_action((1, 0), Fill(R)) == (1, 5)
    assert jugs.apply_action((0, 1), Fill(L)) == (3, 1)
    assert jugs.apply_action((0, 1), Fill(R)) == (0, 5)


def test_after_empty(jugs):
    assert jugs.apply_action((1, 0), Empty(L)) == (0, 0)
    assert jugs.apply_action((0, 1), Empty(R)) == (0, 0)


def test_after_pour(jugs):
    assert jugs.apply_action((3, 0), Pour(L, R)) == (0, 3)
    assert jugs.apply_action((0, 5), Pour(R, L)) == (3, 2)
    assert jugs.apply_action((3, 4), Pour(L, R)) == (2, 5)
    assert jugs.apply_action((2, 5), Pour(R, L)) == (3, 4)


def test_goal_state(jugs):
    assert jugs.is_goal((1, 0))
    assert jugs.is_goal((0, 1))
    assert jugs.is_goal((1, 2))
    assert jugs.is_goal((2, 1))
    assert not jugs.is_goal((2, 2))
    assert not jugs.is_goal((10, 3))


def test_expand_follows_action_order(jugs):
    assert jugs.expand((0, 0)) == [(3, 0), (0, 5)]
    assert jugs.expand((3, 0)) == [(3, 5), (0, 0), (0, 3)]
    assert all(isinstance(s, Jugs) for s in jugs.expand((2, 2)))


def test_actions_between_recovers_moves(jugs):
    path = [(0, 0), (3, 0), (0, 3), (3, 3), (1, 5)]
    assert jugs.actions_between(path) == [Fill(L), Pour(L, R), Fill(L), Pour(L, R)]
    with pytest.raises(InvalidProblemError):
        jugs.actions_between([(0, 0), (2, 2)])


@pytest.mark.parametrize("kwargs", [
    {"capacities": (0, 5)},
    {"capacities": (3, -1)},
    {"capacities": (3, 5, 7)},
    {"target": -1},
    {"start": (4, 0)},
])
def test_invalid_problem_rejected(kwargs):
    with pytest.raises(InvalidProblemError):
        JugsProblem(**kwargs)


def test_factory_defaults():
    p = jugs_problem()
    assert p.capacities == (3, 5)
    assert p.target == 1
    assert p.initial_state() == (0, 0)
