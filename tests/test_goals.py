"""Goal store tests: completion flips drive the cached progress."""

import pytest
from sqlalchemy.exc import OperationalError

from app.models.goal import Goal
from app.models.user import User
from app.services import goal_service
from app.services.goal_service import create_goal, delete_goal, list_goals, set_goal_completed


def _progress(db, user_id):
    db.expire_all()
    return db.get(User, user_id).progress


def test_create_goal_starts_incomplete(db, make_user):
    make_user(7)
    goal = create_goal(db, 7, "Research two companies hiring analysts")

    assert goal.id is not None
    assert goal.completed is False
    assert goal.user_id == 7


def test_create_goal_for_unknown_user_returns_none(db):
    assert create_goal(db, 999, "Nobody owns this") is None


def test_list_goals_in_storage_order(db, make_user):
    make_user(7)
    tasks = ["first", "second", "third"]
    for task in tasks:
        create_goal(db, 7, task)

    assert [goal.task for goal in list_goals(db, 7)] == tasks


def test_list_goals_empty_for_user_without_goals(db, make_user):
    make_user(7)
    assert list_goals(db, 7) == []


def test_scenarios_complete_then_delete(db, make_user):
    """4 goals, 1 done -> 25; all done -> 100; delete a done goal -> still 100."""
    make_user(7)
    goals = [create_goal(db, 7, f"goal {idx}") for idx in range(4)]
    assert _progress(db, 7) == 0

    set_goal_completed(db, goals[0].id, True)
    assert _progress(db, 7) == 25

    for goal in goals[1:]:
        set_goal_completed(db, goal.id, True)
    assert _progress(db, 7) == 100

    assert delete_goal(db, goals[0].id) is True
    assert len(list_goals(db, 7)) == 3
    assert _progress(db, 7) == 100


def test_delete_incomplete_goal_recomputes_progress(db, make_user):
    make_user(7)
    done = create_goal(db, 7, "done")
    pending = create_goal(db, 7, "pending")
    set_goal_completed(db, done.id, True)
    assert _progress(db, 7) == 50

    delete_goal(db, pending.id)

    assert _progress(db, 7) == 100


def test_set_completed_is_idempotent(db, make_user):
    make_user(7)
    goals = [create_goal(db, 7, f"goal {idx}") for idx in range(3)]

    first = set_goal_completed(db, goals[0].id, True)
    progress_once = _progress(db, 7)
    second = set_goal_completed(db, goals[0].id, True)

    assert first.completed is True
    assert second.completed is True
    assert _progress(db, 7) == progress_once == 33


def test_goal_can_toggle_back_to_active(db, make_user):
    make_user(7)
    goal = create_goal(db, 7, "toggle me")

    set_goal_completed(db, goal.id, True)
    updated = set_goal_completed(db, goal.id, False)

    assert updated.completed is False
    assert _progress(db, 7) == 0


def test_adding_goal_dilutes_progress(db, make_user):
    make_user(7)
    goal = create_goal(db, 7, "done")
    set_goal_completed(db, goal.id, True)
    assert _progress(db, 7) == 100

    create_goal(db, 7, "new")

    assert _progress(db, 7) == 50


def test_missing_goal_is_not_found(db, make_user):
    make_user(7)
    assert set_goal_completed(db, 12345, True) is None
    assert delete_goal(db, 12345) is False


def _fail_progress_update(monkeypatch):
    def broken_recalculate(db, user_id):
        raise OperationalError("UPDATE users SET progress", {}, Exception("database is locked"))

    monkeypatch.setattr(goal_service, "recalculate_user_progress", broken_recalculate)


def test_failed_progress_update_rolls_back_completion(db, make_user, monkeypatch):
    make_user(7)
    goals = [create_goal(db, 7, f"goal {idx}") for idx in range(2)]
    set_goal_completed(db, goals[0].id, True)
    assert _progress(db, 7) == 50
    _fail_progress_update(monkeypatch)

    with pytest.raises(OperationalError):
        set_goal_completed(db, goals[1].id, True)

    db.expire_all()
    assert db.get(Goal, goals[1].id).completed is False
    assert _progress(db, 7) == 50


def test_failed_progress_update_keeps_deleted_goal(db, make_user, monkeypatch):
    make_user(7)
    goal = create_goal(db, 7, "keep me")
    goal_id = goal.id
    _fail_progress_update(monkeypatch)

    with pytest.raises(OperationalError):
        delete_goal(db, goal_id)

    db.expire_all()
    assert db.get(Goal, goal_id) is not None
    assert [g.task for g in list_goals(db, 7)] == ["keep me"]


def test_failed_progress_update_discards_new_goal(db, make_user, monkeypatch):
    make_user(7)
    _fail_progress_update(monkeypatch)

    with pytest.raises(OperationalError):
        create_goal(db, 7, "never stored")

    assert list_goals(db, 7) == []
