"""HTTP API tests: survey, goals, activities, dashboard, recommendations."""

from sqlalchemy.exc import OperationalError

from app.services import ai_service
from app.services.ai_service import AIServiceError

SURVEY = {
    "name": "Sam Rivera",
    "email": "sam@example.com",
    "subjects": ["Graphic Design"],
    "interests": "Branding",
    "skills": "Illustrator",
    "goal": "Land a junior design role",
    "thinking_style": "Flow",
}


def _submit_survey(client, **overrides):
    response = client.post("/api/survey", json={**SURVEY, **overrides})
    assert response.status_code == 201, response.json()
    return response.json()


def _create_goal(client, task, user_id=1):
    response = client.post("/api/goals", json={"task": task, "user_id": user_id})
    assert response.status_code == 201, response.json()
    return response.json()


def test_dashboard_404_before_survey(client):
    response = client.get("/api/dashboard/1")
    assert response.status_code == 404


def test_survey_round_trip(client):
    created = _submit_survey(client, extra_info="Night owl")

    profile = client.get("/api/users/1/profile").json()
    user = client.get("/api/users/1").json()

    assert created["subjects"] == ["Graphic Design"]
    assert profile["subjects"] == ["Graphic Design"]
    assert profile["thinking_style"] == "Flow"
    assert profile["extra_info"] == "Night owl"
    assert user["name"] == "Sam Rivera"
    assert user["has_profile"] is True
    assert user["subjects"] == ["Graphic Design"]


def test_survey_validation(client):
    assert client.post("/api/survey", json={**SURVEY, "thinking_style": "Chaos"}).status_code == 422
    assert client.post("/api/survey", json={**SURVEY, "subjects": []}).status_code == 422
    assert client.post("/api/survey", json={**SURVEY, "email": "not-an-email"}).status_code == 422
    assert client.get("/api/users/1/profile").status_code == 404


def test_unknown_user_is_404(client):
    assert client.get("/api/users/999").status_code == 404


def test_goal_lifecycle_updates_dashboard_progress(client):
    _submit_survey(client)
    goals = [_create_goal(client, f"Portfolio piece {idx}") for idx in range(4)]
    assert all(goal["completed"] is False for goal in goals)

    response = client.patch(f"/api/goals/{goals[0]['id']}", json={"completed": True})
    assert response.status_code == 200
    assert response.json()["completed"] is True
    assert client.get("/api/dashboard/1").json()["user"]["progress"] == 25

    for goal in goals[1:]:
        client.patch(f"/api/goals/{goal['id']}", json={"completed": True})
    assert client.get("/api/users/1").json()["progress"] == 100

    assert client.delete(f"/api/goals/{goals[0]['id']}").status_code == 204
    dashboard = client.get("/api/dashboard/1").json()
    assert len(dashboard["goals"]) == 3
    assert dashboard["user"]["progress"] == 100


def test_goal_validation_and_not_found(client):
    assert client.post("/api/goals", json={"task": "x"}).status_code == 422
    assert client.post("/api/goals", json={"task": "Valid task", "user_id": 999}).status_code == 404
    assert client.patch("/api/goals/999", json={"completed": True}).status_code == 404
    assert client.delete("/api/goals/999").status_code == 404


def test_list_goals_empty(client):
    response = client.get("/api/users/1/goals")
    assert response.status_code == 200
    assert response.json() == []


def test_activities_newest_first(client):
    for title in ["Lesson A", "Badge B", "Course C"]:
        kind = {"L": "lesson", "B": "badge", "C": "course"}[title[0]]
        response = client.post("/api/users/1/activities", json={"type": kind, "title": title})
        assert response.status_code == 201

    activities = client.get("/api/users/1/activities").json()

    assert [a["title"] for a in activities] == ["Course C", "Badge B", "Lesson A"]
    assert all(a["time"] == "Today" and a["is_recent"] for a in activities)


def test_activity_type_validation(client):
    response = client.post("/api/users/1/activities", json={"type": "quiz", "title": "Nope"})
    assert response.status_code == 422


def test_dashboard_composes_everything(client):
    _submit_survey(client)
    _create_goal(client, "Update portfolio site")
    client.post("/api/users/1/activities", json={"type": "badge", "title": "Survey complete"})

    response = client.get("/api/dashboard/1")

    assert response.status_code == 200
    body = response.json()
    assert body["user"] == {"id": 1, "name": "Sam Rivera", "progress": 0}
    assert body["profile"]["goal"] == SURVEY["goal"]
    assert [g["task"] for g in body["goals"]] == ["Update portfolio site"]
    assert [a["title"] for a in body["activities"]] == ["Survey complete"]


def test_goal_suggestions_empty_when_gateway_fails(client, monkeypatch):
    _submit_survey(client)

    def failing_provider(provider, prompt, schema):
        raise AIServiceError("deadline exceeded")

    monkeypatch.setattr(ai_service, "_call_provider", failing_provider)

    response = client.post("/api/users/1/goals/suggestions")

    assert response.status_code == 200
    assert response.json() == {"goals": []}


def test_goal_suggestions_require_profile(client):
    assert client.post("/api/users/1/goals/suggestions").status_code == 404


def test_personalized_recommendations(client, monkeypatch):
    _submit_survey(client)

    def fake_provider(provider, prompt, schema):
        if "video" in prompt:
            return {"title": "Design portfolio tips", "description": "What reviewers look for."}
        raise AIServiceError("course model unavailable")

    monkeypatch.setattr(ai_service, "_call_provider", fake_provider)

    body = client.get("/api/personalized-recommendations/1").json()

    assert body["course"] is None
    assert body["video"]["title"] == "Design portfolio tips"


def test_career_trends_endpoint(client, monkeypatch):
    def fake_provider(provider, prompt, schema):
        assert "Graphic Design" in prompt
        return '{"trends": [{"title": "Motion design", "description": "Up", "url": "https://example.com"}]}'

    monkeypatch.setattr(ai_service, "_call_provider", fake_provider)

    response = client.get("/api/career-trends/Graphic Design")

    assert response.status_code == 200
    assert response.json() == [
        {"id": "1", "title": "Motion design", "description": "Up", "url": "https://example.com", "type": "article"}
    ]


def test_storage_failure_returns_500(client, monkeypatch):
    from app.api import goals

    def broken_list_goals(db, user_id):
        raise OperationalError("SELECT", {}, Exception("disk I/O error"))

    monkeypatch.setattr(goals, "list_goals", broken_list_goals)

    response = client.get("/api/users/1/goals")

    assert response.status_code == 500
    assert response.json() == {"detail": "Storage failure"}


def test_singular_user_path_matches_plural(client):
    _submit_survey(client)

    singular = client.get("/api/user/1")

    assert singular.status_code == 200
    assert singular.json() == client.get("/api/users/1").json()
    assert client.get("/api/user/999").status_code == 404


def test_user_lookup_by_username(client):
    response = client.get("/api/users/by-username/default")

    assert response.status_code == 200
    assert response.json()["id"] == 1
    assert client.get("/api/users/by-username/nobody").status_code == 404


def test_patch_user_updates_profile_fields_not_progress(client):
    response = client.patch(
        "/api/users/1",
        json={"display_name": "Sam R.", "avatar": "https://example.com/sam.png", "progress": 90},
    )

    assert response.status_code == 200
    body = response.json()
    assert body["name"] == "Sam R."
    assert body["avatar"] == "https://example.com/sam.png"
    assert body["progress"] == 0
    assert client.patch("/api/users/1", json={"email": "nope"}).status_code == 422
    assert client.patch("/api/users/999", json={"display_name": "Ghost"}).status_code == 404
