"""
API tests for the Nexus project tracker (single demo user, id 1).
"""

from __future__ import annotations

from datetime import timedelta

import pytest
from fastapi.testclient import TestClient

from protokit.backend.schemas import utcnow
from protokit.backend.sites.projecttracker.storage import HELPER_SOURCE, local_day_bounds


@pytest.fixture
def client(make_client) -> TestClient:
    return make_client("projecttracker")


def _iso(delta: timedelta = timedelta()) -> str:
    return (utcnow() + delta).isoformat()


class TestProjects:
    def test_seeded_project(self, client: TestClient) -> None:
        projects = client.get("/api/projects").json()
        assert [p["name"] for p in projects] == ["Website Redesign"]
        assert projects[0]["color"] == "#3B82F6"
        assert projects[0]["userId"] == 1

    def test_crud(self, client: TestClient) -> None:
        created = client.post("/api/projects", json={"name": "Mobile App"})
        assert created.status_code == 201
        project = created.json()
        assert project["id"] == 2
        assert project["color"] == "#0EA5E9"

        updated = client.put("/api/projects/2", json={"description": "iOS first"}).json()
        assert updated["name"] == "Mobile App"
        assert updated["description"] == "iOS first"

        assert client.delete("/api/projects/2").json() == {"message": "Project deleted successfully"}
        assert client.get("/api/projects/2").status_code == 404
        assert client.delete("/api/projects/2").status_code == 404

    def test_name_required(self, client: TestClient) -> None:
        assert client.post("/api/projects", json={"description": "nameless"}).status_code == 400

    def test_update_missing(self, client: TestClient) -> None:
        assert client.put("/api/projects/42", json={"name": "x"}).status_code == 404


class TestTasks:
    def test_create_and_list(self, client: TestClient) -> None:
        response = client.post("/api/tasks", json={"title": "Wireframes", "projectId": 1, "priority": "high"})
        assert response.status_code == 201
        task = response.json()
        assert task["status"] == "todo"
        assert task["progress"] == 0

        assert [t["title"] for t in client.get("/api/projects/1/tasks").json()] == ["Wireframes"]
        assert [t["id"] for t in client.get("/api/tasks").json()] == [task["id"]]

    def test_owned_tasks_without_project_are_listed(self, client: TestClient) -> None:
        client.post("/api/tasks", json={"title": "Personal", "ownerId": 1})
        client.post("/api/tasks", json={"title": "Someone else's", "ownerId": 2})
        assert [t["title"] for t in client.get("/api/tasks").json()] == ["Personal"]

    def test_validation(self, client: TestClient) -> None:
        assert client.post("/api/tasks", json={"title": "x", "status": "blocked"}).status_code == 400
        assert client.post("/api/tasks", json={"title": "x", "progress": 101}).status_code == 400
        assert client.post("/api/tasks", json={"title": "x", "recurrencePattern": "yearly"}).status_code == 400

    def test_unknown_project(self, client: TestClient) -> None:
        response = client.post("/api/tasks", json={"title": "Orphan", "projectId": 99})
        assert response.status_code == 404
        assert response.json() == {"message": "Project not found"}

    def test_update_and_delete(self, client: TestClient) -> None:
        task = client.post("/api/tasks", json={"title": "Copy", "projectId": 1}).json()

        updated = client.put(f"/api/tasks/{task['id']}", json={"status": "done", "progress": 100}).json()
        assert updated["status"] == "done"
        assert updated["title"] == "Copy"

        assert client.delete(f"/api/tasks/{task['id']}").json() == {"message": "Task deleted successfully"}
        assert client.put(f"/api/tasks/{task['id']}", json={"status": "done"}).status_code == 404


class TestReminders:
    @pytest.fixture(autouse=True)
    def _reminders(self, client: TestClient) -> None:
        start, _ = local_day_bounds()
        client.post("/api/reminders", json={"title": "Today", "dueDate": (start + timedelta(minutes=1)).isoformat()})
        client.post("/api/reminders", json={"title": "Late", "dueDate": _iso(-timedelta(days=3))})
        client.post("/api/reminders", json={"title": "Later", "dueDate": _iso(timedelta(days=3))})
        client.post(
            "/api/reminders",
            json={"title": "Done late", "dueDate": _iso(-timedelta(days=3)), "completed": True},
        )

    def test_all(self, client: TestClient) -> None:
        assert len(client.get("/api/reminders").json()) == 4

    def test_today(self, client: TestClient) -> None:
        today = client.get("/api/reminders", params={"type": "today"}).json()
        assert [r["title"] for r in today] == ["Today"]

    def test_overdue_skips_completed(self, client: TestClient) -> None:
        overdue = client.get("/api/reminders", params={"type": "overdue"}).json()
        assert [r["title"] for r in overdue] == ["Late"]

    def test_unknown_type_lists_all(self, client: TestClient) -> None:
        assert len(client.get("/api/reminders", params={"type": "someday"}).json()) == 4

    def test_complete_and_delete(self, client: TestClient) -> None:
        assert client.put("/api/reminders/2", json={"completed": True}).json()["completed"] is True
        assert client.get("/api/reminders", params={"type": "overdue"}).json() == []
        assert client.delete("/api/reminders/2").status_code == 200
        assert client.delete("/api/reminders/2").status_code == 404

    def test_due_date_required(self, client: TestClient) -> None:
        assert client.post("/api/reminders", json={"title": "When?"}).status_code == 400


class TestAILogs:
    def test_seeded_logs_with_project_badge(self, client: TestClient) -> None:
        logs = client.get("/api/ai-logs").json()
        assert [log["source"] for log in logs] == ["ChatGPT", "GitHub Copilot", "Claude"]
        assert logs[0]["project"] == {"name": "Website Redesign", "color": "#3B82F6"}
        assert logs[2]["project"] is None
        assert logs[0]["metadata"] == {"model": "gpt-4o", "tokens": 156}

    def test_source_filter_is_case_insensitive(self, client: TestClient) -> None:
        assert [log["source"] for log in client.get("/api/ai-logs", params={"source": "chatgpt"}).json()] == ["ChatGPT"]
        assert len(client.get("/api/ai-logs", params={"source": "all"}).json()) == 3

    def test_project_filter(self, client: TestClient) -> None:
        assert len(client.get("/api/ai-logs", params={"projectId": 1}).json()) == 2

    def test_create_patch_delete(self, client: TestClient) -> None:
        created = client.post("/api/ai-logs", json={"source": "Gemini", "content": "Use a CDN."})
        assert created.status_code == 201
        log_id = created.json()["id"]

        patched = client.patch(f"/api/ai-logs/{log_id}", json={"taskCreated": True}).json()
        assert patched["taskCreated"] is True
        assert patched["content"] == "Use a CDN."

        assert client.delete(f"/api/ai-logs/{log_id}").status_code == 200
        assert client.patch(f"/api/ai-logs/{log_id}", json={"taskCreated": False}).status_code == 404


class TestAIRoutes:
    def test_save_plan(self, client: TestClient) -> None:
        plan = {"title": "Launch", "phases": ["design", "build"]}
        response = client.post("/api/ai/save-plan", json={"userId": 1, "plan": plan})
        assert response.status_code == 200
        body = response.json()
        assert body["success"] is True
        assert body["message"] == "Project plan saved successfully"

        planner = client.get("/api/ai-logs", params={"source": "project_planner"}).json()
        assert planner[0]["id"] == body["savedId"]
        assert planner[0]["prompt"] == "Project Plan: Launch"

    def test_save_plan_requires_fields(self, client: TestClient) -> None:
        assert client.post("/api/ai/save-plan", json={"userId": 1}).status_code == 400
        assert client.post("/api/ai/save-plan", json={"plan": {}}).status_code == 400

    def test_helper_history_oldest_first(self, client: TestClient) -> None:
        for prompt in ("first?", "second?"):
            client.post("/api/ai-logs", json={"source": HELPER_SOURCE, "prompt": prompt, "content": "answer"})

        history = client.get("/api/ai/history").json()
        assert [h["prompt"] for h in history] == ["first?", "second?"]
        assert history[0]["answer"] == "answer"

    def test_prompts_search_and_project_filter(self, client: TestClient) -> None:
        storage = client.app.state.storage
        storage.create_ai_prompt({"prompt": "Plan the sprint", "response": "Two weeks", "user_id": 1, "project_id": 1})
        storage.create_ai_prompt({"prompt": "Name ideas", "response": "Nexus", "user_id": 1})

        assert len(client.get("/api/ai/prompts").json()) == 2
        assert [p["prompt"] for p in client.get("/api/ai/prompts", params={"projectId": 1}).json()] == [
            "Plan the sprint"
        ]
        assert [p["prompt"] for p in client.get("/api/ai/prompts", params={"search": "NEXUS"}).json()] == [
            "Name ideas"
        ]
