"""Storage interface for the project tracker."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from typing import Any

from pydantic import BaseModel

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.schemas import utcnow
from protokit.backend.sites.projecttracker.schemas import (
    AILog,
    AILogIn,
    AILogOut,
    AIPrompt,
    HistoryItem,
    Project,
    ProjectBadge,
    ProjectIn,
    Reminder,
    ReminderIn,
    Task,
    TaskIn,
    User,
)

PLANNER_SOURCE = "project_planner"
HELPER_SOURCE = "ai-helper"


def _values(data: BaseModel | dict[str, Any], *, partial: bool = False) -> dict[str, Any]:
    if isinstance(data, BaseModel):
        return data.model_dump(exclude_unset=partial)
    return dict(data)


def local_day_bounds(now: datetime | None = None) -> tuple[datetime, datetime]:
    """Start and end of the current local day, as naive UTC datetimes."""
    local_now = (now or datetime.now()).astimezone()
    start = local_now.replace(hour=0, minute=0, second=0, microsecond=0)
    end = start + timedelta(days=1)
    return (
        start.astimezone(timezone.utc).replace(tzinfo=None),
        end.astimezone(timezone.utc).replace(tzinfo=None),
    )


class ProjectTrackerStorage(SiteStorage):
    collections = {
        "users": User,
        "projects": Project,
        "tasks": Task,
        "ai_prompts": AIPrompt,
        "reminders": Reminder,
        "ai_logs": AILog,
    }

    users: Collection[User]
    projects: Collection[Project]
    tasks: Collection[Task]
    ai_prompts: Collection[AIPrompt]
    reminders: Collection[Reminder]
    ai_logs: Collection[AILog]

    # ── Users ──────────────────────────────────────────────────────────────

    def create_user(self, values: dict[str, Any]) -> User:
        return self.users.insert(values)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    # ── Projects ───────────────────────────────────────────────────────────

    def get_project(self, project_id: int) -> Project | None:
        return self.projects.get(project_id)

    def get_projects_by_user_id(self, user_id: int) -> list[Project]:
        return self.projects.where(user_id=user_id)

    def create_project(self, user_id: int, project: ProjectIn | dict[str, Any]) -> Project:
        return self.projects.insert({**_values(project), "user_id": user_id})

    def update_project(self, project_id: int, changes: BaseModel | dict[str, Any]) -> Project | None:
        return self.projects.update(project_id, {**_values(changes, partial=True), "updated_at": utcnow()})

    def delete_project(self, project_id: int) -> bool:
        return self.projects.delete(project_id)

    # ── Tasks ──────────────────────────────────────────────────────────────

    def get_task(self, task_id: int) -> Task | None:
        return self.tasks.get(task_id)

    def get_tasks_by_project_id(self, project_id: int) -> list[Task]:
        return self.tasks.where(project_id=project_id)

    def get_tasks_by_user_id(self, user_id: int) -> list[Task]:
        """Tasks in the user's projects plus tasks the user owns."""
        project_ids = {p.id for p in self.get_projects_by_user_id(user_id)}
        return self.tasks.filter(lambda t: t.project_id in project_ids or t.owner_id == user_id)

    def create_task(self, task: TaskIn | dict[str, Any]) -> Task:
        return self.tasks.insert(task)

    def update_task(self, task_id: int, changes: BaseModel | dict[str, Any]) -> Task | None:
        return self.tasks.update(task_id, {**_values(changes, partial=True), "updated_at": utcnow()})

    def delete_task(self, task_id: int) -> bool:
        return self.tasks.delete(task_id)

    # ── AI prompts ─────────────────────────────────────────────────────────

    def create_ai_prompt(self, values: dict[str, Any]) -> AIPrompt:
        return self.ai_prompts.insert(values)

    def get_ai_prompts_by_user_id(self, user_id: int) -> list[AIPrompt]:
        return self.ai_prompts.where(user_id=user_id)

    def get_ai_prompts_by_project_id(self, project_id: int) -> list[AIPrompt]:
        return self.ai_prompts.where(project_id=project_id)

    def search_ai_prompts(self, user_id: int, query: str) -> list[AIPrompt]:
        needle = query.lower()
        return [
            p for p in self.get_ai_prompts_by_user_id(user_id)
            if needle in p.prompt.lower() or needle in p.response.lower()
        ]

    # ── Reminders ──────────────────────────────────────────────────────────

    def get_reminders_by_user_id(self, user_id: int) -> list[Reminder]:
        return self.reminders.where(user_id=user_id)

    def get_today_reminders(self, user_id: int, now: datetime | None = None) -> list[Reminder]:
        start, end = local_day_bounds(now)
        return [
            r for r in self.reminders.where(user_id=user_id, completed=False)
            if start <= r.due_date < end
        ]

    def get_overdue_reminders(self, user_id: int, now: datetime | None = None) -> list[Reminder]:
        start, _ = local_day_bounds(now)
        return [r for r in self.reminders.where(user_id=user_id, completed=False) if r.due_date < start]

    def create_reminder(self, user_id: int, reminder: ReminderIn | dict[str, Any]) -> Reminder:
        return self.reminders.insert({**_values(reminder), "user_id": user_id})

    def update_reminder(self, reminder_id: int, changes: BaseModel | dict[str, Any]) -> Reminder | None:
        return self.reminders.update(reminder_id, _values(changes, partial=True))

    def delete_reminder(self, reminder_id: int) -> bool:
        return self.reminders.delete(reminder_id)

    # ── AI logs ────────────────────────────────────────────────────────────

    def get_ai_logs_by_user_id(self, user_id: int) -> list[AILog]:
        return self.ai_logs.where(user_id=user_id)

    def list_ai_logs(
        self,
        user_id: int,
        source: str | None = None,
        project_id: int | None = None,
    ) -> list[AILogOut]:
        """
        The user's AI logs, each with its project's name and colour.

        ``source`` is compared case-insensitively; ``"all"`` disables it.
        """
        logs = self.get_ai_logs_by_user_id(user_id)
        if source and source.lower() != "all":
            logs = [log for log in logs if log.source.lower() == source.lower()]
        if project_id is not None:
            logs = [log for log in logs if log.project_id == project_id]

        enriched = []
        for log in logs:
            project = self.projects.get(log.project_id) if log.project_id else None
            badge = ProjectBadge(name=project.name, color=project.color) if project else None
            enriched.append(AILogOut(**log.model_dump(), project=badge))
        return enriched

    def create_ai_log(self, user_id: int, log: AILogIn | dict[str, Any]) -> AILog:
        return self.ai_logs.insert({**_values(log), "user_id": user_id})

    def update_ai_log(self, log_id: int, changes: BaseModel | dict[str, Any]) -> AILog | None:
        return self.ai_logs.update(log_id, _values(changes, partial=True))

    def delete_ai_log(self, log_id: int) -> bool:
        return self.ai_logs.delete(log_id)

    def save_plan(self, user_id: int, plan: dict[str, Any]) -> AILog:
        """Store a generated project plan as a planner log."""
        return self.create_ai_log(user_id, {
            "prompt": f"Project Plan: {plan.get('title', 'Untitled')}",
            "content": json.dumps(plan),
            "source": PLANNER_SOURCE,
            "project_id": None,
        })

    def get_helper_history(self, user_id: int) -> list[HistoryItem]:
        helper_logs = [log for log in self.get_ai_logs_by_user_id(user_id) if log.source == HELPER_SOURCE]
        helper_logs.sort(key=lambda log: log.created_at)
        return [
            HistoryItem(prompt=log.prompt, answer=log.content, timestamp=log.created_at)
            for log in helper_logs
        ]
