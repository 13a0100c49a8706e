"""Pydantic schemas for the Nexus project tracker."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from protokit.backend.schemas import Record, Schema, utcnow

TaskStatus = Literal["todo", "in_progress", "done", "pending"]
TaskPriority = Literal["low", "medium", "high"]
Recurrence = Literal["daily", "weekly", "monthly"]

# ── Request models ──────────────────────────────────────────────────────────


class ProjectIn(Schema):
    name: str = Field(min_length=1)
    description: str | None = None
    color: str = "#0EA5E9"


class ProjectPatch(Schema):
    name: str | None = Field(default=None, min_length=1)
    description: str | None = None
    color: str | None = None


class TaskIn(Schema):
    title: str = Field(min_length=1)
    description: str | None = None
    status: TaskStatus = "todo"
    priority: TaskPriority = "medium"
    due_date: datetime | None = None
    project_id: int | None = None
    assignee_id: int | None = None
    owner_id: int | None = None
    progress: int = Field(default=0, ge=0, le=100)
    is_recurring: bool = False
    recurrence_pattern: Recurrence | None = None


class TaskPatch(Schema):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    status: TaskStatus | None = None
    priority: TaskPriority | None = None
    due_date: datetime | None = None
    project_id: int | None = None
    assignee_id: int | None = None
    owner_id: int | None = None
    progress: int | None = Field(default=None, ge=0, le=100)
    is_recurring: bool | None = None
    recurrence_pattern: Recurrence | None = None


class ReminderIn(Schema):
    title: str = Field(min_length=1)
    description: str | None = None
    due_date: datetime
    completed: bool = False
    task_id: int | None = None
    project_id: int | None = None


class ReminderPatch(Schema):
    title: str | None = Field(default=None, min_length=1)
    description: str | None = None
    due_date: datetime | None = None
    completed: bool | None = None
    task_id: int | None = None
    project_id: int | None = None


class AILogIn(Schema):
    project_id: int | None = None
    source: str = Field(min_length=1)
    content: str
    prompt: str | None = None
    task_created: bool = False
    task_id: int | None = None
    metadata: dict[str, Any] | None = None


class AILogPatch(Schema):
    project_id: int | None = None
    source: str | None = Field(default=None, min_length=1)
    content: str | None = None
    prompt: str | None = None
    task_created: bool | None = None
    task_id: int | None = None
    metadata: dict[str, Any] | None = None


class SavePlanIn(Schema):
    user_id: int
    plan: dict[str, Any]
    saved_at: datetime | None = None


# ── Stored records ──────────────────────────────────────────────────────────


class User(Record):
    username: str
    email: str
    password: str
    plan: str = "free"
    subscription_status: str | None = None
    plan_expires_at: datetime | None = None
    created_at: datetime = Field(default_factory=utcnow)


class Project(ProjectIn, Record):
    user_id: int
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class Task(TaskIn, Record):
    created_at: datetime = Field(default_factory=utcnow)
    updated_at: datetime = Field(default_factory=utcnow)


class AIPrompt(Record):
    prompt: str
    response: str
    context: str = "project"
    project_id: int | None = None
    task_id: int | None = None
    user_id: int
    created_at: datetime = Field(default_factory=utcnow)


class Reminder(ReminderIn, Record):
    user_id: int
    created_at: datetime = Field(default_factory=utcnow)


class AILog(AILogIn, Record):
    user_id: int
    created_at: datetime = Field(default_factory=utcnow)


# ── Response models ─────────────────────────────────────────────────────────


class ProjectBadge(Schema):
    name: str
    color: str


class AILogOut(AILog):
    project: ProjectBadge | None = None


class HistoryItem(Schema):
    prompt: str | None = None
    answer: str
    timestamp: datetime


class SavedPlanOut(Schema):
    success: bool = True
    saved_id: int
    message: str = "Project plan saved successfully"
