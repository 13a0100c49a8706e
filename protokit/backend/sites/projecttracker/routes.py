"""Project tracker API route handlers.

There is no login: every request acts as the demo user (id 1).
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Query

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.schemas import MessageOut
from protokit.backend.sites.projecttracker.schemas import (
    AILog,
    AILogIn,
    AILogOut,
    AILogPatch,
    AIPrompt,
    HistoryItem,
    Project,
    ProjectIn,
    ProjectPatch,
    Reminder,
    ReminderIn,
    ReminderPatch,
    SavedPlanOut,
    SavePlanIn,
    Task,
    TaskIn,
    TaskPatch,
)
from protokit.backend.sites.projecttracker.storage import ProjectTrackerStorage

MOCK_USER_ID = 1

router = APIRouter()

# ── Projects ───────────────────────────────────────────────────────────────


@router.get("/projects", response_model=list[Project])
def list_projects(storage: ProjectTrackerStorage = Depends(site_storage)) -> list[Project]:
    with failure_message("Failed to fetch projects"):
        return storage.get_projects_by_user_id(MOCK_USER_ID)


@router.post("/projects", response_model=Project, status_code=201)
def create_project(project: ProjectIn, storage: ProjectTrackerStorage = Depends(site_storage)) -> Project:
    with failure_message("Failed to create project"):
        return storage.create_project(MOCK_USER_ID, project)


@router.get("/projects/{project_id}", response_model=Project)
def get_project(project_id: int, storage: ProjectTrackerStorage = Depends(site_storage)) -> Project:
    with failure_message("Failed to fetch project"):
        project = storage.get_project(project_id)
        if project is None:
            raise not_found("Project")
        return project


@router.put("/projects/{project_id}", response_model=Project)
def update_project(
    project_id: int,
    changes: ProjectPatch,
    storage: ProjectTrackerStorage = Depends(site_storage),
) -> Project:
    with failure_message("Failed to update project"):
        project = storage.update_project(project_id, changes)
        if project is None:
            raise not_found("Project")
        return project


@router.delete("/projects/{project_id}", response_model=MessageOut)
def delete_project(project_id: int, storage: ProjectTrackerStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to delete project"):
        if not storage.delete_project(project_id):
            raise not_found("Project")
        return MessageOut(message="Project deleted successfully")


# ── Tasks ──────────────────────────────────────────────────────────────────


@router.get("/projects/{project_id}/tasks", response_model=list[Task])
def project_tasks(project_id: int, storage: ProjectTrackerStorage = Depends(site_storage)) -> list[Task]:
    with failure_message("Failed to fetch tasks"):
        return storage.get_tasks_by_project_id(project_id)


@router.get("/tasks", response_model=list[Task])
def list_tasks(storage: ProjectTrackerStorage = Depends(site_storage)) -> list[Task]:
    with failure_message("Failed to fetch tasks"):
        return storage.get_tasks_by_user_id(MOCK_USER_ID)


@router.post("/tasks", response_model=Task, status_code=201)
def create_task(task: TaskIn, storage: ProjectTrackerStorage = Depends(site_storage)) -> Task:
    with failure_message("Failed to create task"):
        if task.project_id is not None and storage.get_project(task.project_id) is None:
            raise not_found("Project")
        return storage.create_task(task)


@router.put("/tasks/{task_id}", response_model=Task)
def update_task(task_id: int, changes: TaskPatch, storage: ProjectTrackerStorage = Depends(site_storage)) -> Task:
    with failure_message("Failed to update task"):
        task = storage.update_task(task_id, changes)
        if task is None:
            raise not_found("Task")
        return task


@router.delete("/tasks/{task_id}", response_model=MessageOut)
def delete_task(task_id: int, storage: ProjectTrackerStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to delete task"):
        if not storage.delete_task(task_id):
            raise not_found("Task")
        return MessageOut(message="Task deleted successfully")


# ── Reminders ──────────────────────────────────────────────────────────────


@router.get("/reminders", response_model=list[Reminder])
def list_reminders(
    kind: str | None = Query(default=None, alias="type"),
    storage: ProjectTrackerStorage = Depends(site_storage),
) -> list[Reminder]:
    with failure_message("Failed to fetch reminders"):
        if kind == "today":
            return storage.get_today_reminders(MOCK_USER_ID)
        if kind == "overdue":
            return storage.get_overdue_reminders(MOCK_USER_ID)
        return storage.get_reminders_by_user_id(MOCK_USER_ID)


@router.post("/reminders", response_model=Reminder, status_code=201)
def create_reminder(reminder: ReminderIn, storage: ProjectTrackerStorage = Depends(site_storage)) -> Reminder:
    with failure_message("Failed to create reminder"):
        return storage.create_reminder(MOCK_USER_ID, reminder)


@router.put("/reminders/{reminder_id}", response_model=Reminder)
def update_reminder(
    reminder_id: int,
    changes: ReminderPatch,
    storage: ProjectTrackerStorage = Depends(site_storage),
) -> Reminder:
    with failure_message("Failed to update reminder"):
        reminder = storage.update_reminder(reminder_id, changes)
        if reminder is None:
            raise not_found("Reminder")
        return reminder


@router.delete("/reminders/{reminder_id}", response_model=MessageOut)
def delete_reminder(reminder_id: int, storage: ProjectTrackerStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to delete reminder"):
        if not storage.delete_reminder(reminder_id):
            raise not_found("Reminder")
        return MessageOut(message="Reminder deleted successfully")


# ── AI logs ────────────────────────────────────────────────────────────────


@router.get("/ai-logs", response_model=list[AILogOut])
def list_ai_logs(
    source: str | None = None,
    project_id: int | None = Query(default=None, alias="projectId"),
    storage: ProjectTrackerStorage = Depends(site_storage),
) -> list[AILogOut]:
    with failure_message("Failed to fetch AI logs"):
        return storage.list_ai_logs(MOCK_USER_ID, source, project_id)


@router.post("/ai-logs", response_model=AILog, status_code=201)
def create_ai_log(log: AILogIn, storage: ProjectTrackerStorage = Depends(site_storage)) -> AILog:
    with failure_message("Failed to create AI log"):
        return storage.create_ai_log(MOCK_USER_ID, log)


@router.patch("/ai-logs/{log_id}", response_model=AILog)
def update_ai_log(log_id: int, changes: AILogPatch, storage: ProjectTrackerStorage = Depends(site_storage)) -> AILog:
    with failure_message("Failed to update AI log"):
        log = storage.update_ai_log(log_id, changes)
        if log is None:
            raise not_found("AI log")
        return log


@router.delete("/ai-logs/{log_id}", response_model=MessageOut)
def delete_ai_log(log_id: int, storage: ProjectTrackerStorage = Depends(site_storage)) -> MessageOut:
    with failure_message("Failed to delete AI log"):
        if not storage.delete_ai_log(log_id):
            raise not_found("AI log")
        return MessageOut(message="AI log deleted successfully")


# ── AI prompts & plans ─────────────────────────────────────────────────────


@router.get("/ai/prompts", response_model=list[AIPrompt])
def list_ai_prompts(
    project_id: int | None = Query(default=None, alias="projectId"),
    search: str | None = None,
    storage: ProjectTrackerStorage = Depends(site_storage),
) -> list[AIPrompt]:
    """Search wins over the project filter, which wins over the full list."""
    with failure_message("Failed to fetch AI prompts"):
        if search:
            return storage.search_ai_prompts(MOCK_USER_ID, search)
        if project_id is not None:
            return storage.get_ai_prompts_by_project_id(project_id)
        return storage.get_ai_prompts_by_user_id(MOCK_USER_ID)


@router.post("/ai/save-plan", response_model=SavedPlanOut)
def save_plan(body: SavePlanIn, storage: ProjectTrackerStorage = Depends(site_storage)) -> SavedPlanOut:
    with failure_message("Failed to save project plan"):
        log = storage.save_plan(body.user_id, body.plan)
        return SavedPlanOut(saved_id=log.id)


@router.get("/ai/history", response_model=list[HistoryItem])
def ai_history(storage: ProjectTrackerStorage = Depends(site_storage)) -> list[HistoryItem]:
    with failure_message("Failed to fetch AI history"):
        return storage.get_helper_history(MOCK_USER_ID)
