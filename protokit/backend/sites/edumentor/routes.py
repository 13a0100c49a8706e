"""EduMentor API route handlers.

Learner-scoped routes take the user id from the path, as the dashboard
client calls them.
"""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query

from protokit.backend.api.deps import site_storage
from protokit.backend.api.errors import failure_message, not_found
from protokit.backend.sites.edumentor.schemas import (
    AccountOut,
    Activity,
    Course,
    CourseDetailOut,
    CourseProgressOut,
    Instructor,
    LoginIn,
    ProgressIn,
    QuizAttempt,
    QuizAttemptIn,
    QuizQuestion,
    RegisterIn,
    Subject,
    UserInstructor,
    UserInstructorIn,
    UserInstructorOut,
    UserProgress,
)
from protokit.backend.sites.edumentor.storage import DEFAULT_ACTIVITY_LIMIT, EduMentorStorage

logger = logging.getLogger(__name__)

router = APIRouter()


# ── Accounts ───────────────────────────────────────────────────────────────


@router.post("/auth/register", response_model=AccountOut, status_code=201)
def register(account: RegisterIn, storage: EduMentorStorage = Depends(site_storage)) -> AccountOut:
    with failure_message("Failed to register user"):
        try:
            user = storage.register_user(account)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return AccountOut.model_validate(user)


@router.post("/auth/login", response_model=AccountOut)
def login(credentials: LoginIn, storage: EduMentorStorage = Depends(site_storage)) -> AccountOut:
    with failure_message("Login failed"):
        user = storage.authenticate(credentials.username, credentials.password)
        if user is None:
            raise HTTPException(status_code=401, detail="Invalid credentials")
        return AccountOut.model_validate(user)


# ── Subjects & courses ─────────────────────────────────────────────────────


@router.get("/subjects", response_model=list[Subject])
def list_subjects(storage: EduMentorStorage = Depends(site_storage)) -> list[Subject]:
    with failure_message("Failed to fetch subjects"):
        return storage.get_subjects()


@router.get("/courses", response_model=list[Course])
def list_courses(
    subject_id: int | None = Query(default=None, alias="subjectId"),
    storage: EduMentorStorage = Depends(site_storage),
) -> list[Course]:
    with failure_message("Failed to fetch courses"):
        return storage.get_courses(subject_id)


@router.get("/courses/{course_id}", response_model=CourseDetailOut)
def get_course(course_id: int, storage: EduMentorStorage = Depends(site_storage)) -> CourseDetailOut:
    """The course with its lessons in teaching order."""
    with failure_message("Failed to fetch course"):
        course = storage.get_course_detail(course_id)
        if course is None:
            raise not_found("Course")
        return course


# ── Progress ───────────────────────────────────────────────────────────────


@router.get("/user/{user_id}/progress", response_model=list[CourseProgressOut])
def user_progress(user_id: int, storage: EduMentorStorage = Depends(site_storage)) -> list[CourseProgressOut]:
    with failure_message("Failed to fetch user progress"):
        return storage.get_courses_with_progress(user_id)


@router.post("/user/{user_id}/progress", response_model=UserProgress)
def update_progress(
    user_id: int,
    body: ProgressIn,
    storage: EduMentorStorage = Depends(site_storage),
) -> UserProgress:
    """Record how far the user got and add a ``progress_update`` activity."""
    with failure_message("Failed to update progress"):
        if storage.get_course(body.course_id) is None:
            raise not_found("Course")
        progress = storage.update_progress(user_id, body.course_id, body.last_lesson_id, body.percent_complete)
        storage.add_activity(
            user_id, "progress_update", resource_id=body.course_id, resource_type="course",
            details={"percentComplete": body.percent_complete},
        )
        return progress


# ── Instructors ────────────────────────────────────────────────────────────


@router.get("/instructors", response_model=list[Instructor])
def list_instructors(storage: EduMentorStorage = Depends(site_storage)) -> list[Instructor]:
    with failure_message("Failed to fetch instructors"):
        return storage.get_instructors()


@router.get("/user/{user_id}/instructors", response_model=list[UserInstructorOut])
def user_instructors(user_id: int, storage: EduMentorStorage = Depends(site_storage)) -> list[UserInstructorOut]:
    with failure_message("Failed to fetch user instructors"):
        return storage.get_user_instructors(user_id)


@router.post("/user/{user_id}/instructors", response_model=UserInstructor)
def save_user_instructor(
    user_id: int,
    body: UserInstructorIn,
    storage: EduMentorStorage = Depends(site_storage),
) -> UserInstructor:
    with failure_message("Failed to save user instructor"):
        if storage.get_instructor(body.instructor_id) is None:
            raise not_found("Instructor")
        return storage.save_user_instructor(user_id, body)


# ── Quizzes ────────────────────────────────────────────────────────────────


@router.get("/lessons/{lesson_id}/questions", response_model=list[QuizQuestion])
def quiz_questions(lesson_id: int, storage: EduMentorStorage = Depends(site_storage)) -> list[QuizQuestion]:
    with failure_message("Failed to fetch quiz questions"):
        if storage.get_lesson(lesson_id) is None:
            raise not_found("Lesson")
        return storage.get_quiz_questions(lesson_id)


@router.get("/user/{user_id}/lessons/{lesson_id}/attempts", response_model=list[QuizAttempt])
def quiz_attempts(
    user_id: int, lesson_id: int, storage: EduMentorStorage = Depends(site_storage)
) -> list[QuizAttempt]:
    with failure_message("Failed to fetch quiz attempts"):
        return storage.get_quiz_attempts(user_id, lesson_id)


@router.post("/user/{user_id}/lessons/{lesson_id}/attempts", response_model=QuizAttempt, status_code=201)
def record_quiz_attempt(
    user_id: int,
    lesson_id: int,
    body: QuizAttemptIn,
    storage: EduMentorStorage = Depends(site_storage),
) -> QuizAttempt:
    with failure_message("Failed to record quiz attempt"):
        if storage.get_lesson(lesson_id) is None:
            raise not_found("Lesson")
        if body.score > body.total_questions:
            raise HTTPException(status_code=400, detail="Score cannot exceed the number of questions")
        return storage.record_quiz_attempt(user_id, lesson_id, body.score, body.total_questions)


# ── Activity feed ──────────────────────────────────────────────────────────


@router.get("/user/{user_id}/activity", response_model=list[Activity])
def activity_feed(
    user_id: int,
    limit: int = Query(default=DEFAULT_ACTIVITY_LIMIT, ge=1),
    storage: EduMentorStorage = Depends(site_storage),
) -> list[Activity]:
    with failure_message("Failed to fetch activity feed"):
        return storage.get_activity(user_id, limit)
