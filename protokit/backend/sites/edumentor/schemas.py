"""Pydantic schemas for EduMentor, the AI-tutored course platform."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Literal

from pydantic import Field

from protokit.backend.schemas import Record, Schema, utcnow

CourseLevel = Literal["beginner", "intermediate", "advanced"]

# ── Request models ──────────────────────────────────────────────────────────


class RegisterIn(Schema):
    username: str = Field(min_length=1)
    password: str = Field(min_length=1)
    display_name: str = Field(min_length=1)
    email: str = Field(min_length=1)
    language: str = "en"


class LoginIn(Schema):
    username: str
    password: str


class ProgressIn(Schema):
    course_id: int
    last_lesson_id: int | None = None
    percent_complete: int = Field(default=0, ge=0, le=100)


class UserInstructorIn(Schema):
    instructor_id: int
    is_customized: bool = False
    custom_settings: dict[str, Any] | None = None


class QuizAttemptIn(Schema):
    score: int = Field(ge=0)
    total_questions: int = Field(gt=0)


# ── Stored records ──────────────────────────────────────────────────────────


class User(Record):
    username: str
    password: str
    display_name: str
    email: str
    profile_image: str | None = None
    language: str = "en"
    created_at: datetime = Field(default_factory=utcnow)


class Subject(Record):
    name: str
    code: str
    description: str
    image_url: str | None = None
    color: str


class Course(Record):
    name: str
    description: str
    subject_id: int
    level: CourseLevel
    image_url: str | None = None
    certification_type: str | None = None


class Lesson(Record):
    course_id: int
    title: str
    description: str
    video_url: str | None = None
    order: int
    duration: int


class UserProgress(Record):
    user_id: int
    course_id: int
    last_lesson_id: int | None = None
    percent_complete: int = 0
    last_accessed: datetime = Field(default_factory=utcnow)


class QuizQuestion(Record):
    lesson_id: int
    question: str
    options: list[str]
    correct_answer: str
    explanation: str | None = None
    difficulty: str


class QuizAttempt(Record):
    user_id: int
    lesson_id: int
    score: int
    total_questions: int
    attempted_at: datetime = Field(default_factory=utcnow)


class Instructor(Record):
    name: str
    appearance: str
    voice: str
    subject_specialties: list[int] = Field(default_factory=list)
    language: str = "en"
    # 0-50, i.e. tenths of a star.
    rating: int = 50
    rating_count: int = 0


class UserInstructor(Record):
    user_id: int
    instructor_id: int
    is_customized: bool = False
    custom_settings: dict[str, Any] | None = None


class Activity(Record):
    user_id: int
    activity_type: str
    resource_id: int | None = None
    resource_type: str | None = None
    details: dict[str, Any] | None = None
    timestamp: datetime = Field(default_factory=utcnow)


# ── Response models ─────────────────────────────────────────────────────────


class AccountOut(Schema):
    id: int
    username: str
    display_name: str
    email: str
    language: str


class CourseDetailOut(Course):
    lessons: list[Lesson]


class CourseProgressOut(Course):
    progress: int


class UserInstructorOut(Instructor):
    is_customized: bool
