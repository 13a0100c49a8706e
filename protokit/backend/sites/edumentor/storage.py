"""Storage interface for EduMentor."""

from __future__ import annotations

import logging
from typing import Any

from protokit.backend.core.storage import Collection, SiteStorage
from protokit.backend.core.utils.passwords import hash_password, verify_password
from protokit.backend.schemas import utcnow
from protokit.backend.sites.edumentor.schemas import (
    Activity,
    Course,
    CourseDetailOut,
    CourseProgressOut,
    Instructor,
    Lesson,
    QuizAttempt,
    QuizQuestion,
    RegisterIn,
    Subject,
    User,
    UserInstructor,
    UserInstructorIn,
    UserInstructorOut,
    UserProgress,
)

logger = logging.getLogger(__name__)

DEFAULT_ACTIVITY_LIMIT = 10


class EduMentorStorage(SiteStorage):
    collections = {
        "users": User,
        "subjects": Subject,
        "courses": Course,
        "lessons": Lesson,
        "user_progress": UserProgress,
        "quiz_questions": QuizQuestion,
        "quiz_attempts": QuizAttempt,
        "instructors": Instructor,
        "user_instructors": UserInstructor,
        "activity_feed": Activity,
    }

    users: Collection[User]
    subjects: Collection[Subject]
    courses: Collection[Course]
    lessons: Collection[Lesson]
    user_progress: Collection[UserProgress]
    quiz_questions: Collection[QuizQuestion]
    quiz_attempts: Collection[QuizAttempt]
    instructors: Collection[Instructor]
    user_instructors: Collection[UserInstructor]
    activity_feed: Collection[Activity]

    # ── Users ──────────────────────────────────────────────────────────────

    def get_user(self, user_id: int) -> User | None:
        return self.users.get(user_id)

    def get_user_by_username(self, username: str) -> User | None:
        return self.users.first(username=username)

    def register_user(self, account: RegisterIn) -> User:
        """
        Create an account with a hashed password.

        Raises:
            ValueError: If the username is taken
        """
        if self.get_user_by_username(account.username) is not None:
            raise ValueError("Username already exists")
        user = self.users.insert({**account.model_dump(), "password": hash_password(account.password)})
        logger.info("Registered learner %s", user.username)
        return user

    def authenticate(self, username: str, password: str) -> User | None:
        user = self.get_user_by_username(username)
        if user is None or not verify_password(password, user.password):
            return None
        return user

    # ── Catalogue ──────────────────────────────────────────────────────────

    def get_subjects(self) -> list[Subject]:
        return self.subjects.all()

    def get_subject(self, subject_id: int) -> Subject | None:
        return self.subjects.get(subject_id)

    def get_courses(self, subject_id: int | None = None) -> list[Course]:
        if subject_id is not None:
            return self.courses.where(subject_id=subject_id)
        return self.courses.all()

    def get_course(self, course_id: int) -> Course | None:
        return self.courses.get(course_id)

    def get_lessons(self, course_id: int) -> list[Lesson]:
        return sorted(self.lessons.where(course_id=course_id), key=lambda lesson: lesson.order)

    def get_lesson(self, lesson_id: int) -> Lesson | None:
        return self.lessons.get(lesson_id)

    def get_course_detail(self, course_id: int) -> CourseDetailOut | None:
        course = self.get_course(course_id)
        if course is None:
            return None
        return CourseDetailOut(**course.model_dump(), lessons=self.get_lessons(course_id))

    # ── Progress ───────────────────────────────────────────────────────────

    def get_progress(self, user_id: int, course_id: int) -> UserProgress | None:
        return self.user_progress.first(user_id=user_id, course_id=course_id)

    def update_progress(
        self, user_id: int, course_id: int, last_lesson_id: int | None, percent_complete: int
    ) -> UserProgress:
        """Create or overwrite the user's progress row for a course."""
        return self.user_progress.upsert(
            {"user_id": user_id, "course_id": course_id},
            {
                "last_lesson_id": last_lesson_id,
                "percent_complete": percent_complete,
                "last_accessed": utcnow(),
            },
        )

    def get_courses_with_progress(self, user_id: int) -> list[CourseProgressOut]:
        """Every course, with the user's completion percentage (0 if never started)."""
        percent = {p.course_id: p.percent_complete for p in self.user_progress.where(user_id=user_id)}
        return [
            CourseProgressOut(**course.model_dump(), progress=percent.get(course.id, 0))
            for course in self.courses.all()
        ]

    # ── Quizzes ────────────────────────────────────────────────────────────

    def get_quiz_questions(self, lesson_id: int) -> list[QuizQuestion]:
        return self.quiz_questions.where(lesson_id=lesson_id)

    def record_quiz_attempt(self, user_id: int, lesson_id: int, score: int, total_questions: int) -> QuizAttempt:
        attempt = self.quiz_attempts.insert({
            "user_id": user_id,
            "lesson_id": lesson_id,
            "score": score,
            "total_questions": total_questions,
        })
        self.add_activity(
            user_id, "quiz_completed", resource_id=lesson_id, resource_type="lesson",
            details={"score": score, "total": total_questions},
        )
        return attempt

    def get_quiz_attempts(self, user_id: int, lesson_id: int) -> list[QuizAttempt]:
        return self.quiz_attempts.where(user_id=user_id, lesson_id=lesson_id)

    # ── Instructors ────────────────────────────────────────────────────────

    def get_instructors(self) -> list[Instructor]:
        return self.instructors.all()

    def get_instructor(self, instructor_id: int) -> Instructor | None:
        return self.instructors.get(instructor_id)

    def get_user_instructors(self, user_id: int) -> list[UserInstructorOut]:
        """
        The user's saved instructors.

        A user who has saved none sees every instructor, uncustomised.
        """
        saved = self.user_instructors.where(user_id=user_id)
        if not saved:
            return [UserInstructorOut(**i.model_dump(), is_customized=False) for i in self.instructors.all()]
        joined = []
        for entry in saved:
            instructor = self.instructors.get(entry.instructor_id)
            if instructor is not None:
                joined.append(UserInstructorOut(**instructor.model_dump(), is_customized=entry.is_customized))
        return joined

    def save_user_instructor(self, user_id: int, choice: UserInstructorIn) -> UserInstructor:
        return self.user_instructors.insert({**choice.model_dump(), "user_id": user_id})

    # ── Activity feed ──────────────────────────────────────────────────────

    def add_activity(
        self,
        user_id: int,
        activity_type: str,
        *,
        resource_id: int | None = None,
        resource_type: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> Activity:
        return self.activity_feed.insert({
            "user_id": user_id,
            "activity_type": activity_type,
            "resource_id": resource_id,
            "resource_type": resource_type,
            "details": details,
        })

    def get_activity(self, user_id: int, limit: int = DEFAULT_ACTIVITY_LIMIT) -> list[Activity]:
        """Newest first; entries with the same timestamp keep reverse insertion order."""
        entries = sorted(
            self.activity_feed.where(user_id=user_id),
            key=lambda a: (a.timestamp, a.id),
            reverse=True,
        )
        return entries[:limit]
