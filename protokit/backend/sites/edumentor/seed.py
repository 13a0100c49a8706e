"""Demo catalogue, instructors and a demo learner for an empty EduMentor store."""

from __future__ import annotations

import logging

from protokit.backend.sites.edumentor.schemas import RegisterIn
from protokit.backend.sites.edumentor.storage import EduMentorStorage

logger = logging.getLogger(__name__)

UNSPLASH = "https://images.unsplash.com/"
VIDEOS = "https://example.com/videos/"

# (name, code, description, image, colour)
SUBJECTS = [
    ("Mathematics", "math", "Algebra, Calculus, Geometry and more", "photo-1635070041078-e363dbe005cb", "#3B82F6"),
    ("English Literature", "english", "Shakespeare, Poetry, Essay Writing", "photo-1490633874781-1c63cc424610", "#10B981"),
    ("Physics", "physics", "Mechanics, Thermodynamics, Electromagnetism", "photo-1636466497217-26a8cbeaf0aa", "#8B5CF6"),
    ("Languages", "languages", "Spanish, French, German, and more", "photo-1546995022-530034374c86", "#F59E0B"),
]

# (name, description, subject code, level, image, certification)
COURSES = [
    ("Advanced Mathematics", "Complex algebra, calculus, and geometry for advanced students",
     "math", "advanced", "photo-1580894732444-8ecded7900cd", None),
    ("English Literature", "Explore classical and modern literature with critical analysis",
     "english", "intermediate", "photo-1526243741027-444d633d7365", None),
    ("SAT Preparation", "Comprehensive preparation for the SAT exam",
     "math", "advanced", "photo-1434030216411-0b793f4b4173", "SAT"),
    ("IELTS Preparation", "Complete preparation for the IELTS English proficiency exam",
     "languages", "intermediate", "photo-1523050854058-8df90110c9f1", "IELTS"),
    ("Physics Fundamentals", "Essential physics concepts and applications",
     "physics", "beginner", "photo-1636466377311-3ceb7b8d5072", None),
    ("Spanish for Beginners", "Learn basic Spanish vocabulary, grammar, and conversation",
     "languages", "beginner", "photo-1516541196182-6bdb0516ed27", None),
]

# course name -> [(title, description, video slug, minutes)] in teaching order
LESSONS = {
    "Advanced Mathematics": [
        ("Introduction to Calculus", "Fundamentals of calculus and its applications", "calculus-intro", 45),
        ("Limits and Continuity", "Understanding the concept of limits and continuity", "limits", 50),
        ("Derivatives and Differentiation", "Fundamental rules and applications of derivatives", "derivatives", 55),
        ("Chain Rule and Applications", "Understanding the chain rule and its real-world applications", "chain-rule", 60),
        ("Integrals and Integration", "Fundamental concepts of integration and techniques", "integration", 65),
    ],
    "English Literature": [
        ("Introduction to Shakespeare", "Overview of Shakespeare's life and works", "shakespeare-intro", 40),
        ("Shakespeare's Sonnets", "Analysis of Shakespeare's most famous sonnets", "shakespeare-sonnets", 45),
        ("Hamlet: Themes and Analysis", "In-depth study of Hamlet's major themes", "hamlet-analysis", 55),
        ("Critical Analysis Techniques", "Methods for analyzing and critiquing literature", "critical-analysis", 50),
        ("Essay Writing Workshop", "Techniques for writing compelling literary essays", "essay-writing", 60),
    ],
    "SAT Preparation": [
        ("SAT Overview and Strategy", "Understanding the SAT structure and general strategies", "sat-overview", 35),
        ("Algebra and Functions", "Key concepts and practice questions for algebra section", "sat-algebra", 60),
        ("Geometry and Trigonometry", "Essential geometry and trigonometry concepts for the SAT", "sat-geometry", 55),
        ("Reading Comprehension", "Strategies for the reading section with practice passages", "sat-reading", 50),
        ("Writing and Language", "Grammar rules and writing improvement strategies", "sat-writing", 45),
        ("Essay Writing", "How to write a high-scoring SAT essay", "sat-essay", 40),
        ("Practice Test #1", "Complete timed practice test with review", "sat-practice-1", 180),
        ("Practice Test #2", "Second complete practice test with detailed explanations", "sat-practice-2", 180),
    ],
}

# (name, appearance, voice, subject ids, language, rating 0-50, rating count)
INSTRUCTORS = [
    ("Professor Emma", "photo-1573497019940-1c28c88b4f3e", "en-US-Neural2-F", [1, 2], "en", 48, 126),
    ("Dr. James", "photo-1568602471122-7832951cc4c5", "en-US-Neural2-D", [1, 3], "en", 47, 98),
    ("Prof. María", "photo-1544005313-94ddf0286df2", "es-ES-Neural2-A", [2, 4], "es", 49, 143),
    ("Dr. Chen", "photo-1506794778202-cad84cf45f1d", "en-US-Neural2-J", [3, 1], "en", 46, 87),
]

# (lesson id, question, options, answer, explanation, difficulty)
QUIZ_QUESTIONS = [
    (1, "What does a derivative measure?",
     ["Area under a curve", "Instantaneous rate of change", "Average value", "Total distance"],
     "Instantaneous rate of change",
     "The derivative is the limit of the average rate of change over a shrinking interval.", "easy"),
    (1, "Which notation denotes the integral of f with respect to x?",
     ["f'(x)", "∫ f(x) dx", "Σ f(x)", "lim f(x)"],
     "∫ f(x) dx", None, "easy"),
]

DEMO_PROGRESS = [(1, 2, 78), (2, 5, 45), (3, 8, 62)]

# (activity type, resource id, resource type, details)
DEMO_ACTIVITY = [
    ("quiz_completed", 1, "lesson", {"score": 92, "total": 100}),
    ("lesson_watched", 6, "lesson", {"duration": 25}),
    ("homework_submitted", 3, "lesson", {"name": "Practice Essay #3"}),
]


def seed(storage: EduMentorStorage) -> None:
    subject_ids = {}
    for name, code, description, image, color in SUBJECTS:
        subject = storage.subjects.insert({
            "name": name, "code": code, "description": description,
            "image_url": UNSPLASH + image, "color": color,
        })
        subject_ids[code] = subject.id

    course_ids = {}
    for name, description, code, level, image, certification in COURSES:
        course = storage.courses.insert({
            "name": name, "description": description, "subject_id": subject_ids[code],
            "level": level, "image_url": UNSPLASH + image, "certification_type": certification,
        })
        course_ids[name] = course.id

    for course_name, lessons in LESSONS.items():
        for order, (title, description, slug, minutes) in enumerate(lessons, start=1):
            storage.lessons.insert({
                "course_id": course_ids[course_name], "title": title, "description": description,
                "video_url": VIDEOS + slug, "order": order, "duration": minutes,
            })

    for name, image, voice, specialties, language, rating, count in INSTRUCTORS:
        storage.instructors.insert({
            "name": name, "appearance": UNSPLASH + image, "voice": voice,
            "subject_specialties": specialties, "language": language,
            "rating": rating, "rating_count": count,
        })

    for lesson_id, question, options, answer, explanation, difficulty in QUIZ_QUESTIONS:
        storage.quiz_questions.insert({
            "lesson_id": lesson_id, "question": question, "options": options,
            "correct_answer": answer, "explanation": explanation, "difficulty": difficulty,
        })

    demo = storage.register_user(RegisterIn(
        username="demo", password="password", display_name="Alex Demo", email="demo@example.com",
    ))
    for course_id, lesson_id, percent in DEMO_PROGRESS:
        storage.update_progress(demo.id, course_id, lesson_id, percent)
    for activity_type, resource_id, resource_type, details in DEMO_ACTIVITY:
        storage.add_activity(
            demo.id, activity_type, resource_id=resource_id, resource_type=resource_type, details=details
        )

    logger.info("Seeded EduMentor: %d courses, %d lessons", storage.courses.count(), storage.lessons.count())
