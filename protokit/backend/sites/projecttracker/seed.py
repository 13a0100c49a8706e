"""Demo user, project and AI logs for an empty project tracker."""

from __future__ import annotations

from protokit.backend.sites.projecttracker.storage import ProjectTrackerStorage

DEMO_USER = {"username": "demo", "email": "demo@nexustracker.com", "password": "demo123"}

DEMO_PROJECT = {
    "name": "Website Redesign",
    "description": "Modernizing company website with new design",
    "color": "#3B82F6",
}

VALIDATE_FORM_SNIPPET = (
    "// Function to handle form validation\n"
    "const validateForm = (formData) => {\n"
    "  const errors = {};\n"
    "  if (!formData.email.includes('@')) {\n"
    "    errors.email = 'Invalid email format';\n"
    "  }\n"
    "  return errors;\n"
    "};"
)


def seed(storage: ProjectTrackerStorage) -> None:
    user = storage.create_user(DEMO_USER)
    project = storage.create_project(user.id, DEMO_PROJECT)

    storage.create_ai_log(user.id, {
        "project_id": project.id,
        "source": "ChatGPT",
        "content": "Implement a responsive navigation menu with mobile-friendly hamburger menu and smooth "
                   "transitions. Consider accessibility features and ensure proper keyboard navigation support.",
        "prompt": "How to create a responsive navigation menu for a modern website?",
        "metadata": {"model": "gpt-4o", "tokens": 156},
    })
    storage.create_ai_log(user.id, {
        "project_id": project.id,
        "source": "GitHub Copilot",
        "content": VALIDATE_FORM_SNIPPET,
        "task_created": True,
        "metadata": {"completionId": "cmpl_xyz123"},
    })
    storage.create_ai_log(user.id, {
        "source": "Claude",
        "content": "Create a comprehensive SEO strategy focusing on technical SEO, content optimization, and "
                   "link building. Include schema markup implementation and Core Web Vitals optimization for "
                   "better search rankings.",
        "prompt": "What are the best practices for SEO in 2024?",
        "metadata": {"conversation_id": "conv_abc789"},
    })
