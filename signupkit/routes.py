"""
signupkit.routes
Page table shared by the web and desktop front ends.
"""

TITLE_BASE = "Cognifyz Demo"

ROUTES = {
    "/": "Home",
    "/form": "Create Account",
    "/about": "About",
}
NOT_FOUND = "Not Found"


def page_title(path: str) -> str:
    return f"{ROUTES.get(path, NOT_FOUND)} – {TITLE_BASE}"


def needs_leave_confirmation(current: str, target: str, dirty: bool) -> bool:
    """Leaving the signup form with unsaved edits asks first."""
    return current == "/form" and target != "/form" and dirty
