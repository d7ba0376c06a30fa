"""API routers for the staff portal."""

from staff_portal.routers import staff  # noqa: F401
