from .staff import Staff  # noqa: F401
