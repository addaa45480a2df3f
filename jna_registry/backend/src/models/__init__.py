"""ORM models exposed for easy imports."""

from .registration import Registration
from .student import Student

__all__ = [
    "Registration",
    "Student",
]
