"""
Shared enums used across multiple apps.

These are plain Python StrEnums; templates render their values as labels.
"""

from enum import StrEnum


class LoadState(StrEnum):
    LOADING = "loading"
    READY = "ready"
    ERROR = "error"


class CourseStatus(StrEnum):
    DRAFT = "draft"
    ACTIVE = "active"
    COMPLETED = "completed"
