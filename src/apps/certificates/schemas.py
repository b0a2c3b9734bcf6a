"""
Certificate schemas.

Parsed from the LMS API payload of ``GET /certificates/my-certificates``.
The ``course`` reference arrives either populated (``{"_id": ..., "name": ...}``)
or as a bare id; both are normalised to ``course_id`` at parse time so the
rest of the code never branches on its shape.
"""

from datetime import datetime
from typing import Any

from ninja import Schema
from pydantic import ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel


class CompletionStatsSchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    attendance_percentage: int | float = 0
    attended_days: int = 0
    total_days: int = 0


class CertificateSchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(alias="_id")
    course_id: str = Field(alias="course")
    course_name: str
    teacher_name: str
    certificate_number: str
    issued_at: datetime
    download_count: int = 0
    completion_stats: CompletionStatsSchema = Field(default_factory=CompletionStatsSchema)

    @field_validator("course_id", mode="before")
    @classmethod
    def normalize_course_ref(cls, value: Any) -> str:
        if isinstance(value, dict):
            value = value.get("_id") or value.get("id")
        if value is None or value == "":
            raise ValueError("certificate has no course reference")
        return str(value)
