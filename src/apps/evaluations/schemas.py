"""
Evaluation schemas.

  CourseSummarySchema     — one entry of GET /evaluations/public/courses
  EvaluationExportSchema  — GET /evaluations/export/{course_id}
  EvaluationQuestionSchema — one entry of GET /evaluations/questions
"""

import copy
import json
from typing import Any

from ninja import Schema
from pydantic import ConfigDict, Field, PrivateAttr
from pydantic.alias_generators import to_camel

from src.common.types import CourseStatus

MISSING_CELL = "-"
UNKNOWN_TEACHER = "Unknown"


class TeacherRefSchema(Schema):
    model_config = ConfigDict(frozen=True)

    name: str | None = None


class CourseSummarySchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str = Field(alias="_id", min_length=1)
    title: str
    course_code: str = ""
    teacher: TeacherRefSchema | None = None
    status: CourseStatus
    evaluation_count: int = 0

    @property
    def teacher_name(self) -> str:
        if self.teacher is None or not self.teacher.name:
            return UNKNOWN_TEACHER
        return self.teacher.name


class ExportCourseSchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    id: str
    title: str = ""
    course_code: str = ""


class EvaluationExportSchema(Schema):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, frozen=True)

    course: ExportCourseSchema | None = None
    total_responses: int = 0
    # None when the server omitted the field; [] when it sent no columns.
    columns: list[str] | None = None
    data: list[dict[str, Any]] = Field(default_factory=list)

    _raw: dict = PrivateAttr(default_factory=dict)

    @classmethod
    def from_payload(cls, payload: dict) -> "EvaluationExportSchema":
        export = cls.model_validate(payload)
        export._raw = copy.deepcopy(payload)
        return export

    @property
    def question_count(self) -> int | None:
        if self.columns is None:
            return None
        return len(self.columns)

    def table_rows(self) -> list[tuple[int, list[str]]]:
        """Rows in server order as ``(position, cells)``, 1-based."""
        columns = self.columns or []
        return [
            (position, [_cell(row.get(column)) for column in columns])
            for position, row in enumerate(self.data, start=1)
        ]

    @property
    def raw_json(self) -> str:
        return json.dumps(self._raw, indent=2, ensure_ascii=False)


class EvaluationQuestionSchema(Schema):
    model_config = ConfigDict(frozen=True)

    key: str
    text: str
    options: list[str] = Field(default_factory=list)


def _cell(value: Any) -> str:
    if value is None or value == "":
        return MISSING_CELL
    return str(value)
