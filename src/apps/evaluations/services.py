"""
Evaluation explorer view state.

Two flows share one instance:

  Flow A — ``mount()``: course catalogue (plus the question catalogue used
           to label export columns). Runs once per page.
  Flow B — ``change_course()``: evaluation export of the selected course.

Flow B is generation-stamped. ``select_course()`` bumps the generation and
updates state synchronously; a response is applied only if its generation
is still current, so a slow answer for a previous selection can never
overwrite the state of the current one.
"""

import asyncio

import structlog
from asgiref.sync import sync_to_async

from src.apps.evaluations.schemas import CourseSummarySchema, EvaluationExportSchema
from src.common.exceptions import ExternalServiceError
from src.common.types import LoadState
from src.integrations import lms_api

logger = structlog.get_logger(__name__)

COURSES_ERROR = "Failed to load courses"
EVALUATION_ERROR = "Failed to load evaluation data"


class EvaluationExplorer:
    def __init__(self, *, api_base_url: str, api=lms_api):
        self._api = api
        self.api_base_url = api_base_url.rstrip("/")

        # Flow A
        self.courses: list[CourseSummarySchema] = []
        self.courses_loading = True
        self.courses_error = ""
        self.question_texts: dict[str, str] = {}

        # Flow B
        self.selected_course_id: str | None = None
        self.evaluation: EvaluationExportSchema | None = None
        self.evaluation_loading = False
        self.evaluation_error = ""
        self._generation = 0

    # ── Flow A ──────────────────────────────────────────────────────────

    @property
    def courses_status(self) -> LoadState:
        if self.courses_loading:
            return LoadState.LOADING
        if self.courses_error:
            return LoadState.ERROR
        return LoadState.READY

    async def mount(self) -> None:
        await asyncio.gather(self._load_courses(), self.load_questions())

    async def _load_courses(self) -> None:
        try:
            fetch = sync_to_async(self._api.get_public_courses, thread_sensitive=False)
            courses = await fetch()
        except ExternalServiceError as e:
            logger.warning("courses_fetch_failed", error=e.message)
            self.courses = []
            self.courses_error = COURSES_ERROR
        else:
            self.courses = courses
        finally:
            self.courses_loading = False

    async def load_questions(self) -> None:
        # The legend is optional; a failure only hides it.
        try:
            fetch = sync_to_async(self._api.get_evaluation_questions, thread_sensitive=False)
            questions = await fetch()
        except ExternalServiceError as e:
            logger.warning("questions_fetch_failed", error=e.message)
            return
        self.question_texts = {question.key.upper(): question.text for question in questions}

    # ── Flow B ──────────────────────────────────────────────────────────

    @property
    def evaluation_status(self) -> LoadState | None:
        """None while nothing is selected."""
        if self.selected_course_id is None:
            return None
        if self.evaluation_loading:
            return LoadState.LOADING
        if self.evaluation_error:
            return LoadState.ERROR
        return LoadState.READY

    def select_course(self, course_id: str | None) -> int:
        """
        Switch the selection and return the generation token of this switch.

        Previous export and error are dropped immediately, so nothing from
        an earlier selection stays on screen while the new one loads.
        """
        self._generation += 1
        self.selected_course_id = course_id or None
        self.evaluation = None
        self.evaluation_error = ""
        self.evaluation_loading = self.selected_course_id is not None
        return self._generation

    async def load_evaluation(self, token: int) -> bool:
        """
        Fetch the export for the selection made under ``token``.

        Returns False when the response was discarded as superseded.
        """
        course_id = self.selected_course_id
        if token != self._generation or course_id is None:
            return False
        try:
            fetch = sync_to_async(self._api.get_evaluation_export, thread_sensitive=False)
            export = await fetch(course_id=course_id)
        except ExternalServiceError as e:
            if token != self._generation:
                logger.debug("evaluation_response_discarded", course_id=course_id, outcome="error")
                return False
            logger.warning("evaluation_fetch_failed", course_id=course_id, error=e.message)
            self.evaluation = None
            self.evaluation_error = EVALUATION_ERROR
        else:
            if token != self._generation:
                logger.debug("evaluation_response_discarded", course_id=course_id, outcome="ok")
                return False
            self.evaluation = export
            self.evaluation_error = ""
        finally:
            if token == self._generation:
                self.evaluation_loading = False
        return True

    async def change_course(self, course_id: str | None) -> None:
        token = self.select_course(course_id)
        if self.selected_course_id is not None:
            await self.load_evaluation(token)

    # ── Rendering helpers ───────────────────────────────────────────────

    def is_selected(self, course: CourseSummarySchema) -> bool:
        return course.id == self.selected_course_id

    def api_url(self, course_id: str) -> str:
        return f"{self.api_base_url}{lms_api.export_path(course_id)}"

    @property
    def selected_api_url(self) -> str:
        if self.selected_course_id is None:
            return ""
        return self.api_url(self.selected_course_id)

    def sidebar_items(self) -> list[tuple[CourseSummarySchema, bool, str]]:
        return [(course, self.is_selected(course), self.api_url(course.id)) for course in self.courses]

    def column_headers(self) -> list[tuple[str, str]]:
        """``(column, question text)``; text is empty when unknown."""
        if self.evaluation is None:
            return []
        return [
            (column, self.question_texts.get(column.upper(), ""))
            for column in self.evaluation.columns or []
        ]
