"""
Test cases for the explorer pages and the status API.

The LMS API module functions are patched; views run end to end.
"""
from unittest import mock

from django.test import SimpleTestCase
from django.urls import reverse

from src.apps.evaluations.schemas import (
    CourseSummarySchema,
    EvaluationExportSchema,
    EvaluationQuestionSchema,
)
from src.apps.evaluations.services import COURSES_ERROR, EVALUATION_ERROR
from src.common.exceptions import ExternalServiceError
from tests.factories import course_payload, export_payload, questions_payload


class ExplorerViewTest(SimpleTestCase):
    """Full-page renders of /evaluations/."""

    def setUp(self):
        patcher = mock.patch.multiple(
            "src.integrations.lms_api",
            get_public_courses=mock.DEFAULT,
            get_evaluation_questions=mock.DEFAULT,
            get_evaluation_export=mock.DEFAULT,
        )
        self.api = patcher.start()
        self.addCleanup(patcher.stop)
        self.api["get_public_courses"].return_value = [
            CourseSummarySchema.model_validate(course_payload("c1", title="Algorithms")),
            CourseSummarySchema.model_validate(course_payload("c2", title="Networks")),
        ]
        self.api["get_evaluation_questions"].return_value = [
            EvaluationQuestionSchema.model_validate(q) for q in questions_payload()["questions"]
        ]

    def _export(self, **kwargs):
        return EvaluationExportSchema.from_payload(export_payload(**kwargs))

    def test_no_selection_shows_placeholder(self):
        response = self.client.get(reverse("evaluations:explorer"))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "Select a Course")
        self.assertContains(response, "Algorithms")
        self.assertContains(response, "Networks")
        self.assertContains(response, "GET http://lms.test/api/evaluations/public/courses")
        self.api["get_evaluation_export"].assert_not_called()

    def test_selected_course_renders_table(self):
        self.api["get_evaluation_export"].return_value = self._export(
            course_id="c1", columns=["Q1", "Q2"], data=[{"Q1": "5"}],
        )

        response = self.client.get(reverse("evaluations:explorer_course", args=["c1"]))

        self.assertContains(response, "<td>1</td>")
        self.assertContains(response, "<td>5</td><td>-</td>")
        self.assertContains(response, "JSON Response Preview")
        self.assertContains(response, 'title="How clearly were the objectives explained?"')
        self.assertContains(response, "http://lms.test/api/evaluations/export/c1")
        self.assertContains(response, "public-eval-course-item active", count=1)
        self.api["get_evaluation_export"].assert_called_once_with(course_id="c1")

    def test_empty_export(self):
        self.api["get_evaluation_export"].return_value = self._export(course_id="c1", data=[])

        response = self.client.get(reverse("evaluations:explorer_course", args=["c1"]))

        self.assertContains(response, "No evaluation responses yet for this course")
        self.assertNotContains(response, "eval-data-table")

    def test_absent_columns_show_unknown_question_count(self):
        self.api["get_evaluation_export"].return_value = self._export(
            course_id="c1", columns=None, data=[{"Q1": "5"}],
        )

        response = self.client.get(reverse("evaluations:explorer_course", args=["c1"]))

        self.assertContains(response, '<span class="stat-value">-</span>')
        self.assertNotContains(response, '<span class="stat-value">20</span>')

    def test_export_failure(self):
        self.api["get_evaluation_export"].side_effect = ExternalServiceError("boom")

        response = self.client.get(reverse("evaluations:explorer_course", args=["c1"]))

        self.assertContains(response, EVALUATION_ERROR, count=1)
        self.assertNotContains(response, "JSON Response Preview")

    def test_catalog_failure_shows_one_message_and_no_spinner(self):
        self.api["get_public_courses"].side_effect = ExternalServiceError("boom")

        response = self.client.get(reverse("evaluations:explorer"))

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, COURSES_ERROR, count=1)
        self.assertNotContains(response, "public-eval-course-item")
        self.assertNotContains(response, "No courses available")
        self.assertNotContains(response, "Loading")

    def test_empty_catalog(self):
        self.api["get_public_courses"].return_value = []

        response = self.client.get(reverse("evaluations:explorer"))

        self.assertContains(response, "No courses available")

    def test_htmx_request_renders_detail_only(self):
        self.api["get_evaluation_export"].return_value = self._export(course_id="c2", data=[{"Q1": "3"}])

        response = self.client.get(
            reverse("evaluations:explorer_course", args=["c2"]),
            HTTP_HX_REQUEST="true",
        )

        self.assertEqual(response.status_code, 200)
        self.assertContains(response, "eval-data-container")
        self.assertNotContains(response, "public-eval-sidebar")
        self.api["get_public_courses"].assert_not_called()

    def test_htmx_history_restore_renders_full_page(self):
        self.api["get_evaluation_export"].return_value = self._export(course_id="c1", data=[{"Q1": "3"}])

        response = self.client.get(
            reverse("evaluations:explorer_course", args=["c1"]),
            HTTP_HX_REQUEST="true",
            HTTP_HX_HISTORY_RESTORE_REQUEST="true",
        )

        self.assertContains(response, "public-eval-sidebar")
        self.assertContains(response, "Public Evaluation Data")
        self.assertContains(response, "eval-data-container")
        self.api["get_public_courses"].assert_called_once_with()

    def test_index_redirects_to_explorer(self):
        response = self.client.get("/")
        self.assertRedirects(response, reverse("evaluations:explorer"), fetch_redirect_response=False)


class HealthApiTest(SimpleTestCase):
    """GET /status/api/health"""

    @mock.patch("src.integrations.lms_api.health_check")
    def test_ok(self, health_check):
        health_check.return_value = {"status": "ok", "url": "http://lms.test/api"}

        response = self.client.get("/status/api/health")

        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json()["lms_api"], "ok")
        self.assertEqual(response.json()["lms_api_base_url"], "http://lms.test/api")

    @mock.patch("src.integrations.lms_api.health_check")
    def test_upstream_down(self, health_check):
        health_check.return_value = {"status": "unavailable", "url": "http://lms.test/api"}

        response = self.client.get("/status/api/health")

        self.assertEqual(response.status_code, 502)
        self.assertEqual(response.json()["lms_api"], "unavailable")
