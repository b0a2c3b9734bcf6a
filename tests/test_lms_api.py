"""
Test cases for the LMS API integration.

requests.get is patched; no network access.
"""
from unittest import mock

import requests
from django.test import SimpleTestCase

from src.common.exceptions import ExternalServiceError
from src.integrations import lms_api
from tests.factories import certificate_payload, course_payload, export_payload, questions_payload


def _response(status_code=200, payload=None, text=""):
    response = mock.Mock(spec=requests.Response)
    response.status_code = status_code
    response.ok = 200 <= status_code < 300
    response.text = text
    if isinstance(payload, Exception):
        response.json.side_effect = payload
    else:
        response.json.return_value = payload
    return response


@mock.patch("src.integrations.lms_api.requests.get")
class LmsApiReadsTest(SimpleTestCase):
    """Successful reads are parsed into schemas."""

    def test_my_certificates_forwards_token(self, get):
        get.return_value = _response(payload=[certificate_payload()])

        certificates = lms_api.get_my_certificates(token="abc")

        self.assertEqual(len(certificates), 1)
        url = get.call_args.args[0]
        self.assertEqual(url, "http://lms.test/api/certificates/my-certificates")
        self.assertEqual(get.call_args.kwargs["headers"]["Authorization"], "Bearer abc")

    def test_public_reads_send_no_token(self, get):
        get.return_value = _response(payload=[course_payload()])

        courses = lms_api.get_public_courses()

        self.assertEqual(courses[0].course_code, "CS201")
        self.assertNotIn("Authorization", get.call_args.kwargs["headers"])

    def test_export_quotes_course_id(self, get):
        get.return_value = _response(payload=export_payload())

        lms_api.get_evaluation_export(course_id="a b/c")

        self.assertEqual(get.call_args.args[0], "http://lms.test/api/evaluations/export/a%20b%2Fc")

    def test_questions_are_unwrapped(self, get):
        get.return_value = _response(payload=questions_payload())

        questions = lms_api.get_evaluation_questions()

        self.assertEqual([q.key for q in questions], ["q1", "q2"])


@mock.patch("src.integrations.lms_api.requests.get")
class LmsApiFailuresTest(SimpleTestCase):
    """Every kind of failure collapses into ExternalServiceError."""

    def test_transport_error(self, get):
        get.side_effect = requests.ConnectionError("refused")
        with self.assertRaises(ExternalServiceError):
            lms_api.get_public_courses()

    def test_not_found(self, get):
        get.return_value = _response(status_code=404, text='{"message": "Course not found"}')
        with self.assertRaises(ExternalServiceError) as ctx:
            lms_api.get_evaluation_export(course_id="missing")
        self.assertEqual(ctx.exception.extra["http_status"], 404)

    def test_server_error(self, get):
        get.return_value = _response(status_code=500, text="Server error")
        with self.assertRaises(ExternalServiceError):
            lms_api.get_my_certificates(token="abc")

    def test_body_not_json(self, get):
        get.return_value = _response(payload=ValueError("Expecting value"))
        with self.assertRaises(ExternalServiceError):
            lms_api.get_public_courses()

    def test_unexpected_shape(self, get):
        get.return_value = _response(payload={"message": "not a list"})
        with self.assertRaises(ExternalServiceError):
            lms_api.get_public_courses()

    def test_invalid_item(self, get):
        get.return_value = _response(payload=[{"title": "no id"}])
        with self.assertRaises(ExternalServiceError):
            lms_api.get_public_courses()

    def test_course_without_id(self, get):
        get.return_value = _response(payload=[course_payload(course_id="")])
        with self.assertRaises(ExternalServiceError):
            lms_api.get_public_courses()

    def test_export_must_be_an_object(self, get):
        get.return_value = _response(payload=[])
        with self.assertRaises(ExternalServiceError):
            lms_api.get_evaluation_export(course_id="c1")


@mock.patch("src.integrations.lms_api.requests.get")
class HealthCheckTest(SimpleTestCase):

    def test_ok(self, get):
        get.return_value = _response(payload={"message": "Student Feedback API is running"})
        self.assertEqual(lms_api.health_check()["status"], "ok")

    def test_http_error(self, get):
        get.return_value = _response(status_code=503)
        result = lms_api.health_check()
        self.assertEqual(result["status"], "unavailable")
        self.assertEqual(result["http_status"], 503)

    def test_unreachable(self, get):
        get.side_effect = requests.Timeout("slow")
        self.assertEqual(lms_api.health_check()["status"], "unavailable")
