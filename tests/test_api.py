"""Tests for the HTTP screening endpoint."""

import unittest

from fastapi.testclient import TestClient

from resume_screener.api import app

JOB_DESCRIPTION = b"Looking for a Python developer with leadership skills"
SAMPLE_RESUME = (
    b"John Smith, Python Developer, john@example.com, 3 years experience, "
    b"leadership and teamwork, Stanford University, Boston, MA"
)


class TestProcessResumesEndpoint(unittest.TestCase):
    def setUp(self):
        self.client = TestClient(app)

    def test_success(self):
        response = self.client.post(
            "/process_resumes/",
            files=[
                ("jd_file", ("jd.txt", JOB_DESCRIPTION, "text/plain")),
                ("resume_files", ("john.txt", SAMPLE_RESUME, "text/plain")),
                ("resume_files", ("sheet.xlsx", b"python", "application/octet-stream")),
                ("resume_files", ("other.txt", b"graphic designer", "text/plain")),
            ],
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertTrue(body["success"])
        self.assertEqual(len(body["results"]), 2)
        first = body["results"][0]
        self.assertEqual(first["name"], "John Smith")
        self.assertEqual(first["location"], "Boston, MA")
        self.assertTrue(first["similarity"].endswith("%"))
        self.assertEqual(body["results"][1]["similarity"], "0%")
        self.assertNotIn("source_name", first)

    def test_missing_resumes(self):
        response = self.client.post(
            "/process_resumes/",
            files=[("jd_file", ("jd.txt", JOB_DESCRIPTION, "text/plain"))],
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

    def test_missing_job_description(self):
        response = self.client.post(
            "/process_resumes/",
            files=[("resume_files", ("john.txt", SAMPLE_RESUME, "text/plain"))],
        )
        self.assertEqual(response.status_code, 400)
        self.assertIn("error", response.json())

    def test_unreadable_job_description_is_internal_error(self):
        response = self.client.post(
            "/process_resumes/",
            files=[
                ("jd_file", ("jd.xlsx", JOB_DESCRIPTION, "application/octet-stream")),
                ("resume_files", ("john.txt", SAMPLE_RESUME, "text/plain")),
            ],
        )
        self.assertEqual(response.status_code, 500)
        self.assertIn("error", response.json())

    def test_cors_preflight_allows_post(self):
        response = self.client.options(
            "/process_resumes/",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "POST"},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["access-control-allow-origin"], "*")

    def test_cors_preflight_rejects_other_methods(self):
        response = self.client.options(
            "/process_resumes/",
            headers={"Origin": "http://example.com", "Access-Control-Request-Method": "DELETE"},
        )
        self.assertEqual(response.status_code, 400)


if __name__ == "__main__":
    unittest.main()
