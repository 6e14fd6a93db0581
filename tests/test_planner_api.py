import unittest
from datetime import date, timedelta

from fastapi.testclient import TestClient

from app.core.endpoint_rate_limit import clear_endpoint_rate_limit_events
from app.main import app


def _in_days(offset: int) -> str:
    return (date.today() + timedelta(days=offset)).isoformat()


class PlannerApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)
        cls.resume_payload = {
            "resume_text": (
                "Built React and TypeScript interfaces, improved accessibility, "
                "and partnered with product teams."
            ),
            "job_description": (
                "<p>Senior frontend engineer needed for React, TypeScript, GraphQL, testing, "
                "and accessibility work.</p> <p>This senior role partners with product and design.</p>"
            ),
        }

    def setUp(self):
        clear_endpoint_rate_limit_events()

    def test_health(self):
        response = self.client.get("/v1/health")
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.json(), {"status": "healthy"})

    def test_deadline_status_contract(self):
        response = self.client.post(
            "/v1/deadlines/status",
            json={
                "deadlines": [
                    {"id": "d1", "title": "Essay", "dueDate": _in_days(-2)},
                    {"id": "d2", "title": "Lab report", "due_date": _in_days(3)},
                    {"id": "d3", "title": "Guest lecture", "dueDate": "TBD"},
                ]
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertTrue(body["has_upcoming"])
        self.assertFalse(body["is_finished"])
        self.assertEqual(body["next_deadline"]["id"], "d2")
        self.assertEqual(body["closest_deadline"]["id"], "d2")
        self.assertEqual(body["display"]["text"], "Due in 3 days")
        self.assertEqual(body["display"]["days_until"], 3)
        self.assertFalse(body["display"]["is_urgent"])
        self.assertEqual(body["parsed_count"], 2)
        self.assertEqual([item["id"] for item in body["tbd"]], ["d3"])

    def test_deadline_status_empty(self):
        response = self.client.post("/v1/deadlines/status", json={"deadlines": []})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertIsNone(body["next_deadline"])
        self.assertIsNone(body["closest_deadline"])
        self.assertFalse(body["is_finished"])
        self.assertFalse(body["has_upcoming"])
        self.assertEqual(body["display"]["text"], "No deadlines")

    def test_deadline_display(self):
        response = self.client.post("/v1/deadlines/display", json={"dueDate": _in_days(-1)})
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["text"], "1 day overdue")
        self.assertTrue(body["is_overdue"])

    def test_course_status_contract(self):
        response = self.client.post(
            "/v1/courses/status",
            json={
                "tasks": [
                    {"id": "t1", "completed": True},
                    {"id": "t2", "completed": False},
                    {"id": "t3", "completed": False, "parentTaskId": "t2"},
                ],
                "deadlines": [{"title": "Final project", "dueDate": _in_days(45)}],
            },
        )
        self.assertEqual(response.status_code, 200)
        body = response.json()
        self.assertEqual(body["progress_percentage"], 50)
        self.assertEqual(body["tasks_count"], 2)
        self.assertEqual(body["status"]["status"], "Way Ahead")
        self.assertEqual(body["status"]["color"], "green")
        self.assertEqual(body["status"]["text_class"], "text-green-700")
        self.assertEqual(body["status"]["bg_class"], "bg-green-50 border-green-200")
        self.assertEqual(body["subtitle"], "Final project")

    def test_course_status_rejects_out_of_range_progress(self):
        response = self.client.post("/v1/courses/status", json={"progress_percentage": 120})
        self.assertEqual(response.status_code, 422)

    def test_resume_analyze_contract(self):
        response = self.client.post("/v1/resume/analyze", json=self.resume_payload)
        self.assertEqual(response.status_code, 200)
        body = response.json()

        self.assertEqual(body["match_score"], 29)
        self.assertIn("react", body["matched_keywords"])
        self.assertIn("graphql", body["missing_keywords"])
        self.assertEqual(body["seniority_cues"], ["senior"])
        self.assertEqual(len(body["recommendations"]), 5)
        self.assertIn("senior, frontend, engineer", body["recommendations"][1])
        self.assertTrue(body["extracted_resume_preview"].startswith("Built React"))
        self.assertEqual(body["telemetry"]["model"], "fallback")

    def test_resume_analyze_requires_job_description(self):
        payload = dict(self.resume_payload, job_description="<p> </p>")
        response = self.client.post("/v1/resume/analyze", json=payload)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Job description is required.")

    def test_resume_analyze_requires_resume_text(self):
        payload = dict(self.resume_payload, resume_text="   ")
        response = self.client.post("/v1/resume/analyze", json=payload)
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json()["detail"], "Resume text is required.")

    def test_resume_analyze_rate_limit_returns_429(self):
        status_codes = []
        for _ in range(7):
            response = self.client.post("/v1/resume/analyze", json=self.resume_payload)
            status_codes.append(response.status_code)
        self.assertIn(429, status_codes)
        self.assertEqual(status_codes[:5], [200] * 5)
        limited = self.client.post("/v1/resume/analyze", json=self.resume_payload)
        self.assertIn("Rate limit exceeded", limited.json()["detail"])
        self.assertIn("Retry-After", limited.headers)


if __name__ == "__main__":
    unittest.main()
