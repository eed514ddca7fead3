"""API tests for the application endpoints."""

import pytest
from fastapi.testclient import TestClient

from conftest import FailingApplicationRepository
from domain.entities import Application
from main import app
from presentation.api.v1.dependencies import (
    get_application_repository,
    get_notification_task,
    get_reviewer_repository,
    get_student_repository,
    get_teacher_repository,
)

REVIEWER = {"x-caller-id": "9001"}
OWNER = {"x-caller-id": "2016011001", "x-access-id": "2016011001"}
OTHER_APPLICANT = {"x-caller-id": "2015011002", "x-access-id": "2015011002"}


@pytest.fixture
def notifications():
    """Fixture collecting scheduled notification tasks."""
    return []


@pytest.fixture
def client(application_repository, students, teachers, reviewers, notifications):
    """Fixture for a test client backed by in-memory stores."""
    async def record(application, body, created):
        notifications.append((application.id, body, created))

    app.dependency_overrides[get_application_repository] = lambda: application_repository
    app.dependency_overrides[get_student_repository] = lambda: students
    app.dependency_overrides[get_teacher_repository] = lambda: teachers
    app.dependency_overrides[get_reviewer_repository] = lambda: reviewers
    app.dependency_overrides[get_notification_task] = lambda: record
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestSubmit:
    """Test POST /applications."""

    def test_created_with_location(self, client, scholarship_body, notifications):
        response = client.post("/applications", json=scholarship_body, headers=REVIEWER)

        assert response.status_code == 201
        assert response.headers["location"].endswith("/applications/1")
        assert notifications[0][0] == 1
        assert notifications[0][2] is True

    def test_duplicate_points_to_existing(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        response = client.post("/applications", json=scholarship_body, headers=REVIEWER)

        assert response.status_code == 409
        assert response.headers["location"].endswith("/applications/1")
        assert response.text.startswith("409 Conflict")

    def test_missing_year(self, client):
        response = client.post("/applications", json={"applicantId": 1}, headers=REVIEWER)
        assert response.status_code == 422
        assert response.headers["content-type"].startswith("text/plain")

    def test_anonymous_caller(self, client, scholarship_body):
        response = client.post("/applications", json=scholarship_body)
        assert response.status_code == 401
        assert response.text.startswith("401 Unauthorized")

    def test_read_only_teacher_cannot_submit(self, client, scholarship_body):
        response = client.post("/applications", json=scholarship_body, headers={"x-caller-id": "1003"})
        assert response.status_code == 401


class TestReadAndAmend:
    """Test GET, PUT and DELETE on applications."""

    def test_get_projection(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        response = client.get("/applications/1", params={"applicationType": "scholarship"}, headers=REVIEWER)

        assert response.status_code == 200
        body = response.json()
        assert body["applicantId"] == 2016011001
        assert "honor" not in body

    def test_self_access(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        headers = {"x-caller-id": "2016011001", "x-access-id": "2016011001"}
        assert client.get("/applications/1", headers=headers).status_code == 200

    def test_get_missing(self, client):
        response = client.get("/applications/99", headers=REVIEWER)
        assert response.status_code == 404
        assert response.text == "404 Not Found: Application does not exist."

    def test_list_by_grade(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        response = client.get("/applications", params={"applicantGrade": "6"}, headers=REVIEWER)
        assert [row["class"] for row in response.json()] == ["无61"]
        assert client.get("/applications", params={"applicantGrade": "5"}, headers=REVIEWER).json() == []

    def test_amend_status(self, client, scholarship_body, notifications):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        patch = {"scholarship": {"status": {"学业进步奖学金": "已通过"}}}

        response = client.put("/applications/1", json=patch, headers=REVIEWER)

        assert response.status_code == 204
        assert notifications[-1] == (1, patch, False)
        stored = client.get("/applications/1", headers=REVIEWER).json()
        assert stored["scholarship"]["status"] == {"学业进步奖学金": "已通过"}
        assert len(stored["scholarship"]["contents"]) == 2

    def test_amend_missing_creates(self, client, notifications):
        response = client.put("/applications/5", json={"applicantId": 1, "year": 2018, "honor": {"status": {"a": "b"}}}, headers=REVIEWER)
        assert response.status_code == 201
        assert "location" in response.headers
        assert notifications == []

    def test_delete(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        assert client.delete("/applications/1", headers=REVIEWER).status_code == 204
        assert client.delete("/applications/1", headers=REVIEWER).status_code == 404


class TestDocuments:
    """Test the document download endpoints."""

    def test_missing_queries(self, client):
        response = client.get("/thank-letters", params={"type": "scholarship"}, headers=REVIEWER)
        assert response.status_code == 422
        assert response.text.startswith("422 ")
        assert response.text.endswith(": Missing queries.")

    def test_single_letter(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        response = client.get(
            "/thank-letters",
            params={"type": "scholarship", "title": "综合优秀奖学金", "id": 1},
            headers=REVIEWER,
        )
        assert response.status_code == 200
        assert response.headers["content-type"] == "application/pdf"
        assert "filename*=UTF-8''" in response.headers["content-disposition"]
        assert response.content.startswith(b"%PDF")


class TestSelfAccess:
    """Test applicants acting on records through self-access."""

    def test_owner_reads_and_amends(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)

        assert client.get("/applications/1", headers=OWNER).status_code == 200
        patch = {"honor": {"contents": {"优秀学生": {"content": "x"}}}}
        assert client.put("/applications/1", json=patch, headers=OWNER).status_code == 204

    def test_other_applicant_is_refused(self, client, scholarship_body):
        """Test that self-access on another applicant's record fails for every method."""
        client.post("/applications", json=scholarship_body, headers=REVIEWER)

        assert client.get("/applications/1", headers=OTHER_APPLICANT).status_code == 401
        patch = {"scholarship": {"status": {"综合优秀奖学金": "未通过"}}}
        assert client.put("/applications/1", json=patch, headers=OTHER_APPLICANT).status_code == 401
        assert client.delete("/applications/1", headers=OTHER_APPLICANT).status_code == 401

        stored = client.get("/applications/1", headers=REVIEWER).json()
        assert stored["scholarship"]["status"] == {"综合优秀奖学金": "已通过"}

    def test_owner_cannot_delete(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        assert client.delete("/applications/1", headers=OWNER).status_code == 401
        assert client.get("/applications/1", headers=REVIEWER).status_code == 200

    def test_listing_is_limited_to_own_records(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)

        assert client.get("/applications", headers=OTHER_APPLICANT).json() == []
        rows = client.get("/applications", params={"applicantId": 2016011001}, headers=OTHER_APPLICANT).json()
        assert rows == []
        assert [row["id"] for row in client.get("/applications", headers=OWNER).json()] == [1]

    def test_documents_need_read_capability(self, client, scholarship_body):
        client.post("/applications", json=scholarship_body, headers=REVIEWER)
        params = {"type": "scholarship", "title": "综合优秀奖学金", "id": 1}
        assert client.get("/thank-letters", params=params, headers=OWNER).status_code == 401
        assert client.get("/e-forms", params=params, headers=OWNER).status_code == 401


class TestStoreFailures:
    """Test responses when the store rejects a write."""

    def test_failed_create(self, client, scholarship_body, notifications):
        """Test that a failed write is a plain-text 500 and nobody is notified."""
        app.dependency_overrides[get_application_repository] = FailingApplicationRepository

        response = client.post("/applications", json=scholarship_body, headers=REVIEWER)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert response.text == "500 Internal Server Error: Failed to create application."
        assert notifications == []

    def test_failed_update(self, client, scholarship_body, notifications):
        repository = FailingApplicationRepository()
        repository.records[1] = Application.from_document(scholarship_body, id=1)
        app.dependency_overrides[get_application_repository] = lambda: repository

        response = client.put("/applications/1", json={"honor": {"status": {"a": "b"}}}, headers=REVIEWER)

        assert response.status_code == 500
        assert response.headers["content-type"].startswith("text/plain")
        assert notifications == []


class TestMentorCounter:
    """Test the mentor counter across requests."""

    def test_counted_on_submission_only(self, client, mentor_body, teachers, notifications):
        """Test that a later honor amendment does not count the mentor again."""
        client.post("/applications", json=mentor_body, headers=REVIEWER)
        response = client.put("/applications/1", json={"honor": {"status": {"优秀学生": "已通过"}}}, headers=REVIEWER)

        assert response.status_code == 204
        assert teachers.teachers[1001].total_applications == 1
        assert [created for _, _, created in notifications] == [True, False]


class TestHealth:
    def test_reports_service(self, client):
        body = client.get("/health").json()
        assert body["status"] == "healthy"
        assert body["name"] == "Department Benefit Applications"
