"""Pytest configuration and shared fixtures."""

import copy
from pathlib import Path
from typing import Any, Mapping, Optional

import pytest

from application.interfaces import IArchiver, IAttachmentStore, ILetterRenderer, IMailSender
from domain.entities import Application, Reviewer, Student, Teacher
from domain.repositories import (
    IApplicationRepository,
    IReviewerRepository,
    IStudentRepository,
    ITeacherRepository,
)
from domain.value_objects import ThankLetter


class InMemoryApplicationRepository(IApplicationRepository):
    """Application store keeping deep copies, like a real document store."""

    def __init__(self):
        self.records: dict[int, Application] = {}
        self._next_id = 1

    async def create(self, application: Application) -> Application:
        application = copy.deepcopy(application)
        application.id = self._next_id
        self._next_id += 1
        self.records[application.id] = application
        return copy.deepcopy(application)

    async def get_by_id(self, application_id: int) -> Optional[Application]:
        application = self.records.get(application_id)
        return copy.deepcopy(application) if application else None

    async def get_by_applicant_and_year(self, applicant_id: int, year: int) -> Optional[Application]:
        for application in self.records.values():
            if application.applicant_id == applicant_id and application.year == year:
                return copy.deepcopy(application)
        return None

    async def find(self, filters=None, skip: int = 0, limit=None) -> list[Application]:
        fields = {"applicantId": "applicant_id", "applicantName": "applicant_name", "year": "year"}
        matching = [
            copy.deepcopy(application)
            for _, application in sorted(self.records.items())
            if all(getattr(application, fields[key]) == value for key, value in (filters or {}).items())
        ]
        return matching[skip:] if limit is None else matching[skip:skip + limit]

    async def update(self, application: Application) -> Application:
        if application.id not in self.records:
            raise ValueError(f"Application {application.id} not found")
        self.records[application.id] = copy.deepcopy(application)
        return copy.deepcopy(application)

    async def delete(self, application_id: int) -> bool:
        return self.records.pop(application_id, None) is not None


class FailingApplicationRepository(InMemoryApplicationRepository):
    """Store whose writes fail, like a lost database connection."""

    async def create(self, application: Application) -> Application:
        raise ConnectionError("database unavailable")

    async def update(self, application: Application) -> Application:
        raise ConnectionError("database unavailable")


class InMemoryStudentRepository(IStudentRepository):
    def __init__(self, *students: Student):
        self.students = {student.id: student for student in students}

    async def get_by_id(self, student_id: int) -> Optional[Student]:
        return self.students.get(student_id)


class InMemoryTeacherRepository(ITeacherRepository):
    def __init__(self, *teachers: Teacher):
        self.teachers = {teacher.id: teacher for teacher in teachers}

    async def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self.teachers.get(teacher_id)

    async def get_by_name(self, name: str) -> Optional[Teacher]:
        return next((teacher for teacher in self.teachers.values() if teacher.name == name), None)

    async def update(self, teacher: Teacher) -> Teacher:
        self.teachers[teacher.id] = teacher
        return teacher


class InMemoryReviewerRepository(IReviewerRepository):
    def __init__(self, *reviewers: Reviewer):
        self.reviewers = {reviewer.id: reviewer for reviewer in reviewers}

    async def get_by_id(self, reviewer_id: int) -> Optional[Reviewer]:
        return self.reviewers.get(reviewer_id)


class RecordingMailSender(IMailSender):
    """Mail transport that records messages instead of sending them."""

    def __init__(self, succeeds: bool = True):
        self.sent: list[dict[str, Any]] = []
        self.succeeds = succeeds

    def send(self, to: str, subject: str, text: str, html: Optional[str] = None) -> bool:
        self.sent.append({"to": to, "subject": subject, "text": text, "html": html})
        return self.succeeds


class FakeLetterRenderer(ILetterRenderer):
    """Renders letters as their title; titles in ``failing`` raise."""

    def __init__(self, failing: tuple[str, ...] = ()):
        self.failing = failing
        self.rendered: list[ThankLetter] = []

    def render(self, letter: ThankLetter) -> bytes:
        if letter.title in self.failing:
            raise RuntimeError(f"cannot render {letter.title}")
        self.rendered.append(letter)
        return f"%PDF {letter.title}".encode("utf-8")

    def generate(self, letter: ThankLetter, output_path: Path) -> str:
        Path(output_path).write_bytes(self.render(letter))
        return str(output_path)


class RecordingArchiver(IArchiver):
    """Archives entries as a sorted name listing and remembers what it saw."""

    def __init__(self):
        self.entries: dict[str, bytes] = {}
        self.directories: list[Path] = []

    def archive(self, entries: Mapping[str, bytes]) -> bytes:
        self.entries = dict(entries)
        return "\n".join(sorted(entries)).encode("utf-8")

    def archive_directory(self, directory: Path) -> bytes:
        self.directories.append(Path(directory))
        return self.archive({path.name: path.read_bytes() for path in Path(directory).iterdir()})


class InMemoryAttachmentStore(IAttachmentStore):
    def __init__(self, files: Optional[dict[str, bytes]] = None):
        self.files = files or {}

    def read(self, filename: str) -> bytes:
        if filename not in self.files:
            raise FileNotFoundError(filename)
        return self.files[filename]


@pytest.fixture
def application_repository():
    """Fixture for an empty application store."""
    return InMemoryApplicationRepository()


@pytest.fixture
def students():
    """Fixture for a grade-6 applicant with contact details and a grade-5 applicant."""
    return InMemoryStudentRepository(
        Student(id=2016011001, name="张三", email="zhangsan@example.com", phone="13800000000", class_name="无61"),
        Student(id=2015011002, name="李四", email="lisi@example.com", class_name="无51"),
    )


@pytest.fixture
def teachers():
    """Fixture for a reachable mentor, a mentor without email and a reviewing teacher."""
    return InMemoryTeacherRepository(
        Teacher(id=1001, name="王老师", email="wang@example.com"),
        Teacher(id=1002, name="赵老师", email=None),
        Teacher(id=1003, name="孙老师", email="sun@example.com", authorizations=["read"]),
    )


@pytest.fixture
def reviewers():
    """Fixture for a reviewer holding both capabilities."""
    return InMemoryReviewerRepository(Reviewer(id=9001, name="审核员", authorizations=["read", "write"]))


@pytest.fixture
def mail_sender():
    return RecordingMailSender()


@pytest.fixture
def scholarship_body():
    """Fixture for a grade-6 scholarship application with two letters."""
    return {
        "applicantId": 2016011001,
        "applicantName": "张三",
        "year": 2018,
        "scholarship": {
            "status": {"综合优秀奖学金": "已通过"},
            "contents": {
                "综合优秀奖学金": {"salutation": "尊敬的捐赠人：", "content": "感谢您的资助。\n我会继续努力。"},
                "学业进步奖学金": {"content": "谢谢。"},
            },
            "attachments": {"综合优秀奖学金": ["a1b2c3.pdf"]},
        },
    }


@pytest.fixture
def mentor_body():
    """Fixture for a mentor application naming a reachable teacher."""
    return {
        "applicantId": 2016011001,
        "applicantName": "张三",
        "year": 2019,
        "mentor": {
            "status": {"王老师": "待审核"},
            "contents": {"statement": "希望得到您的指导。"},
        },
    }
