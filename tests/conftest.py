from typing import List

import pytest

from lms.console import Console
from lms.main import LMSApplication
from lms.services import AdminService, LMSContext, StudentService, TeacherService


class ScriptedConsole(Console):
    """Console fed from a list of answers; everything printed is kept."""

    def __init__(self, answers):
        self.answers: List[str] = list(answers)
        self.prompts: List[str] = []
        self.output: List[str] = []
        super().__init__(self._next_answer, self.output.append)

    def _next_answer(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if not self.answers:
            raise EOFError
        return self.answers.pop(0)

    @property
    def text(self) -> str:
        return "\n".join(self.output)


@pytest.fixture
def context() -> LMSContext:
    """Registries seeded with the default courses and users."""
    return LMSApplication().context


@pytest.fixture
def empty_context() -> LMSContext:
    return LMSContext()


@pytest.fixture
def admin_service(context):
    return AdminService(context)


@pytest.fixture
def teacher_service(context):
    return TeacherService(context)


@pytest.fixture
def student_service(context):
    return StudentService(context)


@pytest.fixture
def teacher1(context):
    return context.users.find_by_email("teacher1@example.com")


@pytest.fixture
def make_console():
    def build(*answers: str) -> ScriptedConsole:
        return ScriptedConsole(answers)
    return build
