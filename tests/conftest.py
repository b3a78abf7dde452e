"""
Pytest configuration and shared fixtures for Exam Guard tests.

Testing Standards:
- All async tests use pytest.mark.asyncio (auto mode enabled in pyproject.toml)
- Use AsyncMock for async function mocking
- Unit tests go in tests/unit/
- Integration tests go in tests/integration/
- The clock is frozen at T = 2025-04-08 09:00 UTC unless a test moves it
"""

import pytest

from examguard.application.activities.quiz import QuizActivityAdapter
from examguard.bootstrap.container import (
    InMemoryContainer,
    build_in_memory_container,
    reset_examguard_container,
)
from examguard.config.examguard_config import ExamGuardConfig
from tests.helpers import TEACHER_ID, FakeTimeAuthority, make_quiz


@pytest.fixture
def anyio_backend() -> str:
    """Use asyncio as the async backend."""
    return "asyncio"


@pytest.fixture
def project_version() -> str:
    """Provide the current project version for tests."""
    from examguard import __version__

    return __version__


@pytest.fixture
def fake_time() -> FakeTimeAuthority:
    """Clock frozen at T."""
    return FakeTimeAuthority()


@pytest.fixture
def examguard_config() -> ExamGuardConfig:
    """Default settings: 300 minute exams, 10 minute buffer."""
    return ExamGuardConfig()


@pytest.fixture
def container(
    fake_time: FakeTimeAuthority, examguard_config: ExamGuardConfig
) -> InMemoryContainer:
    """Fresh in-memory wiring with a teacher allowed to manage the quiz."""
    built = build_in_memory_container(examguard_config, fake_time)
    quiz = make_quiz()
    built.catalog.add(quiz)
    built.authorization.grant(quiz.context_id, TEACHER_ID, "mod/quiz:manageoverrides")
    return built


@pytest.fixture
def quiz_adapter(container: InMemoryContainer) -> QuizActivityAdapter:
    """Adapter over the default quiz of the container."""
    return QuizActivityAdapter(
        make_quiz(),
        container.store,
        container.ledger,
        container.time_authority,
        container.config,
    )


@pytest.fixture(autouse=True)
def _reset_shared_container() -> None:
    """Keep the bootstrap singleton out of test-to-test state."""
    reset_examguard_container()
