"""Shared fixtures for the resume optimizer tests."""
import os

import pytest

# Keep the cache disabled so tests never touch Redis.
os.environ.pop("RESUME_OPTIMIZER_REDIS_URL", None)

from app.services.optimizer import ResumeOptimizer


SAMPLE_RESUME = "Summary\nI build things.\n- built a dashboard\nSkills\npython, sql"

ENGINEER_RESUME = (
    "Summary\n"
    "Python developer building data pipelines.\n"
    "Experience\n"
    "- Built ETL jobs in python...\n"
    "* automated reports..\n"
    "Education\n"
    "BSc"
)


@pytest.fixture
def optimizer():
    return ResumeOptimizer()


@pytest.fixture
def sample_resume():
    return SAMPLE_RESUME


@pytest.fixture
def engineer_resume():
    return ENGINEER_RESUME
