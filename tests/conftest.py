import pytest
from app import create_app
from config import TestingConfig
from questions.assessment_questions import QUESTIONS


@pytest.fixture
def app():
    return create_app(TestingConfig)


@pytest.fixture
def client(app):
    return app.test_client()


def _build_answers(likert_answer, choice_index=0, prefixes=("psych", "tech", "wiscar")):
    """Answer every question in the given categories: likert_answer for likert questions, the option at choice_index otherwise."""
    answers = {}
    for question in QUESTIONS:
        if not question['id'].startswith(prefixes):
            continue
        if question['type'] == 'likert':
            answers[question['id']] = likert_answer
        else:
            answers[question['id']] = question['options'][choice_index]
    return answers


@pytest.fixture
def build_answers():
    return _build_answers
