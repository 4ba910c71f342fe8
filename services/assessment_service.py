# services/assessment_service.py
import logging
from copy import deepcopy
from questions.assessment_questions import QUESTIONS, LIKERT_OPTIONS
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)


class AssessmentService:
    """
    Linear question-by-question navigation over the question catalog.

    State (the answer set and the current index) is owned by the caller,
    normally the Flask session; every method takes it explicitly.
    """

    def __init__(self, questions=None, scoring_service=None):
        # Load static question set once
        self.questions = deepcopy(questions if questions is not None else QUESTIONS)
        self.question_lookup = {q['id']: q for q in self.questions}
        self.scoring_service = scoring_service or ScoringService()

    # -------------------------
    # Catalog
    # -------------------------
    @property
    def total(self):
        return len(self.questions)

    def get_questions(self):
        """Return all questions (safe to send to client)."""
        return deepcopy(self.questions)

    def get_question(self, index):
        if index < 0 or index >= self.total:
            raise ValueError(f"Question index {index} is out of range")
        return self.questions[index]

    def get_options(self, question):
        if question.get('type') == 'likert':
            return list(LIKERT_OPTIONS)
        return list(question.get('options', []))

    def get_progress(self, index):
        return (index + 1) / self.total * 100

    # -------------------------
    # Navigation
    # -------------------------
    def record_answer(self, answers, question_id, answer):
        """Store (or overwrite) the answer text for question_id."""
        if question_id not in self.question_lookup:
            raise ValueError(f"Unknown question id: {question_id}")
        if not isinstance(answer, str) or not answer:
            raise ValueError("Missing answer")
        answers[question_id] = answer
        return answers

    def can_advance(self, answers, index):
        question = self.get_question(index)
        return bool((answers or {}).get(question['id']))

    def is_last(self, index):
        return index >= self.total - 1

    def next_index(self, answers, index):
        """
        Index of the following question, or None when index is the last
        question and the assessment is complete.
        """
        if not self.can_advance(answers, index):
            raise ValueError("Please answer the current question before continuing")
        if self.is_last(index):
            return None
        return index + 1

    def previous_index(self, index):
        return max(index - 1, 0)

    def complete(self, answers):
        logger.info(f"Assessment completed with {len(answers or {})} of {self.total} answers")
        return self.scoring_service.calculate_results(answers)

    # -------------------------
    # Utilities for transport
    # -------------------------
    def prepare_question_for_client(self, question, index=None):
        """
        Client payload for a question: prompt, resolved options and its
        position in the assessment.
        """
        if index is None:
            index = self.questions.index(question)
        q = {
            'id': question.get('id'),
            'type': question.get('type'),
            'section': question.get('section'),
            'question': question.get('question'),
            'options': self.get_options(question),
            'number': index + 1,
            'total': self.total,
            'is_last': self.is_last(index)
        }
        if question.get('context'):
            q['context'] = question.get('context')
        return q
