# services/scoring_service.py
import logging
import math
from models.score_report import ScoreReport
from questions.assessment_questions import CATEGORY_PREFIXES

logger = logging.getLogger(__name__)

# Checked in order; a longer phrase must come before any shorter phrase it contains
AGREEMENT_POINTS = [
    ("Strongly Agree", 5),
    ("Strongly Disagree", 1),
    ("Agree", 4),
    ("Neutral", 3),
    ("Disagree", 2)
]

# Multiple-choice answers carry no agreement phrase
DEFAULT_POINTS = 3
MAX_POINTS = 5

# (lower bound, band, recommendation), highest first
SCORE_BANDS = [
    (80, "excellent", "Excellent fit - Highly recommended"),
    (70, "good", "Good fit - Recommended with skill development"),
    (60, "moderate", "Moderate fit - Consider with training"),
    (0, "explore", "May want to explore alternative career paths")
]


def round_half_up(value):
    """Round .5 upward, the way browsers round scores."""
    return int(math.floor(value + 0.5))


class ScoringService:
    """
    Scores an answer set (question id -> chosen option text).

    Each answer is worth 1-5 points depending on the agreement phrase it
    contains; category scores are the percentage of the maximum possible
    points, and the overall score is the plain mean of the three categories.
    """

    def __init__(self, category_prefixes=None):
        self.category_prefixes = dict(category_prefixes or CATEGORY_PREFIXES)

    def score_answer(self, answer):
        """Point value of a single answer text."""
        for phrase, points in AGREEMENT_POINTS:
            if phrase in answer:
                return points
        return DEFAULT_POINTS

    def calculate_section_score(self, answers, prefix):
        """
        Percentage score (0-100) for the answers whose question id starts
        with prefix. A category with no answers scores 0.
        """
        section_answers = [
            answer for question_id, answer in (answers or {}).items()
            if question_id.startswith(prefix)
        ]
        if not section_answers:
            return 0

        total = sum(self.score_answer(answer) for answer in section_answers)
        score = round_half_up(total / (len(section_answers) * MAX_POINTS) * 100)
        logger.debug(f"Section '{prefix}': {len(section_answers)} answers, {total} points -> {score}%")
        return score

    def calculate_results(self, answers):
        """Build the ScoreReport for a full or partial answer set."""
        category_scores = {
            category: self.calculate_section_score(answers, prefix)
            for category, prefix in self.category_prefixes.items()
        }
        overall = round_half_up(sum(category_scores.values()) / len(category_scores))

        report = ScoreReport({
            'overall': overall,
            'recommendation': self.get_recommendation(overall),
            **category_scores
        })
        logger.info(f"Assessment scored: {report}")
        return report

    def get_score_band(self, score):
        for lower_bound, band, _ in SCORE_BANDS:
            if score >= lower_bound:
                return band
        return SCORE_BANDS[-1][1]

    def get_recommendation(self, score):
        for lower_bound, _, recommendation in SCORE_BANDS:
            if score >= lower_bound:
                return recommendation
        return SCORE_BANDS[-1][2]
