# services/recommendation_service.py
import logging
from typing import Dict, List
from services.scoring_service import ScoringService

logger = logging.getLogger(__name__)

JOB_ROLES = {
    "excellent": [
        {"title": "Procurement Analyst", "match": "95%", "description": "Perfect fit for analytical procurement work"},
        {"title": "Category Manager", "match": "90%", "description": "Strategic sourcing and category management"},
        {"title": "Vendor Risk Analyst", "match": "85%", "description": "Compliance and risk assessment focus"}
    ],
    "good": [
        {"title": "Procurement Coordinator", "match": "85%", "description": "Entry-level procurement support role"},
        {"title": "Contract Administrator", "match": "80%", "description": "Contract management and documentation"},
        {"title": "Purchasing Assistant", "match": "75%", "description": "Support purchasing operations"}
    ],
    "alternative": [
        {"title": "Operations Analyst", "match": "70%", "description": "Broader operational analysis role"},
        {"title": "Inventory Coordinator", "match": "65%", "description": "Focus on inventory management"},
        {"title": "Project Support Specialist", "match": "60%", "description": "Structured project support work"}
    ]
}

LEARNING_PATHS = {
    "excellent": [
        "Advanced Excel & Data Analysis",
        "Strategic Sourcing Fundamentals",
        "Contract Negotiation Skills",
        "Supply Chain Risk Management"
    ],
    "good": [
        "Procurement Basics & Lifecycle",
        "Excel Intermediate Skills",
        "Vendor Evaluation Methods",
        "Basic Contract Management"
    ],
    "alternative": [
        "Business Analysis Fundamentals",
        "Excel Beginner to Intermediate",
        "Project Management Basics",
        "Communication & Documentation Skills"
    ]
}

SUMMARIES = {
    "excellent": "Excellent! You show strong potential for a career in procurement analysis.",
    "good": "Good foundation! With some skill development, you'd be well-suited for this field.",
    "moderate": "Moderate potential. Consider additional training to strengthen your readiness.",
    "explore": "You might want to explore other career paths that better match your interests and strengths."
}

# Job roles and learning paths only distinguish three tiers
TIER_FOR_BAND = {
    "excellent": "excellent",
    "good": "good",
    "moderate": "alternative",
    "explore": "alternative"
}

CATEGORY_DETAILS = [
    ("psychometric", "Psychometric Fit", "Personality traits and work preferences alignment"),
    ("technical", "Technical Skills", "Analytical abilities and domain knowledge"),
    ("wiscar", "Career Readiness", "Motivation and learning orientation")
]


class RecommendationService:
    """
    Static, score-banded guidance for the results page: job roles, a learning
    path, a summary sentence and a status colour per score.
    """

    def __init__(self, scoring_service: ScoringService = None):
        self.scoring_service = scoring_service or ScoringService()

    def _tier(self, score: int) -> str:
        return TIER_FOR_BAND[self.scoring_service.get_score_band(score)]

    def get_job_roles(self, score: int) -> List[Dict[str, str]]:
        return [dict(role) for role in JOB_ROLES[self._tier(score)]]

    def get_learning_path(self, score: int) -> List[str]:
        return list(LEARNING_PATHS[self._tier(score)])

    def get_summary(self, score: int) -> str:
        return SUMMARIES[self.scoring_service.get_score_band(score)]

    def get_score_status(self, score: int) -> str:
        """Badge colour: success, warning or destructive."""
        if score >= 80:
            return "success"
        if score >= 70:
            return "warning"
        return "destructive"

    def build_results_view(self, report) -> Dict:
        """Everything the results page shows for a ScoreReport."""
        categories = []
        for key, title, description in CATEGORY_DETAILS:
            score = getattr(report, key)
            categories.append({
                "key": key,
                "title": title,
                "description": description,
                "score": score,
                "status": self.get_score_status(score)
            })

        view = {
            "scores": report.to_dict(),
            "overall_status": self.get_score_status(report.overall),
            "summary": self.get_summary(report.overall),
            "categories": categories,
            "job_roles": self.get_job_roles(report.overall),
            "learning_path": self.get_learning_path(report.overall)
        }
        logger.debug(f"Built results view for overall score {report.overall}")
        return view
