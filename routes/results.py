# routes/results.py
import logging
from flask import Blueprint, jsonify
from routes.assessment import get_stored_report
from services.recommendation_service import RecommendationService

logger = logging.getLogger(__name__)

results_bp = Blueprint('results', __name__)
recommendation_service = RecommendationService()


@results_bp.route('/', methods=['GET'])
def get_results():
    """
    Scores, recommendation, job roles and learning path for the completed
    assessment in this session.
    """
    try:
        report = get_stored_report()
        if report is None:
            return jsonify({"error": "Please complete the assessment first"}), 404

        return jsonify({"success": True, **recommendation_service.build_results_view(report)})
    except Exception as e:
        logger.error(f"Failed to build results: {e}")
        return jsonify({"error": str(e)}), 400
