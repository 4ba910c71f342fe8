# routes/assessment.py
import logging
from flask import Blueprint, request, jsonify, session
from models.score_report import ScoreReport
from services.assessment_service import AssessmentService

logger = logging.getLogger(__name__)

assessment_bp = Blueprint('assessment_bp', __name__)
service = AssessmentService()

ANSWERS_KEY = 'assessment_answers'
CURRENT_KEY = 'current_question'
RESULTS_KEY = 'assessment_results'


# Session helpers, shared with the page routes
def ensure_session_keys():
    if ANSWERS_KEY not in session:
        session[ANSWERS_KEY] = {}
    if CURRENT_KEY not in session:
        session[CURRENT_KEY] = 0
    session.modified = True


def reset_assessment():
    session[ANSWERS_KEY] = {}
    session[CURRENT_KEY] = 0
    session.pop(RESULTS_KEY, None)
    session.modified = True


def get_answers():
    return dict(session.get(ANSWERS_KEY, {}))


def get_current_index():
    index = session.get(CURRENT_KEY, 0)
    return min(max(index, 0), service.total - 1)


def get_stored_report():
    return ScoreReport.from_dict(session.get(RESULTS_KEY))


def save_answer(question_id, answer):
    answers = service.record_answer(get_answers(), question_id, answer)
    session[ANSWERS_KEY] = answers
    session.modified = True
    return answers


def advance():
    """
    Move past the current question. Returns the stored ScoreReport when the
    last question was just completed, otherwise None.
    """
    answers = get_answers()
    next_index = service.next_index(answers, get_current_index())
    if next_index is None:
        report = service.complete(answers)
        session[RESULTS_KEY] = report.to_dict()
        session.modified = True
        return report
    session[CURRENT_KEY] = next_index
    session.modified = True
    return None


def go_back():
    session[CURRENT_KEY] = service.previous_index(get_current_index())
    session.modified = True


def _current_state():
    index = get_current_index()
    question = service.get_question(index)
    answers = get_answers()
    return {
        "success": True,
        "question": service.prepare_question_for_client(question, index),
        "current_answer": answers.get(question['id'], ""),
        "can_advance": service.can_advance(answers, index),
        "can_go_back": index > 0,
        "progress": service.get_progress(index),
        "answered": len(answers)
    }


@assessment_bp.route('/start', methods=['POST'])
def start_assessment():
    """
    Initialize (or restart) the assessment session
    """
    try:
        reset_assessment()
        logger.info("Assessment started")
        return jsonify({"success": True, "message": "Assessment started", "total": service.total})
    except Exception as e:
        logger.error(f"Failed to start assessment: {e}")
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/questions', methods=['GET'])
def get_questions():
    try:
        client_questions = [
            service.prepare_question_for_client(q, i)
            for i, q in enumerate(service.get_questions())
        ]
        return jsonify({"success": True, "questions": client_questions})
    except Exception as e:
        logger.error(f"Failed to load questions: {e}")
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/current', methods=['GET'])
def get_current():
    try:
        ensure_session_keys()
        return jsonify(_current_state())
    except Exception as e:
        logger.error(f"Failed to load current question: {e}")
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/answer', methods=['POST'])
def submit_answer():
    """
    Expected payload:
    {
      question_id: 'psych_1',
      answer: 'Agree'
    }
    """
    try:
        ensure_session_keys()
        data = request.get_json(silent=True) or {}
        question_id = data.get('question_id')
        answer = data.get('answer')

        if question_id is None or answer is None:
            return jsonify({"error": "Missing question_id or answer"}), 400

        save_answer(question_id, answer)
        return jsonify(_current_state())
    except Exception as e:
        logger.error(f"Failed to record answer: {e}")
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/next', methods=['POST'])
def next_question():
    try:
        ensure_session_keys()
        report = advance()
        if report is not None:
            return jsonify({
                "success": True,
                "completed": True,
                "results": report.to_dict(),
                "message": "Assessment completed successfully"
            })
        state = _current_state()
        state["completed"] = False
        return jsonify(state)
    except Exception as e:
        logger.error(f"Failed to advance: {e}")
        return jsonify({"error": str(e)}), 400


@assessment_bp.route('/previous', methods=['POST'])
def previous_question():
    try:
        ensure_session_keys()
        go_back()
        return jsonify(_current_state())
    except Exception as e:
        logger.error(f"Failed to go back: {e}")
        return jsonify({"error": str(e)}), 400
