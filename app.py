from flask import Flask, render_template, request, redirect, url_for
import logging
import os
from config import get_config
from routes.assessment import (
    assessment_bp, service as assessment_service, ensure_session_keys, reset_assessment,
    get_answers, get_current_index, get_stored_report, save_answer, advance, go_back
)
from routes.results import results_bp, recommendation_service

logger = logging.getLogger(__name__)


def create_app(config_class=None):
    app = Flask(__name__, template_folder="templates")
    app.config.from_object(config_class or get_config())

    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s %(levelname)s - %(name)s - %(message)s'
    )

    # Register blueprints
    app.register_blueprint(assessment_bp, url_prefix='/api/assessment')
    app.register_blueprint(results_bp, url_prefix='/api/results')

    register_pages(app)
    return app


def register_pages(app):
    # Main Routes
    @app.route('/')
    def index():
        return render_template('index.html')

    @app.route('/assessment', methods=['GET', 'POST'])
    def assessment():
        if request.method == 'GET' and request.args.get('retake'):
            reset_assessment()
            return redirect(url_for('assessment'))

        ensure_session_keys()
        error = None

        if request.method == 'POST':
            action = request.form.get('action', 'next')
            answer = request.form.get('answer')
            question = assessment_service.get_question(get_current_index())
            try:
                if answer:
                    save_answer(question['id'], answer)
                if action == 'previous':
                    go_back()
                else:
                    if advance() is not None:
                        return redirect(url_for('results'))
                return redirect(url_for('assessment'))
            except ValueError as e:
                error = str(e)

        index = get_current_index()
        question = assessment_service.get_question(index)
        answers = get_answers()
        return render_template(
            'assessment.html',
            question=assessment_service.prepare_question_for_client(question, index),
            current_answer=answers.get(question['id'], ""),
            can_advance=assessment_service.can_advance(answers, index),
            progress=assessment_service.get_progress(index),
            error=error
        ), 400 if error else 200

    @app.route('/results')
    def results():
        report = get_stored_report()
        if report is None:
            return redirect(url_for('index'))
        return render_template('results.html', **recommendation_service.build_results_view(report))

    @app.route('/download-results')
    def download_results():
        # Placeholder for download functionality
        return redirect(url_for('results'))


if __name__ == '__main__':
    app = create_app()
    logger.info(f"✅ Starting {app.config['ASSESSMENT_TITLE']}")

    port = int(os.environ.get('PORT', 5000))
    app.run(debug=app.config['DEBUG'], host='0.0.0.0', port=port)
