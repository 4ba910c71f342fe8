# tests/test_scoring_service.py
import pytest
from services.scoring_service import ScoringService, round_half_up

scoring = ScoringService()


# --- score_answer ---
@pytest.mark.parametrize("answer, expected", [
    ("Strongly Agree", 5),
    ("Agree", 4),
    ("Neutral", 3),
    ("Disagree", 2),
    ("Strongly Disagree", 1),
])
def test_score_answer_agreement_phrases(answer, expected):
    assert scoring.score_answer(answer) == expected


def test_score_answer_longer_phrase_wins():
    """'Strongly Disagree' contains 'Disagree' but must score as the stronger phrase."""
    assert scoring.score_answer("Strongly Disagree") == 1
    assert scoring.score_answer("Strongly Agree") == 5


@pytest.mark.parametrize("answer", ["$1,440", "VLOOKUP", "Split the order", "Data analysis aspects", ""])
def test_score_answer_multiple_choice_defaults_to_three(answer):
    assert scoring.score_answer(answer) == 3


def test_score_answer_is_case_sensitive():
    assert scoring.score_answer("strongly agree") == 3


# --- calculate_section_score ---
def test_section_score_no_answers_is_zero():
    assert scoring.calculate_section_score({}, "psych") == 0
    assert scoring.calculate_section_score({"tech_1": "$1,440"}, "psych") == 0


def test_section_score_all_strongly_agree_is_100(build_answers):
    answers = build_answers("Strongly Agree", prefixes=("psych",))
    assert scoring.calculate_section_score(answers, "psych") == 100


def test_section_score_all_strongly_disagree_is_20(build_answers):
    answers = build_answers("Strongly Disagree", prefixes=("psych",))
    assert scoring.calculate_section_score(answers, "psych") == 20


def test_section_score_only_counts_matching_prefix():
    answers = {"psych_1": "Agree", "psych_2": "Strongly Agree", "wiscar_1": "Strongly Disagree"}
    # (4 + 5) / 10 -> 90
    assert scoring.calculate_section_score(answers, "psych") == 90


def test_section_score_partial_answers():
    answers = {"psych_1": "Neutral", "psych_2": "Disagree", "psych_3": "Agree"}
    # 9 / 15 -> 60
    assert scoring.calculate_section_score(answers, "psych") == 60


def test_section_score_multiple_choice_category_is_60(build_answers):
    for choice_index in range(4):
        answers = build_answers("Agree", choice_index=choice_index, prefixes=("tech",))
        assert scoring.calculate_section_score(answers, "tech") == 60


# --- calculate_results ---
def test_results_empty_answers():
    report = scoring.calculate_results({})
    assert (report.overall, report.psychometric, report.technical, report.wiscar) == (0, 0, 0, 0)
    assert report.recommendation == "May want to explore alternative career paths"


def test_results_end_to_end_scenario(build_answers):
    answers = {}
    answers.update(build_answers("Agree", prefixes=("psych",)))
    answers.update(build_answers("Agree", choice_index=2, prefixes=("tech",)))
    answers.update(build_answers("Neutral", prefixes=("wiscar",)))

    report = scoring.calculate_results(answers)

    assert report.psychometric == 80
    assert report.technical == 60
    assert report.wiscar == 60
    assert report.overall == 67
    assert report.recommendation == "Moderate fit - Consider with training"


def test_results_overall_is_unweighted_mean():
    answers = {
        "psych_1": "Strongly Agree",
        "tech_1": "$1,440",
        "wiscar_1": "Agree",
    }
    report = scoring.calculate_results(answers)
    assert (report.psychometric, report.technical, report.wiscar) == (100, 60, 80)
    assert report.overall == 80
    assert report.recommendation == "Excellent fit - Highly recommended"


def test_results_all_strongly_agree(build_answers):
    report = scoring.calculate_results(build_answers("Strongly Agree"))
    assert report.psychometric == 100
    assert report.technical == 60
    # four likert at 5 plus one multiple choice at 3 -> 23 / 25
    assert report.wiscar == 92
    assert report.overall == 84


# --- recommendation banding ---
@pytest.mark.parametrize("score, band, recommendation", [
    (100, "excellent", "Excellent fit - Highly recommended"),
    (80, "excellent", "Excellent fit - Highly recommended"),
    (79, "good", "Good fit - Recommended with skill development"),
    (70, "good", "Good fit - Recommended with skill development"),
    (69, "moderate", "Moderate fit - Consider with training"),
    (60, "moderate", "Moderate fit - Consider with training"),
    (59, "explore", "May want to explore alternative career paths"),
    (0, "explore", "May want to explore alternative career paths"),
])
def test_band_boundaries(score, band, recommendation):
    assert scoring.get_score_band(score) == band
    assert scoring.get_recommendation(score) == recommendation


def test_round_half_up():
    assert round_half_up(62.5) == 63
    assert round_half_up(66.66) == 67
    assert round_half_up(0.4) == 0
