LIKERT_OPTIONS = [
    "Strongly Disagree",
    "Disagree",
    "Neutral",
    "Agree",
    "Strongly Agree"
]

QUESTION_TYPES = ("likert", "multiple-choice", "numerical", "ranking")

# Scored categories, keyed by question id prefix
CATEGORY_PREFIXES = {
    "psychometric": "psych",
    "technical": "tech",
    "wiscar": "wiscar"
}

QUESTIONS = [
    # Psychometric Evaluation
    {
        "id": "psych_1",
        "type": "likert",
        "section": "Psychometric Evaluation",
        "question": "I enjoy working with contracts, data, and vendor terms."
    },
    {
        "id": "psych_2",
        "type": "likert",
        "section": "Psychometric Evaluation",
        "question": "I prefer structured, detail-oriented work environments."
    },
    {
        "id": "psych_3",
        "type": "likert",
        "section": "Psychometric Evaluation",
        "question": "I see cost as a key metric in decision-making."
    },
    {
        "id": "psych_4",
        "type": "likert",
        "section": "Psychometric Evaluation",
        "question": "I feel energized when negotiating terms with vendors."
    },
    {
        "id": "psych_5",
        "type": "likert",
        "section": "Psychometric Evaluation",
        "question": "I naturally think about risk when making purchasing decisions."
    },

    # Technical & Aptitude
    {
        "id": "tech_1",
        "type": "multiple-choice",
        "section": "Technical & Aptitude",
        "question": "A supplier offers a 12% discount for bulk orders. How much do you save on a $12,000 order?",
        "options": ["$1,200", "$1,440", "$1,500", "$1,320"]
    },
    {
        "id": "tech_2",
        "type": "multiple-choice",
        "section": "Technical & Aptitude",
        "question": "If vendor A has faster delivery but higher cost, which should you choose for urgent orders?",
        "options": ["Always vendor A", "Always the cheaper option", "Depends on urgency vs budget", "Split the order"]
    },
    {
        "id": "tech_3",
        "type": "multiple-choice",
        "section": "Technical & Aptitude",
        "question": "What does a 3-bid minimum policy imply?",
        "options": [
            "Must get 3 bids for any purchase",
            "Need 3 vendors in database",
            "Compare at least 3 options for major purchases",
            "All vendors must bid 3 times"
        ]
    },
    {
        "id": "tech_4",
        "type": "multiple-choice",
        "section": "Technical & Aptitude",
        "question": "Which Excel function is most useful for comparing vendor bids?",
        "options": ["VLOOKUP", "SUM", "IF", "All of the above"]
    },

    # WISCAR Framework
    {
        "id": "wiscar_1",
        "type": "likert",
        "section": "Career Readiness",
        "question": "I persist through challenges even when the work becomes difficult."
    },
    {
        "id": "wiscar_2",
        "type": "likert",
        "section": "Career Readiness",
        "question": "I enjoy learning new procurement tools and systems."
    },
    {
        "id": "wiscar_3",
        "type": "likert",
        "section": "Career Readiness",
        "question": "I would find analyzing supplier performance data engaging."
    },
    {
        "id": "wiscar_4",
        "type": "likert",
        "section": "Career Readiness",
        "question": "I can see myself working in this field for several years."
    },
    {
        "id": "wiscar_5",
        "type": "multiple-choice",
        "section": "Career Readiness",
        "question": "What appeals to you most about procurement work?",
        "options": [
            "Cost savings opportunities",
            "Building vendor relationships",
            "Data analysis aspects",
            "Process optimization"
        ]
    }
]
