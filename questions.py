# Sample question bank used by tools/seed.py.
# Every entry goes through the authoring path, so it must satisfy the
# registry schema for its item_type.

EXAMS = [
    {"code": "PTE", "title": "Pearson Test of English"},
    {"code": "IELTS", "title": "International English Language Testing System"},
]

PTE_SECTIONS = [
    {"title": "Speaking & Writing", "order": 1},
    {"title": "Reading", "order": 2},
    {"title": "Listening", "order": 3},
]

SAMPLE_QUESTIONS = [
    {
        "exam_code": "PTE",
        "section": "Speaking & Writing",
        "item_type": "read_aloud",
        "difficulty": 3,
        "content": {
            "text": (
                "The rapid pace of technological change has transformed the way "
                "we communicate and access information."
            ),
            "time_limit": 40,
            "prep_time": 25,
        },
        "scoring_rubric": {
            "transcript": (
                "The rapid pace of technological change has transformed the way "
                "we communicate and access information."
            ),
            "keywords": ["rapid", "technological", "transformed"],
        },
    },
    {
        "exam_code": "PTE",
        "section": "Speaking & Writing",
        "item_type": "read_aloud",
        "difficulty": 5,
        # time_limit / prep_time left to the schema defaults
        "content": {
            "text": "Coral reefs support roughly a quarter of all marine species.",
        },
        "scoring_rubric": {
            "transcript": "Coral reefs support roughly a quarter of all marine species.",
        },
    },
    {
        "exam_code": "PTE",
        "section": "Reading",
        "item_type": "fib_dropdown",
        "difficulty": 4,
        "content": {
            "text_template": "Bees {{0}} flowers, which helps plants {{1}}.",
            "blanks": [
                {"index": 0, "options": ["pollinate", "polish", "pollute"]},
                {"index": 1, "options": ["reproduce", "repaint", "retire"]},
            ],
        },
        "scoring_rubric": {
            "answers": [
                {"blank_index": 0, "correct_option": "pollinate"},
                {"blank_index": 1, "correct_option": "reproduce"},
            ],
        },
    },
]
