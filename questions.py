# Built-in knowledge-check quiz.
# "correct" is the index into "options". A data/quiz directory overrides this list (see bank.py).

QUIZ_QUESTIONS = [
    {
        "id": "sq1",
        "topic": "sigfigs",
        "question": "How many significant figures are in 0.00340?",
        "options": ["2", "3", "4", "5"],
        "correct": 1,
        "explanation": (
            "Leading zeros are never significant. The trailing zero after the 4 IS significant "
            "because it's after a decimal point. So: 3, 4, 0 = 3 sig figs."
        ),
    },
    {
        "id": "sq2",
        "topic": "scientific",
        "question": "What is the correct scientific notation for 45,600?",
        "options": ["4.56 × 10³", "4.56 × 10⁴", "45.6 × 10³", "4.560 × 10⁴"],
        "correct": 1,
        "explanation": (
            "Move the decimal 4 places left to get 4.56. "
            "The exponent equals the number of places moved: 10⁴."
        ),
    },
    {
        "id": "sq3",
        "topic": "sigfigs",
        "question": "How many significant figures are in 1000?",
        "options": ["1", "2", "3", "4"],
        "correct": 0,
        "explanation": (
            "Trailing zeros WITHOUT a decimal point are ambiguous but typically considered NOT "
            "significant. So 1000 has 1 sig fig. To show 4 sig figs, write 1000. or 1.000 × 10³."
        ),
    },
    {
        "id": "sq4",
        "topic": "operations",
        "question": "When multiplying 2.5 × 3.42, how many sig figs should your answer have?",
        "options": ["2", "3", "4", "5"],
        "correct": 0,
        "explanation": (
            "In multiplication/division, the answer has the same number of sig figs as the "
            "measurement with the FEWEST sig figs. 2.5 has 2, 3.42 has 3 → answer has 2."
        ),
    },
    {
        "id": "sq5",
        "topic": "scientific",
        "question": "What is 3.2 × 10⁴ in standard notation?",
        "options": ["320", "3,200", "32,000", "320,000"],
        "correct": 2,
        "explanation": "Move the decimal 4 places to the right: 3.2 → 32 → 320 → 3200 → 32,000",
    },
    {
        "id": "sq6",
        "topic": "sigfigs",
        "question": "How many significant figures are in 50.00?",
        "options": ["1", "2", "3", "4"],
        "correct": 3,
        "explanation": (
            "All digits here are significant: the 5, the 0 between, and both trailing zeros "
            "after the decimal. Total: 4 sig figs."
        ),
    },
    {
        "id": "sq7",
        "topic": "operations",
        "question": "When adding 12.5 + 1.234, how should you round your answer?",
        "options": [
            "To 1 decimal place",
            "To 2 decimal places",
            "To 3 decimal places",
            "To 4 sig figs",
        ],
        "correct": 0,
        "explanation": (
            "In addition/subtraction, round to the LEAST number of decimal places. "
            "12.5 has 1 decimal place, 1.234 has 3 → answer gets 1 decimal place."
        ),
    },
    {
        "id": "sq8",
        "topic": "sigfigs",
        "question": "Which number has exactly 4 significant figures?",
        "options": ["0.0040", "4000", "4.000", "40.0"],
        "correct": 2,
        "explanation": (
            "0.0040 has 2 (leading zeros don't count). 4000 has 1 (trailing zeros without "
            "decimal). 4.000 has 4 (all zeros after decimal count). 40.0 has 3."
        ),
    },
]
