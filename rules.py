# Static rule sections shown on the "Learn Rules" screen.

RULE_SECTIONS = {
    "scientific": {
        "id": "scientific",
        "title": "Scientific Notation",
        "summary": "Format: a × 10ⁿ where 1 ≤ |a| < 10",
        "rules": [
            {
                "name": "Converting TO Scientific Notation",
                "steps": [
                    "Move the decimal point until you have a number between 1 and 10",
                    "Count how many places you moved the decimal",
                    "If you moved LEFT → positive exponent (large numbers)",
                    "If you moved RIGHT → negative exponent (small numbers)",
                ],
                "examples": [
                    "45,000 → 4.5 × 10⁴ (moved 4 places left)",
                    "0.0032 → 3.2 × 10⁻³ (moved 3 places right)",
                ],
            },
            {
                "name": "Converting FROM Scientific Notation",
                "steps": [
                    "Look at the exponent",
                    "Positive exponent → move decimal RIGHT",
                    "Negative exponent → move decimal LEFT",
                    "Fill in zeros as needed",
                ],
                "examples": ["2.7 × 10⁵ → 270,000", "8.1 × 10⁻⁴ → 0.00081"],
            },
        ],
    },
    "sigfigs": {
        "id": "sigfigs",
        "title": "Significant Figures Rules",
        "summary": "Which digits in a written measurement carry its precision",
        "rules": [
            {
                "name": "Rule 1: All non-zero digits are ALWAYS significant",
                "steps": [],
                "examples": ["123 → 3 sig figs", "7.89 → 3 sig figs"],
            },
            {
                "name": "Rule 2: Zeros BETWEEN non-zero digits are ALWAYS significant",
                "steps": [],
                "examples": ["101 → 3 sig figs", "5.007 → 4 sig figs"],
            },
            {
                "name": "Rule 3: Leading zeros are NEVER significant",
                "steps": [],
                "examples": ["0.0025 → 2 sig figs", "0.00100 → 3 sig figs"],
            },
            {
                "name": "Rule 4: Trailing zeros AFTER a decimal point ARE significant",
                "steps": [],
                "examples": ["2.50 → 3 sig figs", "1.000 → 4 sig figs"],
            },
            {
                "name": "Rule 5: Trailing zeros WITHOUT a decimal point are NOT significant (ambiguous)",
                "steps": [],
                "examples": ["1500 → 2 sig figs", "1500. → 4 sig figs (decimal makes it explicit)"],
            },
        ],
    },
    "operations": {
        "id": "operations",
        "title": "Operations with Sig Figs",
        "summary": (
            "Don't confuse the two rules! Multiplication/division uses sig figs count, "
            "while addition/subtraction uses decimal places."
        ),
        "rules": [
            {
                "name": "Multiplication & Division",
                "steps": [
                    "Answer has the same number of sig figs as the measurement "
                    "with the FEWEST sig figs",
                ],
                "examples": [
                    "2.5 × 3.42 = 8.55 → rounds to 8.6 (2 sig figs)",
                    "2.5 has 2 sig figs, 3.42 has 3 → answer gets 2",
                ],
            },
            {
                "name": "Addition & Subtraction",
                "steps": [
                    "Answer has the same number of DECIMAL PLACES as the measurement "
                    "with the fewest decimal places",
                ],
                "examples": [
                    "12.52 + 1.7 = 14.22 → rounds to 14.2",
                    "12.52 has 2 decimal places, 1.7 has 1 → answer gets 1",
                ],
            },
        ],
    },
}
