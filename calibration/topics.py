"""
Topics - Static topic catalog and cross-topic relationship table.

RELATED_TOPICS is declared one-directionally: mastering the key lets
the listed topics inherit a conservative tier estimate.
"""

from typing import Dict, List

TOPIC_CATALOG: List[str] = [
    "Algebra: Absolute Value",
    "Algebra: Linear Functions",
    "Algebra: Dividing Polynomials",
    "Algebra: Exponential Functions",
    "Algebra: Inequalities",
    "Algebra: Polynomial Manipulation",
    "Algebra: Quadratic Equations",
    "Algebra: Single Variable Equations",
    "Algebra: Systems of Linear Equations",
    "Algebra: Systems of Nonlinear Equations",
    "Coordinate Geometry: Lines and Slopes",
    "Coordinate Geometry: Nonlinear Functions",
    "Geometry: Circles",
    "Geometry: Lines and Angles",
    "Geometry: Solid Geometry",
    "Geometry: Triangles and Polygons",
    "Geometry: Trigonometry",
    "Data: Categories and Probabilities",
    "Data: Experimental Interpretation",
    "Data: Central Tendency and Standard Deviation",
    "Data: Scatterplots and Graphs",
    "Function Notation",
    "Formulas and Expressions",
    "Numbers: Sequences",
    "Ratios and Proportions",
    "R/W: Multiple Text Analysis",
    "R/W: Quantitative Analysis",
    "R/W: Text Structure and Purpose",
    "R/W: Command of Evidence",
    "R/W: Finding Key Details",
    "R/W: Drawing Inferences",
    "R/W: Identifying Main Idea",
    "R/W: Rhetorical Synthesis",
    "R/W: Determining Sentence Purpose",
    "R/W: Vocabulary in Context",
    "Grammar: Subject-Verb Agreement",
    "Grammar: Conventional Expression",
    "Grammar: Modifiers",
    "Grammar: Possessives",
    "Grammar: Pronouns",
    "Grammar: Punctuation",
    "Grammar: Sentence Structure",
    "Grammar: Verb Tense",
    "Rhetoric: Precision",
    "Rhetoric: Transitions",
]

# Seed ("welcome") mission draws from these
HIGH_IMPACT_TOPICS: List[str] = [
    "Algebra: Linear Functions",
    "Algebra: Systems of Linear Equations",
    "Geometry: Triangles and Polygons",
    "Data: Central Tendency and Standard Deviation",
    "R/W: Identifying Main Idea",
    "R/W: Vocabulary in Context",
    "Grammar: Subject-Verb Agreement",
    "Grammar: Punctuation",
    "Algebra: Quadratic Equations",
    "R/W: Command of Evidence",
]

RELATED_TOPICS: Dict[str, List[str]] = {
    # Algebra
    "Algebra: Linear Functions": [
        "Algebra: Systems of Linear Equations",
        "Algebra: Inequalities",
        "Coordinate Geometry: Lines and Slopes",
    ],
    "Algebra: Quadratic Equations": ["Algebra: Polynomial Manipulation", "Function Notation"],
    "Algebra: Systems of Linear Equations": ["Algebra: Linear Functions", "Algebra: Inequalities"],
    "Algebra: Polynomial Manipulation": ["Algebra: Quadratic Equations", "Algebra: Dividing Polynomials"],
    "Algebra: Dividing Polynomials": ["Algebra: Polynomial Manipulation"],
    "Algebra: Exponential Functions": ["Algebra: Polynomial Manipulation"],
    "Algebra: Absolute Value": ["Algebra: Inequalities", "Algebra: Linear Functions"],
    "Algebra: Inequalities": ["Algebra: Linear Functions", "Algebra: Absolute Value"],
    "Algebra: Single Variable Equations": ["Algebra: Linear Functions", "Formulas and Expressions"],
    "Algebra: Systems of Nonlinear Equations": [
        "Algebra: Systems of Linear Equations",
        "Algebra: Quadratic Equations",
    ],

    # Geometry
    "Geometry: Triangles and Polygons": ["Geometry: Trigonometry", "Geometry: Lines and Angles"],
    "Geometry: Trigonometry": ["Geometry: Triangles and Polygons"],
    "Geometry: Circles": ["Geometry: Solid Geometry"],
    "Geometry: Solid Geometry": ["Geometry: Circles"],
    "Geometry: Lines and Angles": ["Geometry: Triangles and Polygons", "Coordinate Geometry: Lines and Slopes"],

    # Coordinate geometry
    "Coordinate Geometry: Lines and Slopes": ["Algebra: Linear Functions", "Geometry: Lines and Angles"],
    "Coordinate Geometry: Nonlinear Functions": ["Algebra: Quadratic Equations", "Function Notation"],

    # Data
    "Data: Central Tendency and Standard Deviation": [
        "Data: Scatterplots and Graphs",
        "Data: Categories and Probabilities",
    ],
    "Data: Categories and Probabilities": [
        "Data: Central Tendency and Standard Deviation",
        "Ratios and Proportions",
    ],
    "Data: Scatterplots and Graphs": [
        "Data: Central Tendency and Standard Deviation",
        "Coordinate Geometry: Lines and Slopes",
    ],
    "Data: Experimental Interpretation": [
        "Data: Scatterplots and Graphs",
        "Data: Central Tendency and Standard Deviation",
    ],

    # Reading & writing
    "R/W: Identifying Main Idea": ["R/W: Command of Evidence", "R/W: Text Structure and Purpose"],
    "R/W: Command of Evidence": ["R/W: Identifying Main Idea", "R/W: Drawing Inferences"],
    "R/W: Vocabulary in Context": ["R/W: Determining Sentence Purpose"],
    "R/W: Drawing Inferences": ["R/W: Command of Evidence", "R/W: Text Structure and Purpose"],
    "R/W: Text Structure and Purpose": ["R/W: Identifying Main Idea", "Rhetoric: Transitions"],
    "R/W: Multiple Text Analysis": ["R/W: Identifying Main Idea", "R/W: Text Structure and Purpose"],
    "R/W: Quantitative Analysis": ["Data: Scatterplots and Graphs", "R/W: Command of Evidence"],
    "R/W: Finding Key Details": ["R/W: Identifying Main Idea", "R/W: Drawing Inferences"],
    "R/W: Rhetorical Synthesis": ["R/W: Text Structure and Purpose", "Rhetoric: Transitions"],
    "R/W: Determining Sentence Purpose": ["R/W: Text Structure and Purpose", "R/W: Vocabulary in Context"],

    # Grammar
    "Grammar: Subject-Verb Agreement": ["Grammar: Pronouns", "Grammar: Verb Tense"],
    "Grammar: Pronouns": ["Grammar: Subject-Verb Agreement", "Grammar: Possessives"],
    "Grammar: Verb Tense": ["Grammar: Subject-Verb Agreement", "Grammar: Sentence Structure"],
    "Grammar: Punctuation": ["Grammar: Sentence Structure", "Grammar: Conventional Expression"],
    "Grammar: Sentence Structure": ["Grammar: Punctuation", "Grammar: Modifiers"],
    "Grammar: Modifiers": ["Grammar: Sentence Structure"],
    "Grammar: Possessives": ["Grammar: Pronouns", "Grammar: Punctuation"],
    "Grammar: Conventional Expression": ["Grammar: Punctuation", "Grammar: Sentence Structure"],

    # Rhetoric
    "Rhetoric: Transitions": ["R/W: Text Structure and Purpose", "Grammar: Sentence Structure"],
    "Rhetoric: Precision": ["Grammar: Sentence Structure", "Rhetoric: Transitions"],

    # Other math
    "Function Notation": [
        "Algebra: Quadratic Equations",
        "Algebra: Linear Functions",
        "Coordinate Geometry: Nonlinear Functions",
    ],
    "Formulas and Expressions": ["Algebra: Single Variable Equations", "Algebra: Linear Functions"],
    "Numbers: Sequences": ["Algebra: Linear Functions", "Function Notation"],
    "Ratios and Proportions": ["Data: Categories and Probabilities", "Geometry: Triangles and Polygons"],
}
