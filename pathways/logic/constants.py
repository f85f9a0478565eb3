"""
Pathways Engine Constants

Defines the CAPS point scale, projection factors, gate thresholds, keyword
tables and ranking limits used by the recommendation core.
All values are deterministic with no AI/ML components.
"""

from typing import Dict, List, Tuple

# =============================================================================
# APS (CAPS 1-7 SCALE)
# =============================================================================

# (lower bound %, points), checked from highest to lowest
APS_POINT_BANDS: List[Tuple[float, int]] = [
    (80, 7),
    (70, 6),
    (60, 5),
    (50, 4),
    (40, 3),
    (30, 2),
]
APS_FLOOR_POINTS = 1
MAX_APS = 42

# Grade-based improvement potential
GRADE_OPTIMISM_FACTORS: Dict[int, float] = {
    10: 1.15,
    11: 1.08,
    12: 1.02,
}
DEFAULT_OPTIMISM_FACTOR = 1.0

# Projected max at or above this counts as university-eligible
UNIVERSITY_ELIGIBLE_APS = 20

VALID_GRADES = (10, 11, 12)

# =============================================================================
# GATE THRESHOLDS
# =============================================================================

MATH_GAP_BLOCK_THRESHOLD = 15
ENGLISH_GAP_BLOCK_THRESHOLD = 20
BUDGET_MEAN_COST_THRESHOLD = 40000
NSFAS_INCOME_CEILING = 350000

SUBJECT_CHANGE_DEADLINE = "End of Grade 10 Term 4 (30 November)"
NBT_DEADLINE = "Book the NBT by March of Grade 12"
NSFAS_DEADLINE = "NSFAS applications close 31 December"

ANYWHERE = "anywhere"

# =============================================================================
# SUBJECT NAMES
# =============================================================================

MATHEMATICS = "Mathematics"
PHYSICAL_SCIENCES = "Physical Sciences"
LIFE_SCIENCES = "Life Sciences"
ENGLISH = "English"

# Canonical subject -> accepted spellings (lower-case)
SUBJECT_ALIASES: Dict[str, List[str]] = {
    MATHEMATICS: ["mathematics", "math", "maths", "pure mathematics", "pure maths"],
    PHYSICAL_SCIENCES: ["physical sciences", "physical science", "physics", "physical_sciences"],
    LIFE_SCIENCES: ["life sciences", "life science", "biology", "life_sciences"],
    ENGLISH: [
        "english",
        "english home language",
        "english first additional language",
        "english hl",
        "english fal",
    ],
}

# =============================================================================
# ALTERNATIVE PATHWAYS
# =============================================================================

MATH_LITERACY_ALTERNATIVES = [
    "Business Management",
    "Hospitality Management",
    "TVET Engineering N-Diploma",
]

LIFE_SCIENCES_ALTERNATIVES = [
    "Nursing",
    "BSc Biological Sciences",
    "Environmental Health",
]

NON_SCIENCE_ALTERNATIVES = [
    "Business Management",
    "Information Systems",
    "TVET Engineering N-Diploma",
]

APS_SHORTFALL_ALTERNATIVES = [
    "Higher Certificate (bridging programme)",
    "Extended degree programme",
]

BUDGET_ALTERNATIVES = [
    "TVET college programme",
    "UNISA distance learning",
]

# Same suggestions for every career category
CATEGORY_MISMATCH_ALTERNATIVES = [
    "Biomedical Engineering",
    "Health Informatics",
    "Pharmacology",
    "Medical Research",
]

DISTANCE_LEARNING_OPTION = "UNISA distance learning"

# Current subject -> careers still reachable after subject lock-in
SUBJECT_PATHWAYS: Dict[str, List[str]] = {
    "mathematics": ["Accounting", "Information Technology", "Actuarial Science"],
    "physical sciences": ["Engineering Technology", "Chemistry"],
    "life sciences": ["Nursing", "Environmental Science"],
    "math literacy": ["Hospitality Management", "Office Administration"],
    "mathematical literacy": ["Hospitality Management", "Office Administration"],
    "accounting": ["Bookkeeping", "Auditing"],
    "business studies": ["Business Management", "Marketing"],
    "economics": ["Economics", "Banking"],
    "history": ["Law", "Journalism"],
    "geography": ["Urban Planning", "Tourism"],
    "english": ["Journalism", "Communications"],
}
MAX_PATHWAY_ALTERNATIVES = 5

# =============================================================================
# DISLIKE CONFLICTS
# =============================================================================

HEALTHCARE_CATEGORY = "healthcare"
BLOOD_DISLIKE = "blood"
PUBLIC_SPEAKING_DISLIKES = ["public speaking", "speaking in public", "presentations"]
MATH_DISLIKES = ["math", "maths", "mathematics"]
MATH_HEAVY_CATEGORIES = ["engineering", "technology"]

# =============================================================================
# INTEREST CLASSIFICATION
# =============================================================================

# Category tag -> keywords (whole words / phrases, lower-case)
INTEREST_KEYWORDS: Dict[str, List[str]] = {
    "engineering": ["engineering", "engineer", "egd", "mechanical", "civil", "electrical"],
    "business": ["business", "accounting", "accountant", "finance", "commerce", "management"],
    "healthcare": ["medicine", "doctor", "nurse", "nursing", "pharmacy", "healthcare"],
    "technology": ["computer", "computers", "technology", "it", "software", "coding", "programming"],
    "law": ["law", "lawyer", "attorney", "legal"],
    "education": ["teaching", "teacher", "education"],
}

DEFAULT_CATEGORIES = ["engineering", "business", "technology"]

# =============================================================================
# ADMISSION PROBABILITY
# =============================================================================

PROBABILITY_WELL_ABOVE = 95
PROBABILITY_MEETS = 85
PROBABILITY_LIKELY = 70
PROBABILITY_POSSIBLE = 50
PROBABILITY_CHALLENGING = 25
PROBABILITY_FLOOR = 10

FEASIBILITY_HIGH_THRESHOLD = 70
FEASIBILITY_MEDIUM_THRESHOLD = 40

# =============================================================================
# BURSARY SCORING WEIGHTS
# =============================================================================

BURSARY_APS_WEIGHT = 30
BURSARY_NEED_WEIGHT = 40
BURSARY_FIELD_WEIGHT = 30
BURSARY_SUBJECT_WEIGHT = 40
BURSARY_INCLUDE_THRESHOLD = 30
BURSARY_MAX_SCORE = 100

# =============================================================================
# RANKING CONFIGURATION
# =============================================================================

MAX_PROGRAM_RECOMMENDATIONS = 5
MAX_BURSARY_RECOMMENDATIONS = 3

ENGINE_VERSION = "1.0.0"
