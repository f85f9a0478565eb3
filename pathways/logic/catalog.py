"""
Seed Catalog

South African university programs, careers and bursaries for the
2025/2026 intake. The core never loads this itself; the HTTP layer uses
it when a caller supplies no catalog, and the tests use it as fixture data.
"""

from .contracts import (
    CareerCatalog,
    CareerOption,
    UniversityOffering,
    ProgramOffering,
    BursaryDefinition,
    UrgencyTier,
)

# (university, program, APS, category, subject requirements, deadline, duration, career id)
_PROGRAMS = [
    ("University of Cape Town", "Mechanical Engineering", 35, "engineering",
     ["Mathematics: 70%", "Physical Sciences: 70%"], "July 31, 2026", "4 years", "mechanical_engineering"),
    ("University of Cape Town", "Medicine (MBChB)", 42, "healthcare",
     ["Mathematics: 80%", "Physical Sciences: 80%", "Life Sciences: 80%"], "July 31, 2026", "6 years", "medicine"),
    ("University of Cape Town", "Computer Science", 38, "technology",
     ["Mathematics: 75%", "Physical Sciences: 70%"], "July 31, 2026", "3 years", "computer_science"),
    ("University of the Witwatersrand", "Civil Engineering", 36, "engineering",
     ["Mathematics: 70%", "Physical Sciences: 70%"], "September 30, 2026", "4 years", "civil_engineering"),
    ("University of the Witwatersrand", "Business Science", 35, "business",
     ["Mathematics: 70%", "English: 70%"], "September 30, 2026", "3 years", "accounting"),
    ("University of the Witwatersrand", "Bachelor of Laws (LLB)", 38, "law",
     ["English: 75%", "Mathematics/Math Lit: 65%"], "September 30, 2026", "4 years", "law"),
    ("University of Johannesburg", "Mechanical Engineering", 30, "engineering",
     ["Mathematics: 65%", "Physical Sciences: 65%"], "September 30, 2026", "4 years", "mechanical_engineering"),
    ("University of Johannesburg", "Accounting", 28, "business",
     ["Mathematics: 60%", "English: 60%"], "September 30, 2026", "3 years", "accounting"),
    ("University of Johannesburg", "Information Technology", 26, "technology",
     ["Mathematics: 60%", "Physical Sciences: 60%"], "September 30, 2026", "3 years", "computer_science"),
    ("Tshwane University of Technology", "Engineering Technology", 25, "engineering",
     ["Mathematics: 55%", "Physical Sciences: 55%"], "October 31, 2026", "3 years", "mechanical_engineering"),
    ("Tshwane University of Technology", "Business Management", 22, "business",
     ["Mathematics/Math Lit: 50%", "English: 55%"], "October 31, 2026", "3 years", "business_management"),
    ("University of South Africa (UNISA)", "Business Administration", 20, "business",
     ["Mathematics/Math Lit: 50%", "English: 50%"], "November 30, 2026", "3 years", "business_management"),
    ("University of South Africa (UNISA)", "Information Systems", 22, "technology",
     ["Mathematics: 55%", "English: 55%"], "November 30, 2026", "3 years", "computer_science"),
]

_UCT = ("University of Cape Town", "Western Cape")
_WITS = ("University of the Witwatersrand", "Gauteng")
_UJ = ("University of Johannesburg", "Gauteng")
_TUT = ("Tshwane University of Technology", "Gauteng")
_UNISA = ("University of South Africa (UNISA)", "Gauteng")


def _offering(university, min_aps, annual_cost):
    name, province = university
    return UniversityOffering(name=name, min_aps=min_aps, annual_cost=annual_cost, province=province)


def _careers():
    return [
        CareerOption(
            id="mechanical_engineering",
            name="Mechanical Engineering",
            category="engineering",
            requires_core_math=True,
            min_math_mark=65,
            requires_physical_science=True,
            required_subjects=["Mathematics", "Physical Sciences"],
            universities=[
                _offering(_UCT, 35, 75000),
                _offering(_UJ, 30, 55000),
                _offering(_TUT, 25, 42000),
            ],
            bursaries=["sasol_engineering"],
            tvet_alternative="TVET Mechanical Engineering N-Diploma",
        ),
        CareerOption(
            id="civil_engineering",
            name="Civil Engineering",
            category="engineering",
            requires_core_math=True,
            min_math_mark=70,
            requires_physical_science=True,
            required_subjects=["Mathematics", "Physical Sciences"],
            universities=[_offering(_WITS, 36, 68000)],
            bursaries=["sasol_engineering"],
            tvet_alternative="TVET Civil Engineering N-Diploma",
        ),
        CareerOption(
            id="medicine",
            name="Medicine",
            category="healthcare",
            requires_core_math=True,
            min_math_mark=70,
            requires_physical_science=True,
            min_english_mark=60,
            required_subjects=["Mathematics", "Physical Sciences", "Life Sciences"],
            requires_nbt=True,
            universities=[_offering(_UCT, 42, 85000)],
            tvet_alternative="Emergency Medical Care Certificate",
        ),
        CareerOption(
            id="computer_science",
            name="Computer Science",
            category="technology",
            requires_core_math=True,
            min_math_mark=60,
            universities=[
                _offering(_UCT, 38, 70000),
                _offering(_UJ, 26, 50000),
                _offering(_UNISA, 22, 25000),
            ],
            tvet_alternative="TVET Information Technology N-Diploma",
        ),
        CareerOption(
            id="accounting",
            name="Accounting",
            category="business",
            requires_core_math=True,
            min_math_mark=60,
            min_english_mark=60,
            universities=[_offering(_WITS, 35, 62000), _offering(_UJ, 28, 48000)],
            tvet_alternative="TVET Financial Management N-Diploma",
        ),
        CareerOption(
            id="business_management",
            name="Business Management",
            category="business",
            min_english_mark=55,
            universities=[_offering(_TUT, 22, 38000), _offering(_UNISA, 20, 22000)],
        ),
        CareerOption(
            id="law",
            name="Law",
            category="law",
            min_english_mark=75,
            requires_public_speaking=True,
            requires_nbt=True,
            universities=[_offering(_WITS, 38, 65000)],
            tvet_alternative="TVET Legal Secretary N-Diploma",
        ),
        CareerOption(
            id="teaching",
            name="Teaching",
            category="education",
            requires_public_speaking=True,
            min_english_mark=50,
            universities=[_offering(_UJ, 26, 40000), _offering(_UNISA, 20, 20000)],
            bursaries=["funza_lushaka"],
        ),
    ]


def _bursaries():
    return [
        BursaryDefinition(
            id="nsfas",
            name="NSFAS (National Student Financial Aid Scheme)",
            amount="R80,000/year",
            min_aps=20,
            income_ceiling=350000,
            needs_based=True,
            deadline="December 31, 2025",
            urgency=UrgencyTier.CRITICAL,
            application_url="https://www.nsfas.org.za",
        ),
        BursaryDefinition(
            id="sasol_engineering",
            name="Sasol Engineering Bursary",
            amount="R120,000/year",
            min_aps=30,
            career_fields=["engineering"],
            subject_requirements={"Mathematics": 70, "Physical Sciences": 70},
            deadline="May 15, 2026",
            urgency=UrgencyTier.HIGH,
            application_url="https://www.sasol.com/careers/bursaries",
        ),
        BursaryDefinition(
            id="funza_lushaka",
            name="Funza Lushaka Teaching Bursary",
            amount="R60,000/year",
            min_aps=25,
            career_fields=["education"],
            deadline="February 28, 2026",
            urgency=UrgencyTier.MEDIUM,
            application_url="https://www.education.gov.za/Programmes/FunzaLushaka.aspx",
        ),
        BursaryDefinition(
            id="firstrand_foundation",
            name="FirstRand Foundation Bursary",
            amount="R60,000/year",
            min_aps=25,
            needs_based=True,
            deadline="March 30, 2026",
            urgency=UrgencyTier.MEDIUM,
            application_url="https://www.firstrand.co.za/csi/education/",
        ),
    ]


def load_default_catalog() -> CareerCatalog:
    """Build a fresh copy of the seed catalog."""
    programs = [
        ProgramOffering(
            university=university,
            program=program,
            aps_required=aps,
            category=category,
            subject_requirements=requirements,
            application_deadline=deadline,
            duration=duration,
            career_id=career_id,
        )
        for university, program, aps, category, requirements, deadline, duration, career_id in _PROGRAMS
    ]
    return CareerCatalog(careers=_careers(), programs=programs, bursaries=_bursaries())
