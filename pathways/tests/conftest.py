from datetime import date

import pytest

from pathways.logic.contracts import StudentProfile, CareerOption, UniversityOffering
from pathways.logic.catalog import load_default_catalog


# Math 80=7, PhysSci 72=6, Eng 78=6, Hist 75=6, LO 82=7, Afr 70=6 -> APS 38
APS_38_MARKS = {
    "Mathematics": 80,
    "Physical Sciences": 72,
    "English": 78,
    "History": 75,
    "Life Orientation": 82,
    "Afrikaans": 70,
}


@pytest.fixture
def aps_38_marks():
    return dict(APS_38_MARKS)


@pytest.fixture
def strong_student():
    return StudentProfile(
        student_id="test_student_001",
        grade=11,
        math_type="Pure Mathematics",
        math_mark=80,
        subjects=["Mathematics", "Physical Sciences", "English", "History", "Life Orientation", "Afrikaans"],
        marks=dict(APS_38_MARKS),
        career_interest_text="I want to be a mechanical engineer",
    )


@pytest.fixture
def engineering_career():
    return CareerOption(
        id="engineering",
        name="Engineering",
        category="Engineering",
        requires_core_math=True,
        requires_physical_science=True,
        min_math_mark=60,
        universities=[UniversityOffering(name="UCT", min_aps=38, annual_cost=60000, province="Western Cape")],
        bursaries=[],
    )


@pytest.fixture
def catalog():
    return load_default_catalog()


@pytest.fixture
def as_of():
    return date(2026, 3, 15)
