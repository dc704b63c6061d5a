import pytest

from tests.helpers import make_spec


@pytest.fixture
def prestige_tour():
    """HEAD Prestige Tour style frame: 95 sq in, 16x19, 62 RA."""
    return make_spec(head_size=95, mains=16, crosses=19, stiffness=62, brand="HEAD", product="Prestige", variant="Tour")


@pytest.fixture
def extreme_pro():
    """HEAD Extreme Pro style frame: 98 sq in, 16x19, 64 RA."""
    return make_spec(head_size=98, mains=16, crosses=19, stiffness=64, brand="HEAD", product="Extreme", variant="Pro")
