import pytest

from cbb_predictor.models.team import QuadrantRecord, TeamMetrics


@pytest.fixture
def home_team():
    return TeamMetrics(
        name="Home U",
        net_rank=12,
        sor_rank=18,
        adj_off_efficiency=118.5,
        adj_def_efficiency=96.2,
        q1=QuadrantRecord(6, 3),
        q2=QuadrantRecord(5, 2),
        q3=QuadrantRecord(6, 1),
        q4=QuadrantRecord(6, 0),
    )


@pytest.fixture
def away_team():
    return TeamMetrics(
        name="Away State",
        net_rank=19,
        sor_rank=26,
        adj_off_efficiency=114.2,
        adj_def_efficiency=98.0,
        q1=QuadrantRecord(4, 5),
        q2=QuadrantRecord(6, 3),
        q3=QuadrantRecord(7, 1),
        q4=QuadrantRecord(7, 0),
    )
