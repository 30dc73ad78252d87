import matplotlib

matplotlib.use("Agg")

import pytest

from truth_tables import new_context


@pytest.fixture
def ctx():
    return new_context()


@pytest.fixture
def pq(ctx):
    return ctx.declare_many("p", "q")
