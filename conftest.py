import pytest

from sine_table import gen_table


@pytest.fixture
def table_8x8():
    return gen_table(8, 8)
