import pytest
from math import gcd as math_gcd
from exactrational import new

# (numerator, denominator) pairs, not necessarily reduced
SAMPLE_PAIRS = [(0, 1), (1, 1), (-1, 1), (2, 4), (-3, 4), (10, -6), (-7, -12), (22, 7), (2**70, 3**40)]
NONZERO_PAIRS = [p for p in SAMPLE_PAIRS if p[0] != 0]


def assert_canonical(value):
    """Check that a value satisfies the canonical form invariant."""
    n, d = value.as_tuple()
    assert isinstance(n, int) and isinstance(d, int)
    assert d > 0, f"Denominator of {value!r} is not positive"
    if n == 0:
        assert d == 1, f"Zero must be represented as (0, 1), got {value!r}"
    else:
        assert math_gcd(abs(n), d) == 1, f"{value!r} is not in lowest terms"


@pytest.fixture(params=SAMPLE_PAIRS, scope="session")
def rational(request: pytest.FixtureRequest):
    """Provide session-level fixture for parametrized rational values."""
    return new(*request.param)


@pytest.fixture(params=SAMPLE_PAIRS, scope="session")
def other_rational(request: pytest.FixtureRequest):
    """Provide session-level fixture for a second parametrized operand."""
    return new(*request.param)


@pytest.fixture(params=NONZERO_PAIRS, scope="session")
def nonzero_rational(request: pytest.FixtureRequest):
    """Provide session-level fixture for parametrized nonzero divisors."""
    return new(*request.param)


@pytest.fixture(params=[-3, -2, -1, 0, 1, 2, 5], scope="session")
def exponent(request: pytest.FixtureRequest) -> int:
    """Provide session-level fixture for integer exponents."""
    return request.param
