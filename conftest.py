import pytest


class AlwaysZeroRandom:
    """Random source that always picks the first candidate."""

    def randrange(self, stop: int) -> int:
        return 0


@pytest.fixture
def always_zero_rng():
    return AlwaysZeroRandom()
