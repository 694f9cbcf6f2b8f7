"""Sample sequences shared across reader tests."""

EMPTY: list = []
SINGLE: list = ["value1"]
PAIR: list = ["value1", "value2"]
MIXED: list = ["value1", "value2", False, True]

ALL_SEQUENCES = [EMPTY, SINGLE, PAIR, MIXED]


def always_true(_value) -> bool:
    return True


def always_false(_value) -> bool:
    return False
