"""Testing utilities for :module:`~pyfgjitter`"""

from typing import List

import pytest


def _to_name(tool) -> str:  # type: ignore
    """Gives the tool name for a function by taking the function name and replacing
    underscores with hyphens."""
    return tool.__name__.replace("_", "-")


def test_tool_funcs(tool, main) -> None:  # type: ignore
    name = _to_name(tool)
    argv = [name, "-h"]
    with pytest.raises(SystemExit) as e:
        main(argv=argv)
    assert e.type == SystemExit
    assert e.value.code == 0  # code should be 0 for help


class FixedRandom:
    """A random source that returns the given values in order, cycling when exhausted.

    Attributes:
        values: the values to return, each in `[0.0, 1.0)`
        draws: the number of values returned so far
    """

    def __init__(self, values: List[float]) -> None:
        assert len(values) > 0, "No values given"
        self.values: List[float] = values
        self.draws: int = 0

    def random(self) -> float:
        value = self.values[self.draws % len(self.values)]
        self.draws += 1
        return value
