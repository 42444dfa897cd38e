from __future__ import annotations

import pytest

from wordcount.execution.executors import SequentialExecutor, ThreadedExecutor, build_executor


def test_build_executor_by_name() -> None:
    assert isinstance(build_executor("sequential"), SequentialExecutor)
    threaded = build_executor(" Threaded ", max_workers=3)
    assert isinstance(threaded, ThreadedExecutor)
    assert threaded.max_workers == 3


def test_unknown_executor_is_rejected() -> None:
    with pytest.raises(ValueError):
        build_executor("spark")


def test_threaded_executor_needs_a_worker() -> None:
    with pytest.raises(ValueError):
        ThreadedExecutor(0)


@pytest.mark.parametrize("executor", [SequentialExecutor(), ThreadedExecutor(4)])
def test_map_preserves_input_order(executor) -> None:
    assert executor.map(lambda x: x * x, range(20)) == [x * x for x in range(20)]
    assert executor.map(len, []) == []
