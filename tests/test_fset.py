"""Tests for the FunctionalSet method form."""

import threading
import pytest
from parset import FunctionalSet, ApplyError


def is_even(x: int) -> bool:
    return x % 2 == 0


class TestFunctionalSet:
    def test_is_frozenset(self):
        fs = FunctionalSet([1, 2, 2, 3])
        assert isinstance(fs, frozenset)
        assert fs == {1, 2, 3}

    def test_empty(self):
        fs = FunctionalSet()
        assert len(fs) == 0
        assert repr(fs) == "FunctionalSet()"

    def test_select_reject_map_return_functional_set(self):
        fs = FunctionalSet({1, 2, 3, 4})
        assert isinstance(fs.select(is_even), FunctionalSet)
        assert isinstance(fs.reject(is_even), FunctionalSet)
        assert isinstance(fs.map(str), FunctionalSet)

    def test_chaining(self):
        result = FunctionalSet(range(10)).select(is_even).map(lambda x: x * 10)
        assert result == {0, 20, 40, 60, 80}

    def test_match(self):
        fs = FunctionalSet({1, 2, 3})
        assert fs.match(lambda x: x == 3) == 3
        assert fs.match(lambda x: x > 5) is None

    def test_match_default(self):
        missing = object()
        fs = FunctionalSet({None, 1})
        assert fs.match(lambda x: x is None, default=missing) is None
        assert fs.match(lambda x: x == 2, default=missing) is missing

    def test_reduce(self):
        assert FunctionalSet({1, 2, 3, 4}).reduce(0, lambda acc, x: acc + x) == 10

    def test_each(self):
        calls = []
        FunctionalSet({"a", "b"}).each(calls.append)
        assert sorted(calls) == ["a", "b"]

    def test_apply(self):
        seen = set()
        lock = threading.Lock()

        def record(x):
            with lock:
                seen.add(x)

        FunctionalSet(range(100)).apply(record, max_workers=4)
        assert seen == set(range(100))

    def test_apply_failure(self):
        def boom(x):
            raise RuntimeError(x)

        with pytest.raises(ApplyError):
            FunctionalSet({1, 2}).apply(boom)

    @pytest.mark.asyncio
    async def test_apply_async(self):
        seen = []

        async def record(x):
            seen.append(x)

        await FunctionalSet({1, 2, 3}).apply_async(record, max_concurrency=2)
        assert sorted(seen) == [1, 2, 3]


class TestFunctionalSetAlgebra:
    @pytest.mark.parametrize(
        "combine, expected",
        [
            (lambda a, b: a | b, {1, 2, 3, 4}),
            (lambda a, b: a & b, {2, 3}),
            (lambda a, b: a - b, {1}),
            (lambda a, b: a ^ b, {1, 4}),
        ],
    )
    def test_operators_keep_type(self, combine, expected):
        result = combine(FunctionalSet({1, 2, 3}), frozenset({2, 3, 4}))
        assert isinstance(result, FunctionalSet)
        assert result == expected

    def test_reflected_operators_keep_type(self):
        result = frozenset({2, 3, 4}) - FunctionalSet({1, 2, 3})
        assert isinstance(result, FunctionalSet)
        assert result == {4}

    def test_named_methods_keep_type(self):
        fs = FunctionalSet({1, 2, 3})
        assert isinstance(fs.union([4], [5]), FunctionalSet)
        assert isinstance(fs.intersection({1, 2}), FunctionalSet)
        assert isinstance(fs.difference({1}), FunctionalSet)
        assert isinstance(fs.symmetric_difference({3, 4}), FunctionalSet)
        assert fs.union([4], [5]) == {1, 2, 3, 4, 5}

    def test_chain_after_union(self):
        result = (FunctionalSet({1, 2}) | {3, 4}).select(is_even).map(str)
        assert result == {"2", "4"}

    def test_unsupported_operand(self):
        with pytest.raises(TypeError):
            FunctionalSet({1}) | [2]
