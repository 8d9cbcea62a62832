import pytest

from inkcomb import Failure, Input, Item, ParseOutcome, Return, Success, Take, Zero


class TestTake:
    def test_collects_in_order(self) -> None:
        r = Take(3, Item()).call("hello world")

        assert r == Success(["h", "e", "l"], Input("lo world"))

    def test_zero_count_consumes_nothing(self) -> None:
        assert Take(0, Item()).call("abc") == Success([], Input("abc"))

    def test_zero_count_never_runs_parser(self) -> None:
        assert Take(0, Zero()).call("abc") == Success([], Input("abc"))

    def test_negative_count_rejected(self) -> None:
        with pytest.raises(ValueError):
            Take(-1, Item())

    def test_not_enough_input_fails(self) -> None:
        """A failure part way through fails the whole thing and leaves the input usable."""
        src = Input("he")

        assert Take(3, Item()).call(src) == Failure()
        assert src == "he"
        assert Take(2, Item()).call(src) == Success(["h", "e"], Input(""))

    def test_exact_length(self) -> None:
        assert Take(5, Item()).call("hello") == Success(list("hello"), Input(""))

    def test_calls_do_not_share_lists(self) -> None:
        take = Take(2, Return("x"))

        first = take.call("")
        second = take.call("")
        assert first and second
        assert first.value is not second.value

    def test_nested(self) -> None:
        r = Take(2, Take(2, Item())).call("abcde")

        assert r == Success([["a", "b"], ["c", "d"]], Input("e"))

    def test_large_count(self) -> None:
        text = "a" * 5000

        assert Take(5000, Item()).call(text) == Success(list(text), Input(""))


class TestUnfold:
    @pytest.mark.parametrize("count", [0, 1, 3, 5])
    @pytest.mark.parametrize("text", ["", "he", "hello", "hello world"])
    def test_same_as_take(self, count: int, text: str) -> None:
        take = Take(count, Item())

        assert take.unfold().call(text) == take.call(text)

    def test_zero_inner_parser(self) -> None:
        assert Take(2, Zero()).unfold().call("abc") == Failure()
        assert Take(0, Zero()).unfold().call("abc") == Success([], Input("abc"))

    def test_reusable(self) -> None:
        unfolded = Take(2, Item()).unfold()

        assert unfolded.call("abc") == Success(["a", "b"], Input("c"))
        assert unfolded.call("xyz") == Success(["x", "y"], Input("z"))


class CountingItem(Item):
    """`Item` that records every input it's called with."""

    def __init__(self) -> None:
        self.inputs: list[str] = []

    def _call(self, input: Input) -> ParseOutcome[str]:
        self.inputs.append(str(input))
        return super()._call(input)


class TestTakeStopsEarly:
    def test_no_calls_after_failure(self) -> None:
        item = CountingItem()

        assert Take(5, item).call("ab") == Failure()
        assert item.inputs == ["ab", "b", ""]

    def test_unfold_no_calls_after_failure(self) -> None:
        item = CountingItem()

        assert Take(5, item).unfold().call("ab") == Failure()
        assert item.inputs == ["ab", "b", ""]


class TestTakeCount:
    def test_accepts_index_types(self) -> None:
        assert Take(True, Item()).count == 1

    @pytest.mark.parametrize("count", [2.5, "2", None])
    def test_non_integer_rejected(self, count: object) -> None:
        with pytest.raises(TypeError):
            Take(count, Item())  # type: ignore[arg-type]


class TestUnfoldLists:
    @pytest.mark.parametrize("count", [0, 2])
    def test_calls_do_not_share_lists(self, count: int) -> None:
        unfolded = Take(count, Return("x")).unfold()

        first = unfolded.call("y")
        assert first
        first.value.append("junk")
        assert unfolded.call("y") == Success(["x"] * count, Input("y"))
