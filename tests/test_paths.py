"""
Path construction and literal shorthand.
"""

import pytest

from path_engine import (
    AttributeTest, Conjunction, MalformedPath, NameTest, Path, PredicateTest, as_step, path,
)


def cheap(node):
    return float(node.get_attribute("price")) < 300


class TestAsStep:
    def test_string_is_name_test(self):
        assert as_step("room") == NameTest("room")

    def test_mapping_is_attribute_test(self):
        assert as_step({"type": "single"}) == AttributeTest({"type": "single"})

    def test_callable_is_predicate_test(self):
        assert as_step(cheap) == PredicateTest(cheap)

    def test_group_is_conjunction(self):
        assert as_step(["room", {"type": "single"}]) == Conjunction(
            [NameTest("room"), AttributeTest({"type": "single"})]
        )
        assert as_step(("rate", cheap)) == Conjunction([NameTest("rate"), PredicateTest(cheap)])

    def test_nested_groups(self):
        step = as_step(["rate", [{"qualifier": "aarp"}, cheap]])
        assert step == Conjunction([
            NameTest("rate"),
            Conjunction([AttributeTest({"qualifier": "aarp"}), PredicateTest(cheap)]),
        ])

    def test_steps_pass_through(self):
        step = NameTest("room")
        assert as_step(step) is step

    @pytest.mark.parametrize("value", [42, None, 3.5, object()])
    def test_unknown_literals_rejected(self, value):
        with pytest.raises(TypeError):
            as_step(value)


class TestPath:
    def test_empty_path_is_malformed(self):
        with pytest.raises(MalformedPath):
            Path()
        with pytest.raises(MalformedPath):
            path()
        with pytest.raises(MalformedPath):
            Path.of([])

    def test_malformed_path_is_a_value_error(self):
        with pytest.raises(ValueError):
            Path()

    def test_sequence_protocol(self):
        p = path(["room", {"type": "single"}], "rate")
        assert len(p) == 2
        assert p[1] == NameTest("rate")
        assert p.head == p[0]
        assert p.rest == (NameTest("rate"),)
        assert list(p) == list(p.steps)

    def test_single_step_rest_is_empty(self):
        assert path("room").rest == ()

    def test_equality_and_hash(self):
        assert path("room", "rate") == Path(NameTest("room"), NameTest("rate"))
        assert path("room") != path("rate")
        assert len({path("room"), path("room")}) == 1

    def test_concatenation(self):
        assert path("results") + path("room") == path("results", "room")
        assert path("results") + ["room", "rate"] == path("results", "room", "rate")

    def test_immutable(self):
        p = path("room")
        with pytest.raises(AttributeError):
            p.extra = 1

    def test_of_accepts_paths_iterables_and_single_steps(self):
        p = path("room", "rate")
        assert Path.of(p) is p
        assert Path.of(["room", "rate"]) == p
        assert Path.of(iter(["room", "rate"])) == p
        assert Path.of("room") == path("room")
        assert Path.of(NameTest("room")) == path("room")
        assert Path.of(cheap) == path(cheap)

    def test_repr(self):
        assert repr(path("room", {"a": "1"})) == "Path(NameTest('room'), AttributeTest({'a': '1'}))"
