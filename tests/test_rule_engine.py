"""
Unit tests for rule tree evaluation.
"""

import threading

import pytest

from rule_engine import (
    and_, or_, n_of, string_equals, int_equals, int_range, boolean,
    check, count_nodes, Status, RuleResult
)


def shape(node):
    """Nested tuple of child counts, comparable across rule and result trees."""
    return tuple(shape(child) for child in getattr(node, "children", ()))


class TestScenarios:
    """The name / favourite number rule against different fact sets."""

    def test_number_in_range(self, example_rule):
        """Test range branch satisfies the Or."""
        result = example_rule.check({"name": "John Doe", "fav_number": "11"})

        name_result, or_result = result.children
        equals_result, range_result = or_result.children

        assert result.status == Status.MET
        assert name_result.status == Status.MET
        assert or_result.status == Status.MET
        assert equals_result.status == Status.NOT_MET
        assert range_result.status == Status.MET

    def test_exact_number(self, example_rule):
        """Test equality branch satisfies the Or."""
        result = example_rule.check({"name": "John Doe", "fav_number": "10"})

        or_result = result.children[1]
        assert result.status == Status.MET
        assert [r.status for r in or_result.children] == [Status.MET, Status.NOT_MET]

    def test_non_numeric_number(self, example_rule):
        """Test non-numeric value fails both integer leaves."""
        result = example_rule.check({"name": "John Doe", "fav_number": "abc"})

        or_result = result.children[1]
        assert [r.status for r in or_result.children] == [Status.NOT_MET, Status.NOT_MET]
        assert or_result.status == Status.NOT_MET
        assert result.status == Status.NOT_MET

    def test_missing_name(self, example_rule):
        """Test missing field fails the And regardless of the Or branch."""
        result = example_rule.check({"fav_number": "11"})

        name_result, or_result = result.children
        assert name_result.status == Status.NOT_MET
        assert or_result.status == Status.MET
        assert result.status == Status.NOT_MET

    def test_empty_facts(self, example_rule):
        """Test evaluation completes with no facts at all."""
        result = example_rule.check({})

        assert result.status == Status.NOT_MET
        assert all(r.status == Status.NOT_MET for r in result.iter_nodes())

    def test_result_names(self, example_rule):
        """Test result nodes carry leaf names and fixed combinator names."""
        result = example_rule.check({"name": "John Doe", "fav_number": "11"})

        assert [r.name for r in result.iter_nodes()] == [
            "And",
            "Name is John Doe",
            "Or",
            "Favorite number is 10",
            "Fav number between 11 and 16",
        ]


class TestCombinators:
    """Test cases for And, Or and NumberOf aggregation."""

    met = string_equals("met", "a", "1")
    not_met = string_equals("not met", "a", "2")
    facts = {"a": "1"}

    def test_empty_and_is_met(self):
        """Test vacuous truth."""
        assert check(and_([]), {}).status == Status.MET

    def test_empty_or_is_not_met(self):
        """Test empty Or."""
        assert check(or_([]), {}).status == Status.NOT_MET

    @pytest.mark.parametrize("children,expected", [
        ([met], Status.MET),
        ([met, met], Status.MET),
        ([met, not_met], Status.NOT_MET),
        ([not_met, met], Status.NOT_MET),
        ([not_met, not_met], Status.NOT_MET),
    ])
    def test_and(self, children, expected):
        """Test And is met only when every child is met."""
        assert and_(children).check(self.facts).status == expected

    @pytest.mark.parametrize("children,expected", [
        ([met], Status.MET),
        ([not_met, met], Status.MET),
        ([met, not_met], Status.MET),
        ([not_met], Status.NOT_MET),
        ([not_met, not_met], Status.NOT_MET),
    ])
    def test_or(self, children, expected):
        """Test Or is met when at least one child is met."""
        assert or_(children).check(self.facts).status == expected

    def test_no_short_circuit(self):
        """Test every child is reported even after the outcome is decided."""
        and_result = and_([self.not_met, self.met, self.met]).check(self.facts)
        or_result = or_([self.met, self.not_met, self.met]).check(self.facts)

        assert [r.status for r in and_result.children] == [Status.NOT_MET, Status.MET, Status.MET]
        assert [r.status for r in or_result.children] == [Status.MET, Status.NOT_MET, Status.MET]

    @pytest.mark.parametrize("n,expected", [
        (0, Status.MET),
        (1, Status.MET),
        (2, Status.MET),
        (3, Status.NOT_MET),
        (4, Status.NOT_MET),
    ])
    def test_n_of(self, n, expected):
        """Test NumberOf counts met children."""
        rule = n_of(n, [self.met, self.not_met, self.met])

        result = rule.check(self.facts)

        assert result.status == expected
        assert result.name == f"At least {n} of"
        assert len(result.children) == 3

    def test_empty_n_of(self):
        """Test NumberOf with no children."""
        assert n_of(0, []).check({}).status == Status.MET
        assert n_of(1, []).check({}).status == Status.NOT_MET


class TestResultTree:
    """Test cases for result tree structure."""

    @pytest.fixture
    def nested_rule(self):
        return and_([
            or_([]),
            n_of(1, [
                boolean("Active", "active", True),
                and_([int_equals("Age is 30", "age", 30)]),
            ]),
            string_equals("Country", "country", "NZ"),
        ])

    def test_shape_mirrors_rule(self, nested_rule):
        """Test result tree has the same arity and order as the rule tree."""
        result = nested_rule.check({"active": "TRUE", "age": "30"})

        assert shape(result) == shape(nested_rule)
        assert len(list(result.iter_nodes())) == count_nodes(nested_rule) == 7

    def test_leaves_have_no_children(self, nested_rule):
        """Test leaf results are childless."""
        result = nested_rule.check({})

        assert result.children[2].children == ()

    def test_deterministic(self, nested_rule):
        """Test repeated evaluation gives equal result trees."""
        facts = {"active": "true", "age": "31", "country": "NZ"}

        assert nested_rule.check(facts) == nested_rule.check(facts)

    def test_rule_reusable_across_fact_sets(self, example_rule):
        """Test one rule tree evaluated against different fact sets."""
        first = example_rule.check({"name": "John Doe", "fav_number": "12"})
        second = example_rule.check({"name": "Jane Doe", "fav_number": "12"})

        assert first.status == Status.MET
        assert second.status == Status.NOT_MET

    def test_facts_not_mutated(self, example_rule):
        """Test evaluation leaves the fact set untouched."""
        facts = {"name": "John Doe", "fav_number": "11"}

        example_rule.check(facts)

        assert facts == {"name": "John Doe", "fav_number": "11"}

    def test_module_check_matches_method(self, example_rule):
        """Test check() and RuleNode.check() agree."""
        facts = {"name": "John Doe", "fav_number": "16"}

        assert check(example_rule, facts) == example_rule.check(facts)

    def test_concurrent_evaluation(self, example_rule):
        """Test a shared rule tree evaluated from several threads."""
        fact_sets = [{"name": "John Doe", "fav_number": str(n)} for n in range(8, 20)]
        results = {}

        def worker(index, facts):
            results[index] = example_rule.check(facts)

        threads = [threading.Thread(target=worker, args=(i, f)) for i, f in enumerate(fact_sets)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert [results[i] for i in range(len(fact_sets))] == [example_rule.check(f) for f in fact_sets]

    def test_oversized_integer_fact(self, example_rule):
        """Test an over-long digit string fails closed and evaluation completes."""
        result = check(example_rule, {"name": "John Doe", "fav_number": "1" * 5000})

        or_result = result.children[1]
        assert [r.status for r in or_result.children] == [Status.NOT_MET, Status.NOT_MET]
        assert result.status == Status.NOT_MET

    def test_unknown_node_type(self):
        """Test check rejects objects that are not rule nodes."""
        with pytest.raises(TypeError):
            check(object(), {})

    def test_result_met_property(self):
        """Test RuleResult.met."""
        assert RuleResult(name="x", status=Status.MET).met is True
        assert RuleResult(name="x", status=Status.NOT_MET).met is False
