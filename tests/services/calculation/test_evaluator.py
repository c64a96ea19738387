"""Tests for bottom-up evaluation of runtime hierarchies."""

from spha.domain.models import Empty, Error, Incomplete, KpiStrategyId, Success, Threshold
from spha.services.calculation import bind, evaluate, to_result_hierarchy
from spha.services.calculation.evaluator import calculate_node, Evaluation
from tests.builders import leaf, node, raw


class TestEvaluate:
    """evaluate() computes every node once, children first."""

    def test_results_and_actual_weights_are_recorded(self, two_leaf_average):
        root = bind(two_leaf_average.root, [raw("A", 80), raw("B", 60)])

        evaluation = evaluate(root)

        assert evaluation.root_result == Success(score=70)
        assert [evaluation.result_of(e.to) for e in root.edges] == [
            Success(score=80),
            Success(score=60),
        ]
        assert [evaluation.actual_weight_of(e) for e in root.edges] == [0.5, 0.5]

    def test_runtime_nodes_are_not_modified(self, two_leaf_average):
        root = bind(two_leaf_average.root, [raw("A", 80)])

        evaluate(root)

        assert isinstance(root.initial_result, Empty)
        assert root.edges[0].to.initial_result == Success(score=80)

    def test_error_propagates_as_missing_child(self):
        definition = node(
            "ROOT",
            KpiStrategyId.WEIGHTED_AVERAGE,
            (node("RATIO", KpiStrategyId.WEIGHTED_RATIO, (leaf("A"), 1.0), (leaf("B"), 1.0)), 0.5),
            (leaf("C"), 0.5),
        )
        root = bind(definition, [raw("A", 1), raw("B", 0), raw("C", 60)])

        evaluation = evaluate(root)

        assert isinstance(evaluation.result_of(root.edges[0].to), Error)
        assert isinstance(evaluation.root_result, Incomplete)
        assert evaluation.root_result.score == 60

    def test_tech_lag_leaves_are_transformed(self):
        definition = node(
            "ROOT",
            KpiStrategyId.MAXIMUM,
            (
                leaf(
                    "TECHNICAL_LAG_DEV_DIRECT_COMPONENT",
                    thresholds=[Threshold(name="maxLag", value=50)],
                ),
                1.0,
            ),
        )

        evaluation = evaluate(bind(definition, [raw("TECHNICAL_LAG_DEV_DIRECT_COMPONENT", 75)]))

        assert evaluation.root_result == Success(score=50)

    def test_strict_mode_reaches_strategies(self):
        definition = node("ROOT", KpiStrategyId.XOR, (leaf("A"), 1.0))
        root = bind(definition, [raw("A", 100)])

        assert evaluate(root, strict=False).root_result == Success(score=100)
        assert isinstance(evaluate(root, strict=True).root_result, Error)


def test_calculate_node_uses_recorded_child_results():
    definition = node("ROOT", KpiStrategyId.MINIMUM, (leaf("A"), 1.0), (leaf("B"), 1.0))
    root = bind(definition, [raw("A", 30), raw("B", 70)])
    evaluation = Evaluation(root=root)
    evaluation.results[root.edges[1].to] = Success(score=10)

    assert calculate_node(root, evaluation) == Success(score=10)


def test_to_result_hierarchy_mirrors_runtime_tree(two_leaf_average):
    root = bind(two_leaf_average.root, [raw("A", 80, origin_id="o-1")])

    result = to_result_hierarchy(evaluate(root))

    assert result.root.type_id == "ROOT"
    assert result.root.id == root.id
    assert result.root.result == Incomplete(
        score=80, reason="1 of 2 children have no result"
    )
    a, b = result.root.edges
    assert a.target.origin_id == "o-1"
    assert (a.planned_weight, a.actual_weight) == (0.5, 1.0)
    assert (b.planned_weight, b.actual_weight) == (0.5, 0.0)
    assert isinstance(b.target.result, Empty)
