# tests/core_tests/test_engine.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Test suite for the fixpoint rewrite engine

"""Test suite for the rewrite engine.

Covers the worked traces, the tie-break policy of both strategies, the
rewrite budget and the assertions guarding against defective laws.
"""

import pytest
from parser import parse
from parser.ast_nodes import And, Or, Not, Literal, Variable
from logic.laws import Law, DEFAULT_CATALOG
from core.engine import (
    DEFAULT_MAX_NODES,
    RewriteEngine,
    Strategy,
    positions,
    replace_at,
    simplify_expression,
)
from core.exceptions import RewriteLimitExceeded, TreeSizeExceeded
from core.steps import StepRecorder
from utils.logger import get_logger

A, B, C = Variable("A"), Variable("B"), Variable("C")


class TestSimplifyTraces:
    """Exact traces for small expressions under the default engine."""

    def setup_method(self):
        self.logger = get_logger()

    TRACE_CASES = [
        ("!(A & B)", ["De Morgan (AND): ¬(A∧B) → ¬A∨¬B"], Or(Not(A), Not(B))),
        ("!(A | B)", ["De Morgan (OR): ¬(A∨B) → ¬A∧¬B"], And(Not(A), Not(B))),
        ("A & true", ["Identity (AND): A∧true → A"], A),
        ("A | false", ["Identity (OR): A∨false → A"], A),
        ("A & false", ["Domination (AND): A∧false → false"], Literal(False)),
        ("A | true", ["Domination (OR): A∨true → true"], Literal(True)),
        ("A & !A", ["Complement: A∧¬A → false"], Literal(False)),
        ("A | !A", ["Complement: A∨¬A → true"], Literal(True)),
        ("!!A", ["Double Negation: ¬¬A → A"], A),
        ("A & A", ["Idempotence: A∧A → A"], A),
        ("A & (A | B)", ["Absorption: A∧(A∨B) → A"], A),
        ("A | A & B", ["Absorption: A∨A∧B → A"], A),
        ("A & (B | C)", ["Distribution: A∧(B∨C) → A∧B∨A∧C"], Or(And(A, B), And(A, C))),
        ("B & A", ["Commutative: B∧A → A∧B"], And(A, B)),
        ("A & B & C", ["Associative: A∧B∧C → A∧(B∧C)"], And(A, And(B, C))),
        ("A -> B", ["Implication: A⇒B → ¬A∨B"], Or(Not(A), B)),
        (
            "C & B & A",
            [
                "Associative: C∧B∧A → C∧(B∧A)",
                "Commutative: C∧(B∧A) → B∧(C∧A)",
                "Commutative: C∧A → A∧C",
                "Commutative: B∧(A∧C) → A∧(B∧C)",
            ],
            And(A, And(B, C)),
        ),
        (
            "A & B & A",
            [
                "Associative: A∧B∧A → A∧(B∧A)",
                "Commutative: B∧A → A∧B",
                "Idempotence: A∧(A∧B) → A∧B",
            ],
            And(A, B),
        ),
        ("!true", ["Constant Negation: ¬true → false"], Literal(False)),
        ("A | B & C", [], Or(A, And(B, C))),
        ("A", [], A),
    ]

    @pytest.mark.parametrize("source, expected_steps, expected_tree", TRACE_CASES)
    def test_trace(self, engine, source, expected_steps, expected_tree):
        """Test the exact steps and final tree for an expression.

        Args:
            source: Expression text
            expected_steps: Trace lines in order
            expected_tree: Tree at fixpoint
        """
        steps = StepRecorder()
        result = engine.simplify(parse(source), steps)

        self.logger.debug(f"{source}: {list(steps)}")

        assert list(steps) == expected_steps
        assert result == expected_tree

    def test_simplify_expression_accepts_text_and_trees(self):
        tree, steps = simplify_expression("A & true")
        assert tree == A
        assert steps.count() == 1

        tree, steps = simplify_expression(And(A, Literal(True)))
        assert tree == A
        assert steps.at(0) == "Identity (AND): A∧true → A"

    def test_input_tree_is_not_modified(self, engine):
        original = parse("!(A & B) | C & true")
        snapshot = parse("!(A & B) | C & true")

        engine.simplify(original, StepRecorder())

        assert original == snapshot

    def test_desugar_runs_before_catalog(self, engine):
        steps = StepRecorder()
        engine.simplify(parse("!(A -> B)"), steps)

        assert steps.at(0) == "Implication: A⇒B → ¬A∨B"
        assert steps.at(1) == "De Morgan (OR): ¬(¬A∨B) → ¬¬A∧¬B"
        assert steps.at(2) == "Double Negation: ¬¬A → A"
        assert steps.count() == 3

    def test_biconditional_trace_starts_with_desugaring(self, engine):
        steps = StepRecorder()
        engine.simplify(parse("A <-> B"), steps)

        assert list(steps)[:3] == [
            "Biconditional: A⇔B → (A⇒B)∧(B⇒A)",
            "Implication: A⇒B → ¬A∨B",
            "Implication: B⇒A → ¬B∨A",
        ]


class TestTieBreakPolicy:
    """Law-first and position-first strategies."""

    SOURCE = "B & A | !!C"

    def test_law_first_prefers_earlier_law(self):
        engine = RewriteEngine(strategy=Strategy.LAW_FIRST)
        path, rewrite = engine.find_rewrite(parse(self.SOURCE))

        assert path == (1,)
        assert rewrite.describe() == "Double Negation: ¬¬C → C"

    def test_position_first_prefers_earlier_position(self):
        engine = RewriteEngine(strategy=Strategy.POSITION_FIRST)
        path, rewrite = engine.find_rewrite(parse(self.SOURCE))

        assert path == ()
        assert rewrite.describe() == "Commutative: B∧A∨¬¬C → ¬¬C∨B∧A"

    def test_strategies_reach_the_same_fixpoint_here(self):
        results = []
        for strategy in Strategy:
            steps = StepRecorder()
            results.append(RewriteEngine(strategy=strategy).simplify(parse(self.SOURCE), steps))
            assert steps.count() == 3

        assert results[0] == results[1] == Or(C, And(A, B))

    def test_strategy_from_string(self):
        assert RewriteEngine(strategy="position-first").strategy is Strategy.POSITION_FIRST

    def test_fixpoint_has_no_rewrite(self, engine):
        assert engine.find_rewrite(parse("A | B & C")) is None

    def test_leftmost_position_wins_within_a_law(self, engine):
        path, rewrite = engine.find_rewrite(parse("!!A & !!B"))

        assert path == (0,)
        assert rewrite.after == A


class TestRewriteLimit:
    """The rewrite budget guards against non-termination."""

    def test_limit_exceeded_keeps_partial_trace(self):
        engine = RewriteEngine(max_rewrites=1)
        steps = StepRecorder()

        with pytest.raises(RewriteLimitExceeded) as exc_info:
            engine.simplify(parse("C & B & A"), steps)

        assert exc_info.value.limit == 1
        assert list(steps) == ["Associative: C∧B∧A → C∧(B∧A)"]

    def test_exact_budget_is_enough(self):
        steps = StepRecorder()
        result = RewriteEngine(max_rewrites=4).simplify(parse("C & B & A"), steps)

        assert result == And(A, And(B, C))
        assert steps.count() == 4

    def test_zero_budget(self):
        engine = RewriteEngine(max_rewrites=0)

        assert engine.simplify(parse("A | B"), StepRecorder()) == Or(A, B)
        with pytest.raises(RewriteLimitExceeded):
            engine.simplify(parse("!!A"), StepRecorder())

    def test_cycling_law_is_stopped(self):
        flip = Law("Flip", lambda n: And(n.right, n.left) if isinstance(n, And) else None)
        engine = RewriteEngine(catalog=[flip], max_rewrites=50)
        steps = StepRecorder()

        with pytest.raises(RewriteLimitExceeded):
            engine.simplify(parse("A & B"), steps)

        assert steps.count() == 50
        assert steps.at(0) == "Flip: A∧B → B∧A"
        assert steps.at(1) == "Flip: B∧A → A∧B"

    def test_negative_budget_rejected(self):
        with pytest.raises(ValueError):
            RewriteEngine(max_rewrites=-1)


class TestTreeBounds:
    """Node and depth bounds stop inputs that keep growing."""

    GROWING = "C <-> !!C ^ (B <-> A <-> (B <-> D))"

    def test_growing_input_stops_at_node_bound(self):
        engine = RewriteEngine(max_nodes=200)
        steps = StepRecorder()

        with pytest.raises(TreeSizeExceeded) as exc_info:
            engine.simplify(parse(self.GROWING), steps)

        assert isinstance(exc_info.value, RewriteLimitExceeded)
        assert exc_info.value.limit == 200
        assert exc_info.value.measure == "nodes"
        assert 0 < steps.count() < engine.max_rewrites
        assert steps.at(0).startswith("Biconditional: ")

    def test_node_bound_is_on_by_default(self):
        assert RewriteEngine().max_nodes == DEFAULT_MAX_NODES

    def test_input_deeper_than_bound(self):
        tree = A
        for _ in range(300):
            tree = Not(tree)
        steps = StepRecorder()

        with pytest.raises(TreeSizeExceeded) as exc_info:
            RewriteEngine().simplify(tree, steps)

        assert exc_info.value.measure == "levels"
        assert steps.count() == 0

    def test_input_larger_than_bound(self):
        with pytest.raises(TreeSizeExceeded):
            RewriteEngine(max_nodes=4).simplify(parse("A & B & C"), StepRecorder())

    def test_small_inputs_are_unaffected(self):
        steps = StepRecorder()
        result = RewriteEngine(max_nodes=5).simplify(parse("C & B & A"), steps)

        assert result == And(A, And(B, C))
        assert steps.count() == 4

    @pytest.mark.parametrize("kwargs", [{"max_nodes": 0}, {"max_depth": 0}])
    def test_invalid_bounds_rejected(self, kwargs):
        with pytest.raises(ValueError):
            RewriteEngine(**kwargs)


class TestDefectiveLaws:
    """Laws producing invalid trees fail loudly."""

    def test_law_introducing_a_variable(self):
        bad = Law("Bad", lambda n: Variable("Z") if n == A else None)
        engine = RewriteEngine(catalog=[bad])

        with pytest.raises(AssertionError):
            engine.simplify(parse("A & B"), StepRecorder())

    def test_law_returning_a_non_expression(self):
        bad = Law("Broken", lambda n: "oops" if n == A else None)
        engine = RewriteEngine(catalog=[bad])

        with pytest.raises(AssertionError):
            engine.simplify(A, StepRecorder())

    def test_custom_catalog_is_used_verbatim(self):
        engine = RewriteEngine(catalog=DEFAULT_CATALOG[:1])
        steps = StepRecorder()

        assert engine.simplify(parse("B & A & true"), steps) == parse("B & A & true")
        assert steps.count() == 0


class TestTreePositions:
    """Pre-order traversal and path-based replacement."""

    def test_pre_order(self):
        tree = And(Not(A), B)

        assert [path for path, _ in positions(tree)] == [(), (0,), (0, 0), (1,)]
        assert [node for _, node in positions(tree)] == [tree, Not(A), A, B]

    def test_replace_at(self):
        tree = And(Not(A), B)

        assert replace_at(tree, (0, 0), C) == And(Not(C), B)
        assert replace_at(tree, (1,), C) == And(Not(A), C)
        assert replace_at(tree, (), C) == C

    def test_replace_at_keeps_untouched_subtrees(self):
        left = Or(A, B)
        tree = And(left, C)

        assert replace_at(tree, (1,), A).left is left
