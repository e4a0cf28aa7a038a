# tests/core_tests/test_batch.py
# This file is part of LEC - A Logical Expression Rewriting Engine
#
# Test suite for multi-expression evaluation

import pytest
from parser import parse
from parser.exceptions import ParseError, UnbalancedParen, UnexpectedToken, NestingTooDeep
from core.batch import BatchEvaluator, evaluate_many, split_input
from core.engine import RewriteEngine
from core.exceptions import RewriteLimitExceeded, TreeSizeExceeded
from logic.laws import DEFAULT_CATALOG, Law
from utils.logger import get_logger


class TestSplitInput:
    """Separation of a raw input into expressions and assignments."""

    def test_lines_and_separators(self):
        pieces, env = split_input("A & B\nB | C; !C\n\n   \nC")

        assert [p.source for p in pieces] == ["A & B", "B | C", "!C", "C"]
        assert [p.line for p in pieces] == [1, 2, 2, 5]
        assert env == {}

    def test_comments_are_skipped(self):
        pieces, _ = split_input("# heading\n  # indented comment\nA")

        assert [p.source for p in pieces] == ["A"]

    @pytest.mark.parametrize(
        "line, name, value",
        [
            ("A = TRUE", "A", True),
            ("A=false", "A", False),
            ("flag = 1", "flag", True),
            ("x_1 = 0", "x_1", False),
            ("B = True", "B", True),
        ],
    )
    def test_assignments(self, line, name, value):
        pieces, env = split_input(line)

        assert pieces == []
        assert env == {name: value}

    def test_last_assignment_wins(self):
        _, env = split_input("A = TRUE\nA & B\nA = FALSE")

        assert env == {"A": False}

    def test_implication_is_not_an_assignment(self):
        pieces, env = split_input("A => B")

        assert [p.source for p in pieces] == ["A => B"]
        assert env == {}

    def test_malformed_assignment_becomes_error_piece(self):
        pieces, env = split_input("A = maybe")

        assert env == {}
        assert len(pieces) == 1
        assert isinstance(pieces[0].error, UnexpectedToken)
        assert "maybe" in str(pieces[0].error)


class TestBatchEvaluator:
    """Independent evaluation of every expression of a batch."""

    def setup_method(self):
        self.logger = get_logger()

    def test_traces_per_expression(self):
        entries = evaluate_many("A&true\nB|false")

        assert len(entries) == 2
        assert list(entries[0].steps) == ["Identity (AND): A∧true → A"]
        assert list(entries[1].steps) == ["Identity (OR): B∨false → B"]
        assert entries[0].tree == parse("A")
        assert entries[1].tree == parse("B")
        assert all(entry.ok for entry in entries)

    def test_failure_is_kept_per_entry(self, sample_batch):
        entries = evaluate_many(sample_batch)

        assert [entry.source for entry in entries] == ["A & true", "(B |", "!(A & B)"]
        assert [entry.line for entry in entries] == [4, 6, 7]
        assert [entry.index for entry in entries] == [0, 1, 2]

        failed = entries[1]
        assert not failed.ok
        assert isinstance(failed.error, UnbalancedParen)
        assert failed.tree is None
        assert failed.steps.count() == 0

        assert entries[2].ok
        assert list(entries[2].steps) == ["De Morgan (AND): ¬(A∧B) → ¬A∨¬B"]

    def test_entries_do_not_share_state(self):
        alone = evaluate_many("!(A & B)")[0]
        batched = evaluate_many("A & true\n!(A & B)\nA | !A")[1]

        assert list(alone.steps) == list(batched.steps)
        assert alone.tree == batched.tree

    def test_syntax_error_in_middle(self):
        entries = evaluate_many("A & B\nA &\nB & A")

        assert entries[0].ok and entries[2].ok
        assert isinstance(entries[1].error, ParseError)
        assert str(entries[1].error) == "Syntax error: Unexpected end of expression"
        assert list(entries[2].steps) == ["Commutative: B∧A → A∧B"]

    def test_values_from_assignments(self):
        entries = evaluate_many("A = TRUE\nB = false\nA & B\nA | B; !B")

        assert [entry.value for entry in entries] == [False, True, True]

    def test_assignment_after_use_still_applies(self):
        entries = evaluate_many("A & true\nA = 1")

        assert len(entries) == 1
        assert entries[0].value is True

    def test_unbound_variable_leaves_value_unset(self):
        entries = evaluate_many("A = TRUE\nA & C")

        assert entries[0].ok
        assert entries[0].value is None

    def test_constant_expression_has_value(self):
        entries = evaluate_many("A & !A")

        assert entries[0].tree == parse("false")
        assert entries[0].value is False

    def test_malformed_assignment_entry(self):
        entries = evaluate_many("A = maybe\nA | false")

        assert len(entries) == 2
        assert isinstance(entries[0].error, UnexpectedToken)
        assert entries[1].ok

    def test_rewrite_limit_inside_batch(self):
        engine = RewriteEngine(max_rewrites=1)
        entries = BatchEvaluator(engine).evaluate_many("C & B & A\n!!A")

        assert isinstance(entries[0].error, RewriteLimitExceeded)
        assert entries[0].steps.count() == 1
        assert entries[1].ok
        assert entries[1].tree == parse("A")

    def test_deeply_nested_entry_does_not_abort_batch(self):
        entries = evaluate_many("A & true\n" + "!" * 1200 + "A\nB | false")

        assert len(entries) == 3
        assert isinstance(entries[1].error, NestingTooDeep)
        assert list(entries[0].steps) == ["Identity (AND): A∧true → A"]
        assert list(entries[2].steps) == ["Identity (OR): B∨false → B"]

    def test_recursion_error_is_kept_per_entry(self):
        def too_deep(node):
            if node == parse("A"):
                raise RecursionError("maximum recursion depth exceeded")
            return None

        engine = RewriteEngine(catalog=(Law("Too Deep", too_deep),) + DEFAULT_CATALOG)
        entries = BatchEvaluator(engine).evaluate_many("A & B\n!!B")

        assert isinstance(entries[0].error, RecursionError)
        assert entries[0].tree is None
        assert entries[1].ok
        assert entries[1].tree == parse("B")

    def test_growing_entry_stops_and_batch_continues(self):
        engine = RewriteEngine(max_nodes=200)
        text = "C <-> !!C ^ (B <-> A <-> (B <-> D))\nA & true"
        entries = BatchEvaluator(engine).evaluate_many(text)

        assert isinstance(entries[0].error, TreeSizeExceeded)
        assert entries[0].steps.count() > 0
        assert entries[1].tree == parse("A")

    def test_parallel_matches_sequential(self):
        text = "\n".join(
            ["C & B & A", "!(A | B)", "A -> B", "(A", "A & (B | C)", "A <-> B", "!!!A", "A ^ B"]
        )

        sequential = BatchEvaluator(max_workers=1).evaluate_many(text)
        parallel = BatchEvaluator(max_workers=4).evaluate_many(text)

        self.logger.debug(f"{len(parallel)} entries evaluated in parallel")

        assert [e.source for e in parallel] == [e.source for e in sequential]
        assert [list(e.steps) for e in parallel] == [list(e.steps) for e in sequential]
        assert [e.tree for e in parallel] == [e.tree for e in sequential]
        assert [type(e.error) for e in parallel] == [type(e.error) for e in sequential]

    def test_entry_unpacks_to_tree_and_steps(self):
        tree, steps = evaluate_many("A & true")[0]

        assert tree == parse("A")
        assert steps.count() == 1

    def test_empty_input(self):
        assert evaluate_many("") == []
        assert evaluate_many("# only a comment\n\n") == []

    def test_invalid_worker_count(self):
        with pytest.raises(ValueError):
            BatchEvaluator(max_workers=0)
