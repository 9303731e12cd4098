import unittest

from tango.core.constants import GRID_SIZE, ConstraintType
from tango.engine.grid import TangoPuzzle
from tango.engine.minimizer import (MinimizerConfig, PuzzleMinimizer, adjacent_fixed_cells,
                                    clue_types_for, minimize)
from tango.engine.solver import enumerate_solutions, has_unique_solution


SOLVED_ROWS = ["XXYXYY", "XYXYXY", "YYXYXX", "YXYXYX", "XXYXYY", "YYXYXX"]


def only_solution(puzzle: TangoPuzzle) -> TangoPuzzle:
    solutions = list(enumerate_solutions(puzzle.copy()))
    assert len(solutions) == 1, f"expected one solution, got {len(solutions)}"
    return solutions[0]


class MinimizeGivensTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.solved = TangoPuzzle.from_grid(SOLVED_ROWS)
        cls.minimizer = PuzzleMinimizer(MinimizerConfig(include_constraints=False))
        cls.reduced = cls.minimizer.minimize(cls.solved)

    def test_removes_givens(self) -> None:
        self.assertLess(self.reduced.cells_set, 36)
        self.assertEqual(self.reduced.constraints_set, 0)
        self.assertEqual(self.minimizer.steps, 36 - self.reduced.cells_set)

    def test_input_is_untouched(self) -> None:
        self.assertEqual(self.solved.cells_set, 36)
        self.assertTrue(self.solved.is_complete())

    def test_solution_is_preserved(self) -> None:
        self.assertTrue(has_unique_solution(self.reduced))
        self.assertEqual(only_solution(self.reduced).rows(), self.solved.rows())

    def test_result_is_a_fixpoint(self) -> None:
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                if not self.reduced.is_cell_fixed(r, c):
                    continue
                candidate = self.reduced.copy()
                candidate.unfix_cell(r, c)
                self.assertFalse(has_unique_solution(candidate), msg=f"({r},{c}) is removable")

    def test_minimizing_again_changes_nothing(self) -> None:
        again = minimize(self.reduced, include_constraints=False)
        self.assertEqual(again.rows(), self.reduced.rows())
        self.assertEqual(again.fixed, self.reduced.fixed)

    def test_first_given_is_removed_first(self) -> None:
        # A solved grid stays unique without its top-left cell.
        self.assertFalse(self.reduced.is_cell_fixed(0, 0))

    def test_cpsat_oracle_reaches_the_same_puzzle(self) -> None:
        minimizer = PuzzleMinimizer(MinimizerConfig(include_constraints=False, oracle="cpsat"))
        reduced = minimizer.minimize(self.solved)
        self.assertEqual(reduced.fixed, self.reduced.fixed)
        self.assertEqual(reduced.rows(), self.reduced.rows())


class MinimizeWithConstraintsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.solved = TangoPuzzle.from_grid(SOLVED_ROWS)
        cls.givens_only = minimize(cls.solved, include_constraints=False)
        cls.reduced = minimize(cls.givens_only, include_constraints=True)

    def test_score_does_not_increase(self) -> None:
        self.assertLessEqual(self.reduced.score, self.givens_only.score)
        self.assertLessEqual(self.reduced.cells_set, self.givens_only.cells_set)

    def test_solution_is_preserved(self) -> None:
        self.assertEqual(only_solution(self.reduced).rows(), self.solved.rows())

    def test_clues_hold_in_solution_and_join_neighbours(self) -> None:
        for constraint in self.reduced.constraints:
            distance = abs(constraint.row1 - constraint.row2) + abs(constraint.col1 - constraint.col2)
            self.assertEqual(distance, 1)
            first = self.solved.get_cell(*constraint.first)
            second = self.solved.get_cell(*constraint.second)
            if constraint.type == ConstraintType.SAME:
                self.assertEqual(first, second)
            else:
                self.assertNotEqual(first, second)

    def test_every_clue_replaced_a_given(self) -> None:
        removed = self.givens_only.cells_set - self.reduced.cells_set
        self.assertGreaterEqual(removed, self.reduced.constraints_set)


class MinimizeFullGridWithConstraintsTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls) -> None:
        cls.solved = TangoPuzzle.from_grid(SOLVED_ROWS)
        cls.reduced = minimize(cls.solved, include_constraints=True)

    def test_clues_are_added(self) -> None:
        self.assertGreater(self.reduced.constraints_set, 0)
        self.assertLess(self.reduced.score, 36)

    def test_only_completion_is_the_input_grid(self) -> None:
        self.assertEqual(only_solution(self.reduced).rows(), self.solved.rows())

    def test_every_clue_holds_in_the_solution(self) -> None:
        for constraint in self.reduced.constraints:
            self.assertTrue(
                constraint.holds(
                    self.solved.get_cell(*constraint.first),
                    self.solved.get_cell(*constraint.second),
                ),
                msg=f"{constraint} contradicts the solution",
            )

    def test_no_same_clue_between_differing_cells(self) -> None:
        # (4,5) holds Y and (5,5) holds X.
        clue = self.reduced.constraint_between((4, 5), (5, 5))
        if clue is not None:
            self.assertEqual(clue.type, ConstraintType.DIFFERENT)


class MinimizerHelperTests(unittest.TestCase):
    def test_unknown_oracle_rejected(self) -> None:
        with self.assertRaises(ValueError):
            MinimizerConfig(oracle="guess")

    def test_adjacent_fixed_cells_order(self) -> None:
        puzzle = TangoPuzzle.from_grid(SOLVED_ROWS)
        self.assertEqual(list(adjacent_fixed_cells(puzzle, 2, 2)), [(1, 2), (3, 2), (2, 1), (2, 3)])
        puzzle.unfix_cell(1, 2)
        self.assertEqual(list(adjacent_fixed_cells(puzzle, 2, 2)), [(3, 2), (2, 1), (2, 3)])
        self.assertEqual(list(adjacent_fixed_cells(puzzle, 0, 0)), [(1, 0), (0, 1)])

    def test_clue_types_follow_current_values(self) -> None:
        puzzle = TangoPuzzle.from_grid(SOLVED_ROWS)
        # (0,0) and (0,1) are both X; (0,1) and (0,2) differ.
        self.assertEqual(list(clue_types_for(puzzle, (0, 0), (0, 1))), [ConstraintType.SAME])
        self.assertEqual(list(clue_types_for(puzzle, (0, 1), (0, 2))), [ConstraintType.DIFFERENT])


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
