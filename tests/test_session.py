import copy
import unittest

from wordsearch.core.constants import Difficulty
from wordsearch.core.models import Placement
from wordsearch.engine.generator import BoardGenerator, GeneratorConfig
from wordsearch.engine.grid import GridConfig, WordSearchGrid
from wordsearch.engine.session import PuzzleSession


class FakeClock:
    def __init__(self, now: float = 100.0) -> None:
        self.now = now

    def __call__(self) -> float:
        return self.now


def build_grid() -> WordSearchGrid:
    # c a t z
    # z z z d
    # z x z o
    # o z z g
    grid = WordSearchGrid(GridConfig(size=4))
    grid.place_word(Placement(word="cat", start_x=0, start_y=0, dx=1, dy=0))
    grid.place_word(Placement(word="dog", start_x=3, start_y=1, dx=0, dy=1))
    grid.place_word(Placement(word="ox", start_x=0, start_y=3, dx=1, dy=-1))
    grid.fill_empty("z")
    return grid


class AnswerTests(unittest.TestCase):
    def setUp(self) -> None:
        self.clock = FakeClock()
        self.session = PuzzleSession(build_grid(), ["cat", "dog", "ox"], clock=self.clock)

    def test_forward_match_uppercases_path(self) -> None:
        self.assertTrue(self.session.answer(0, 0, 2, 0))
        self.assertEqual(self.session.grid.row(0), ["C", "A", "T", "z"])
        self.assertEqual(self.session.found_words, ["cat"])

    def test_reversed_endpoints_match(self) -> None:
        self.assertTrue(self.session.answer(3, 3, 3, 1))
        self.assertEqual(self.session.found_words, ["dog"])
        self.assertEqual([self.session.grid.cell(3, y) for y in (1, 2, 3)], ["D", "O", "G"])

    def test_match_is_symmetric(self) -> None:
        other = PuzzleSession(build_grid(), ["cat", "dog", "ox"], clock=self.clock)
        self.assertEqual(self.session.answer(0, 3, 1, 2), other.answer(1, 2, 0, 3))
        self.assertEqual(self.session.grid.cells, other.grid.cells)

    def test_repeat_answer_is_idempotent(self) -> None:
        self.assertTrue(self.session.answer(0, 0, 2, 0))
        before = copy.deepcopy(self.session.grid.cells)
        self.assertTrue(self.session.answer(2, 0, 0, 0))
        self.assertEqual(self.session.found_words, ["cat"])
        self.assertEqual(self.session.grid.cells, before)

    def test_miss_leaves_grid_untouched(self) -> None:
        before = copy.deepcopy(self.session.grid.cells)
        self.assertFalse(self.session.answer(0, 0, 1, 0))
        self.assertFalse(self.session.answer(0, 0, 2, 1))
        self.assertEqual(self.session.grid.cells, before)
        self.assertEqual(self.session.found_words, [])

    def test_out_of_bounds_rejected(self) -> None:
        self.assertFalse(self.session.answer(0, 0, 4, 0))
        self.assertFalse(self.session.answer(-1, 0, 2, 0))
        self.assertFalse(self.session.answer(25, 25, 25, 25))

    def test_word_list_compared_case_insensitively(self) -> None:
        session = PuzzleSession(build_grid(), ["Cat"], clock=self.clock)
        self.assertTrue(session.answer(0, 0, 2, 0))
        self.assertEqual(session.found_words, ["Cat"])

    def test_completion_and_status(self) -> None:
        self.assertFalse(self.session.is_complete)
        self.session.answer(0, 0, 2, 0)
        self.assertEqual(
            self.session.word_status(),
            [("cat", True), ("dog", False), ("ox", False)],
        )
        self.session.answer(3, 1, 3, 3)
        self.session.answer(1, 2, 0, 3)
        self.assertTrue(self.session.is_complete)

    def test_elapsed_seconds_and_difficulty(self) -> None:
        self.clock.now = 142.7
        self.assertEqual(self.session.elapsed_seconds, 42)
        self.assertEqual(self.session.difficulty, Difficulty.VERY_EASY)


class DifficultyTests(unittest.TestCase):
    def test_thresholds(self) -> None:
        expected = {
            1: Difficulty.VERY_EASY,
            6: Difficulty.VERY_EASY,
            7: Difficulty.EASY,
            9: Difficulty.EASY,
            10: Difficulty.MEDIUM,
            15: Difficulty.MEDIUM,
            16: Difficulty.HARD,
            18: Difficulty.HARD,
            19: Difficulty.VERY_HARD,
            21: Difficulty.VERY_HARD,
            22: Difficulty.EXTREMELY_HARD,
            40: Difficulty.EXTREMELY_HARD,
        }
        for size, tier in expected.items():
            self.assertEqual(Difficulty.for_size(size), tier, size)

    def test_labels(self) -> None:
        self.assertEqual(Difficulty.EXTREMELY_HARD.value, "Extremely Hard")


class GeneratedSessionTests(unittest.TestCase):
    def test_every_placement_can_be_answered(self) -> None:
        words = ["python", "search", "puzzle", "grid", "random"]
        result = BoardGenerator(GeneratorConfig(seed=31)).generate(words)
        session = PuzzleSession.from_result(result, clock=FakeClock())
        for placement in result.placements:
            end_x, end_y = placement.end
            self.assertTrue(session.answer(placement.start_x, placement.start_y, end_x, end_y))
        self.assertTrue(session.is_complete)
        self.assertEqual(sorted(session.found_words), sorted(words))


class UnicodeAnswerTests(unittest.TestCase):
    def test_sharp_s_answer_is_repeatable(self) -> None:
        grid = WordSearchGrid(GridConfig(size=6))
        grid.place_word(Placement(word="straße", start_x=0, start_y=0, dx=1, dy=0))
        grid.fill_empty("z")
        session = PuzzleSession(grid, ["straße"], clock=FakeClock())

        self.assertTrue(session.answer(0, 0, 5, 0))
        before = copy.deepcopy(grid.cells)
        self.assertTrue(session.answer(0, 0, 5, 0))
        self.assertEqual(grid.cells, before)
        self.assertEqual(session.found_words, ["straße"])
        for row in grid.cells:
            for letter in row:
                self.assertEqual(len(letter), 1)

    def test_dotted_capital_i_answer(self) -> None:
        result = BoardGenerator(GeneratorConfig(seed=6)).generate(["İzmir", "ankara"])
        session = PuzzleSession.from_result(result, clock=FakeClock())
        for placement in result.placements:
            end_x, end_y = placement.end
            self.assertTrue(session.answer(end_x, end_y, placement.start_x, placement.start_y))
        self.assertTrue(session.is_complete)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
