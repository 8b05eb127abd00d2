import io
import os
import tempfile
import unittest
from pathlib import Path
from unittest.mock import patch

from wordpaths.board import Point
from wordpaths.exceptions import DuplicateAnchorError, MissingAnchorError
from wordpaths.puzzle_config import PuzzleConfig, clean
from wordpaths.render import flatten, flatten_word
from wordpaths.solver.config import SolverConfig
from wordpaths.solver.solver import add_words, run, search_grids, solve_one
from wordpaths.solver.task_args import TaskArgs
from wordpaths.solver.utils import WordPlacement
from wordpaths.tiles import OneWord, TwoWords


def isolated_settings(**overrides) -> SolverConfig:
    """Settings built from defaults only, ignoring WORDPATHS_* variables and .env files."""
    env = {k: v for k, v in os.environ.items() if not k.upper().startswith("WORDPATHS_")}
    with patch.dict(os.environ, env, clear=True):
        return SolverConfig(_env_file=None, **overrides)


def make_config(rows: list[str], words: list[str]) -> PuzzleConfig:
    dims, board_str = clean(rows)
    return PuzzleConfig(dims=dims, board_str=board_str, words=words)


class AddWordsTests(unittest.TestCase):
    def setUp(self) -> None:
        self.logf = io.StringIO()
        self.settings = isolated_settings()

    def solve(self, rows: list[str], words: list[str], **overrides) -> tuple[TaskArgs, object]:
        settings = self.settings.model_copy(update=overrides)
        task_args = TaskArgs(config=make_config(rows, words), settings=settings)
        result = add_words(
            [task_args.grid], task_args.placements, logf=self.logf, settings=settings
        )
        return task_args, result

    def test_unplaceable_word_is_skipped(self) -> None:
        task_args, result = self.solve(["abc", "d e"], ["ad", "be"])
        self.assertEqual(result.placed, ["ad"])
        self.assertEqual(result.skipped, ["be"])
        # Both anchors of "ad" are fixed, so its only path claims no cell
        self.assertEqual(result.grids, [task_args.grid])
        self.assertEqual(str(flatten(result.grids)), "ABC\nD E")
        self.assertIn('could not produce any paths to fit "be"!', self.logf.getvalue())

    def test_skip_keeps_previous_candidates(self) -> None:
        task_args, result = self.solve(["a ", " b"], ["axb", "ab"], sort_words_by_length=False)
        placed = search_grids([task_args.grid], task_args.placements[0])
        self.assertEqual(result.skipped, ["ab"])
        self.assertEqual(result.grids, placed)
        self.assertEqual(len(result.grids), 2)

    def test_later_words_still_placed_after_skip(self) -> None:
        _, result = self.solve([" a ", "c d", " b "], ["cd", "axb", "cxd"])
        self.assertEqual(result.skipped, ["cd"])
        self.assertEqual(result.placed, ["axb", "cxd"])
        (grid,) = result.grids
        self.assertEqual(grid[Point(1, 1)], TwoWords("x", "axb", "cxd"))

    def test_stop_on_unplaceable(self) -> None:
        _, result = self.solve(
            [" a ", "c d", " b "], ["cd", "axb", "cxd"], stop_on_unplaceable=True
        )
        self.assertEqual(result.placed, [])
        self.assertEqual(result.skipped, ["cd", "axb", "cxd"])
        self.assertNotIn('searching "axb"', self.logf.getvalue())

    def test_shortest_words_first(self) -> None:
        task_args, result = self.solve([" a ", "c d", " b "], ["cxyzd", "axb"])
        self.assertEqual([p.word for p in task_args.placements], ["axb", "cxyzd"])
        log = self.logf.getvalue()
        self.assertLess(log.index('searching "axb" on 1 grids'), log.index('searching "cxyzd"'))
        # "cxyzd" would have to leave the crossing cell towards a fixed letter
        self.assertEqual(result.placed, ["axb"])
        self.assertEqual(result.skipped, ["cxyzd"])
        for grid in result.grids:
            self.assertEqual(grid[Point(1, 1)], OneWord("x", "axb"))

    def test_input_order_when_sorting_disabled(self) -> None:
        task_args, _ = self.solve(
            [" a ", "c d", " b "], ["cxyzd", "axb"], sort_words_by_length=False
        )
        self.assertEqual([p.word for p in task_args.placements], ["cxyzd", "axb"])

    def test_crossing_words_render(self) -> None:
        task_args, result = self.solve([" a ", "c d", " b "], ["axb", "cyd"])
        self.assertEqual(result.skipped, ["cyd"])
        self.assertEqual(str(flatten(result.grids)), " A \nCxD\n B ")
        self.assertEqual(str(flatten_word(result.grids, "cyd")), " A \nC D\n B ")

    def test_ambiguous_cells_render_blank(self) -> None:
        _, result = self.solve(["a ", " b"], ["axb"])
        self.assertEqual(len(result.grids), 2)
        self.assertEqual(str(flatten(result.grids)), "A \n B")

    def test_candidates_grow_across_words(self) -> None:
        task_args, result = self.solve(["a  ", "   ", "c b"], ["axyzb", "amc"])
        # "amc" goes straight down; "axyzb" cannot use the cell it took
        self.assertEqual(result.placed, ["amc", "axyzb"])
        for grid in result.grids:
            self.assertEqual(grid[Point(0, 1)], OneWord("m", "amc"))
        self.assertEqual(len(result.grids), 3)

    def test_search_grids_unions_in_order(self) -> None:
        task_args = TaskArgs(config=make_config(["a ", " b"], []), settings=self.settings)
        placement = WordPlacement("axb", Point(0, 0), Point(1, 1))
        first = search_grids([task_args.grid], placement)
        both = search_grids([task_args.grid, task_args.grid], placement)
        self.assertEqual(both, first + first)


class PreparationTests(unittest.TestCase):
    def test_settings_ignore_environment(self) -> None:
        with patch.dict(os.environ, {"WORDPATHS_SORT_WORDS_BY_LENGTH": "false"}):
            self.assertFalse(SolverConfig(_env_file=None).sort_words_by_length)
            self.assertTrue(isolated_settings().sort_words_by_length)

    def test_duplicate_anchor(self) -> None:
        with self.assertRaises(DuplicateAnchorError):
            TaskArgs(config=make_config(["ab", "ca"], ["ab"]), settings=isolated_settings())

    def test_missing_anchor(self) -> None:
        with self.assertRaises(MissingAnchorError):
            TaskArgs(config=make_config(["ab", "cd"], ["ab", "az"]), settings=isolated_settings())

    def test_summary(self) -> None:
        task_args = TaskArgs(
            config=make_config(["ab", "cd"], ["abd", "ad"]), settings=isolated_settings()
        )
        summary = task_args.summary()
        self.assertEqual(summary["dims"], "2x2")
        self.assertEqual(summary["anchors"], "abcd")
        self.assertEqual(summary["placement_order"], ["ad", "abd"])


class RunTests(unittest.TestCase):
    def test_output_per_iteration(self) -> None:
        out = io.StringIO()
        config = make_config([" a ", "c d", " b "], ["cxd", "axb"])
        results = run(config, 2, out=out, settings=isolated_settings())
        self.assertEqual(len(results), 2)
        self.assertEqual(results[0].grids, results[1].grids)
        text = out.getvalue()
        block = (
            " A \nCxD\n B \n"
            'Showing only "cxd":\n A \nCxD\n B \n'
            'Showing only "axb":\n A \nCxD\n B \n'
        )
        self.assertEqual(text.count(block), 2)
        self.assertIn("loaded 2 words!", text)

    def test_log_file_and_hidden_word_views(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            log_file = Path(tmp) / "logs" / "run.log"
            out = io.StringIO()
            settings = isolated_settings(log_file=str(log_file), show_word_views=False)
            run(make_config(["a b"], ["axb"]), 1, out=out, settings=settings)
            self.assertEqual(out.getvalue(), "AxB\n")
            log = log_file.read_text(encoding="utf-8")
            self.assertIn('searching "axb" on 1 grids', log)

    def test_solve_one(self) -> None:
        logf, out = io.StringIO(), io.StringIO()
        settings = isolated_settings()
        task_args = TaskArgs(config=make_config(["a b"], ["axb"]), settings=settings)
        result = solve_one(task_args, logf=logf, out=out, settings=settings)
        self.assertEqual(result.placed, ["axb"])
        self.assertEqual(out.getvalue(), 'AxB\nShowing only "axb":\nAxB\n')
        self.assertIn("1 grids, 1 words placed, 0 skipped", logf.getvalue())
