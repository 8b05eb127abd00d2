"""Word Path Puzzle Solver.

Fits a list of words onto a grid of fixed letters.  Each word must run through
orthogonally adjacent cells from the cell holding its first letter to the cell holding
its last letter, and two different words may cross on a blank cell when their letters
agree.  Every arrangement of the words is enumerated; the results are shown as one merged
grid, blank wherever the arrangements disagree, followed by the cells of each word.
"""

from sys import argv, exit

from .puzzle_config import load_config
from .solver import solver


def main() -> None:
    """Main entry point for the word path solver."""
    # Expect the grid file, the word list file and the iteration count
    if len(argv) != 4:
        print("Usage: python -m wordpaths <grid_file> <word_file> <iterations>")
        exit(1)
    grid_path, words_path, iterations_arg = argv[1:]
    # Plain ASCII digits only: no sign, underscores or surrounding whitespace
    if not (iterations_arg.isascii() and iterations_arg.isdigit()):
        raise ValueError(f"Invalid iteration count: '{iterations_arg}'")
    iterations = int(iterations_arg, 10)

    config = load_config(grid_path, words_path)
    solver.run(config, iterations)
