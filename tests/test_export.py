import io
import json
import tempfile
import unittest
from contextlib import redirect_stdout
from pathlib import Path

from crucigrama.core.constants import Orientation
from crucigrama.core.models import PlacedWord
from crucigrama.engine.builder import CrosswordResult, assign_numbers
from crucigrama.engine.grid import Grid
from crucigrama.io.export import build_payload, dump_payload
from crucigrama.utils.pretty import format_clues, format_grid, format_puzzle, pretty_print_puzzle

import main as cli

H = Orientation.HORIZONTAL
V = Orientation.VERTICAL


def sample_result(requested: int = 2) -> CrosswordResult:
    grid = Grid(20)
    words = [PlacedWord("NIÑO", 8, 10, H, "child"), PlacedWord("PIE", 9, 9, V, "foot")]
    for word in words:
        grid.place(word.text, word.x, word.y, word.orientation)
    return CrosswordResult(grid=grid, words=assign_numbers(words), requested=requested)


class PayloadTests(unittest.TestCase):
    def test_payload_crops_grid_with_margin(self) -> None:
        payload = build_payload(sample_result())
        self.assertEqual(payload["bounds"], {"min_x": 7, "min_y": 8, "max_x": 12, "max_y": 12})
        self.assertEqual(len(payload["cells"]), 5)
        self.assertEqual(len(payload["cells"][0]), 6)
        # Row y=9 holds only the P of PIE at x=9.
        row = payload["cells"][1]
        self.assertIsNone(row[0])
        self.assertEqual(row[2], {"x": 9, "y": 9, "number": 1, "answer": "P"})

    def test_clue_lists_split_by_orientation(self) -> None:
        payload = build_payload(sample_result())
        self.assertEqual(payload["clues"]["horizontal"], [{"number": 2, "clue": "child", "length": 4}])
        self.assertEqual(payload["clues"]["vertical"], [{"number": 1, "clue": "foot", "length": 3}])
        self.assertEqual(payload["placed"], 2)

    def test_payload_without_solution(self) -> None:
        payload = build_payload(sample_result(), include_solution=False)
        self.assertNotIn("words", payload)
        for row in payload["cells"]:
            for cell in row:
                if cell is not None:
                    self.assertNotIn("answer", cell)

    def test_dump_payload_writes_utf8(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "puzzle.json"
            text = dump_payload(build_payload(sample_result()), path)
            self.assertIn("NIÑO", text)
            self.assertEqual(json.loads(path.read_text(encoding="utf-8"))["words"][0]["text"], "NIÑO")

    def test_empty_grid_payload(self) -> None:
        result = CrosswordResult(grid=Grid(5), words=[], requested=1)
        payload = build_payload(result)
        self.assertIsNone(payload["bounds"])
        self.assertEqual(payload["cells"], [])


class PrettyTests(unittest.TestCase):
    def test_blank_and_solved_grids(self) -> None:
        result = sample_result()
        blank = format_grid(result.grid, solution=False)
        solved = format_grid(result.grid)
        self.assertNotIn("Ñ", blank)
        self.assertIn("Ñ", solved)
        self.assertEqual(format_grid(Grid(3)), "(empty grid)")

    def test_clues_and_partial_notice(self) -> None:
        clues = format_clues(sample_result())
        self.assertIn("Horizontales:", clues)
        self.assertIn(" 2. child (4)", clues)
        self.assertIn(" 1. foot (3)", clues)
        self.assertIn("Placed 2 of 10 requested words", format_puzzle(sample_result(requested=10)))
        self.assertNotIn("requested words", format_puzzle(sample_result()))

    def test_pretty_print_writes_to_stream(self) -> None:
        stream = io.StringIO()
        pretty_print_puzzle(sample_result(), solution=True, stream=stream)
        self.assertEqual(stream.getvalue(), format_puzzle(sample_result(), solution=True) + "\n")


class CliTests(unittest.TestCase):
    RAW = [
        {"Lugar en el libro": "U7 #1", "Unidad Léxica (Español)": "comer", "Traducción (Inglés)": "to eat"},
        {"Lugar en el libro": "U7 #2", "Unidad Léxica (Español)": "cena", "Traducción (Inglés)": "dinner"},
    ]

    def test_generates_and_writes_output(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            vocab = Path(tmpdir) / "palabras.json"
            vocab.write_text(json.dumps(self.RAW, ensure_ascii=False), encoding="utf-8")
            output = Path(tmpdir) / "out.json"
            stdout = io.StringIO()
            with redirect_stdout(stdout):
                code = cli.main(
                    ["--vocabulary", str(vocab), "--units", "U7", "--seed", "3", "--output", str(output)]
                )
            self.assertEqual(code, 0)
            payload = json.loads(output.read_text(encoding="utf-8"))
            self.assertGreaterEqual(payload["placed"], 1)
            self.assertIn("to eat", stdout.getvalue() + json.dumps(payload))
            self.assertIn("Horizontales:", stdout.getvalue())

    def test_missing_vocabulary_returns_error_code(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            code = cli.main(["--vocabulary", str(Path(tmpdir) / "nope.json")])
        self.assertEqual(code, 1)

    def test_list_units(self) -> None:
        stdout = io.StringIO()
        with redirect_stdout(stdout):
            code = cli.main(["--list-units"])
        self.assertEqual(code, 0)
        self.assertIn("A2U4", stdout.getvalue())


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
