import json
import random
import tempfile
import unittest
from pathlib import Path

from crucigrama.core.exceptions import (
    EmptyPoolError,
    NoPuzzleError,
    NoUnitsSelectedError,
    VocabularyNotLoadedError,
)
from crucigrama.data.vocabulary import Vocabulary
from crucigrama.engine.builder import BuilderConfig
from crucigrama.engine.validator import PuzzleAuditor
from crucigrama.play.session import PuzzleSession

RAW = [
    {"Lugar en el libro": f"U5 #{index}", "Unidad Léxica (Español)": word, "Traducción (Inglés)": clue}
    for index, (word, clue) in enumerate(
        [
            ("amigo", "friend"),
            ("amiga", "friend (f)"),
            ("simpático", "nice"),
            ("alto", "tall"),
            ("bajo", "short"),
            ("moreno", "dark-haired"),
            ("rubio", "blond"),
            ("gracioso", "funny"),
            ("tímido", "shy"),
            ("abierto", "open"),
            ("trabajador", "hard-working"),
            ("serio", "serious"),
        ]
    )
] + [{"Lugar en el libro": "U7 #1", "Unidad Léxica (Español)": "comer", "Traducción (Inglés)": "to eat"}]


class PuzzleSessionTests(unittest.TestCase):
    def _session(self, **kwargs) -> PuzzleSession:
        config = BuilderConfig(target_words=6, rng=random.Random(11))
        return PuzzleSession(builder_config=config, vocabulary=Vocabulary.from_records(RAW), **kwargs)

    def test_generate_requires_loaded_vocabulary(self) -> None:
        session = PuzzleSession()
        with self.assertRaises(VocabularyNotLoadedError):
            session.generate()
        with self.assertRaises(VocabularyNotLoadedError):
            session.available_words()

    def test_default_selection(self) -> None:
        session = PuzzleSession()
        self.assertEqual(session.selected_units, ["U5"])
        self.assertEqual(session.selection_label, "Unidad: Tus amigos son mis amigos")

    def test_generate_requires_units(self) -> None:
        session = self._session(selected_units=())
        with self.assertRaises(NoUnitsSelectedError):
            session.generate()

    def test_unknown_unit_rejected(self) -> None:
        session = self._session()
        with self.assertRaises(ValueError):
            session.select_units(["U5", "U42"])
        self.assertEqual(session.selected_units, ["U5"])

    def test_empty_pool_names_the_units(self) -> None:
        session = self._session(selected_units=["U0"])
        with self.assertRaises(EmptyPoolError) as ctx:
            session.generate()
        self.assertIn("En el aula", str(ctx.exception))
        self.assertIsNone(session.puzzle)

    def test_generate_replaces_puzzle_and_answers(self) -> None:
        session = self._session()
        first = session.generate()
        self.assertTrue(PuzzleAuditor().audit(first).ok)
        self.assertGreaterEqual(first.placed_count, 1)
        session.enter(first.words[0].x, first.words[0].y, "x")
        second = session.generate(target=3)
        self.assertIsNot(first.grid, second.grid)
        self.assertEqual(second.requested, 3)
        self.assertEqual(session.answers.entries, {})

    def test_seeded_session_regenerates_same_puzzle(self) -> None:
        session = PuzzleSession(
            builder_config=BuilderConfig(target_words=6, seed=5),
            vocabulary=Vocabulary.from_records(RAW),
        )
        first = session.generate()
        second = session.generate()
        self.assertEqual(second.seed, 5)
        self.assertEqual(first.words, second.words)
        fresh = PuzzleSession(
            builder_config=BuilderConfig(target_words=6, seed=5),
            vocabulary=Vocabulary.from_records(RAW),
        ).generate()
        self.assertEqual(fresh.words, second.words)

    def test_only_selected_unit_words_are_used(self) -> None:
        session = self._session(selected_units=["U7"])
        result = session.generate()
        self.assertEqual([word.text for word in result.words], ["COMER"])
        self.assertEqual(result.words[0].clue, "to eat")

    def test_select_all_units(self) -> None:
        session = self._session()
        session.select_all_units()
        self.assertEqual(session.selection_label, "Unidades: Todas")
        texts = {entry.text for entry in session.available_words()}
        self.assertIn("comer", texts)

    def test_check_requires_puzzle(self) -> None:
        session = self._session()
        with self.assertRaises(NoPuzzleError):
            session.check()
        with self.assertRaises(NoPuzzleError):
            session.enter(0, 0, "A")

    def test_load_vocabulary_from_file(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "palabras.json"
            path.write_text(json.dumps(RAW, ensure_ascii=False), encoding="utf-8")
            session = PuzzleSession()
            vocabulary = session.load_vocabulary(path)
            self.assertEqual(len(vocabulary), len(RAW))
            self.assertEqual(len(session.available_words()), 12)


if __name__ == "__main__":  # pragma: no cover
    unittest.main()
