import argparse
import importlib.util
import unittest
from pathlib import Path

SCRIPTS_DIR = Path(__file__).resolve().parent.parent / "scripts"


def load_script(name):
    spec = importlib.util.spec_from_file_location(name, SCRIPTS_DIR / f"{name}.py")
    module = importlib.util.module_from_spec(spec)
    spec.loader.exec_module(module)
    return module


class WordsToModuleTests(unittest.TestCase):
    def setUp(self):
        self.script = load_script("words_to_module")

    def test_render_module_sorts_and_deduplicates(self):
        source = self.script.render_module(["sit", "amet", "lorem", "amet"])
        namespace = {}
        exec(compile(source, "lorem_words.py", "exec"), namespace)
        self.assertEqual(namespace["DICTIONARY"], ("amet", "lorem", "sit"))

    def test_render_module_matches_builtin_layout(self):
        source = self.script.render_module(["alpha"])
        self.assertTrue(source.startswith('"""Built-in placeholder word list.'))
        self.assertIn('DICTIONARY: Tuple[str, ...] = (\n    "alpha",\n)\n', source)


class SeedDefaultsTests(unittest.TestCase):
    def setUp(self):
        self.script = load_script("seed_defaults")

    def _args(self, seed=None):
        return argparse.Namespace(
            shape="ul",
            length="2-4",
            words_per_unit="3",
            sentences_per_paragraph="3-6",
            seed=seed,
        )

    def test_build_defaults_uses_request_field_names(self):
        self.assertEqual(
            self.script._build_defaults(self._args()),
            {"shape": "ul", "length": "2-4", "wordsPerUnit": "3", "sentencesPerParagraph": "3-6"},
        )

    def test_build_defaults_includes_seed_when_given(self):
        self.assertEqual(self.script._build_defaults(self._args(seed=7.0))["seed"], 7.0)


if __name__ == "__main__":
    unittest.main()
