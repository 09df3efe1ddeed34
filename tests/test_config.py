import tempfile
import unittest
from pathlib import Path

from corpus_sampler.config import load_config
from corpus_sampler.data.paths import (
    mb_to_bytes,
    resolve_input_corpus_path,
    sample_filename,
    sample_paths,
)
from corpus_sampler.sampling.sampler import SamplingKind

VALID = """\
languages: [fr, en]
input_dir: data/raw
output_dir: data/samples
sample:
  size_mb: 10
  kind: with-replacement
"""


class TestLoadConfig(unittest.TestCase):

    def setUp(self):
        self._tmp = tempfile.TemporaryDirectory()
        self.root = Path(self._tmp.name)

    def tearDown(self):
        self._tmp.cleanup()

    def _write(self, text: str) -> Path:
        path = self.root / "config.yaml"
        path.write_text(text, encoding="utf-8")
        return path

    def test_valid_config(self):
        cfg = load_config(self._write(VALID))
        self.assertEqual(cfg.languages, ["fr", "en"])
        self.assertEqual(cfg.input_dir, Path("data/raw"))
        self.assertEqual(cfg.output_dir, Path("data/samples"))
        self.assertFalse(cfg.force)
        self.assertEqual(cfg.sample.size_mb, 10.0)
        self.assertEqual(cfg.sample.kind, SamplingKind.WITH_REPLACEMENT)
        self.assertIsNone(cfg.sample.seed)
        self.assertTrue(cfg.sample.write_metadata)

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            load_config(self.root / "nope.yaml")

    def test_not_a_mapping(self):
        with self.assertRaisesRegex(ValueError, "YAML mapping"):
            load_config(self._write("- fr\n- en\n"))

    def test_missing_sample_section(self):
        text = "languages: [fr]\ninput_dir: a\noutput_dir: b\n"
        with self.assertRaisesRegex(ValueError, "'sample'"):
            load_config(self._write(text))

    def test_bad_kind(self):
        with self.assertRaisesRegex(ValueError, "sample.kind"):
            load_config(self._write(VALID.replace("with-replacement", "stratified")))

    def test_bad_size(self):
        with self.assertRaisesRegex(ValueError, "sample.size_mb"):
            load_config(self._write(VALID.replace("size_mb: 10", "size_mb: -1")))
        with self.assertRaisesRegex(ValueError, "sample.size_mb"):
            load_config(self._write(VALID.replace("size_mb: 10", "size_mb: true")))

    def test_bad_seed(self):
        text = VALID + "  seed: abc\n"
        with self.assertRaisesRegex(ValueError, "sample.seed"):
            load_config(self._write(text))

    def test_empty_languages(self):
        with self.assertRaisesRegex(ValueError, "languages"):
            load_config(self._write(VALID.replace("[fr, en]", "[]")))


class TestPaths(unittest.TestCase):

    def test_mb_to_bytes(self):
        self.assertEqual(mb_to_bytes(1), 1_000_000)
        self.assertEqual(mb_to_bytes(2.5), 2_500_000)
        self.assertEqual(mb_to_bytes(2.01), 2_010_000)

    def test_mb_to_bytes_two_decimals(self):
        for hundredths in range(1, 2000):
            self.assertEqual(mb_to_bytes(hundredths / 100), hundredths * 10_000)

    def test_sample_filename(self):
        self.assertEqual(sample_filename("fr", 10), "fr_sample_10mb.txt")
        self.assertEqual(sample_filename("fr", 0.5), "fr_sample_0p5mb.txt")

    def test_sample_paths(self):
        sample, metadata = sample_paths(Path("out"), "en", 1.0)
        self.assertEqual(sample, Path("out/en/en_sample_1mb.txt"))
        self.assertEqual(metadata, Path("out/en/en_sample_1mb.txt.meta.json"))

    def test_resolve_input_corpus_path(self):
        with tempfile.TemporaryDirectory() as tmp:
            root = Path(tmp)
            with self.assertRaises(FileNotFoundError):
                resolve_input_corpus_path(root, "fr")
            nested = root / "fr" / "fr.txt"
            nested.parent.mkdir()
            nested.write_text("x\n", encoding="utf-8")
            self.assertEqual(resolve_input_corpus_path(root, "fr"), nested)
            flat = root / "fr.txt"
            flat.write_text("x\n", encoding="utf-8")
            self.assertEqual(resolve_input_corpus_path(root, "fr"), flat)


if __name__ == "__main__":
    unittest.main()
