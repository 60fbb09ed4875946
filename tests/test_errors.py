import unittest

from ocr_clipboard.errors import EngineInitError, OcrClipboardError, describe


class TestDescribe(unittest.TestCase):
    def test_joins_explicit_causes(self):
        try:
            try:
                raise FileNotFoundError("tesseract is not installed")
            except FileNotFoundError as exc:
                raise EngineInitError("initializing Tesseract") from exc
        except OcrClipboardError as err:
            message = describe(err)

        self.assertEqual(message, "initializing Tesseract: tesseract is not installed")

    def test_falls_back_to_type_name(self):
        err = EngineInitError("initializing Tesseract")
        err.__cause__ = RuntimeError()
        self.assertEqual(describe(err), "initializing Tesseract: RuntimeError")


if __name__ == "__main__":
    unittest.main()
