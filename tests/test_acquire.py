import unittest
from pathlib import Path
from unittest.mock import Mock, patch

from ocr_clipboard import acquire
from ocr_clipboard.acquire import (
    ClipboardRaster,
    CommandLinePath,
    PickedFile,
    acquire_source,
    first_available,
)
from ocr_clipboard.errors import ClipboardReadError, DialogError, InvalidBufferError
from ocr_clipboard.pixels import Raster


class TestAcquireSource(unittest.TestCase):
    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_argument_wins_without_touching_clipboard(self, mock_read, mock_pick):
        mock_read.return_value = Raster(1, 1, bytes(4))

        source = acquire_source("shot.png")

        self.assertEqual(source, CommandLinePath(Path("shot.png")))
        mock_read.assert_not_called()
        mock_pick.assert_not_called()

    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_empty_argument_still_wins(self, mock_read, mock_pick):
        source = acquire_source("")

        self.assertEqual(source, CommandLinePath(Path("")))
        mock_read.assert_not_called()
        mock_pick.assert_not_called()

    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_picker_failure_propagates(self, mock_read, mock_pick):
        mock_read.side_effect = ClipboardReadError("opening clipboard")
        mock_pick.side_effect = DialogError("showing file picker")

        with self.assertRaises(DialogError):
            acquire_source(None)

    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_clipboard_image_is_normalized(self, mock_read, mock_pick):
        mock_read.return_value = Raster(1, 1, bytes([1, 2, 3, 4]))

        source = acquire_source(None)

        self.assertEqual(source, ClipboardRaster(Raster(1, 1, bytes([3, 2, 1, 4]))))
        mock_pick.assert_not_called()

    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_clipboard_failure_falls_through_to_picker(self, mock_read, mock_pick):
        mock_read.side_effect = ClipboardReadError("clipboard does not contain an image")
        mock_pick.return_value = Path("/images/page.tiff")

        source = acquire_source(None)

        self.assertEqual(source, PickedFile(Path("/images/page.tiff")))
        mock_pick.assert_called_once_with(acquire.IMAGE_EXTENSIONS, acquire.PICKER_TITLE)

    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_malformed_clipboard_raster_falls_through(self, mock_read, mock_pick):
        mock_read.return_value = Raster(2, 2, bytes(3))
        mock_pick.return_value = Path("a.png")

        self.assertEqual(acquire_source(None), PickedFile(Path("a.png")))

    @patch("ocr_clipboard.acquire.dialogs.pick_file")
    @patch("ocr_clipboard.acquire.clipboard.read_image")
    def test_picker_cancel_returns_none(self, mock_read, mock_pick):
        mock_read.side_effect = ClipboardReadError("opening clipboard")
        mock_pick.return_value = None

        self.assertIsNone(acquire_source(None))

    def test_picker_extensions_cover_common_formats(self):
        for ext in ("png", "jpg", "jpeg", "bmp", "tiff", "gif"):
            self.assertIn(ext, acquire.IMAGE_EXTENSIONS)


class TestFirstAvailable(unittest.TestCase):
    def test_errors_from_last_strategy_propagate(self):
        failing = Mock(side_effect=InvalidBufferError("bad"))
        last = Mock(side_effect=OSError("display unavailable"))

        with self.assertRaises(OSError):
            first_available([("first", failing), ("last", last)])
        failing.assert_called_once_with()

    def test_stops_at_first_result(self):
        first = Mock(return_value=None)
        second = Mock(return_value=PickedFile(Path("x.png")))
        third = Mock()

        result = first_available([("a", first), ("b", second), ("c", third)])

        self.assertEqual(result, PickedFile(Path("x.png")))
        third.assert_not_called()

    def test_empty_chain(self):
        self.assertIsNone(first_available([]))


if __name__ == "__main__":
    unittest.main()
