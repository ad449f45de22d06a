import io
import unittest
from unittest.mock import Mock

from httpfile.errors import IOFailure
from httpfile.reader import LineSource


class LineSourceTest(unittest.TestCase):
    def test_next_line(self):
        source = LineSource(io.StringIO("GET https://example.com/\n\n  body  \nlast"))
        self.assertEqual(source.next_line(), "GET https://example.com/")
        self.assertEqual(source.next_line(), "")
        self.assertEqual(source.next_line(), "  body  ")
        self.assertEqual(source.next_line(), "last")
        self.assertIsNone(source.next_line())
        self.assertIsNone(source.next_line())
        self.assertEqual(source.line_number, 4)

    def test_binary_stream(self):
        source = LineSource(io.BytesIO("GET https://example.com/café\r\nAccept: */*\r\n".encode()))
        self.assertEqual(source.next_line(), "GET https://example.com/café")
        self.assertEqual(source.next_line(), "Accept: */*")
        self.assertIsNone(source.next_line())

    def test_has_data(self):
        source = LineSource(io.StringIO("a\n"))
        self.assertTrue(source.has_data())
        self.assertTrue(source.has_data())
        self.assertEqual(source.line_number, 0)
        self.assertEqual(source.next_line(), "a")
        self.assertFalse(source.has_data())

        self.assertFalse(LineSource(io.StringIO("")).has_data())
        self.assertFalse(LineSource(io.BytesIO(b"")).has_data())

    def test_io_failure(self):
        mock_stream = Mock()
        error = OSError("disk on fire")
        mock_stream.readline.side_effect = iter(["GET https://example.com/\n", error])
        source = LineSource(mock_stream)
        self.assertEqual(source.next_line(), "GET https://example.com/")
        with self.assertRaises(IOFailure) as cm:
            source.next_line()
        self.assertIs(cm.exception.err, error)
        self.assertIs(cm.exception.__cause__, error)

    def test_decode_failure(self):
        source = LineSource(io.BytesIO(b"\xff\xfe\n"))
        with self.assertRaises(IOFailure):
            source.has_data()
