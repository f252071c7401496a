#!/usr/bin/env python3
"""
Unit tests for core/clipboard.py
"""

import subprocess
import unittest
from unittest.mock import patch

from clipboard_mcp.core.clipboard import read_clipboard_image
from clipboard_mcp.core.constants import XCLIP_COMMAND
from clipboard_mcp.core.errors import ClipboardEmptyError, ClipboardExecutionError


PNG_STUB = b"\x89PNG\r\n\x1a\n\x00\x01"


def completed(returncode=0, stdout=b"", stderr=b""):
    return subprocess.CompletedProcess(XCLIP_COMMAND, returncode, stdout=stdout, stderr=stderr)


class TestReadClipboardImage(unittest.TestCase):
    """Test cases for the clipboard reader"""

    @patch("clipboard_mcp.core.clipboard.subprocess.run")
    def test_returns_stdout_verbatim(self, mock_run):
        """Successful xclip output is returned byte for byte"""
        mock_run.return_value = completed(stdout=PNG_STUB)

        self.assertEqual(read_clipboard_image(), PNG_STUB)

    @patch("clipboard_mcp.core.clipboard.subprocess.run")
    def test_runs_xclip_for_png_target(self, mock_run):
        """xclip is asked for the image/png target of the clipboard selection"""
        mock_run.return_value = completed(stdout=PNG_STUB)

        read_clipboard_image()

        args = mock_run.call_args.args[0]
        self.assertEqual(args, ["xclip", "-selection", "clipboard", "-t", "image/png", "-o"])
        self.assertTrue(mock_run.call_args.kwargs["capture_output"])

    @patch("clipboard_mcp.core.clipboard.subprocess.run")
    def test_non_image_bytes_are_not_validated(self, mock_run):
        """Whatever xclip prints is passed through"""
        mock_run.return_value = completed(stdout=b"not a png")

        self.assertEqual(read_clipboard_image(), b"not a png")

    @patch("clipboard_mcp.core.clipboard.subprocess.run")
    def test_nonzero_exit_means_no_image(self, mock_run):
        """A failing xclip is reported as an empty clipboard"""
        mock_run.return_value = completed(
            returncode=1,
            stderr=b"Error: target image/png not available\n",
        )

        with self.assertRaises(ClipboardEmptyError) as ctx:
            read_clipboard_image()

        self.assertEqual(
            str(ctx.exception),
            "Failed to read image from clipboard. Is there an image in the clipboard?",
        )

    @patch("clipboard_mcp.core.clipboard.subprocess.run")
    def test_missing_xclip_is_execution_failure(self, mock_run):
        """A launch failure carries the underlying cause"""
        mock_run.side_effect = FileNotFoundError(2, "No such file or directory", "xclip")

        with self.assertRaises(ClipboardExecutionError) as ctx:
            read_clipboard_image()

        self.assertIn("Failed to execute xclip", str(ctx.exception))
        self.assertIn("No such file or directory", str(ctx.exception))
        self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    @patch("clipboard_mcp.core.clipboard.subprocess.run")
    def test_custom_command(self, mock_run):
        """An explicit command line replaces the default"""
        mock_run.return_value = completed(stdout=b"x")

        read_clipboard_image(["fake-clip", "-o"])

        self.assertEqual(mock_run.call_args.args[0], ["fake-clip", "-o"])


if __name__ == "__main__":
    unittest.main()
