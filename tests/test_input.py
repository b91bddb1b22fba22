"""Regression tests for raw-key decoding.

Covers ESC timing, arrow sequences, and control-key token mapping.
"""

import os
import time
import unittest

from lazylaunch import input as input_mod


class ReadKeyRegressionTests(unittest.TestCase):
    def setUp(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def tearDown(self) -> None:
        input_mod._PENDING_BYTES.clear()

    def _read_all(self, payload: bytes, count: int) -> list[str]:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, payload)
            return [input_mod.read_key(read_fd, timeout_ms=20) for _ in range(count)]
        finally:
            os.close(read_fd)
            os.close(write_fd)

    def test_single_escape_returns_esc_without_second_keypress(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            os.write(write_fd, b"\x1b")
            started = time.monotonic()
            key = input_mod.read_key(read_fd, timeout_ms=20)
            elapsed = time.monotonic() - started
        finally:
            os.close(read_fd)
            os.close(write_fd)

        self.assertEqual(key, "ESC")
        self.assertLess(elapsed, 0.2)

    def test_arrow_sequences_are_recognized(self) -> None:
        self.assertEqual(self._read_all(b"\x1b[A\x1b[B", 2), ["UP", "DOWN"])

    def test_application_cursor_mode_arrows(self) -> None:
        self.assertEqual(self._read_all(b"\x1bOA\x1bOB", 2), ["UP", "DOWN"])

    def test_shift_tab_and_page_keys(self) -> None:
        self.assertEqual(
            self._read_all(b"\x1b[Z\x1b[5~\x1b[6~\x1b[1;5A", 4),
            ["SHIFT_TAB", "PAGE_UP", "PAGE_DOWN", "UP"],
        )

    def test_alt_modified_printable_key_is_its_own_token(self) -> None:
        self.assertEqual(self._read_all(b"\x1bab", 2), ["ALT_a", "b"])
        self.assertEqual(self._read_all(b"\x1bF", 1), ["ALT_F"])

    def test_escape_does_not_swallow_following_control_key(self) -> None:
        self.assertEqual(self._read_all(b"\x1b\x15", 2), ["ESC", "CTRL_U"])
        self.assertEqual(self._read_all(b"\x1b\x1b", 2), ["ESC", "ESC"])

    def test_control_keys_map_to_named_tokens(self) -> None:
        self.assertEqual(
            self._read_all(b"\x0e\x10\x15\x03\t\x7f\x08\r\n", 9),
            ["CTRL_N", "CTRL_P", "CTRL_U", "CTRL_C", "TAB", "BACKSPACE", "BACKSPACE", "ENTER", "ENTER"],
        )

    def test_unmapped_control_key_is_named_not_dropped(self) -> None:
        self.assertEqual(self._read_all(b"\x0b", 1), ["CTRL_K"])

    def test_multibyte_utf8_character_is_one_key(self) -> None:
        self.assertEqual(self._read_all("é中".encode("utf-8"), 2), ["é", "中"])

    def test_timeout_without_input_returns_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        try:
            key = input_mod.read_key(read_fd, timeout_ms=10)
        finally:
            os.close(read_fd)
            os.close(write_fd)
        self.assertEqual(key, "")

    def test_end_of_input_returns_empty(self) -> None:
        read_fd, write_fd = os.pipe()
        os.close(write_fd)
        try:
            key = input_mod.read_key(read_fd)
        finally:
            os.close(read_fd)
        self.assertEqual(key, "")


if __name__ == "__main__":
    unittest.main()
