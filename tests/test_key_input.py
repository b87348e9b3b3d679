import unittest

from maskedit.buffer_controller import BufferController
from maskedit.key_input import backspace, handle_key, paste, paste_span, tap, type_text
from maskedit.mask import DEFAULT_MASK, build_mask


class TestKeyInput(unittest.TestCase):
    def setUp(self):
        self.ctrl = BufferController()
        self.ctrl.focus_in()

    def test_type_full_address(self):
        for ch in "deadbeef0042":
            self.assertTrue(handle_key(self.ctrl, ch))
        self.assertEqual(self.ctrl.get_display_text(), "de:ad:be:ef:00:42")
        self.assertEqual(self.ctrl.get_compact_value(), "deadbeef0042")
        self.assertEqual(self.ctrl.cursor, 16)

    def test_invalid_key_is_noop(self):
        type_text(self.ctrl, "A")
        handle_key(self.ctrl, "x")
        self.assertEqual(self.ctrl.get_display_text()[:2], "A ")
        self.assertEqual(self.ctrl.cursor, 1)

    def test_backspace_walks_back(self):
        for ch in "ABC":
            type_text(self.ctrl, ch)
        self.assertEqual(self.ctrl.cursor, 4)
        handle_key(self.ctrl, "Backspace")
        self.assertEqual(self.ctrl.get_display_text()[:5], "AB:C ")
        self.assertEqual(self.ctrl.cursor, 3)
        backspace(self.ctrl)
        self.assertEqual(self.ctrl.get_display_text()[:5], "AB:  ")
        self.assertEqual(self.ctrl.cursor, 1)

    def test_navigation_keys(self):
        handle_key(self.ctrl, "right")
        handle_key(self.ctrl, "right")
        self.assertEqual(self.ctrl.cursor, 3)
        handle_key(self.ctrl, "left")
        self.assertEqual(self.ctrl.cursor, 1)
        handle_key(self.ctrl, "end")
        self.assertEqual(self.ctrl.cursor, 16)
        handle_key(self.ctrl, "home")
        self.assertEqual(self.ctrl.cursor, 0)

    def test_unknown_key_not_handled(self):
        self.assertFalse(handle_key(self.ctrl, "f5"))
        self.assertFalse(handle_key(self.ctrl, ""))
        self.assertFalse(handle_key(self.ctrl, "\t"))

    def test_clear_key(self):
        paste(self.ctrl, "112233445566")
        self.assertTrue(handle_key(self.ctrl, "clear"))
        self.assertEqual(self.ctrl.get_display_text(), "  :  :  :  :  :  ")
        self.assertEqual(self.ctrl.cursor, 0)

    def test_paste_span_matches_delimiters(self):
        mask = build_mask(DEFAULT_MASK)
        self.assertEqual(paste_span(mask, 0, "AA:BB"), (0, 5))
        self.assertEqual(paste_span(mask, 0, "AABB"), (0, 5))
        self.assertEqual(paste_span(mask, 15, "ABCD"), (15, 17))

    def test_paste_with_and_without_delimiters(self):
        paste(self.ctrl, "AA:BB")
        self.assertEqual(self.ctrl.get_display_text()[:5], "AA:BB")
        self.assertEqual(self.ctrl.cursor, 6)
        type_text(self.ctrl, "CCDD")
        self.assertEqual(self.ctrl.get_display_text()[:11], "AA:BB:CC:DD")
        self.assertEqual(self.ctrl.cursor, 12)

    def test_paste_strips_newlines(self):
        paste(self.ctrl, "0a:1b:2c:3d:4e:5f\r\n")
        self.assertEqual(self.ctrl.get_display_text(), "0a:1b:2c:3d:4e:5f")
        self.assertTrue(self.ctrl.is_complete())

    def test_paste_does_not_touch_following_slots(self):
        paste(self.ctrl, "112233445566")
        tap(self.ctrl, 6)
        paste(self.ctrl, "FF")
        self.assertEqual(self.ctrl.get_display_text(), "11:22:FF:44:55:66")
        self.assertEqual(self.ctrl.cursor, 9)

    def test_tap_on_delimiter_snaps_forward(self):
        self.assertEqual(tap(self.ctrl, 5), 6)
        self.assertEqual(self.ctrl.selection(), (6, 7))

    def test_dash_separated_paste_keeps_following_slots(self):
        paste(self.ctrl, "112233445566")
        tap(self.ctrl, 0)
        paste(self.ctrl, "AA-BB")
        self.assertEqual(self.ctrl.get_display_text(), "AA:BB:33:44:55:66")
        self.assertEqual(self.ctrl.cursor, 6)
        self.assertEqual(paste_span(self.ctrl.mask, 0, "AA-BB"), (0, 5))
        self.assertEqual(paste_span(self.ctrl.mask, 0, "aa-bb-cc-dd-ee-ff"), (0, 17))


if __name__ == "__main__":
    unittest.main()
