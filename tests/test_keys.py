import curses
import unittest

from game import ActivateCell, Direction, MoveCursor, NewGame, Quit
from quadturn_core.keys import command_for_key, commands_for_text


class TestKeyMapping(unittest.TestCase):
    def test_given_wasd_and_arrows_when_mapping_then_move_commands(self):
        self.assertEqual(command_for_key(ord('w')), MoveCursor(Direction.UP))
        self.assertEqual(command_for_key(ord('a')), MoveCursor(Direction.LEFT))
        self.assertEqual(command_for_key(ord('s')), MoveCursor(Direction.DOWN))
        self.assertEqual(command_for_key(ord('D')), MoveCursor(Direction.RIGHT))
        self.assertEqual(command_for_key(curses.KEY_UP), MoveCursor(Direction.UP))
        self.assertEqual(command_for_key(curses.KEY_RIGHT), MoveCursor(Direction.RIGHT))

    def test_given_action_keys_when_mapping_then_activate_quit_new(self):
        self.assertEqual(command_for_key(ord(' ')), ActivateCell())
        self.assertEqual(command_for_key(ord('\n')), ActivateCell())
        self.assertEqual(command_for_key(ord('q')), Quit())
        self.assertEqual(command_for_key(ord('r')), NewGame())

    def test_given_unbound_key_when_mapping_then_none(self):
        self.assertIsNone(command_for_key(ord('z')))
        self.assertIsNone(command_for_key(-1))


class TestTextCommands(unittest.TestCase):
    def test_given_step_letters_when_parsing_then_one_move_per_letter(self):
        cmds = commands_for_text('ddd place')
        self.assertEqual(cmds, [MoveCursor(Direction.RIGHT)] * 3 + [ActivateCell()])

    def test_given_words_when_parsing_then_case_insensitive(self):
        cmds = commands_for_text('Up LEFT turn new quit')
        self.assertEqual(cmds, [
            MoveCursor(Direction.UP),
            MoveCursor(Direction.LEFT),
            ActivateCell(),
            NewGame(),
            Quit(),
        ])

    def test_given_blank_line_when_parsing_then_empty(self):
        self.assertEqual(commands_for_text('   '), [])

    def test_given_unknown_token_when_parsing_then_value_error(self):
        with self.assertRaises(ValueError):
            commands_for_text('dd jump')


if __name__ == '__main__':
    unittest.main(verbosity=2)
