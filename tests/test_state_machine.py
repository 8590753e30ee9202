import unittest
from typing import Optional

from game import (
    ActivateCell,
    Board,
    CellOccupied,
    Direction,
    DividerCell,
    GameState,
    IllegalAction,
    MoveCursor,
    NewGame,
    NoOpTurn,
    Player,
    Quit,
    Rules,
    TurnPhase,
    TurnRule,
    WinRule,
    apply_command,
    new_game,
    run_commands,
)

RIGHT = MoveCursor(Direction.RIGHT)
DOWN = MoveCursor(Direction.DOWN)
ACT = ActivateCell()


class RejectingTurn(TurnRule):
    def is_legal(self, state: GameState) -> bool:
        return False

    def apply(self, state: GameState) -> Board:
        raise AssertionError('apply must not be called for an illegal turn')

    def describe(self, state: GameState) -> str:
        return 'cannot turn'


class ClearingTurn(TurnRule):
    """Removes the placed piece again, to show the rule owns the board change."""

    def is_legal(self, state: GameState) -> bool:
        return True

    def apply(self, state: GameState) -> Board:
        cells = list(state.board.cells)
        cells[state.last_placed] = None
        return Board(cells=tuple(cells))


class FirstPieceWins(WinRule):
    def winner(self, board: Board) -> Optional[Player]:
        for occ in board.cells:
            if occ is not None:
                return occ
        return None


class TestStateMachine(unittest.TestCase):
    def test_given_new_game_when_created_then_initial_values(self):
        s = new_game()
        self.assertEqual(s.cursor, 0)
        self.assertIs(s.active_player, Player.ONE)
        self.assertIs(s.phase, TurnPhase.AWAITING_PLACEMENT)
        self.assertTrue(s.can_place)
        self.assertFalse(s.can_turn)
        self.assertEqual(s.board, Board.empty())
        self.assertIsNone(s.winner)

    def test_given_cursor_moved_onto_divider_when_activating_then_divider_error_and_state_unchanged(self):
        s = new_game()
        for _ in range(3):
            s = apply_command(s, RIGHT).state
        self.assertEqual(s.cursor, 3)
        out = apply_command(s, ACT)
        self.assertIsInstance(out.error, DividerCell)
        self.assertFalse(out.ok)
        self.assertEqual(out.state, s)
        self.assertIs(out.state.active_player, Player.ONE)
        self.assertTrue(out.state.can_place)

    def test_given_cursor_on_free_cell_when_activating_then_piece_placed_and_turn_phase(self):
        out = apply_command(new_game(), ACT)
        self.assertTrue(out.ok)
        s = out.state
        self.assertIs(s.board.occupant(0), Player.ONE)
        self.assertFalse(s.can_place)
        self.assertTrue(s.can_turn)
        self.assertEqual(s.last_placed, 0)
        self.assertIs(s.active_player, Player.ONE)

    def test_given_awaiting_turn_when_activating_then_player_toggles_and_cursor_kept(self):
        s = apply_command(new_game(), ACT).state
        s = apply_command(s, DOWN).state
        out = apply_command(s, ACT)
        self.assertTrue(out.ok)
        self.assertIs(out.state.active_player, Player.TWO)
        self.assertIs(out.state.phase, TurnPhase.AWAITING_PLACEMENT)
        self.assertTrue(out.state.can_place)
        self.assertFalse(out.state.can_turn)
        self.assertEqual(out.state.cursor, 7)
        self.assertIsNone(out.state.last_placed)

    def test_given_occupied_cell_when_second_player_places_then_cell_occupied(self):
        s = run_commands(new_game(), [ACT, ACT]).state
        self.assertIs(s.active_player, Player.TWO)
        out = apply_command(s, ACT)
        self.assertIsInstance(out.error, CellOccupied)
        self.assertEqual(out.state, s)

    def test_given_full_rounds_when_playing_then_players_alternate(self):
        s = new_game()
        s = run_commands(s, [ACT, ACT, RIGHT, ACT, ACT, RIGHT, ACT, ACT]).state
        self.assertIs(s.board.occupant(0), Player.ONE)
        self.assertIs(s.board.occupant(1), Player.TWO)
        self.assertIs(s.board.occupant(2), Player.ONE)
        self.assertIs(s.active_player, Player.TWO)

    def test_given_move_in_any_phase_when_applied_then_phase_unchanged(self):
        s = apply_command(new_game(), ACT).state
        out = apply_command(s, RIGHT)
        self.assertEqual(out.state.cursor, 1)
        self.assertIs(out.state.phase, TurnPhase.AWAITING_TURN_ACTION)

    def test_given_quit_when_applied_then_quit_flag_and_same_state(self):
        s = apply_command(new_game(), ACT).state
        out = apply_command(s, Quit())
        self.assertTrue(out.quit)
        self.assertEqual(out.state, s)

    def test_given_quit_in_sequence_when_running_then_later_commands_ignored(self):
        out = run_commands(new_game(), [RIGHT, Quit(), RIGHT, RIGHT])
        self.assertTrue(out.quit)
        self.assertEqual(out.state.cursor, 1)

    def test_given_game_in_progress_when_new_game_then_replaced(self):
        s = run_commands(new_game(), [ACT, ACT, RIGHT]).state
        out = apply_command(s, NewGame())
        self.assertEqual(out.state, new_game())

    def test_given_original_state_when_applying_then_not_mutated(self):
        s = new_game()
        apply_command(s, ACT)
        apply_command(s, RIGHT)
        self.assertEqual(s, new_game())

    def test_given_unknown_command_when_applied_then_type_error(self):
        with self.assertRaises(TypeError):
            apply_command(new_game(), 'activate')


class TestStateInvariants(unittest.TestCase):
    def _mk(self, phase, board=None, last_placed=None, winner=None, active=Player.ONE):
        return GameState(board=board or Board.empty(), cursor=0, active_player=active,
                         phase=phase, last_placed=last_placed, winner=winner)

    def test_given_winner_outside_game_over_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.AWAITING_PLACEMENT, winner=Player.ONE)
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.GAME_OVER)

    def test_given_pending_piece_in_wrong_phase_when_building_then_value_error(self):
        board = Board.empty().place(0, Player.ONE)
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.AWAITING_PLACEMENT, board=board, last_placed=0)
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.AWAITING_TURN_ACTION, board=board)

    def test_given_pending_piece_not_owned_by_mover_when_building_then_value_error(self):
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.AWAITING_TURN_ACTION, last_placed=3)  # divider
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.AWAITING_TURN_ACTION, last_placed=0)  # empty
        with self.assertRaises(ValueError):
            self._mk(TurnPhase.AWAITING_TURN_ACTION, board=Board.empty().place(0, Player.TWO), last_placed=0)

    def test_given_consistent_states_when_building_then_accepted(self):
        board = Board.empty().place(0, Player.ONE)
        s = self._mk(TurnPhase.AWAITING_TURN_ACTION, board=board, last_placed=0)
        self.assertTrue(s.can_turn)
        over = self._mk(TurnPhase.GAME_OVER, board=board, last_placed=0, winner=Player.ONE)
        self.assertTrue(over.is_over)


class TestRuleExtensionPoints(unittest.TestCase):
    def test_given_rejecting_turn_rule_when_turning_then_illegal_action_and_unchanged(self):
        rules = Rules(turn=RejectingTurn())
        s = apply_command(new_game(), ACT, rules).state
        out = apply_command(s, ACT, rules)
        self.assertIsInstance(out.error, IllegalAction)
        self.assertEqual(out.error.message, 'cannot turn')
        self.assertEqual(out.state, s)
        self.assertTrue(out.state.can_turn)

    def test_given_turn_rule_changing_board_when_turning_then_board_from_rule(self):
        rules = Rules(turn=ClearingTurn())
        s = run_commands(new_game(), [ACT, ACT], rules).state
        self.assertIsNone(s.board.occupant(0))
        self.assertIs(s.active_player, Player.TWO)

    def test_given_default_turn_rule_when_asked_then_always_legal_and_board_kept(self):
        s = apply_command(new_game(), ACT).state
        rule = NoOpTurn()
        self.assertTrue(rule.is_legal(s))
        self.assertEqual(rule.apply(s), s.board)

    def test_given_win_rule_when_piece_placed_then_game_over_and_actions_rejected(self):
        rules = Rules(win=FirstPieceWins())
        s = apply_command(new_game(), ACT, rules).state
        self.assertIs(s.phase, TurnPhase.GAME_OVER)
        self.assertIs(s.winner, Player.ONE)
        self.assertIs(s.active_player, Player.ONE)
        self.assertFalse(s.can_place)
        self.assertFalse(s.can_turn)

        out = apply_command(s, ACT, rules)
        self.assertIsInstance(out.error, IllegalAction)
        self.assertEqual(out.state, s)

        moved = apply_command(s, RIGHT, rules)
        self.assertEqual(moved.state.cursor, 1)

        restarted = apply_command(s, NewGame(), rules)
        self.assertIs(restarted.state.phase, TurnPhase.AWAITING_PLACEMENT)


if __name__ == '__main__':
    unittest.main(verbosity=2)
