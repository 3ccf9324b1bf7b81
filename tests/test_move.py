from unittest import TestCase, main

import numpy as np

from tilemerge.core import Direction, apply_move, as_direction, illegal_directions, legal_directions


class TestDirection(TestCase):
    def test_evaluation_order(self):
        """Directions enumerate as up, down, left, right."""
        self.assertEqual(list(Direction), [Direction.UP, Direction.DOWN, Direction.LEFT, Direction.RIGHT])

    def test_as_direction(self):
        """Directions are parsed from members, values and names."""
        self.assertIs(as_direction(Direction.DOWN), Direction.DOWN)
        self.assertIs(as_direction(0), Direction.LEFT)
        self.assertIs(as_direction(np.int64(3)), Direction.DOWN)
        self.assertIs(as_direction("up"), Direction.UP)
        self.assertIs(as_direction("RIGHT"), Direction.RIGHT)
        self.assertIs(as_direction("ArrowDown"), Direction.DOWN)
        self.assertIs(as_direction(" left "), Direction.LEFT)

    def test_as_direction_rejects_unknown_values(self):
        """Anything else is an error."""
        for value in ("north", "", 4, False, 2.0, None, [1]):
            with self.assertRaises(ValueError):
                as_direction(value)

    def test_key(self):
        """Keys match matplotlib key names."""
        self.assertEqual([direction.key for direction in Direction], ["up", "down", "left", "right"])


class TestGameMove(TestCase):
    def test_illegal_actions(self):
        """
        Test if illegal actions are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        illegal = illegal_directions(board)
        self.assertEqual(set(illegal), {Direction.LEFT})

    def test_legal_actions(self):
        """
        Test if legal actions are correctly identified.
        """
        board = np.array([[2, 0, 0, 0], [2, 0, 0, 0], [0, 0, 0, 0], [0, 0, 0, 0]])
        legal = legal_directions(board)
        self.assertEqual(legal, [Direction.UP, Direction.DOWN, Direction.RIGHT])

    def test_legal_actions_match_moves(self):
        """A direction is legal exactly when playing it changes the board."""
        rng = np.random.default_rng(0)
        for _ in range(200):
            board = rng.choice([0, 2, 4, 8], size=(4, 4))
            moving = [direction for direction in Direction if apply_move(board.copy(), direction).moved]
            self.assertEqual(legal_directions(board), moving)
            self.assertEqual(
                illegal_directions(board), [direction for direction in Direction if direction not in moving]
            )

    def test_legal_actions_keep_board(self):
        """Checking legality plays the moves on copies only."""
        board = np.array([[2, 2, 0, 0], [0, 4, 0, 4], [0, 0, 0, 0], [8, 0, 0, 0]])
        before = board.copy()
        legal_directions(board)
        illegal_directions(board)
        np.testing.assert_array_equal(board, before)

    def test_no_legal_action_on_terminal_board(self):
        """A checkerboard has no legal move and every move is illegal."""
        board = np.array([[2, 4, 2, 4], [4, 2, 4, 2], [2, 4, 2, 4], [4, 2, 4, 2]])
        self.assertEqual(legal_directions(board), [])
        self.assertEqual(illegal_directions(board), list(Direction))


if __name__ == '__main__':
    main()
