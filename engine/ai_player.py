"""
AI player for the TicTacToe engine.
Uses the Minimax algorithm with alpha-beta pruning to choose the best move.
"""

from typing import List, Optional
from dataclasses import dataclass, field

from .board import BoardState, Mark
from .config import SearchConfig
from .move_generator import MoveGenerator
from .win_checker import WinChecker


@dataclass
class SearchNode:
    """
    A position in the search tree.

    Only lives for a single get_best_move() call.
    """
    state: BoardState
    value: float = 0.0
    children: List["SearchNode"] = field(default_factory=list)


class AIPlayer:
    """
    An AI that plays TicTacToe using the Minimax algorithm.

    The search always runs to the end of the game. Wins score +1/depth
    and losses -1/depth, so the AI prefers fast wins and slow losses.
    It never loses (at worst, draw).
    """

    def __init__(
        self,
        config: Optional[SearchConfig] = None,
        move_generator: Optional[MoveGenerator] = None
    ):
        """
        Initialize the AI player.

        Args:
            config: Search settings (default: SearchConfig()).
            move_generator: Where child positions come from. Pass one with
                a seeded rng or board ordering for repeatable games.
        """
        self.config = config or SearchConfig()
        self.move_generator = move_generator or MoveGenerator(self.config)
        self.win_checker = WinChecker()

        # Keep track of how many positions we've evaluated (for debugging)
        self.positions_evaluated = 0

    def get_best_move(self, state: BoardState) -> Optional[BoardState]:
        """
        Get the best next position for whoever is to move.

        Args:
            state: Current position.

        Returns:
            The chosen child position, or None if there is no move.
        """
        self.positions_evaluated = 0

        player = state.whose_turn()
        root = SearchNode(state)
        bound = self.config.SEARCH_BOUND

        best = self._minimax(root, player, True, 0, -bound, bound)

        for child in root.children:
            if child.value == best:
                if self.config.DEBUG_MODE:
                    print(
                        f"AI evaluated {self.positions_evaluated} positions. "
                        f"Best move: {self._changed_cell(state, child.state)} "
                        f"(score: {best:.3f})"
                    )
                return child.state

        return None

    def get_move_index(self, state: BoardState) -> Optional[int]:
        """
        Get the best move as a cell index.

        Returns:
            Index 0-8 of the cell to play, or None if no moves available.
        """
        best = self.get_best_move(state)
        if best is None:
            return None
        return self._changed_cell(state, best)

    def _minimax(
        self,
        node: SearchNode,
        player: Mark,
        is_maximizing: bool,
        depth: int,
        alpha: float,
        beta: float
    ) -> float:
        """
        Minimax algorithm with alpha-beta pruning.

        Args:
            node: Node to evaluate. Evaluated children are appended to it.
            player: The player we are choosing a move for (root mover).
            is_maximizing: True on the root player's plies.
            depth: Plies below the root.
            alpha: Best value the maximizer can already guarantee.
            beta: Best value the minimizer can already guarantee.

        Returns:
            The score of the position from `player`'s point of view.
        """
        self.positions_evaluated += 1

        children = self.move_generator.next_states(node.state)

        # Terminal state: someone won or the board is full
        if not children:
            winner = self.win_checker.check_winner(node.state).winner
            level = max(depth, 1)

            if winner == player:
                return 1.0 / level
            if winner == Mark.EMPTY:
                return 0.0
            return -1.0 / level

        value = -self.config.SEARCH_BOUND if is_maximizing else self.config.SEARCH_BOUND

        for child_state in children:
            child = SearchNode(child_state)
            score = self._minimax(child, player, not is_maximizing, depth + 1, alpha, beta)

            if is_maximizing:
                value = max(value, score)
            else:
                value = min(value, score)

            child.value = score
            node.children.append(child)

            if is_maximizing:
                alpha = max(alpha, value)
                if value >= beta:
                    break  # Prune
            else:
                beta = min(beta, value)
                if value <= alpha:
                    break  # Prune

        return value

    @staticmethod
    def _changed_cell(before: BoardState, after: BoardState) -> Optional[int]:
        """Index of the cell that differs between two positions."""
        for index, (old, new) in enumerate(zip(before, after)):
            if old != new:
                return index
        return None


# Quick test
if __name__ == "__main__":
    print("Testing AIPlayer...")

    ai = AIPlayer()

    # Test 1: AI should block a winning move
    game = BoardState.from_string("XX..O....")
    print(f"\n{game} - O to move, X is about to win with 2!")

    move = ai.get_move_index(game)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly blocks the win!")

    # Test 2: AI should take a winning move
    game2 = BoardState.from_string("XX.OO....")
    print(f"\n{game2} - X to move, can win with 2!")

    move = ai.get_move_index(game2)
    print(f"AI's move: {move}")
    assert move == 2, f"Expected 2, got {move}"
    print("✓ AI correctly takes the win!")

    print("\nAIPlayer test done!")
