"""
Search configuration for the TicTacToe engine.
Settings for the minimax search and move ordering.
"""


class SearchConfig:
    """
    Configuration class for search settings.
    Change these values to tune how the AI picks between equal moves.
    """

    # ==================== MINIMAX SETTINGS ====================
    # Starting alpha/beta bounds. Real scores are always in [-1, 1]
    # (+-1/depth for a win/loss, 0 for a draw)
    SEARCH_BOUND = 1000.0

    # ==================== MOVE ORDERING ====================
    # How candidate moves are ordered before the search sees them:
    #   "partition" - random two-bucket split (keeps board order per bucket)
    #   "uniform"   - full uniform shuffle
    #   "board"     - plain board order (deterministic)
    MOVE_ORDERING = "partition"

    # Seed for the move-ordering random generator.
    # None = fresh entropy every run (different games each time)
    RANDOM_SEED = None

    # ==================== DEBUG SETTINGS ====================
    # Print how many positions each search looked at
    DEBUG_MODE = False
