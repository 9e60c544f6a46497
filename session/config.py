"""
Session configuration for TicTacToe.
Game mode, who starts, and debug output.
"""

from logic.game_state import Mark


class GameConfig:
    """
    Configuration class for a game session.
    Class attributes are the defaults; pass keyword arguments to override
    them on one instance, e.g. GameConfig(VS_COMPUTER=True).
    """

    # ==================== PLAYERS ====================
    # Who moves first after every restart
    STARTING_PLAYER = Mark.X

    # The computer always plays O in player-vs-computer mode
    COMPUTER_PLAYER = Mark.O

    # ==================== MODE ====================
    # False = Player vs Player, True = Player vs Computer
    VS_COMPUTER = False

    # ==================== DEBUG SETTINGS ====================
    DEBUG_MODE = False

    def __init__(self, **overrides):
        for name, value in overrides.items():
            if not hasattr(type(self), name) or not name.isupper():
                raise AttributeError(f"Unknown config setting: {name}")
            setattr(self, name, value)

        for name in ("STARTING_PLAYER", "COMPUTER_PLAYER"):
            mark = getattr(self, name)
            if not isinstance(mark, Mark) or not mark.is_player:
                raise ValueError(f"{name} must be Mark.X or Mark.O, not {mark!r}")

    @property
    def mode_label(self) -> str:
        return "Player vs Computer" if self.VS_COMPUTER else "Player vs Player"
