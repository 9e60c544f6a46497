"""
Session module for TicTacToe.
Runs games turn by turn, plays the computer's moves, and keeps score.
"""

from .config import GameConfig
from .controller import GameSession, Phase
