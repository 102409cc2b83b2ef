"""
Settings that may differ between machines. Every value can be overridden with an environment variable.
"""

import os

GAME_STATE_FILE = os.environ.get("TICTACTOE_GAME_STATE_FILE", "gamestate.txt")
THEME_FILE = os.environ.get("TICTACTOE_THEME_FILE", "theme.txt")
DATABASE_URL = os.environ.get("TICTACTOE_DATABASE_URL", "sqlite:///tictactoe.db")
LOG_LEVEL = os.environ.get("TICTACTOE_LOG_LEVEL", "INFO")

DEFAULT_PLAYER_X_NAME = "Player X"
DEFAULT_PLAYER_O_NAME = "Player O"

# Theme defaults. Colors are packed 0xRRGGBB integers
DEFAULT_BACKGROUND_COLOR = 0xC0C0C0  # light gray
DEFAULT_BUTTON_COLOR = 0xFFFFFF  # white
DEFAULT_FONT_NAME = "Arial"
DEFAULT_FONT_SIZE = 60
