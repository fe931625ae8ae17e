"""Display and UI configuration constants."""

WINDOW_TITLE = "Flappy Bird"

# Initial window size in pixels (70% of a 1080p screen)
SCREEN_WIDTH = 1920.0 * 0.7
SCREEN_HEIGHT = 1080.0 * 0.7

# Frame rate cap for the interactive loop, in frames per second
FRAME_RATE = 60
VSYNC = True
RESIZABLE = True

# Scoreboard text, offsets measured from the top of the window
SCORE_FONT_SIZE = 90.0
SCORE_TOP_OFFSET = 47.0
HIGHSCORE_FONT_SIZE = 40.0
HIGHSCORE_TOP_OFFSET = 100.0

# UI Display Constants
SEPARATOR_WIDTH = 60  # Width of separator lines in console output
