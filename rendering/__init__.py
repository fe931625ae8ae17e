"""Pygame frontend: window, input polling and drawing for the flappy core."""
