"""Bundled sound effects, loaded by tetris_audio."""
