from importlib.resources import files

CONFIG = {
    "CELL_SIZE": 30,
    "DROP_INTERVAL_MS": 1000,
    "LINE_SCORE": 100,
    "FPS": 60,
    # wavs ship inside the tetris_sounds package
    "SOUND_DIR": str(files("tetris_sounds")),
    "SEED": None,
    "LOG_LEVEL": "INFO",
}
