import tetris_main


def test_entry_point_is_callable():
    assert callable(tetris_main.main)
