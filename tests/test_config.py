import pytest

from gamebox.breakout.config import (
    GREEN,
    RED,
    YELLOW,
    ConfigError,
    GameConfig,
    load_config,
    parse_color,
    parse_config,
)

SAMPLE = """-- brick game settings
BALL_RADIUS = 10
WINDOW_WIDTH=800
BRICK_ROWS = RED;YELLOW;GREEN;
SPEED_INCREASE_FACTOR = 1.5
"""


def test_parse_sample_values():
    config = parse_config(SAMPLE)
    assert config["BALL_RADIUS"] == 10.0
    assert config["WINDOW_WIDTH"] == 800.0
    assert config["SPEED_INCREASE_FACTOR"] == 1.5


def test_parse_sample_rows():
    assert parse_config(SAMPLE).rows == [RED, YELLOW, GREEN]


def test_comments_and_lines_without_equals_are_ignored():
    config = parse_config("-- NOTE = 3\nhello world\n")
    assert config.values == {}
    assert config.rows == []


def test_brick_rows_are_not_stored_as_values():
    config = parse_config(SAMPLE)
    assert "BRICK_ROWS" not in config


def test_last_row_without_semicolon_is_dropped():
    assert parse_config("BRICK_ROWS=RED;GREEN").rows == [RED]


def test_rows_accumulate_over_lines():
    config = parse_config("BRICK_ROWS=RED;\nBRICK_ROWS=GREEN;\n")
    assert config.rows == [RED, GREEN]


def test_unknown_row_color_raises():
    with pytest.raises(ConfigError):
        parse_config("BRICK_ROWS=RED;BLUE;")


def test_value_with_trailing_text_keeps_number_prefix():
    assert parse_config("LIVES=3x\n")["LIVES"] == 3.0


def test_non_numeric_value_raises():
    with pytest.raises(ConfigError):
        parse_config("LIVES=three\n")


def test_missing_key_raises_key_error():
    with pytest.raises(KeyError):
        parse_config(SAMPLE)["PADDLE_WIDTH"]


def test_get_falls_back_to_default():
    config = GameConfig(values={"A": 1.0})
    assert config.get("A", 5.0) == 1.0
    assert config.get("B", 5.0) == 5.0


@pytest.mark.parametrize("name, color", [("RED", RED), ("YELLOW", YELLOW), ("GREEN", GREEN)])
def test_parse_color_known(name, color):
    assert parse_color(name) == color


def test_parse_color_is_case_sensitive():
    with pytest.raises(ConfigError):
        parse_color("red")


def test_load_config_round_trip(tmp_path):
    path = tmp_path / "game.cfg"
    path.write_text(SAMPLE, encoding="utf-8")
    assert load_config(path) == parse_config(SAMPLE)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(ConfigError):
        load_config(tmp_path / "missing.cfg")