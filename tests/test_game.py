import pytest

from wiiorganizer.game import Game, parse_game_dir_name


def test_parse_title_and_id():
    assert parse_game_dir_name("Super Mario Galaxy [RMGE01]") == (
        "Super Mario Galaxy",
        "RMGE01",
    )


def test_parse_strips_surrounding_whitespace():
    assert parse_game_dir_name("  Wii Sports   [RSPE01]") == ("Wii Sports", "RSPE01")


def test_parse_without_brackets():
    assert parse_game_dir_name("plain folder") is None


def test_parse_missing_closing_bracket():
    assert parse_game_dir_name("Title [ABC") is None


def test_parse_reversed_brackets_is_error():
    with pytest.raises(ValueError):
        parse_game_dir_name("]Title[")


def test_game_wraps_fields():
    game = Game("Zelda", "RZDE01", b"img")
    assert (game.name.get(), game.id.get(), game.cover.get()) == ("Zelda", "RZDE01", b"img")


def test_game_name_is_editable():
    game = Game("Old", "ID0001", None)
    game.name.set("New")
    assert game.name.get() == "New"