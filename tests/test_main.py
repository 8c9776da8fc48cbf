from unittest.mock import patch

import pytest

from snake_game import main as main_module
from snake_game.config import Settings
from snake_game.render import AssetError


def test_missing_font_exits_with_status_one(tmp_path, caplog):
    missing = str(tmp_path / "nope.ttf")

    with patch.object(main_module.pygame.display, "set_mode") as set_mode:
        set_mode.return_value = main_module.pygame.Surface((800, 600))
        with pytest.raises(SystemExit) as excinfo:
            main_module.main(["--font", missing])

    assert excinfo.value.code == 1
    assert isinstance(excinfo.value.__cause__, AssetError)
    assert "nope.ttf" in caplog.text


def test_run_draws_a_frame_and_stops_on_quit():
    settings = Settings(width=320, height=256)
    quit_event = main_module.pygame.event.Event(main_module.pygame.QUIT)

    main_module.pygame.font.init()
    font = main_module.pygame.font.Font(None, 30)
    try:
        with patch.object(main_module, "load_font", return_value=font) as load_font, patch.object(
            main_module.pygame.event, "get", return_value=[quit_event]
        ) as get_events:
            main_module.run(settings)

        load_font.assert_called_once_with("res/Heebo.ttf", 30)
        get_events.assert_called_once()
        assert main_module.pygame.display.get_surface().get_size() == (320, 256)
    finally:
        main_module.pygame.quit()
