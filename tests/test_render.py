from __future__ import annotations

from rich.console import Console

from scrabtiles.__main__ import main
from scrabtiles.core.game import GameSession
from scrabtiles.render import print_session, render_hand


def test_render_hand_shows_blank_as_empty() -> None:
    text = render_hand("A?", [1, 0])
    assert text.plain == "[A1] [ 0] "


def test_print_session_smoke(session: GameSession) -> None:
    session.place_from_hand(0, 7, 7)
    console = Console(record=True, width=120)
    print_session(session.snapshot(), console=console)
    out = console.export_text()
    assert "Player 1" in out and "Player 2" in out
    assert "86" in out


def test_main_runs(monkeypatch, tmp_path, capsys) -> None:
    monkeypatch.setenv("SCRABTILES_LOG_PATH", str(tmp_path / "demo.log"))
    main(["--seed", "5", "--players", "1", "--shuffle"])
    captured = capsys.readouterr()
    assert "Player 1" in captured.out
