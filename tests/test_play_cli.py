import sys

import pytest
from apps.cli.play import main, play
from packages.dictionary import MemorySpellChecker
from packages.session import GameSession


def _factory(roots):
    it = iter(roots)
    return lambda: GameSession(next(it), checker=MemorySpellChecker(["mar", "arm", "silk"]))


def test_play_prints_alerts_and_history(capsys):
    session = play(_factory(["alarm"]), ["mar", "liar", "", "mar", ":quit", "arm"])
    out = capsys.readouterr().out
    assert "(3) mar" in out
    assert "Word not possible: That word cannot be spelled from alarm!" in out
    assert "Word already used: Please select another!" in out
    assert session.history == ("mar",)


def test_play_new_deals_fresh_session():
    session = play(_factory(["alarm", "silkworm"]), ["mar", ":new", "silk"])
    assert session.root_word == "silkworm"
    assert session.history == ("silk",)


@pytest.mark.parametrize("root", ["two words", "", "   "])
def test_main_rejects_invalid_root(monkeypatch, capsys, root):
    monkeypatch.setattr(sys, "argv", ["play", "--root", root])
    with pytest.raises(SystemExit) as exc:
        main()
    assert exc.value.code == 1
    assert "Invalid root word" in capsys.readouterr().err
