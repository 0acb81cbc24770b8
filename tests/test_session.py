import random
from pathlib import Path

import pytest
from packages.dictionary import MemorySpellChecker
from packages.engine import Accepted, Reason, Rejected
from packages.session import (
    DEFAULT_ROOT_WORD, GameSession, WordListUnavailable, new_session, new_session_from_file,
)

WORDS = ["mar", "arm", "ram", "liar", "alarm", "lama"]


@pytest.fixture
def session():
    return GameSession("alarm", checker=MemorySpellChecker(WORDS))


def test_accepts_then_rejects_repeat(session):
    assert session.submit_guess("mar") == Accepted("mar")
    assert session.submit_guess("mar") == Rejected("mar", Reason.ALREADY_USED, "alarm")
    assert session.history == ("mar",)


@pytest.mark.parametrize("raw", ["", "   ", "\n\t"])
def test_empty_input_is_ignored(session, raw):
    out = session.submit_guess(raw)
    assert out.reason is Reason.EMPTY_INPUT and out.silent
    assert session.history == ()


def test_scenarios(session):
    # Scenario 1: no 'i' in "alarm"
    assert session.submit_guess("liar").reason is Reason.NOT_POSSIBLE
    # Scenario 2: feasible; dictionary decides
    assert session.submit_guess("mar").ok
    assert session.submit_guess("lam").reason is Reason.NOT_RECOGNIZED
    # Scenario 3: already in history
    assert session.submit_guess("mar").reason is Reason.ALREADY_USED
    assert session.history == ("mar",)


def test_guess_is_normalized_once(session):
    assert session.submit_guess("  MAR ") == Accepted("mar")
    assert session.submit_guess("Mar").reason is Reason.ALREADY_USED
    assert "mar" in session


def test_history_is_most_recent_first(session):
    for w in ["mar", "arm", "ram"]:
        assert session.submit_guess(w).ok
    assert session.history == ("ram", "arm", "mar")
    assert len(session) == 3
    assert list(session) == ["ram", "arm", "mar"]


def test_root_word_counts_as_used(session):
    out = session.submit_guess("ALARM")
    assert out.reason is Reason.ALREADY_USED
    assert session.history == ()


def test_failing_checker_rejects_as_not_recognized():
    class Broken:
        def check_spelling(self, word, locale):
            raise OSError("gone")

    s = GameSession("alarm", checker=Broken())
    assert s.submit_guess("mar").reason is Reason.NOT_RECOGNIZED
    assert s.history == ()


@pytest.mark.parametrize("bad", ["", "   ", "two words"])
def test_invalid_root_word(bad):
    with pytest.raises(ValueError):
        GameSession(bad)


def test_root_word_is_normalized():
    assert GameSession("  Alarm ").root_word == "alarm"


def test_new_session_empty_list_falls_back():
    assert new_session([]).root_word == DEFAULT_ROOT_WORD == "silkworm"
    assert new_session(["", "  "]).root_word == "silkworm"


def test_new_session_picks_from_list_deterministically():
    roots = ["alarm", "silkworm", "notebook"]
    a = new_session(roots, rng=random.Random(7)).root_word
    b = new_session(roots, rng=random.Random(7)).root_word
    assert a == b and a in roots


def test_new_session_from_file(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("alarm\n\n", encoding="utf-8")
    s = new_session_from_file(p, checker=MemorySpellChecker(WORDS))
    assert s.root_word == "alarm"
    assert s.submit_guess("mar").ok


def test_new_session_from_empty_file_falls_back(tmp_path: Path):
    p = tmp_path / "start.txt"
    p.write_text("", encoding="utf-8")
    assert new_session_from_file(p).root_word == "silkworm"


def test_new_session_from_missing_file(tmp_path: Path):
    with pytest.raises(WordListUnavailable):
        new_session_from_file(tmp_path / "nope.txt")


def test_bundled_word_list_deals_a_root():
    s = new_session_from_file(rng=random.Random(1))
    assert s.root_word and s.root_word.isalpha()


def test_rejection_carries_root_word_for_display(session):
    out = session.submit_guess("liar")
    assert out.root_word == "alarm"
    assert out.title == "Word not possible"
    assert out.message == "That word cannot be spelled from alarm!"


def test_new_session_skips_entries_with_whitespace():
    roots = ["ice cream", "alarm", "  ", "hot dog"]
    for seed in range(20):
        assert new_session(roots, rng=random.Random(seed)).root_word == "alarm"


def test_new_session_all_invalid_entries_fall_back(tmp_path: Path):
    assert new_session(["ice cream", "hot dog"]).root_word == "silkworm"
    p = tmp_path / "start.txt"
    p.write_text("ice cream\n", encoding="utf-8")
    assert new_session_from_file(p).root_word == "silkworm"
