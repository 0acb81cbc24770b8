from pathlib import Path

import pytest
from packages.datasets import DEFAULT_DICTIONARY_PATH
from packages.dictionary import (
    BaseSpellChecker, MemorySpellChecker, WordListSpellChecker, create_checker,
    get_checker_ids, register,
)


def test_memory_checker_reports_full_span():
    c = MemorySpellChecker(["Mar", " arm "])
    assert c.check_spelling("mar", "en") is None
    assert c.check_spelling("arm", "en") is None
    assert c.check_spelling("amr", "en") == (0, 3)
    assert len(c) == 2


def test_memory_checker_rejects_other_locale():
    with pytest.raises(LookupError):
        MemorySpellChecker(["mar"]).check_spelling("mar", "de")


def test_wordlist_checker_loads_lazily(tmp_path: Path):
    p = tmp_path / "dict.txt"
    p.write_text("mar\narm\n", encoding="utf-8")
    c = WordListSpellChecker(p)
    assert c.check_spelling("arm", "en") is None
    assert c.check_spelling("ram", "en") == (0, 3)
    assert "mar" in c


def test_wordlist_checker_missing_file(tmp_path: Path):
    c = WordListSpellChecker(tmp_path / "missing.txt")
    with pytest.raises(FileNotFoundError):
        c.check_spelling("mar", "en")


def test_bundled_dictionary_has_subwords():
    c = WordListSpellChecker(DEFAULT_DICTIONARY_PATH)
    assert c.check_spelling("silk", "en") is None
    assert c.check_spelling("worm", "en") is None


def test_factory_and_registry():
    assert {"memory", "wordlist"} <= set(get_checker_ids())
    c = create_checker("memory", words=["mar"])
    assert isinstance(c, MemorySpellChecker)
    with pytest.raises(ValueError):
        create_checker("nope")


def test_register_requires_unique_id():
    class NoId(BaseSpellChecker):
        id = ""

    with pytest.raises(ValueError):
        register(NoId)

    class Dup(BaseSpellChecker):
        id = "memory"

    with pytest.raises(ValueError):
        register(Dup)
