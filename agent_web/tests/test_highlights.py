import pytest

from agent_web.services.highlights import FALLBACK_HIGHLIGHT, HighlightExtractor, utf16_length


@pytest.mark.parametrize(
    "prompt, expected",
    [
        ("Build a dashboard. Add auth\nShip it", ["Build a dashboard", "Add auth", "Ship it"]),
        ("full-stack app", ["full", "stack app"]),
        ("• one • two", ["one", "two"]),
        ("first\r\nsecond", ["first", "second"]),
    ],
)
def test_splits_on_clause_breaks(prompt, expected):
    assert HighlightExtractor().extract(prompt) == expected


@pytest.mark.parametrize("prompt", ["", "...", " - . - ", None])
def test_fallback_when_nothing_survives(prompt):
    assert HighlightExtractor().extract(prompt) == [FALLBACK_HIGHLIGHT]


def test_takes_first_six():
    prompt = ". ".join(f"item {i}" for i in range(8))
    assert HighlightExtractor().extract(prompt) == [f"item {i}" for i in range(6)]


def test_drops_fragments_over_max_length():
    kept = "k" * 160
    dropped = "d" * 161
    assert HighlightExtractor().extract(f"{dropped}. {kept}. short") == [kept, "short"]


def test_limits_are_configurable():
    extractor = HighlightExtractor(limit=2, max_chars=5)
    assert extractor.extract("a. toolong. b. c") == ["a", "b"]


def test_length_limit_counts_utf16_units():
    # each rocket is two UTF-16 units
    fits = "\U0001F680" * 80
    too_long = "\U0001F680" * 81
    assert utf16_length(fits) == 160
    assert HighlightExtractor().extract(f"{too_long}. {fits}") == [fits]


def test_bmp_text_length_is_unchanged():
    assert utf16_length("café") == 4
