import random

import pytest

from wordlink.data import STORY_TEMPLATE, WORD_BANKS, StoryWord, blank_types, choose_word_set, fill_story
from wordlink.session import MadLibSession


STORY = "The [adjective] [noun] likes to [verb]."
WORD_SET = [
    StoryWord(word="silly", type="adjective"),
    StoryWord(word="robot", type="noun"),
    StoryWord(word="dance", type="verb"),
]


def make_session(**kwargs) -> MadLibSession:
    return MadLibSession.create(STORY, WORD_SET, **kwargs)


def record_events(session: MadLibSession) -> list:
    events = []
    session.subscribe(lambda event, s: events.append(event))
    return events


class TestStoryHelpers:
    """Story template parsing and word selection."""

    def test_blank_types(self):
        assert blank_types(STORY) == ["adjective", "noun", "verb"]

    def test_template_has_bank_for_every_blank(self):
        assert set(blank_types(STORY_TEMPLATE)) <= set(WORD_BANKS)

    def test_choose_word_set_counts(self):
        word_set = choose_word_set(STORY_TEMPLATE, WORD_BANKS, random.Random(3))

        assert len(word_set) == len(blank_types(STORY_TEMPLATE))
        animals = [w.word for w in word_set if w.type == "animal"]
        assert len(animals) == len(set(animals)) == 3

    def test_choose_word_set_deterministic(self):
        first = choose_word_set(STORY_TEMPLATE, WORD_BANKS, random.Random(5))
        second = choose_word_set(STORY_TEMPLATE, WORD_BANKS, random.Random(5))
        assert first == second

    def test_missing_bank_raises(self):
        with pytest.raises(ValueError):
            choose_word_set("A [gizmo].", WORD_BANKS)

    def test_fill_story_partial(self):
        assert fill_story(STORY, ["silly"]) == "The silly ____ (noun) likes to ____ (verb)."


class TestChoosing:
    """Placing words into blanks."""

    def test_create(self):
        session = make_session()

        assert [b.type for b in session.blanks] == ["adjective", "noun", "verb"]
        assert session.open_blanks() == [0, 1, 2]
        assert session.hearts == 3

    def test_correct_choice(self):
        session = make_session()

        assert session.choose_word(0, "silly", "adjective") is True
        assert session.blanks[0].word == "silly"
        assert session.hearts == 3

    def test_wrong_choice_costs_heart(self):
        session = make_session()

        assert session.choose_word(0, "robot", "noun") is False
        assert session.blanks[0].word == "robot"
        assert session.hearts == 2

    def test_filled_blank_is_ignored(self):
        session = make_session()
        session.choose_word(0, "silly", "adjective")

        assert session.choose_word(0, "robot", "noun") is False
        assert session.blanks[0].word == "silly"

    def test_completing_story(self):
        session = make_session()
        events = record_events(session)

        for i, w in enumerate(WORD_SET):
            session.choose_word(i, w.word, w.type)

        assert session.status == "solved"
        assert events.count("phase_complete") == 1
        assert session.render() == "The silly robot likes to dance."

    def test_wrong_last_choice_still_completes(self):
        session = make_session(hearts=1)
        events = record_events(session)
        session.choose_word(0, "silly", "adjective")
        session.choose_word(1, "robot", "noun")

        session.choose_word(2, "silly", "adjective")

        assert session.status == "solved"
        assert session.hearts == 0
        assert "out_of_hearts" not in events
        assert events.count("phase_complete") == 1

    def test_out_of_hearts(self):
        session = make_session(hearts=1)
        events = record_events(session)

        session.choose_word(0, "dance", "verb")

        assert session.status == "exhausted"
        assert events.count("out_of_hearts") == 1
        assert session.choose_word(1, "robot", "noun") is False

    def test_time_expired(self):
        session = make_session()
        session.time_expired(0)

        assert session.hearts == 2
        assert session.blanks[0].word is None

    def test_fill_next_blank(self):
        session = make_session()

        assert session.fill_next_blank("dance", "verb") is True
        assert session.blanks[2].word == "dance"

    def test_fill_next_blank_without_match(self):
        session = make_session()

        assert session.fill_next_blank("taco", "food") is False
        assert session.hearts == 2

    def test_snapshot_targets_mad_lib(self):
        session = make_session(score=300)
        snapshot = session.snapshot(bonus_hearts=1)

        assert snapshot.resume_target == "madlib"
        assert snapshot.score == 300
        assert snapshot.bonus_hearts_pending == 1


class TestChoices:
    """Choices offered for a blank."""

    def test_one_correct_choice(self):
        session = make_session()

        choices = session.choices_for(0, random.Random(0))

        assert len(choices) == 3
        assert [c.word for c in choices if c.type == "adjective"] == ["silly"]

    def test_used_word_not_offered(self):
        session = make_session()
        session.choose_word(0, "robot", "noun")

        choices = session.choices_for(1, random.Random(0))
        assert "robot" not in [c.word for c in choices]
