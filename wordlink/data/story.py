"""
The school-day story and helpers for picking the words that fill it.

Blanks in the story are written as `[type]`, where `type` is a key of the
word banks.
"""

import random
import re
from typing import Dict, List, Mapping, Optional, Sequence

from pydantic import BaseModel


STORY_TEMPLATE = (
    "Today at school, my [adjective] teacher stormed in holding a [noun] and "
    "announced we'd be studying [subject] by training a [animal] to [verb]. "
    "The idea sounded [adjective], but she told us to first collect [noun] "
    "from the cafeteria and trade them for extra [food]. Everything was fine "
    "until the [animal] [verb] on the projector and someone yelled [exclamation]! "
    "The chaos got worse when [animal] from the science room started to [verb] "
    "on my [noun]. We all ran [adverb] to the [place], where the teacher just "
    "sighed and said, \"Welcome to [subject] class.\""
)

BLANK_PATTERN = re.compile(r'\[(\w+)\]')


class StoryWord(BaseModel):
    """A word chosen for the story, tagged with its word type."""
    word: str
    type: str


def blank_types(story: str) -> List[str]:
    """Word types of the story's blanks, in reading order."""
    return BLANK_PATTERN.findall(story)


def count_blank_types(story: str) -> Dict[str, int]:
    """Count how many blanks of each type the story has."""
    counts: Dict[str, int] = {}
    for word_type in blank_types(story):
        counts[word_type] = counts.get(word_type, 0) + 1
    return counts


def choose_word_set(
    story: str,
    banks: Mapping[str, Sequence[str]],
    rng: Optional[random.Random] = None
) -> List[StoryWord]:
    """
    Pick distinct words of each required type from the word banks.

    Raises:
        ValueError: If the story needs a type with no word bank
    """
    rng = rng or random.Random()
    word_set: List[StoryWord] = []

    for word_type, count in count_blank_types(story).items():
        if word_type not in banks:
            raise ValueError(f"No word bank for blank type '{word_type}'")

        pool = [w.lower() for w in banks[word_type]]
        rng.shuffle(pool)
        word_set.extend(StoryWord(word=w, type=word_type) for w in pool[:count])

    return word_set


def fill_story(story: str, words: Sequence[Optional[str]]) -> str:
    """Replace blanks in order with `words`; blanks without a word render as `____ (type)`."""
    filled = iter(words)

    def _replace(match: "re.Match[str]") -> str:
        word = next(filled, None)
        return word if word else f"____ ({match.group(1)})"

    return BLANK_PATTERN.sub(_replace, story)
