"""Word banks and story template."""

from .word_banks import WORD_BANKS
from .story import (
    STORY_TEMPLATE,
    StoryWord,
    blank_types,
    choose_word_set,
    count_blank_types,
    fill_story,
)

__all__ = [
    "WORD_BANKS",
    "STORY_TEMPLATE",
    "StoryWord",
    "blank_types",
    "choose_word_set",
    "count_blank_types",
    "fill_story",
]
