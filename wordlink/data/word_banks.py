"""Kid-friendly word banks, keyed by word type."""

from typing import Dict, List


ADJECTIVES: List[str] = [
    "silly", "sleepy", "giant", "tiny", "sparkly", "grumpy", "bouncy", "fuzzy",
    "brave", "noisy", "shiny", "wobbly", "happy", "sticky", "purple", "clever",
]

NOUNS: List[str] = [
    "pencil", "backpack", "balloon", "sandwich", "trumpet", "robot", "umbrella",
    "notebook", "rocket", "sock", "crayon", "bucket", "lamp", "pillow", "drum",
]

VERBS: List[str] = [
    "dance", "juggle", "sing", "wiggle", "jump", "skip", "bake", "paint",
    "swim", "climb", "giggle", "sneeze", "whistle", "hop", "spin",
]

ADVERBS: List[str] = [
    "quickly", "slowly", "loudly", "quietly", "happily", "bravely", "wildly",
    "gently", "sadly", "proudly", "calmly", "eagerly",
]

ANIMALS: List[str] = [
    "llama", "sloth", "platypus", "penguin", "hamster", "ostrich", "kangaroo",
    "walrus", "goose", "octopus", "flamingo", "pug", "hedgehog", "otter", "donkey",
    "turtle", "giraffe", "duck", "raccoon", "squirrel", "unicorn", "chicken",
    "koala", "panda", "moose", "zebra", "frog", "cat", "dog", "elephant",
]

FOODS: List[str] = [
    "pizza", "taco", "pancake", "noodle", "cookie", "pickle", "waffle", "muffin",
    "banana", "cupcake", "pretzel", "popcorn", "burrito", "donut", "cheese",
]

PLACES: List[str] = [
    "library", "playground", "gym", "cafeteria", "park", "beach", "zoo",
    "museum", "garden", "castle", "farm", "forest",
]

SUBJECTS: List[str] = [
    "math", "science", "history", "music", "art", "spelling", "reading",
    "geography", "coding", "drama",
]

EXCLAMATIONS: List[str] = [
    "wow", "yikes", "hooray", "oops", "yay", "whoa", "ouch", "yippee", "eek",
    "bingo",
]

WORD_BANKS: Dict[str, List[str]] = {
    "adjective": ADJECTIVES,
    "noun": NOUNS,
    "verb": VERBS,
    "adverb": ADVERBS,
    "animal": ANIMALS,
    "food": FOODS,
    "place": PLACES,
    "subject": SUBJECTS,
    "exclamation": EXCLAMATIONS,
}
