"""Word Link: the crossword word-building phase of Spellventure."""
