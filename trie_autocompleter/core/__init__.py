"""
trie_autocompleter.core

The completion engine, independent of any UI:
 - trie: prefix tree with per-word frequencies
 - dictionary: frequency list loader
 - completion: query normalisation
 - interaction: Insert/Completion state machine
 - protocols: the TextSurface interface the state machine drives
"""
