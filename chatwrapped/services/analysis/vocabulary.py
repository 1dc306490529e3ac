import re
from dataclasses import dataclass

STOP_WORDS = frozenset(
    {
        "the", "be", "to", "of", "and", "a", "in", "that", "have", "i", "it", "for", "not", "on", "with",
        "he", "as", "you", "do", "at", "this", "but", "his", "by", "from", "they", "we", "say", "her",
        "she", "or", "an", "will", "my", "one", "all", "would", "there", "their", "what", "so", "up",
        "out", "if", "about", "who", "get", "which", "go", "me", "when", "make", "can", "like", "time",
        "no", "just", "him", "know", "take", "people", "into", "year", "your", "good", "some", "could",
        "them", "see", "other", "than", "then", "now", "look", "only", "come", "its", "over", "think",
        "also", "back", "after", "use", "two", "how", "our", "work", "first", "well", "way", "even",
        "new", "want", "because", "any", "these", "give", "day", "most", "us", "is", "are", "was",
        "were", "has", "had", "been", "ok", "okay", "lol", "haha", "yeah", "yes", "hey", "hi", "hello",
        "omg", "did", "done", "too", "very", "much", "really", "got", "don", "dont", "didnt", "cant",
        "cannot", "pm", "am", "omitted",
    }
)

MEDIA_PHRASES = (
    "image omitted",
    "video omitted",
    "audio omitted",
    "sticker omitted",
    "gif omitted",
    "media omitted",
    "contact card omitted",
    "document omitted",
    "<media omitted>",
)

DELETED_MARKERS = frozenset(
    {
        "this message was deleted",
        "you deleted this message",
        "this message was deleted.",
        "you deleted this message.",
    }
)

EDITED_MARKER = "<this message was edited>"


@dataclass(frozen=True)
class Vocabulary:
    """Word lists and patterns the engine classifies content with."""

    stop_words: frozenset[str] = STOP_WORDS
    media_phrases: tuple[str, ...] = MEDIA_PHRASES
    deleted_markers: frozenset[str] = DELETED_MARKERS
    edited_marker: str = EDITED_MARKER
    morning_pattern: re.Pattern = re.compile(r"\b(gm|good\s*morn|morning|mrng)\b", re.IGNORECASE)
    night_pattern: re.Pattern = re.compile(r"\b(gn|good\s*night|night|nite)\b", re.IGNORECASE)
    farewell_pattern: re.Pattern = re.compile(r"\b(bye|byee|tata|cya|see\s*ya)\b", re.IGNORECASE)


DEFAULT_VOCABULARY = Vocabulary()
