import re

import emoji

from chatwrapped.services.analysis.types import ContentKind, MessageFeatures
from chatwrapped.services.analysis.vocabulary import Vocabulary

NON_WORD_RE = re.compile(r"[^\w\s'\u2019]")
APOSTROPHE_RE = re.compile(r"['\u2019]")
CJK_RE = re.compile(r"[\u3040-\u30ff\u3400-\u4dbf\u4e00-\u9fff\uac00-\ud7af\uf900-\ufaff]")

SHORT_MESSAGE_WORDS = 3
LONG_MESSAGE_WORDS = 12


def classify_content(content: str, vocabulary: Vocabulary) -> ContentKind:
    lowered = content.strip().lower()
    if lowered in vocabulary.deleted_markers or lowered == vocabulary.edited_marker:
        return ContentKind.SYSTEM
    if any(phrase in lowered for phrase in vocabulary.media_phrases):
        return ContentKind.MEDIA
    if len(lowered) > 1 and lowered.startswith("<") and lowered.endswith(">"):
        return ContentKind.MEDIA
    return ContentKind.TEXT


def strip_edit_marker(content: str, vocabulary: Vocabulary) -> str:
    pattern = re.compile(re.escape(vocabulary.edited_marker), re.IGNORECASE)
    return pattern.sub("", content).strip()


def tokenize(text: str) -> list[str]:
    cleaned = NON_WORD_RE.sub("", text.lower())
    tokens = (APOSTROPHE_RE.sub("", token) for token in cleaned.split())
    return [token for token in tokens if token]


def is_content_word(token: str, vocabulary: Vocabulary) -> bool:
    if token in vocabulary.stop_words:
        return False
    return len(token) > 2 or bool(CJK_RE.search(token))


def build_phrases(tokens: list[str], vocabulary: Vocabulary) -> list[str]:
    phrases: list[str] = []
    for first, second in zip(tokens, tokens[1:]):
        if first in vocabulary.stop_words and second in vocabulary.stop_words:
            continue
        phrases.append(f"{first} {second}")
    return phrases


def extract_message_features(content: str, vocabulary: Vocabulary) -> MessageFeatures:
    kind = classify_content(content, vocabulary)
    if kind is not ContentKind.TEXT:
        return MessageFeatures(kind=kind)

    text = strip_edit_marker(content, vocabulary)
    tokens = tokenize(text)
    return MessageFeatures(
        kind=kind,
        word_count=len(text.split()),
        emojis=[match["emoji"] for match in emoji.emoji_list(text)],
        content_words=[token for token in tokens if is_content_word(token, vocabulary)],
        phrases=build_phrases(tokens, vocabulary),
        morning=bool(vocabulary.morning_pattern.search(text)),
        night=bool(vocabulary.night_pattern.search(text)),
        farewell=bool(vocabulary.farewell_pattern.search(text)),
    )
