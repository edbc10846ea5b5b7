"""Share text for generated combos.

Pure string formatting over the generator output - no generation logic.
"""

from collections.abc import Sequence
from urllib.parse import quote

COMBO_SEPARATOR = " → "
SHARE_SEPARATOR = "→"
EMPTY_COMBO_PLACEHOLDER = "（まだ結果がありません）"

SHARE_HEADER = "今日の柴犬トレーナー@shibainukick365からの指令🥊"
SHARE_FOOTER = "難しいけど楽しいな🐶"
SHARE_HASHTAG = "#キックボクシングをする柴犬"
SHARE_SITE_URL = "https://kick-combo-generator.vercel.app"

TWEET_INTENT_URL = "https://twitter.com/intent/tweet?text="


def combo_text(labels: Sequence[str]) -> str:
    """Join combo labels for on-screen display."""
    return COMBO_SEPARATOR.join(labels)


def format_share_text(labels: Sequence[str]) -> str:
    """Wrap a combo in the promotional share template.

    Args:
        labels: Combo labels in order (may be empty)

    Returns:
        Multi-line share text
    """
    combo = SHARE_SEPARATOR.join(labels) if labels else EMPTY_COMBO_PLACEHOLDER
    return "\n".join(
        [
            SHARE_HEADER,
            f"「{combo}」",
            SHARE_FOOTER,
            SHARE_HASHTAG,
            SHARE_SITE_URL,
        ]
    )


def build_share_url(text: str) -> str:
    """Return the tweet intent URL for the given share text."""
    return TWEET_INTENT_URL + quote(text, safe="")
