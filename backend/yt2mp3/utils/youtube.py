import re
from typing import Optional

DEFAULT_SOURCE_URL_TEMPLATE = 'https://www.youtube.com/watch?v={video_id}'

# Anything outside this set is replaced before the id becomes part of a path
_UNSAFE_NAME_CHARS = re.compile(r'[^\w.-]')


def build_video_url(video_id: str, template: str = DEFAULT_SOURCE_URL_TEMPLATE) -> str:
    """Build the canonical watch URL for a video identifier.

    The identifier is opaque and not validated; it is inserted as given.
    """
    return template.format(video_id=video_id)


def escape_single_quotes(value: Optional[str]) -> str:
    """
    Make a value safe to embed between single quotes in a shell-style argument.

    Each ' closes the quoted run, emits an escaped literal quote and reopens it:
        O'Brien -> O'\\''Brien
    so 'O'\\''Brien' splits back to the single word O'Brien.
    """
    if not value:
        return ''
    return value.replace("'", "'\\''")


def build_metadata_args(title: Optional[str], artist: Optional[str]) -> str:
    """
    Build the ffmpeg postprocessor argument string injecting title/artist tags.

    Returns an empty string when there is nothing to tag.
    """
    parts = []
    if title:
        parts.append(f"-metadata title='{escape_single_quotes(title)}'")
    if artist:
        parts.append(f"-metadata artist='{escape_single_quotes(artist)}'")
    return ' '.join(parts)


def safe_scratch_name(video_id: str) -> str:
    """
    File-system safe form of a video id for scratch names.

    Anything outside [\\w.-] is replaced so the id cannot climb out of the
    scratch directory.
    """
    return _UNSAFE_NAME_CHARS.sub('_', video_id) or 'audio'
