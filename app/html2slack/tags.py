"""Tag classification for the mrkdwn renderer."""

# Phrasing content as defined by the HTML specification, plus the
# deprecated presentational tags (strike, big, tt, acronym) still found in
# hand-written markup
INLINE_TAGS: frozenset[str] = frozenset(
    {
        "a",
        "abbr",
        "area",
        "audio",
        "b",
        "bdi",
        "bdo",
        "br",
        "button",
        "canvas",
        "cite",
        "code",
        "data",
        "datalist",
        "del",
        "dfn",
        "em",
        "embed",
        "i",
        "iframe",
        "img",
        "input",
        "ins",
        "kbd",
        "label",
        "link",
        "map",
        "mark",
        "math",
        "meta",
        "meter",
        "noscript",
        "object",
        "output",
        "picture",
        "progress",
        "q",
        "ruby",
        "s",
        "samp",
        "script",
        "select",
        "slot",
        "small",
        "span",
        "strong",
        "sub",
        "sup",
        "svg",
        "template",
        "textarea",
        "time",
        "u",
        "var",
        "video",
        "wbr",
        # Deprecated
        "acronym",
        "big",
        "strike",
        "tt",
    }
)

# Rendered by dedicated extractors, never by the generic renderer
IGNORED_TAGS: frozenset[str] = frozenset({"dl", "button"})


def is_inline(tag_name: str) -> bool:
    """Return True if the tag flows within a line of text."""
    return tag_name in INLINE_TAGS


def is_ignored(tag_name: str) -> bool:
    """Return True if the tag is owned by an extractor (fields, actions)."""
    return tag_name in IGNORED_TAGS
