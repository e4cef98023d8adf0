"""Post-processing of model output into canonical markdown."""

# Opening lines accepted for a fence that wraps the whole reply
FENCE_OPENINGS = frozenset({"```markdown", "```md", "```"})
FENCE_CLOSING = "```"


def _unwrap_fence(text: str) -> str | None:
    """Return the body of a fully fenced document, or None if not fenced."""
    lines = text.split("\n")
    if len(lines) < 2:
        return None
    # Fence lines may carry a trailing \r from CRLF replies
    if lines[0].rstrip("\r") not in FENCE_OPENINGS or lines[-1].rstrip("\r") != FENCE_CLOSING:
        return None
    return "\n".join(lines[1:-1]).strip()


def normalize_markdown(text: str) -> str:
    """Strip a whole-document code fence, trim, and end with one newline.

    Models sometimes wrap their entire reply in ```markdown ... ``` even
    when told not to. Fences are removed repeatedly so that the result is a
    fixed point: normalize_markdown(normalize_markdown(x)) == normalize_markdown(x).
    """
    cleaned = text.strip()
    unwrapped = _unwrap_fence(cleaned)
    while unwrapped is not None:
        cleaned = unwrapped
        unwrapped = _unwrap_fence(cleaned)
    return cleaned + "\n"
