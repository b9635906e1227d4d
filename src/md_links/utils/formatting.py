def describe_outcome(status, error) -> str:
    """Short label for a validated link (e.g. ``ok 200`` or ``fail Network error``)."""
    if error is not None:
        return f"fail {error}"
    if status is None:
        return ""
    label = "ok" if status < 400 else "fail"
    return f"{label} {status}"


def truncate(text: str, width: int = 50) -> str:
    """Shorten text for table cells, keeping the start."""
    if text is None:
        return ""
    if len(text) <= width:
        return text
    return text[: width - 1] + "…"
