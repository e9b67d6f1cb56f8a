def is_in_subdirectory(path: str, subdirectory: str) -> bool:
    """Check if a URL path lives under subdirectory, matching whole segments only."""
    if not subdirectory:
        return True

    return path == subdirectory or path.startswith(f"{subdirectory}/")

def strip_subdirectory(path: str, subdirectory: str) -> str:
    """Remove the subdirectory prefix from a relative path, keeping it rooted at '/'.

    `path` may carry a query string or fragment after the path part, so the
    remainder can start with '?' or '#' when the URL pointed at the
    subdirectory itself.
    """
    if not subdirectory or not path.startswith(subdirectory):
        return path

    stripped = path[len(subdirectory):]
    if not stripped.startswith('/'):
        stripped = f"/{stripped}"

    return stripped
