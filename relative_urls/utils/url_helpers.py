from urllib.parse import urlsplit, SplitResult
import logging
from typing import Optional, Dict, Any
from relative_urls.config import DEFAULT_CONFIG, HTTP_SCHEMES
from relative_urls.utils.path_helpers import is_in_subdirectory, strip_subdirectory

logger = logging.getLogger(__name__)

def parse_url(url: str) -> Optional[SplitResult]:
    """Split a URL into its parts, returning None if it can't be parsed."""
    try:
        parts = urlsplit(url)
        # urlsplit only validates the port when .port is read
        _ = parts.port
    except ValueError as e:
        logger.debug(f"Could not parse URL {url!r}: {e}")
        return None

    return parts

def is_http_url(parts: SplitResult) -> bool:
    """Check if parsed URL is an absolute http(s) URL with a host."""
    return parts.scheme in HTTP_SCHEMES and bool(parts.hostname)

def is_same_host(url_parts: SplitResult, root_parts: SplitResult, ignore_protocol: bool = True) -> bool:
    """Check if URL belongs to the same origin as the root.

    Hostnames are compared lower-cased, ports only as written, so an explicit
    default port (``:443``) does not match a root without one.
    """
    if not ignore_protocol and url_parts.scheme != root_parts.scheme:
        return False

    return (url_parts.hostname, url_parts.port) == (root_parts.hostname, root_parts.port)

def get_subdirectory(root_parts: SplitResult) -> str:
    """Return the root's path without trailing slashes ('' for a bare origin)."""
    return root_parts.path.rstrip('/')

def strip_origin(parts: SplitResult) -> str:
    """Drop scheme and authority, keeping path, query and fragment as written."""
    path = parts.path or '/'
    if parts.query:
        path = f"{path}?{parts.query}"
    if parts.fragment:
        path = f"{path}#{parts.fragment}"

    return path

def _merge_options(options: Optional[Dict[str, Any]]) -> Dict[str, Any]:
    merged = dict(DEFAULT_CONFIG)
    if not options:
        return merged

    unknown = set(options) - set(DEFAULT_CONFIG)
    if unknown:
        logger.debug(f"Ignoring unknown options: {', '.join(sorted(unknown))}")

    merged.update((key, value) for key, value in options.items() if key in DEFAULT_CONFIG)
    return merged

def absolute_to_relative(url: str, root: Optional[str] = None,
                         options: Optional[Dict[str, Any]] = None) -> str:
    """
    Convert an absolute URL to a site-relative path if it's on the root's site.

    Anything that can't be converted (relative paths, non-http schemes, other
    hosts, URLs outside the root's subdirectory) is returned unchanged, so it
    is always safe to call on any link. Without a root, the origin of any
    http(s) URL is stripped.

    Options (see DEFAULT_CONFIG for defaults):
        ignore_protocol: match http and https roots interchangeably.
        without_subdirectory: strip the root's subdirectory from the result.
        assets_only: only convert URLs containing static_image_url_prefix.
    """
    opts = _merge_options(options)

    if opts['assets_only'] and opts['static_image_url_prefix'] not in url:
        return url

    url_parts = parse_url(url)
    if url_parts is None or not is_http_url(url_parts):
        return url

    if not root:
        return strip_origin(url_parts)

    root_parts = parse_url(root)
    if root_parts is None or not is_http_url(root_parts):
        logger.debug(f"Root {root!r} is not an absolute http(s) URL, leaving {url} as is")
        return url

    if not is_same_host(url_parts, root_parts, opts['ignore_protocol']):
        return url

    subdirectory = get_subdirectory(root_parts)
    if not is_in_subdirectory(url_parts.path, subdirectory):
        logger.debug(f"{url} is outside root subdirectory {subdirectory}")
        return url

    relative_path = strip_origin(url_parts)
    if opts['without_subdirectory']:
        relative_path = strip_subdirectory(relative_path, subdirectory)

    return relative_path
