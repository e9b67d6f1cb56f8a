"""
Unit Tests — Logging Setup
==========================
Importing the package must leave the application's logging configuration
alone. Checked in a fresh interpreter so earlier imports can't hide it.
"""
import logging
import subprocess
import sys
import textwrap
from pathlib import Path

ROOT = Path(__file__).resolve().parent.parent


def _run(code: str) -> str:
    result = subprocess.run(
        [sys.executable, '-c', textwrap.dedent(code)],
        cwd=ROOT, capture_output=True, text=True, check=True,
    )
    return result.stdout.strip()


def test_import_adds_no_root_handler():
    out = _run("""
        import logging
        import relative_urls.utils.url_helpers
        root = logging.getLogger()
        print(len(root.handlers), root.level)
    """)
    assert out == f"0 {logging.WARNING}"


def test_application_basic_config_still_applies():
    out = _run("""
        import logging
        import relative_urls.utils.url_helpers
        logging.basicConfig(level=logging.DEBUG, format='APP %(message)s')
        root = logging.getLogger()
        print(root.level, root.handlers[0].formatter._fmt)
    """)
    assert out == f"{logging.DEBUG} APP %(message)s"


def test_package_logger_has_null_handler():
    import relative_urls.config  # noqa: F401

    handlers = logging.getLogger('relative_urls').handlers
    assert any(isinstance(h, logging.NullHandler) for h in handlers)
