"""Asset discovery for bundled static files.

Locates the stylesheet bundled into the docviewer package.
"""

from importlib.resources import files
from pathlib import Path


def get_static_dir() -> Path:
    """Return path to bundled static assets.

    Returns:
        Path to the static directory containing the stylesheet.

    Raises:
        FileNotFoundError: If static assets are not bundled.
    """
    static = files("docviewer").joinpath("static")
    if not static.is_dir():
        msg = "Bundled static assets not found. Reinstall the docviewer package."
        raise FileNotFoundError(msg)
    return Path(str(static))
