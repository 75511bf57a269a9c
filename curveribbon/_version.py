"""Version number."""

try:
    from importlib.metadata import version
    __version__ = version("curveribbon")
except Exception:
    # not installed, e.g. imported straight from a source checkout
    __version__ = "0.1.0-dev"
