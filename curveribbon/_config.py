"""Configuration and system-info helpers (top-level module)."""

import platform
import re
import sys
from functools import partial
from importlib.metadata import PackageNotFoundError, requires, version
from pathlib import Path
from typing import IO, Callable, Optional

import psutil

_PACKAGE = "curveribbon"
_SPECIFIER = re.compile(r"[\s\[;<>=!~]")


def sys_info(fid: Optional[IO] = None, developer: bool = False):
    """Print the system information for debugging.

    Parameters
    ----------
    fid : file-like, default=None
        The file to write to, passed to :func:`print`.
        Can be None to use :data:`sys.stdout`.
    developer : bool, default=False
        If True, also list the ``test`` extra.
    """
    ljust = 26
    out = partial(print, end="", file=fid)

    out("Platform:".ljust(ljust) + platform.platform() + "\n")
    out("Python:".ljust(ljust) + sys.version.replace("\n", " ") + "\n")
    out("Executable:".ljust(ljust) + sys.executable + "\n")
    out("CPU:".ljust(ljust) + platform.processor() + "\n")
    out("Physical cores:".ljust(ljust) + str(psutil.cpu_count(False)) + "\n")
    out("Logical cores:".ljust(ljust) + str(psutil.cpu_count(True)) + "\n")
    out("RAM:".ljust(ljust))
    out(f"{psutil.virtual_memory().total / float(2 ** 30):0.1f} GB\n")

    out("\nDependencies info\n")
    out(f"{_PACKAGE}:".ljust(ljust) + _installed_version(_PACKAGE) + "\n")
    _list_dependencies_info(out, ljust, _requirements())

    if developer:
        extra = _requirements("test")
        if extra:
            out("\nOptional 'test' info\n")
            _list_dependencies_info(out, ljust, extra)


def _installed_version(name: str) -> str:
    try:
        return version(name)
    except PackageNotFoundError:
        return "Not found."


def _requirements(extra: Optional[str] = None) -> list[str]:
    """Return requirement strings for the core package or one extra.

    Reads the installed metadata, falling back to ``pyproject.toml`` when
    the package is imported from a source checkout.
    """
    try:
        raw = requires(_PACKAGE) or []
    except PackageNotFoundError:
        raw = []
    if raw:
        if extra is None:
            return [r.split(";")[0].strip() for r in raw if "extra ==" not in r]
        return [r.split(";")[0].strip() for r in raw
                if f"extra == '{extra}'" in r or f'extra == "{extra}"' in r]

    import tomllib

    pyproject = Path(__file__).resolve().parents[1] / "pyproject.toml"
    if not pyproject.exists():
        return []
    with pyproject.open("rb") as fh:
        project = tomllib.load(fh).get("project", {})
    if extra is None:
        return list(project.get("dependencies", []))
    return list(project.get("optional-dependencies", {}).get(extra, []))


def _list_dependencies_info(out: Callable, ljust: int, dependencies: list[str]):
    """List dependencies names and versions.

    Parameters
    ----------
    out : Callable
        output function
    ljust : int
         length of returned string
    dependencies : List[str]
        requirement strings, e.g. ``numpy>=1.21``
    """
    for dep in dependencies:
        name = _SPECIFIER.split(dep, maxsplit=1)[0]
        out(f"{name}:".ljust(ljust) + _installed_version(name) + "\n")
