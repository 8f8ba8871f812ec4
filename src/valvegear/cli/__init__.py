"""CLI modules for running calculations and writing input templates.

Note: avoid importing submodules at import-time. This keeps `python -m valvegear.cli.<cmd>`
free of `runpy` warnings and avoids side effects from eager imports.
"""

from __future__ import annotations


def calculate_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `valvegear.cli.calculate.main`."""

    from .calculate import main

    return main(argv)


def template_main(argv: list[str] | None = None) -> int:
    """Lazy wrapper for `valvegear.cli.template.main`."""

    from .template import main

    return main(argv)


__all__ = ["calculate_main", "template_main"]
