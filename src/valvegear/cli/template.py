"""Write an inputs file pre-filled with the example values.

Usage:
    python -m valvegear.cli.template
    python -m valvegear.cli.template --out my_inputs.txt

The file can be edited and then loaded with `valvegear.cli.calculate --load`.
"""

from __future__ import annotations

import argparse
from pathlib import Path


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Write an example inputs file")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--out", type=str, default=None, help="Output path (default: configured inputs file)")
    parser.add_argument("--force", action="store_true", help="Overwrite an existing file")
    args = parser.parse_args(argv)

    from ..core.config import default_config, load_config
    from ..core.parameters import ParameterModel
    from ..core.text_io import save_inputs

    config = load_config(args.config) if args.config else default_config()
    path = Path(args.out) if args.out else config.storage.inputs_path

    if path.exists() and not args.force:
        print(f"{path} already exists; use --force to overwrite")
        return 1

    model = ParameterModel()
    model.load_examples()
    path.parent.mkdir(parents=True, exist_ok=True)
    try:
        save_inputs(model, path, config.storage.precision)
    except OSError as exc:
        print(f"Error saving inputs file: {exc}")
        return 2

    print(f"Wrote {path}")
    return 0


if __name__ == "__main__":
    import sys

    sys.exit(main())
