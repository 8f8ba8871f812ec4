"""Single calculation CLI.

Usage:
    python -m valvegear.cli.calculate --example
    python -m valvegear.cli.calculate --load --save
    python -m valvegear.cli.calculate -D 66 -S 26 -B 20.5 -L 0.858 -A 3.39 -T 5.5 -W 18

Outputs JSON with inputs, outputs and status to stdout.

Exit codes:
    0 - calculation succeeded (and save succeeded, if requested)
    1 - an input or output failed validation
    2 - saving failed
"""

from __future__ import annotations

import argparse
import json


def _dest(name: str) -> str:
    return name.lower().replace(" ", "_")


def build_parser() -> argparse.ArgumentParser:
    from ..core.parameters import INPUT_SPECS

    parser = argparse.ArgumentParser(description="Compute valve gear sizing parameters")
    parser.add_argument("--config", type=str, default=None, help="YAML config file")
    parser.add_argument("--base-dir", type=str, default=None, help="Directory holding inputs/ and outputs/")
    parser.add_argument("--example", action="store_true", help="Start from the example values")
    parser.add_argument("--load", action="store_true", help="Load inputs from the inputs file")
    parser.add_argument("--save", action="store_true", help="Save inputs and outputs on success")
    parser.add_argument("--precision", type=int, default=None, help="Significant digits written to files")
    parser.add_argument(
        "--log-level", type=str, default=None, choices=["DEBUG", "INFO", "WARN", "ERROR"]
    )

    group = parser.add_argument_group("inputs (inches)")
    for letter, name, description, example in INPUT_SPECS:
        group.add_argument(
            f"-{letter}",
            f"--{_dest(name).replace('_', '-')}",
            dest=_dest(name),
            type=float,
            default=None,
            help=f"{description} Example: {example:g}",
        )
    return parser


def main(argv: list[str] | None = None) -> int:
    """Run a single calculation.

    Args:
        argv: Command-line arguments (uses sys.argv if None).

    Returns:
        Exit code (0 = success).
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    from ..core.config import default_config, load_config, merge_config
    from ..core.logging import set_log_level
    from ..core.parameters import INPUT_SPECS
    from ..core.session import Session

    config = load_config(args.config) if args.config else default_config()
    overrides: dict[str, dict[str, object]] = {"storage": {}, "logging": {}}
    if args.base_dir is not None:
        overrides["storage"]["base_dir"] = args.base_dir
    if args.precision is not None:
        overrides["storage"]["precision"] = args.precision
    if args.log_level is not None:
        overrides["logging"]["level"] = args.log_level
    config = merge_config(config, overrides)
    set_log_level(config.logging.level)

    session = Session(config=config)

    if args.example:
        session.model.load_examples()

    output: dict[str, object] = {}
    if args.load:
        load_result = session.load()
        output["load"] = {
            "status": load_result.status.value,
            "message": load_result.message,
            "unmatched": load_result.unmatched,
            "fallbacks": load_result.fallbacks,
        }

    manual = {
        name: getattr(args, _dest(name))
        for _, name, _, _ in INPUT_SPECS
        if getattr(args, _dest(name)) is not None
    }
    if manual:
        session.enter_inputs(manual)

    result = session.calculate()
    output.update(
        {
            "status": result.status.value,
            "message": result.message,
            "failed_index": result.failed_index,
            **session.model.to_dict(),
            "timings": result.diag.get("timings", {}),
        }
    )

    exit_code = 0 if result.is_successful else 1

    if args.save and result.is_successful:
        session.ensure_directories()
        save_result = session.save()
        output["save"] = {
            "status": save_result.status.value,
            "message": save_result.message,
            "written": [str(p) for p in save_result.written],
        }
        if not save_result.ok:
            exit_code = 2

    print(json.dumps(output, indent=2))

    return exit_code


if __name__ == "__main__":
    import sys

    sys.exit(main())
