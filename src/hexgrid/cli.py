from __future__ import annotations

import argparse
import sys

from hexgrid.core.grid import ByteGridModel
from hexgrid.core.io import load_bytes
from hexgrid.core.logs import configure_logging
from hexgrid.core.settings import Settings, SettingsError, clamp_row_width, read_settings


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="hexgrid", description="Simple hex viewer (Textual)")
    parser.add_argument("path", help="Path to the target file")
    parser.add_argument(
        "-w",
        "--width",
        type=int,
        default=None,
        help="Bytes per row (8-32, default: 16)",
    )
    parser.add_argument("--gui", action="store_true", default=None, help="Byte-selection mode")
    parser.add_argument(
        "--debug", action="store_true", default=None, help="Enable verbose debug logging"
    )
    parser.add_argument("--log-file", default=None, help="Also write log records to this file")
    parser.add_argument("--config", default=None, help="YAML settings file")
    return parser


def resolve_settings(args: argparse.Namespace) -> Settings:
    """Merge the optional settings file with command-line flags (flags win)."""
    base = read_settings(args.config) if args.config else Settings()
    return Settings(
        width=clamp_row_width(args.width if args.width is not None else base.width),
        gui=base.gui if args.gui is None else args.gui,
        debug=base.debug if args.debug is None else args.debug,
        log_file=args.log_file or base.log_file,
    )


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        settings = resolve_settings(args)
    except SettingsError as e:
        print(f"hexgrid: {e}", file=sys.stderr)
        return 2

    try:
        configure_logging(settings.debug, settings.log_file)
        data = load_bytes(args.path)
    except OSError as e:
        print(f"hexgrid: {e}", file=sys.stderr)
        return 2

    model = ByteGridModel(data, settings.width, name=args.path)

    if settings.gui:
        from hexgrid.window import HexgridWindowApp

        HexgridWindowApp(model).run()
    else:
        from hexgrid.app import HexgridApp

        HexgridApp(model).run()
    return 0


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
