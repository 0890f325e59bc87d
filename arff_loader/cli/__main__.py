from __future__ import annotations

import argparse
import sys
from pathlib import Path

from arff_loader.arff.errors import ArffError
from arff_loader.arff.reader import load
from arff_loader.arff.tokens import quoted
from arff_loader.config.loader import DEFAULT_CONFIG_PATH, ConfigError, LoaderConfig, load_config
from arff_loader.logging.error_log import ErrorLogBuffer
from arff_loader.logging.init import log_summary, set_debug, setup_logging
from arff_loader.models.headers import Headers
from arff_loader.models.row import Row
from arff_loader.models.types import Nominal, RepresentationKind
from arff_loader.services.orchestrator import ProcessingError, load_all, resolve_files
from arff_loader.services.summary import render_summary_line

"""CLI entrypoint.

Flow:
- Load config (``--config`` or config/arff_loader.yml; optional when files are
  given on the command line)
- Load every file as a Batch (or a Stream with ``--stream``)
- Log one INFO line per file, one SUMMARY line per run, write failures to the
  JSON Lines error log
- Exit 0 when all files loaded, 2 when some failed, 1 on fatal errors
"""

EXIT_SUCCESS_ALL = 0
EXIT_PARTIAL_FAILURE = 2
EXIT_FATAL = 1


def _parse_args(argv: list[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(prog="arff-loader", description="Load and validate ARFF files")
    p.add_argument("files", nargs="*", help="ARFF files to load (overrides config 'files')")
    p.add_argument("--config", type=Path, default=None, help=f"Config file (default: {DEFAULT_CONFIG_PATH})")
    p.add_argument("--stream", action="store_true", help="Stream rows instead of loading a batch")
    p.add_argument("--debug", action="store_true", help="Enable debug logging")
    p.add_argument("--inspect-data", action="store_true", help="Print headers & first rows then exit")
    return p.parse_args(argv)


def _resolve_config(args: argparse.Namespace) -> LoaderConfig:
    if args.config is not None:
        return load_config(args.config)
    if DEFAULT_CONFIG_PATH.exists():
        return load_config(DEFAULT_CONFIG_PATH)
    if args.files:
        # 設定ファイルなしでもコマンドライン指定のファイルだけで動かせる
        return LoaderConfig(files=list(args.files))
    raise ConfigError(f"config file not found: {DEFAULT_CONFIG_PATH}")


def _display(value: str) -> str:
    try:
        return quoted(value)
    except ValueError:
        return value


def _format_attribute(name: str, attribute_type: object) -> str:
    if isinstance(attribute_type, Nominal):
        type_text = "{" + ",".join(_display(c) for c in attribute_type.classes) + "}"
    else:
        type_text = str(attribute_type)
    return f"@attribute {_display(name)} {type_text}"


def format_row(headers: Headers, row: Row) -> str:
    """Render a row as an ARFF data line (labels for nominal values, ? if missing)."""
    parts = []
    for header, value in zip(headers, row.values(RepresentationKind.LABEL)):
        if value is None:
            parts.append("?")
        elif isinstance(header.type, Nominal):
            parts.append(_display(value))
        else:
            parts.append(repr(value))
    return ",".join(parts)


def _inspect_data(paths: list[Path], cfg: LoaderConfig) -> int:
    failed = 0
    for path in paths:
        print(f"FILE: {path}")
        try:
            with load(path, batch=False, encoding=cfg.encoding) as stream:
                print(f"  @relation {_display(stream.relation_name)}")
                for header in stream.headers:
                    print(f"  {_format_attribute(header.name, header.type)}")
                for i, row in enumerate(stream.rows()):
                    if i >= cfg.preview_rows:
                        break
                    print(f"    {format_row(stream.headers, row)}")
        except (ArffError, OSError, UnicodeDecodeError) as e:
            print(f"  error: {e}")
            failed += 1
    return EXIT_PARTIAL_FAILURE if failed else EXIT_SUCCESS_ALL


def main(argv: list[str] | None = None) -> int:
    logger = setup_logging()

    # None のときだけ sys.argv を読む ([] はテストからの明示指定)
    if argv is None:
        argv = sys.argv[1:]
    args = _parse_args(argv)

    if args.debug:
        set_debug(True)
        logger.debug("debug mode enabled")

    try:
        cfg = _resolve_config(args)
    except ConfigError as e:
        logger.error(f"config: {e}")
        return EXIT_FATAL

    try:
        paths = resolve_files(args.files, cfg.files)
    except ProcessingError as e:
        logger.error(f"{e}")
        return EXIT_FATAL

    if args.inspect_data:
        return _inspect_data(paths, cfg)

    batch = cfg.batch and not args.stream
    logger.info(f"Loading {len(paths)} file(s) mode={'batch' if batch else 'stream'}")

    result = load_all(paths, batch=batch, encoding=cfg.encoding, error_log=ErrorLogBuffer())

    summary_line = render_summary_line(result.total_files, result)
    # log_summary が "SUMMARY " を付けるので取り除く
    log_summary(summary_line[len("SUMMARY "):])

    if result.failed_files > 0:
        return EXIT_PARTIAL_FAILURE
    return EXIT_SUCCESS_ALL


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
