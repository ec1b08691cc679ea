"""Command line interface for decimals."""

from __future__ import annotations

import argparse
from importlib import metadata
import logging
import sys
from typing import Callable, Iterable, Optional

import yaml

from decimals.config import ConfigError, DecimalsConfig, load_config
from decimals.formatting import format_float, format_int, format_thousands
from decimals.logging_utils import configure_logging
from decimals.rounding import round_float, round_int

logger = logging.getLogger(__name__)


def _get_version() -> str:
    """Return the installed package version, or a placeholder when unavailable."""
    try:
        return metadata.version("decimals")
    except metadata.PackageNotFoundError:
        return "0.0.0"


def _add_precision(parser: argparse.ArgumentParser, help_text: str) -> None:
    parser.add_argument(
        "-p",
        "--precision",
        type=int,
        default=None,
        help=help_text,
    )


def _add_sep(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--sep",
        default=None,
        help="3桁区切り文字（未指定なら設定の format.thousands_sep、既定は ','）",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="decimals",
        description="Round and format base ten numbers.",
    )
    parser.add_argument(
        "-c",
        "--config",
        help="Optional path to a configuration file.",
        default=None,
    )
    parser.add_argument(
        "--print-config",
        action="store_true",
        help="YAML 設定を読み込み、正規化した内容を標準出力へ出力。",
    )
    parser.add_argument(
        "--log-level",
        default=None,
        help="ログレベル（DEBUG/INFO/WARNING/ERROR）。未指定なら設定または DECIMALS_LOG_LEVEL",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"%(prog)s {_get_version()}",
    )
    subparsers = parser.add_subparsers(dest="command")

    round_int_parser = subparsers.add_parser("round-int", help="整数を 10 のべき乗へ四捨五入")
    round_int_parser.add_argument("values", nargs="+", type=int, help="丸める整数")
    _add_precision(round_int_parser, "負の値で丸め先の桁（-1 で十の位）。未指定なら format.int_precision")

    round_float_parser = subparsers.add_parser("round-float", help="小数を指定桁へ四捨五入")
    round_float_parser.add_argument("values", nargs="+", type=float, help="丸める数値")
    _add_precision(round_float_parser, "小数桁数（負なら 10 のべき乗）。未指定なら format.float_precision")

    thousands_parser = subparsers.add_parser("format-thousands", help="整数を3桁区切りで表示（丸めなし）")
    thousands_parser.add_argument("values", nargs="+", type=int, help="表示する整数")
    _add_sep(thousands_parser)

    format_int_parser = subparsers.add_parser("format-int", help="整数を丸めて3桁区切りで表示")
    format_int_parser.add_argument("values", nargs="+", type=int, help="表示する整数")
    _add_precision(format_int_parser, "負の値で丸め先の桁。未指定なら format.int_precision")
    _add_sep(format_int_parser)

    format_float_parser = subparsers.add_parser("format-float", help="小数を丸めて3桁区切りで表示")
    format_float_parser.add_argument("values", nargs="+", type=float, help="表示する数値")
    _add_precision(format_float_parser, "小数桁数。未指定なら format.float_precision")
    _add_sep(format_float_parser)
    format_float_parser.add_argument(
        "--point",
        default=None,
        help="小数点文字（未指定なら設定の format.decimal_point、既定は '.'）",
    )
    return parser


def _build_formatter(args: argparse.Namespace, config: DecimalsConfig) -> Callable[[object], str]:
    fmt = config.format
    int_precision = args.precision if getattr(args, "precision", None) is not None else fmt.int_precision
    float_precision = args.precision if getattr(args, "precision", None) is not None else fmt.float_precision
    sep = args.sep if getattr(args, "sep", None) is not None else fmt.thousands_sep

    if args.command == "round-int":
        return lambda v: str(round_int(v, int_precision))
    if args.command == "round-float":
        return lambda v: repr(round_float(v, float_precision))
    if args.command == "format-thousands":
        return lambda v: format_thousands(v, sep=sep)
    if args.command == "format-int":
        return lambda v: format_int(v, int_precision, sep=sep)
    point = args.point if args.point is not None else fmt.decimal_point
    return lambda v: format_float(v, float_precision, sep=sep, point=point)


def main(argv: Optional[Iterable[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    config = DecimalsConfig()
    if args.config:
        try:
            config = load_config(args.config)
        except ConfigError as exc:
            parser.exit(status=1, message=f"config error: {exc}\n")

    configure_logging(args.log_level or config.logging.level)

    if args.print_config:
        if not args.config:
            parser.error("--print-config を使うには --config で YAML を指定してください")
        yaml.safe_dump(config.to_dict(), stream=sys.stdout, sort_keys=True)
        return 0

    if not args.command:
        parser.print_help()
        return 0

    render = _build_formatter(args, config)
    for value in args.values:
        try:
            line = render(value)
        except (TypeError, ValueError) as exc:
            parser.exit(status=1, message=f"error: {value}: {exc}\n")
        logger.debug("%s %r -> %s", args.command, value, line)
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
