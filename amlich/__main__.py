import argparse
import logging
import sys

import orjson

from .service import CONVERSION_TYPES, date_conversion_tool


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="amlich",
        description="Convert between Solar (Dương lịch) and Lunar (Âm lịch) dates.",
    )
    parser.add_argument("conversion_type", choices=CONVERSION_TYPES)
    parser.add_argument("date", help="date in YYYY-MM-DD")
    parser.add_argument(
        "--leap-month", action="store_true", help="the lunar month is a leap month (l2s)"
    )
    parser.add_argument("--time-zone", type=float, help="offset from UTC in hours")
    parser.add_argument("--log-level", default="WARNING")
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    kwargs = {"leap_month": args.leap_month}
    if args.time_zone is not None:
        kwargs["time_zone"] = args.time_zone
    response = date_conversion_tool(args.conversion_type, args.date, **kwargs)
    sys.stdout.buffer.write(orjson.dumps(response, option=orjson.OPT_INDENT_2))
    sys.stdout.buffer.write(b"\n")
    return 1 if "error" in response else 0


if __name__ == "__main__":
    sys.exit(main())
