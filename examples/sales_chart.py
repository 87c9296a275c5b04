from __future__ import annotations

import argparse
from datetime import date
import logging
from pathlib import Path

from vectorchart import bar_chart, line_chart
from vectorchart.export import write_svg


SALES = [
    {"date": "2024-01-01", "sales": 120},
    {"date": "2024-01-02", "sales": 340},
    {"date": "2024-01-03", "sales": 210},
    {"date": "2024-01-04", "sales": 480},
    {"date": "2024-01-05", "sales": 390},
    {"date": "2024-01-06", "sales": 150},
]


def month_day(value: str) -> str:
    d = date.fromisoformat(value)
    return f"{d.month}/{d.day}"


def whole_number(value: str) -> str:
    return f"{float(value):.0f}"


def main() -> None:
    parser = argparse.ArgumentParser(description="Write sample line and bar charts as SVG files.")
    parser.add_argument("--out-dir", type=Path, default=Path("."))
    parser.add_argument("--width", type=float, default=900.0)
    parser.add_argument("--straight", action="store_true", help="draw straight line segments")
    parser.add_argument("--verbose", action="store_true")
    args = parser.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO)

    line = line_chart(
        "date",
        "sales",
        width=args.width,
        margin=55,
        x_formatter=month_day,
        y_formatter=whole_number,
        line={"use_curve": not args.straight},
        on_press_item=print,
    )
    bar = bar_chart(
        "date",
        "sales",
        width=args.width,
        margin=50,
        x_formatter=month_day,
        y_formatter=whole_number,
    )
    args.out_dir.mkdir(parents=True, exist_ok=True)
    print(write_svg(line.layout(SALES), args.out_dir / "sales_line.svg"))
    print(write_svg(bar.layout(SALES), args.out_dir / "sales_bar.svg"))


if __name__ == "__main__":
    main()
