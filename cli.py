import sys
from datetime import date
from pathlib import Path

from api.services.chart_renderer import render_chart
from api.services.readout import build_readout
from api.services.series import center_point, generate_series
from api.services.surfaces import PdfSurface, SvgSurface
from api.services.util.chart_defaults import DEF_HEIGHT, DEF_WIDTH, clamp_span


def main() -> None:
    birth = date.fromisoformat(sys.argv[1])
    out_path = Path(sys.argv[2])
    center = date.fromisoformat(sys.argv[3]) if len(sys.argv) > 3 else date.today()
    span = clamp_span(None)
    series = generate_series(birth, center, span, span)

    if out_path.suffix.lower() == ".pdf":
        surface = PdfSurface(DEF_WIDTH, DEF_HEIGHT)
        render_chart(surface, series, DEF_WIDTH, DEF_HEIGHT, span, span, center)
        out_path.write_bytes(surface.to_pdf())
    else:
        surface = SvgSurface(DEF_WIDTH, DEF_HEIGHT)
        render_chart(surface, series, DEF_WIDTH, DEF_HEIGHT, span, span, center)
        out_path.write_text(surface.to_svg(), encoding="utf-8")

    summary = build_readout(center_point(series, span))
    for v in summary["values"]:
        print(f"{v['label']:<13} {v['display']:>5}")
    print(f"Wrote chart → {out_path}")


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python cli.py BIRTH_DATE output.svg|output.pdf [CENTER_DATE]")
        sys.exit(1)
    main()
