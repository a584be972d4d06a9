import datetime
import html
import json
import math
from typing import Optional, Sequence

from .comparison import ComparisonRow
from .metrics.registry import Metric


def format_score(score: Optional[float], precision: int = 4, placeholder: str = "-") -> str:
    """Render one coefficient; ``None`` becomes the placeholder, NaN and inf print as-is."""
    if score is None:
        return placeholder
    if math.isnan(score) or math.isinf(score):
        return str(score)
    return f"{score:.{precision}f}"


def format_table(
    rows: Sequence[ComparisonRow],
    metrics: Sequence[Metric],
    precision: int = 4,
    placeholder: str = "-",
) -> str:
    """
    Renders the comparison rows as a fixed-width console table.
    """
    name_width = max([len("Name")] + [len(row.name) for row in rows])
    column_width = max([8, precision + 4] + [len(metric.label) for metric in metrics])

    header = "Name".ljust(name_width) + "".join(
        " " + metric.label.rjust(column_width) for metric in metrics
    )
    lines = [header]
    for row in rows:
        cells = [
            format_score(row.scores.get(metric.name), precision, placeholder).rjust(column_width)
            for metric in metrics
        ]
        lines.append(row.name.ljust(name_width) + "".join(" " + cell for cell in cells))
    return "\n".join(lines)


def _json_score(score: Optional[float]) -> Optional[object]:
    if score is None:
        return None
    if math.isnan(score) or math.isinf(score):
        return str(score)
    return score


def to_json(
    truth_name: str,
    rows: Sequence[ComparisonRow],
    max_kendall: Optional[float] = None,
) -> str:
    """
    Serializes the comparison as JSON. Not-applicable scores are ``null`` and
    degenerate ones are the strings ``"nan"``/``"inf"``.
    """
    payload = {
        "truth": truth_name,
        "max_kendall": _json_score(max_kendall),
        "candidates": [
            {"name": row.name, "scores": {k: _json_score(v) for k, v in row.scores.items()}}
            for row in rows
        ],
    }
    return json.dumps(payload, indent=2)


def generate_html_report(
    truth_name: str,
    rows: Sequence[ComparisonRow],
    metrics: Sequence[Metric],
    output_path: str,
    precision: int = 4,
    placeholder: str = "-",
    max_kendall: Optional[float] = None,
):
    """
    Generates an HTML report for the comparison.
    """
    now = datetime.datetime.now().strftime("%Y-%m-%d %H:%M:%S")

    html_content = f"""
    <html>
    <head>
        <title>Agreement Report for "{html.escape(truth_name)}"</title>
        <style>
            body {{ font-family: sans-serif; }}
            h1, h2 {{ color: #333; }}
            table {{ border-collapse: collapse; width: 100%; }}
            th, td {{ border: 1px solid #ddd; padding: 8px; text-align: left; }}
            th {{ background-color: #f2f2f2; }}
        </style>
    </head>
    <body>
        <h1>Agreement Report</h1>
        <p><strong>Truth:</strong> {html.escape(truth_name)}</p>
        <p><strong>Generated on:</strong> {now}</p>
    """

    if max_kendall is not None:
        html_content += (
            f"<p><strong>Max Kendall tau-b:</strong> {format_score(max_kendall, precision)}</p>"
        )

    html_content += """
        <h2>Metrics</h2>
        <table>
    """
    html_content += "<tr><th>Name</th>"
    for metric in metrics:
        html_content += f'<th title="{html.escape(metric.description)}">{metric.label}</th>'
    html_content += "</tr>"

    for row in rows:
        html_content += f"<tr><td>{html.escape(row.name)}</td>"
        for metric in metrics:
            score = format_score(row.scores.get(metric.name), precision, placeholder)
            html_content += f"<td>{html.escape(score)}</td>"
        html_content += "</tr>"

    html_content += """
        </table>
    </body>
    </html>
    """

    with open(output_path, "w", encoding="utf-8") as f:
        f.write(html_content)
