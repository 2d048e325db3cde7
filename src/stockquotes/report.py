"""Plotly chart for a time-series envelope."""

from __future__ import annotations

from pathlib import Path

import pandas as pd
import plotly.express as px
import plotly.graph_objects as go

from stockquotes.domain.models import ResultEnvelope


def render_time_series_chart(
    envelope: ResultEnvelope,
    output_html_path: str | Path,
    title: str = "Intraday closes",
) -> Path:
    """Write an interactive line chart of the envelope's points."""
    output = Path(output_html_path)
    output.parent.mkdir(parents=True, exist_ok=True)
    points = [] if envelope.is_error or not isinstance(envelope.payload, list) else envelope.payload
    if not points:
        empty_title = envelope.error.message if envelope.is_error else f"{title} (no data)"
        figure = go.Figure(layout={"title": {"text": empty_title}})
        figure.write_html(str(output), include_plotlyjs="cdn")
        return output

    frame = pd.DataFrame([{"label": point.label, "value": point.value} for point in points])
    figure = px.line(frame, x="label", y="value", title=title, markers=True)
    figure.update_layout(xaxis_title="Time", yaxis_title="Close")
    figure.write_html(str(output), include_plotlyjs="cdn")
    return output
