from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional

import plotly.graph_objects as go

from ..models import EdgeKind
from ..schemas import EdgeOut, GraphOut
from .colors import build_node_colors
from .normalize import normalize_person

logger = logging.getLogger(__name__)


def _edge_segments(edges: List[EdgeOut]):
    """Flatten edge paths into plotly line arrays, None-separated."""
    xs: List[Optional[float]] = []
    ys: List[Optional[float]] = []
    cd: List[Optional[dict]] = []
    for e in edges:
        info = {"edge_id": e.id, "source": e.source, "target": e.target}
        for p in e.path:
            xs.append(p.x)
            ys.append(-p.y)  # canvas y grows downwards
            cd.append(info)
        xs.append(None)
        ys.append(None)
        cd.append(None)
    return xs, ys, cd


def build_figure(graph: GraphOut) -> go.Figure:
    if not graph.nodes:
        fig = go.Figure()
        fig.update_layout(title="No family data found")
        return fig

    parent_edges = [e for e in graph.edges if e.kind == EdgeKind.PARENT_CHILD]
    spouse_edges = [e for e in graph.edges if e.kind == EdgeKind.SPOUSE]

    edge_x, edge_y, edge_cd = _edge_segments(parent_edges)
    edge_trace = go.Scatter(
        x=edge_x,
        y=edge_y,
        mode="lines",
        hoverinfo="text",
        hovertext=["Parent-Child" if cd else "" for cd in edge_cd],
        line=dict(width=2, color="#555"),
        showlegend=False,
        customdata=edge_cd,
    )

    spouse_x, spouse_y, spouse_cd = _edge_segments(spouse_edges)
    spouse_trace = go.Scatter(
        x=spouse_x,
        y=spouse_y,
        mode="lines",
        hoverinfo="text",
        hovertext=["Spouse" if cd else "" for cd in spouse_cd],
        line=dict(width=2, color="#E91E63", dash="dot"),
        showlegend=False,
        customdata=spouse_cd,
    )

    node_x, node_y, texts, hover_texts = [], [], [], []
    for node in graph.nodes:
        node_x.append(node.position.x + node.width / 2.0)
        node_y.append(-(node.position.y + node.height / 2.0))
        short_label, hover_label = normalize_person(node.payload)
        texts.append(short_label.replace("\n", "<br>"))
        hover_texts.append(hover_label.replace("\n", "<br>"))

    node_trace = go.Scatter(
        x=node_x,
        y=node_y,
        mode="markers+text",
        text=texts,
        textposition="bottom center",
        hoverinfo="text",
        hovertext=hover_texts,
        marker=dict(size=28, symbol="square", color=build_node_colors(graph), line=dict(width=1, color="#333")),
        textfont=dict(size=10),
        showlegend=False,
        customdata=[node.id for node in graph.nodes],
    )

    pad = max(graph.width, graph.height, 1.0) * 0.05
    fig = go.Figure(data=[edge_trace, spouse_trace, node_trace])
    fig.update_layout(
        showlegend=False,
        hovermode="closest",
        dragmode="pan",
        autosize=True,
        margin=dict(l=20, r=20, t=20, b=20),
        plot_bgcolor="white",
        paper_bgcolor="white",
        xaxis=dict(
            showgrid=False,
            zeroline=False,
            showticklabels=False,
            range=[-pad, graph.width + pad],
        ),
        yaxis=dict(
            showgrid=False,
            zeroline=False,
            showticklabels=False,
            range=[-(graph.height + pad), pad],
        ),
    )
    return fig


def write_html(fig: go.Figure, out_path: str | Path) -> None:
    config = {"scrollZoom": True, "displayModeBar": True, "responsive": True}
    fig.write_html(str(out_path), include_plotlyjs="cdn", full_html=True, config=config)
    logger.info("Wrote figure to %s", out_path)
