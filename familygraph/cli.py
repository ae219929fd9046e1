from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import List, Optional

from pydantic import ValidationError

from .config import LayoutConfig
from .graph import build_graph
from .importers.family_tree_csv import read_people_csv, read_relationships_csv
from .importers.family_tree_json import load_family_tree_json
from .plotly_graph.plotly_render import build_figure, write_html


def main(argv: Optional[List[str]] = None) -> None:
    parser = argparse.ArgumentParser(
        prog="familygraph-render",
        description="Lay out a family tree export and write it as JSON and/or HTML.",
    )
    parser.add_argument("input", help="Family tree export (.json) or people file (.csv)")
    parser.add_argument("--relationships", help="Relationships .csv (required with a people .csv)")
    parser.add_argument("--html", help="Write an interactive Plotly page here")
    parser.add_argument("--json", dest="json_out", help="Write positioned nodes and edges as JSON here")
    parser.add_argument("--viewport-width", type=float, default=None, help="Override the layout viewport width")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )

    file_path = Path(args.input)
    if not file_path.exists():
        raise SystemExit(f"File not found: {file_path}")

    suffix = file_path.suffix.lower()
    try:
        if suffix == ".json":
            people, relationships, _warnings = load_family_tree_json(file_path)
        elif suffix == ".csv":
            if not args.relationships:
                raise SystemExit("--relationships is required when the input is a people .csv")
            people, _ = read_people_csv(file_path)
            relationships, _ = read_relationships_csv(args.relationships)
        else:
            raise SystemExit(f"Unsupported file format: {file_path.suffix}. Use .json or .csv")
    except (FileNotFoundError, ValueError) as e:
        raise SystemExit(f"Could not load {file_path}: {e}")

    try:
        config = LayoutConfig.from_env(viewport_width=args.viewport_width)
    except ValidationError as e:
        raise SystemExit(f"Invalid layout configuration: {e}")

    graph = build_graph(people, relationships, config)

    if args.json_out:
        Path(args.json_out).write_text(json.dumps(graph.model_dump(mode="json"), indent=2), encoding="utf-8")
    if args.html:
        write_html(build_figure(graph), args.html)

    print(
        f"Layout complete: {len(graph.nodes)} people, {len(graph.edges)} edges, "
        f"{graph.generations} generations"
    )


if __name__ == "__main__":
    main()
