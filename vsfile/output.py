"""JSON serialisation of scan results."""

from __future__ import annotations

import json
from dataclasses import asdict
from datetime import datetime, timezone
from pathlib import Path

from vsfile import __version__
from vsfile.config import ScanConfig, ScanError, ScanResult
from vsfile.graph.reference_graph import ReferenceGraph


def _children_of_type(graph: ReferenceGraph, node_id: str, prefix: str) -> list[str]:
    return [
        graph.graph.nodes[child]["path"]
        for child in graph.get_children(node_id)
        if child.startswith(prefix)
    ]


def build_result(
    config: ScanConfig,
    graph: ReferenceGraph,
    errors: list[ScanError],
    timings: dict[str, float],
    total_ms: float,
) -> ScanResult:
    """Build the ScanResult from the reference graph."""
    solutions = graph.get_solutions()
    projects = graph.get_projects()
    web_sites = graph.get_web_sites()
    sources = graph.get_sources()

    return ScanResult(
        version="1.0",
        metadata={
            "paths": list(config.paths),
            "recursive": config.recursive,
            "scanned_at": datetime.now(timezone.utc).isoformat(),
            "vsfile_version": __version__,
            "scan_duration_ms": round(total_ms, 1),
            "phase_timings": timings,
        },
        stats={
            "solutions": graph.count("solution"),
            "projects": graph.count("project"),
            "web_sites": graph.count("website"),
            "sources": graph.count("source"),
            "errors": len(errors),
        },
        solutions=[
            {
                "path": s["path"],
                "name": s.get("name", ""),
                "format_version": s.get("format_version", 0),
                "references": s.get("references", []),
                "projects": _children_of_type(graph, s["id"], "project:"),
                "web_sites": _children_of_type(graph, s["id"], "website:"),
                "sources": graph.sources_of(s["id"]),
            }
            for s in solutions
        ],
        projects=[
            {
                "path": p["path"],
                "name": p.get("name", ""),
                "language": p.get("language"),
                "sources": _children_of_type(graph, p["id"], "source:"),
            }
            for p in projects
        ],
        web_sites=[
            {
                "path": w["path"],
                "name": w.get("name", ""),
                "sources": _children_of_type(graph, w["id"], "source:"),
            }
            for w in web_sites
        ],
        sources=[
            {"path": s["path"], "language": s.get("language")}
            for s in sources
        ],
        errors=[asdict(e) for e in errors],
    )


def write_output(result: ScanResult, output_path: str) -> None:
    """Write the scan result to a JSON file."""
    data = asdict(result)
    Path(output_path).parent.mkdir(parents=True, exist_ok=True)
    with open(output_path, "w") as f:
        json.dump(data, f, indent=2, default=str)
