"""In-memory file reference graph backed by networkx.DiGraph."""

from __future__ import annotations

import networkx as nx

from vsfile.dotnet.project import ProjectFile
from vsfile.dotnet.solution import SolutionFile
from vsfile.dotnet.source import SourceFile
from vsfile.dotnet.website import WebSiteDirectory


class ReferenceGraph:
    """Solutions REFERENCE projects and web sites, which COMPILE source files."""

    def __init__(self) -> None:
        self.graph = nx.DiGraph()

    # --- Node addition ---

    def add_solution(self, solution: SolutionFile) -> str:
        node_id = f"solution:{solution.file_path}"
        self.graph.add_node(
            node_id,
            node_type="solution",
            path=solution.file_path,
            name=solution.file_name_no_extension,
            format_version=solution.format_version,
            references=[
                {
                    "name": r.name,
                    "relative_path": r.relative_path,
                    "type_id": r.type_id,
                    "unique_id": r.unique_id,
                }
                for r in solution.references
            ],
        )
        for project in solution.project_files:
            self.graph.add_edge(node_id, self.add_project(project), edge_type="REFERENCES")
        for web_site in solution.web_site_directories:
            self.graph.add_edge(node_id, self.add_web_site(web_site), edge_type="REFERENCES")
        return node_id

    def add_project(self, project: ProjectFile) -> str:
        node_id = f"project:{project.file_path}"
        self.graph.add_node(
            node_id,
            node_type="project",
            path=project.file_path,
            name=project.project_name,
            language=project.language.value,
        )
        for source in project.source_files:
            self.graph.add_edge(node_id, self.add_source(source), edge_type="COMPILES")
        return node_id

    def add_web_site(self, web_site: WebSiteDirectory) -> str:
        node_id = f"website:{web_site.directory_path}"
        self.graph.add_node(
            node_id,
            node_type="website",
            path=web_site.directory_path,
            name=web_site.name,
        )
        for source in web_site.source_files:
            self.graph.add_edge(node_id, self.add_source(source), edge_type="COMPILES")
        return node_id

    def add_source(self, source: SourceFile) -> str:
        node_id = f"source:{source.file_path}"
        self.graph.add_node(
            node_id,
            node_type="source",
            path=source.file_path,
            name=source.file_name,
            language=source.language.value,
        )
        return node_id

    # --- Queries ---

    def _nodes_of_type(self, node_type: str) -> list[dict]:
        return [
            {"id": nid, **data}
            for nid, data in self.graph.nodes(data=True)
            if data.get("node_type") == node_type
        ]

    def get_solutions(self) -> list[dict]:
        return self._nodes_of_type("solution")

    def get_projects(self) -> list[dict]:
        return self._nodes_of_type("project")

    def get_web_sites(self) -> list[dict]:
        return self._nodes_of_type("website")

    def get_sources(self) -> list[dict]:
        return self._nodes_of_type("source")

    def get_children(self, node_id: str) -> list[str]:
        """Return the ids of nodes directly referenced or compiled by a node."""
        return sorted(self.graph.successors(node_id))

    def sources_of(self, node_id: str) -> list[str]:
        """Return the paths of every source file reachable from a node."""
        return sorted(
            self.graph.nodes[nid]["path"]
            for nid in nx.descendants(self.graph, node_id)
            if self.graph.nodes[nid].get("node_type") == "source"
        )

    def count(self, node_type: str) -> int:
        return sum(1 for _, d in self.graph.nodes(data=True) if d.get("node_type") == node_type)
