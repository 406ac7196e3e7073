"""Sequential scan orchestrator with timing."""

from __future__ import annotations

import logging
import time

from vsfile.config import ScanConfig, ScanError, ScanResult
from vsfile.dotnet.project import ProjectFile
from vsfile.dotnet.website import WebSiteDirectory
from vsfile.errors import VSFileError
from vsfile.files import VisualStudioFiles
from vsfile.graph.reference_graph import ReferenceGraph
from vsfile.output import build_result

logger = logging.getLogger(__name__)


_PHASE_LABELS = {
    "discover": "Finding files",
    "solutions": "Reading solution files",
    "projects": "Reading project files",
    "websites": "Scanning web site directories",
    "sources": "Checking source files",
    "graph": "Building reference graph",
}


class _Scan:
    """State shared by the phases of one scan."""

    def __init__(self, config: ScanConfig) -> None:
        self.config = config
        self.files: VisualStudioFiles | None = None
        self.loaded_solutions = []
        self.projects: list[ProjectFile] = []
        self.web_sites: list[WebSiteDirectory] = []
        self.errors: list[ScanError] = []
        self.graph = ReferenceGraph()

    def try_load(self, item, path: str) -> bool:
        """Load an item; with skip_invalid, record failures instead of raising."""
        try:
            item.load()
        except VSFileError as e:
            if not self.config.skip_invalid:
                raise
            logger.warning(f"Skipping {path}: {e}")
            self.errors.append(ScanError(path=path, error=type(e).__name__, message=str(e)))
            return False
        return True

    def discover(self) -> None:
        self.files = VisualStudioFiles(self.config.paths, recursive=self.config.recursive)

    def load_solutions(self) -> None:
        for solution in self.files.solution_files:
            if self.try_load(solution, solution.file_path):
                self.loaded_solutions.append(solution)

    def load_projects(self) -> None:
        seen: set[str] = set()
        candidates = list(self.files.project_files)
        for solution in self.loaded_solutions:
            candidates.extend(solution.project_files)

        for project in candidates:
            if project.file_path in seen:
                continue
            seen.add(project.file_path)
            self.projects.append(project)
            self.try_load(project, project.file_path)

    def load_web_sites(self) -> None:
        for solution in self.loaded_solutions:
            for web_site in solution.web_site_directories:
                self.web_sites.append(web_site)
                self.try_load(web_site, web_site.directory_path)

    def check_sources(self) -> None:
        for source in self.files.source_files:
            self.try_load(source, source.file_path)

    def build_graph(self) -> None:
        for solution in self.loaded_solutions:
            self.graph.add_solution(solution)
        for project in self.files.project_files:
            self.graph.add_project(project)
        for source in self.files.source_files:
            self.graph.add_source(source)


def run_scan(config: ScanConfig, progress_callback=None) -> ScanResult:
    """Resolve every file named in the config down to its source files.

    Args:
        config: Scan configuration.
        progress_callback: Optional callable(phase_name, label) invoked
            when each phase starts. Used by the CLI for Rich progress.
    """
    scan = _Scan(config)
    timings: dict[str, float] = {}
    total_start = time.monotonic()

    phases = [
        ("discover", scan.discover),
        ("solutions", scan.load_solutions),
        ("projects", scan.load_projects),
        ("websites", scan.load_web_sites),
        ("sources", scan.check_sources),
        ("graph", scan.build_graph),
    ]

    for name, phase_fn in phases:
        if progress_callback:
            progress_callback(name, _PHASE_LABELS.get(name, name))
        start = time.monotonic()
        phase_fn()
        timings[name] = time.monotonic() - start

    total_ms = (time.monotonic() - total_start) * 1000

    return build_result(config, scan.graph, scan.errors, timings, total_ms)
