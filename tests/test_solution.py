"""Tests for SolutionFile: loading, typed dispatch and reload behaviour."""

from __future__ import annotations

import os

import pytest

from conftest import SAMPLE_DIR, FakeFileSystem
from vsfile.config import Language
from vsfile.dotnet.solution import SolutionFile
from vsfile.errors import (
    InvalidArgumentError,
    MalformedHeaderError,
    MalformedProjectReferenceError,
    MalformedSolutionFileError,
    NotFoundError,
    WrongExtensionError,
)
from vsfile.system.line_reader import StringLineReader

HEADER = "Microsoft Visual Studio Solution File, Format Version {version}"

CSHARP_BLOCK = (
    'Project("{FAE04EC0-301F-11D3-BF4B-00C04F79EFBC}") = "App", "App\\App.csproj", '
    '"{11111111-2222-3333-4444-555555555555}"\nEndProject'
)

WEB_SITE_BLOCK = "\n".join([
    'Project("{E24C65DC-7377-472B-9ABA-BC803B73C61A}") = "WebSite", "http://localhost/WebSite", '
    '"{AAAAAAAA-BBBB-CCCC-DDDD-EEEEEEEEEEEE}"',
    "\tProjectSection(WebsiteProperties) = preProject",
    '\t\tSlnRelativePath = "WebSite"',
    "\tEndProjectSection",
    "EndProject",
])


def _write_sln(tmp_path, *blocks, version="12.00", name="Test.sln") -> str:
    path = tmp_path / name
    path.write_text("\n".join([HEADER.format(version=version), *blocks]) + "\n")
    return str(path)


class TestSolutionFileConstruction:
    @pytest.mark.parametrize("path", [None, "", " "])
    def test_blank_path_rejected(self, path):
        with pytest.raises(InvalidArgumentError):
            SolutionFile(path)

    def test_path_properties(self):
        fs = FakeFileSystem(cwd="/work")
        sln = SolutionFile("Product.sln", fs)
        assert sln.file_path == "Product.sln"
        assert sln.directory_path == "/work"
        assert sln.file_name == "Product.sln"
        assert sln.file_name_no_extension == "Product"
        assert sln.file_extension == ".sln"

    def test_collections_empty_before_load(self):
        sln = SolutionFile(os.path.join(SAMPLE_DIR, "Sample.sln"))
        assert sln.format_version == 0
        assert sln.basic_project_files == ()
        assert sln.csharp_project_files == ()
        assert sln.fsharp_project_files == ()
        assert sln.web_site_directories == ()
        assert sln.references == ()


class TestSolutionFileLoad:
    def test_missing_file(self, tmp_path):
        sln = SolutionFile(str(tmp_path / "Missing.sln"))
        with pytest.raises(NotFoundError):
            sln.load()

    def test_missing_file_is_file_not_found(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            SolutionFile(str(tmp_path / "Missing.sln")).load()

    def test_wrong_extension(self, tmp_path):
        path = tmp_path / "Solution.txt"
        path.write_text(HEADER.format(version="12.00"))
        with pytest.raises(WrongExtensionError):
            SolutionFile(str(path)).load()

    def test_extension_check_is_case_insensitive(self, tmp_path):
        path = _write_sln(tmp_path, CSHARP_BLOCK, name="Upper.SLN")
        sln = SolutionFile(path)
        sln.load()
        assert len(sln.csharp_project_files) == 1

    def test_sample_format_version(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()
        assert sln.format_version == 12

    def test_sample_typed_collections(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()

        assert [p.project_name for p in sln.basic_project_files] == ["BasicProject"]
        assert [p.project_name for p in sln.csharp_project_files] == ["CSharpProject"]
        assert [p.project_name for p in sln.fsharp_project_files] == ["FSharpProject"]
        assert [w.name for w in sln.web_site_directories] == ["WebSite"]

    def test_sample_languages(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()
        assert sln.basic_project_files[0].language == Language.BASIC
        assert sln.csharp_project_files[0].language == Language.CSHARP
        assert sln.fsharp_project_files[0].language == Language.FSHARP

    def test_sample_paths_joined_to_solution_directory(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()

        assert sln.csharp_project_files[0].file_path == os.path.join(
            SAMPLE_DIR, "CSharpProject", "CSharpProject.csproj"
        )
        assert sln.web_site_directories[0].directory_path == os.path.join(SAMPLE_DIR, "WebSite")

    def test_unknown_project_types_dropped(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()

        names = {r.name for r in sln.references}
        assert "Solution Items" in names
        assert "Setup" in names
        assert len(sln.references) == 6
        assert len(sln.project_files) + len(sln.web_site_directories) == 4

    def test_unknown_type_does_not_change_counts(self, tmp_path):
        unknown = (
            'Project("{00D1A9C2-B5F0-4AF3-8072-F6C62B433612}") = "Db", "Db\\Db.sqlproj", '
            '"{22222222-2222-3333-4444-555555555555}"\nEndProject'
        )
        with_unknown = SolutionFile(_write_sln(tmp_path, CSHARP_BLOCK, unknown, name="A.sln"))
        without = SolutionFile(_write_sln(tmp_path, CSHARP_BLOCK, name="B.sln"))
        with_unknown.load()
        without.load()

        assert len(with_unknown.csharp_project_files) == len(without.csharp_project_files) == 1
        assert with_unknown.web_site_directories == without.web_site_directories == ()

    def test_csharp_path_uses_plain_join(self, tmp_path):
        sln = SolutionFile(_write_sln(tmp_path, CSHARP_BLOCK))
        sln.load()
        project = sln.csharp_project_files[0]
        assert project.file_path == os.path.join(str(tmp_path), "App", "App.csproj")
        assert project.project_name == "App"

    def test_lowercase_type_guid_dispatched(self, tmp_path):
        block = CSHARP_BLOCK.replace("FAE04EC0-301F-11D3-BF4B-00C04F79EFBC", "fae04ec0-301f-11d3-bf4b-00c04f79efbc")
        sln = SolutionFile(_write_sln(tmp_path, block))
        sln.load()
        assert len(sln.csharp_project_files) == 1

    def test_web_site_corrected_at_version_12(self, tmp_path):
        sln = SolutionFile(_write_sln(tmp_path, WEB_SITE_BLOCK, version="12.00"))
        sln.load()
        assert sln.web_site_directories[0].directory_path == os.path.join(str(tmp_path), "WebSite")

    def test_web_site_literal_below_version_12(self, tmp_path):
        sln = SolutionFile(_write_sln(tmp_path, WEB_SITE_BLOCK, version="11.00"))
        sln.load()
        assert sln.format_version == 11
        assert sln.web_site_directories[0].directory_path == os.path.join(
            str(tmp_path), "http://localhost/WebSite"
        )

    def test_crlf_file(self, tmp_path):
        path = tmp_path / "Windows.sln"
        text = "\r\n".join([HEADER.format(version="12.00"), CSHARP_BLOCK.replace("\n", "\r\n")])
        path.write_bytes(text.encode("utf-8-sig") + b"\r\n")

        sln = SolutionFile(str(path))
        sln.load()
        assert sln.format_version == 12
        assert len(sln.csharp_project_files) == 1

    def test_cp1252_solution(self, tmp_path):
        path = tmp_path / "Legacy.sln"
        text = "\n".join([HEADER.format(version="11.00"), CSHARP_BLOCK.replace('"App"', '"Café"')])
        path.write_bytes(text.encode("cp1252") + b"\n")

        sln = SolutionFile(str(path))
        sln.load()
        assert sln.format_version == 11
        assert sln.csharp_project_files[0].project_name == "Caf\ufffd"

    def test_header_only_solution(self, tmp_path):
        sln = SolutionFile(_write_sln(tmp_path))
        sln.load()
        assert sln.format_version == 12
        assert sln.references == ()

    def test_missing_header(self, tmp_path):
        path = tmp_path / "NoHeader.sln"
        path.write_text(CSHARP_BLOCK)
        with pytest.raises(MalformedSolutionFileError):
            SolutionFile(str(path)).load()

    def test_bad_header_version(self, tmp_path):
        with pytest.raises(MalformedHeaderError):
            SolutionFile(_write_sln(tmp_path, version="X.Y")).load()

    def test_unterminated_project(self, tmp_path):
        block = CSHARP_BLOCK.replace("\nEndProject", "")
        with pytest.raises(MalformedProjectReferenceError):
            SolutionFile(_write_sln(tmp_path, block)).load()

    def test_end_project_without_project(self, tmp_path):
        with pytest.raises(MalformedProjectReferenceError):
            SolutionFile(_write_sln(tmp_path, "EndProject")).load()


class TestSolutionFileReload:
    def test_load_twice_is_idempotent(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()
        first = (
            sln.basic_project_files,
            sln.csharp_project_files,
            sln.fsharp_project_files,
            sln.web_site_directories,
            sln.references,
        )
        sln.load()
        second = (
            sln.basic_project_files,
            sln.csharp_project_files,
            sln.fsharp_project_files,
            sln.web_site_directories,
            sln.references,
        )
        assert first == second

    def test_reload_replaces_contents(self, tmp_path):
        path = _write_sln(tmp_path, CSHARP_BLOCK, WEB_SITE_BLOCK)
        sln = SolutionFile(path)
        sln.load()
        assert len(sln.web_site_directories) == 1

        _write_sln(tmp_path, CSHARP_BLOCK)
        sln.load()
        assert len(sln.csharp_project_files) == 1
        assert sln.web_site_directories == ()

    def test_failed_reload_leaves_collections_empty(self, tmp_path):
        path = _write_sln(tmp_path, CSHARP_BLOCK)
        sln = SolutionFile(path)
        sln.load()
        assert len(sln.csharp_project_files) == 1

        # Second block is never closed
        _write_sln(tmp_path, CSHARP_BLOCK, CSHARP_BLOCK.replace("\nEndProject", ""))
        with pytest.raises(MalformedProjectReferenceError):
            sln.load()

        assert sln.format_version == 0
        assert sln.csharp_project_files == ()
        assert sln.references == ()

    def test_collections_are_read_only(self, sample_sln):
        sln = SolutionFile(sample_sln)
        sln.load()
        assert isinstance(sln.csharp_project_files, tuple)
        assert isinstance(sln.web_site_directories, tuple)


class TestSolutionFileWithFakes:
    def test_reads_through_reader_factory(self):
        text = "\n".join([HEADER.format(version="12.00"), CSHARP_BLOCK])
        fs = FakeFileSystem(files={"Solution.sln"}, cwd="")
        opened = []

        def factory(path):
            opened.append(path)
            return StringLineReader(text)

        sln = SolutionFile("Solution.sln", fs, factory)
        sln.load()

        assert opened == ["Solution.sln"]
        assert sln.csharp_project_files[0].file_path == os.path.join("", "App", "App.csproj")

    def test_reader_closed_on_format_error(self):
        reader = StringLineReader("not a solution\nat all\nProject")
        fs = FakeFileSystem(files={"Bad.sln"})

        sln = SolutionFile("Bad.sln", fs, lambda path: reader)
        with pytest.raises(MalformedSolutionFileError):
            sln.load()
        assert not reader.has_more()

    def test_missing_file_checked_before_reading(self):
        fs = FakeFileSystem()
        opened = []
        sln = SolutionFile("Gone.sln", fs, opened.append)
        with pytest.raises(NotFoundError):
            sln.load()
        assert opened == []
