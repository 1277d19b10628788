"""Unit tests for configuration utilities.

These tests verify FindOptions path resolution and the behavior of
find_project_root for discovering the project root directory from marker
files.
"""

from __future__ import annotations

import os
from pathlib import Path

import pytest

from tierfind.config import FindOptions, ResolvedOptions, find_project_root
from tierfind.core.exceptions import ConfigurationError


@pytest.mark.core
@pytest.mark.tra("Config.FindOptions")
@pytest.mark.tier(0)
class TestFindOptions:
    """Tests for FindOptions.resolve()."""

    def test_defaults_to_cwd_and_its_root(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """cwd defaults to the working directory, stop_dir to its anchor."""
        monkeypatch.chdir(tmp_path)

        resolved = FindOptions().resolve()

        assert resolved.cwd == Path(os.path.normpath(Path.cwd()))
        assert resolved.stop_dir == Path(resolved.cwd.anchor)

    def test_returns_resolved_options(self, tmp_path: Path) -> None:
        """resolve() gives a ResolvedOptions with absolute paths."""
        resolved = FindOptions(cwd=tmp_path, stop_dir=tmp_path).resolve()

        assert isinstance(resolved, ResolvedOptions)
        assert resolved.cwd.is_absolute()
        assert resolved.stop_dir.is_absolute()

    def test_relative_cwd_uses_working_directory(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """A relative cwd is joined onto the working directory."""
        monkeypatch.chdir(tmp_path)

        resolved = FindOptions(cwd="sub/dir").resolve()

        assert resolved.cwd == Path.cwd() / "sub" / "dir"

    def test_relative_stop_dir_uses_cwd(self, tmp_path: Path) -> None:
        """A relative stop_dir is resolved against cwd, not the process cwd."""
        resolved = FindOptions(cwd=tmp_path / "a" / "b", stop_dir="..").resolve()

        assert resolved.stop_dir == tmp_path / "a"

    def test_trailing_separator_and_dots_normalized(self, tmp_path: Path) -> None:
        """'.', '..' and trailing separators are collapsed."""
        resolved = FindOptions(
            cwd=f"{tmp_path}{os.sep}a{os.sep}.{os.sep}b{os.sep}..{os.sep}",
        ).resolve()

        assert resolved.cwd == tmp_path / "a"

    def test_home_is_expanded(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """'~' refers to the user's home directory."""
        monkeypatch.setenv("HOME", str(tmp_path))
        monkeypatch.setenv("USERPROFILE", str(tmp_path))

        resolved = FindOptions(cwd="~/project").resolve()

        assert resolved.cwd == tmp_path / "project"

    def test_symlinks_are_not_resolved(self, tmp_path: Path) -> None:
        """Only the textual form is normalized."""
        target = tmp_path / "real"
        target.mkdir()
        link = tmp_path / "link"
        link.symlink_to(target, target_is_directory=True)

        assert FindOptions(cwd=link).resolve().cwd == link

    def test_nul_byte_raises(self) -> None:
        """Malformed paths raise ConfigurationError."""
        with pytest.raises(ConfigurationError, match="NUL"):
            FindOptions(cwd="bad\x00path").resolve()

    def test_non_path_raises(self) -> None:
        """Values that are not paths raise ConfigurationError."""
        with pytest.raises(ConfigurationError) as exc_info:
            FindOptions(cwd=42).resolve()  # type: ignore[arg-type]

        assert isinstance(exc_info.value.cause, TypeError)


@pytest.mark.core
@pytest.mark.tra("Config.ProjectRoot")
@pytest.mark.tier(1)
class TestFindProjectRoot:
    """Tests for find_project_root utility."""

    def test_find_project_root_with_tierfind_marker(self, tmp_path: Path) -> None:
        """Should find directory containing .tierfind marker."""
        # Arrange
        project_root = tmp_path
        (project_root / ".tierfind").touch()
        subdir = project_root / "subdir" / "deeper"
        subdir.mkdir(parents=True)

        # Act
        result = find_project_root(start=subdir)

        # Assert
        assert result == project_root

    def test_find_project_root_with_pyproject_toml(self, tmp_path: Path) -> None:
        """Should find directory containing pyproject.toml marker."""
        (tmp_path / "pyproject.toml").touch()
        subdir = tmp_path / "src" / "myapp"
        subdir.mkdir(parents=True)

        assert find_project_root(start=subdir) == tmp_path

    def test_find_project_root_with_git(self, tmp_path: Path) -> None:
        """Should find directory containing .git marker."""
        (tmp_path / ".git").mkdir()
        subdir = tmp_path / "src"
        subdir.mkdir()

        assert find_project_root(start=subdir) == tmp_path

    def test_find_project_root_returns_start_when_no_marker(
        self, tmp_path: Path
    ) -> None:
        """Should return start directory when no markers found."""
        # Arrange
        subdir = tmp_path / "subdir"
        subdir.mkdir()

        # Act
        result = find_project_root(start=subdir)

        # Assert
        assert result == subdir

    def test_nearest_marker_wins(self, tmp_path: Path) -> None:
        """A nearer pyproject.toml beats a farther .tierfind."""
        (tmp_path / ".tierfind").touch()
        inner_root = tmp_path / "project"
        inner_root.mkdir()
        (inner_root / "pyproject.toml").touch()

        assert find_project_root(start=inner_root / "code") == inner_root

    def test_tierfind_wins_over_pyproject(self, tmp_path: Path) -> None:
        """Should prefer .tierfind over pyproject.toml."""
        # Arrange: nested structure with both markers
        outer_root = tmp_path
        (outer_root / "pyproject.toml").touch()

        inner_root = outer_root / "project"
        inner_root.mkdir()
        (inner_root / ".tierfind").touch()

        code_dir = inner_root / "code"
        code_dir.mkdir()

        # Act
        result = find_project_root(start=code_dir)

        # Assert: should find .tierfind, not pyproject.toml
        assert result == inner_root

    def test_pyproject_wins_over_git(self, tmp_path: Path) -> None:
        """Should prefer pyproject.toml over .git."""
        git_root = tmp_path
        (git_root / ".git").mkdir()

        python_root = git_root / "python_project"
        python_root.mkdir()
        (python_root / "pyproject.toml").touch()

        src_dir = python_root / "src"
        src_dir.mkdir()

        assert find_project_root(start=src_dir) == python_root

    def test_uses_cwd_when_start_none(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Should use current working directory when start is None."""
        (tmp_path / ".tierfind").touch()
        subdir = tmp_path / "subdir"
        subdir.mkdir()
        monkeypatch.chdir(subdir)

        result = find_project_root()

        assert result == Path(os.path.normpath(Path.cwd())).parent

    def test_returns_absolute_path(self, tmp_path: Path) -> None:
        """Should always return an absolute path."""
        (tmp_path / ".tierfind").touch()

        assert find_project_root(start=tmp_path).is_absolute()

    def test_find_project_root_exported_from_package(self) -> None:
        """find_project_root should be exported from tierfind package."""
        from tierfind import find_project_root as exported_func

        assert callable(exported_func)
