"""
Tests for the saved project list operations.
"""
import os
import shutil
import pytest
from pathlib import Path

from teleproj.config import ProjectsConfig
from teleproj.errors import IndexOutOfRangeError, InvalidIndexFormatError, InvalidPathError
from teleproj.projects.registry import (
    add_path,
    canonicalize,
    existing_paths,
    parse_index,
    project_name,
    prune_missing,
    remove_path,
    stored_entries,
)


@pytest.fixture
def three_projects(make_project):
    """A config holding three existing projects."""
    paths = [make_project("alpha"), make_project("beta"), make_project("gamma")]
    return ProjectsConfig(paths=paths), paths


# Tests for project_name
def test_project_name_is_last_component():
    assert project_name("/home/user/code/apollo") == "apollo"


def test_project_name_ignores_trailing_slash():
    assert project_name("/home/user/code/apollo/") == "apollo"


def test_project_name_of_root_is_unknown():
    assert project_name("/") == "unknown"


# Tests for parse_index
@pytest.mark.parametrize("text,expected", [("0", 0), ("12", 12), ("+3", 3), ("-1", None), ("abc", None), ("1.5", None), ("", None)])
def test_parse_index(text, expected):
    assert parse_index(text) == expected


# Tests for canonicalize / add_path
def test_canonicalize_relative_path(make_project, tmp_path, monkeypatch):
    expected = make_project("alpha")
    monkeypatch.chdir(tmp_path)

    assert canonicalize("projects/alpha") == expected
    assert canonicalize("projects/alpha/../alpha") == expected


def test_canonicalize_expands_home(make_project, tmp_path, monkeypatch):
    expected = make_project("alpha")
    monkeypatch.setenv("HOME", str(tmp_path))

    assert canonicalize("~/projects/alpha") == expected


def test_canonicalize_missing_path(tmp_path):
    with pytest.raises(InvalidPathError) as exc_info:
        canonicalize(tmp_path / "nope")
    assert "does not exist" in str(exc_info.value)


def test_add_path_stores_canonical_form(make_project, tmp_path, monkeypatch):
    expected = make_project("alpha")
    monkeypatch.chdir(tmp_path / "projects")
    config = ProjectsConfig()

    result = add_path(config, "alpha")

    assert result.added
    assert result.path == expected
    assert config.paths == [expected]


def test_add_path_twice_keeps_one_entry(make_project):
    config = ProjectsConfig()
    path = make_project("alpha")

    first = add_path(config, path)
    second = add_path(config, path + os.sep)

    assert first.added
    assert not second.added
    assert second.path == path
    assert config.paths == [path]


def test_add_symlink_resolves_to_target(make_project, tmp_path):
    target = make_project("alpha")
    link = tmp_path / "alpha-link"
    link.symlink_to(target, target_is_directory=True)
    config = ProjectsConfig()

    add_path(config, link)
    result = add_path(config, target)

    assert not result.added
    assert config.paths == [target]


def test_add_missing_path_leaves_config_untouched(tmp_path):
    config = ProjectsConfig()

    with pytest.raises(InvalidPathError):
        add_path(config, tmp_path / "missing")

    assert config.paths == []


# Tests for remove_path
def test_remove_path_shifts_later_entries(three_projects):
    config, paths = three_projects

    removed = remove_path(config, "1")

    assert removed == paths[1]
    assert config.paths == [paths[0], paths[2]]
    assert existing_paths(config)[1] == paths[2]


def test_remove_path_accepts_int(three_projects):
    config, paths = three_projects

    assert remove_path(config, 0) == paths[0]
    assert config.paths == paths[1:]


@pytest.mark.parametrize("index_text", ["abc", "-1", "1.0", "", " 1"])
def test_remove_path_rejects_non_numeric(three_projects, index_text):
    config, paths = three_projects

    with pytest.raises(InvalidIndexFormatError):
        remove_path(config, index_text)

    assert config.paths == paths


def test_remove_path_out_of_range(three_projects):
    config, paths = three_projects

    with pytest.raises(IndexOutOfRangeError) as exc_info:
        remove_path(config, "3")

    assert exc_info.value.index == 3
    assert "out of range" in str(exc_info.value)
    assert config.paths == paths


def test_remove_path_uses_stored_index(three_projects):
    """Indices address the stored list, including entries that vanished."""
    config, paths = three_projects
    shutil.rmtree(paths[0])

    removed = remove_path(config, "0")

    assert removed == paths[0]
    assert config.paths == paths[1:]


# Tests for existing_paths / stored_entries / prune_missing
def test_existing_paths_skips_missing(three_projects):
    config, paths = three_projects
    shutil.rmtree(paths[1])

    assert existing_paths(config) == [paths[0], paths[2]]
    # Nothing is pruned implicitly
    assert config.paths == paths


def test_stored_entries_marks_missing(three_projects):
    config, paths = three_projects
    shutil.rmtree(paths[1])

    entries = stored_entries(config)

    assert [(e.index, e.path, e.exists) for e in entries] == [
        (0, paths[0], True),
        (1, paths[1], False),
        (2, paths[2], True),
    ]


def test_prune_missing(three_projects):
    config, paths = three_projects
    shutil.rmtree(paths[0])
    shutil.rmtree(paths[2])

    removed = prune_missing(config)

    assert removed == [paths[0], paths[2]]
    assert config.paths == [paths[1]]


def test_prune_missing_without_missing_paths(three_projects):
    config, paths = three_projects

    assert prune_missing(config) == []
    assert config.paths == paths


# Tests for saved paths that cannot be checked
UNCHECKABLE_PATH = "/" + "x" * 5000  # fails with ENAMETOOLONG


def test_uncheckable_path_counts_as_missing(make_project):
    alpha = make_project("alpha")
    config = ProjectsConfig(paths=[UNCHECKABLE_PATH, alpha])

    assert existing_paths(config) == [alpha]
    assert [e.exists for e in stored_entries(config)] == [False, True]
    assert prune_missing(config) == [UNCHECKABLE_PATH]
    assert config.paths == [alpha]


def test_permission_error_counts_as_missing(make_project, monkeypatch):
    alpha = make_project("alpha")
    locked = make_project("locked/beta")
    original_exists = Path.exists

    def exists(self, *args, **kwargs):
        if str(self) == locked:
            raise PermissionError(13, "Permission denied", str(self))
        return original_exists(self, *args, **kwargs)

    monkeypatch.setattr(Path, "exists", exists)
    config = ProjectsConfig(paths=[locked, alpha])

    assert existing_paths(config) == [alpha]


def test_add_uncheckable_path_is_invalid():
    config = ProjectsConfig()

    with pytest.raises(InvalidPathError):
        add_path(config, UNCHECKABLE_PATH)

    assert config.paths == []
