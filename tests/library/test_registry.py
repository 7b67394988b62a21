"""
Unit tests for the path template registry.

Tests language-key fallback, case-insensitive lookup and home directory
substitution.
"""

import threading
from pathlib import Path

import pytest

from clone_library.errors import HomeDirectoryError
from clone_library.errors import TemplateCompileError
from clone_library.errors import TemplateExecutionError
from clone_library.models import RepoDescriptor
from clone_library.paths import BUILTIN_TEMPLATE
from clone_library.paths import TemplateRegistry
from clone_library.paths import resolve_path

ALL_FIELDS = "{url}/{scheme}/{user}/{host}/{owner}/{name}"
ALL_FIELDS_RESULT = "scheme://host/owner/repo/scheme:///user/host/owner/repo"


@pytest.mark.unit
class TestTemplateRegistryBuild:
    """Test TemplateRegistry.build()."""

    def test_valid_templates(self) -> None:
        """Build a registry from valid templates."""
        registry = TemplateRegistry.build({"go": ALL_FIELDS})

        assert set(registry.templates) == {"go"}

    def test_no_templates(self) -> None:
        """An empty mapping is a valid registry."""
        registry = TemplateRegistry.build({})

        assert len(registry.templates) == 0

    def test_invalid_template_aborts(self) -> None:
        """The first malformed template aborts construction."""
        with pytest.raises(TemplateCompileError) as exc_info:
            TemplateRegistry.build({"default": "ok/{name}", "go": "{"})

        assert exc_info.value.template == "{"
        assert exc_info.value.language_key == "go"

    def test_empty_template_aborts(self) -> None:
        """An empty template string is a compile error."""
        with pytest.raises(TemplateCompileError):
            TemplateRegistry.build({"default": ""})

    def test_keys_are_lowercased(self) -> None:
        """Keys are stored lower-cased."""
        registry = TemplateRegistry.build({"Go": "a/{name}", "PYTHON": "b/{name}"})

        assert set(registry.templates) == {"go", "python"}

    def test_case_collision_later_wins(self, caplog: pytest.LogCaptureFixture) -> None:
        """Keys equal after lower-casing keep the later entry."""
        registry = TemplateRegistry.build({"go": "first/{name}", "GO": "second/{name}"})

        assert registry.templates["go"].text == "second/{name}"
        assert "duplicates" in caplog.text

    def test_registry_is_read_only(self) -> None:
        """The compiled mapping cannot be mutated."""
        registry = TemplateRegistry.build({"go": "a/{name}"})

        with pytest.raises(TypeError):
            registry.templates["rust"] = BUILTIN_TEMPLATE  # type: ignore[index]

    def test_build_copies_input(self) -> None:
        """Mutating the source mapping afterwards does not affect the registry."""
        source = {"go": "a/{name}"}
        registry = TemplateRegistry.build(source)
        source["rust"] = "b/{name}"

        assert "rust" not in registry.templates


@pytest.mark.unit
class TestTemplateRegistryResolve:
    """Test TemplateRegistry.resolve()."""

    def test_language_template(self, full_repo: RepoDescriptor) -> None:
        """The matching language template is used."""
        registry = TemplateRegistry.build({"go": ALL_FIELDS, "default": "default/path"})

        assert registry.resolve("go", full_repo) == ALL_FIELDS_RESULT

    @pytest.mark.parametrize("language", ["go", "Go", "gO", "GO"])
    def test_lookup_is_case_insensitive(self, language: str, full_repo: RepoDescriptor) -> None:
        """Language keys match regardless of case."""
        registry = TemplateRegistry.build({"Go": ALL_FIELDS, "default": "default/path"})

        assert registry.resolve(language, full_repo) == ALL_FIELDS_RESULT

    def test_default_fallback(self, full_repo: RepoDescriptor) -> None:
        """Unknown languages use the "default" entry."""
        registry = TemplateRegistry.build({"default": ALL_FIELDS})

        assert registry.resolve("go", full_repo) == ALL_FIELDS_RESULT

    @pytest.mark.parametrize("language", ["", None])
    def test_empty_language_uses_default(self, language: str | None, full_repo: RepoDescriptor) -> None:
        """An unknown main language goes straight to the default entry."""
        registry = TemplateRegistry.build({"go": "go/path", "default": ALL_FIELDS})

        assert registry.resolve(language, full_repo) == ALL_FIELDS_RESULT

    def test_builtin_fallback(self, fake_home: Path, full_repo: RepoDescriptor) -> None:
        """No matching and no default entry uses ~/src/{host}/{owner}/{name}."""
        registry = TemplateRegistry.build({})

        assert registry.resolve("go", full_repo) == f"{fake_home}/src/host/owner/repo"

    def test_builtin_fallback_ignores_other_languages(self, fake_home: Path) -> None:
        """Templates for other languages are never borrowed."""
        registry = TemplateRegistry.build({"rust": "rust/{name}"})
        repo = RepoDescriptor(host="h", owner="o", name="n")

        assert registry.resolve("go", repo) == f"{fake_home}/src/h/o/n"

    def test_go_template(self, fake_home: Path, github_repo: RepoDescriptor) -> None:
        """Go repositories land under ~/go/src."""
        registry = TemplateRegistry.build({"go": "~/go/src/{host}/{owner}/{name}"})

        path = registry.resolve("go", github_repo)

        assert path == f"{fake_home}/go/src/github.com/microhod/clone"

    def test_only_leading_tilde_replaced(self, fake_home: Path) -> None:
        """A ~ after the first character is literal text."""
        registry = TemplateRegistry.build({"go": "~/{host}/~shouldnotbereplacedhere"})

        path = registry.resolve("go", RepoDescriptor(host="host"))

        assert path == f"{fake_home}/host/~shouldnotbereplacedhere"

    def test_no_tilde_no_home_lookup(self, monkeypatch: pytest.MonkeyPatch, full_repo: RepoDescriptor) -> None:
        """Paths not starting with ~ never need the home directory."""
        monkeypatch.setattr(Path, "home", _no_home)
        registry = TemplateRegistry.build({"default": "/srv/{host}/{name}"})

        assert registry.resolve("go", full_repo) == "/srv/host/repo"

    def test_tilde_from_field_value(self, fake_home: Path) -> None:
        """A leading ~ produced by a field value is also expanded."""
        registry = TemplateRegistry.build({"default": "{host}/{name}"})

        path = registry.resolve("", RepoDescriptor(host="~", owner="o", name="n"))

        assert path == f"{fake_home}/n"

    def test_unknown_field_fails(self, full_repo: RepoDescriptor) -> None:
        """Unknown fields surface as TemplateExecutionError."""
        registry = TemplateRegistry.build({"go": "{FieldDoesNotExist}", "default": "default/path"})

        with pytest.raises(TemplateExecutionError) as exc_info:
            registry.resolve("go", full_repo)

        assert exc_info.value.language_key == "go"
        assert exc_info.value.field == "FieldDoesNotExist"

    def test_registry_usable_after_execution_error(self, full_repo: RepoDescriptor) -> None:
        """A failed resolution leaves other keys working."""
        registry = TemplateRegistry.build({"go": "{FieldDoesNotExist}", "default": "default/path"})

        with pytest.raises(TemplateExecutionError):
            registry.resolve("go", full_repo)

        assert registry.resolve("rust", full_repo) == "default/path"

    def test_home_directory_error(self, monkeypatch: pytest.MonkeyPatch, full_repo: RepoDescriptor) -> None:
        """A leading ~ with no resolvable home fails instead of staying literal."""
        monkeypatch.setattr(Path, "home", _no_home)
        registry = TemplateRegistry.build({})

        with pytest.raises(HomeDirectoryError):
            registry.resolve("go", full_repo)

    def test_concurrent_resolution(self, fake_home: Path) -> None:
        """One registry serves many threads."""
        registry = TemplateRegistry.build({"go": "~/go/{owner}/{name}", "default": "~/src/{owner}/{name}"})
        results: dict[int, str] = {}

        def worker(i: int) -> None:
            language = "go" if i % 2 else "python"
            results[i] = registry.resolve(language, RepoDescriptor(host="h", owner="o", name=f"n{i}"))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(20)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        for i, path in results.items():
            expected_dir = "go" if i % 2 else "src"
            assert path == f"{fake_home}/{expected_dir}/o/n{i}"
        assert len(results) == 20


@pytest.mark.unit
class TestResolvePath:
    """Test resolve_path() function."""

    def test_delegates_to_registry(self, fake_home: Path, github_repo: RepoDescriptor) -> None:
        """resolve_path is the functional form of TemplateRegistry.resolve."""
        registry = TemplateRegistry.build({"go": "~/go/src/{host}/{owner}/{name}"})

        assert resolve_path("go", github_repo, registry) == f"{fake_home}/go/src/github.com/microhod/clone"


def _no_home() -> Path:
    raise RuntimeError("Could not determine home directory.")
