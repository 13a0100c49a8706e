"""
Tests for the protokit command line.
"""

from __future__ import annotations

import io
from importlib import metadata
from pathlib import Path

from click.testing import CliRunner
from rich.console import Console

from protokit.backend.cli.check_deps import check_packages
from protokit.backend.cli.check_deps import main as check_deps_main
from protokit.backend.cli.main import cli
from protokit.backend.core.storage import SqlBackend
from protokit.backend.sites import get_site


class TestSitesCommand:
    def test_lists_every_site(self) -> None:
        result = CliRunner().invoke(cli, ["sites"])
        assert result.exit_code == 0
        for name in ("africstays", "tiktalk", "projecttracker", "imusic", "homepros",
                     "edumentor", "afriquisine", "breathcheck", "trendanalyzer"):
            assert name in result.output


class TestSeedCommand:
    def test_seeds_sqlite_file(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'homepros.db'}"

        result = CliRunner().invoke(cli, ["seed", "homepros", "--database-url", url])

        assert result.exit_code == 0, result.output
        assert "services" in result.output
        backend = SqlBackend(url)
        storage = get_site("homepros").storage_class(backend)
        assert storage.services.count() == 8
        backend.close()

    def test_second_seed_is_a_no_op(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'imusic.db'}"
        runner = CliRunner()
        runner.invoke(cli, ["seed", "imusic", "--database-url", url])

        result = runner.invoke(cli, ["seed", "imusic", "--database-url", url])

        assert result.exit_code == 0
        assert "already present" in result.output
        backend = SqlBackend(url)
        assert get_site("imusic").storage_class(backend).mentors.count() == 6
        backend.close()

    def test_reset_replaces_data(self, tmp_path: Path) -> None:
        url = f"sqlite:///{tmp_path / 'tracker.db'}"
        runner = CliRunner()
        runner.invoke(cli, ["seed", "projecttracker", "--database-url", url])

        result = runner.invoke(cli, ["seed", "projecttracker", "--database-url", url, "--reset"])

        assert result.exit_code == 0, result.output
        backend = SqlBackend(url)
        storage = get_site("projecttracker").storage_class(backend)
        assert [p.id for p in storage.projects.all()] == [1]
        assert storage.projects.get(1).user_id == 1
        backend.close()

    def test_unknown_site(self) -> None:
        result = CliRunner().invoke(cli, ["seed", "nowhere", "--database-url", "sqlite://"])
        assert result.exit_code == 1
        assert "Unknown site" in result.output


class TestCheckDeps:
    def test_all_present(self) -> None:
        result = CliRunner().invoke(cli, ["check-deps"])
        assert result.exit_code == 0
        assert "sqlalchemy" in result.output

    def test_reports_installed_version(self) -> None:
        [status] = check_packages({"click": "click"})
        assert status.ok
        assert status.version == metadata.version("click")

    def test_missing_package_fails(self) -> None:
        console = Console(file=io.StringIO(), width=200)
        code = check_deps_main(console, {"protokit-absent": "protokit_absent_module"})
        assert code == 1
        assert "Missing: protokit-absent" in console.file.getvalue()
