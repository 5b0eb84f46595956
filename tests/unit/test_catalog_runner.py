"""Unit tests for the example catalogue, runner and command line."""

import pytest

from patterns_app.__main__ import main
from patterns_app.catalog import CATALOG, ExampleSpec, get_example, list_examples
from patterns_app.console import MemoryConsole
from patterns_app.errors import CatalogError, UnknownVariantError
from patterns_app.runner import ExampleRunner


class TestCatalog:
    """Test suite for catalogue lookup."""

    def test_all_nine_patterns_registered(self) -> None:
        assert [spec.name for spec in list_examples()] == [
            "observer",
            "strategy",
            "factory",
            "abstract_factory",
            "builder",
            "singleton",
            "adapter",
            "decorator",
            "facade",
        ]

    def test_categories(self) -> None:
        assert {spec.name for spec in list_examples("structural")} == {"adapter", "decorator", "facade"}
        assert len(list_examples("behavioral")) == 2
        assert len(list_examples("creational")) == 4

    def test_get_example(self) -> None:
        assert get_example("builder") is CATALOG["builder"]

    def test_unknown_example(self) -> None:
        with pytest.raises(CatalogError) as exc_info:
            get_example("visitor")
        assert exc_info.value.example_name == "visitor"
        assert "observer" in exc_info.value.context["known"]


class TestExampleRunner:
    """Test suite for running examples."""

    def test_run_example_records_result(self, empty_loader) -> None:
        console = MemoryConsole()
        runner = ExampleRunner(empty_loader, console)

        result = runner.run_example("strategy")

        assert result.succeeded
        assert result.line_count == 3
        assert result.error is None
        assert runner.results == [result]

    def test_run_all_in_catalogue_order(self, empty_loader) -> None:
        console = MemoryConsole()
        results = ExampleRunner(empty_loader, console).run_all()

        assert [r.name for r in results] == [spec.name for spec in list_examples()]
        assert all(r.succeeded for r in results)
        assert sum(r.line_count for r in results) == len(console.lines)

    def test_run_selected_examples(self, empty_loader) -> None:
        console = MemoryConsole()
        ExampleRunner(empty_loader, console).run_all(["decorator", "factory"])
        assert console.lines[0] == "Description : Plain Coffee Milk Sugar"
        assert console.lines[-1] == "Drawing rectangle."

    def test_unknown_name_rejected_before_running(self, empty_loader) -> None:
        console = MemoryConsole()
        with pytest.raises(CatalogError):
            ExampleRunner(empty_loader, console).run_all(["strategy", "visitor"])
        assert console.lines == []

    def test_failure_is_recorded(self, write_catalog) -> None:
        loader = write_catalog(
            "examples:\n"
            "  factory:\n"
            "    factory:\n"
            "      default_shape: Hexagon\n"
        )
        runner = ExampleRunner(loader, MemoryConsole())

        results = runner.run_all(["factory", "decorator"])

        assert [r.succeeded for r in results] == [False, True]
        assert isinstance(results[0].error, UnknownVariantError)
        assert any("FAILED" in line for line in runner.summary_lines())

    def test_stop_on_error(self, write_catalog) -> None:
        loader = write_catalog(
            "defaults:\n"
            "  runner:\n"
            "    stop_on_error: true\n"
            "examples:\n"
            "  factory:\n"
            "    factory:\n"
            "      default_shape: Hexagon\n"
        )
        results = ExampleRunner(loader, MemoryConsole()).run_all(["factory", "decorator"])
        assert [r.name for r in results] == ["factory"]

    def test_unexpected_exception_is_recorded(self, empty_loader, monkeypatch) -> None:
        def broken(console, config):
            raise RuntimeError("boom")

        monkeypatch.setitem(
            CATALOG, "decorator", ExampleSpec("decorator", "structural", "broken", broken)
        )
        results = ExampleRunner(empty_loader, MemoryConsole()).run_all(["decorator", "facade"])

        assert [r.succeeded for r in results] == [False, True]
        assert isinstance(results[0].error, RuntimeError)

    def test_example_console_section_is_used(self, write_catalog, tmp_path) -> None:
        out = tmp_path / "decorator.txt"
        loader = write_catalog(
            "examples:\n"
            "  decorator:\n"
            "    console:\n"
            "      method: file\n"
            f"      output_path: {out}\n"
        )
        shared = MemoryConsole()

        results = ExampleRunner(loader, shared).run_all(["decorator", "facade"])

        assert out.read_text().splitlines()[1] == "Cost : 170"
        assert results[0].line_count == 4
        assert shared.lines[0] == "Turning on AC"

    def test_summary_lines(self, empty_loader) -> None:
        runner = ExampleRunner(empty_loader, MemoryConsole())
        runner.run_all(["facade"])
        summary = runner.summary_lines()
        assert "Total examples: 1" in summary
        assert "Failed        : 0" in summary


class TestCommandLine:
    """Test suite for ``python -m patterns_app``."""

    @pytest.fixture(autouse=True)
    def keep_test_logging(self, monkeypatch):
        """main() must not rebind logging to this test's captured streams."""
        monkeypatch.setattr("patterns_app.__main__.configure_logging", lambda **kwargs: None)

    def test_list(self, capsys) -> None:
        assert main(["--list"]) == 0
        out = capsys.readouterr().out
        assert "observer" in out and "facade" in out

    def test_run_named_example(self, capsys, tmp_path) -> None:
        assert main(["--config-dir", str(tmp_path), "decorator"]) == 0
        assert capsys.readouterr().out.splitlines() == [
            "Description : Plain Coffee Milk Sugar",
            "Cost : 170",
            "Description : Plain Coffee Milk Caramel",
            "Cost : 250",
        ]

    def test_unknown_example_exit_code(self, capsys, tmp_path) -> None:
        assert main(["--config-dir", str(tmp_path), "visitor"]) == 2
        assert "Unknown example: visitor" in capsys.readouterr().err

    def test_invalid_configuration_exit_code(self, capsys, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text("defaults:\n  logging:\n    level: LOUD\n")
        assert main(["--config-dir", str(tmp_path)]) == 2
        assert "logging.level" in capsys.readouterr().err

    def test_failed_example_exit_code(self, capsys, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text(
            "examples:\n  factory:\n    factory:\n      default_shape: Hexagon\n"
        )
        assert main(["--config-dir", str(tmp_path), "factory"]) == 1
        assert "FAILED" in capsys.readouterr().err

    def test_malformed_catalog_exit_code(self, capsys, tmp_path) -> None:
        (tmp_path / "catalog.yaml").write_text("defaults:\n  console: stdout\n")
        assert main(["--config-dir", str(tmp_path), "decorator"]) == 2
        assert "console: Must be a mapping" in capsys.readouterr().err

    def test_unusable_console_exit_code(self, capsys, tmp_path) -> None:
        (tmp_path / "blocker").write_text("")
        (tmp_path / "catalog.yaml").write_text(
            "defaults:\n"
            "  console:\n"
            "    method: file\n"
            f"    output_path: {tmp_path / 'blocker' / 'sub' / 'out.txt'}\n"
        )
        assert main(["--config-dir", str(tmp_path), "decorator"]) == 2
        assert "Cannot prepare output file" in capsys.readouterr().err
