"""Tests for OutputManager verbosity handling."""

import io

from rich.console import Console

from kubekey.output import OutputManager, Verbosity, get_output, set_output


def _manager(verbosity):
    buffer = io.StringIO()
    return OutputManager(verbosity=verbosity, console=Console(file=buffer, width=300, color_system=None)), buffer


class TestOutputManager:
    """Test cases for OutputManager."""

    def test_quiet_shows_results_only(self, capsys):
        """Test that quiet mode hides messages but not results."""
        manager, buffer = _manager(Verbosity.QUIET)
        manager.info("hidden info")
        manager.verbose("hidden detail")
        manager.warning("hidden warning")
        manager.result("v1:Pod:ns:p")

        assert buffer.getvalue() == "v1:Pod:ns:p\n"
        assert capsys.readouterr().err == ""

    def test_verbose_mode(self):
        """Test that verbose messages appear in verbose mode."""
        manager, buffer = _manager(Verbosity.VERBOSE)
        manager.verbose("detail")

        assert "detail" in buffer.getvalue()

    def test_errors_always_shown(self, capsys):
        """Test that errors reach stderr even in quiet mode."""
        manager, _ = _manager(Verbosity.QUIET)
        manager.error("broken", suggestion="not shown when quiet")

        err = capsys.readouterr().err
        assert "broken" in err
        assert "not shown when quiet" not in err

    def test_result_is_not_markup(self):
        """Test that results are printed literally."""
        manager, buffer = _manager(Verbosity.NORMAL)
        manager.result("v1:[bold]x[/bold]:ns:smile")

        assert buffer.getvalue() == "v1:[bold]x[/bold]:ns:smile\n"

    def test_global_instance(self):
        """Test get_output/set_output."""
        manager, _ = _manager(Verbosity.NORMAL)
        set_output(manager)
        try:
            assert get_output() is manager
        finally:
            set_output(OutputManager())
