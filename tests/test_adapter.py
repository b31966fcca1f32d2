"""Tests for the CommandAdapter module."""

import pytest
from unittest.mock import Mock

from cute.core.adapter import NO_HEADERS, CommandAdapter, NoCommandError
from cute.core.lazy_storage import LazyStorage
from cute.core.options import Option, OptionKind
from cute.interfaces import ExecutionError, StorageError
from cute.request import Curl, Wget

from conftest import completed


@pytest.fixture
def backing():
    """A mock store whose open() returns a mock handle."""
    storage = Mock()
    storage.open.return_value = Mock()
    return storage


@pytest.fixture
def adapter(backing):
    return CommandAdapter(LazyStorage(backing))


class TestCommandAdapter:
    """Tests for CommandAdapter."""

    def test_no_command_is_an_error(self, adapter):
        """Setters need an active command."""
        with pytest.raises(NoCommandError):
            adapter.set_url("http://x")
        with pytest.raises(NoCommandError):
            adapter.execute()

    def test_setters_reach_command(self, adapter):
        """Setters mutate the active command."""
        adapter.set_command(Curl())
        adapter.set_url("http://x")
        adapter.add_headers(["A:1"])
        adapter.set_outfile("out")
        adapter.set_verbose(True)
        adapter.save_command(True)
        adapter.save_token()

        command = adapter.command
        assert command.url == "http://x"
        assert command.headers == ["A:1"]
        assert command.outfile == "out"
        assert command.verbose is True
        assert command.will_save_command is True
        assert command.will_save_token is True

    def test_execute_captures_response(self, adapter, runner, raw_response, backing):
        """execute returns the raw response and keeps it."""
        adapter.set_command(Curl(runner=runner))
        adapter.set_url("http://x")
        assert adapter.execute() == raw_response
        assert adapter.response == raw_response
        backing.open.assert_not_called()

    def test_execute_opens_storage_only_when_saving(self, adapter, runner, backing):
        """A save request opens the store lazily."""
        adapter.set_command(Curl(runner=runner))
        adapter.set_url("http://x")
        adapter.save_command(True)
        adapter.execute()
        backing.open.assert_called_once()
        backing.open.return_value.add_command.assert_called_once_with("curl -i http://x")

    def test_execute_storage_failure_surfaced(self, adapter, runner, backing):
        """A failed open is raised and left unopened."""
        backing.open.side_effect = StorageError("disk full")
        adapter.set_command(Curl(runner=runner))
        adapter.save_command(True)
        with pytest.raises(StorageError):
            adapter.execute()
        assert adapter.storage.is_open() is False
        runner.assert_not_called()

    def test_execute_save_failure_keeps_response(self, adapter, runner, raw_response, backing):
        """A save that fails after the run still leaves the response captured."""
        backing.open.return_value.add_command.side_effect = StorageError("disk full")
        adapter.set_command(Curl(runner=runner))
        adapter.set_url("http://x")
        adapter.save_command(True)
        with pytest.raises(StorageError, match="disk full"):
            adapter.execute()
        assert adapter.response == raw_response
        assert adapter.parsed_response().body == "hello"
        runner.assert_called_once()

    def test_execute_clears_previous_response_on_failure(self, adapter, raw_response):
        """A failed rerun does not leave the earlier response behind."""
        runner = Mock(side_effect=[completed(stdout=raw_response), completed(stderr="boom", returncode=7)])
        adapter.set_command(Curl(runner=runner))
        adapter.set_url("http://x")
        adapter.execute()
        with pytest.raises(ExecutionError):
            adapter.execute()
        assert adapter.response is None

    def test_execute_failure_surfaced(self, adapter):
        """Execution errors propagate."""
        adapter.set_command(Curl(runner=Mock(return_value=completed(stderr="boom", returncode=6))))
        with pytest.raises(ExecutionError, match="boom"):
            adapter.execute()

    def test_execute_applies_options(self, adapter, runner):
        """Configuration options become command-line flags."""
        adapter.set_command(Curl(runner=runner))
        adapter.set_url("http://x")
        adapter.execute([Option(OptionKind.FOLLOW_REDIRECTS), Option(OptionKind.COOKIE, "a=b")])
        args = runner.call_args.args[0]
        assert "--location" in args
        assert args[args.index("--cookie") + 1] == "a=b"

    def test_wget_never_opens_storage(self, adapter, backing):
        """Downloads do not persist anything."""
        adapter.set_command(Wget(runner=Mock(return_value=completed(stderr="saved"))))
        adapter.set_url("http://x/file")
        adapter.save_command(True)
        assert adapter.execute() == "saved"
        backing.open.assert_not_called()

    def test_response_headers(self, adapter, runner):
        """Headers of the captured response are formatted."""
        adapter.set_command(Curl(runner=runner))
        adapter.execute()
        assert adapter.get_response_headers() == "Content-Type: text/plain\nContent-Length: 5"

    def test_response_headers_placeholder_when_absent(self, adapter):
        """No response gives the placeholder."""
        assert adapter.get_response_headers() == NO_HEADERS

    def test_response_headers_placeholder_when_malformed(self, adapter):
        """Unparseable response gives the placeholder."""
        adapter.response = "not http at all"
        assert adapter.get_response_headers() == NO_HEADERS

    def test_response_body(self, adapter, runner):
        """Body is the text after the headers."""
        adapter.set_command(Curl(runner=runner))
        adapter.execute()
        assert adapter.get_response_body() == "hello"

    def test_response_body_falls_back_to_raw(self, adapter):
        """Unparseable responses are shown as-is."""
        adapter.response = "plain output"
        assert adapter.get_response_body() == "plain output"

    def test_set_command_discards_response(self, adapter):
        """A new command starts without a response."""
        adapter.response = "old"
        adapter.set_command(Curl())
        assert adapter.response is None

    def test_reset_keeps_variant(self, adapter):
        """reset gives a blank builder of the same kind."""
        adapter.set_command(Curl(method="POST"))
        adapter.set_url("http://x")
        adapter.reset()
        assert isinstance(adapter.command, Curl)
        assert adapter.command.method == "POST"
        assert adapter.command.url is None

    def test_get_command_string(self, adapter):
        """Command string includes applied options."""
        adapter.set_command(Curl())
        adapter.set_url("http://x")
        assert adapter.get_command_string([Option(OptionKind.FAIL_ON_ERROR)]) == "curl -i --fail http://x"
