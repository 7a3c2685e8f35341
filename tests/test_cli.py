# tests/test_cli.py

from __future__ import annotations

import io
import logging
from dataclasses import replace

import pytest

from stmta.cli.main import build_parser, configure_logging, main, read_task_text
from stmta.errors import StoreConnectionError, ValidationError
from stmta.tasks.task_store import TaskStore

from .fakes import FakeCollection


class _Run:
    def __init__(self, code: int, out: str, err: str) -> None:
        self.code = code
        self.out = out
        self.err = err


@pytest.fixture()
def run_cli(settings, store: TaskStore):
    def _run(*argv: str, stdin: str = "") -> _Run:
        out, err = io.StringIO(), io.StringIO()
        code = main(
            list(argv),
            settings=settings,
            store_factory=lambda _settings: store,
            stdin=io.StringIO(stdin),
            stdout=out,
            stderr=err,
        )
        return _Run(code, out.getvalue(), err.getvalue())

    return _run


def test_read_task_text_joins_args_and_ignores_stdin() -> None:
    stdin = io.StringIO("from stdin\n")
    assert read_task_text(stdin, ["buy", "some", "milk"]) == "buy some milk"
    # stdin untouched
    assert stdin.read() == "from stdin\n"


def test_read_task_text_reads_one_stdin_line() -> None:
    assert read_task_text(io.StringIO("write report\nsecond line\n"), []) == "write report"


@pytest.mark.parametrize("raw", ["", "\n", "   \n"])
def test_read_task_text_rejects_empty_stdin(raw: str) -> None:
    with pytest.raises(ValidationError, match="empty todo is not allowed"):
        read_task_text(io.StringIO(raw), [])


def test_add_from_args(run_cli, store: TaskStore) -> None:
    res = run_cli("-add", "buy", "milk")
    assert res.code == 0
    assert res.out == ""
    assert [t.text for t in store.get_all()] == ["buy milk"]


def test_add_from_stdin(run_cli, store: TaskStore) -> None:
    res = run_cli("-add", stdin="write report\n")
    assert res.code == 0
    assert [t.text for t in store.get_all()] == ["write report"]


def test_add_empty_stdin_is_validation_error(run_cli, store: TaskStore) -> None:
    res = run_cli("-add", stdin="\n")
    assert res.code == 1
    assert "empty todo is not allowed" in res.err
    assert store.get_all() == []


def test_complete_and_delete(run_cli, store: TaskStore) -> None:
    store.add("buy milk")
    store.add("write report")

    assert run_cli("-complete", "1").code == 0
    assert store.count_pending() == 1

    assert run_cli("-del", "2").code == 0
    tasks = store.get_all()
    assert [(t.text, t.done) for t in tasks] == [("buy milk", True)]


def test_complete_out_of_range_exits_1(run_cli, store: TaskStore) -> None:
    store.add("only")
    res = run_cli("-complete", "2")
    assert res.code == 1
    assert res.err.startswith("Failed to mark task as completed:")


def test_delete_out_of_range_exits_1(run_cli) -> None:
    res = run_cli("-del", "1")
    assert res.code == 1
    assert res.err.startswith("Failed to delete task:")


def test_add_takes_priority_over_other_flags(run_cli, store: TaskStore) -> None:
    store.add("existing")
    res = run_cli("-add", "-complete", "1", "-list", "new")
    assert res.code == 0
    tasks = store.get_all()
    assert [t.text for t in tasks] == ["existing", "new"]
    assert not any(t.done for t in tasks)


def test_complete_takes_priority_over_delete(run_cli, store: TaskStore) -> None:
    store.add("a")
    store.add("b")
    assert run_cli("-complete", "1", "-del", "2").code == 0
    assert [(t.text, t.done) for t in store.get_all()] == [("a", True), ("b", False)]


def test_non_positive_index_falls_through(run_cli, store: TaskStore) -> None:
    store.add("a")
    res = run_cli("-complete", "0")
    assert res.code == 0
    assert res.out.strip() == "invalid command"
    assert store.count_pending() == 1


def test_list_prints_table_and_pending_count(run_cli, store: TaskStore) -> None:
    store.add("buy milk")
    store.add("write report")
    store.complete(1)

    res = run_cli("-list")
    assert res.code == 0
    assert "Welcome to STMTA!" in res.out
    assert "You have 1 pending todos" in res.out


def test_no_flag_prints_invalid_command(run_cli) -> None:
    res = run_cli()
    assert res.code == 0
    assert res.out == "invalid command\n"
    assert res.err == ""


def test_storage_failure_is_reported(run_cli, store: TaskStore, collection: FakeCollection) -> None:
    collection.fail_on.add("find")
    res = run_cli("-list")
    assert res.code == 1
    assert res.err.startswith("Failed to list tasks:")
    assert "connection reset" in res.err


def test_add_storage_failure_is_reported(run_cli, collection: FakeCollection) -> None:
    collection.fail_on.add("insert_one")
    res = run_cli("-add", "x")
    assert res.code == 1
    assert res.err.startswith("Failed to add task:")


def test_connection_failure_exits_1(settings) -> None:
    def refuse(_settings):
        raise StoreConnectionError("failed to ping MongoDB: timed out")

    err = io.StringIO()
    code = main(["-list"], settings=settings, store_factory=refuse, stdout=io.StringIO(), stderr=err)

    assert code == 1
    assert err.getvalue() == "Failed to connect to DB: failed to ping MongoDB: timed out\n"


def test_store_is_closed_after_command(run_cli, client) -> None:
    run_cli("-list")
    assert client.closed is True


def test_dash_prefixed_words_are_task_text() -> None:
    opts = build_parser().parse_args(["-add", "fix", "-v", "flag"])
    assert opts.add is True
    assert opts.words == ["fix", "-v", "flag"]


def test_add_with_dash_prefixed_words(run_cli, store: TaskStore) -> None:
    res = run_cli("-add", "fix", "-v", "flag", "-list")
    assert res.code == 0
    assert [t.text for t in store.get_all()] == ["fix -v flag"]


def test_unwritable_data_dir_disables_file_log(settings, tmp_path) -> None:
    blocker = tmp_path / "not-a-dir"
    blocker.write_text("x", "utf-8")
    bad = replace(settings, log_to_file=True, data_dir=blocker / "logs")

    root = logging.getLogger()
    saved = list(root.handlers)
    try:
        configure_logging(bad)

        assert root.handlers
        assert not any(isinstance(h, logging.FileHandler) for h in root.handlers)
    finally:
        logging.captureWarnings(False)
        for h in list(root.handlers):
            root.removeHandler(h)
            h.close()
        for h in saved:
            root.addHandler(h)
