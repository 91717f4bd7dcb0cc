import asyncio
import pathlib

import pytest

from conftest import build_tree
from errors import TargetNotADirectory
from tui_browser import CopierTUI, ErrorReportScreen, NewDirectoryScreen


def run_app(app: CopierTUI, actions) -> None:
    async def drive():
        async with app.run_test() as pilot:
            await pilot.pause()
            for action in actions:
                action(app)
                await pilot.pause()
    asyncio.run(drive())


def test_unknown_error_policy_rejected(tmp_path: pathlib.Path) -> None:
    with pytest.raises(ValueError):
        CopierTUI(start_dir=str(tmp_path), error_policy="retry")


def test_lists_current_directory(foo_tree: pathlib.Path) -> None:
    app = CopierTUI(start_dir=str(foo_tree))

    run_app(app, [])

    # directories first
    assert [p.name for p in app.items] == ["baz", "bar"]


def test_paste_copies_selection_into_current_directory(foo_tree: pathlib.Path, tmp_path: pathlib.Path) -> None:
    target = tmp_path / "target"
    target.mkdir()
    app = CopierTUI(start_dir=str(target))

    def select(app):
        app.selected = {foo_tree.absolute()}

    run_app(app, [select, lambda app: app.action_deploy()])

    assert (target / "foo" / "bar").read_text(encoding="utf-8") == "hello"
    assert (target / "foo" / "baz" / "quux").read_text(encoding="utf-8") == "world"
    assert app.selected == set()
    assert app.last_errors == []


def test_paste_reports_errors(tmp_path: pathlib.Path) -> None:
    build_tree(tmp_path / "src", {"foo": {"bar": "hello"}})
    target = tmp_path / "target"
    build_tree(target, {"foo": "a file in the way"})
    app = CopierTUI(start_dir=str(target))
    screens = []

    def select(app):
        app.selected = {(tmp_path / "src" / "foo").absolute()}

    run_app(app, [select, lambda app: app.action_deploy(), lambda app: screens.append(app.screen)])

    assert len(app.last_errors) == 1
    assert isinstance(app.last_errors[0], TargetNotADirectory)
    assert isinstance(screens[0], ErrorReportScreen)
    assert (target / "foo").read_text(encoding="utf-8") == "a file in the way"


def test_paste_skips_entries_already_in_current_directory(foo_tree: pathlib.Path) -> None:
    app = CopierTUI(start_dir=str(foo_tree.parent))

    def select(app):
        app.selected = {foo_tree.absolute()}

    run_app(app, [select, lambda app: app.action_deploy()])

    assert sorted(p.name for p in foo_tree.iterdir()) == ["bar", "baz"]


def test_toggle_select_marks_entry(foo_tree: pathlib.Path) -> None:
    app = CopierTUI(start_dir=str(foo_tree))

    run_app(app, [lambda app: app.action_toggle_select()])

    assert app.selected == {(foo_tree / "baz").absolute()}


def test_new_directory_is_created(tmp_path: pathlib.Path) -> None:
    app = CopierTUI(start_dir=str(tmp_path))

    def name_it(app):
        assert isinstance(app.screen, NewDirectoryScreen)
        app.screen.input.value = "paste_here"
        app.screen.submit()

    run_app(app, [lambda app: app.action_new_dir(), name_it, lambda app: None])

    assert (tmp_path / "paste_here").is_dir()
    assert "paste_here" in [p.name for p in app.items]


def test_new_directory_rejects_paths(tmp_path: pathlib.Path) -> None:
    app = CopierTUI(start_dir=str(tmp_path))
    screens = []

    def name_it(app):
        app.screen.input.value = "../escape"
        app.screen.submit()
        screens.append(app.screen)

    run_app(app, [lambda app: app.action_new_dir(), name_it])

    assert isinstance(screens[0], NewDirectoryScreen)
    assert not (tmp_path.parent / "escape").exists()
    assert list(tmp_path.iterdir()) == []
