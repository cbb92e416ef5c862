"""Smoke tests for SearchDialog."""

from __future__ import annotations

import pytest
from textual.app import App

from storagetui.widgets import SearchDialog
from storagetui.widgets.feedback.search_dialog import SEARCH_INPUT_ID


class DialogHost(App[None]):
    """Minimal app that opens the dialog and records how it closed."""

    def __init__(self, term: str = "") -> None:
        super().__init__()
        self.term = term
        self.results: list[str | None] = []

    def on_mount(self) -> None:
        self.push_screen(SearchDialog(self.term), callback=self.results.append)


class TestSearchDialog:
    """Test the dialog lifecycle."""

    @pytest.mark.asyncio
    async def test_input_is_focused_with_term(self) -> None:
        app = DialogHost("started")
        async with app.run_test() as pilot:
            await pilot.pause()
            assert isinstance(app.screen, SearchDialog)
            assert app.focused is not None
            assert app.focused.id == SEARCH_INPUT_ID
            assert app.focused.value == "started"

    @pytest.mark.asyncio
    async def test_enter_submits_typed_text(self) -> None:
        app = DialogHost()
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("e", "r", "r")
            await pilot.press("enter")
            await pilot.pause()
            assert app.results == ["err"]
            assert not isinstance(app.screen, SearchDialog)

    @pytest.mark.asyncio
    async def test_escape_cancels(self) -> None:
        app = DialogHost("started")
        async with app.run_test() as pilot:
            await pilot.pause()
            await pilot.press("escape")
            await pilot.pause()
            assert app.results == [None]
