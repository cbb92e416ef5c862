"""Explorer screen: catalog tree, contents, preview and details panes."""

from __future__ import annotations

import logging

from rich.text import Text
from textual import on
from textual.app import ComposeResult
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.events import DescendantFocus
from textual.screen import Screen
from textual.widget import Widget
from textual.widgets import DataTable, Footer, Header, Static, Tree

from storagetui.constants.enums import Pane
from storagetui.constants.values import (
    ROOT_LABEL,
    TITLE_CONTENTS,
    TITLE_DETAILS,
    TITLE_PREVIEW,
    TITLE_TREE,
)
from storagetui.controllers.base import CatalogProvider
from storagetui.controllers.navigation import SubscriptionFilterSet
from storagetui.keyboard import EXPLORER_SCREEN_BINDINGS
from storagetui.keyboard.commands import ACTION_COMMANDS, CANCEL_SEARCH, Command
from storagetui.models.tree import CatalogNode
from storagetui.screens.explorer.config import (
    BODY_ID,
    CONTENT_TABLE_COLUMNS,
    CONTENTS_ID,
    DETAIL_COLUMN_STYLE,
    DETAILS_ID,
    DETAILS_TEXT_ID,
    ERROR_ROW_STYLE,
    PANE_WIDGET_IDS,
    PREVIEW_ID,
    PREVIEW_TEXT_ID,
    RIGHT_COLUMN_ID,
    TREE_ID,
    TREE_PANE_ID,
)
from storagetui.screens.explorer.presenter import (
    ContentsSnapshot,
    ExplorerPresenter,
    PreviewSnapshot,
    TreeRow,
    TreeSnapshot,
)
from storagetui.widgets import CatalogTree, ContentTable, SearchDialog

logger = logging.getLogger(__name__)


class ExplorerScreen(Screen[None]):
    """Three-pane catalog browser.

    The screen is the presenter's display surface: it turns key bindings into
    commands, forwards cursor moves, and renders whatever snapshots it is
    pushed. It never mutates catalog state itself.
    """

    BINDINGS = EXPLORER_SCREEN_BINDINGS

    def __init__(
        self,
        provider: CatalogProvider,
        *,
        filters: SubscriptionFilterSet | None = None,
        details_follow_content: bool = True,
    ) -> None:
        super().__init__()
        self.presenter = ExplorerPresenter(
            self,
            provider,
            filters=filters,
            details_follow_content=details_follow_content,
        )
        self._tree_rows: tuple[TreeRow, ...] | None = None
        self._contents_generation = -1

    def compose(self) -> ComposeResult:
        yield Header()
        with Horizontal(id=BODY_ID):
            with Vertical(id=TREE_PANE_ID):
                yield CatalogTree(ROOT_LABEL, id=TREE_ID)
            with Vertical(id=RIGHT_COLUMN_ID):
                yield ContentTable(id=CONTENTS_ID)
                with VerticalScroll(id=PREVIEW_ID):
                    yield Static("", id=PREVIEW_TEXT_ID)
                with VerticalScroll(id=DETAILS_ID):
                    yield Static("", id=DETAILS_TEXT_ID)
        yield Footer()

    def on_mount(self) -> None:
        tree = self.query_one(f"#{TREE_ID}", CatalogTree)
        tree.border_title = TITLE_TREE
        tree.root.expand()

        table = self.query_one(f"#{CONTENTS_ID}", ContentTable)
        table.border_title = TITLE_CONTENTS
        for label, width in CONTENT_TABLE_COLUMNS:
            table.add_column(label, width=width)

        self.query_one(f"#{PREVIEW_ID}").border_title = TITLE_PREVIEW
        details = self.query_one(f"#{DETAILS_ID}")
        details.border_title = TITLE_DETAILS
        details.can_focus = False

        self.presenter.reload()

    # =========================================================================
    # Key bindings -> commands
    # =========================================================================

    def _dispatch(self, command: Command) -> None:
        self.presenter.handle(command)

    def _dispatch_action(self, action: str) -> None:
        self._dispatch(ACTION_COMMANDS[action])

    def action_reload(self) -> None:
        self._dispatch_action("reload")

    def action_next_pane(self) -> None:
        self._dispatch_action("next_pane")

    def action_prev_pane(self) -> None:
        self._dispatch_action("prev_pane")

    def action_expand_or_activate(self) -> None:
        self._dispatch_action("expand_or_activate")

    def action_collapse_or_parent(self) -> None:
        self._dispatch_action("collapse_or_parent")

    def action_toggle_subscription(self) -> None:
        self._dispatch_action("toggle_subscription")

    def action_open_search(self) -> None:
        self._dispatch_action("open_search")

    def action_clear_search(self) -> None:
        self._dispatch_action("clear_search")

    def _on_search_closed(self, term: str | None) -> None:
        if term is None:
            self._dispatch(CANCEL_SEARCH)
        else:
            self._dispatch(Command.submit_search(term))

    # =========================================================================
    # Widget events -> presenter
    # =========================================================================

    @on(Tree.NodeHighlighted, f"#{TREE_ID}")
    def _on_tree_node_highlighted(self, event: Tree.NodeHighlighted[CatalogNode]) -> None:
        tree = self.query_one(f"#{TREE_ID}", CatalogTree)
        # Stale highlights from a tree that has since been rebuilt are dropped.
        if event.node is not tree.cursor_node or event.node.data is None:
            return
        self.presenter.tree_cursor_changed(event.node.data)

    @on(DataTable.RowHighlighted, f"#{CONTENTS_ID}")
    def _on_content_row_highlighted(self, event: DataTable.RowHighlighted) -> None:
        if event.cursor_row != event.data_table.cursor_row:
            return
        self.presenter.content_selection_changed(event.cursor_row)

    @on(DataTable.RowSelected, f"#{CONTENTS_ID}")
    def _on_content_row_selected(self, event: DataTable.RowSelected) -> None:
        self.presenter.activate_content_row(event.cursor_row)

    def on_descendant_focus(self, _event: DescendantFocus) -> None:
        pane = self._pane_of(self.focused)
        if pane is not None:
            self.presenter.focus_changed(pane)

    @staticmethod
    def _pane_of(widget: Widget | None) -> Pane | None:
        if widget is None:
            return None
        for pane, widget_id in PANE_WIDGET_IDS.items():
            if widget.id == widget_id:
                return pane
        return None

    # =========================================================================
    # Display surface
    # =========================================================================

    def show_tree(self, snapshot: TreeSnapshot) -> None:
        tree = self.query_one(f"#{TREE_ID}", CatalogTree)
        if snapshot.rows != self._tree_rows:
            self._rebuild_tree(tree, snapshot.rows)
            self._tree_rows = snapshot.rows
        if snapshot.cursor >= 0:
            tree.cursor_line = snapshot.cursor

    @staticmethod
    def _rebuild_tree(tree: CatalogTree, rows: tuple[TreeRow, ...]) -> None:
        tree.clear()
        parents = [tree.root]
        for row in rows:
            del parents[row.depth + 1:]
            parent = parents[row.depth]
            label = CatalogTree.node_label(row.node, row.label)
            if row.expandable:
                parents.append(parent.add(label, data=row.node, expand=row.expanded))
            else:
                parents.append(parent.add_leaf(label, data=row.node))

    def show_contents(self, snapshot: ContentsSnapshot) -> None:
        table = self.query_one(f"#{CONTENTS_ID}", ContentTable)
        if snapshot.generation != self._contents_generation:
            table.clear()
            for line in snapshot.rows:
                table.add_row(
                    Text(line.primary, style=ERROR_ROW_STYLE if line.is_error else ""),
                    Text(line.detail, style=DETAIL_COLUMN_STYLE, justify="right"),
                )
            table.border_title = snapshot.title
            self._contents_generation = snapshot.generation
        if snapshot.rows and table.cursor_row != snapshot.cursor:
            table.move_cursor(row=snapshot.cursor)

    def show_details(self, text: str) -> None:
        self.query_one(f"#{DETAILS_TEXT_ID}", Static).update(Text(text))

    def show_preview(self, snapshot: PreviewSnapshot) -> None:
        self.query_one(f"#{PREVIEW_ID}").border_title = snapshot.title
        self.query_one(f"#{PREVIEW_TEXT_ID}", Static).update(Text(snapshot.text))

    def focus_pane(self, pane: Pane) -> None:
        self.query_one(f"#{PANE_WIDGET_IDS[pane]}").focus()

    def open_search(self, term: str) -> None:
        self.app.push_screen(SearchDialog(term), callback=self._on_search_closed)

    def exit(self) -> None:
        self.app.exit()


__all__ = ["ExplorerScreen"]
