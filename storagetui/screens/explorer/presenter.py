"""Explorer presenter - session state, command dispatch and view pushes.

The presenter owns every piece of mutable UI state in one ``SessionState`` and
is the only thing that mutates it. Each entry point runs synchronously,
recomputes a ``ViewState`` snapshot and pushes the parts that changed to the
display surface. A display can therefore be swapped for a recording fake in
tests without touching Textual.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any, Protocol

from storagetui.constants.enums import CommandKind, NodeKind, Pane
from storagetui.constants.values import (
    MSG_NO_PREVIEW,
    MSG_NO_SELECTION,
    MSG_SELECT_ACCOUNT,
    MSG_SELECT_BLOB,
    MSG_SELECT_CONTAINER,
    MSG_SELECT_SUBSCRIPTION,
    MSG_SUBSCRIPTION_DISABLED,
    MSG_UNABLE_TO_LOAD,
)
from storagetui.controllers.base import CatalogProvider, ProviderError
from storagetui.controllers.navigation import (
    ContentListProjection,
    ContentRow,
    PaneFocusController,
    SubscriptionFilterSet,
    TreeModel,
    details_text,
)
from storagetui.controllers.preview import PreviewPipeline
from storagetui.controllers.preview.renderer import render_blob_preview
from storagetui.keyboard.commands import Command
from storagetui.models.tree import BlobRef, Breadcrumb, CatalogNode

logger = logging.getLogger(__name__)


# =============================================================================
# View snapshots
# =============================================================================


@dataclass(frozen=True)
class TreeRow:
    """One visible tree line. ``depth`` is 0 for subscriptions."""

    node: CatalogNode
    depth: int
    label: str
    expanded: bool
    expandable: bool


@dataclass(frozen=True)
class TreeSnapshot:
    rows: tuple[TreeRow, ...] = ()
    cursor: int = -1


@dataclass(frozen=True)
class ContentLine:
    primary: str
    detail: str
    is_error: bool = False


@dataclass(frozen=True)
class ContentsSnapshot:
    """Content rows plus the rebuild generation they belong to."""

    title: str
    rows: tuple[ContentLine, ...]
    generation: int
    cursor: int


@dataclass(frozen=True)
class PreviewSnapshot:
    title: str
    text: str


@dataclass(frozen=True)
class ViewState:
    """Everything the display shows, recomputed after each command."""

    tree: TreeSnapshot
    contents: ContentsSnapshot
    details: str
    preview: PreviewSnapshot
    focus: Pane
    search_open: bool


class DisplaySurface(Protocol):
    """Rendering side of the explorer."""

    def show_tree(self, snapshot: TreeSnapshot) -> None: ...

    def show_contents(self, snapshot: ContentsSnapshot) -> None: ...

    def show_details(self, text: str) -> None: ...

    def show_preview(self, snapshot: PreviewSnapshot) -> None: ...

    def focus_pane(self, pane: Pane) -> None: ...

    def open_search(self, term: str) -> None: ...

    def exit(self) -> None: ...


# =============================================================================
# Session state
# =============================================================================


@dataclass
class SessionState:
    """All mutable state of one explorer session."""

    tree: TreeModel
    contents: ContentListProjection
    focus: PaneFocusController = field(default_factory=PaneFocusController)
    preview: PreviewPipeline = field(default_factory=PreviewPipeline)
    current: CatalogNode | None = None
    details: str = MSG_NO_SELECTION

    @classmethod
    def create(
        cls,
        provider: CatalogProvider,
        filters: SubscriptionFilterSet | None = None,
    ) -> SessionState:
        tree = TreeModel(provider, filters)
        state = cls(tree=tree, contents=ContentListProjection(provider))
        state.current = tree.root
        state.preview.set_content(MSG_SELECT_BLOB, searchable=False)
        return state

    @property
    def filters(self) -> SubscriptionFilterSet:
        return self.tree.filters


# =============================================================================
# Presenter
# =============================================================================


class ExplorerPresenter:
    """Dispatches commands against the session and keeps the display in sync.

    Provider failures never escape: each one is logged by the component that
    hit it and reported here as ``Error loading <scope>: <message>`` in the
    details panel with ``Unable to load data.`` in the preview.
    """

    def __init__(
        self,
        display: DisplaySurface,
        provider: CatalogProvider,
        *,
        filters: SubscriptionFilterSet | None = None,
        details_follow_content: bool = True,
    ) -> None:
        self.display = display
        self.state = SessionState.create(provider, filters)
        self.details_follow_content = details_follow_content
        self._pushed: dict[str, object] = {}
        self._handlers = {
            CommandKind.QUIT: self._quit,
            CommandKind.RELOAD: self._reload,
            CommandKind.NEXT_PANE: self._next_pane,
            CommandKind.PREV_PANE: self._prev_pane,
            CommandKind.EXPAND_OR_ACTIVATE: self._expand_or_activate,
            CommandKind.COLLAPSE_OR_PARENT: self._collapse_or_parent,
            CommandKind.TOGGLE_SUBSCRIPTION: self._toggle_subscription,
            CommandKind.OPEN_SEARCH: self._open_search,
            CommandKind.SUBMIT_SEARCH: self._submit_search,
            CommandKind.CANCEL_SEARCH: self._cancel_search,
            CommandKind.CLEAR_SEARCH: self._clear_search,
        }

    # =========================================================================
    # Public entry points
    # =========================================================================

    def reload(self) -> ViewState:
        """Load the catalog from scratch and push the first view."""
        self._reload(Command(CommandKind.RELOAD))
        return self._sync()

    def handle(self, command: Command) -> ViewState:
        """Run one decoded command.

        Commands that do not apply to the current focus, node or overlay state
        are ignored.
        """
        if not self.state.focus.accepts(command.kind):
            logger.debug("Ignoring %s command", command.kind.value)
            return self.view()
        self._handlers[command.kind](command)
        return self._sync()

    def tree_cursor_changed(self, node: CatalogNode) -> ViewState:
        """The tree cursor moved onto ``node``."""
        if self.state.focus.search_open or node is self.state.current:
            return self.view()
        self._on_tree_changed(node)
        return self._sync()

    def content_selection_changed(self, index: int) -> ViewState:
        """The content cursor moved to ``index``."""
        state = self.state
        if state.focus.search_open or index == state.contents.selected:
            return self.view()
        row = state.contents.select(index)
        if row is None:
            return self.view()
        self._preview_row(row)
        if self.details_follow_content and state.focus.pane in (Pane.CONTENTS, Pane.PREVIEW):
            state.details = self._row_details(row)
        return self._sync()

    def activate_content_row(self, index: int) -> ViewState:
        """Activate a content row; blob rows pull focus to the contents pane."""
        if self.state.focus.search_open:
            return self.view()
        self._activate_row(index)
        return self._sync()

    def focus_changed(self, pane: Pane) -> ViewState:
        """Focus moved by means other than a command, e.g. a mouse click."""
        focus = self.state.focus
        if focus.search_open or pane is focus.pane:
            return self.view()
        self._enter_pane(pane)
        return self._sync()

    def disabled_subscriptions(self) -> list[str]:
        return self.state.filters.disabled_ids()

    # =========================================================================
    # Command handlers
    # =========================================================================

    def _quit(self, _command: Command) -> None:
        logger.info("Quit requested")
        self.display.exit()

    def _reload(self, _command: Command) -> None:
        state = self.state
        try:
            state.tree.load_root()
        except ProviderError as exc:
            self._on_tree_changed(state.tree.first_node())
            self._refresh_details(force=True)
            self._report_error(exc)
            return

        self._on_tree_changed(state.tree.first_node())
        self._refresh_details(force=True)
        if state.tree.load_errors:
            self._report_error(state.tree.load_errors[0])

    def _next_pane(self, _command: Command) -> None:
        self._enter_pane(self.state.focus.next_pane())

    def _prev_pane(self, _command: Command) -> None:
        self._enter_pane(self.state.focus.previous_pane())

    def _expand_or_activate(self, _command: Command) -> None:
        state = self.state
        pane = state.focus.pane
        if pane is Pane.CONTENTS:
            self._activate_row(state.contents.selected)
            return
        node = state.current
        if pane is not Pane.TREE or node is None:
            return
        if node.kind is NodeKind.BLOB:
            index = self._content_index_of(node)
            if index is not None:
                self._activate_row(index)
            return
        if node.kind is NodeKind.ROOT or not node.can_have_children:
            return
        result = state.tree.toggle_expanded(node)
        if result.error is not None:
            self._report_error(result.error)

    def _collapse_or_parent(self, _command: Command) -> None:
        state = self.state
        node = state.current
        if state.focus.pane is not Pane.TREE or node is None:
            return
        if node.expanded and node.children:
            state.tree.collapse(node)
            return
        parent = state.tree.parent_of(node)
        if parent is not None and parent.kind is not NodeKind.ROOT:
            self._on_tree_changed(parent)

    def _toggle_subscription(self, _command: Command) -> None:
        state = self.state
        node = state.current
        if state.focus.pane is not Pane.TREE or node is None or node.kind is not NodeKind.SUBSCRIPTION:
            return
        result = state.tree.toggle_subscription_enabled(node)
        enabled = state.filters.is_enabled(node.ref.id)
        logger.info("Subscription %s %s", node.name, "enabled" if enabled else "disabled")

        self._refresh_details()
        if enabled:
            self._show_message(MSG_SELECT_ACCOUNT, node.breadcrumb)
        else:
            self._show_message(MSG_SUBSCRIPTION_DISABLED, node.breadcrumb)
        if result.error is not None:
            self._report_error(result.error)

    def _open_search(self, _command: Command) -> None:
        state = self.state
        if state.focus.pane is not Pane.PREVIEW or not state.preview.searchable:
            return
        state.focus.open_search()
        self.display.open_search(state.preview.term)

    def _submit_search(self, command: Command) -> None:
        self.state.preview.apply_search(command.term)
        self.state.focus.close_search()

    def _cancel_search(self, _command: Command) -> None:
        self.state.preview.clear_search()
        self.state.focus.close_search()

    def _clear_search(self, _command: Command) -> None:
        state = self.state
        if state.focus.pane is not Pane.PREVIEW or not state.preview.has_filter:
            return
        state.preview.clear_search()

    # =========================================================================
    # State transitions
    # =========================================================================

    def _on_tree_changed(self, node: CatalogNode) -> None:
        """Move the tree cursor and re-derive contents, preview and details."""
        state = self.state
        state.current = node
        self._refresh_details()

        kind = node.kind
        if kind is NodeKind.CONTAINER:
            result = state.contents.load_for(node)
            if result.error is not None:
                self._report_error(result.error)
            else:
                self._preview_row(state.contents.selected_row)
        elif kind is NodeKind.BLOB:
            self._preview_blob(node.ref)
        elif kind is NodeKind.ACCOUNT:
            self._show_message(MSG_SELECT_CONTAINER, node.breadcrumb)
        elif kind is NodeKind.SUBSCRIPTION:
            if state.filters.is_enabled(node.ref.id):
                self._show_message(MSG_SELECT_ACCOUNT, node.breadcrumb)
            else:
                self._show_message(MSG_SUBSCRIPTION_DISABLED, node.breadcrumb)
        elif kind is NodeKind.PLACEHOLDER:
            self._show_message(node.ref.message, node.breadcrumb)
        else:
            self._show_message(MSG_SELECT_SUBSCRIPTION)

    def _enter_pane(self, pane: Pane) -> None:
        focus = self.state.focus
        focus.focus(pane)
        if focus.refreshes_details(pane):
            self._refresh_details(force=True)

    def _activate_row(self, index: int) -> None:
        state = self.state
        row = state.contents.row(index)
        if row is None or not row.is_blob:
            return
        if index != state.contents.selected:
            state.contents.select(index)
            self._preview_row(row)
        self._enter_pane(Pane.CONTENTS)

    def _refresh_details(self, *, force: bool = False) -> None:
        """Recompute details for the focused pane.

        Outside the tree pane details describe the selected content row, but
        only with ``force``; a tree cursor move alone leaves them as they are.
        """
        state = self.state
        pane = state.focus.pane
        if pane is Pane.TREE:
            node = state.current
            state.details = (
                details_text(node.ref, node.breadcrumb, state.filters)
                if node is not None
                else MSG_NO_SELECTION
            )
        elif force:
            row = state.contents.selected_row
            state.details = self._row_details(row) if row is not None else MSG_NO_SELECTION

    def _row_details(self, row: ContentRow) -> str:
        return details_text(row.ref, row.breadcrumb, self.state.filters)

    def _show_message(self, message: str, breadcrumb: Breadcrumb | None = None) -> None:
        self.state.contents.show_message(message, breadcrumb)
        self.state.preview.set_content(MSG_SELECT_BLOB, searchable=False)

    def _preview_row(self, row: ContentRow | None) -> None:
        if row is None:
            self.state.preview.set_content(MSG_SELECT_BLOB, searchable=False)
        elif isinstance(row.ref, BlobRef):
            self._preview_blob(row.ref)
        else:
            self.state.preview.set_content(MSG_NO_PREVIEW, searchable=False)

    def _preview_blob(self, blob: BlobRef) -> None:
        text, searchable = render_blob_preview(blob)
        self.state.preview.set_content(text, searchable)

    def _report_error(self, error: ProviderError) -> None:
        self.state.details = error.describe()
        self.state.preview.set_content(MSG_UNABLE_TO_LOAD, searchable=False)

    def _content_index_of(self, node: CatalogNode) -> int | None:
        for index, row in enumerate(self.state.contents.rows):
            if row.ref == node.ref and row.breadcrumb == node.breadcrumb:
                return index
        return None

    # =========================================================================
    # View building
    # =========================================================================

    def view(self) -> ViewState:
        state = self.state
        return ViewState(
            tree=self._tree_snapshot(),
            contents=ContentsSnapshot(
                title=state.contents.title,
                rows=tuple(
                    ContentLine(row.primary_text, row.detail_text, row.is_error)
                    for row in state.contents.rows
                ),
                generation=state.contents.generation,
                cursor=state.contents.selected,
            ),
            details=state.details,
            preview=PreviewSnapshot(
                title=state.preview.title,
                text=state.preview.displayed_text,
            ),
            focus=state.focus.pane,
            search_open=state.focus.search_open,
        )

    def _tree_snapshot(self) -> TreeSnapshot:
        state = self.state
        rows: list[TreeRow] = []
        cursor = -1
        for node in state.tree.visible_nodes():
            if node is state.current:
                cursor = len(rows)
            rows.append(
                TreeRow(
                    node=node,
                    depth=node.depth - 1,
                    label=node.label,
                    expanded=node.expanded,
                    expandable=self._expandable(node),
                )
            )
        return TreeSnapshot(rows=tuple(rows), cursor=cursor)

    def _expandable(self, node: CatalogNode) -> bool:
        if node.kind is NodeKind.SUBSCRIPTION:
            return self.state.filters.is_enabled(node.ref.id)
        return node.can_have_children

    def _sync(self) -> ViewState:
        """Push every surface whose value changed since the last push."""
        view = self.view()
        display = self.display
        self._push("tree", view.tree, display.show_tree)
        self._push("contents", view.contents, display.show_contents)
        self._push("details", view.details, display.show_details)
        self._push("preview", view.preview, display.show_preview)
        if not view.search_open:
            self._push("focus", view.focus, display.focus_pane)
        return view

    def _push(self, surface: str, value: object, show: Callable[[Any], None]) -> None:
        if surface in self._pushed and self._pushed[surface] == value:
            return
        self._pushed[surface] = value
        show(value)


__all__ = [
    "ContentLine",
    "ContentsSnapshot",
    "DisplaySurface",
    "ExplorerPresenter",
    "PreviewSnapshot",
    "SessionState",
    "TreeRow",
    "TreeSnapshot",
    "ViewState",
]
