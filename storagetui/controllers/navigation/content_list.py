"""Flat blob listing for the currently open container."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from storagetui.constants.enums import NodeKind
from storagetui.constants.values import (
    MSG_ERROR_DATA,
    MSG_NO_BLOBS_IN_CONTAINER,
    TITLE_CONTENTS,
)
from storagetui.controllers.base import CatalogProvider, LoadResult, ProviderError
from storagetui.controllers.navigation.tree_model import blob_ref
from storagetui.models.tree import (
    BlobRef,
    Breadcrumb,
    CatalogNode,
    PlaceholderRef,
)
from storagetui.utils.formatting import format_bytes, format_time

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ContentRow:
    """One line of the contents pane. Its index is its only identity."""

    ref: BlobRef | PlaceholderRef
    breadcrumb: Breadcrumb

    @property
    def is_blob(self) -> bool:
        return self.ref.kind == NodeKind.BLOB

    @property
    def is_error(self) -> bool:
        return isinstance(self.ref, PlaceholderRef) and self.ref.is_error

    @property
    def primary_text(self) -> str:
        return self.ref.name

    @property
    def detail_text(self) -> str:
        if not isinstance(self.ref, BlobRef):
            return ""
        return " | ".join(
            (
                self.ref.content_type,
                format_bytes(self.ref.size_bytes),
                format_time(self.ref.modified),
            )
        )


class ContentListProjection:
    """Rows derived from the selected container.

    Rows are rebuilt wholesale on every load; ``generation`` counts rebuilds so
    a display can tell a fresh listing from an identical-looking old one.
    """

    def __init__(self, provider: CatalogProvider) -> None:
        self._provider = provider
        self.rows: list[ContentRow] = []
        self.title: str = TITLE_CONTENTS
        self.selected: int = 0
        self.generation: int = 0

    def load_for(self, container: CatalogNode) -> LoadResult:
        """List the container's blobs.

        A failure replaces the rows with one error row and is returned, not
        raised.
        """
        if container.kind != NodeKind.CONTAINER:
            raise ValueError(f"cannot list contents of a {container.kind.value} node")
        crumb = container.breadcrumb
        try:
            blobs = self._provider.list_blobs(crumb.account, container.name)
        except ProviderError as exc:
            logger.warning("Listing blobs of %s/%s failed: %s", crumb.account, container.name, exc)
            self._rebuild(
                [ContentRow(PlaceholderRef(MSG_ERROR_DATA, is_error=True), crumb)],
                TITLE_CONTENTS,
            )
            return LoadResult.failed(exc)

        rows = [ContentRow(blob_ref(blob), crumb) for blob in blobs]
        if not rows:
            rows = [ContentRow(PlaceholderRef(MSG_NO_BLOBS_IN_CONTAINER), crumb)]
        self._rebuild(rows, f"{TITLE_CONTENTS}: {crumb.account}/{container.name}")
        return LoadResult.ok()

    def show_message(self, message: str, breadcrumb: Breadcrumb | None = None) -> None:
        """Replace the listing with a single informational row."""
        self._rebuild([ContentRow(PlaceholderRef(message), breadcrumb or Breadcrumb())], TITLE_CONTENTS)

    def _rebuild(self, rows: list[ContentRow], title: str) -> None:
        self.rows = rows
        self.title = title
        self.selected = 0
        self.generation += 1

    def row(self, index: int) -> ContentRow | None:
        if 0 <= index < len(self.rows):
            return self.rows[index]
        return None

    def select(self, index: int) -> ContentRow | None:
        """Move the selection; out-of-range indices leave it unchanged."""
        row = self.row(index)
        if row is not None:
            self.selected = index
        return row

    @property
    def selected_row(self) -> ContentRow | None:
        return self.row(self.selected)


__all__ = ["ContentListProjection", "ContentRow"]
