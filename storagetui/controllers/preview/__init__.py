"""Preview rendering and search filtering."""

from storagetui.controllers.preview.pipeline import PreviewPipeline, PreviewState, apply_filter
from storagetui.controllers.preview.renderer import render_blob_preview

__all__ = ["PreviewPipeline", "PreviewState", "apply_filter", "render_blob_preview"]
