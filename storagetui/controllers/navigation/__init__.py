"""Navigation engine: tree model, subscription filter, contents and pane focus."""

from storagetui.controllers.navigation.content_list import ContentListProjection, ContentRow
from storagetui.controllers.navigation.details import details_text
from storagetui.controllers.navigation.pane_focus import PANE_CYCLE, PaneFocusController
from storagetui.controllers.navigation.subscription_filter import SubscriptionFilterSet
from storagetui.controllers.navigation.tree_model import TreeModel

__all__ = [
    "PANE_CYCLE",
    "ContentListProjection",
    "ContentRow",
    "PaneFocusController",
    "SubscriptionFilterSet",
    "TreeModel",
    "details_text",
]
