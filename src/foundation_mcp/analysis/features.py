"""Keyword tables mapping detected source features to catalog targets.

Each table is scanned in order; the order is also the ranking order of
the resulting suggestions.
"""

from typing import NamedTuple


class FeatureRule(NamedTuple):
    feature: str
    keywords: tuple[str, ...]
    target_name: str
    target_slug: str

    def detect(self, lowered_source: str) -> bool:
        return any(keyword in lowered_source for keyword in self.keywords)


PLUGIN_FEATURES: tuple[FeatureRule, ...] = (
    FeatureRule("dropdown", ("dropdown", "menu", "select"), "Dropdown", "dropdown"),
    FeatureRule("accordion", ("accordion", "toggle", "expand"), "Accordion", "accordion"),
    FeatureRule("modal", ("modal", "dialog", "overlay"), "Reveal", "reveal"),
    FeatureRule("carousel", ("carousel", "slider", "rotation"), "Orbit", "orbit"),
    FeatureRule("tooltip", ("tooltip", "popover", "hint"), "Tooltip", "tooltip"),
    FeatureRule("form", ("form", "validate", "validation"), "Abide", "abide"),
)

COMPONENT_FEATURES: tuple[FeatureRule, ...] = (
    FeatureRule("button", ("button", "btn"), "Button", "button"),
    FeatureRule("card", ("card", "panel", "box"), "Card", "card"),
    FeatureRule("badge", ("badge", "label", "tag"), "Badge", "badge"),
    FeatureRule("alert", ("alert", "message", "notification"), "Callout", "callout"),
    FeatureRule("callout", ("callout", "notice", "info"), "Callout", "callout"),
    FeatureRule("grid", ("grid", "layout", "column"), "XY Grid", "xy-grid"),
)


def detect_features(source: str, rules: tuple[FeatureRule, ...]) -> list[FeatureRule]:
    """Return the rules whose keywords occur in `source` (case-insensitive)."""
    lowered = source.lower()
    return [rule for rule in rules if rule.detect(lowered)]
