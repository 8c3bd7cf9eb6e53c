"""Canned answers for `query_architecture`, routed by keyword, and the
plugin architecture guide served as a resource."""

from typing import NamedTuple

from ..analysis.patterns import REQUIRED_METHODS


class ArchitectureTopic(NamedTuple):
    keyword: str
    answer: str
    examples: tuple[tuple[str, str], ...]
    related_topics: tuple[str, ...]


TOPICS: tuple[ArchitectureTopic, ...] = (
    ArchitectureTopic(
        keyword="keyboard",
        answer=(
            "Foundation plugins handle keyboard events using the Keyboard utility. "
            "Import it and register key handlers."
        ),
        examples=(
            ("js/foundation.accordion.js", "Keyboard.register('Accordion', { 'ENTER': 'toggle' });"),
        ),
        related_topics=("Accessibility", "Event Handling"),
    ),
    ArchitectureTopic(
        keyword="event",
        answer="Foundation plugins use namespaced events with .zf.pluginname format.",
        examples=(("js/foundation.reveal.js", "this.$element.trigger('open.zf.reveal');"),),
        related_topics=("jQuery Events", "Plugin Lifecycle"),
    ),
    ArchitectureTopic(
        keyword="lifecycle",
        answer=(
            "Plugins extend the Plugin base class. The constructor calls super(element, options), "
            "setup happens in _init() and teardown in _destroy(), which must remove every "
            "handler in the plugin's .zf namespace."
        ),
        examples=(
            ("js/foundation.core.plugin.js", "class Plugin { constructor(element, options) { ... } }"),
            ("js/foundation.tabs.js", "_destroy() { this.$element.off('.zf.tabs'); }"),
        ),
        related_topics=("Plugin Development", "Event Handling"),
    ),
    ArchitectureTopic(
        keyword="sass",
        answer=(
            "Components declare !default variables, expose small mixins for base styles and "
            "variations, and emit their classes from a single foundation-<component> mixin."
        ),
        examples=(
            ("scss/components/_button.scss", "@mixin foundation-button { .button { @include button; } }"),
        ),
        related_topics=("Component Styling", "Theming"),
    ),
)

FALLBACK_ANSWER = "Please refer to the Foundation documentation for detailed architecture guidance."
FALLBACK_TOPICS = ("Plugin Development", "Component Styling")


def answer_question(question: str) -> dict:
    lowered = question.lower()
    for topic in TOPICS:
        if topic.keyword in lowered:
            return {
                "answer": topic.answer,
                "examples": [{"file": file, "snippet": snippet} for file, snippet in topic.examples],
                "relatedTopics": list(topic.related_topics),
            }
    return {"answer": FALLBACK_ANSWER, "examples": [], "relatedTopics": list(FALLBACK_TOPICS)}


def plugin_architecture() -> dict:
    """Plugin lifecycle contract that `PatternAnalyzer` scores against."""
    return {
        "baseClass": "Plugin",
        "baseClassPath": "js/foundation.core.plugin.js",
        "lifecycle": {
            "constructor": {
                "description": "Called when plugin instance is created",
                "parameters": ["element", "options"],
            },
            "_init": {
                "description": "Initialize the plugin",
                "hooks": ["_addEventListeners", "_bindEvents"],
            },
            "_destroy": {
                "description": "Clean up when plugin is destroyed",
                "responsibilities": ["Remove event listeners", "Clean up DOM", "Reset state"],
            },
        },
        "patterns": {
            "eventHandling": {
                "description": "How to add event handlers",
                "example": "this.$element.on('click.zf.plugin', handler);",
            },
            "dataAttributes": {
                "description": "Using data attributes for configuration",
                "example": '[data-plugin][data-options="option: value;"]',
            },
        },
        "requiredMethods": list(REQUIRED_METHODS),
        "optionalPatterns": ["_addEventListeners", "_setupKeyboard"],
    }
