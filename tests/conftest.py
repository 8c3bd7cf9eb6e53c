"""Shared test fixtures."""

from __future__ import annotations

from pathlib import Path

import pytest
from loguru import logger

from foundation_mcp.config.settings import ServerConfig
from foundation_mcp.core.cache import MemoryCache
from foundation_mcp.core.filesystem import LocalFileSource

ACCORDION_JS = """\
/**
 * @class Accordion
 * @description Collapsible content panels
 */
import { Plugin } from './foundation.core.plugin';
import { Keyboard } from './foundation.util.keyboard';

export class Accordion extends Plugin {
  constructor(element, options) {
    super(element, options);
  }

  _init() {
    this.$element.attr('role', 'tablist');
    this.$element.trigger('init.zf.accordion');
  }

  _destroy() {
    this.$element.off('.zf.accordion');
  }
}
"""

DROPDOWN_MENU_JS = """\
import { Plugin } from './foundation.core.plugin';
import { Nest } from './foundation.util.nest';

class DropdownMenu extends Plugin {
  _setup(element) {
    this.$submenus = element.find('[data-submenu]');
    Nest.Feather(element, 'dropdown');
  }

  _init() {}

  _destroy() {}
}

export { DropdownMenu };
"""

MEDIA_QUERY_JS = """\
/**
 * @class MediaQuery
 * @description Breakpoint detection helpers
 */
export class MediaQuery {
  _init() {}
}
"""

CALLOUT_SCSS = """\
/// Callout padding
$callout-padding: 1rem !default;

/// Adds the basic callout styles
@mixin callout-base($padding: $callout-padding) {
  padding: $padding;
}

@mixin foundation-callout {
  .callout {
    @include callout-base;

    &.small { padding: 0.5rem; }
  }
}
"""

BUTTON_GROUP_SCSS = """\
$button-group-spacing: 1px !default;

.button-group {
  .button { margin: 0; }
}
"""


def write_foundation_checkout(root: Path) -> Path:
    """Create a miniature Foundation for Sites checkout under `root`."""
    js = root / "js"
    components = root / "scss" / "components"
    js.mkdir(parents=True)
    components.mkdir(parents=True)

    (js / "foundation.accordion.js").write_text(ACCORDION_JS)
    (js / "foundation.dropdownMenu.js").write_text(DROPDOWN_MENU_JS)
    (js / "foundation.util.mediaQuery.js").write_text(MEDIA_QUERY_JS)
    (js / "foundation.core.js").write_text("export class Foundation {}\n")
    (components / "_callout.scss").write_text(CALLOUT_SCSS)
    (components / "_button-group.scss").write_text(BUTTON_GROUP_SCSS)
    return root


@pytest.fixture
def foundation_repo(tmp_path: Path) -> Path:
    return write_foundation_checkout(tmp_path / "foundation-sites")


@pytest.fixture
def server_config(foundation_repo: Path) -> ServerConfig:
    return ServerConfig(foundation_repo_path=foundation_repo)


@pytest.fixture
def memory_cache() -> MemoryCache:
    return MemoryCache(max_size=10, ttl=60)


@pytest.fixture
def file_source() -> LocalFileSource:
    return LocalFileSource()


@pytest.fixture
def log_messages():
    """Collect WARNING-and-above loguru messages emitted during the test."""
    messages: list[str] = []
    handler_id = logger.add(messages.append, level="WARNING", format="{message}")
    yield messages
    logger.remove(handler_id)
