"""Canonical migration text for the refactoring analyzer.

None of this is derived from the input source; the before/after pairs
are fixed illustrations of the conventions a migration has to adopt.
"""

PLUGIN_MIGRATION_STEPS = (
    "1. Review Foundation plugin architecture and lifecycle methods",
    "2. Extend Foundation Plugin base class instead of custom base",
    "3. Implement required methods (_init, _destroy)",
    "4. Use Foundation Keyboard utility for keyboard events",
    "5. Replace custom events with Foundation event namespacing (.zf.pluginname)",
    "6. Use Foundation data attributes for configuration",
    "7. Implement accessibility with ARIA attributes",
    "8. Add unit tests following Foundation test patterns",
)

COMPONENT_MIGRATION_STEPS = (
    "1. Review Foundation component structure and mixins",
    "2. Align variable naming with Foundation conventions ($component-name)",
    "3. Convert to Foundation mixin-based approach",
    "4. Implement foundation-{component} mixin for inclusion",
    "5. Add color and size variations using Foundation palette",
    "6. Use rem-calc() for responsive spacing",
    "7. Ensure accessibility with semantic HTML",
    "8. Add Sass tests using sass-true framework",
)

PLUGIN_REFERENCE_STEP = "0. Study {name} plugin as reference implementation"
COMPONENT_REFERENCE_STEP = "0. Study {name} component as reference"

PLUGIN_BEFORE = """\
// Custom plugin
class CustomDropdown {
  constructor(element, options) {
    this.element = element;
    this.options = options;
    this.init();
  }

  init() {
    this.element.addEventListener('click', () => this.toggle());
  }

  toggle() {
    this.element.classList.toggle('active');
    this.element.dispatchEvent(new Event('toggle'));
  }

  destroy() {
    this.element.removeEventListener('click', null);
  }
}"""

PLUGIN_AFTER = """\
// Foundation plugin
import { Plugin } from './foundation.core.plugin';

export class CustomDropdown extends Plugin {
  constructor(element, options = {}) {
    super(element, options);
  }

  _init() {
    this._addEventListeners();
  }

  _addEventListeners() {
    this.$element.on('click.zf.customdropdown', () => this.toggle());
  }

  toggle() {
    this.$element.toggleClass('is-active');
    this.$element.trigger('toggle.zf.customdropdown');
  }

  _destroy() {
    this.$element.off('.zf.customdropdown');
  }
}

CustomDropdown.defaults = {};"""

PLUGIN_CHANGES = (
    "Extends Plugin base class",
    "Constructor calls super()",
    "_init() instead of init()",
    "_destroy() for cleanup",
    "Uses jQuery ($element)",
    "Event namespacing with .zf.*",
    "Bootstrap method naming conventions",
)

COMPONENT_BEFORE = """\
// Custom component
$button-padding: 10px 15px;
$button-background: #007bff;
$button-color: white;

.button {
  padding: $button-padding;
  background-color: $button-background;
  color: $button-color;
  border: none;
  cursor: pointer;

  &:hover {
    background-color: darken($button-background, 10%);
  }

  &.primary {
    background-color: #0056b3;
  }

  &.secondary {
    background-color: #6c757d;
  }
}"""

COMPONENT_AFTER = """\
// Foundation component
$button-padding: rem-calc(12 24) !default;
$button-background: $primary-color !default;
$button-color: color-pick-contrast($button-background) !default;
$button-border-radius: $global-radius !default;

/// Mixin to create button base styles
@mixin button-base {
  padding: $button-padding;
  background-color: $button-background;
  color: $button-color;
  border: 1px solid $button-background;
  border-radius: $button-border-radius;
  cursor: pointer;
  transition: all 0.3s ease;

  &:hover {
    background-color: shade($button-background, 10%);
  }
}

/// Mixin to style button variants
@mixin button-style($bg: $button-background, $color: $button-color) {
  background-color: $bg;
  color: color-pick-contrast($bg);
  border-color: $bg;
}

/// Output button component
@mixin foundation-button {
  .button {
    @include button-base;

    @each $name, $color in $foundation-palette {
      &.\\#{$name} {
        @include button-style($color);
      }
    }
  }
}"""

COMPONENT_CHANGES = (
    "Variables use rem-calc for responsive sizing",
    "Variables marked with !default for overridability",
    "Organized into reusable mixins",
    "Uses Foundation color palette",
    "Foundation naming conventions",
    "Includes mixin documentation",
    "Supports color variations automatically",
)

PLUGIN_TRAILING_BREAKING_CHANGES = (
    "Data attribute format changes to [data-{slug}]",
    "Selector changes to use Foundation data attributes",
    "Event namespace changes to .zf.{pluginname}",
)

COMPONENT_TRAILING_BREAKING_CHANGES = (
    "CSS class naming may change to align with Foundation conventions",
    "Layout assumptions may conflict with Foundation grid system",
)

PLUGIN_APPROACH = """\
We recommend migrating to Foundation's {name} which provides:
- Consistent plugin architecture and lifecycle management
- Built-in accessibility features (ARIA, keyboard navigation)
- jQuery integration and event handling
- Comprehensive browser compatibility
- Integration with Foundation utility functions

Start by studying the Foundation plugin, then refactor your code to extend the Plugin base class.
This approach ensures consistency and long-term maintainability."""

COMPONENT_APPROACH = """\
We recommend migrating to Foundation's {name} which provides:
- Responsive design with rem-calc() scaling
- Customizable variables with !default flags
- Pre-built color and size variations
- Accessibility-first styling approach
- Integration with Foundation's design system

Refactor your Sass to use Foundation's mixin structure and variable naming conventions.
This enables theme customization and ensures consistency with the rest of Foundation."""

PLUGIN_FALLBACK_NAME = "equivalent plugin"
COMPONENT_FALLBACK_NAME = "equivalent component"


def plugin_integration_guide(slug: str = "myplugin", name: str = "MyPlugin") -> list[str]:
    return [
        f"1. Create new file: js/foundation.{slug}.js",
        'Import Plugin base class: import { Plugin } from "./foundation.core.plugin";',
        f"Export class: export {{ {name} }};",
        "2. Register plugin in js/entries/foundation.js:",
        f"   import {{ {name} }} from '../foundation.{slug}';",
        f"   Foundation.plugin({name}, '{name}');",
        f"3. Create test file: test/javascript/{slug}.spec.js",
        f"4. Add documentation: docs/pages/{slug}.md",
        "5. Run tests: yarn test:javascript:units",
        "6. Build and verify: yarn build",
    ]


def component_integration_guide(slug: str = "mycomponent") -> list[str]:
    return [
        f"1. Create new file: scss/components/_{slug}.scss",
        "Define variables with !default flags",
        "Create reusable mixins for styling",
        f"Create main @mixin foundation-{slug}",
        "2. Import in scss/foundation.scss:",
        f"   @import 'components/{slug}';",
        "3. Include in foundation-everything mixin",
        f"4. Create test file: test/sass/components/_{slug}.scss",
        f"5. Add documentation: docs/pages/{slug}.md",
        "6. Run tests: yarn test:sass",
        "7. Build and verify: yarn build",
    ]
