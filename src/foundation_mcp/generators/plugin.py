"""Boilerplate generator for Foundation JavaScript plugins."""

from loguru import logger

from ..core.models import GeneratedFile, GeneratePluginParams, GenerationResult


class PluginGenerator:
    """Generates a plugin module, its unit test and its docs page."""

    def generate(self, params: GeneratePluginParams) -> GenerationResult:
        logger.info(f"Generating plugin {params.name}")
        try:
            files = {
                "plugin": GeneratedFile(
                    path=f"js/foundation.{params.slug}.js",
                    content=self.plugin_code(params),
                )
            }
            if params.include_tests:
                files["test"] = GeneratedFile(
                    path=f"test/javascript/{params.slug}.spec.js",
                    content=self.test_code(params),
                )
            if params.include_docs:
                files["docs"] = GeneratedFile(
                    path=f"docs/pages/{params.slug}.md",
                    content=self.docs_markdown(params),
                )
            return GenerationResult(
                status="success",
                files=files,
                integration_steps=self.integration_steps(params),
            )
        except Exception as e:
            logger.error(f"Failed to generate plugin {params.name}: {e}")
            return GenerationResult(status="error", error=str(e))

    def plugin_code(self, params: GeneratePluginParams) -> str:
        name, slug = params.name, params.slug
        selector = params.selector or f"[data-{slug}]"
        features = params.features

        imports = ["import { Plugin } from './foundation.core.plugin';"]
        if features.keyboard:
            imports.append("import { Keyboard } from './foundation.util.keyboard';")
        if features.nesting:
            imports.append("import { Nest } from './foundation.util.nest';")

        fires = [f" * @fires {name}#init"]
        fires += [f" * @fires {name}#{event}" for event in features.events]
        fires.append(f" * @fires {name}#destroyed")

        init_body = []
        if features.state_management:
            init_body.append("    this.isActive = false;")
        init_body.append(
            "    this.$element.attr({ 'role': 'region', 'aria-expanded': 'false' });"
        )
        if features.nesting:
            init_body.append(f"    Nest.Feather(this.$element, '{slug}');")
        init_body.append("    this._events();")

        if features.state_management:
            toggle_body = (
                "    if (this.isActive) {\n"
                "      this.close();\n"
                "    } else {\n"
                "      this.open();\n"
                "    }"
            )
        else:
            toggle_body = (
                "    this.$element.toggleClass('is-active');\n"
                "    this.$element.attr('aria-expanded', this.$element.hasClass('is-active'));"
            )

        destroy_body = [f"    this.$element.off('.zf.{slug}');"]
        if features.nesting:
            destroy_body.append(f"    Nest.Burn(this.$element, '{slug}');")

        imports_text = "\n".join(imports)
        fires_text = "\n".join(fires)
        init_body_text = "\n".join(init_body)
        destroy_body_text = "\n".join(destroy_body)
        keyboard_call = "    this._setupKeyboard();\n" if features.keyboard else ""

        sections = [
            f"""/**
 * {name} plugin.
 * {params.description}
 * @module foundation.{slug}
 */

{imports_text}

/**
 * {name} plugin.
 * @class
 * @name {name}
{fires_text}
 */
class {name} extends Plugin {{
  /**
   * Creates a new instance of {name}.
   * @class
   * @name {name}
   * @param {{jQuery}} element - jQuery object to make into a {name}.
   *        Object should be of the {selector} attribute.
   * @param {{Object}} options - Overrides to the default plugin settings.
   */
  constructor(element, options = {{}}) {{
    super(element, options);

    this._init();
{keyboard_call}
    /**
     * Fires when the plugin has been successfully initialized.
     * @event {name}#init
     */
    this.$element.trigger('init.zf.{slug}');
  }}

  /**
   * Initializes the {name} plugin.
   * @function
   * @private
   */
  _init() {{
{init_body_text}
  }}

  /**
   * Adds event handlers for the {name}.
   * @function
   * @private
   */
  _events() {{
    this.$element.on({{
      'click.zf.{slug}': this.toggle.bind(this)
    }});
  }}
"""
        ]

        if features.keyboard:
            sections.append(
                f"""
  /**
   * Sets up keyboard event handlers.
   * @function
   * @private
   */
  _setupKeyboard() {{
    Keyboard.register('{name}', {{
      'ENTER': 'open',
      'SPACE': 'open',
      'ESCAPE': 'close'
    }});

    this.$element.attr('tabindex', 0);
    this.$element.on('keydown.zf.{slug}', Keyboard.handleKey.bind(this));
  }}
"""
            )

        sections.append(
            f"""
  /**
   * Toggles the {name}.
   * @function
   */
  toggle() {{
{toggle_body}
  }}
"""
        )

        if features.state_management:
            sections.append(
                f"""
  /**
   * Opens the {name}.
   * @function
   * @fires {name}#open
   */
  open() {{
    if (this.isActive) return;

    this.isActive = true;
    this.$element.addClass('is-active').attr('aria-expanded', 'true');
    this.$element.focus();

    /**
     * Fires when the {name} is opened.
     * @event {name}#open
     */
    this.$element.trigger('open.zf.{slug}');
  }}

  /**
   * Closes the {name}.
   * @function
   * @fires {name}#close
   */
  close() {{
    if (!this.isActive) return;

    this.isActive = false;
    this.$element.removeClass('is-active').attr('aria-expanded', 'false');

    /**
     * Fires when the {name} is closed.
     * @event {name}#close
     */
    this.$element.trigger('close.zf.{slug}');
  }}
"""
            )

        sections.append(
            f"""
  /**
   * Destroys an instance of {name}.
   * @function
   */
  _destroy() {{
{destroy_body_text}
  }}
}}

{name}.defaults = {{
  // Add default options here
}};

export {{ {name} }};
"""
        )
        return "".join(sections)

    def test_code(self, params: GeneratePluginParams) -> str:
        name, slug = params.name, params.slug
        return f"""describe('{name}', function() {{
  var plugin;
  var $html;

  afterEach(function() {{
    plugin.destroy();
    $html.remove();
  }});

  describe('constructor()', function() {{
    it('stores the element and plugin options', function() {{
      $html = $('<div data-{slug}></div>').appendTo('body');
      plugin = new Foundation.{name}($html, {{}});

      $html.data('zf{name}').should.be.an.instanceof(Foundation.{name});
    }});
  }});

  describe('init()', function() {{
    it('sets ARIA attributes on the element', function() {{
      $html = $('<div data-{slug}></div>').appendTo('body');
      plugin = new Foundation.{name}($html, {{}});

      $html.should.have.attr('aria-expanded', 'false');
    }});
  }});

  describe('toggle()', function() {{
    it('toggles the {slug}', function() {{
      $html = $('<div data-{slug}></div>').appendTo('body');
      plugin = new Foundation.{name}($html, {{}});

      plugin.toggle();
      $html.should.have.class('is-active');
    }});
  }});

  describe('destroy()', function() {{
    it('cleans up event listeners', function() {{
      $html = $('<div data-{slug}></div>').appendTo('body');
      plugin = new Foundation.{name}($html, {{}});

      plugin.destroy();

      should.not.exist($html.data('zf{name}'));
    }});
  }});
}});
"""

    def docs_markdown(self, params: GeneratePluginParams) -> str:
        name, slug, description = params.name, params.slug, params.description
        events = [
            f"- `init.zf.{slug}` - Fires when the plugin has finished initializing.",
            *(f"- `{event}.zf.{slug}` - Custom {event} event." for event in params.features.events),
            f"- `destroyed.zf.{slug}` - Fires when the plugin has been destroyed.",
        ]
        events_text = "\n".join(events)
        return f"""---
title: {name}
description: {description}
js: js/foundation.{slug}.js
tags:
  - {slug}
flex: true
---

## {name}

{description}

---

## Basic Usage

Add the `data-{slug}` attribute to your HTML element:

```html
<div data-{slug}>
  <!-- Your content here -->
</div>
```

---

## JavaScript Reference

### Initialization

Initialize the plugin with JavaScript:

```js
var elem = new Foundation.{name}(element, options);
```

### Options

```js
{name}.defaults = {{
  // Add options documentation here
}};
```

### Methods

#### `.toggle()`

Toggles the {slug}.

```js
$('#element').foundation('toggle');
```

#### `.destroy()`

Destroys the plugin instance.

```js
$('#element').foundation('destroy');
```

### Events

These events will fire from the element with the `data-{slug}` attribute:

{events_text}

---

## Accessibility

The {name} plugin follows these accessibility best practices:

- Keyboard navigation support
- ARIA attributes for screen readers
- Focus management

---
"""

    def integration_steps(self, params: GeneratePluginParams) -> list[str]:
        name, slug = params.name, params.slug
        return [
            f"Import {name} in js/entries/foundation.js: import {{ {name} }} from '../foundation.{slug}';",
            f"Register plugin: Foundation.plugin({name}, '{name}');",
            f"Add to exports in js/entries/foundation.js: export {{ {name} }};",
            "Include in build configuration if needed",
            "Run tests: yarn test:javascript:units",
            "Update documentation index if necessary",
        ]
