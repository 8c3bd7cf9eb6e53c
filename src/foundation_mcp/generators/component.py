"""Boilerplate generator for Foundation Sass components."""

from loguru import logger

from ..core.models import (
    GenerateComponentParams,
    GeneratedFile,
    GenerationResult,
    SassVariableSpec,
)

GRID_LABELS = {
    "xy-grid": "the XY Grid",
    "float-grid": "the Float Grid",
    "both": "both the XY Grid and the Float Grid",
}


def default_variables(name: str) -> dict[str, SassVariableSpec]:
    return {
        "padding": SassVariableSpec(
            description=f"Padding for {name}.", type="Number", default_value="1rem"
        ),
        "background": SassVariableSpec(
            description=f"Background color for {name}.", type="Color", default_value="$white"
        ),
        "border": SassVariableSpec(
            description=f"Border color for {name}.", type="Color", default_value="$medium-gray"
        ),
    }


def format_value(value: str | int | float | bool) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


class ComponentGenerator:
    """Generates a component stylesheet, its sass-true test and its docs page."""

    def generate(self, params: GenerateComponentParams) -> GenerationResult:
        logger.info(f"Generating component {params.name}")
        try:
            files = {
                "component": GeneratedFile(
                    path=f"scss/components/_{params.slug}.scss",
                    content=self.component_scss(params),
                )
            }
            if params.include_tests:
                files["test"] = GeneratedFile(
                    path=f"test/sass/components/_{params.slug}.scss",
                    content=self.test_scss(params),
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
            logger.error(f"Failed to generate component {params.name}: {e}")
            return GenerationResult(status="error", error=str(e))

    @staticmethod
    def _variables(params: GenerateComponentParams) -> dict[str, SassVariableSpec]:
        return params.variables or default_variables(params.name)

    def component_scss(self, params: GenerateComponentParams) -> str:
        name, slug = params.name, params.slug

        declarations = "\n\n".join(
            f"/// {spec.description}\n"
            f"/// @type {spec.type}\n"
            f"${slug}-{var_name}: {format_value(spec.default_value)} !default;"
            for var_name, spec in self._variables(params).items()
        )
        modifiers = "".join(
            f"\n    &.{css_class} {{\n      // {css_class} modifier styles\n    }}\n"
            for css_class in params.css_classes
        )

        return f"""// Foundation for Sites
// https://get.foundation
// Licensed under MIT Open Source

////
/// @group {slug}
////

{declarations}

/// Adds the base styles for a {name}.
/// @param {{Boolean}} $base [true] - Include base styles
@mixin {slug}-base($base: true) {{
  @if $base {{
    padding: ${slug}-padding;
    background-color: ${slug}-background;
    border: 1px solid ${slug}-border;
  }}
}}

/// Adds style variations for a {name}.
/// @param {{Color}} $background [${slug}-background] - Background color
/// @param {{Color}} $color [color-pick-contrast($background)] - Text color
@mixin {slug}-style(
  $background: ${slug}-background,
  $color: color-pick-contrast($background)
) {{
  background-color: $background;
  color: $color;
}}

/// Adds size variations for a {name}.
/// @param {{Number}} $padding [${slug}-padding] - Padding amount
@mixin {slug}-size($padding: ${slug}-padding) {{
  padding: $padding;
}}

/// Generates the {name} component styles.
@mixin foundation-{slug} {{
  .{slug} {{
    @include {slug}-base;

    &.is-active {{
      // Active state styles
    }}

    &.is-disabled {{
      opacity: 0.5;
      pointer-events: none;
    }}
{modifiers}  }}

  // Color variations
  @each $name, $color in $foundation-palette {{
    .{slug}.\\#{{$name}} {{
      @include {slug}-style($color);
    }}
  }}

  // Size variations
  .{slug}.small {{
    @include {slug}-size(0.5rem);
  }}

  .{slug}.large {{
    @include {slug}-size(2rem);
  }}
}}
"""

    def test_scss(self, params: GenerateComponentParams) -> str:
        name, slug = params.name, params.slug
        return f"""@import 'true';
@import '../../../scss/components/{slug}';

@include test-module('{name} [component]') {{
  @include test('{slug}-base mixin') {{
    @include assert {{
      @include output {{
        @include {slug}-base;
      }}

      @include expect {{
        padding: 1rem;
        background-color: #fefefe;
        border: 1px solid #cacaca;
      }}
    }}
  }}

  @include test('{slug}-style mixin') {{
    @include assert {{
      @include output {{
        @include {slug}-style($primary-color);
      }}

      @include contains {{
        background-color: #1779ba;
      }}
    }}
  }}

  @include test('{slug}-size mixin') {{
    @include assert {{
      @include output {{
        @include {slug}-size(2rem);
      }}

      @include expect {{
        padding: 2rem;
      }}
    }}
  }}
}}
"""

    def docs_markdown(self, params: GenerateComponentParams) -> str:
        name, slug, description = params.name, params.slug, params.description
        rows = "\n".join(
            f"| `${slug}-{var_name}` | {spec.type} | `{format_value(spec.default_value)}` "
            f"| {spec.description} |"
            for var_name, spec in self._variables(params).items()
        )
        return f"""---
title: {name}
description: {description}
sass: scss/components/_{slug}.scss
tags:
  - {slug}
---

## {name}

{description}

---

## Basics

Add the `.{slug}` class to create a {name}:

```html
<div class="{slug}">
  Your content here
</div>
```

---

## Coloring

Use Foundation's color palette to style the {name}:

```html
<div class="{slug} primary">Primary {name}</div>
<div class="{slug} secondary">Secondary {name}</div>
<div class="{slug} success">Success {name}</div>
<div class="{slug} warning">Warning {name}</div>
<div class="{slug} alert">Alert {name}</div>
```

---

## Sizing

Use size classes to adjust the {name}:

```html
<div class="{slug} small">Small {name}</div>
<div class="{slug}">Default {name}</div>
<div class="{slug} large">Large {name}</div>
```

---

## Layout

The {name} is designed to sit inside cells of {GRID_LABELS[params.grid]}.

---

## Sass Reference

### Variables

The default styles of this component can be customized using these Sass variables:

| Name | Type | Default Value | Description |
| --- | --- | --- | --- |
{rows}

### Mixins

#### `{slug}-base`

Creates base styles for {name}.

```scss
@include {slug}-base;
```

#### `{slug}-style`

Adds style variations.

```scss
@include {slug}-style($background, $color);
```

#### `{slug}-size`

Adjusts the size.

```scss
@include {slug}-size($padding);
```

---
"""

    def integration_steps(self, params: GenerateComponentParams) -> list[str]:
        slug = params.slug
        return [
            f"Import component in scss/foundation.scss: @import 'components/{slug}';",
            f"Include component mixin: @include foundation-{slug};",
            "Add to foundation-everything mixin in scss/foundation.scss",
            "Run Sass tests: yarn test:sass",
            "Build and verify output: yarn build",
        ]
