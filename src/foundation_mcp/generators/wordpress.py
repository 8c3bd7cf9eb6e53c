"""Integration guide for shipping Foundation inside a WordPress theme or plugin."""

from loguru import logger

from ..core.models import WordPressIntegrationGuide, WordPressIntegrationParams

BLOCK_EDITOR_NOTES = (
    "Register a separate editor stylesheet using add_editor_style or "
    "enqueue_block_editor_assets to avoid front-end overrides.",
    "Scope Foundation utility classes used in blocks to prevent global resets "
    "from affecting the editor canvas.",
    "Avoid running JavaScript plugins inside the editor unless necessary; if required, "
    "gate initialization behind is_admin() checks and specific block selectors.",
)

RTL_NOTES = (
    "Run foundation-rtl.scss or enable rtlcss in your build to emit RTL assets.",
    "Hook into WordPress RTL detection by enqueueing an rtl stylesheet via is_rtl().",
)

PHP_TEMPLATE_TIPS = (
    "Output data-options via esc_attr to keep HTML valid.",
    "Use wp_localize_script if you need to pass PHP data into Foundation plugins.",
    "Scope JavaScript initialization to specific templates when not needed globally "
    "to reduce overhead.",
)

TROUBLESHOOTING = (
    "If plugins fail to initialize, confirm jQuery is loaded first and noConflict is "
    "not stripping $; use window.jQuery.",
    "If styles are overridden, check theme specificity and ensure Foundation globals "
    "load before custom overrides.",
    "For lazy-loaded fragments (AJAX), call Foundation.reInit on the injected markup.",
)


def enqueue_snippet(params: WordPressIntegrationParams) -> str:
    """PHP that enqueues the compiled assets and boots Foundation."""
    if params.context == "plugin":
        base_url = "plugin_dir_url(__FILE__)"
        asset = "plugin"
    else:
        base_url = "get_template_directory_uri() . '/'"
        asset = "theme"
    deps = "'jquery'" if params.enqueue_jquery else ""

    return "\n".join(
        [
            "function foundation_enqueue_assets() {",
            "  $version = '6.9.x';",
            f"  $base_url = {base_url};",
            "",
            "  wp_enqueue_style(",
            "    'foundation-styles',",
            f"    $base_url . 'dist/css/{asset}.css',",
            "    [],",
            "    $version",
            "  );",
            "",
            "  wp_enqueue_script(",
            "    'foundation-scripts',",
            f"    $base_url . 'dist/js/{asset}.js',",
            f"    [{deps}],",
            "    $version,",
            "    true",
            "  );",
            "",
            "  wp_add_inline_script('foundation-scripts', 'jQuery(document).foundation();');",
            "}",
            "add_action('wp_enqueue_scripts', 'foundation_enqueue_assets');",
        ]
    )


def wordpress_integration_guide(params: WordPressIntegrationParams) -> WordPressIntegrationGuide:
    """Build step-by-step guidance for a WordPress theme or plugin.

    The asset pipeline step follows ``params.bundler``; block editor, RTL and
    Motion UI sections are only filled in when the matching flag is set.
    """
    logger.info(f"Building WordPress integration guide (context={params.context}, bundler={params.bundler})")

    if params.bundler == "none":
        pipeline = (
            "Use the prebuilt dist assets (dist/css/foundation.css and dist/js/foundation.js) "
            f"and copy them into your {params.context} assets folder."
        )
    else:
        extras = ", Motion UI and your custom scripts" if params.enable_motion_ui else " and your custom scripts"
        pipeline = (
            f"Compile Foundation assets with {params.bundler} into your {params.context} dist folder "
            f"(e.g., dist/css/{params.context}.css and dist/js/{params.context}.js). "
            f"Ensure the output includes Foundation JS{extras}."
        )

    if params.enqueue_jquery:
        enqueue_step = (
            "Enqueue styles and scripts via wp_enqueue_style/wp_enqueue_script with the jquery "
            "dependency before Foundation scripts."
        )
    else:
        enqueue_step = (
            "Enqueue styles and scripts via wp_enqueue_style/wp_enqueue_script; your bundle must "
            "provide jQuery since the WordPress copy is not declared as a dependency."
        )

    if params.enable_motion_ui:
        motion_ui = (
            "Include motion-ui in your bundle and enqueue its CSS (motion-ui.css) "
            "when using transitions/animations."
        )
    else:
        motion_ui = "Motion UI not requested; you can skip motion-ui to reduce bundle size."

    return WordPressIntegrationGuide(
        summary=f"Guidance for integrating Foundation into a WordPress {params.context}.",
        steps=[
            f"Install and build Foundation assets within your {params.context} (Node 18+, Yarn or npm).",
            pipeline,
            f"Place compiled assets under dist/css and dist/js (or a similar path) within your {params.context}.",
            enqueue_step,
            "Initialize Foundation on document ready using jQuery(document).foundation();",
            "Use data- attributes (data-accordion, data-dropdown, etc.) in your PHP templates "
            "or block markup to attach plugins.",
            "For performance, dequeue unused Foundation plugins/components from your bundle when possible.",
            "Verify compatibility with caching/minification plugins (e.g., Autoptimize, WP Rocket) "
            "by excluding foundation.js if deferred incorrectly.",
        ],
        enqueue_example=enqueue_snippet(params),
        php_template_tips=list(PHP_TEMPLATE_TIPS),
        block_editor=list(BLOCK_EDITOR_NOTES) if params.enable_block_editor else [],
        rtl=list(RTL_NOTES) if params.enable_rtl else [],
        motion_ui=motion_ui,
        troubleshooting=list(TROUBLESHOOTING),
    )
