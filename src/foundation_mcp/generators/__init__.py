"""Boilerplate generators for Foundation plugins and components, plus
WordPress integration guidance."""

from .component import ComponentGenerator
from .plugin import PluginGenerator
from .wordpress import wordpress_integration_guide

__all__ = ["ComponentGenerator", "PluginGenerator", "wordpress_integration_guide"]
