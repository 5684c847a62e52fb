from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Callable, Dict

from langfeed import __version__
from langfeed.builder import RssFeedBuilder
from langfeed.site import SiteContext

log = logging.getLogger(__name__)

# Fired by the host once every content record is loaded and final.
CONTENT_LOAD = "content:load"


@dataclass(frozen=True)
class Plugin:
    name: str
    version: str
    hooks: Dict[str, Callable[[SiteContext], Any]] = field(default_factory=dict)


_builder = RssFeedBuilder()


def on_content_load(ctx: SiteContext):
    return _builder.build(ctx)


PLUGIN = Plugin(
    name="langfeed-rss",
    version=__version__,
    hooks={CONTENT_LOAD: on_content_load},
)


def run_hook(plugin: Plugin, event: str, ctx: SiteContext) -> Any:
    hook = plugin.hooks.get(event)
    if hook is None:
        log.debug("Plugin %s has no hook for %s", plugin.name, event)
        return None
    return hook(ctx)
