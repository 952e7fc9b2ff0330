# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""Render the responsive entry page and stylesheet.

Rendering is a pure function of the resolved payload extensions and the build
configuration: no filesystem access, identical inputs give identical output.
"""

from __future__ import annotations

import html
import json
from dataclasses import dataclass

from .assets import (
    BUILD_DIR,
    AssetKind,
    FileExtensionState,
    asset_filename,
    loader_filename,
)
from .config import BuildConfig
from .templates import TEMPLATE_CSS, TEMPLATE_HTML

__all__ = [
    "RenderedPage",
    "asset_url",
    "render_html",
    "render_css",
    "render_page",
]


@dataclass(frozen=True, slots=True)
class RenderedPage:
    html: str
    css: str


def _js(value: str) -> str:
    # The literal lands inside an inline <script>; "</" must not close it.
    return json.dumps(value).replace("</", "<\\/")


def asset_url(config: BuildConfig, kind: AssetKind, ext: str) -> str:
    return f"{BUILD_DIR}/{asset_filename(config, kind, ext)}"


def render_html(extensions: FileExtensionState, config: BuildConfig) -> str:
    res = config.resolution
    return TEMPLATE_HTML.format(
        title=html.escape(config.game_title),
        icon=html.escape(config.icon),
        width=res.width,
        height=res.height,
        aspect=res.aspect_ratio,
        loader_url=_js(f"{BUILD_DIR}/{loader_filename(config)}"),
        data_url=_js(asset_url(config, AssetKind.DATA, extensions.data)),
        framework_url=_js(
            asset_url(config, AssetKind.FRAMEWORK, extensions.framework)
        ),
        code_url=_js(asset_url(config, AssetKind.CODE, extensions.code)),
        company=_js(config.company_name),
        product=_js(config.product_name),
        version=_js(config.product_version),
    )


def render_css(config: BuildConfig) -> str:
    # The stylesheet does not depend on the configuration today.
    return TEMPLATE_CSS


def render_page(
    extensions: FileExtensionState, config: BuildConfig
) -> RenderedPage:
    return RenderedPage(
        html=render_html(extensions, config), css=render_css(config)
    )
