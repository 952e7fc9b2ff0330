# ===-----------------------------------------------------------------------===#
# Distributed under the 3-Clause BSD License. See accompanying file LICENSE or
# copy at https://opensource.org/licenses/BSD-3-Clause.
# SPDX-License-Identifier: BSD-3-Clause
# ===-----------------------------------------------------------------------===#

"""unity-responsive package

Post-processes a Unity WebGL build directory so that its entry page scales
the game canvas to a fixed portrait resolution on any screen. Compressed
payloads are decompressed with an external ``brotli`` binary when possible,
and the original ``index.html`` and ``style.css`` are backed up before being
rewritten.

Prefer the CLI entry point in :mod:`unity_responsive.cli` or the programmatic
pipeline in :mod:`unity_responsive.api`.
"""

from ._version import __version__  # noqa: F401

__all__ = ["__version__"]
