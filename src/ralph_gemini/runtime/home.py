"""Package asset discovery.

Locates the vendored asset tree (``lib/``, ``scripts/``, ``templates/``,
``commands/``) that install and update copy into a project.
"""

from __future__ import annotations

import importlib.resources
from collections.abc import Mapping
from pathlib import Path

from ralph_gemini.core.constants import TEMPLATE_ROOT_ENV


def get_package_asset_root(environ: Mapping[str, str] | None = None) -> Path:
    """Return the path to the package's bundled assets.

    Resolution order:
    1. ``RALPH_TEMPLATE_ROOT`` in *environ* (CI/testing, local checkouts)
    2. ``importlib.resources.files("ralph_gemini") / "assets"`` (installed package)
    3. ``Path(__file__).parent.parent / "assets"`` (development layout)

    Raises:
        FileNotFoundError: If the override is set but missing, or no asset
            root can be found.
    """
    if environ and (env_root := environ.get(TEMPLATE_ROOT_ENV)):
        root = Path(env_root).expanduser()
        if root.is_dir():
            return root.resolve()
        raise FileNotFoundError(f"{TEMPLATE_ROOT_ENV} path does not exist: {env_root}")

    try:
        assets = Path(str(importlib.resources.files("ralph_gemini"))) / "assets"
        if assets.is_dir():
            return assets
    except (TypeError, ModuleNotFoundError):
        pass

    dev_root = Path(__file__).resolve().parent.parent / "assets"
    if dev_root.is_dir():
        return dev_root

    raise FileNotFoundError(
        f"Cannot locate package assets. Set {TEMPLATE_ROOT_ENV} or reinstall ralph-gemini."
    )


__all__ = ["get_package_asset_root"]
