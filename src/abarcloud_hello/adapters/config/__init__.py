"""lib_layered_config integration: reading, ``--set`` merging, showing and deploying.

The bundled ``defaultconfig.toml`` next to these modules is both the lowest
configuration layer and the file ``config-deploy`` installs.
"""

from __future__ import annotations

from .deploy import deploy_configuration
from .display import display_config
from .loader import get_config, get_default_config_path
from .overrides import apply_overrides

__all__ = [
    "apply_overrides",
    "deploy_configuration",
    "display_config",
    "get_config",
    "get_default_config_path",
]
