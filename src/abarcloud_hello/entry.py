"""Console script entry point with production wiring.

Lives at package level, outside the adapters, so that wiring composition
into the CLI does not make the adapters layer import the composition root.
"""

from __future__ import annotations

from .adapters.cli.main import main as cli_main
from .composition import build_production


def main() -> int:
    """Run the ``abarcloud-hello`` console script with production services.

    Returns:
        Exit code from CLI execution.
    """
    return cli_main(services_factory=build_production)


__all__ = ["main"]
