"""create-discobase configuration.

Typed settings for a single generator run.  All settings use Pydantic v2
models so they are validated at construction time and can be overridden from
environment variables without boiler-plate.

The Source Edition template tree is not part of the installed package;
``DEFAULT_SOURCE_TEMPLATE_DIR`` only exists when a checkout is placed there,
otherwise set ``DISCOBASE_SOURCE_TEMPLATE_DIR``.
"""

from __future__ import annotations

import os
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field

SOURCE_TEMPLATE_ENV = "DISCOBASE_SOURCE_TEMPLATE_DIR"
DEFAULT_SOURCE_TEMPLATE_DIR = Path(__file__).resolve().parent / "create-discobase"


class Config(BaseModel):
    """Global generator configuration.

    Created once by the CLI entry point and passed to ``SetupPipeline``.
    """

    cwd: Path = Field(default_factory=Path.cwd, description="Directory the user ran the tool from")
    source_template_dir: Path = Field(
        default=DEFAULT_SOURCE_TEMPLATE_DIR,
        description="Root of the full-source template copied by the Source Edition",
    )
    package_manager: str = Field(default="npm", min_length=1)
    install_timeout: int = Field(
        default=600, ge=10, description="Package install timeout in seconds"
    )

    @classmethod
    def from_env(cls) -> "Config":
        """Build a ``Config`` from environment variables.

        Recognised variables (all optional):
            DISCOBASE_SOURCE_TEMPLATE_DIR, DISCOBASE_PACKAGE_MANAGER,
            DISCOBASE_INSTALL_TIMEOUT.
        """
        kwargs: dict[str, Any] = {}
        if os.environ.get(SOURCE_TEMPLATE_ENV):
            kwargs["source_template_dir"] = Path(os.environ[SOURCE_TEMPLATE_ENV])
        if os.environ.get("DISCOBASE_PACKAGE_MANAGER"):
            kwargs["package_manager"] = os.environ["DISCOBASE_PACKAGE_MANAGER"]
        if os.environ.get("DISCOBASE_INSTALL_TIMEOUT"):
            kwargs["install_timeout"] = int(os.environ["DISCOBASE_INSTALL_TIMEOUT"])
        return cls(**kwargs)
