"""Output settings: CLI flags and env vars in one object.

Priority chain (highest to lowest):
  1. Init kwargs: CLI flags passed by Click
  2. Env vars: ``ISOCALC_*`` prefix
  3. Code defaults

``notation`` and ``dashed`` default to None, meaning "render the result
in the same notation as the input date".
"""

from __future__ import annotations

from typing import Any

from pydantic_settings import BaseSettings

from isocalc.format.notation import Notation


class IsocalcSettings(BaseSettings):
    """Unified settings for one isocalc invocation.

    Frozen after construction and passed explicitly to the command
    evaluator; there is no process-wide state.

    Attributes:
        notation: Output notation, or None to follow the input date.
        dashed: Dashed (extended) output, or None to follow the input date.
        reverse: Negate the result of a difference.
        verbose: Enable DEBUG logging.
        log_json: Emit JSON log lines instead of console output.
    """

    model_config = {
        "frozen": True,
        "env_prefix": "ISOCALC_",
    }

    notation: Notation | None = None
    dashed: bool | None = None
    reverse: bool = False
    verbose: bool = False
    log_json: bool = False

    @classmethod
    def from_cli(cls, **cli_flags: Any) -> IsocalcSettings:
        """Construct settings from a CLI invocation.

        Flags left unset (None) are dropped so that env vars and defaults
        still apply to them.
        """
        return cls(**{k: v for k, v in cli_flags.items() if v is not None})


__all__ = ["IsocalcSettings"]
