"""Layout constants, overridable from the environment."""
import os
from typing import Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

ENV_PREFIX = "FAMILYGRAPH_"


class LayoutConfig(BaseModel):
    model_config = ConfigDict(frozen=True)

    node_width: float = Field(200.0, gt=0)
    node_height: float = Field(120.0, gt=0)
    couple_gap: float = Field(50.0, ge=0)
    group_gap: float = Field(100.0, ge=0)
    generation_spacing: float = Field(250.0, gt=0)
    viewport_width: float = Field(1200.0, gt=0)
    margin: float = Field(100.0, ge=0)
    top_offset: float = Field(100.0, ge=0)
    anchor_drop: float = Field(30.0, ge=0)
    fallback_columns: int = Field(3, ge=1)

    @model_validator(mode="after")
    def check_rows_do_not_collide(self):
        if self.node_height + self.anchor_drop >= self.generation_spacing:
            raise ValueError(
                "generation_spacing must exceed node_height + anchor_drop "
                f"({self.node_height} + {self.anchor_drop} >= {self.generation_spacing})"
            )
        return self

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides) -> "LayoutConfig":
        """
        Build a config from FAMILYGRAPH_<FIELD> variables, e.g.
        FAMILYGRAPH_NODE_WIDTH=180. Explicit keyword overrides win over the
        environment; empty variables are ignored.
        """
        env = os.environ if environ is None else environ
        values = {}
        for name in cls.model_fields:
            raw = env.get(ENV_PREFIX + name.upper())
            if raw is not None and raw.strip() != "":
                values[name] = raw.strip()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
