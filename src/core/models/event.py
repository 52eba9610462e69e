# src/core/models/event.py

from pydantic import BaseModel, Field, ConfigDict

class ToggleEvent(BaseModel):
    """
    The interaction that triggered a sort toggle, reduced to its modifier keys.
    """
    shift_key: bool = Field(default=False, description="Shift was held")
    ctrl_key: bool = Field(default=False, description="Control was held")
    meta_key: bool = Field(default=False, description="Meta / command was held")
    alt_key: bool = Field(default=False, description="Alt / option was held")

    model_config = ConfigDict(frozen=True)
