#!filepath: wolves_cli_helper/config/verbose_config.py
from typing import Optional, Union

from pydantic import BaseModel, Field


class VerboseConfig(BaseModel):
    # None → 跟随终端宽度
    separator_width: Optional[int] = Field(default=None, ge=1)
    key_color: Union[int, str] = 208
    value_color: str = "green"
    separator_color: str = "blue"
