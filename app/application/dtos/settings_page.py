"""DTOs for the admin settings screen."""

from dataclasses import dataclass
from typing import Literal


@dataclass(frozen=True)
class SettingsNotice:
    """Inline admin notice shown above the settings forms."""

    level: Literal["error", "success"]
    message: str
