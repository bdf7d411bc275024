"""Admin settings screen use case."""

from app.application.use_cases.admin.settings_page import SettingsPageService

__all__ = ["SettingsPageService"]
