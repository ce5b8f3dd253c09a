from .settings_service import SettingsService
