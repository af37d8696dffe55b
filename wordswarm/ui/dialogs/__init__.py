from wordswarm.ui.dialogs.settings import SettingsDialog

__all__ = ["SettingsDialog"]
