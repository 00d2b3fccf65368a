from .settings import HandlerSettings, settings

__all__ = ["HandlerSettings", "settings"]
