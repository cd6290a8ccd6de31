from eventflow.config.settings import settings

__all__ = ["settings"]
