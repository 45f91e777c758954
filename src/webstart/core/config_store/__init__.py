from webstart.core.config_store.abc import ConfigStore
from webstart.core.config_store.real import TomlConfigStore

__all__ = ["ConfigStore", "TomlConfigStore"]
