from .settings import PlayerConfig, load_config, DEFAULT_CONFIG_PATH

__all__ = ['PlayerConfig', 'load_config', 'DEFAULT_CONFIG_PATH']
