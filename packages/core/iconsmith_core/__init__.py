"""Core app services for settings, icon configuration files, export naming and logging."""

from .config import AppConfig, load_config, save_config
from .icon_config import (
    decode_share_token,
    default_icon_config,
    encode_share_token,
    icon_config_from_dict,
    icon_config_to_dict,
    load_icon_config,
    parse_icon_config,
    save_icon_config,
    starter_icon_config,
)
from .naming import export_filename

__all__ = [
    "AppConfig",
    "decode_share_token",
    "default_icon_config",
    "encode_share_token",
    "export_filename",
    "icon_config_from_dict",
    "icon_config_to_dict",
    "load_config",
    "load_icon_config",
    "parse_icon_config",
    "save_config",
    "save_icon_config",
    "starter_icon_config",
]
