"""
Configuration loader
"""
import os
import yaml
from pathlib import Path
from paintmap.models import ServerConfig


DEFAULT_CONFIG_PATH = "config/server.yaml"


def load_config(config_path: str = DEFAULT_CONFIG_PATH) -> ServerConfig:
    """
    Load configuration from YAML file
    
    Args:
        config_path: Path to config file
        
    Returns:
        ServerConfig object
    """
    path = Path(config_path)
    
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")
    
    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}
    
    return ServerConfig(**data)


def resolve_config() -> ServerConfig:
    """
    Config for the running server: $PAINTMAP_CONFIG if set (must exist),
    else config/server.yaml if present, else built-in defaults
    """
    override = os.getenv("PAINTMAP_CONFIG")
    if override:
        return load_config(override)
    if Path(DEFAULT_CONFIG_PATH).exists():
        return load_config(DEFAULT_CONFIG_PATH)
    return ServerConfig()
