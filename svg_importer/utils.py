import os
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv


def normalize_node_id(node_id: str) -> str:
    """Convert a URL-safe node id (``12-34``) to Figma's native form (``12:34``)"""
    return node_id.replace('-', ':')


def svg_filename(component_name: str) -> str:
    return f"{component_name}.svg"


def load_environment(env_files=('.env', '.env.')) -> Optional[str]:
    """Load the first env file found; returns its name or None"""
    for env_file in env_files:
        if os.path.exists(env_file):
            load_dotenv(env_file)
            return env_file
    return None


def setup_logging(log_level: str = 'INFO', log_file: str = None):
    """Setup logging configuration"""
    log_format = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    
    handlers = [logging.StreamHandler()]
    
    if log_file:
        log_dir = Path(log_file).parent
        log_dir.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file))
    
    logging.basicConfig(
        level=getattr(logging, log_level.upper()),
        format=log_format,
        handlers=handlers
    )
