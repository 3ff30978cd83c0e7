import logging
from typing import Dict, Optional

from svg_importer.config import Config
from svg_importer.exceptions import ConfigurationError
from svg_importer.figma_client import FigmaClient
from svg_importer.importer import SVGImporter
from svg_importer.utils import load_environment, setup_logging


def main(file_id: str, token: Optional[str] = None, node_id: Optional[str] = None,
         version: Optional[str] = None, config: Optional[Config] = None) -> Dict[str, Dict[str, str]]:
    """
    Import the SVG components of a Figma file.

    ``node_id`` may be given in the URL form (``12-34``) copied from a Figma
    link. Returns ``{filename: {"type": "file", "content": svg_text}}``.
    """
    if config is None:
        load_environment()
        config = Config()
    
    setup_logging(config.log_level, config.log_file)
    logger = logging.getLogger(__name__)
    
    token = token or config.figma_token
    if not file_id:
        raise ConfigurationError("File key is required")
    if not token:
        raise ConfigurationError("Figma token is required (pass token or set FIGMA_API_TOKEN)")
    if not config.validate(token):
        raise ConfigurationError("Configuration validation failed. Check your environment variables.")
    
    client = FigmaClient(token, base_url=config.figma_base_url, timeout=config.request_timeout)
    importer = SVGImporter(client, strict=config.strict_svg_fetch, max_workers=config.max_workers)
    
    logger.info(f"🚀 Starting SVG import for file: {file_id}")
    exported = importer.import_svgs(file_id, node_id=node_id, version=version, normalize_ids=True)
    
    return {filename: exported_file.to_dict() for filename, exported_file in exported.items()}
