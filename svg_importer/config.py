import os
import logging
from typing import Optional

from svg_importer.figma_client import FIGMA_API_BASE_URL

logger = logging.getLogger(__name__)

_TRUE_VALUES = ('1', 'true', 'yes', 'on')


class Config:
    """Configuration management using environment variables"""
    
    def __init__(self):
        # Figma configuration
        self.figma_token = os.getenv('FIGMA_API_TOKEN')
        self.figma_base_url = os.getenv('FIGMA_API_BASE_URL', FIGMA_API_BASE_URL)
        
        # Optional configurations
        self.log_level = os.getenv('LOG_LEVEL', 'INFO')
        self.log_file: Optional[str] = os.getenv('LOG_FILE') or None
        self.request_timeout = int(os.getenv('REQUEST_TIMEOUT', '30'))
        self.max_workers = int(os.getenv('MAX_WORKERS', '8'))
        self.strict_svg_fetch = os.getenv('STRICT_SVG_FETCH', 'false').strip().lower() in _TRUE_VALUES
    
    def validate(self, figma_token: Optional[str] = None) -> bool:
        """Validate that required configuration is present
        
        ``figma_token`` overrides the environment token, for callers that pass one in.
        """
        required_vars = [
            ('FIGMA_API_TOKEN', figma_token or self.figma_token),
        ]
        
        missing_vars = [var_name for var_name, var_value in required_vars if not var_value]
        
        if missing_vars:
            logger.error(f"Missing required environment variables: {', '.join(missing_vars)}")
            return False
        
        if self.max_workers < 1:
            logger.error(f"MAX_WORKERS must be at least 1, got {self.max_workers}")
            return False
        
        return True
