from typing import Optional


class SVGImportError(Exception):
    """Base class for every error raised by svg_importer"""


class ConfigurationError(SVGImportError):
    """Missing file key or API token; raised before any network call"""


class FigmaAPIError(SVGImportError):
    """The Figma REST API rejected a file or images request"""

    def __init__(self, message: str, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.status = status


class NodeNotFoundError(SVGImportError):
    """The requested subtree root does not exist in the document"""

    def __init__(self, node_id: str):
        super().__init__(f"Node not found: {node_id}")
        self.node_id = node_id


class SVGFetchError(SVGImportError):
    """Downloading rendered SVG text from the image host failed"""

    def __init__(self, message: str, url: Optional[str] = None, status: Optional[int] = None):
        super().__init__(message)
        self.message = message
        self.url = url
        self.status = status
