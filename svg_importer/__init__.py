from svg_importer.exceptions import (
    ConfigurationError,
    FigmaAPIError,
    NodeNotFoundError,
    SVGFetchError,
    SVGImportError,
)
from svg_importer.figma_client import FIGMA_API_BASE_URL, FigmaClient
from svg_importer.importer import SVGImporter
from svg_importer.models import (
    ComponentRecord,
    ComponentRefNode,
    DocumentNode,
    ExportedFile,
    FileSnapshot,
    KindTaggedNode,
)

__version__ = "1.0.0"
