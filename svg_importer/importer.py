import logging
from concurrent.futures import ThreadPoolExecutor
from typing import Dict, List, Optional, Tuple

from svg_importer.exceptions import ConfigurationError, SVGFetchError
from svg_importer.figma_client import FigmaClient
from svg_importer.models import ComponentRecord, ExportedFile
from svg_importer.resolver import resolve
from svg_importer.utils import svg_filename

logger = logging.getLogger(__name__)


class SVGImporter:
    """Exports the components of a Figma file as named SVG files"""
    
    def __init__(self, client: FigmaClient, strict: bool = False, max_workers: int = 8):
        """
        Args:
            client: API client used for every request.
            strict: Abort the whole import when a single SVG download fails,
                instead of skipping that component.
            max_workers: Size of the thread pool that downloads SVG text.
        """
        self.client = client
        self.strict = strict
        self.max_workers = max_workers
    
    def import_svgs(self, file_key: str, node_id: Optional[str] = None,
                    version: Optional[str] = None, normalize_ids: bool = False) -> Dict[str, ExportedFile]:
        """
        Fetch every component (or every component under ``node_id``) as SVG.
        
        Returns a mapping of ``<component name>.svg`` to ExportedFile. Components
        without a render URL, or whose download fails, are left out unless the
        importer is strict.
        """
        if not file_key:
            raise ConfigurationError("File key is required")
        
        snapshot = self.client.fetch_file(file_key, version)
        
        if not snapshot.components:
            logger.info("No components found in the file")
            return {}
        
        logger.info(f"Found {len(snapshot.components)} components")
        
        component_ids = resolve(snapshot, node_id, normalize_ids=normalize_ids)
        if not component_ids:
            logger.info("No components to export")
            return {}
        
        svg_urls = self.client.fetch_component_svgs(file_key, component_ids, version)
        
        jobs = [(component_id, snapshot.components[component_id]) for component_id in component_ids]
        with ThreadPoolExecutor(max_workers=self.max_workers) as executor:
            contents = list(executor.map(
                lambda job: self._download(job[0], job[1], svg_urls.get(job[0])), jobs))
        
        return self._assemble(jobs, contents)
    
    def _download(self, component_id: str, component: ComponentRecord,
                  svg_url: Optional[str]) -> Optional[str]:
        if not svg_url:
            logger.warning(f"⚠️ No SVG URL for: {component.name} ({component_id})")
            return None
        
        try:
            svg_content = self.client.fetch_svg_content(svg_url)
        except SVGFetchError as e:
            if self.strict:
                logger.error(f"❌ Failed to fetch SVG for {component.name}: {e}")
                raise
            logger.warning(f"❌ Failed to fetch SVG for {component.name}, skipping: {e}")
            return None
        
        logger.debug(f"✅ Fetched SVG for component: {component.name}")
        return svg_content
    
    @staticmethod
    def _assemble(jobs: List[Tuple[str, ComponentRecord]],
                  contents: List[Optional[str]]) -> Dict[str, ExportedFile]:
        exported: Dict[str, ExportedFile] = {}
        
        for (component_id, component), svg_content in zip(jobs, contents):
            if svg_content is None:
                continue
            filename = svg_filename(component.name)
            if filename in exported:
                logger.warning(f"⚠️ {filename} already exported, overwriting with {component_id}")
            exported[filename] = ExportedFile(filename=filename, content=svg_content)
        
        skipped = sum(1 for svg_content in contents if svg_content is None)
        logger.info(f"🎨 SVG import completed: {len(jobs) - skipped}/{len(jobs)} successful, {skipped} skipped")
        return exported
