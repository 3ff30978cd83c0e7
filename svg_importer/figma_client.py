import logging
from typing import Dict, List, Optional

import requests

from svg_importer.exceptions import FigmaAPIError, SVGFetchError
from svg_importer.models import FileSnapshot

logger = logging.getLogger(__name__)

FIGMA_API_BASE_URL = "https://api.figma.com/v1"

# Personal access tokens start with this prefix; anything else is an OAuth token.
PERSONAL_ACCESS_TOKEN_PREFIX = "figd"


class FigmaClient:
    """Thin wrapper around the three Figma endpoints used by an import"""
    
    def __init__(self, api_token: str, base_url: str = FIGMA_API_BASE_URL,
                 session: Optional[requests.Session] = None, timeout: int = 30):
        self.api_token = api_token
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        # Auth headers are added per API request; the session itself stays
        # anonymous because it is shared with the image host downloads.
        if session is None:
            session = requests.Session()
            session.headers.update({
                'User-Agent': 'Figma-SVG-Importer/1.0'
            })
        self.session = session
    
    def get_headers(self) -> Dict[str, str]:
        """Pick the auth header scheme from the token's shape"""
        if self.api_token.startswith(PERSONAL_ACCESS_TOKEN_PREFIX):
            return {'X-Figma-Token': self.api_token}
        return {'Authorization': f'Bearer {self.api_token}'}
    
    def _get_api_json(self, endpoint: str, params: Dict[str, str], fallback_message: str) -> Dict:
        try:
            response = self.session.get(endpoint, params=params, headers=self.get_headers(),
                                        timeout=self.timeout)
        except requests.RequestException as e:
            logger.error(f"{fallback_message}: {e}")
            raise FigmaAPIError(fallback_message) from e
        
        if not response.ok:
            message = self._error_message(response) or fallback_message
            logger.error(f"API request failed: {response.status_code} - {message}")
            raise FigmaAPIError(message, status=response.status_code)
        
        try:
            return response.json()
        except ValueError as e:
            logger.error(f"{fallback_message}: response was not valid JSON")
            raise FigmaAPIError(fallback_message, status=response.status_code) from e
    
    @staticmethod
    def _error_message(response: requests.Response) -> Optional[str]:
        """Extract ``err`` from a ``{status, err}`` error body, if there is one"""
        try:
            data = response.json()
        except ValueError:
            return None
        if isinstance(data, dict) and data.get('err'):
            return str(data['err'])
        return None
    
    def fetch_file(self, file_key: str, version: Optional[str] = None) -> FileSnapshot:
        """Fetch the document tree and component registry of a file"""
        endpoint = f"{self.base_url}/files/{file_key}"
        params = {}
        if version:
            params['version'] = version
        
        logger.info(f"Fetching file data for: {file_key}" + (f" (version {version})" if version else ""))
        data = self._get_api_json(endpoint, params, "Failed to fetch Figma file")
        logger.info(f"Successfully fetched file: {data.get('name', 'Unknown')}")
        return FileSnapshot.from_api(data)
    
    def fetch_component_svgs(self, file_key: str, component_ids: List[str],
                             version: Optional[str] = None) -> Dict[str, Optional[str]]:
        """Get short-lived SVG render URLs for the given component ids"""
        endpoint = f"{self.base_url}/images/{file_key}"
        params = {
            'ids': ','.join(component_ids),
            'format': 'svg'
        }
        if version:
            params['version'] = version
        
        logger.info(f"🎨 Requesting SVG renders for {len(component_ids)} components...")
        data = self._get_api_json(endpoint, params, "Failed to fetch component SVGs")
        return data.get('images') or {}
    
    def fetch_svg_content(self, url: str) -> str:
        """Download SVG text from a render URL (no auth, it is not the API host)"""
        try:
            response = self.session.get(url, timeout=self.timeout)
        except requests.RequestException as e:
            raise SVGFetchError("Failed to fetch SVG content", url=url) from e
        
        if not response.ok:
            raise SVGFetchError("Failed to fetch SVG content", url=url, status=response.status_code)
        
        return response.text
