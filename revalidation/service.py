"""
Frontend revalidation service.

This service tells the Next.js frontend which pages to re-render after
catalog content changes. Delivery is best effort: one POST per change, no
retries, and failures are only logged so a content write is never affected.
"""

import logging
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

import requests
from django.conf import settings

from .locales import get_available_locales
from .paths import entity_field, get_paths

logger = logging.getLogger(__name__)

REVALIDATE_ENDPOINT = '/api/revalidate'
DEFAULT_TIMEOUT = 30.0


def parse_timeout(value: Any) -> Optional[float]:
    """
    Parse REVALIDATE_TIMEOUT.

    Empty or zero means no timeout. An unparseable value is logged and the
    default timeout is used instead.
    """
    if value is None or value == '':
        return None
    try:
        timeout = float(value)
    except (TypeError, ValueError):
        logger.warning(
            f"[Revalidation] Invalid REVALIDATE_TIMEOUT {value!r}, using {DEFAULT_TIMEOUT:g}s"
        )
        return DEFAULT_TIMEOUT
    return timeout if timeout > 0 else None


@dataclass(frozen=True)
class RevalidationConfig:
    frontend_url: str = ''
    revalidate_secret: Optional[str] = None
    timeout: Optional[float] = None

    @classmethod
    def from_settings(cls) -> 'RevalidationConfig':
        return cls(
            frontend_url=(getattr(settings, 'FRONTEND_URL', '') or '').rstrip('/'),
            revalidate_secret=getattr(settings, 'REVALIDATE_SECRET', None) or None,
            timeout=parse_timeout(getattr(settings, 'REVALIDATE_TIMEOUT', None)),
        )


class RevalidationService:
    """
    Service for triggering ISR revalidation on the frontend.

    Builds the path list for a changed entity and posts it to the
    frontend's revalidate API.
    """

    def __init__(self, config: Optional[RevalidationConfig] = None):
        self.config = config or RevalidationConfig.from_settings()

        # Headers for API requests
        self.headers = {'Content-Type': 'application/json'}
        if self.config.revalidate_secret:
            self.headers['x-revalidate-secret'] = self.config.revalidate_secret

    def is_configured(self) -> bool:
        """Check if a frontend URL is configured."""
        return bool(self.config.frontend_url)

    @property
    def endpoint(self) -> str:
        return f"{self.config.frontend_url}{REVALIDATE_ENDPOINT}"

    def build_payload(self, entity_type: str, entity: Any, paths: List[str]) -> Dict[str, Any]:
        """
        Build the JSON body sent to the frontend.

        The locale key is only present when the entity was authored in a
        specific locale.
        """
        payload = {
            'paths': paths,
            'entityType': entity_type,
            'entityId': entity_field(entity, 'id'),
        }
        locale = entity_field(entity, 'locale')
        if locale:
            payload['locale'] = locale
        return payload

    def revalidate(self, payload: Dict[str, Any]) -> bool:
        """
        Call the frontend revalidate API endpoint.

        Never raises. A missing frontend URL is logged as a warning, HTTP and
        network failures as errors.

        Returns:
            True if the frontend answered with a 2xx status, False otherwise
        """
        if not self.is_configured():
            logger.warning("[Revalidation] FRONTEND_URL not configured, skipping revalidation")
            return False

        url = self.endpoint
        try:
            logger.info(f"[Revalidation] Calling {url} with paths: {payload.get('paths')}")

            response = requests.post(
                url,
                headers=self.headers,
                json=payload,
                timeout=self.config.timeout,
            )

            # Response.ok also accepts 3xx
            if not 200 <= response.status_code < 300:
                logger.error(f"[Revalidation] Failed: {response.status_code} - {response.text}")
                return False

            try:
                result = response.json()
            except ValueError:
                result = response.text
            logger.info(f"[Revalidation] Success: {result}")
            return True

        except Exception as e:
            logger.error(f"[Revalidation] Error: {str(e)}")
            return False

    def revalidate_entity(self, entity_type: str, entity: Any,
                          locales: Optional[List[str]] = None) -> bool:
        """
        Revalidate every page affected by a change to one entity.

        Args:
            entity_type: Content type identifier, e.g. 'product'
            entity: The changed entity; for deletions its last known state
            locales: Locale codes to cover; looked up when not given

        Returns:
            True if the paths were delivered, False if there was nothing to
            send or delivery failed
        """
        try:
            if locales is None:
                locales = get_available_locales()

            paths = get_paths(entity_type, entity, locales)
            if not paths:
                logger.debug(
                    f"[Revalidation] No paths for {entity_type} {entity_field(entity, 'id')}, skipping"
                )
                return False

            return self.revalidate(self.build_payload(entity_type, entity, paths))

        except Exception as e:
            logger.error(f"[Revalidation] Error revalidating {entity_type}: {str(e)}")
            return False

    def revalidate_paths(self, paths: List[str], entity_type: str = 'manual',
                         entity_id: int = 0, locale: Optional[str] = None) -> bool:
        """Send an explicit list of paths. Returns True if delivered."""
        payload = {
            'paths': [path for path in paths if path],
            'entityType': entity_type,
            'entityId': entity_id,
        }
        if locale:
            payload['locale'] = locale
        if not payload['paths']:
            logger.debug("[Revalidation] No paths given, skipping")
            return False
        return self.revalidate(payload)


# Global service instance
_revalidation_service = None


def get_revalidation_service() -> RevalidationService:
    """Get the global revalidation service instance."""
    global _revalidation_service
    if _revalidation_service is None:
        _revalidation_service = RevalidationService()
    return _revalidation_service


def reset_revalidation_service() -> None:
    """Drop the global instance so the next call re-reads settings."""
    global _revalidation_service
    _revalidation_service = None
