# app/shared/services/doctor_client.py
import httpx
import logging
from typing import Dict, Optional
from uuid import UUID

from app.config.settings import settings

logger = logging.getLogger(__name__)

class DoctorServiceClient:
    """Client for the doctor service; existence checks only"""

    def __init__(
        self,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
        enabled: Optional[bool] = None,
        transport: Optional[httpx.BaseTransport] = None
    ):
        self.base_url = base_url if base_url is not None else settings.doctor_service_url
        self.timeout = timeout if timeout is not None else settings.doctor_service_timeout
        self.enabled = settings.doctor_validation_enabled if enabled is None else enabled
        self._transport = transport

    def _get_headers(self) -> Dict[str, str]:
        return {"Accept": "application/json"}

    def validate_doctor_exists(self, doctor_id: UUID) -> bool:
        """
        True when the doctor exists, or when the check is skipped.

        The check is skipped (and logged) when validation is disabled, no URL
        is configured, or the doctor service cannot be reached. Only a
        definitive 404 returns False.
        """
        if not self.enabled or not self.base_url:
            logger.debug(f"Doctor validation skipped for {doctor_id}: disabled")
            return True

        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.get(
                    f"{self.base_url.rstrip('/')}/api/v1/doctors/{doctor_id}",
                    headers=self._get_headers()
                )
        except httpx.HTTPError as e:
            logger.warning(f"⚠️ Doctor validation skipped for {doctor_id}: {e}")
            return True

        if response.status_code == 404:
            logger.info(f"Doctor {doctor_id} not found in doctor service")
            return False

        if response.status_code >= 400:
            logger.warning(
                f"⚠️ Doctor validation skipped for {doctor_id}: "
                f"doctor service answered {response.status_code}"
            )
            return True

        return True

    def health_check(self) -> bool:
        """Check that the doctor service is reachable"""
        if not self.base_url:
            return False
        try:
            with httpx.Client(timeout=5, transport=self._transport) as client:
                response = client.get(f"{self.base_url.rstrip('/')}/health")
                return response.status_code == 200
        except httpx.HTTPError:
            return False


def get_doctor_client() -> DoctorServiceClient:
    """FastAPI dependency"""
    return DoctorServiceClient()
