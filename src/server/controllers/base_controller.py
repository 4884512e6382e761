from typing import Dict, Any, Optional
import logging

from src.core.enums import ResponseKey
from src.components.actions import ActionRegistry
from src.server.enums import ServiceStatus, ServerStatus
logger = logging.getLogger(__name__)

class ServerController:
    """Generic server controller tracking service lifecycle"""

    def __init__(
        self,
        services: Optional[Dict[str, Any]] = None
    ):
        """
        Initialize the controller with dependencies

        Args:
            services: Optional dictionary of service name -> service instance
        """
        self._services = services or {}
        self._status = ServerStatus.STARTING

    @property
    def status(self) -> ServerStatus:
        return self._status

    def initialize(self) -> None:
        """Initialize the server and its components"""
        logger.info("Initializing server controller")
        try:
            for service_name, service in self._services.items():
                if hasattr(service, 'initialize'):
                    logger.debug(f"Initializing service: {service_name}")
                    service.initialize()

            self._status = ServerStatus.RUNNING
            logger.info("Server controller initialized successfully")
        except Exception as e:
            self._status = ServerStatus.ERROR
            logger.error(f"Failed to initialize server controller: {str(e)}")
            raise

    def get_status(self) -> Dict[str, Any]:
        """
        Get current server status

        Returns:
            Dictionary with server status, per-service status and the
            registered action kinds
        """
        components = {}
        for service_name, service in self._services.items():
            if hasattr(service, 'get_status'):
                components[service_name] = service.get_status()
            else:
                components[service_name] = ServiceStatus.READY.value

        return {
            ResponseKey.STATUS.value: self._status.value,
            ResponseKey.SERVICES.value: components,
            ResponseKey.ACTIONS.value: ActionRegistry.kinds()
        }
