"""
Dependency injection container using dependency-injector.
Wires process-wide services and controllers.
"""

from dependency_injector import containers, providers

from bakery_crm.core.events import LeadEventBus
from bakery_crm.services.health_service import HealthService
from bakery_crm.controllers.health_controller import HealthController


class Container(containers.DeclarativeContainer):
    """Dependency injection container."""
    
    # Configuration
    config = providers.Configuration()
    
    # Services
    health_service = providers.Singleton(
        HealthService,
    )
    
    # One bus per process so every request publishes to the same subscribers
    lead_event_bus = providers.Singleton(
        LeadEventBus,
    )
    
    # Controllers
    health_controller = providers.Factory(
        HealthController,
        health_service=health_service,
    )


# Global container instance
_container: Container = None


def get_container() -> Container:
    """Get the global dependency injection container."""
    global _container
    if _container is None:
        from bakery_crm.core.config import settings
        _container = Container()
        _container.config.from_dict({
            "database_url": settings.DATABASE_URL,
        })
    return _container
