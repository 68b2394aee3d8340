"""
Shared slowapi limiter.
Lives outside main so endpoint modules can decorate routes without an import cycle.
"""

from slowapi import Limiter
from slowapi.util import get_remote_address

from bakery_crm.core.config import settings

limiter = Limiter(key_func=get_remote_address, enabled=settings.RATE_LIMIT_ENABLED)

PUBLIC_FORM_LIMIT = f"{settings.RATE_LIMIT_PER_MINUTE}/minute"
