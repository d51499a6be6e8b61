from api.routes.health import health
from api.routes.webhook import WebhookController

__all__ = ["WebhookController", "health"]
