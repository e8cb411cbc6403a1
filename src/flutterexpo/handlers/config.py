"""App Config Handler."""

from pydantic import ValidationError as PydanticValidationError

from ..context import BridgeContext
from ..core import ConfigError, get_logger
from ..models import AppConfig
from ..monitoring import metrics_collector
from ..protocol import Envelope, MessageType, app_config_message, describe_errors
from ..streaming import Session

logger = get_logger(__name__)


class AppConfigHandler:
    """Replaces the current application configuration and shares it with every viewer."""

    async def handle(self, context: BridgeContext, envelope: Envelope, session: Session) -> None:
        """
        Handle one APP_CONFIG.

        Raises:
            ConfigError: Payload is not a valid configuration; the previous
                configuration stays current
        """
        try:
            config = AppConfig.model_validate(envelope.data or {})
        except PydanticValidationError as e:
            raise ConfigError(
                "Failed to process app configuration", details={"errors": describe_errors(e)}
            ) from e

        context.app_config = config
        delivered = await context.sessions.broadcast(
            app_config_message(config, session.session_id)
        )
        metrics_collector.record_broadcast(MessageType.APP_CONFIG.value)

        logger.info("app_config_updated", title=config.title, delivered=delivered)
