"""UI Update Handler."""

import time

from pydantic import ValidationError as PydanticValidationError
from returns.result import Failure

from ..context import BridgeContext
from ..core import (
    GenerationError,
    TranslationError,
    get_logger,
    safe_json_dumps,
    validate_component_spec,
)
from ..generator import ReactCodeGenerator
from ..models import UIASTDocument
from ..monitoring import metrics_collector
from ..protocol import Envelope, MessageType, component_spec_message, describe_errors
from ..streaming import Session
from ..translator import UITranslator

logger = get_logger(__name__)


class UIUpdateHandler:
    """Translates UI_UPDATE documents, broadcasts them, then writes React sources."""

    def __init__(self, translator: UITranslator, generator: ReactCodeGenerator | None) -> None:
        self.translator = translator
        self.generator = generator

    async def handle(self, context: BridgeContext, envelope: Envelope, session: Session) -> None:
        """
        Handle one UI_UPDATE.

        Raises:
            TranslationError: Document invalid or translation output malformed;
                nothing is broadcast
            GenerationError: Writing sources failed; the broadcast has already
                gone out
        """
        start_time = time.time()

        try:
            document = UIASTDocument.model_validate(envelope.data or {})
        except PydanticValidationError as e:
            raise TranslationError(
                "Failed to translate UI AST", details={"errors": describe_errors(e)}
            ) from e

        try:
            result = self.translator.translate_with_diagnostics(document)
        except Exception as e:
            logger.error(
                "translation_crashed", screen_id=document.screen_id, error=str(e), exc_info=True
            )
            raise TranslationError(
                "Failed to translate UI AST", details={"reason": str(e)}
            ) from e

        components = result.spec.to_wire()

        checked = validate_component_spec(components, safe_json_dumps(components))
        if isinstance(checked, Failure):
            raise TranslationError(
                "Translated component tree is invalid",
                details={"reason": checked.failure().message},
            )

        metrics_collector.record_translation(time.time() - start_time, result.unmapped_types)

        message = component_spec_message(
            document, components, context.app_config, session.session_id
        )
        delivered = await context.sessions.broadcast(message)
        metrics_collector.record_broadcast(MessageType.COMPONENT_SPEC.value)

        logger.info(
            "ui_translated",
            screen_id=document.screen_id,
            route=document.route,
            delivered=delivered,
            unmapped=result.unmapped_types,
        )

        if self.generator is not None:
            self._generate(document)

    def _generate(self, document: UIASTDocument) -> None:
        start_time = time.time()
        try:
            self.generator.generate(document)
        except GenerationError:
            metrics_collector.record_generation("error", time.time() - start_time)
            raise
        metrics_collector.record_generation("success", time.time() - start_time)
