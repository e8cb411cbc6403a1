"""Dependency Injection Container."""

from injector import Injector, Module, provider, singleton

from .config import Settings, get_settings
from ..context import BridgeContext
from ..generator import ReactCodeGenerator
from ..handlers import AppConfigHandler, UIUpdateHandler
from ..mapping import MappingRegistry
from ..protocol import MessageDispatcher, MessageType
from ..translator import UITranslator


class CoreModule(Module):
    """Core dependencies."""

    def __init__(self, settings: Settings) -> None:
        self.settings = settings

    @singleton
    @provider
    def provide_settings(self) -> Settings:
        return self.settings

    @singleton
    @provider
    def provide_registry(self) -> MappingRegistry:
        """Provide the widget mapping registry with built-in mappings."""
        return MappingRegistry()

    @singleton
    @provider
    def provide_translator(self, registry: MappingRegistry) -> UITranslator:
        return UITranslator(registry)

    @singleton
    @provider
    def provide_generator(self, registry: MappingRegistry) -> ReactCodeGenerator:
        return ReactCodeGenerator(
            registry,
            output_dir=self.settings.output_dir,
            extension=self.settings.screen_extension,
            live_update_url=self.settings.live_update_url,
        )

    @singleton
    @provider
    def provide_dispatcher(
        self, translator: UITranslator, generator: ReactCodeGenerator
    ) -> MessageDispatcher:
        """Provide the dispatcher with its message handler table."""
        ui_handler = UIUpdateHandler(
            translator, generator if self.settings.enable_codegen else None
        )
        return MessageDispatcher(
            {
                MessageType.APP_CONFIG: AppConfigHandler(),
                MessageType.UI_UPDATE: ui_handler,
            },
            self.settings,
        )

    @singleton
    @provider
    def provide_context(self) -> BridgeContext:
        """Provide the process-wide session table and configuration holder."""
        return BridgeContext()


def create_container(settings: Settings | None = None) -> Injector:
    """Create configured injector."""
    return Injector([CoreModule(settings or get_settings())])
