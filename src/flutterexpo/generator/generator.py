"""
React Code Generator
Writes editable React/TypeScript sources for each translated screen.
"""

from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from ..core import GenerationError, get_logger
from ..mapping import MappingRegistry
from ..models import UIASTDocument
from . import routing, templates
from .jsx import JSXRenderer
from .naming import component_name, css_class_name
from .styles import render_stylesheet

logger = get_logger(__name__)


class ReactCodeGenerator:
    """
    Generates a React app skeleton from Flutter UI AST documents.

    Layout under ``output_dir``::

        src/App.<ext>                      routing manifest
        src/screens/<Component>.<ext>      one per screen
        src/styles/<Component>.css         one per screen

    Screen and stylesheet files are rewritten on every call; manual edits to
    them are not preserved. The manifest only ever gains lines.
    """

    def __init__(
        self,
        registry: MappingRegistry,
        output_dir: str | Path = "./generated_react_app",
        extension: str = "tsx",
        live_update_url: str = "ws://localhost:3001",
    ) -> None:
        self.registry = registry
        self.output_dir = Path(output_dir)
        self.extension = extension
        self.live_update_url = live_update_url

    @property
    def src_dir(self) -> Path:
        return self.output_dir / "src"

    @property
    def screens_dir(self) -> Path:
        return self.src_dir / "screens"

    @property
    def styles_dir(self) -> Path:
        return self.src_dir / "styles"

    @property
    def app_path(self) -> Path:
        return self.src_dir / f"App.{self.extension}"

    def generate(self, document: UIASTDocument) -> None:
        """
        Write screen, stylesheet and routing manifest for one document.

        Raises:
            GenerationError: On any filesystem failure, or when the screen id
                would place a file outside the output layout. Files written by
                earlier steps are left in place.
        """
        component = component_name(document.screen_id)
        logger.info("generate_start", screen_id=document.screen_id, component=component)

        screen_id = document.screen_id
        screen_path = self._target(self.screens_dir, f"{component}.{self.extension}", screen_id)
        style_path = self._target(self.styles_dir, f"{component}.css", screen_id)

        with self._filesystem(document.screen_id):
            self.screens_dir.mkdir(parents=True, exist_ok=True)
            self.styles_dir.mkdir(parents=True, exist_ok=True)

            screen_path.write_text(self.render_screen(document), encoding="utf-8")
            logger.debug("screen_written", path=str(screen_path))

            style_path.write_text(self.render_stylesheet(document), encoding="utf-8")
            logger.debug("stylesheet_written", path=str(style_path))

            self.update_routing(document.screen_id, document.route)

        logger.info("generate_complete", screen_id=document.screen_id, output=str(self.output_dir))

    def render_screen(self, document: UIASTDocument) -> str:
        """Screen component source for a document."""
        component = component_name(document.screen_id)
        return templates.render_screen(
            component=component,
            screen_id=document.screen_id,
            root_class=css_class_name(component),
            live_update_url=self.live_update_url,
            state=document.state,
            events=document.events,
            body=JSXRenderer(self.registry).visit(document.tree),
        )

    def render_stylesheet(self, document: UIASTDocument) -> str:
        """Stylesheet source for a document."""
        component = component_name(document.screen_id)
        return render_stylesheet(document.tree, component, css_class_name(component))

    def update_routing(self, screen_id: str, route: str) -> None:
        """
        Register the screen in the routing manifest, seeding it if missing.

        Raises:
            GenerationError: On any filesystem failure
        """
        component = component_name(screen_id)

        with self._filesystem(screen_id):
            if self.app_path.exists():
                content = self.app_path.read_text(encoding="utf-8")
            else:
                self.src_dir.mkdir(parents=True, exist_ok=True)
                content = templates.BASE_APP
                css_path = self.src_dir / "App.css"
                if not css_path.exists():
                    css_path.write_text(templates.BASE_APP_CSS, encoding="utf-8")
                logger.info("manifest_seeded", path=str(self.app_path))

            self.app_path.write_text(
                routing.update_manifest(content, component, route), encoding="utf-8"
            )

        logger.info("routing_updated", route=route, component=component)

    def _target(self, directory: Path, filename: str, screen_id: str) -> Path:
        """Path of a generated file, which must sit directly inside ``directory``."""
        path = directory / filename
        if path.resolve().parent != directory.resolve():
            raise GenerationError(
                f"Screen id {screen_id!r} does not name a file inside {directory}",
                details={"screenId": screen_id, "path": str(path)},
            )
        return path

    @contextmanager
    def _filesystem(self, screen_id: str) -> Iterator[None]:
        try:
            yield
        except OSError as e:
            logger.error("generation_failed", screen_id=screen_id, error=str(e))
            raise GenerationError(
                f"Failed to write sources for screen {screen_id}: {e}",
                details={"screenId": screen_id, "path": e.filename},
            ) from e
