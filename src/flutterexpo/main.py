"""
FlutterExpo Bridge - Main Entry Point
Serves the viewer WebSocket, health check and metrics.
"""

from contextlib import asynccontextmanager

from fastapi import FastAPI, Response, WebSocket, WebSocketDisconnect
from fastapi.middleware.cors import CORSMiddleware
from prometheus_client import CONTENT_TYPE_LATEST

from .context import BridgeContext
from .core import Settings, configure_logging, create_container, get_logger, get_settings, utc_timestamp
from .monitoring import metrics_collector
from .protocol import MessageDispatcher

logger = get_logger(__name__)


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the FastAPI application around one bridge context."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Wire the bridge on startup, close viewer sessions on shutdown"""
        configure_logging(settings.log_level, settings.json_logs, settings.service_name)

        container = create_container(settings)
        app.state.settings = settings
        app.state.context = container.get(BridgeContext)
        app.state.dispatcher = container.get(MessageDispatcher)

        logger.info(
            "bridge_ready",
            port=settings.port,
            output_dir=settings.output_dir,
            codegen=settings.enable_codegen,
        )

        yield

        context: BridgeContext = app.state.context
        logger.info("bridge_shutting_down", sessions=len(context.sessions))
        for session in list(context.sessions.sessions.values()):
            try:
                await session.connection.close()
            except Exception as e:
                logger.warning("session_close_failed", session_id=session.session_id, error=str(e))
            context.sessions.close(session.session_id)

    app = FastAPI(
        title="FlutterExpo Bridge",
        description="Translates Flutter UI ASTs into live React component specs and sources",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.get("/health")
    async def health() -> dict:
        return {
            "status": "ok",
            "timestamp": utc_timestamp(),
            "sessions": len(app.state.context.sessions),
        }

    @app.get("/metrics")
    async def metrics() -> Response:
        return Response(metrics_collector.get_metrics(), media_type=CONTENT_TYPE_LATEST)

    @app.websocket("/")
    @app.websocket("/ws")
    async def websocket_endpoint(websocket: WebSocket) -> None:
        """
        Viewer connection.

        Server sends CONNECTION_ACK on open, then:
            - APP_CONFIG / COMPONENT_SPEC broadcasts
            - PONG / ERROR replies to this connection only
        """
        await websocket.accept()
        context: BridgeContext = app.state.context
        dispatcher: MessageDispatcher = app.state.dispatcher
        session = await dispatcher.connect(context, websocket)

        try:
            while True:
                message = await websocket.receive()
                if message["type"] == "websocket.disconnect":
                    raise WebSocketDisconnect(message.get("code", 1000))
                raw = message.get("text")
                if raw is None:
                    raw = message.get("bytes") or b""
                await dispatcher.dispatch(context, session.session_id, raw)
                if context.sessions.get(session.session_id) is None:
                    logger.info("session_dropped", session_id=session.session_id)
                    break
        except WebSocketDisconnect:
            logger.info("websocket_disconnected", session_id=session.session_id)
        except Exception as e:
            logger.error("websocket_error", session_id=session.session_id, error=str(e), exc_info=True)
        finally:
            dispatcher.disconnect(context, session.session_id)

    return app


app = create_app()


def serve() -> None:
    """Entry point - run the bridge with uvicorn."""
    import uvicorn

    settings = get_settings()
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()
