"""Server application implementation"""
from typing import Dict, Any, Optional
from flask import Flask, Response, g, request, jsonify, send_from_directory
from flask_cors import CORS
from werkzeug.exceptions import BadRequest
import logging
import os
import uuid

from src.core import ServerConfig
from src.server.enums import HTTPStatus, Endpoint, ServiceName
from src.server.services import (
    ImageProcessingService,
    ImageProcessingServiceFactory,
    REQUEST_ID_HEADER,
)
from src.server.controllers.base_controller import ServerController
from src.server.decorators import endpoint_error_handler
from src.server.schemas import ImageResponse
from src.server.openapi import OpenAPISpecGenerator


logger = logging.getLogger(__name__)

UPLOAD_FIELD = "image"


class ServerApplication:
    """Main application class implementing dependency injection and OOP principles"""

    def __init__(
        self,
        config: Optional[ServerConfig] = None,
        app_name: str = "Image Editor",
        service: Optional[ImageProcessingService] = None
    ) -> None:
        """
        Initialize the Flask application with dependencies.

        Args:
            config: Server configuration (default: read from environment)
            app_name: Name of the Flask application
            service: Processing service to use instead of the factory instance
        """
        self._config: ServerConfig = config or ServerConfig.from_env()
        self._app: Flask = Flask(app_name)
        self._app.config["MAX_CONTENT_LENGTH"] = self._config.max_upload_size
        CORS(self._app)
        self._controller: ServerController | None = None
        self._service: ImageProcessingService | None = service
        self._setup_dependencies()
        self._setup_request_hooks()
        self._setup_routes()

    def _setup_dependencies(self) -> None:
        """Setup all dependencies using dependency injection"""
        if self._service is None:
            self._service = ImageProcessingServiceFactory.get_instance(self._config)

        services = {
            ServiceName.IMAGE_PROCESSING_SERVICE.value: self._service
        }

        self._controller = ServerController(services=services)
        self._controller.initialize()

    def _setup_request_hooks(self) -> None:
        """Assign a request id to every request and echo it in the response"""
        self._app.before_request(self._assign_request_id)
        self._app.after_request(self._echo_request_id)

    def _setup_routes(self) -> None:
        """Setup Flask routes"""
        self._app.add_url_rule("/", "get_status", self._get_status, methods=["GET"])
        self._app.add_url_rule("/image", "upload", self._upload_image, methods=["POST"])
        self._app.add_url_rule("/image/process", "process", self._process_image, methods=["POST"])
        self._app.add_url_rule(
            "/image/<action>",
            "single_action",
            self._single_action,
            methods=["POST"]
        )
        self._app.add_url_rule(
            "/images/<image_name>",
            "serve_image",
            self._serve_image,
            methods=["GET"]
        )

        # Documentation endpoints
        self._app.add_url_rule("/openapi.json", "openapi_spec", self._openapi_spec, methods=["GET"])
        self._app.add_url_rule("/docs", "swagger_ui", self._swagger_ui, methods=["GET"])
        self._app.add_url_rule("/redoc", "redoc", self._redoc, methods=["GET"])

    @staticmethod
    def _assign_request_id() -> None:
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex

    @staticmethod
    def _echo_request_id(response: Response) -> Response:
        response.headers[REQUEST_ID_HEADER] = g.get("request_id", "")
        return response

    def _get_status(self) -> Dict[str, Any]:
        """
        Get server status endpoint.

        Returns:
            JSON response with server status information
        """
        return jsonify(self._controller.get_status())

    @endpoint_error_handler(Endpoint.UPLOAD, parse_json=False)
    def _upload_image(self) -> tuple:
        """
        Store one uploaded image.

        Expected multipart/form-data body with exactly one file in field 'image'.

        Returns:
            tuple: (response, status_code) with the URL of the stored image
        """
        files = request.files.getlist(UPLOAD_FIELD)
        if len(files) != 1:
            raise BadRequest("exactly one file must be uploaded")

        upload = files[0]
        image_url = self._service.upload(upload.stream, upload.filename or "")

        return jsonify(ImageResponse(image_url=image_url).model_dump()), HTTPStatus.OK.value

    @endpoint_error_handler(Endpoint.PROCESS)
    def _process_image(self, data: Any) -> tuple:
        """
        Apply an action pipeline to a stored image.

        Expected JSON payload:
        {
            "actions": [
                {"action": "resize", "params": {"width": 50, "height": 50}},
                {"action": "convert", "params": {"format": "png"}}
            ],
            "image_name": "img_20240101120000000000_1.jpg"
        }

        Returns:
            tuple: (response, status_code) with the URL of the processed image
        """
        process_request = self._service.parse_request(data)
        image_url = self._service.process(process_request)

        return jsonify(ImageResponse(image_url=image_url).model_dump()), HTTPStatus.OK.value

    @endpoint_error_handler(Endpoint.SINGLE_ACTION)
    def _single_action(self, data: Any, action: str) -> tuple:
        """
        Apply one action to a stored image.

        Expected JSON payload (e.g. POST /image/blur):
        {
            "image_name": "img_20240101120000000000_1.jpg",
            "sigma": 2.0
        }

        Returns:
            tuple: (response, status_code) with the URL of the processed image
        """
        process_request = self._service.parse_single_action(action, data)
        image_url = self._service.process(process_request)

        return jsonify(ImageResponse(image_url=image_url).model_dump()), HTTPStatus.OK.value

    def _serve_image(self, image_name: str) -> Response:
        """Send a stored image file"""
        return send_from_directory(os.path.abspath(self._config.storage_image_path), image_name)

    def _openapi_spec(self) -> Dict[str, Any]:
        """
        Return OpenAPI 3.0 specification.

        Returns:
            JSON with complete API specification
        """
        spec = OpenAPISpecGenerator.generate_spec(
            title="Image Editor API",
            description="Image processing service applying ordered action pipelines to stored images",
            version="1.0.0",
            base_url="/"
        )
        return jsonify(spec)

    def _swagger_ui(self) -> str:
        """
        Return Swagger UI HTML.

        Interactive API documentation at /docs
        """
        return """
        <!DOCTYPE html>
        <html>
        <head>
            <title>Image Editor API - Swagger UI</title>
            <meta charset="utf-8"/>
            <meta name="viewport" content="width=device-width, initial-scale=1">
            <link rel="stylesheet" href="https://cdn.jsdelivr.net/npm/swagger-ui-dist@3/swagger-ui.css">
        </head>
        <body>
            <div id="swagger-ui"></div>
            <script src="https://cdn.jsdelivr.net/npm/swagger-ui-dist@3/swagger-ui-bundle.js"></script>
            <script>
            window.onload = function() {
                window.ui = SwaggerUIBundle({
                    url: "/openapi.json",
                    dom_id: '#swagger-ui',
                    presets: [
                        SwaggerUIBundle.presets.apis,
                        SwaggerUIBundle.SwaggerUIStandalonePreset
                    ],
                    layout: "BaseLayout"
                })
            }
            </script>
        </body>
        </html>
        """

    def _redoc(self) -> str:
        """
        Return ReDoc HTML.

        Alternative interactive API documentation at /redoc
        """
        return """
        <!DOCTYPE html>
        <html>
        <head>
            <title>Image Editor API - ReDoc</title>
            <meta charset="utf-8"/>
            <meta name="viewport" content="width=device-width, initial-scale=1">
            <style>
              body {
                margin: 0;
                padding: 0;
              }
            </style>
        </head>
        <body>
            <redoc spec-url='/openapi.json'></redoc>
            <script src="https://cdn.jsdelivr.net/npm/redoc@2/bundles/redoc.standalone.js"></script>
        </body>
        </html>
        """

    @property
    def app(self) -> Flask:
        """
        Get Flask application instance.

        Returns:
            Flask: The Flask application object
        """
        return self._app

    @property
    def config(self) -> ServerConfig:
        return self._config
