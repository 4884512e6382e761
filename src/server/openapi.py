"""OpenAPI specification generator from Pydantic models for auto-documentation"""
from typing import Dict, Any
from src.core import ActionKind
from src.models import (
    CropParameters,
    ResizeParameters,
    ConvertParameters,
    BlurParameters,
    GammaParameters,
    ContrastParameters,
    SharpenParameters,
    BrightnessParameters,
    SaturationParameters,
)
from src.server.schemas import (
    ImageActionSchema,
    ProcessImageRequest,
    SingleActionRequest,
    ImageResponse,
    StatusResponse,
    ErrorResponse,
)


class OpenAPISpecGenerator:
    """Generates OpenAPI 3.0 specification for Flask API using Pydantic models"""

    @staticmethod
    def generate_spec(
        title: str = "Image Editor API",
        description: str = "Image processing service applying ordered action pipelines to stored images",
        version: str = "1.0.0",
        base_url: str = "/"
    ) -> Dict[str, Any]:
        """
        Generate OpenAPI 3.0 specification from Pydantic models.

        Args:
            title: API title
            description: API description
            version: API version
            base_url: Base URL for API endpoints

        Returns:
            OpenAPI 3.0 specification dict
        """
        return {
            "openapi": "3.0.0",
            "info": {
                "title": title,
                "description": description,
                "version": version,
            },
            "servers": [
                {"url": base_url, "description": "API server"}
            ],
            "paths": OpenAPISpecGenerator._generate_paths(),
            "components": {
                "schemas": OpenAPISpecGenerator._generate_schemas()
            },
        }

    @staticmethod
    def _json_response(description: str, schema: str) -> Dict[str, Any]:
        return {
            "description": description,
            "content": {
                "application/json": {
                    "schema": {"$ref": f"#/components/schemas/{schema}"}
                }
            }
        }

    @staticmethod
    def _json_body(schema: str) -> Dict[str, Any]:
        return {
            "required": True,
            "content": {
                "application/json": {
                    "schema": {"$ref": f"#/components/schemas/{schema}"}
                }
            }
        }

    @staticmethod
    def _generate_paths() -> Dict[str, Any]:
        """Generate API paths specification"""
        response = OpenAPISpecGenerator._json_response
        body = OpenAPISpecGenerator._json_body
        return {
            "/": {
                "get": {
                    "summary": "Get server status",
                    "description": "Returns server, service and registered action status",
                    "tags": ["Health"],
                    "responses": {
                        "200": response("Server status", "StatusResponse")
                    }
                }
            },
            "/image": {
                "post": {
                    "summary": "Upload an image",
                    "description": "Store one JPEG or PNG file sent as multipart field 'image'",
                    "tags": ["Images"],
                    "requestBody": {
                        "required": True,
                        "content": {
                            "multipart/form-data": {
                                "schema": {
                                    "type": "object",
                                    "properties": {
                                        "image": {"type": "string", "format": "binary"}
                                    },
                                    "required": ["image"]
                                }
                            }
                        }
                    },
                    "responses": {
                        "200": response("Success - URL of the stored image", "ImageResponse"),
                        "400": response("Missing file or request too large", "ErrorResponse"),
                        "415": response("Not a JPEG or PNG image", "ErrorResponse"),
                        "500": response("Server error", "ErrorResponse")
                    }
                }
            },
            "/image/process": {
                "post": {
                    "summary": "Process an image",
                    "description": "Apply an ordered list of actions to a stored image and save the result",
                    "tags": ["Processing"],
                    "requestBody": body("ProcessImageRequest"),
                    "responses": {
                        "200": response("Success - URL of the processed image", "ImageResponse"),
                        "400": response("Decode, validation or action error", "ErrorResponse"),
                        "404": response("Source image not found", "ErrorResponse"),
                        "415": response("Result could not be saved", "ErrorResponse"),
                        "500": response("Server error", "ErrorResponse")
                    }
                }
            },
            "/image/{action}": {
                "post": {
                    "summary": "Apply a single action",
                    "description": "Apply one action to a stored image; parameters sit next to image_name",
                    "tags": ["Processing"],
                    "parameters": [
                        {
                            "name": "action",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "string", "enum": ActionKind.values()}
                        }
                    ],
                    "requestBody": body("SingleActionRequest"),
                    "responses": {
                        "200": response("Success - URL of the processed image", "ImageResponse"),
                        "400": response("Decode, validation or action error", "ErrorResponse"),
                        "404": response("Source image not found", "ErrorResponse"),
                        "415": response("Result could not be saved", "ErrorResponse"),
                        "500": response("Server error", "ErrorResponse")
                    }
                }
            },
            "/images/{image_name}": {
                "get": {
                    "summary": "Download a stored image",
                    "tags": ["Images"],
                    "parameters": [
                        {
                            "name": "image_name",
                            "in": "path",
                            "required": True,
                            "schema": {"type": "string"}
                        }
                    ],
                    "responses": {
                        "200": {
                            "description": "Image file",
                            "content": {
                                "image/jpeg": {"schema": {"type": "string", "format": "binary"}},
                                "image/png": {"schema": {"type": "string", "format": "binary"}}
                            }
                        },
                        "404": {"description": "Image not found"}
                    }
                }
            }
        }

    @staticmethod
    def _generate_schemas() -> Dict[str, Any]:
        """Generate component schemas from Pydantic models"""
        return {
            "ImageActionSchema": ImageActionSchema.model_json_schema(),
            "ProcessImageRequest": ProcessImageRequest.model_json_schema(),
            "SingleActionRequest": SingleActionRequest.model_json_schema(),
            "ImageResponse": ImageResponse.model_json_schema(),
            "StatusResponse": StatusResponse.model_json_schema(),
            "ErrorResponse": ErrorResponse.model_json_schema(),
            "CropParameters": CropParameters.model_json_schema(),
            "ResizeParameters": ResizeParameters.model_json_schema(),
            "ConvertParameters": ConvertParameters.model_json_schema(),
            "BlurParameters": BlurParameters.model_json_schema(),
            "GammaParameters": GammaParameters.model_json_schema(),
            "ContrastParameters": ContrastParameters.model_json_schema(),
            "SharpenParameters": SharpenParameters.model_json_schema(),
            "BrightnessParameters": BrightnessParameters.model_json_schema(),
            "SaturationParameters": SaturationParameters.model_json_schema(),
        }
