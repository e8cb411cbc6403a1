"""Input and output validation."""

from dataclasses import dataclass
from typing import Any
from returns.result import Result, Success, Failure


# Validation limits
MAX_COMPONENT_SPEC_SIZE = 4 * 1024 * 1024  # 4MB
MAX_JSON_DEPTH = 200


class ValidationError(Exception):
    """Validation failed."""

    pass


@dataclass(frozen=True)
class ValidationResult:
    """Validation error with details (for Result pattern)."""

    message: str
    field: str | None = None
    value: Any | None = None


def validate_json_size(data: str | bytes, max_size: int, name: str = "JSON") -> None:
    """
    Validate payload size to prevent DoS attacks.

    Args:
        data: JSON text to validate
        max_size: Maximum allowed size in bytes
        name: Name for error messages

    Raises:
        ValidationError: If size exceeds limit
    """
    size = len(data.encode("utf-8")) if isinstance(data, str) else len(data)
    if size > max_size:
        raise ValidationError(f"{name} size {size} bytes exceeds maximum {max_size} bytes")


def validate_json_depth(obj: Any, max_depth: int = MAX_JSON_DEPTH, current_depth: int = 0) -> None:
    """
    Validate JSON nesting depth to prevent stack overflow.

    Args:
        obj: Object to validate
        max_depth: Maximum allowed nesting depth
        current_depth: Current depth (internal)

    Raises:
        ValidationError: If depth exceeds limit
    """
    if current_depth > max_depth:
        raise ValidationError(f"JSON nesting depth {current_depth} exceeds maximum {max_depth}")

    if isinstance(obj, dict):
        for value in obj.values():
            validate_json_depth(value, max_depth, current_depth + 1)
    elif isinstance(obj, list):
        for item in obj:
            validate_json_depth(item, max_depth, current_depth + 1)


class ComponentSpecValidator:
    """Validates translated component specifications before they go out."""

    @staticmethod
    def validate(spec_dict: dict[str, Any], spec_json: str) -> None:
        """
        Validate a component tree in wire form.

        Args:
            spec_dict: Component spec as sent on the wire
            spec_json: JSON string representation

        Raises:
            ValidationError: If validation fails
        """
        validate_json_size(spec_json, MAX_COMPONENT_SPEC_SIZE, "Component spec")
        ComponentSpecValidator._validate_node(spec_dict, "components")

    @staticmethod
    def _validate_node(node: Any, path: str) -> None:
        if not isinstance(node, dict):
            raise ValidationError(f"{path} must be an object")

        tag = node.get("type")
        if not isinstance(tag, str) or not tag:
            raise ValidationError(f"{path}.type must be a non-empty string")

        if not isinstance(node.get("props"), dict):
            raise ValidationError(f"{path}.props must be an object")

        if "style" in node and not isinstance(node["style"], dict):
            raise ValidationError(f"{path}.style must be an object")

        children = node.get("children")
        if children is None:
            return
        if not isinstance(children, list):
            raise ValidationError(f"{path}.children must be a list")
        for index, child in enumerate(children):
            ComponentSpecValidator._validate_node(child, f"{path}.children[{index}]")


def validate_component_spec(
    spec: dict[str, Any], json_str: str
) -> Result[None, ValidationResult]:
    """
    Validate a component specification (Result pattern version).

    Args:
        spec: Component spec in wire form
        json_str: JSON string representation

    Returns:
        Result indicating success or validation error
    """
    try:
        ComponentSpecValidator.validate(spec, json_str)
        return Success(None)
    except ValidationError as e:
        return Failure(ValidationResult(str(e), field="components"))
