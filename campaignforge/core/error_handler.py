"""
Error handling module.

This module provides the exception types used across campaignforge and the
helpers that turn transport failures into consistent APIError reports.
"""

import logging
import traceback
from typing import Dict, Any, Optional, Callable

import requests

logger = logging.getLogger(__name__)

class APIError(Exception):
    """
    Exception raised for agent backend errors.

    Attributes:
        message: Error message.
        status_code: HTTP status code.
        response: API response.
        endpoint: API endpoint.
        request_data: Request data.
    """

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response: Optional[Any] = None,
        endpoint: Optional[str] = None,
        request_data: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.response = response
        self.endpoint = endpoint
        self.request_data = request_data

        detailed_message = f"API Error: {message}"
        if status_code:
            detailed_message += f" (Status Code: {status_code})"
        if endpoint:
            detailed_message += f" (Endpoint: {endpoint})"

        super().__init__(detailed_message)


class ValidationError(Exception):
    """
    Exception raised when a campaign brief or record fails validation.

    Attributes:
        message: Error message.
        field: Field that failed validation.
        value: Value that failed validation.
    """

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        value: Optional[Any] = None
    ):
        self.message = message
        self.field = field
        self.value = value

        detailed_message = f"Validation Error: {message}"
        if field:
            detailed_message += f" (Field: {field})"

        super().__init__(detailed_message)


class ConfigurationError(Exception):
    """
    Exception raised for configuration errors.

    Attributes:
        message: Error message.
        component: Component that has a configuration error.
        missing_keys: Keys that are missing from the configuration.
    """

    def __init__(
        self,
        message: str,
        component: Optional[str] = None,
        missing_keys: Optional[list] = None
    ):
        self.message = message
        self.component = component
        self.missing_keys = missing_keys or []

        detailed_message = f"Configuration Error: {message}"
        if component:
            detailed_message += f" (Component: {component})"
        if missing_keys:
            detailed_message += f" (Missing Keys: {', '.join(missing_keys)})"

        super().__init__(detailed_message)


def handle_api_request(
    request_func: Callable,
    endpoint: str,
    payload: Dict[str, Any],
    headers: Dict[str, str],
    error_message: str = "API request failed",
    timeout: Optional[float] = None
) -> Any:
    """
    Make a JSON POST-style request and decode the response body.

    Args:
        request_func: Function to make the request (e.g. requests.post).
        endpoint: API endpoint.
        payload: Request payload.
        headers: Request headers.
        error_message: Prefix for the error message if the request fails.
        timeout: Transport timeout in seconds, None to wait indefinitely.

    Returns:
        The decoded JSON body.

    Raises:
        APIError: If the request fails or the body is not JSON.
    """
    response = None
    try:
        response = request_func(
            endpoint,
            json=payload,
            headers=headers,
            timeout=timeout
        )
        response.raise_for_status()

    except requests.exceptions.HTTPError as e:
        if e.response is not None:
            status_code = e.response.status_code
            response_text = e.response.text
        else:
            status_code = getattr(response, 'status_code', None)
            response_text = getattr(response, 'text', str(e))

        logger.error(f"HTTP error: {e}")
        logger.error(f"Response: {response_text}")

        raise APIError(
            message=f"{error_message}: {e}",
            status_code=status_code,
            response=response_text,
            endpoint=endpoint,
            request_data=payload
        )

    except requests.exceptions.ConnectionError as e:
        logger.error(f"Connection error: {e}")

        raise APIError(
            message=f"{error_message}: Connection error",
            endpoint=endpoint,
            request_data=payload
        )

    except requests.exceptions.Timeout as e:
        logger.error(f"Timeout error: {e}")

        raise APIError(
            message=f"{error_message}: Request timed out",
            endpoint=endpoint,
            request_data=payload
        )

    except requests.exceptions.RequestException as e:
        logger.error(f"Request error: {e}")

        raise APIError(
            message=f"{error_message}: {e}",
            endpoint=endpoint,
            request_data=payload
        )

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        logger.error(traceback.format_exc())

        raise APIError(
            message=f"{error_message}: {e}",
            endpoint=endpoint,
            request_data=payload
        )

    try:
        return response.json()
    except ValueError as e:
        logger.error(f"Failed to parse API response: {e}")
        raise APIError(
            message=f"Failed to parse API response: {e}",
            status_code=response.status_code,
            response=response.text,
            endpoint=endpoint,
            request_data=payload
        )


def validate_required_fields(
    data: Dict[str, Any],
    required_fields: list,
    component: str = "Unknown"
) -> None:
    """
    Validate that required fields are present and non-empty.

    Whitespace-only strings and empty lists count as missing.

    Args:
        data: Data to validate.
        required_fields: List of required field names.
        component: Component name for error reporting.

    Raises:
        ValidationError: If a required field is missing or empty.
    """
    missing_fields = []

    for field in required_fields:
        value = data.get(field)
        if value is None:
            missing_fields.append(field)
        elif isinstance(value, str) and not value.strip():
            missing_fields.append(field)
        elif isinstance(value, (list, tuple)) and len(value) == 0:
            missing_fields.append(field)

    if missing_fields:
        logger.debug(f"{component}: missing required fields {missing_fields}")
        raise ValidationError(
            message=f"Missing required fields: {', '.join(missing_fields)}",
            field=missing_fields[0]
        )


def log_api_error(error: APIError) -> None:
    """
    Log an API error with detailed information.

    Args:
        error: API error to log.
    """
    logger.error(f"API Error: {error.message}")

    if error.status_code:
        logger.error(f"Status Code: {error.status_code}")

    if error.endpoint:
        logger.error(f"Endpoint: {error.endpoint}")

    if error.response:
        logger.error(f"Response: {error.response}")

    if error.request_data:
        safe_request_data = error.request_data.copy()

        for key in safe_request_data:
            if "key" in key.lower() or "token" in key.lower() or "secret" in key.lower() or "password" in key.lower():
                safe_request_data[key] = "***REDACTED***"

        logger.error(f"Request Data: {safe_request_data}")
