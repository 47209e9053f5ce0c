"""
Request pipeline: request line → reading → calculations → response.

handle_request_line() never raises. Parser failures become 400 responses,
anything else a 500 response with the same {"message": ...} body shape.
"""

import logging

from dewpoint.engine.errors import RequestParseError, MalformedRequestLine
from dewpoint.engine.request_parser import parse_request
from dewpoint.engine.variants.base import EndpointVariant
from dewpoint.models.response import HttpResponse

logger = logging.getLogger(__name__)


def success_response(body: str) -> HttpResponse:
    return HttpResponse(status_code=200, body=body)


def error_response(status_code: int, message: str) -> HttpResponse:
    # Message text goes in verbatim, no JSON escaping
    return HttpResponse(status_code=status_code, body=f'{{"message":"{message}"}}')


def handle_request_line(request_line: str, variant: EndpointVariant) -> HttpResponse:
    """Run the full pipeline for one request line."""
    try:
        reading = parse_request(request_line, variant)
        response = success_response(variant.success_body(reading))
    except RequestParseError as e:
        logger.info("Rejected %r (%s): %s", request_line, e.kind.value, e.message)
        return error_response(400, e.message)
    except MalformedRequestLine as e:
        logger.warning("Malformed request line %r", e.line)
        return error_response(500, str(e))
    except Exception as e:
        logger.exception("Failed to handle %r", request_line)
        return error_response(500, f"Calculation error: {str(e)}")

    logger.info("%r -> %d %s", request_line, response.status_code, response.body)
    return response
