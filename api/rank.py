"""Vercel serverless function for ranking an event's participants."""

import json
import sys
from pathlib import Path
from urllib.parse import urlparse

import httpx

# Add the project root to the path so we can import judging modules
sys.path.insert(0, str(Path(__file__).parent.parent))

from judging.aggregate import RankingError  # noqa: E402
from judging.event import Event, EventError, rank_event  # noqa: E402
from judging.methods import DEFAULT_METHOD  # noqa: E402


class RequestError(Exception):
    """Error in the request that the client can fix."""
    pass


def handler(request):
    """Handle incoming requests to rank an event.

    Accepts POST with a JSON body containing either:
    - {"event": {...}}: an inline event snapshot
    - {"url": "https://..."}: a URL returning an event snapshot as JSON
    and optionally "method": "spearman" (default) or "general".

    Returns JSON with the event ranking.
    """
    # Handle CORS preflight
    if request.method == "OPTIONS":
        return create_response(
            "",
            status=204,
            headers={
                "Access-Control-Allow-Origin": "*",
                "Access-Control-Allow-Methods": "POST, OPTIONS",
                "Access-Control-Allow-Headers": "Content-Type",
            },
        )

    if request.method != "POST":
        return create_response(
            {"error": "Method not allowed. Use POST."},
            status=405,
        )

    try:
        content_type = request.headers.get("content-type", "")
        if "application/json" not in content_type:
            return create_response(
                {"error": f"Unsupported content type: {content_type}"},
                status=400,
            )

        data = json.loads(request.body.decode("utf-8"))
        if not isinstance(data, dict):
            raise RequestError("Request body must be a JSON object")

        if "event" in data:
            event_data = data["event"]
        elif data.get("url"):
            event_data = json.loads(fetch_url(data["url"]))
        else:
            return create_response(
                {"error": "Missing 'event' or 'url' in request body"},
                status=400,
            )

        event = Event.from_dict(event_data)
        method = data.get("method") or DEFAULT_METHOD
        if not isinstance(method, str):
            raise RequestError("'method' must be a string")
        ranking = rank_event(event, method)

        return create_response(ranking.to_dict())

    except (RequestError, EventError, RankingError) as e:
        return create_response(
            {"error": str(e)},
            status=400,
        )
    except json.JSONDecodeError as e:
        return create_response(
            {"error": f"Invalid JSON: {e}"},
            status=400,
        )
    except Exception as e:
        return create_response(
            {"error": f"Internal error: {e}"},
            status=500,
        )


def fetch_url(url: str) -> bytes:
    """Fetch an event snapshot from a URL and return the raw body."""
    parsed = urlparse(url)
    if parsed.scheme not in ("http", "https"):
        raise RequestError(f"Invalid URL scheme: {parsed.scheme}")

    try:
        with httpx.Client(follow_redirects=True, timeout=30.0) as client:
            response = client.get(url)
            response.raise_for_status()
            return response.content
    except httpx.HTTPStatusError as e:
        raise RequestError(f"HTTP error fetching URL: {e.response.status_code}")
    except httpx.RequestError as e:
        raise RequestError(f"Error fetching URL: {e}")


def create_response(body, status: int = 200, headers: dict = None):
    """Create a response object for Vercel."""
    response_headers = {
        "Content-Type": "application/json",
        "Access-Control-Allow-Origin": "*",
    }
    if headers:
        response_headers.update(headers)

    if isinstance(body, dict):
        body = json.dumps(body)

    return {
        "statusCode": status,
        "headers": response_headers,
        "body": body,
    }
