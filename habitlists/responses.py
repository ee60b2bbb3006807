from flask import Response, jsonify

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PATCH, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
    "Access-Control-Max-Age": "86400",  # 24 hours
}


def add_cors_headers(response):
    for k, v in CORS_HEADERS.items():
        response.headers[k] = v
    return response


def create_response(payload, status=200):
    """Every JSON response goes through here so CORS headers are always set."""
    response = jsonify(payload)
    response.status_code = status
    return add_cors_headers(response)


def success(data):
    return create_response({"success": True, "data": data})


def failure(error, status):
    return create_response({"success": False, "error": error}, status)


def options_response():
    return add_cors_headers(Response(status=204))
