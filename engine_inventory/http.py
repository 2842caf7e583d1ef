# engine_inventory/http.py
from flask import jsonify


def api_ok(data=None, status=200, message=None, headers=None):
    payload = {"status": "success"}
    if message is not None:
        payload["message"] = message
    if data is not None:
        payload["data"] = data
    resp = jsonify(payload)
    resp.status_code = status
    if headers:
        for k, v in headers.items():
            resp.headers[k] = str(v)
    return resp


def api_error(status, code, message, details=None):
    payload = {"error": {"code": code, "message": message}}
    if details is not None:
        payload["error"]["details"] = details
    resp = jsonify(payload)
    resp.status_code = status
    return resp
