"""
Service layer: request-independent logic behind the HTTP routes.

Each service returns a (response_data, error_message, status_code) tuple.
"""
