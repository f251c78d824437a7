from flask import jsonify


def health():
    """Report that the service is up."""
    return jsonify({'message': 'URL Shortener Microservice API', 'status': 'running'})
