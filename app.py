"""
Flask API for the URL crawler.
Creates crawl jobs and reports their status and results.
"""

import atexit

from flask import Flask, current_app, jsonify, request

from crawler.config import ALLOWED_ORIGINS
from crawler.errors import CrawlFailed, InvalidInput, JobNotFound, JobNotReady
from crawler.logger import setup_logger
from crawler.service import CrawlService

logger = setup_logger("crawler.api")


def create_app(service=None):
    """Build the Flask app around a CrawlService (a fresh one if not given)."""
    app = Flask(__name__)
    if service is None:
        service = CrawlService()
        atexit.register(service.shutdown, False)
    app.extensions["crawl_service"] = service

    @app.after_request
    def add_cors_headers(response):
        origin = request.headers.get("Origin")
        if "*" in ALLOWED_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = "*"
        elif origin and origin in ALLOWED_ORIGINS:
            response.headers["Access-Control-Allow-Origin"] = origin
            response.headers["Vary"] = "Origin"
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    _register_routes(app)
    return app


def _service():
    return current_app.extensions["crawl_service"]


def _register_routes(app):

    @app.route('/api/crawl', methods=['POST', 'OPTIONS'])
    def create_crawl():
        """Start a crawl; waits for completion unless "async" is true."""
        if request.method == 'OPTIONS':
            return '', 204

        body = request.get_json(silent=True) or {}
        if not isinstance(body, dict):
            body = {}
        logger.info(f"Received crawl request: {body}")

        url = body.get('url')
        if not url:
            return jsonify({"error": "URL is required"}), 400

        wait = not bool(body.get('async', False))
        try:
            result = _service().start_crawl(url, body.get('maxUrls'), wait=wait)
        except InvalidInput as e:
            logger.warning(f"Rejected crawl request: {e}")
            return jsonify({"error": str(e)}), 400
        except CrawlFailed as e:
            return jsonify({"error": e.message, "id": e.job_id, "status": "failed"}), 500

        return jsonify(result), (200 if wait else 202)

    @app.route('/api/crawl/<job_id>', methods=['GET'])
    def crawl_status(job_id):
        try:
            return jsonify(_service().get_status(job_id))
        except JobNotFound:
            return jsonify({"error": "Crawl job not found"}), 404

    @app.route('/api/crawl/<job_id>/results', methods=['GET'])
    def crawl_results(job_id):
        try:
            return jsonify(_service().get_results(job_id))
        except JobNotFound:
            return jsonify({"error": "Crawl job not found"}), 404
        except JobNotReady as e:
            return jsonify({
                "error": "Crawl not completed yet",
                "status": e.status,
                "progress": e.progress,
            }), 400

    @app.route('/api/test', methods=['GET'])
    def liveness():
        return jsonify({"message": "Crawler server is running!"})
