from flask import Blueprint

from linkshortener.api.handlers import health, shorten_url, redirect_url, url_stats, list_urls


def create_blueprint() -> Blueprint:
    """Build the blueprint holding every URL shortener route.

    `/shorturls/all` is a static rule, so Werkzeug matches it before
    `/shorturls/<shortcode>`.
    """
    bp = Blueprint('linkshortener', __name__)
    bp.add_url_rule('/', endpoint='health', view_func=health.health, methods=['GET'])
    bp.add_url_rule('/shorturls', endpoint='shorten_url', view_func=shorten_url.shorten_url, methods=['POST'])
    bp.add_url_rule('/shorturls/all', endpoint='list_urls', view_func=list_urls.list_urls, methods=['GET'])
    bp.add_url_rule('/shorturls/<shortcode>', endpoint='url_stats', view_func=url_stats.url_stats, methods=['GET'])
    bp.add_url_rule('/<shortcode>', endpoint='redirect_url', view_func=redirect_url.redirect_url, methods=['GET'])
    return bp


__all__ = ['create_blueprint']
