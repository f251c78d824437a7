"""Run the URL shortener with Flask's built-in server

    $ PORT=5000 BASE_URL=http://localhost:5000 python -m linkshortener
"""

import logging

from linkshortener.api import create_app
from linkshortener.utils import initialize_logging


logger = logging.getLogger('linkshortener')


def main() -> None:
    initialize_logging()
    app = create_app()
    logger.info('Server running.', extra={'host': app.config['HOST'], 'port': app.config['PORT']})
    app.run(host=app.config['HOST'], port=app.config['PORT'])


if __name__ == '__main__':
    main()
