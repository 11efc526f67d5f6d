"""Flask server exposing host metrics in the text exposition format."""

import logging
from flask import Flask, Response, jsonify

from config import Config, ScrapeContext
from errors import ScrapeError
from collectors import collect_cpu_metrics, collect_memory_metrics, collect_disk_metrics, collect_network_metrics

# Configure logging
logging.basicConfig(
    level=getattr(logging, Config.LOG_LEVEL.upper(), logging.WARNING),
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)
logger = logging.getLogger(__name__)

EXPOSITION_CONTENT_TYPE = 'text/plain; version=0.0.4; charset=utf-8'

app = Flask(__name__)
app.config.from_object(Config)


def collect_all_metrics(context: ScrapeContext) -> str:
    """Collect every source in a fixed order and join the rendered sections.

    The order is cpu, memory, disk, network. The first collector to raise
    aborts the scrape; no partial document is returned.
    """
    logger.debug(f"Collecting metrics for mounts {context.mounts}")
    sections = [
        collect_cpu_metrics(),
        collect_memory_metrics(),
        collect_disk_metrics(context.mounts),
        collect_network_metrics(),
    ]
    return ''.join(sections)


@app.errorhandler(ScrapeError)
def handle_scrape_error(e):
    """Fail only the current scrape, reporting which source broke."""
    logger.error(f"Scrape failed: {e}")
    return Response(f'scrape failed: {e}\n', status=500, mimetype='text/plain')


# API Routes
@app.route('/metrics')
def metrics():
    """Sample all sources and return the exposition document."""
    context = ScrapeContext.parse(app.config['MOUNTS'])
    return Response(collect_all_metrics(context), content_type=EXPOSITION_CONTENT_TYPE)


@app.route('/health')
def health_check():
    """Health check endpoint."""
    return jsonify({'status': 'healthy'})


def main():
    """Run the exporter on the configured host and port."""
    logger.info(f"Serving metrics on {Config.HOST}:{Config.PORT}")
    app.run(
        host=Config.HOST,
        port=Config.PORT,
        debug=Config.DEBUG
    )


if __name__ == '__main__':
    main()
