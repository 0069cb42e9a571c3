import argparse
import json
import sys

from crawler.config import DEFAULT_MAX_URLS, HOST, PORT
from crawler.errors import CrawlFailed, InvalidInput
from crawler.logger import logger
from crawler.service import CrawlService


def run_crawl(url, max_urls, as_json=False, service=None):
    """One-shot crawl from the command line. Returns the process exit code."""
    service = service or CrawlService(max_workers=1)
    try:
        result = service.start_crawl(url, max_urls, wait=True)
    except InvalidInput as e:
        print(f"INPUT_ERROR: {e}", file=sys.stderr)
        return 2
    except CrawlFailed as e:
        print(f"CRAWL_FAILED: {e.message} (job {e.job_id})", file=sys.stderr)
        return 1
    finally:
        service.shutdown(wait=False)

    if as_json:
        print(json.dumps(result, indent=2))
        return 0

    print("\n==============================")
    print("CRAWL SUMMARY")
    print("==============================")
    print(f"Job:              {result['id']}")
    print(f"Site:             {result['baseUrl']}")
    print(f"Duration:         {result['duration']} seconds")
    print(f"URLs Discovered:  {result['totalDiscovered']}")
    print(f"Crawl Complete:   {result['crawlComplete']}")
    print(f"Limit Reached:    {result['limitReached']}")
    print(f"Errors:           {len(result['errors'])}")
    for entry in result['errors']:
        print(f"  - {entry['url']}: {entry['error']}")
    print("------------------------------")
    for discovered in result['discoveredUrls']:
        print(discovered)
    print("==============================\n")
    return 0


def serve(host, port):
    from app import create_app

    logger.info(f"URL Crawler server running on port {port}")
    create_app().run(host=host, port=port, threaded=True)
    return 0


def main(argv=None):
    parser = argparse.ArgumentParser(description="Same-domain URL crawler")
    sub = parser.add_subparsers(dest="command", required=True)

    serve_cmd = sub.add_parser("serve", help="Run the HTTP API")
    serve_cmd.add_argument("--host", default=HOST)
    serve_cmd.add_argument("--port", type=int, default=PORT)

    crawl_cmd = sub.add_parser("crawl", help="Crawl a site once and print the result")
    crawl_cmd.add_argument("url")
    crawl_cmd.add_argument("--max-urls", type=int, default=DEFAULT_MAX_URLS)
    crawl_cmd.add_argument("--json", action="store_true", help="Print the raw JSON payload")

    args = parser.parse_args(argv)
    if args.command == "serve":
        return serve(args.host, args.port)
    return run_crawl(args.url, args.max_urls, as_json=args.json)


if __name__ == "__main__":
    sys.exit(main())
