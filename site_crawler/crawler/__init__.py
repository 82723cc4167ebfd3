"""site_crawler.crawler: frontier, fetcher, link extraction and the crawl loop."""
