"""WordCrawl - parallel depth-limited crawler reporting popular words."""
