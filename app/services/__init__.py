"""Domain services: scraping, summarization, user history, showcase, auth."""
