"""In-memory TF-IDF search engine with stop-words and minus-words."""
