"""Services package for content generation, content history, markdown rendering and learning analytics."""
