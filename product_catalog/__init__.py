"""Product Catalog service."""
