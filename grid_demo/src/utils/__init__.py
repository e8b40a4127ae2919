"""Console, random source, logging and configuration helpers."""
