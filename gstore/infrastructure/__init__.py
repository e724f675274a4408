"""Infrastructure: storage backends backed by external client libraries."""
