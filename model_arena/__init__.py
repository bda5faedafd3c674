"""Model Arena: chat with gateway models and compare their throughput."""
