"""Sample handler modules scanned by the discovery tests."""
