"""Window geometry, autofit and window-scale resolution for the playback window."""
