import os

# Keep telemetry off the captured console streams.
os.environ.setdefault("CSV_ENGINE_DISABLE_CONSOLE", "1")
