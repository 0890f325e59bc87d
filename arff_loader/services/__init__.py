"""Services used by the CLI: orchestration, progress display, summary line."""
