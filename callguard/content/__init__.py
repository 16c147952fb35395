"""Plain-text content helpers: prompt diffs and transcript parsing."""
